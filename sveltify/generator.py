"""Rendering of a parsed component as a Svelte file."""

from __future__ import annotations

from sveltify.models import ReactComponent


def _indented_body(body: str) -> list[str]:
    lines = (line.strip() for line in body.strip().split("\n"))
    return [f"    {line}\n" for line in lines if line]


def generate_svelte_code(component: ReactComponent, processed_jsx: str) -> str:
    """Return the Svelte source for a component and its processed markup."""
    out = ['<script lang="ts">\n']

    if component.imports:
        for imp in component.imports:
            imp = imp.replace(".jsx", ".svelte").replace(".tsx", ".svelte")
            out.append(f"  {imp}\n")
        out.append("\n")

    if component.props:
        out.append("  // Props\n")
        out.append("  type Props = {\n")
        for prop in component.props:
            optional = "?" if prop.optional else ""
            out.append(f"    {prop.name}{optional}: {prop.type};\n")
        out.append("  };\n")
        names = ", ".join(
            f"{prop.name} = {prop.default_value}" if prop.default_value else prop.name
            for prop in component.props
        )
        out.append(f"  let {{ {names} }}: Props = $props();\n\n")

    if component.states:
        out.append("  // States\n")
        for state in component.states:
            out.append(f"  let {state.name} = $state({state.initial_value});\n")
        out.append("\n")

    if component.functions:
        out.append("  // Functions\n")
        for fn in component.functions:
            prefix = "async " if fn.is_async else ""
            out.append(f"  {prefix}function {fn.name}{fn.params} {{\n")
            out.extend(_indented_body(fn.body))
            out.append("  }\n\n")

    if component.effects:
        out.append("  // Effects\n")
        for effect in component.effects:
            out.append("  $effect(() => {\n")
            out.extend(_indented_body(effect.body))
            out.append("  });\n\n")

    out.append("</script>\n\n")

    if processed_jsx:
        out.append(processed_jsx)
        out.append("\n")

    return "".join(out)
"""Extraction of imports, props, state, effects and functions from React code."""

from __future__ import annotations

import re
from collections.abc import Iterator

from sveltify.models import (
    EffectDefinition,
    FunctionDefinition,
    PropDefinition,
    ReactComponent,
    StateDefinition,
)

_IMPORT = re.compile(r"""import\s+.*?from\s+['"].*?['"]""", re.ASCII)
_NEXT_IMPORT = re.compile(r"""from\s+['"]next[/\w-]*['"]""", re.ASCII)

_PARAM_PROPS = re.compile(
    r"function\s+\w+\s*\(\s*\{\s*([^}]+)\s*\}\s*(?::\s*(\w+Props))?\s*\)", re.ASCII
)
_BODY_PROPS = re.compile(r"const\s*\{\s*([^}]+)\s*\}\s*=\s*props", re.ASCII)
_INTERFACE_PROPS = re.compile(
    r"(?:interface|type)\s+(\w+Props)\s*\{\s*([^}]+)\s*\}", re.ASCII
)
_INTERFACE_LINE = re.compile(r"(\w+)(\??):\s*([^;]+);?", re.ASCII)

_STATE = re.compile(
    r"const\s*\[\s*(\w+)\s*,\s*set\w+\s*\]\s*=\s*useState\s*\(\s*"
    r"((?:[^()]|\([^()]*\))*)\s*\)",
    re.ASCII,
)
_EFFECT = re.compile(
    r"useEffect\s*\(\s*\(\s*\)\s*=>\s*\{\s*([\s\S]*?)\s*\}\s*,\s*\[\s*([^\]]*)\s*\]\s*\)",
    re.ASCII,
)

_BRACED_BODY = r"\{((?:[^{}]|\{[^{}]*\})*)\}"
_ARROW_FUNCTION = re.compile(
    r"const\s+(\w+)\s*=\s*(async\s*)?(\([^)]*\)|\w+)\s*=>\s*" + _BRACED_BODY,
    re.ASCII,
)
_FUNCTION_DECL = re.compile(
    r"(async\s+)?function\s+(\w+)\s*(\([^)]*\))\s*" + _BRACED_BODY,
    re.ASCII,
)

_USE_STATE_LINE = re.compile(
    r"const\s*\[[^\]]+\]\s*=\s*useState\([^)]*\);\s*", re.ASCII
)
_SETTER_START = re.compile(r"set([A-Z]\w*)\s*\(", re.ASCII)
_SETTER_CALL = re.compile(r"set([A-Z]\w*)\s*\(\s*((?s:.*?))\s*\)\Z", re.ASCII)

_COMPONENT_FUNCTION = re.compile(r"(?:export\s+default\s+)?function\s+(\w+)", re.ASCII)
_COMPONENT_ARROW = re.compile(
    r"(?:export\s+)?const\s+(\w+)\s*=\s*\([^)]*\)\s*=>", re.ASCII
)


def parse_react_code(js_code: str) -> ReactComponent:
    """Build a ReactComponent from the non-JSX part of a component's source."""
    return ReactComponent(
        imports=extract_imports(js_code),
        props=extract_props(js_code),
        states=extract_states(js_code),
        effects=extract_effects(js_code),
        functions=extract_functions(js_code),
        name=extract_component_name(js_code),
    )


def extract_imports(code: str) -> list[str]:
    """Return import statements, leaving out those of React and Next."""
    imports = []
    for match in _IMPORT.finditer(code):
        text = match.group(0)
        is_react = "react" in text or "React" in text
        is_next = ("next" in text or "Next" in text) and bool(_NEXT_IMPORT.search(text))
        if not is_react and not is_next:
            imports.append(text)
    return imports


def _destructured(names: str) -> Iterator[PropDefinition]:
    for raw in names.split(","):
        prop = raw.strip()
        if not prop:
            continue
        if "=" in prop:
            name, _, default = prop.partition("=")
            yield PropDefinition(
                name=name.strip(), default_value=default.strip(), optional=True
            )
        else:
            yield PropDefinition(name=prop)


def extract_props(code: str) -> list[PropDefinition]:
    """Collect props from parameter destructuring, body destructuring and Props types."""
    props: list[PropDefinition] = []
    seen: set[str] = set()

    match = _PARAM_PROPS.search(code)
    if match:
        for prop in _destructured(match.group(1)):
            props.append(prop)
            seen.add(prop.name)

    match = _BODY_PROPS.search(code)
    if match:
        for prop in _destructured(match.group(1)):
            if prop.name not in seen:
                props.append(prop)
                seen.add(prop.name)

    match = _INTERFACE_PROPS.search(code)
    if match:
        for raw in match.group(2).split("\n"):
            line = raw.strip()
            if not line or line.startswith("//"):
                continue
            prop_match = _INTERFACE_LINE.fullmatch(line)
            if not prop_match:
                continue
            name = prop_match.group(1)
            if name not in seen:
                props.append(
                    PropDefinition(
                        name=name,
                        type=prop_match.group(3).strip(),
                        optional=prop_match.group(2) == "?",
                    )
                )
                seen.add(name)

    return props


def extract_states(code: str) -> list[StateDefinition]:
    """Return every ``useState`` declaration."""
    return [
        StateDefinition(name=m.group(1), initial_value=m.group(2))
        for m in _STATE.finditer(code)
    ]


def extract_effects(code: str) -> list[EffectDefinition]:
    """Return every ``useEffect`` hook that has a dependency list."""
    effects = []
    for match in _EFFECT.finditer(code):
        deps_text = match.group(2)
        deps = [dep.strip() for dep in deps_text.split(",")] if deps_text else []
        effects.append(EffectDefinition(body=match.group(1), dependencies=deps))
    return effects


def _function_definitions(
    matches: Iterator[tuple[str, bool, str, str]], component_name: str
) -> Iterator[FunctionDefinition]:
    for name, is_async, params, body in matches:
        if name == component_name or "useState" in body or "useEffect" in body:
            continue
        yield FunctionDefinition(
            name=name,
            is_async=is_async,
            params=params,
            body=clean_function_body(body),
        )


def extract_functions(code: str) -> list[FunctionDefinition]:
    """Return arrow functions, then declared functions, other than the component."""
    component_name = extract_component_name(code)
    arrows = (
        (
            m.group(1).strip(),
            (m.group(2) or "").strip() == "async",
            m.group(3).strip(),
            m.group(4).strip(),
        )
        for m in _ARROW_FUNCTION.finditer(code)
    )
    declarations = (
        (
            m.group(2).strip(),
            (m.group(1) or "").strip() == "async",
            m.group(3).strip(),
            m.group(4).strip(),
        )
        for m in _FUNCTION_DECL.finditer(code)
    )
    return [
        *_function_definitions(arrows, component_name),
        *_function_definitions(declarations, component_name),
    ]


def clean_function_body(body: str) -> str:
    """Drop useState lines, turn setter calls into assignments, drop blank lines."""
    body = _USE_STATE_LINE.sub("", body)
    for call in extract_setter_calls(body):
        body = body.replace(call, convert_setter_call(call), 1)
    return "\n".join(line for line in body.split("\n") if line.strip())


def convert_setter_call(call: str) -> str:
    """Turn ``setX(value)`` or ``setX((prev) => value)`` into ``x = value``."""
    match = _SETTER_CALL.match(call.strip())
    if not match:
        return call

    setter = match.group(1)
    raw_value = match.group(2).strip()
    state_var = setter[:1].lower() + setter[1:]

    if raw_value.startswith("(") and "=>" in raw_value:
        body = raw_value.split("=>", 1)[1].strip()
        if body.startswith("(") and body.endswith(")"):
            body = body[1:]
            body = body[:-1] if body.endswith(")") else body
        body = body.replace("prev", state_var)
        return f"{state_var} = {body.strip()}"

    return f"{state_var} = {raw_value}"


def extract_setter_calls(code: str) -> list[str]:
    """Return every ``setX(...)`` call whose parentheses balance."""
    calls = []
    for match in _SETTER_START.finditer(code):
        depth = 1
        end = match.end()
        while end < len(code) and depth > 0:
            char = code[end]
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
            end += 1
        if depth == 0:
            calls.append(code[match.start():end])
    return calls


def extract_component_name(code: str) -> str:
    """Return the component's name, or ``Component`` when none is found."""
    match = _COMPONENT_FUNCTION.search(code)
    if match:
        return match.group(1)
    match = _COMPONENT_ARROW.search(code)
    if match:
        return match.group(1)
    return "Component"
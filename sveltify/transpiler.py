"""Entry point turning a React component into a Svelte component."""

from __future__ import annotations

from sveltify.extract import parse_react_code
from sveltify.generator import generate_svelte_code
from sveltify.jsx import process_jsx

_RETURN_OPEN = "return ("


class TranspileError(ValueError):
    """Raised when a React component cannot be converted to Svelte."""


def separate_jsx_from_code(code: str) -> tuple[str, str]:
    """Split code into its script part and the JSX of ``return (...)``."""
    start = code.find(_RETURN_OPEN)
    if start == -1:
        return code, ""

    content_start = start + len(_RETURN_OPEN)
    depth = 1
    end = content_start
    while end < len(code) and depth > 0:
        char = code[end]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        end += 1

    if depth != 0:
        raise TranspileError("could not match the parentheses of the JSX")

    jsx = code[content_start:end - 1].strip()
    js = (code[:start] + code[end:]).strip()
    return js, jsx


class Transpiler:
    """Converts React components into Svelte components."""

    def transpile_component(self, react_code: str) -> str:
        """Return the Svelte code for a React component's code."""
        try:
            js_code, jsx = separate_jsx_from_code(react_code)
        except TranspileError as exc:
            raise TranspileError(f"error separating JSX from code: {exc}") from exc

        component = parse_react_code(js_code)
        component.jsx_content = jsx
        return generate_svelte_code(component, process_jsx(jsx))
"""Conversion of JSX markup into Svelte template syntax."""

from __future__ import annotations

import re

_JSX_COMMENT = re.compile(r"\{\s*/\*\s*(.*?)\s*\*/\s*\}", re.ASCII)
_LINE_COMMENT = re.compile(r"^\s*//.*$", re.ASCII | re.MULTILINE)
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.ASCII | re.DOTALL)

_FRAGMENT_OPEN = re.compile(r"<React\.Fragment[^>]*>")

_MAP_LOOP = re.compile(
    r"\{\s*([a-zA-Z0-9_.$]+)\.map\s*\(\s*\(?\s*([a-zA-Z0-9_]+)\s*"
    r"(?:,\s*([a-zA-Z0-9_]+))?\s*\)?\s*=>\s*\(\s*([\s\S]+?)\s*\)\s*\)\s*\}",
    re.ASCII,
)
_KEY_ATTRIBUTE = re.compile(r"key\s*=\s*\{([^}]+)\}", re.ASCII)

_TERNARY = re.compile(
    r"\{\s*([^{}?]+?)\s*\?\s*\(([\s\S]+?)\)\s*:\s*\(([\s\S]+?)\)\s*\}", re.ASCII
)
_AND_BLOCK = re.compile(r"\{\s*([^{}]+?)\s*&&\s*\(\s*([\s\S]+?)\s*\)\s*\}", re.ASCII)
_AND_INLINE = re.compile(r"\{\s*([a-zA-Z0-9_.!?]+)\s*&&\s*(<[^}]+>)\s*\}", re.ASCII)

_EVENTS = {
    "onClick": "onclick",
    "onChange": "onchange",
    "onSubmit": "onsubmit",
    "onFocus": "onfocus",
    "onBlur": "onblur",
    "onKeyDown": "onkeydown",
    "onKeyUp": "onkeyup",
    "onMouseOver": "onmouseover",
    "onMouseOut": "onmouseout",
}


def process_jsx(jsx: str) -> str:
    """Turn a JSX fragment into Svelte markup."""
    if not jsx:
        return ""
    processed = replace_comments(jsx)
    processed = processed.replace("className=", "class=")
    processed = delete_fragments(processed)
    processed = replace_events(processed)
    processed = replace_loops(processed)
    return replace_conditionals(processed)


def _if_block(condition: str, content: str) -> str:
    return f"\n{{#if {condition}}}\n{content}\n{{/if}}\n"


def _each_block(match: re.Match[str]) -> str:
    collection = match.group(1).strip()
    item = match.group(2).strip()
    index = (match.group(3) or "").strip()
    body = match.group(4).strip()

    key = ""
    key_match = _KEY_ATTRIBUTE.search(body)
    if key_match:
        key = key_match.group(1).strip()
        body = _KEY_ATTRIBUTE.sub("", body)

    index_part = f", {index}" if index else ""
    key_part = f" ({key})" if key else ""
    return f"\n{{#each {collection} as {item}{index_part}{key_part}}}\n{body}\n{{/each}}\n"


def replace_loops(jsx: str) -> str:
    """Turn ``{items.map((item) => (...))}`` into ``{#each}`` blocks."""
    return _MAP_LOOP.sub(_each_block, jsx)


def replace_conditionals(jsx: str) -> str:
    """Turn ternaries and ``&&`` expressions into ``{#if}`` blocks."""
    jsx = _TERNARY.sub(
        lambda m: (
            f"\n{{#if {m.group(1)}}}\n{m.group(2)}\n{{:else}}\n{m.group(3)}\n{{/if}}\n"
        ),
        jsx,
    )
    jsx = _AND_BLOCK.sub(
        lambda m: _if_block(m.group(1).strip(), m.group(2).strip()), jsx
    )
    return process_inline_conditionals(jsx)


def process_inline_conditionals(code: str) -> str:
    """Turn ``{cond && <Tag/>}`` without parentheses into ``{#if}`` blocks."""
    return _AND_INLINE.sub(
        lambda m: _if_block(m.group(1).strip(), m.group(2).strip()), code
    )


def replace_events(jsx: str) -> str:
    """Rename React event attributes to their lower-case DOM names."""
    for react_event, svelte_event in _EVENTS.items():
        jsx = jsx.replace(f"{react_event}=", f"{svelte_event}=")
    return jsx


def delete_fragments(jsx: str) -> str:
    """Replace React fragments with ``div`` elements."""
    processed = _FRAGMENT_OPEN.sub("<div>", jsx)
    processed = processed.replace("</React.Fragment>", "</div>")
    processed = processed.replace("<>", "<div>")
    return processed.replace("</>", "</div>")


def replace_comments(jsx: str) -> str:
    """Turn JSX comments into HTML comments and drop JavaScript comments."""
    jsx = _JSX_COMMENT.sub(lambda m: f"<!-- {m.group(1)} -->", jsx)
    jsx = _LINE_COMMENT.sub("", jsx)
    return _BLOCK_COMMENT.sub("", jsx)
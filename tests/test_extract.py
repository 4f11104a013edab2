import pytest

from sveltify.extract import (
    clean_function_body,
    convert_setter_call,
    extract_component_name,
    extract_effects,
    extract_functions,
    extract_imports,
    extract_props,
    extract_setter_calls,
    extract_states,
    parse_react_code,
)

IMPORTS = (
    'import React, { useState } from "react";\n'
    'import Button from "./Button.tsx";\n'
    'import Link from "next/link";\n'
    'import { nextTick } from "./nextUtils";\n'
)


def test_extract_imports_filters_react_and_next():
    assert extract_imports(IMPORTS) == [
        'import Button from "./Button.tsx"',
        'import { nextTick } from "./nextUtils"',
    ]


def test_extract_imports_none():
    assert extract_imports("const a = 1;") == []


def test_props_from_parameters():
    code = 'function Card({ title, subtitle = "none" }: CardProps) {\n}'
    props = extract_props(code)
    assert [p.name for p in props] == ["title", "subtitle"]
    assert props[0].optional is False
    assert props[0].type == "any"
    assert props[1].default_value == '"none"'
    assert props[1].optional is True


def test_props_from_body_destructuring_are_deduplicated():
    code = "function Card({ a }) {\n  const { a, b = 2 } = props;\n}"
    props = extract_props(code)
    assert [p.name for p in props] == ["a", "b"]
    assert props[1].default_value == "2"


def test_props_from_interface():
    code = (
        "interface CardProps {\n"
        "  title: string;\n"
        "  count?: number;\n"
        "  // comment\n"
        "}\n"
        "function Card({ title }: CardProps) {\n}"
    )
    props = extract_props(code)
    assert [p.name for p in props] == ["title", "count"]
    assert props[0].type == "any"
    assert props[1].type == "number"
    assert props[1].optional is True


def test_extract_states():
    code = (
        "const [count, setCount] = useState(0);\n"
        "const [items, setItems] = useState([]);\n"
        "const [big, setBig] = useState(Math.max(1, 2));\n"
    )
    states = extract_states(code)
    assert [(s.name, s.initial_value) for s in states] == [
        ("count", "0"),
        ("items", "[]"),
        ("big", "Math.max(1, 2)"),
    ]


def test_extract_effects():
    code = (
        "useEffect(() => {\n  document.title = title;\n}, [title, count]);\n"
        "useEffect(() => {\n  start();\n}, []);\n"
    )
    effects = extract_effects(code)
    assert len(effects) == 2
    assert effects[0].body == "document.title = title;"
    assert effects[0].dependencies == ["title", "count"]
    assert effects[1].dependencies == []


def test_extract_setter_calls_balanced_only():
    code = "setA(1); setB(f(2)); setC("
    assert extract_setter_calls(code) == ["setA(1)", "setB(f(2))"]


def test_convert_setter_call_direct():
    assert convert_setter_call("setCount(count + 1)") == "count = count + 1"


def test_convert_setter_call_with_updater():
    result = convert_setter_call("setUser((prev) => ({ ...prev, name: n }))")
    assert result == "user = { ...user, name: n }"


def test_convert_setter_call_leaves_other_calls():
    assert convert_setter_call("doThing(1)") == "doThing(1)"


def test_clean_function_body():
    body = (
        "const [x, setX] = useState(0);\n"
        "setCount(count + 1);\n"
        "\n"
        "  console.log(count);"
    )
    cleaned = clean_function_body(body)
    assert "useState" not in cleaned
    assert all(line.strip() for line in cleaned.split("\n"))
    assert cleaned.split("\n")[0] == "count = count + 1;"


SOURCE = (
    "export default function App() {\n"
    "  return null;\n"
    "}\n"
    "const increment = () => {\n"
    "  setCount(count + 1);\n"
    "};\n"
    "async function load(url) {\n"
    "  return await fetch(url);\n"
    "}\n"
)


def test_extract_functions():
    functions = extract_functions(SOURCE)
    assert [f.name for f in functions] == ["increment", "load"]
    increment, load = functions
    assert increment.is_async is False
    assert increment.params == "()"
    assert increment.body == "count = count + 1;"
    assert load.is_async is True
    assert load.params == "(url)"
    assert load.body == "return await fetch(url);"


def test_extract_functions_skips_hooks():
    code = "const Widget = () => {\n  const [a, setA] = useState(1);\n};\n"
    assert extract_functions(code) == []


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("export default function App() {}", "App"),
        ("const Card = (props) => <div/>", "Card"),
        ("let x = 1;", "Component"),
    ],
)
def test_extract_component_name(code, expected):
    assert extract_component_name(code) == expected


def test_parse_react_code():
    code = IMPORTS + SOURCE + "const [count, setCount] = useState(0);\n"
    component = parse_react_code(code)
    assert component.name == "App"
    assert len(component.imports) == 2
    assert [s.name for s in component.states] == ["count"]
    assert [f.name for f in component.functions] == ["increment", "load"]
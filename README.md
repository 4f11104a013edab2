# sveltify

sveltify turns a React function component into a Svelte 5 component that uses
`<script lang="ts">`. It works by pattern matching, not with a full JavaScript
parser. It is meant for components written in the usual style and does not
handle arbitrary JavaScript.

## What gets converted

- **Imports**:
  - An import whose text mentions `react` or `React` is dropped.
  - An import from a `next` or `next/...` module is dropped.
  - All other imports are kept, with `.jsx` and `.tsx` in them rewritten to
    `.svelte`.
- **Props**: props are collected from three places:
  - destructuring in the function parameters (`function Card({ title, size = 2 })`);
  - destructuring from `props` in the body (`const { a, b = 1 } = props`);
  - an `interface` or `type` whose name ends in `Props`.

  Destructured props get the type `any`. Props from the interface keep their
  declared type and `?`. Default values are kept. Each prop appears once, and
  the first place it is found wins. The result is a `type Props = { ... }`
  declaration and a `let { ... }: Props = $props();` line.
- **State**: `const [x, setX] = useState(v)` becomes `let x = $state(v);`.
- **Effects**: `useEffect(() => { ... }, [deps])` becomes
  `$effect(() => { ... });`. Only hooks written with a dependency list are
  recognised. The dependencies are recorded but do not appear in the output.
- **Functions**:
  - Arrow functions (`const f = (...) => { ... }`) and `function` declarations
    are carried over as `function` declarations, `async` included.
  - The component itself is skipped, and so is any function whose body uses
    `useState` or `useEffect`.
  - In the bodies, `setX(value)` becomes `x = value`.
  - Updater forms such as `setX((prev) => prev + 1)` become `x = x + 1`.
- **Markup** (the contents of `return ( ... )`):
  - `className=` becomes `class=`.
  - `onClick`, `onChange`, `onSubmit`, `onFocus`, `onBlur`, `onKeyDown`,
    `onKeyUp`, `onMouseOver` and `onMouseOut` become their lower-case names.
  - `<>`, `</>` and `<React.Fragment>` become `<div>` / `</div>`.
  - `{/* ... */}` becomes `<!-- ... -->`. Other `//` and `/* */` comments are
    removed.
  - `{items.map((item, i) => ( ... ))}` becomes `{#each items as item, i (key)}`.
    The `key={...}` attribute supplies the key and is removed from the element.
  - `{cond ? ( ... ) : ( ... )}` becomes `{#if}` / `{:else}`.
  - `{cond && ( ... )}` and `{cond && <Tag ... />}` become `{#if}`.

## Installation

```
pip install .
```

## Command line

```
sveltify [INPUT] [OUTPUT]
```

The command reads `INPUT` (default `input.tsx`) and writes the converted
component to `OUTPUT` (default `output.svelte`). If the input cannot be read,
cannot be converted, or the output cannot be written, it prints an error on
standard error and exits with status 1.

## Library use

```python
from sveltify.transpiler import Transpiler, TranspileError

source = """
export default function Counter({ start = 0 }) {
  const [count, setCount] = useState(start);

  const increment = () => {
    setCount(count + 1);
  };

  return (
    <button className="btn" onClick={increment}>{count}</button>
  );
}
"""

try:
    svelte = Transpiler().transpile_component(source)
except TranspileError as exc:
    print(f"could not convert: {exc}")
else:
    print(svelte)
```

`TranspileError`, a subclass of `ValueError`, is raised when the parentheses
after `return (` do not balance. Code without a `return (` block is treated as
script only, and the output then has no markup.

Each stage can also be used on its own:

- `sveltify.transpiler.separate_jsx_from_code(code)` returns `(script, jsx)`.
- `sveltify.extract.parse_react_code(script)` returns a
  `sveltify.models.ReactComponent`, which holds `PropDefinition`,
  `StateDefinition`, `EffectDefinition` and `FunctionDefinition` entries.
  The individual extractors are available as well: `extract_imports`,
  `extract_props`, `extract_states`, `extract_effects`, `extract_functions`,
  `extract_component_name`, `clean_function_body`, `extract_setter_calls` and
  `convert_setter_call`.
- `sveltify.jsx.process_jsx(jsx)` rewrites the markup. Its steps are also
  public: `replace_comments`, `delete_fragments`, `replace_events`,
  `replace_loops`, `replace_conditionals` and `process_inline_conditionals`.
- `sveltify.generator.generate_svelte_code(component, processed_jsx)` assembles
  the final file.

## Limitations

- Only the first `return (` in the input is taken as markup.
- Only one component per file is handled.
- Function bodies can nest braces one level deep.
- Nested `.map` calls and nested conditionals may not convert cleanly.
- There is no type inference: destructured props are typed `any`.

## Running the tests

```
pip install ".[test]"
pytest
```
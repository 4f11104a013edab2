"""Command line entry point: transpile a React file into a Svelte file."""

from __future__ import annotations

import argparse
import sys

from sveltify.transpiler import TranspileError, Transpiler


def main(argv: list[str] | None = None) -> int:
    """Read a React component, transpile it and write the Svelte result."""
    parser = argparse.ArgumentParser(
        prog="sveltify", description="Transpile a React component into Svelte."
    )
    parser.add_argument("input", nargs="?", default="input.tsx")
    parser.add_argument("output", nargs="?", default="output.svelte")
    args = parser.parse_args(argv)

    try:
        with open(args.input, encoding="utf-8") as handle:
            source = handle.read()
    except OSError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1

    try:
        svelte_code = Transpiler().transpile_component(source)
    except TranspileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(svelte_code)
    except OSError as exc:
        print(f"Error writing file: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
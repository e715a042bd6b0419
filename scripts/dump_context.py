#!/usr/bin/env python
import argparse
import logging
from pathlib import Path

from jominiscope.context import ResolveOptions, ResolvedPositionContext, lines_accessor, resolve_position
from jominiscope.typecheck import run_typecheck


def format_context(line: int, character: int, context: ResolvedPositionContext) -> str:
    path = " > ".join(context.block_path) or "-"
    return (
        f"[{line}:{character}] depth={context.depth} "
        f"mode={context.mode.name} "
        f"object_type={context.object_type} "
        f"path={path}"
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the resolved block context of a script file.")
    parser.add_argument("input", type=Path)
    parser.add_argument("--line", type=int, default=None, help="zero-based line; default prints every line")
    parser.add_argument("--character", type=int, default=None, help="zero-based character; default is end of line")
    parser.add_argument("--diagnostics", action="store_true", help="also print type-check diagnostics")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    text = args.input.read_text(encoding="utf-8-sig")
    options = ResolveOptions.for_path(str(args.input))
    line_provider, total_lines = lines_accessor(text)

    line_numbers = range(total_lines) if args.line is None else [args.line]
    for line in line_numbers:
        character = args.character if args.character is not None else len(line_provider(line))
        context = resolve_position(line_provider, total_lines, line, character, options=options)
        print(format_context(line, character, context))

    if args.diagnostics:
        result = run_typecheck(text, path=str(args.input))
        for diagnostic in result.diagnostics:
            position = result.document.line_index.position(diagnostic.range.start)
            print(f"{position.line}:{position.character} {diagnostic.severity} {diagnostic.code} {diagnostic.message}")


if __name__ == "__main__":
    main()

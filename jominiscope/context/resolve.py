"""Combined position resolution consumed by completion, hover and diagnostics."""

from __future__ import annotations

from dataclasses import dataclass

from jominiscope.context.mode import Mode
from jominiscope.context.options import ResolveOptions
from jominiscope.context.scanner import BlockFrame, LineProvider, scan_blocks
from jominiscope.context.tracker import track_scope
from jominiscope.registry import INDETERMINATE, ObjectType, ScopeRegistry


@dataclass(frozen=True, slots=True)
class ResolvedPositionContext:
    """Everything known about a cursor position without parsing the document."""

    depth: int
    block_path: tuple[str, ...]
    mode: Mode
    object_type: ObjectType
    frames: tuple[BlockFrame, ...] = ()

    @property
    def parent_block(self) -> str | None:
        return self.block_path[-1] if self.block_path else None

    @property
    def is_indeterminate(self) -> bool:
        return self.object_type == INDETERMINATE


def lines_accessor(text: str) -> tuple[LineProvider, int]:
    """Document accessor over a text snapshot: `(line provider, line count)`."""
    lines = text.split("\n")

    def line_provider(line_number: int) -> str:
        if 0 <= line_number < len(lines):
            return lines[line_number]
        return ""

    return line_provider, len(lines)


def resolve_position(
    line_provider: LineProvider,
    total_lines: int,
    line: int,
    character: int,
    *,
    options: ResolveOptions | None = None,
    registry: ScopeRegistry | None = None,
) -> ResolvedPositionContext:
    """Resolve depth, block path, mode and object type at `(line, character)`."""
    resolved_options = options if options is not None else ResolveOptions()
    scanned = scan_blocks(line_provider, total_lines, line, character)
    object_type = track_scope(
        scanned.block_path,
        resolved_options.initial_object_type,
        registry=registry,
    )
    return ResolvedPositionContext(
        depth=scanned.depth,
        block_path=scanned.block_path,
        mode=scanned.mode,
        object_type=object_type,
        frames=scanned.frames,
    )


def resolve_text_position(
    text: str,
    line: int,
    character: int,
    *,
    options: ResolveOptions | None = None,
    path: str | None = None,
    registry: ScopeRegistry | None = None,
) -> ResolvedPositionContext:
    """`resolve_position` over a whole-document string.

    `path` selects the root object type from the document's content folder;
    pass either `options` or `path`.
    """
    if options is not None and path is not None:
        raise ValueError("Pass either options or path, not both")
    if path is not None:
        options = ResolveOptions.for_path(path)
    line_provider, total_lines = lines_accessor(text)
    return resolve_position(
        line_provider,
        total_lines,
        line,
        character,
        options=options,
        registry=registry,
    )

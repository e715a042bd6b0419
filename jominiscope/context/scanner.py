"""Structural scanner: brace depth and enclosing block names up to a cursor.

The scanner never builds a tree. It walks the raw lines once, so it keeps
working on documents that are half-typed and do not parse.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
import logging
import re
from typing import TypeAlias

from jominiscope.context.classifier import classify_block
from jominiscope.context.mode import Mode

logger = logging.getLogger(__name__)

LineProvider: TypeAlias = Callable[[int], str]

_IDENTIFIER = r"[\w.:$]+"
_OPERATOR = r"\?=|>=|<=|=|>|<"
BLOCK_START_PATTERN = re.compile(rf"({_IDENTIFIER})\s*({_OPERATOR})\s*\{{")
_TRAILING_BLOCK_NAME_PATTERN = re.compile(rf"({_IDENTIFIER})\s*(?:{_OPERATOR})\s*$")


@dataclass(frozen=True, slots=True)
class BlockFrame:
    """One enclosing block below the document-level entity."""

    name: str
    operator: str
    mode: Mode
    parent_mode: Mode


@dataclass(frozen=True, slots=True)
class ScannedBlocks:
    """Brace depth and enclosing frames at the scan position (outermost first)."""

    depth: int
    frames: tuple[BlockFrame, ...]
    extra_closing_braces: int = 0

    @property
    def block_path(self) -> tuple[str, ...]:
        return tuple(frame.name for frame in self.frames)

    @property
    def mode(self) -> Mode:
        if not self.frames:
            return Mode.UNKNOWN
        return self.frames[-1].mode


@dataclass(frozen=True, slots=True)
class _BlockStart:
    name: str
    operator: str
    brace_offset: int


def scan_blocks(
    line_provider: LineProvider,
    total_lines: int,
    target_line: int,
    target_char: int,
) -> ScannedBlocks:
    """Scan from the top of the document up to `(target_line, target_char)`.

    `target_line` past the end of the document is clamped to the last line.
    On the target line only text before `target_char` is considered, so a
    comment after the cursor cannot hide structure before it.
    """
    _check_position(target_line, target_char)

    walker = _BlockWalker()
    last_line = min(target_line, total_lines - 1)

    for line_number in range(last_line + 1):
        line = line_provider(line_number)
        end_char = target_char if line_number == target_line else len(line)
        clean_line = strip_comment(line, end_char)
        block_starts = _find_block_starts(clean_line, end_char)
        walker.walk(line_number, clean_line, block_starts, 0, min(end_char, len(clean_line)))

    return walker.snapshot()


def iter_scan_points(
    line_provider: LineProvider,
    total_lines: int,
    points: Iterable[tuple[int, int]],
) -> Iterator[tuple[int, int, ScannedBlocks]]:
    """Yield `(line, character, scanned)` for every point in one forward pass.

    Each `scanned` equals `scan_blocks(..., line, character)`. `points` must be
    in document order; points past the end of the document are not yielded.
    """
    walker = _BlockWalker()
    line_number = -1
    clean_line = ""
    block_starts: list[_BlockStart] = []
    offset = 0
    previous: tuple[int, int] | None = None

    for point_line, point_char in points:
        _check_position(point_line, point_char)
        if previous is not None and (point_line, point_char) < previous:
            raise ValueError("Scan points must be in document order")
        previous = (point_line, point_char)
        if point_line >= total_lines:
            return

        while line_number < point_line:
            if line_number >= 0:
                walker.walk(line_number, clean_line, block_starts, offset, len(clean_line))
            line_number += 1
            clean_line = strip_comment(line_provider(line_number), None)
            block_starts = _find_block_starts(clean_line, len(clean_line))
            offset = 0

        stop = min(point_char, len(clean_line))
        if stop > offset:
            walker.walk(line_number, clean_line, block_starts, offset, stop)
            offset = stop
        yield point_line, point_char, walker.snapshot()


class _BlockWalker:
    """Brace depth and frame stack of one scan; never shared between calls."""

    __slots__ = ("depth", "extra_closing", "stack", "stack_depths")

    def __init__(self) -> None:
        self.stack: list[BlockFrame] = []
        self.stack_depths: list[int] = []
        self.depth = 0
        self.extra_closing = 0

    def walk(
        self,
        line_number: int,
        clean_line: str,
        block_starts: list[_BlockStart],
        start: int,
        end: int,
    ) -> None:
        starts_by_offset = {block_start.brace_offset: block_start for block_start in block_starts}
        for offset in range(start, end):
            char = clean_line[offset]
            if char == "{":
                self.depth += 1
                block_start = starts_by_offset.get(offset)
                if block_start is not None and self.depth > 1:
                    parent_mode = self.stack[-1].mode if self.stack else Mode.UNKNOWN
                    self.stack.append(
                        BlockFrame(
                            name=block_start.name,
                            operator=block_start.operator,
                            mode=classify_block(block_start.name, block_start.operator, parent_mode),
                            parent_mode=parent_mode,
                        )
                    )
                    self.stack_depths.append(self.depth)
            elif char == "}":
                if self.depth == 0:
                    self.extra_closing += 1
                    logger.debug("ignoring extra closing brace at %d:%d", line_number, offset)
                    continue
                if self.stack and self.stack_depths[-1] == self.depth and self.depth > 1:
                    self.stack.pop()
                    self.stack_depths.pop()
                self.depth -= 1

    def snapshot(self) -> ScannedBlocks:
        return ScannedBlocks(
            depth=self.depth,
            frames=tuple(self.stack),
            extra_closing_braces=self.extra_closing,
        )


def _check_position(line: int, character: int) -> None:
    if line < 0 or character < 0:
        raise ValueError("Scan position cannot be negative")


def find_immediate_parent_block(
    line_provider: LineProvider,
    target_line: int,
    target_char: int,
) -> str | None:
    """Name of the innermost unclosed block before the cursor, scanning backwards.

    Cheaper than `scan_blocks` when only the enclosing block name is needed
    (go-to-definition, hover). Returns `None` at document level.
    """
    _check_position(target_line, target_char)

    brace_depth = 0
    for line_number in range(target_line, -1, -1):
        line = line_provider(line_number)
        text = line[:target_char] if line_number == target_line else line
        clean_text = strip_comment(text, len(text))

        for offset in range(len(clean_text) - 1, -1, -1):
            char = clean_text[offset]
            if char == "}":
                brace_depth += 1
            elif char == "{":
                brace_depth -= 1
                if brace_depth >= 0:
                    continue
                match = _TRAILING_BLOCK_NAME_PATTERN.search(clean_text[:offset])
                if match is not None:
                    return match.group(1)
                if line_number > 0:
                    previous = strip_comment(line_provider(line_number - 1), None)
                    match = _TRAILING_BLOCK_NAME_PATTERN.search(previous)
                    if match is not None:
                        return match.group(1)
                brace_depth = 0
    return None


def strip_comment(line: str, end_char: int | None) -> str:
    """Drop a `#` comment, and with `end_char` everything from the cutoff on.

    A comment that starts at or after `end_char` is ignored: the text is cut at
    the cutoff anyway.
    """
    comment_index = line.find("#")
    if end_char is None:
        return line[:comment_index] if comment_index >= 0 else line
    if 0 <= comment_index < end_char:
        return line[:comment_index]
    return line[:end_char]


def _find_block_starts(clean_line: str, end_char: int) -> list[_BlockStart]:
    starts: list[_BlockStart] = []
    for match in BLOCK_START_PATTERN.finditer(clean_line):
        brace_offset = match.end() - 1
        if brace_offset < end_char:
            starts.append(_BlockStart(name=match.group(1), operator=match.group(2), brace_offset=brace_offset))
    return starts

"""Source carrier shared by type-check rules."""

from __future__ import annotations

from dataclasses import dataclass, field

from jominiscope.text import LineIndex, TextRange


@dataclass(frozen=True, slots=True)
class ScriptDocument:
    """Immutable snapshot of one script file split into lines."""

    source_text: str
    lines: tuple[str, ...] = field(init=False)
    line_index: LineIndex = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.source_text.split("\n")))
        object.__setattr__(self, "line_index", LineIndex.of(self.source_text))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line(self, line_number: int) -> str:
        if 0 <= line_number < len(self.lines):
            return self.lines[line_number]
        return ""

    def range_on_line(self, line_number: int, start: int, end: int) -> TextRange:
        return self.line_index.line_range(line_number, start, end)

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of text length / index into text."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text, represented by absolute offsets.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def new(start: TextSize, end: TextSize) -> "TextRange":
        return TextRange(start.value, end.value)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange."""
    return source[range.start.value : range.end.value]


@dataclass(frozen=True, slots=True, order=True)
class LinePosition:
    """Zero-based (line, character) position, the coordinate system editors speak."""

    line: int
    character: int

    def __post_init__(self):
        if self.line < 0 or self.character < 0:
            raise ValueError("LinePosition cannot be negative")


@dataclass(frozen=True, slots=True)
class LineIndex:
    """Offsets of every line start in a source text.

    Line breaks are `\\n`; a trailing `\\r` stays part of the line text so that
    character offsets match what the editor reports for CRLF documents.
    """

    line_starts: tuple[int, ...]
    text_len: int

    @staticmethod
    def of(text: str) -> "LineIndex":
        starts = [0]
        for offset, char in enumerate(text):
            if char == "\n":
                starts.append(offset + 1)
        return LineIndex(line_starts=tuple(starts), text_len=len(text))

    @property
    def line_count(self) -> int:
        return len(self.line_starts)

    def offset(self, position: LinePosition) -> TextSize:
        """Absolute offset for a line position, clamped to the end of that line."""
        if position.line >= self.line_count:
            return TextSize(self.text_len)
        start = self.line_starts[position.line]
        end = self._line_end(position.line)
        return TextSize(min(start + position.character, end))

    def position(self, offset: TextSize) -> LinePosition:
        clamped = min(offset.value, self.text_len)
        line = bisect_right(self.line_starts, clamped) - 1
        return LinePosition(line=line, character=clamped - self.line_starts[line])

    def line_range(self, line: int, start_character: int, end_character: int) -> TextRange:
        return TextRange.new(
            self.offset(LinePosition(line, start_character)),
            self.offset(LinePosition(line, end_character)),
        )

    def _line_end(self, line: int) -> int:
        if line + 1 < self.line_count:
            return self.line_starts[line + 1] - 1
        return self.text_len

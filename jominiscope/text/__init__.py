"""Text offsets, ranges and line/column conversion."""

from jominiscope.text.text import LineIndex, LinePosition, TextRange, TextSize, slice_text_range

__all__ = [
    "LineIndex",
    "LinePosition",
    "TextRange",
    "TextSize",
    "slice_text_range",
]

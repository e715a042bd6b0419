"""What the user is typing on the cursor line."""

from __future__ import annotations

from dataclasses import dataclass
import re

_AFTER_EQUALS_PATTERN = re.compile(r"^\s*([\w.:$]+)\s*=\s*$")
_PARTIAL_VALUE_PATTERN = re.compile(r"^\s*([\w.:$]+)\s*=\s*(\S+)$")
_PARTIAL_KEY_PATTERN = re.compile(r"(?:^|[\s{}])([\w.:$]*)$")


@dataclass(frozen=True, slots=True)
class CursorLineContext:
    """Shape of the cursor line prefix.

    - `after_equals`: the cursor sits right after `field =` (value expected).
    - `field_name`: the field on the left of `=` when a value is being typed.
    - `partial_value`: the value typed so far after `field = `.
    - `partial_key`: the identifier being typed when no `=` precedes the cursor.
    """

    after_equals: bool = False
    field_name: str | None = None
    partial_value: str | None = None
    partial_key: str = ""


def analyze_cursor_line(line_text: str, character: int) -> CursorLineContext:
    prefix = line_text[: max(character, 0)]
    comment_index = prefix.find("#")
    if comment_index >= 0:
        return CursorLineContext()

    match = _AFTER_EQUALS_PATTERN.match(prefix)
    if match is not None:
        return CursorLineContext(after_equals=True, field_name=match.group(1))

    match = _PARTIAL_VALUE_PATTERN.match(prefix)
    if match is not None and match.group(2) != "{":
        return CursorLineContext(field_name=match.group(1), partial_value=match.group(2))

    match = _PARTIAL_KEY_PATTERN.search(prefix)
    return CursorLineContext(partial_key=match.group(1) if match is not None else "")

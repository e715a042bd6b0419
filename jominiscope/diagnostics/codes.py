"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


TYPECHECK_INVALID_SCOPE_PATH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TYPECHECK_INVALID_SCOPE_PATH",
    message="Scope path contains a segment that does not change scope.",
    hint="Use a known scope changer (e.g. `liege`, `primary_title`, `holder`) or a saved `scope:` reference.",
    severity="warning",
    category="typecheck",
)

TYPECHECK_EXTRA_CLOSING_BRACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TYPECHECK_EXTRA_CLOSING_BRACE",
    message="Closing brace has no matching opening brace.",
    hint="Remove the extra `}` or add the missing block opening.",
    severity="warning",
    category="typecheck",
)

TYPECHECK_UNCLOSED_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TYPECHECK_UNCLOSED_BLOCK",
    message="Block is not closed before the end of the document.",
    hint="Add the missing `}`.",
    severity="warning",
    category="typecheck",
)

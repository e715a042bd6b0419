"""Diagnostics."""

from jominiscope.diagnostics.codes import (
    TYPECHECK_EXTRA_CLOSING_BRACE,
    TYPECHECK_INVALID_SCOPE_PATH,
    TYPECHECK_UNCLOSED_BLOCK,
    DiagnosticSpec,
)
from jominiscope.diagnostics.diagnostic import Diagnostic, Severity
from jominiscope.diagnostics.report import has_errors, sort_diagnostics

__all__ = [
    "TYPECHECK_EXTRA_CLOSING_BRACE",
    "TYPECHECK_INVALID_SCOPE_PATH",
    "TYPECHECK_UNCLOSED_BLOCK",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
    "sort_diagnostics",
]

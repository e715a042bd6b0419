"""Type-check pipeline for Jomini game-script sources."""

from jominiscope.typecheck.document import ScriptDocument
from jominiscope.typecheck.rules import (
    ScopePathRule,
    TypecheckRule,
    UnbalancedBraceRule,
    default_typecheck_rules,
    validate_typecheck_rules,
)
from jominiscope.typecheck.runner import TypecheckRunResult, run_typecheck
from jominiscope.typecheck.services import TypecheckServices

__all__ = [
    "ScopePathRule",
    "ScriptDocument",
    "TypecheckRule",
    "TypecheckRunResult",
    "TypecheckServices",
    "UnbalancedBraceRule",
    "default_typecheck_rules",
    "run_typecheck",
    "validate_typecheck_rules",
]

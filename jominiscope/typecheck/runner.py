"""Type-check runner over a script document."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging

from jominiscope.diagnostics import Diagnostic, has_errors, sort_diagnostics
from jominiscope.typecheck.document import ScriptDocument
from jominiscope.typecheck.rules import (
    TypecheckRule,
    default_typecheck_rules,
    validate_typecheck_rules,
)
from jominiscope.typecheck.services import TypecheckServices

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TypecheckRunResult:
    """Type-check output over one document."""

    document: ScriptDocument
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


def run_typecheck(
    text: str,
    *,
    services: TypecheckServices | None = None,
    rules: Sequence[TypecheckRule] | None = None,
    path: str | None = None,
) -> TypecheckRunResult:
    """Run every type-check rule over `text`.

    `path` picks the root object type from the script's content folder;
    pass either `services` or `path`.
    """
    if services is not None and path is not None:
        raise ValueError("Pass either services or path, not both")
    if services is not None:
        resolved_services = services
    elif path is not None:
        resolved_services = TypecheckServices.for_path(path)
    else:
        resolved_services = TypecheckServices()
    resolved_rules = tuple(rules) if rules is not None else default_typecheck_rules()
    validate_typecheck_rules(resolved_rules)

    document = ScriptDocument(text)
    diagnostics: list[Diagnostic] = []
    for rule in resolved_rules:
        found = rule.run(document, resolved_services)
        logger.debug("rule %s reported %d diagnostic(s)", rule.name, len(found))
        diagnostics.extend(found)

    return TypecheckRunResult(
        document=document,
        diagnostics=sort_diagnostics(diagnostics),
    )

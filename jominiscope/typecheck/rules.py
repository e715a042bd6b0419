"""Type-check rules and rule contracts."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Literal, Protocol, TypeAlias

from jominiscope.context import (
    iter_scan_points,
    looks_like_scope_path,
    strip_comment,
    track_scope,
    validate_scope_path,
)
from jominiscope.diagnostics import (
    TYPECHECK_EXTRA_CLOSING_BRACE,
    TYPECHECK_INVALID_SCOPE_PATH,
    TYPECHECK_UNCLOSED_BLOCK,
    Diagnostic,
)
from jominiscope.registry import DEFAULT_OBJECT_TYPE, INDETERMINATE
from jominiscope.typecheck.document import ScriptDocument
from jominiscope.typecheck.services import TypecheckServices

TypecheckDomain: TypeAlias = Literal["correctness"]
TypecheckConfidence: TypeAlias = Literal["sound", "heuristic"]

_STATEMENT_KEY_PATTERN = re.compile(r"(?:^|(?<=[\s{]))([\w.:$@]+)\s*(?:\?=|>=|<=|==|!=|=|>|<)")
_NUMERIC_KEY_PATTERN = re.compile(r"^-?\d+(?:\.\d+)*$")


class TypecheckRule(Protocol):
    """Type-check rule contract."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def domain(self) -> TypecheckDomain: ...

    @property
    def confidence(self) -> TypecheckConfidence: ...

    def run(self, document: ScriptDocument, services: TypecheckServices) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class ScopePathRule:
    """Flags dotted statement keys whose chain does not resolve from the enclosing scope.

    Keys at document level are entity names (event ids such as `my_events.0001`)
    and are never checked. Date keys and `$PARAM$` keys are skipped.
    """

    code: str = TYPECHECK_INVALID_SCOPE_PATH.code
    name: str = "scopePath"
    domain: TypecheckDomain = "correctness"
    confidence: TypecheckConfidence = "heuristic"

    def run(self, document: ScriptDocument, services: TypecheckServices) -> list[Diagnostic]:
        candidates: list[tuple[int, int, str]] = []
        for line_number, line in enumerate(document.lines):
            clean_line = strip_comment(line, None)
            for match in _STATEMENT_KEY_PATTERN.finditer(clean_line):
                key = match.group(1)
                if _is_checkable_scope_key(key):
                    candidates.append((line_number, match.start(1), key))

        diagnostics: list[Diagnostic] = []
        points = ((line_number, key_start) for line_number, key_start, _ in candidates)
        scans = iter_scan_points(document.line, document.line_count, points)
        for (line_number, key_start, key), (_, _, scanned) in zip(candidates, scans):
            if scanned.depth < 1:
                continue
            start_type = track_scope(
                scanned.block_path,
                services.options.initial_object_type,
                registry=services.registry,
            )
            if start_type == INDETERMINATE:
                start_type = DEFAULT_OBJECT_TYPE
            result = validate_scope_path(
                key,
                start_type,
                registry=services.registry,
                scope_changers=services.scope_changers,
            )
            if result.valid:
                continue
            diagnostics.append(
                Diagnostic(
                    code=self.code,
                    message=(
                        f"{TYPECHECK_INVALID_SCOPE_PATH.message} "
                        f"`{key}` stops at `{result.invalid_segment}`."
                    ),
                    range=document.range_on_line(line_number, key_start, key_start + len(key)),
                    severity=TYPECHECK_INVALID_SCOPE_PATH.severity,
                    hint=TYPECHECK_INVALID_SCOPE_PATH.hint,
                    category=TYPECHECK_INVALID_SCOPE_PATH.category,
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class UnbalancedBraceRule:
    """Reports closing braces without an opening brace and blocks left open at EOF."""

    code: str = TYPECHECK_EXTRA_CLOSING_BRACE.code
    name: str = "unbalancedBrace"
    domain: TypecheckDomain = "correctness"
    confidence: TypecheckConfidence = "sound"

    def run(self, document: ScriptDocument, services: TypecheckServices) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        open_braces: list[tuple[int, int]] = []
        for line_number, line in enumerate(document.lines):
            clean_line = strip_comment(line, None)
            for offset, char in enumerate(clean_line):
                if char == "{":
                    open_braces.append((line_number, offset))
                elif char == "}":
                    if open_braces:
                        open_braces.pop()
                        continue
                    diagnostics.append(
                        Diagnostic(
                            code=TYPECHECK_EXTRA_CLOSING_BRACE.code,
                            message=TYPECHECK_EXTRA_CLOSING_BRACE.message,
                            range=document.range_on_line(line_number, offset, offset + 1),
                            severity=TYPECHECK_EXTRA_CLOSING_BRACE.severity,
                            hint=TYPECHECK_EXTRA_CLOSING_BRACE.hint,
                            category=TYPECHECK_EXTRA_CLOSING_BRACE.category,
                        )
                    )
        for line_number, offset in open_braces:
            diagnostics.append(
                Diagnostic(
                    code=TYPECHECK_UNCLOSED_BLOCK.code,
                    message=TYPECHECK_UNCLOSED_BLOCK.message,
                    range=document.range_on_line(line_number, offset, offset + 1),
                    severity=TYPECHECK_UNCLOSED_BLOCK.severity,
                    hint=TYPECHECK_UNCLOSED_BLOCK.hint,
                    category=TYPECHECK_UNCLOSED_BLOCK.category,
                )
            )
        return diagnostics


def default_typecheck_rules() -> tuple[TypecheckRule, ...]:
    rules: list[TypecheckRule] = [
        ScopePathRule(),
        UnbalancedBraceRule(),
    ]
    return tuple(sorted(rules, key=lambda rule: (rule.code, rule.name)))


def validate_typecheck_rules(rules: tuple[TypecheckRule, ...]) -> None:
    seen_names: set[str] = set()
    for rule in rules:
        if rule.domain != "correctness":
            raise ValueError(
                f"Typecheck rule `{rule.name}` has invalid domain `{rule.domain}`; expected `correctness`."
            )
        if not rule.code.startswith("TYPECHECK_"):
            raise ValueError(
                f"Typecheck rule `{rule.name}` has invalid code `{rule.code}`; expected `TYPECHECK_` prefix."
            )
        if rule.name in seen_names:
            raise ValueError(f"Typecheck rule `{rule.name}` is registered more than once.")
        seen_names.add(rule.name)


def _is_checkable_scope_key(key: str) -> bool:
    if not looks_like_scope_path(key):
        return False
    if "$" in key or "@" in key:
        return False
    if ":" in key and not key.startswith("scope:"):
        return False
    return _NUMERIC_KEY_PATTERN.match(key) is None

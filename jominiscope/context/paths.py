"""Validation of dotted scope chains such as `liege.primary_title.holder`."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Mapping

from jominiscope.context.tracker import is_scope_reference, lookup_output_type
from jominiscope.registry import (
    DEFAULT_OBJECT_TYPE,
    ObjectType,
    ScopeRegistry,
    load_ck3_scope_changers,
    load_ck3_scope_registry,
)

logger = logging.getLogger(__name__)

_REFERENCE_PREFIX = "scope"


@dataclass(frozen=True, slots=True)
class ScopePathResult:
    """Outcome of replaying a scope chain.

    `final_type` is `None` whenever `valid` is false. `invalid_segment` names
    the first segment that is not a scope changer, if any.
    """

    valid: bool
    final_type: ObjectType | None
    invalid_segment: str | None = None


def split_scope_path(path: str) -> list[str]:
    """Split on dots, keeping `scope:name` as one segment.

    `scope:actor.liege.primary_title` -> `["scope:actor", "liege", "primary_title"]`
    """
    segments: list[str] = []
    current = ""
    index = 0
    while index < len(path):
        char = path[index]
        if char == ".":
            if current:
                segments.append(current)
                current = ""
        elif char == ":" and current == _REFERENCE_PREFIX:
            end = path.find(".", index)
            if end == -1:
                end = len(path)
            segments.append(current + path[index:end])
            current = ""
            index = end
            continue
        else:
            current += char
        index += 1
    if current:
        segments.append(current)
    return segments


def validate_scope_path(
    path: str,
    start_type: ObjectType,
    *,
    registry: ScopeRegistry | None = None,
    scope_changers: Mapping[str, ObjectType] | None = None,
) -> ScopePathResult:
    """Replay each segment of `path` from `start_type`.

    A saved-scope reference segment stops validation early and reports the
    chain valid with the document default type: what the reference points at
    is only known at runtime.
    """
    segments = split_scope_path(path)
    if not segments:
        return ScopePathResult(valid=False, final_type=None)

    resolved_registry = registry if registry is not None else load_ck3_scope_registry()
    resolved_changers = scope_changers if scope_changers is not None else load_ck3_scope_changers()

    current = start_type
    for segment in segments:
        if is_scope_reference(segment):
            return ScopePathResult(valid=True, final_type=DEFAULT_OBJECT_TYPE)

        known = resolved_changers.get(segment)
        if known is not None:
            current = known
            continue

        output_type = lookup_output_type(segment, resolved_registry)
        if output_type is not None:
            current = output_type
            continue

        logger.debug("scope path %r stops at unknown segment %r", path, segment)
        return ScopePathResult(valid=False, final_type=None, invalid_segment=segment)

    return ScopePathResult(valid=True, final_type=current)


def output_type_for_path(
    path: str,
    start_type: ObjectType,
    *,
    registry: ScopeRegistry | None = None,
    scope_changers: Mapping[str, ObjectType] | None = None,
) -> ObjectType | None:
    return validate_scope_path(
        path,
        start_type,
        registry=registry,
        scope_changers=scope_changers,
    ).final_type


def looks_like_scope_path(field_name: str) -> bool:
    return "." in field_name

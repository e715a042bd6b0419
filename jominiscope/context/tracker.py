"""Scope tracking over a block-name path."""

from __future__ import annotations

from collections.abc import Iterable
import re

from jominiscope.registry import (
    DEFAULT_OBJECT_TYPE,
    INDETERMINATE,
    ObjectType,
    ScopeRegistry,
    load_ck3_scope_registry,
)

_SCOPE_REFERENCE_PATTERN = re.compile(r"^scope:[A-Za-z_][A-Za-z0-9_]*$")
_NUMERIC_BLOCK_PATTERN = re.compile(r"^\d+$")


def is_scope_reference(name: str) -> bool:
    """True for saved-scope references such as `scope:actor`."""
    return _SCOPE_REFERENCE_PATTERN.match(name) is not None


def is_numeric_block(name: str) -> bool:
    """True for tier/level sub-blocks such as the `50` in `track = { 50 = { } }`."""
    return _NUMERIC_BLOCK_PATTERN.match(name) is not None


def lookup_output_type(name: str, registry: ScopeRegistry) -> ObjectType | None:
    """Output type of a scope-changing keyword, conditions first, then actions."""
    output_type = registry.condition_output_type(name)
    if output_type is not None:
        return output_type
    return registry.action_output_type(name)


def track_scope(
    block_path: Iterable[str],
    initial_object_type: ObjectType = DEFAULT_OBJECT_TYPE,
    *,
    registry: ScopeRegistry | None = None,
) -> ObjectType:
    """Object type in effect inside the innermost block of `block_path`.

    Saved-scope references make the type `INDETERMINATE` until a later known
    scope changer names a concrete type again. Names that are not scope
    changers, numeric tier blocks included, pass the current type through.
    """
    resolved_registry = registry if registry is not None else load_ck3_scope_registry()
    current = initial_object_type
    for name in block_path:
        if is_scope_reference(name):
            current = INDETERMINATE
            continue
        if is_numeric_block(name):
            continue
        output_type = lookup_output_type(name, resolved_registry)
        if output_type is not None:
            current = output_type
    return current

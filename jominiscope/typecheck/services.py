"""Service wiring for type-check rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from jominiscope.context import ResolveOptions
from jominiscope.registry import (
    ObjectType,
    ScopeRegistry,
    load_ck3_scope_changers,
    load_ck3_scope_registry,
)


@dataclass(frozen=True, slots=True)
class TypecheckServices:
    """Keyword tables and resolution options injected into type-check rules."""

    registry: ScopeRegistry = field(default_factory=load_ck3_scope_registry)
    scope_changers: Mapping[str, ObjectType] = field(default_factory=load_ck3_scope_changers)
    options: ResolveOptions = field(default_factory=ResolveOptions)

    @staticmethod
    def for_path(path: str, *, registry: ScopeRegistry | None = None) -> "TypecheckServices":
        """Services whose root object type follows the script's content folder."""
        return TypecheckServices(
            registry=registry if registry is not None else load_ck3_scope_registry(),
            options=ResolveOptions.for_path(path),
        )

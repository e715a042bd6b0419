"""Read-only keyword registry consulted by the scope tracker and path validator."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from jominiscope.registry.object_types import ANY_OBJECT_TYPE, ObjectType


@dataclass(frozen=True, slots=True)
class KeywordDefinition:
    """One condition or action keyword.

    `output_type` is set only for scope changers: iterators (`any_vassal`,
    `every_child`) and links (`liege`, `primary_title`). Its absence means the
    keyword leaves the current scope untouched.
    """

    name: str
    output_type: ObjectType | None = None
    supported_types: tuple[ObjectType, ...] = (ANY_OBJECT_TYPE,)
    description: str = ""

    @property
    def changes_scope(self) -> bool:
        return self.output_type is not None


@dataclass(frozen=True, slots=True)
class ScopeRegistry:
    """Condition and action keyword tables keyed by name.

    Both tables may define the same keyword (e.g. `liege` is a scope changer
    in condition and in action blocks). Either table may be incomplete.
    """

    condition_keywords: Mapping[str, KeywordDefinition] = field(
        default_factory=lambda: MappingProxyType({})
    )
    action_keywords: Mapping[str, KeywordDefinition] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def condition_output_type(self, name: str) -> ObjectType | None:
        definition = self.condition_keywords.get(name)
        return definition.output_type if definition is not None else None

    def action_output_type(self, name: str) -> ObjectType | None:
        definition = self.action_keywords.get(name)
        return definition.output_type if definition is not None else None

    def is_condition(self, name: str) -> bool:
        return name in self.condition_keywords

    def is_action(self, name: str) -> bool:
        return name in self.action_keywords


def build_scope_registry(
    *,
    conditions: Iterable[KeywordDefinition] = (),
    actions: Iterable[KeywordDefinition] = (),
) -> ScopeRegistry:
    """Index keyword definitions by name; later definitions win on duplicates."""
    return ScopeRegistry(
        condition_keywords=MappingProxyType({definition.name: definition for definition in conditions}),
        action_keywords=MappingProxyType({definition.name: definition for definition in actions}),
    )


def scope_changers_from_pairs(pairs: Iterable[tuple[str, ObjectType]]) -> Mapping[str, ObjectType]:
    return MappingProxyType(dict(pairs))

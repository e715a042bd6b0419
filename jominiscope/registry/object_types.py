"""Object-type vocabulary for CK3 scopes.

An object type is the kind of in-game entity a scope currently points at.
Types are plain strings so that registries built from other games can bring
their own vocabulary; the names below are the CK3 set.
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType
from typing import Final, Mapping, TypeAlias

ObjectType: TypeAlias = str

ANY_OBJECT_TYPE: Final[ObjectType] = "none"
"""Marker in `supported_types` meaning "valid in every scope"."""

INDETERMINATE: Final[ObjectType] = "indeterminate"
"""The current scope points at something that cannot be known without running the script."""

DEFAULT_OBJECT_TYPE: Final[ObjectType] = "character"
"""Root scope of character-centric documents (events, decisions, interactions)."""

CK3_OBJECT_TYPES: Final[frozenset[ObjectType]] = frozenset(
    {
        "none",
        "character",
        "landed_title",
        "province",
        "combat",
        "combat_side",
        "faith",
        "religion",
        "dynasty",
        "dynasty_house",
        "faction",
        "culture",
        "culture_group",
        "culture_pillar",
        "culture_tradition",
        "army",
        "regiment",
        "holy_order",
        "mercenary_company",
        "artifact",
        "inspiration",
        "scheme",
        "secret",
        "story",
        "war",
        "casus_belli",
        "activity",
        "activity_type",
        "travel_plan",
        "council_task",
        "great_holy_war",
        "struggle",
        "legend",
        "accolade",
        "epidemic",
        "geographical_region",
        "trait",
        "character_memory",
        "decision",
        "doctrine",
        "government_type",
        "vassal_contract",
    }
)

OBJECT_TYPE_ALIASES: Final[Mapping[str, ObjectType]] = MappingProxyType(
    {
        "title": "landed_title",
        "county": "landed_title",
        "duchy": "landed_title",
        "kingdom": "landed_title",
        "empire": "landed_title",
        "house": "dynasty_house",
        "ghw": "great_holy_war",
    }
)


def parse_object_type(raw: str) -> ObjectType:
    """Normalize a documentation scope name (`Title`, `house`) to its object type."""
    normalized = raw.strip().lower()
    return OBJECT_TYPE_ALIASES.get(normalized, normalized)


def parse_object_types(raw: str) -> tuple[ObjectType, ...]:
    """Parse a comma-separated scope list such as `character, landed_title`."""
    return tuple(parse_object_type(part) for part in raw.split(",") if part.strip())


def is_object_type_supported(current: ObjectType, supported: Iterable[ObjectType]) -> bool:
    supported_set = set(supported)
    if ANY_OBJECT_TYPE in supported_set:
        return True
    return current in supported_set

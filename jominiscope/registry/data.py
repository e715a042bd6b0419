"""Built-in CK3 keyword tables.

Only the keywords that matter for scope resolution are listed here: scope
changers (links and iterators), control flow and logical combinators. The full
trigger/effect catalogs are loaded by callers and injected as a `ScopeRegistry`.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Final, Mapping

from jominiscope.registry.object_types import INDETERMINATE, ObjectType
from jominiscope.registry.registry import KeywordDefinition, ScopeRegistry, build_scope_registry

_CHARACTER = ("character",)

# (name, output type, supported types)
_SCOPE_LINKS: Final[tuple[tuple[str, ObjectType, tuple[ObjectType, ...]], ...]] = (
    ("liege", "character", _CHARACTER),
    ("father", "character", _CHARACTER),
    ("mother", "character", _CHARACTER),
    ("primary_spouse", "character", _CHARACTER),
    ("primary_heir", "character", _CHARACTER),
    ("primary_title", "landed_title", _CHARACTER),
    ("capital_county", "landed_title", _CHARACTER),
    ("capital_province", "province", _CHARACTER),
    ("dynasty", "dynasty", _CHARACTER),
    ("house", "dynasty_house", _CHARACTER),
    ("faith", "faith", _CHARACTER),
    ("culture", "culture", _CHARACTER),
    ("holder", "character", ("landed_title",)),
    ("de_jure_liege", "landed_title", ("landed_title",)),
    ("county", "landed_title", ("province",)),
    ("root", "character", ("none",)),
)

_CONDITION_ITERATORS: Final[tuple[tuple[str, ObjectType], ...]] = (
    ("any_vassal", "character"),
    ("any_child", "character"),
    ("any_spouse", "character"),
    ("any_sibling", "character"),
    ("any_courtier", "character"),
    ("any_realm_county", "landed_title"),
    ("any_held_title", "landed_title"),
    ("any_claim", "landed_title"),
    ("any_in_list", INDETERMINATE),
    ("all_vassal", "character"),
    ("all_child", "character"),
)

_ACTION_ITERATORS: Final[tuple[tuple[str, ObjectType], ...]] = (
    ("every_vassal", "character"),
    ("random_vassal", "character"),
    ("every_child", "character"),
    ("random_child", "character"),
    ("every_spouse", "character"),
    ("every_sibling", "character"),
    ("every_courtier", "character"),
    ("every_prisoner", "character"),
    ("every_knight", "character"),
    ("every_realm_county", "landed_title"),
    ("every_held_title", "landed_title"),
    ("every_claim", "landed_title"),
    ("every_in_list", INDETERMINATE),
    ("random_in_list", INDETERMINATE),
)

_CONTROL_FLOW_ACTIONS: Final[tuple[str, ...]] = (
    "if",
    "else",
    "else_if",
    "switch",
    "while",
    "random",
    "random_list",
    "hidden_effect",
    "prev",
    "this",
)

_LOGICAL_CONDITIONS: Final[tuple[str, ...]] = (
    "NOT",
    "AND",
    "OR",
    "NOR",
    "NAND",
    "trigger_if",
    "trigger_else",
    "trigger_else_if",
    "always",
    "exists",
    "prev",
    "this",
)

KNOWN_SCOPE_CHANGERS: Final[Mapping[str, ObjectType]] = MappingProxyType(
    {
        # generic references; the concrete type depends on the surrounding script
        "root": "character",
        "prev": "character",
        "this": "character",
        "from": "character",
        # character -> character
        "liege": "character",
        "top_liege": "character",
        "host": "character",
        "employer": "character",
        "father": "character",
        "mother": "character",
        "real_father": "character",
        "primary_spouse": "character",
        "betrothed": "character",
        "primary_heir": "character",
        "player_heir": "character",
        "designated_heir": "character",
        "killer": "character",
        "imprisoner": "character",
        "warden": "character",
        "court_owner": "character",
        "involved_activity": "activity",
        # dynasty and house
        "dynasty": "dynasty",
        "house": "dynasty_house",
        "dynast": "character",
        "house_head": "character",
        # faith and culture
        "faith": "faith",
        "culture": "culture",
        "religion": "religion",
        "religious_head": "character",
        # location
        "location": "province",
        "capital_province": "province",
        "capital_county": "landed_title",
        "primary_title": "landed_title",
        "home_court": "province",
        # titles and provinces
        "holder": "character",
        "barony": "landed_title",
        "county": "landed_title",
        "duchy": "landed_title",
        "kingdom": "landed_title",
        "empire": "landed_title",
        "de_jure_liege": "landed_title",
        "title_province": "province",
        "province": "province",
        # war
        "attacker": "character",
        "defender": "character",
        "war": "war",
        "casus_belli": "casus_belli",
        # schemes, activities, stories, secrets
        "scheme_owner": "character",
        "scheme_target": "character",
        "activity_owner": "character",
        "activity_location": "province",
        "story_owner": "character",
        "secret_owner": "character",
        "secret_target": "character",
        # artifacts and combat
        "artifact": "artifact",
        "artifact_owner": "character",
        "combat_side": "combat_side",
        "enemy_side": "combat_side",
        # interaction roles
        "target": "character",
        "candidate": "character",
        "suzerain": "character",
        "diarch": "character",
    }
)


@lru_cache(maxsize=1)
def load_ck3_scope_registry() -> ScopeRegistry:
    """Default registry used when callers do not inject one."""
    conditions: list[KeywordDefinition] = [
        KeywordDefinition(name=name, supported_types=("none",), description="Logical condition")
        for name in _LOGICAL_CONDITIONS
    ]
    actions: list[KeywordDefinition] = [
        KeywordDefinition(name=name, supported_types=("none",), description="Control flow")
        for name in _CONTROL_FLOW_ACTIONS
    ]
    for name, output_type, supported in _SCOPE_LINKS:
        conditions.append(
            KeywordDefinition(
                name=name,
                output_type=output_type,
                supported_types=supported,
                description=f"Check conditions on {name.replace('_', ' ')}",
            )
        )
        actions.append(
            KeywordDefinition(
                name=name,
                output_type=output_type,
                supported_types=supported,
                description=f"Change scope to {name.replace('_', ' ')}",
            )
        )
    conditions.extend(
        KeywordDefinition(name=name, output_type=output_type, supported_types=_CHARACTER)
        for name, output_type in _CONDITION_ITERATORS
    )
    actions.extend(
        KeywordDefinition(name=name, output_type=output_type, supported_types=_CHARACTER)
        for name, output_type in _ACTION_ITERATORS
    )
    return build_scope_registry(conditions=conditions, actions=actions)


@lru_cache(maxsize=1)
def load_ck3_scope_changers() -> Mapping[str, ObjectType]:
    return KNOWN_SCOPE_CHANGERS

"""Block names with a fixed semantic mode.

`modifier` appears in both the weight and the condition sets: inside an AI
weight block it is a conditional weight adjustment, anywhere else it is a
boolean sub-condition. The classifier resolves the overlap from the parent
mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Literal, Mapping, TypeAlias

from jominiscope.context.mode import Mode

CONDITION_BLOCKS: Final[frozenset[str]] = frozenset(
    {
        "trigger",
        "is_shown",
        "is_valid",
        "is_valid_showing_failures_only",
        "ai_potential",
        "can_be_picked",
        "can_pick",
        "is_highlighted",
        "auto_accept",
        "can_send",
        "can_be_picked_artifact",
        "potential",
        "allow",
        "NOT",
        "AND",
        "OR",
        "NOR",
        "NAND",
        "trigger_if",
        "trigger_else_if",
        "trigger_else",
        # also used inside actions, always holding conditions
        "limit",
        "modifier",
    }
)

ACTION_BLOCKS: Final[frozenset[str]] = frozenset(
    {
        "immediate",
        "effect",
        "after",
        "on_accept",
        "on_decline",
        "on_send",
        "on_auto_accept",
        "option",
        "hidden_effect",
        "on_use",
        "on_expire",
        "on_invalidated",
        "on_discover",
        "on_expose",
        "on_start",
        "on_end",
        "on_monthly",
        "on_yearly",
    }
)

WEIGHT_BLOCKS: Final[frozenset[str]] = frozenset(
    {
        "ai_will_do",
        "ai_chance",
        "ai_accept",
        "ai_frequency",
        "ai_target_quick_trigger",
        "weight_multiplier",
        "cooldown",
        "modifier",
    }
)

SCRIPT_VALUE_BLOCKS: Final[frozenset[str]] = frozenset(
    {
        "chance",
        "add",
        "subtract",
        "multiply",
        "divide",
        "min",
        "max",
        "factor",
        "value",
        "compare_modifier",
        "compatibility_modifier",
    }
)

ValidIn: TypeAlias = Mode | Literal["any"]


@dataclass(frozen=True, slots=True)
class ConditionBlockParams:
    """A block that opens condition mode and additionally accepts named parameters."""

    valid_in: ValidIn
    extra_params: frozenset[str]


CONDITION_BLOCKS_WITH_PARAMS: Final[Mapping[str, ConditionBlockParams]] = MappingProxyType(
    {
        "modifier": ConditionBlockParams(
            valid_in=Mode.WEIGHT,
            extra_params=frozenset({"add", "factor", "multiply", "desc", "value"}),
        ),
        "opinion_modifier": ConditionBlockParams(
            valid_in=Mode.WEIGHT,
            extra_params=frozenset({"who", "opinion_target", "multiplier", "step", "min", "max", "desc"}),
        ),
        "ai_value_modifier": ConditionBlockParams(
            valid_in=Mode.WEIGHT,
            extra_params=frozenset(
                {"who", "ai_boldness", "ai_compassion", "ai_energy", "ai_greed", "ai_honor", "ai_rationality"}
            ),
        ),
        "calc_true_if": ConditionBlockParams(
            valid_in="any",
            extra_params=frozenset({"amount"}),
        ),
    }
)

"""Semantic modes and block-opening operators."""

from enum import StrEnum
from typing import Final


class Mode(StrEnum):
    """What a block's contents mean."""

    CONDITION = "condition"
    ACTION = "action"
    WEIGHT = "weight"
    UNKNOWN = "unknown"


class BlockOperator(StrEnum):
    """Operator between a block name and its opening brace."""

    EQUALS = "="
    SOFT_SCOPE = "?="
    GREATER = ">"
    LESS = "<"
    GREATER_EQUAL = ">="
    LESS_EQUAL = "<="


COMPARISON_OPERATORS: Final[frozenset[str]] = frozenset(
    {
        BlockOperator.GREATER,
        BlockOperator.LESS,
        BlockOperator.GREATER_EQUAL,
        BlockOperator.LESS_EQUAL,
    }
)

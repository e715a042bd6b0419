"""Per-block semantic mode classification.

The rules are ordered; the first match wins:

1. comparison operators (`>`, `<`, `>=`, `<=`) open a weight expression;
2. `?=` keeps a condition/action parent's mode, anything else is unknown;
3. weight and script-value block names (names shared with the condition set
   only when the parent is itself a weight block);
4. condition block names;
5. action block names;
6. condition blocks with extra parameters whose `valid_in` matches the parent;
7. everything else, saved-scope references (`scope:x`) included, inherits
   the parent's mode.
"""

from __future__ import annotations

from jominiscope.context.blocks import (
    ACTION_BLOCKS,
    CONDITION_BLOCKS,
    CONDITION_BLOCKS_WITH_PARAMS,
    SCRIPT_VALUE_BLOCKS,
    WEIGHT_BLOCKS,
)
from jominiscope.context.mode import COMPARISON_OPERATORS, BlockOperator, Mode

_WEIGHT_NAMES = WEIGHT_BLOCKS | SCRIPT_VALUE_BLOCKS
_OVERLOADED_NAMES = _WEIGHT_NAMES & CONDITION_BLOCKS


def classify_block(block_name: str, operator: str, parent_mode: Mode) -> Mode:
    """Mode of the block `block_name <operator> {` opened under a `parent_mode` block."""
    if operator in COMPARISON_OPERATORS:
        return Mode.WEIGHT

    if operator == BlockOperator.SOFT_SCOPE:
        if parent_mode in (Mode.CONDITION, Mode.ACTION):
            return parent_mode
        return Mode.UNKNOWN

    if block_name in _WEIGHT_NAMES:
        if block_name not in _OVERLOADED_NAMES or parent_mode == Mode.WEIGHT:
            return Mode.WEIGHT

    if block_name in CONDITION_BLOCKS:
        return Mode.CONDITION

    if block_name in ACTION_BLOCKS:
        return Mode.ACTION

    params = CONDITION_BLOCKS_WITH_PARAMS.get(block_name)
    if params is not None and (params.valid_in == "any" or params.valid_in == parent_mode):
        return Mode.CONDITION

    return parent_mode


def extra_block_parameters(block_name: str, parent_mode: Mode) -> frozenset[str]:
    """Named parameters accepted next to inline conditions inside `block_name`."""
    params = CONDITION_BLOCKS_WITH_PARAMS.get(block_name)
    if params is None:
        return frozenset()
    if params.valid_in != "any" and params.valid_in != parent_mode:
        return frozenset()
    return params.extra_params

from jominiscope.context import (
    CONDITION_BLOCKS,
    SCRIPT_VALUE_BLOCKS,
    WEIGHT_BLOCKS,
    Mode,
    classify_block,
    extra_block_parameters,
)

ALL_MODES = (Mode.CONDITION, Mode.ACTION, Mode.WEIGHT, Mode.UNKNOWN)


def test_comparison_operator_always_opens_weight_block() -> None:
    for operator in (">", "<", ">=", "<="):
        for parent_mode in ALL_MODES:
            assert classify_block("limit", operator, parent_mode) == Mode.WEIGHT
            assert classify_block("immediate", operator, parent_mode) == Mode.WEIGHT


def test_soft_scope_operator_keeps_condition_or_action_parent() -> None:
    assert classify_block("primary_title", "?=", Mode.CONDITION) == Mode.CONDITION
    assert classify_block("primary_title", "?=", Mode.ACTION) == Mode.ACTION
    assert classify_block("primary_title", "?=", Mode.WEIGHT) == Mode.UNKNOWN
    assert classify_block("primary_title", "?=", Mode.UNKNOWN) == Mode.UNKNOWN


def test_soft_scope_operator_wins_over_block_name() -> None:
    assert classify_block("limit", "?=", Mode.ACTION) == Mode.ACTION
    assert classify_block("ai_will_do", "?=", Mode.WEIGHT) == Mode.UNKNOWN


def test_modifier_mode_depends_only_on_weight_parent() -> None:
    assert "modifier" in WEIGHT_BLOCKS
    assert "modifier" in CONDITION_BLOCKS

    for parent_mode in ALL_MODES:
        expected = Mode.WEIGHT if parent_mode == Mode.WEIGHT else Mode.CONDITION
        assert classify_block("modifier", "=", parent_mode) == expected


def test_weight_and_script_value_names_open_weight_blocks() -> None:
    assert classify_block("ai_will_do", "=", Mode.UNKNOWN) == Mode.WEIGHT
    assert classify_block("ai_chance", "=", Mode.ACTION) == Mode.WEIGHT
    for name in SCRIPT_VALUE_BLOCKS:
        assert classify_block(name, "=", Mode.CONDITION) == Mode.WEIGHT


def test_condition_and_action_names() -> None:
    assert classify_block("trigger", "=", Mode.UNKNOWN) == Mode.CONDITION
    assert classify_block("limit", "=", Mode.ACTION) == Mode.CONDITION
    assert classify_block("NOT", "=", Mode.WEIGHT) == Mode.CONDITION
    assert classify_block("immediate", "=", Mode.UNKNOWN) == Mode.ACTION
    assert classify_block("option", "=", Mode.CONDITION) == Mode.ACTION


def test_parameterized_condition_blocks_follow_declared_context() -> None:
    assert classify_block("opinion_modifier", "=", Mode.WEIGHT) == Mode.CONDITION
    assert classify_block("opinion_modifier", "=", Mode.ACTION) == Mode.ACTION
    assert classify_block("calc_true_if", "=", Mode.ACTION) == Mode.CONDITION
    assert classify_block("calc_true_if", "=", Mode.UNKNOWN) == Mode.CONDITION


def test_unknown_and_reference_names_inherit_parent_mode() -> None:
    for parent_mode in ALL_MODES:
        assert classify_block("scope:actor", "=", parent_mode) == parent_mode
        assert classify_block("liege", "=", parent_mode) == parent_mode
        assert classify_block("50", "=", parent_mode) == parent_mode


def test_extra_block_parameters() -> None:
    assert "who" in extra_block_parameters("opinion_modifier", Mode.WEIGHT)
    assert extra_block_parameters("opinion_modifier", Mode.CONDITION) == frozenset()
    assert extra_block_parameters("calc_true_if", Mode.ACTION) == frozenset({"amount"})
    assert extra_block_parameters("limit", Mode.CONDITION) == frozenset()

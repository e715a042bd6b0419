from jominiscope.context import (
    Mode,
    classify_block,
    is_numeric_block,
    is_scope_reference,
    lookup_output_type,
    track_scope,
)
from jominiscope.registry import (
    DEFAULT_OBJECT_TYPE,
    INDETERMINATE,
    KeywordDefinition,
    build_scope_registry,
    load_ck3_scope_registry,
)

FAKE_REGISTRY = build_scope_registry(
    conditions=(
        KeywordDefinition(name="trigger"),
        KeywordDefinition(name="limit"),
        KeywordDefinition(name="any_neighbor", output_type="place"),
        KeywordDefinition(name="50", output_type="place"),
    ),
    actions=(
        KeywordDefinition(name="every_member", output_type="person"),
        KeywordDefinition(name="any_neighbor", output_type="group"),
    ),
)


def test_condition_path_without_scope_changers_keeps_object_type() -> None:
    block_path = ("trigger", "limit")

    parent_mode = Mode.UNKNOWN
    for name in block_path:
        parent_mode = classify_block(name, "=", parent_mode)

    assert parent_mode == Mode.CONDITION
    assert track_scope(block_path, "person", registry=FAKE_REGISTRY) == "person"


def test_track_scope_follows_scope_changers() -> None:
    assert track_scope(("trigger", "any_neighbor"), "person", registry=FAKE_REGISTRY) == "place"
    assert track_scope(("any_neighbor", "every_member"), "person", registry=FAKE_REGISTRY) == "person"


def test_track_scope_prefers_condition_output_type() -> None:
    assert lookup_output_type("any_neighbor", FAKE_REGISTRY) == "place"
    assert lookup_output_type("every_member", FAKE_REGISTRY) == "person"
    assert lookup_output_type("limit", FAKE_REGISTRY) is None


def test_track_scope_reference_is_indeterminate_until_next_changer() -> None:
    assert track_scope(("scope:target",), "person", registry=FAKE_REGISTRY) == INDETERMINATE
    assert track_scope(("scope:target", "limit"), "person", registry=FAKE_REGISTRY) == INDETERMINATE
    assert track_scope(("scope:target", "any_neighbor"), "person", registry=FAKE_REGISTRY) == "place"


def test_track_scope_skips_numeric_blocks() -> None:
    assert track_scope(("trigger", "50"), "person", registry=FAKE_REGISTRY) == "person"


def test_track_scope_passes_through_with_empty_registry() -> None:
    registry = build_scope_registry()

    assert track_scope(("liege", "primary_title", "holder"), "person", registry=registry) == "person"
    assert track_scope((), "person", registry=registry) == "person"


def test_track_scope_uses_builtin_registry_by_default() -> None:
    assert track_scope(("immediate", "primary_title")) == "landed_title"
    assert track_scope(("immediate", "primary_title", "holder")) == "character"
    assert track_scope(("every_in_list",)) == INDETERMINATE
    assert track_scope(("trigger", "AND", "NOT")) == DEFAULT_OBJECT_TYPE
    assert load_ck3_scope_registry() is load_ck3_scope_registry()


def test_reference_and_numeric_name_shapes() -> None:
    assert is_scope_reference("scope:actor")
    assert not is_scope_reference("scope:")
    assert not is_scope_reference("scope:actor.liege")
    assert not is_scope_reference("title:k_france")
    assert is_numeric_block("50")
    assert not is_numeric_block("1066.1.1")
    assert not is_numeric_block("tier_50")

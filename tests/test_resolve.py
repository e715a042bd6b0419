from jominiscope.context import (
    Mode,
    ResolveOptions,
    lines_accessor,
    resolve_position,
    resolve_text_position,
)
from jominiscope.registry import DEFAULT_OBJECT_TYPE, INDETERMINATE, build_scope_registry
from tests._shared_cases import CHARACTER_EVENT

EVENT_LINES = CHARACTER_EVENT.lines


def test_resolve_inside_condition_scope_changer() -> None:
    context = resolve_text_position(CHARACTER_EVENT.source, 4, len(EVENT_LINES[4]))

    assert context.depth == 3
    assert context.block_path == ("trigger", "liege")
    assert context.parent_block == "liege"
    assert context.mode == Mode.CONDITION
    assert context.object_type == "character"


def test_resolve_follows_scope_chain_through_action_blocks() -> None:
    title_context = resolve_text_position(CHARACTER_EVENT.source, 8, len(EVENT_LINES[8]))
    holder_context = resolve_text_position(CHARACTER_EVENT.source, 10, 0)

    assert title_context.block_path == ("immediate", "primary_title")
    assert title_context.object_type == "landed_title"
    assert holder_context.block_path == ("immediate", "primary_title", "holder")
    assert holder_context.depth == 4
    assert holder_context.mode == Mode.ACTION
    assert holder_context.object_type == "character"


def test_resolve_modifier_inside_ai_weight_block() -> None:
    context = resolve_text_position(CHARACTER_EVENT.source, 17, 0)

    assert context.block_path == ("option", "ai_chance", "modifier")
    assert [frame.mode for frame in context.frames] == [Mode.ACTION, Mode.WEIGHT, Mode.WEIGHT]
    assert context.mode == Mode.WEIGHT


def test_resolve_at_document_level_block() -> None:
    top = resolve_text_position(CHARACTER_EVENT.source, 1, 0)
    after = resolve_text_position(CHARACTER_EVENT.source, 21, 1)

    assert top.depth == 1
    assert top.block_path == ()
    assert top.parent_block is None
    assert top.mode == Mode.UNKNOWN
    assert top.object_type == DEFAULT_OBJECT_TYPE
    assert after.depth == 0


def test_resolve_is_idempotent() -> None:
    line_provider, total_lines = lines_accessor(CHARACTER_EVENT.source)

    first = resolve_position(line_provider, total_lines, 10, 0)
    second = resolve_position(line_provider, total_lines, 10, 0)

    assert first == second


def test_resolve_reference_block_is_indeterminate() -> None:
    source = "event = {\n\timmediate = {\n\t\tscope:target = {\n\t\t\t\n"

    context = resolve_text_position(source, 3, 3)

    assert context.is_indeterminate
    assert context.object_type == INDETERMINATE
    assert context.mode == Mode.ACTION


def test_resolve_uses_injected_registry_and_options() -> None:
    source = "event = {\n\ttrigger = {\n\t\tliege = {\n\t\t\t\n"
    options = ResolveOptions(initial_object_type="person")

    context = resolve_text_position(source, 3, 3, options=options, registry=build_scope_registry())

    assert context.object_type == "person"


def test_resolve_root_object_type_from_script_path() -> None:
    source = "k_france = {\n\tai_primary_priority = {\n\t\t\n"

    context = resolve_text_position(source, 2, 2, path="mod/common/landed_titles/00_landed_titles.txt")

    assert context.object_type == "landed_title"


def test_resolve_rejects_options_with_path() -> None:
    try:
        resolve_text_position("a = { }\n", 0, 0, options=ResolveOptions(), path="common/culture/x.txt")
    except ValueError as exc:
        assert "Pass either options or path, not both" in str(exc)
    else:
        raise AssertionError("Expected ValueError when passing options and path together")


def test_resolve_options_for_path() -> None:
    assert ResolveOptions.for_path("common/religion/religions/00_christianity.txt").initial_object_type == "faith"
    assert ResolveOptions.for_path("C:\\Mods\\My Mod\\common\\culture\\cultures\\x.txt").initial_object_type == (
        "culture"
    )
    assert ResolveOptions.for_path("common/dynasty_houses/houses.txt").initial_object_type == "dynasty_house"
    assert ResolveOptions.for_path("events/my_events.txt") == ResolveOptions()


def test_lines_accessor_returns_empty_text_out_of_range() -> None:
    line_provider, total_lines = lines_accessor("a = 1\nb = 2")

    assert total_lines == 2
    assert line_provider(1) == "b = 2"
    assert line_provider(2) == ""
    assert line_provider(-1) == ""

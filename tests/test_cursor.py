from jominiscope.context import CursorLineContext, analyze_cursor_line


def test_cursor_directly_after_equals() -> None:
    context = analyze_cursor_line("    culture = ", 14)

    assert context == CursorLineContext(after_equals=True, field_name="culture")


def test_cursor_while_typing_value() -> None:
    context = analyze_cursor_line("    culture = fre", 17)

    assert context.after_equals is False
    assert context.field_name == "culture"
    assert context.partial_value == "fre"


def test_cursor_while_typing_key() -> None:
    assert analyze_cursor_line("    has_tra", 11).partial_key == "has_tra"
    assert analyze_cursor_line("trigger = { is_ad", 17).partial_key == "is_ad"


def test_cursor_after_block_opening_expects_key() -> None:
    context = analyze_cursor_line("    limit = {", 13)

    assert context.after_equals is False
    assert context.partial_value is None
    assert context.partial_key == ""


def test_cursor_inside_comment_has_no_context() -> None:
    assert analyze_cursor_line("    # culture = ", 16) == CursorLineContext()


def test_cursor_only_sees_text_before_character() -> None:
    context = analyze_cursor_line("    culture = french", 14)

    assert context.after_equals is True

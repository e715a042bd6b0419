from jominiscope.text import LineIndex, LinePosition, TextRange, TextSize, slice_text_range


def test_line_index_offsets_and_positions() -> None:
    text = "a = {\n\tb = c\n}\n"
    index = LineIndex.of(text)

    assert index.line_count == 4
    assert index.offset(LinePosition(1, 1)) == TextSize(7)
    assert index.position(TextSize(7)) == LinePosition(1, 1)
    assert index.position(TextSize(100)) == LinePosition(3, 0)


def test_line_index_clamps_character_to_line_end() -> None:
    index = LineIndex.of("ab\ncd")

    assert index.offset(LinePosition(0, 10)) == TextSize(2)
    assert index.offset(LinePosition(5, 0)) == TextSize(5)


def test_line_range_slices_source() -> None:
    text = "a = {\n\tliege.holder = yes\n}\n"
    index = LineIndex.of(text)

    text_range = index.line_range(1, 1, 13)

    assert slice_text_range(text, text_range) == "liege.holder"
    assert text_range == TextRange(7, 19)


def test_text_positions_reject_negative_values() -> None:
    for build in (lambda: TextSize(-1), lambda: TextRange(3, 1), lambda: LinePosition(0, -1)):
        try:
            build()
        except ValueError:
            pass
        else:
            raise AssertionError("Expected ValueError for invalid text position")


def test_text_and_diagnostics_public_names() -> None:
    import jominiscope.diagnostics as diagnostics
    import jominiscope.text as text

    assert sorted(text.__all__) == ["LineIndex", "LinePosition", "TextRange", "TextSize", "slice_text_range"]
    assert "collect_diagnostics" not in diagnostics.__all__
    assert not hasattr(TextRange, "contains")

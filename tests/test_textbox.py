import pytest

from runerpg.textbox import GlyphPlacement, layout_text


def _visible(placements):
    return [p for p in placements if p.visible]


def test_single_line_fits_and_advances_evenly():
    result = layout_text("abc", width=100, height=100, glyph_width=10, base_size=10)
    assert [p.char for p in result] == ["a", "b", "c"]
    assert [p.x for p in result] == [0, 10, 20]
    assert all(p.y == 0 for p in result)


def test_word_wrap_breaks_at_blank():
    result = layout_text("aa bb", width=35, height=100, glyph_width=10, base_size=10)
    visible = _visible(result)
    assert [p.char for p in visible] == ["a", "a", "b", "b"]
    first_line = visible[:2]
    second_line = visible[2:]
    assert all(p.y == 0 for p in first_line)
    assert all(p.y == second_line[0].y for p in second_line)
    assert second_line[0].y > 0
    assert [p.x for p in second_line] == [0, 10]


def test_line_height_is_one_and_a_half_base_sizes():
    result = layout_text("aa bb", width=35, height=100, glyph_width=10, base_size=10)
    assert _visible(result)[-1].y == 15


def test_word_wrap_keeps_lines_inside_width():
    result = layout_text("aa bb", width=35, height=100, glyph_width=10, base_size=10)
    assert all(p.x + p.width <= 35 for p in _visible(result))


def test_blank_is_placed_but_not_visible():
    result = layout_text("aa bb", width=35, height=100, glyph_width=10, base_size=10)
    blanks = [p for p in result if p.char == " "]
    assert len(blanks) == 1
    assert blanks[0].visible is False


def test_selection_indices_follow_characters():
    result = layout_text(
        "aa bb", width=35, height=100, glyph_width=10, base_size=10,
        select_start=3, select_length=2,
    )
    assert [p.index for p in result] == [0, 1, 2, 3, 4]
    assert [p.selected for p in result] == [False, False, False, True, True]


def test_no_selection_by_default():
    result = layout_text("abc", width=100, height=100, glyph_width=10, base_size=10)
    assert not any(p.selected for p in result)


def test_without_wrap_breaks_at_overflowing_character():
    result = layout_text(
        "abcd", width=25, height=100, glyph_width=10, base_size=10, word_wrap=False
    )
    assert [p.char for p in result] == ["a", "b", "c", "d"]
    assert result[0].y == result[1].y == 0
    assert result[2].y == result[3].y > 0
    assert result[2].x == 0
    assert result[3].x == 10


def test_height_limit_stops_layout():
    result = layout_text(
        "abcd", width=25, height=20, glyph_width=10, base_size=10, word_wrap=False
    )
    assert [p.char for p in result] == ["a", "b"]


def test_newline_without_wrap_starts_new_line():
    result = layout_text(
        "a\nb", width=100, height=100, glyph_width=10, base_size=10, word_wrap=False
    )
    assert [p.char for p in result] == ["a", "b"]
    assert result[1].x == 0
    assert result[1].y > result[0].y


def test_newline_with_wrap_starts_new_line():
    result = layout_text("a\nb", width=100, height=100, glyph_width=10, base_size=10)
    assert [p.char for p in result] == ["a", "b"]
    assert result[1].x == 0
    assert result[1].y > result[0].y


def test_spacing_added_except_after_last_character():
    result = layout_text(
        "ab", width=100, height=100, glyph_width=10, base_size=10, spacing=2
    )
    assert result[0].width == 12
    assert result[1].width == 10
    assert result[1].x == 12


def test_font_size_scales_glyphs():
    result = layout_text(
        "ab", width=100, height=100, glyph_width=10, base_size=10, font_size=20
    )
    assert result[0].width == 20
    assert result[1].x == 20
    assert result[0].height == 20


def test_callable_glyph_width():
    widths = {"i": 4, "m": 12}
    result = layout_text(
        "imi", width=100, height=100, glyph_width=widths.__getitem__, base_size=10
    )
    assert [p.width for p in result] == [4, 12, 4]
    assert [p.x for p in result] == [0, 4, 16]


def test_too_narrow_box_still_terminates():
    result = layout_text("abc", width=5, height=100, glyph_width=10, base_size=10)
    assert [p.char for p in result] == ["a", "b", "c"]


def test_empty_text_places_nothing():
    assert layout_text("", width=10, height=10) == []


def test_rejects_non_positive_base_size():
    with pytest.raises(ValueError):
        layout_text("a", width=10, height=10, base_size=0)


def test_placement_visible_property():
    glyph = GlyphPlacement("x", 0, 0.0, 0.0, 1.0, 1.0, False)
    tab = GlyphPlacement("\t", 0, 0.0, 0.0, 1.0, 1.0, False)
    assert glyph.visible is True
    assert tab.visible is False
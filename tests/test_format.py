import pytest

from gridfmt.format import Format, merge
from gridfmt.styles import Color, FontAlign, FontStyle


def test_new_format_has_nothing_set():
    s = Format().settings
    assert s.width is None
    assert s.font_style is None
    assert s.border_top is None


def test_setters_chain_and_return_same_object():
    fmt = Format()
    result = fmt.width(20).height(3).font_align(FontAlign.CENTER)
    assert result is fmt
    assert fmt.settings.width == 20
    assert fmt.settings.height == 3
    assert fmt.settings.font_align is FontAlign.CENTER


def test_padding_sets_all_sides():
    fmt = Format().padding(0)
    s = fmt.settings
    assert (s.padding_left, s.padding_right, s.padding_top, s.padding_bottom) == (0, 0, 0, 0)


def test_single_padding_sides():
    fmt = Format().padding_top(1).padding_bottom(2).padding_left(3).padding_right(4)
    s = fmt.settings
    assert (s.padding_top, s.padding_bottom, s.padding_left, s.padding_right) == (1, 2, 3, 4)


@pytest.mark.parametrize("method", ["width", "height", "padding", "padding_left"])
def test_negative_sizes_rejected(method):
    with pytest.raises(ValueError):
        getattr(Format(), method)(-1)


def test_border_sets_all_four_sides():
    s = Format().border(" ").settings
    assert [s.border_top, s.border_bottom, s.border_left, s.border_right] == [" "] * 4


def test_border_colors():
    s = Format().border_color(Color.YELLOW).border_background_color(Color.BLUE).settings
    assert s.border_left_color is Color.YELLOW
    assert s.border_bottom_color is Color.YELLOW
    assert s.border_top_background_color is Color.BLUE
    assert s.border_right_background_color is Color.BLUE


def test_single_border_setters():
    s = (
        Format()
        .border_left("ᚿ")
        .border_right("ᛆ")
        .border_left_color(Color.YELLOW)
        .border_right_color(Color.GREEN)
        .settings
    )
    assert s.border_left == "ᚿ"
    assert s.border_right == "ᛆ"
    assert s.border_left_color is Color.YELLOW
    assert s.border_right_color is Color.GREEN
    assert s.border_top is None


def test_hide_and_show_borders():
    fmt = Format().hide_border()
    s = fmt.settings
    assert [s.show_border_top, s.show_border_bottom, s.show_border_left, s.show_border_right] == [
        False
    ] * 4
    fmt.show_border_left()
    assert s.show_border_left is True
    assert s.show_border_right is False
    fmt.show_border()
    assert all([s.show_border_top, s.show_border_bottom, s.show_border_left, s.show_border_right])
    fmt.hide_border_top()
    assert s.show_border_top is False
    assert s.show_border_bottom is True


def test_corner_sets_all_corners():
    s = Format().corner("♥").corner_color(Color.MAGENTA).settings
    assert [s.corner_top_left, s.corner_top_right, s.corner_bottom_left, s.corner_bottom_right] == [
        "♥"
    ] * 4
    assert s.corner_bottom_right_color is Color.MAGENTA
    assert s.corner_top_left_color is Color.MAGENTA


def test_individual_corners():
    s = (
        Format()
        .corner_top_left("ᛰ")
        .corner_top_right("ᛯ")
        .corner_bottom_left("ᛮ")
        .corner_bottom_right("ᛸ")
        .corner_top_left_color(Color.CYAN)
        .corner_bottom_right_background_color(Color.RED)
        .settings
    )
    assert (s.corner_top_left, s.corner_top_right) == ("ᛰ", "ᛯ")
    assert (s.corner_bottom_left, s.corner_bottom_right) == ("ᛮ", "ᛸ")
    assert s.corner_top_left_color is Color.CYAN
    assert s.corner_bottom_right_background_color is Color.RED
    assert s.corner_top_right_color is None


def test_color_sets_font_border_and_corner_but_not_separator():
    s = Format().color(Color.GREEN).settings
    assert s.font_color is Color.GREEN
    assert s.border_top_color is Color.GREEN
    assert s.corner_bottom_left_color is Color.GREEN
    assert s.column_separator_color is None


def test_background_color_sets_all_backgrounds():
    s = Format().background_color(Color.RED).settings
    assert s.font_background_color is Color.RED
    assert s.border_left_background_color is Color.RED
    assert s.corner_top_right_background_color is Color.RED
    assert s.font_color is None


def test_column_separator():
    s = Format().column_separator(":").column_separator_color(Color.GREEN).settings
    assert s.column_separator == ":"
    assert s.column_separator_color is Color.GREEN


def test_font_style_accumulates():
    fmt = Format().font_style([FontStyle.BOLD])
    fmt.font_style([FontStyle.ITALIC, FontStyle.UNDERLINE])
    assert fmt.settings.font_style == [FontStyle.BOLD, FontStyle.ITALIC, FontStyle.UNDERLINE]


def test_font_style_does_not_keep_caller_list():
    styles = [FontStyle.BOLD]
    fmt = Format().font_style(styles)
    fmt.font_style([FontStyle.DARK])
    assert styles == [FontStyle.BOLD]


def test_locale_and_multi_byte():
    s = Format().multi_byte_characters(True).locale("C").settings
    assert s.multi_byte_characters is True
    assert s.locale == "C"


def test_set_defaults():
    s = Format().set_defaults().settings
    assert s.width is None and s.height is None
    assert s.font_align is FontAlign.LEFT
    assert s.font_style == []
    assert (s.padding_left, s.padding_right, s.padding_top, s.padding_bottom) == (1, 1, 0, 0)
    assert (s.border_top, s.border_bottom) == ("-", "-")
    assert (s.border_left, s.border_right) == ("|", "|")
    assert s.corner_top_left == "+" and s.corner_bottom_right == "+"
    assert s.column_separator == "|"
    assert s.show_border_top is True
    assert s.border_top_color is Color.NONE
    assert s.corner_bottom_left_background_color is Color.NONE
    assert s.multi_byte_characters is False
    assert s.locale == ""


def test_merge_first_takes_precedence():
    first = Format().width(10).font_color(Color.RED)
    second = Format().width(30).font_color(Color.BLUE).height(2)
    result = merge(first, second)
    assert result.settings.width == 10
    assert result.settings.font_color is Color.RED
    assert result.settings.height == 2


def test_merge_with_defaults_fills_everything_but_size():
    cell = Format().padding_top(1)
    table = Format().set_defaults()
    result = merge(cell, table).settings
    assert result.padding_top == 1
    assert result.padding_bottom == 0
    assert result.border_left == "|"
    assert result.width is None


def test_merge_font_styles_union_sorted():
    first = Format().font_style([FontStyle.UNDERLINE, FontStyle.BOLD])
    second = Format().font_style([FontStyle.BOLD, FontStyle.ITALIC])
    result = merge(first, second)
    assert result.settings.font_style == [FontStyle.BOLD, FontStyle.ITALIC, FontStyle.UNDERLINE]


def test_merge_font_style_from_second_when_first_unset():
    second = Format().font_style([FontStyle.ITALIC])
    result = merge(Format(), second)
    assert result.settings.font_style == [FontStyle.ITALIC]
    result.font_style([FontStyle.BOLD])
    assert second.settings.font_style == [FontStyle.ITALIC]


def test_merge_font_style_with_unset_second():
    result = merge(Format().font_style([FontStyle.BLINK]), Format())
    assert result.settings.font_style == [FontStyle.BLINK]


def test_merge_does_not_change_inputs():
    first = Format().font_style([FontStyle.BOLD])
    second = Format().set_defaults()
    before_first, before_second = repr(first), repr(second)
    merge(first, second)
    assert repr(first) == before_first
    assert repr(second) == before_second


def test_merge_with_itself_is_identity():
    fmt = Format().set_defaults().width(5).font_style([FontStyle.DARK, FontStyle.BOLD])
    result = merge(fmt, fmt)
    assert result.settings.width == 5
    assert result.settings.font_style == [FontStyle.BOLD, FontStyle.DARK]
    assert result.settings.border_top == fmt.settings.border_top


def test_equality_compares_settings():
    assert Format().width(3).corner("+") == Format().corner("+").width(3)
    assert not (Format().width(3) == Format().width(4))
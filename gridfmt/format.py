"""Cell, row, column and table formatting settings."""

from dataclasses import dataclass, field, fields, replace

from gridfmt.styles import Color, FontAlign, FontStyle

__all__ = ["Format", "merge"]


@dataclass
class _Settings:
    """Every formatting attribute; ``None`` means "not set at this level"."""

    width: int | None = None
    height: int | None = None

    font_align: FontAlign | None = None
    font_style: list[FontStyle] | None = None
    font_color: Color | None = None
    font_background_color: Color | None = None

    padding_left: int | None = None
    padding_top: int | None = None
    padding_right: int | None = None
    padding_bottom: int | None = None

    show_border_top: bool | None = None
    border_top: str | None = None
    border_top_color: Color | None = None
    border_top_background_color: Color | None = None

    show_border_bottom: bool | None = None
    border_bottom: str | None = None
    border_bottom_color: Color | None = None
    border_bottom_background_color: Color | None = None

    show_border_left: bool | None = None
    border_left: str | None = None
    border_left_color: Color | None = None
    border_left_background_color: Color | None = None

    show_border_right: bool | None = None
    border_right: str | None = None
    border_right_color: Color | None = None
    border_right_background_color: Color | None = None

    corner_top_left: str | None = None
    corner_top_left_color: Color | None = None
    corner_top_left_background_color: Color | None = None

    corner_top_right: str | None = None
    corner_top_right_color: Color | None = None
    corner_top_right_background_color: Color | None = None

    corner_bottom_left: str | None = None
    corner_bottom_left_color: Color | None = None
    corner_bottom_left_background_color: Color | None = None

    corner_bottom_right: str | None = None
    corner_bottom_right_color: Color | None = None
    corner_bottom_right_background_color: Color | None = None

    column_separator: str | None = None
    column_separator_color: Color | None = None
    column_separator_background_color: Color | None = None

    multi_byte_characters: bool | None = None
    locale: str | None = None

    def copy(self):
        copied = replace(self)
        if copied.font_style is not None:
            copied.font_style = list(copied.font_style)
        return copied


_SIDES = ("top", "bottom", "left", "right")
_CORNERS = ("top_left", "top_right", "bottom_left", "bottom_right")


def _size(value):
    if value < 0:
        raise ValueError(f"size must not be negative, got {value}")
    return value


class Format:
    """A set of formatting settings; every setter returns the format for chaining.

    The current values live in ``settings``; unset values are ``None`` and are
    filled in by merging with a format of lower precedence.
    """

    def __init__(self):
        self.settings = _Settings()

    def __eq__(self, other):
        if not isinstance(other, Format):
            return NotImplemented
        return self.settings == other.settings

    def __repr__(self):
        changed = {
            f.name: getattr(self.settings, f.name)
            for f in fields(_Settings)
            if getattr(self.settings, f.name) is not None
        }
        return f"Format({changed!r})"

    def _set(self, **values):
        for name, value in values.items():
            setattr(self.settings, name, value)
        return self

    # Size

    def width(self, value):
        return self._set(width=_size(value))

    def height(self, value):
        return self._set(height=_size(value))

    # Padding

    def padding(self, value):
        value = _size(value)
        return self._set(
            padding_left=value, padding_right=value, padding_top=value, padding_bottom=value
        )

    def padding_left(self, value):
        return self._set(padding_left=_size(value))

    def padding_right(self, value):
        return self._set(padding_right=_size(value))

    def padding_top(self, value):
        return self._set(padding_top=_size(value))

    def padding_bottom(self, value):
        return self._set(padding_bottom=_size(value))

    # Borders

    def border(self, value):
        return self._set(**{f"border_{side}": value for side in _SIDES})

    def border_color(self, value):
        return self._set(**{f"border_{side}_color": value for side in _SIDES})

    def border_background_color(self, value):
        return self._set(**{f"border_{side}_background_color": value for side in _SIDES})

    def border_left(self, value):
        return self._set(border_left=value)

    def border_left_color(self, value):
        return self._set(border_left_color=value)

    def border_left_background_color(self, value):
        return self._set(border_left_background_color=value)

    def border_right(self, value):
        return self._set(border_right=value)

    def border_right_color(self, value):
        return self._set(border_right_color=value)

    def border_right_background_color(self, value):
        return self._set(border_right_background_color=value)

    def border_top(self, value):
        return self._set(border_top=value)

    def border_top_color(self, value):
        return self._set(border_top_color=value)

    def border_top_background_color(self, value):
        return self._set(border_top_background_color=value)

    def border_bottom(self, value):
        return self._set(border_bottom=value)

    def border_bottom_color(self, value):
        return self._set(border_bottom_color=value)

    def border_bottom_background_color(self, value):
        return self._set(border_bottom_background_color=value)

    def show_border(self):
        return self._set(**{f"show_border_{side}": True for side in _SIDES})

    def hide_border(self):
        return self._set(**{f"show_border_{side}": False for side in _SIDES})

    def show_border_top(self):
        return self._set(show_border_top=True)

    def hide_border_top(self):
        return self._set(show_border_top=False)

    def show_border_bottom(self):
        return self._set(show_border_bottom=True)

    def hide_border_bottom(self):
        return self._set(show_border_bottom=False)

    def show_border_left(self):
        return self._set(show_border_left=True)

    def hide_border_left(self):
        return self._set(show_border_left=False)

    def show_border_right(self):
        return self._set(show_border_right=True)

    def hide_border_right(self):
        return self._set(show_border_right=False)

    # Corners

    def corner(self, value):
        return self._set(**{f"corner_{corner}": value for corner in _CORNERS})

    def corner_color(self, value):
        return self._set(**{f"corner_{corner}_color": value for corner in _CORNERS})

    def corner_background_color(self, value):
        return self._set(**{f"corner_{corner}_background_color": value for corner in _CORNERS})

    def corner_top_left(self, value):
        return self._set(corner_top_left=value)

    def corner_top_left_color(self, value):
        return self._set(corner_top_left_color=value)

    def corner_top_left_background_color(self, value):
        return self._set(corner_top_left_background_color=value)

    def corner_top_right(self, value):
        return self._set(corner_top_right=value)

    def corner_top_right_color(self, value):
        return self._set(corner_top_right_color=value)

    def corner_top_right_background_color(self, value):
        return self._set(corner_top_right_background_color=value)

    def corner_bottom_left(self, value):
        return self._set(corner_bottom_left=value)

    def corner_bottom_left_color(self, value):
        return self._set(corner_bottom_left_color=value)

    def corner_bottom_left_background_color(self, value):
        return self._set(corner_bottom_left_background_color=value)

    def corner_bottom_right(self, value):
        return self._set(corner_bottom_right=value)

    def corner_bottom_right_color(self, value):
        return self._set(corner_bottom_right_color=value)

    def corner_bottom_right_background_color(self, value):
        return self._set(corner_bottom_right_background_color=value)

    # Column separator

    def column_separator(self, value):
        return self._set(column_separator=value)

    def column_separator_color(self, value):
        return self._set(column_separator_color=value)

    def column_separator_background_color(self, value):
        return self._set(column_separator_background_color=value)

    # Font

    def font_align(self, value):
        return self._set(font_align=value)

    def font_style(self, styles):
        """Add styles to those already set at this level."""
        if self.settings.font_style is None:
            self.settings.font_style = list(styles)
        else:
            self.settings.font_style.extend(styles)
        return self

    def font_color(self, value):
        return self._set(font_color=value)

    def font_background_color(self, value):
        return self._set(font_background_color=value)

    def color(self, value):
        """Set the font, border and corner colours together."""
        self.font_color(value)
        self.border_color(value)
        self.corner_color(value)
        return self

    def background_color(self, value):
        """Set the font, border and corner background colours together."""
        self.font_background_color(value)
        self.border_background_color(value)
        self.corner_background_color(value)
        return self

    # Internationalisation

    def multi_byte_characters(self, value):
        return self._set(multi_byte_characters=value)

    def locale(self, value):
        return self._set(locale=value)

    def set_defaults(self):
        """Fill in the table-wide defaults; width and height stay unset."""
        s = self.settings
        s.font_align = FontAlign.LEFT
        s.font_style = []
        s.font_color = s.font_background_color = Color.NONE
        s.padding_left = s.padding_right = 1
        s.padding_top = s.padding_bottom = 0
        s.border_top = s.border_bottom = "-"
        s.border_left = s.border_right = "|"
        for side in _SIDES:
            setattr(s, f"show_border_{side}", True)
            setattr(s, f"border_{side}_color", Color.NONE)
            setattr(s, f"border_{side}_background_color", Color.NONE)
        for corner in _CORNERS:
            setattr(s, f"corner_{corner}", "+")
            setattr(s, f"corner_{corner}_color", Color.NONE)
            setattr(s, f"corner_{corner}_background_color", Color.NONE)
        s.column_separator = "|"
        s.column_separator_color = s.column_separator_background_color = Color.NONE
        s.multi_byte_characters = False
        s.locale = ""
        return self


def merge(first, second):
    """Combine two formats into a new one; ``first`` takes precedence.

    Every attribute comes from ``first`` when set there and from ``second``
    otherwise, except font styles: when ``first`` sets any, the result holds
    the union of both, in style order. Neither argument is changed.
    """
    result = Format()
    a, b = first.settings, second.settings
    for f in fields(_Settings):
        value = getattr(a, f.name)
        if value is None:
            value = getattr(b, f.name)
        setattr(result.settings, f.name, value)
    if a.font_style is not None:
        result.settings.font_style = sorted(set(a.font_style) | set(b.font_style or ()))
    elif b.font_style is not None:
        result.settings.font_style = list(b.font_style)
    return result
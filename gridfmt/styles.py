"""Colours, alignments and font styles used to format table cells."""

from enum import Enum, IntEnum

__all__ = ["Color", "FontAlign", "FontStyle"]


class Color(Enum):
    """Terminal colours; ``NONE`` leaves the terminal's colour unchanged."""

    NONE = "none"
    GREY = "grey"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


class FontAlign(Enum):
    """Horizontal alignment of text inside a cell."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class FontStyle(IntEnum):
    """Font attributes; ordered so that style lists can be merged as sorted sets."""

    BOLD = 0
    DARK = 1
    ITALIC = 2
    UNDERLINE = 3
    BLINK = 4
    REVERSE = 5
    CONCEALED = 6
    CROSSED = 7
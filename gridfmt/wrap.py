"""Word wrapping and line splitting for cell contents."""

from gridfmt.textwidth import sequence_length

__all__ = [
    "trim_left",
    "trim_right",
    "trim",
    "index_of_any",
    "explode_string",
    "word_wrap",
    "split_lines",
]

_WHITESPACE = " \t\n\v\f\r"
_WRAP_SEPARATORS = (" ", "-", "\t")


def trim_left(text):
    """Strip leading whitespace."""
    return text.lstrip(_WHITESPACE)


def trim_right(text):
    """Strip trailing whitespace."""
    return text.rstrip(_WHITESPACE)


def trim(text):
    """Strip whitespace from both ends."""
    return trim_left(trim_right(text))


def index_of_any(text, start_index, split_characters):
    """Return the smallest index at or after ``start_index`` of any separator, or None."""
    found = [
        index
        for index in (text.find(separator, start_index) for separator in split_characters)
        if index != -1
    ]
    return min(found, default=None)


def explode_string(text, split_characters):
    """Split text into words, keeping separators.

    Whitespace separators become words of their own; other separators such as
    dashes stay attached to the word before them.
    """
    result = []
    start_index = 0
    while True:
        index = index_of_any(text, start_index, split_characters)
        if index is None:
            result.append(text[start_index:])
            return result
        word = text[start_index:index]
        next_character = text[index]
        if next_character in _WHITESPACE:
            result.append(word)
            result.append(next_character)
        else:
            result.append(word + next_character)
        start_index = index + 1


def word_wrap(text, width, locale="", multi_byte_characters=False):
    """Insert line breaks so that no line is longer than ``width``.

    Words too long for a line of their own are split with a trailing dash.
    Raises ValueError if a word must be split and ``width`` is below 2.
    """

    def length(value):
        return sequence_length(value, locale, multi_byte_characters)

    pieces = []
    current_line_length = 0
    for word in explode_string(text, _WRAP_SEPARATORS):
        if current_line_length + length(word) > width:
            if current_line_length > 0:
                pieces.append("\n")
                current_line_length = 0
            while length(word) > width:
                if width < 2:
                    raise ValueError(f"cannot split word {word!r} to width {width}")
                pieces.append(word[: width - 1] + "-\n")
                word = word[width - 1 :]
            word = trim_left(word)
        pieces.append(word)
        current_line_length += length(word)
    return "".join(pieces)


def split_lines(text, delimiter, locale="", multi_byte_characters=False):
    """Split text on ``delimiter``, dropping an empty final piece."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    *lines, last = text.split(delimiter)
    if sequence_length(last, locale, multi_byte_characters):
        lines.append(last)
    return lines
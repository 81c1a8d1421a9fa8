"""Measuring how much room a piece of text takes up."""

from wcwidth import wcswidth

__all__ = ["display_width", "sequence_length"]


def display_width(text, locale, max_column_width):
    """Return the terminal column width of at most ``max_column_width`` characters.

    Returns -1 when the text holds a non-printable character. The ``locale``
    argument is accepted for interface compatibility; widths follow Unicode
    tables rather than the process locale.
    """
    if not text:
        return 0
    return wcswidth(text, max_column_width)


def sequence_length(text, locale, multi_byte_characters):
    """Return the length used for layout.

    Without multi-byte support this is the UTF-8 byte length. With it, it is
    the display width, or the number of code points when the text holds
    characters that have no display width.
    """
    if not multi_byte_characters:
        return len(text.encode("utf-8"))
    width = display_width(text, locale, len(text))
    if width >= 0:
        return width
    return len(text)
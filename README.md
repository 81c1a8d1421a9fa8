# gridfmt

Building blocks for aligned, formatted text tables in the terminal:

- `gridfmt.styles`: the `Color`, `FontAlign` and `FontStyle` enumerations.
- `gridfmt.textwidth`: `display_width` and `sequence_length`, which measure
  text for layout, with optional multi-byte (wide character) support.
- `gridfmt.wrap`: `word_wrap`, `split_lines`, `explode_string`,
  `index_of_any` and the `trim_left`, `trim_right` and `trim` helpers used to
  fit cell text into a column.
- `gridfmt.format`: `Format`, a chainable set of optional layout and style
  settings, and `merge`, which combines two formats so that the first one
  wins.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Formats

Every setter on `Format` returns the format, so calls chain. Unset settings
are `None` and live in `Format.settings`:

```python
from gridfmt.format import Format, merge
from gridfmt.styles import Color, FontAlign, FontStyle

cell = Format().font_align(FontAlign.CENTER).font_style([FontStyle.BOLD])
row = Format().padding(0).font_color(Color.YELLOW)

combined = merge(cell, row)   # cell-level settings take precedence
```

`merge` returns a new format and leaves both arguments unchanged. Each setting
comes from the first format when it is set there and from the second
otherwise; font styles are the exception: when the first format sets any, the
result holds the union of both, in style order.

`font_style` adds to the styles already set on a format rather than replacing
them. `color` and `background_color` set the font, border and corner colours
together. Sizes (width, height, padding) must not be negative; a negative
value raises `ValueError`.

`Format.set_defaults()` fills in the standard look: left alignment, no font
styles, no colours, one space of horizontal padding and none vertically, `-`
and `|` borders, all borders shown, `+` corners, a `|` column separator,
multi-byte support off and an empty locale. Width and height stay unset.

## Measuring text

```python
from gridfmt.textwidth import sequence_length

sequence_length("我爱你", "", False)  # 9: UTF-8 byte length
sequence_length("我爱你", "", True)   # 6: display columns
```

With multi-byte support on, text holding characters that have no display
width is measured in code points instead. `display_width` returns `-1` for
such text. The locale argument is accepted but widths follow Unicode tables,
not the process locale.

## Word wrapping

```python
from gridfmt.wrap import word_wrap, split_lines

wrapped = word_wrap("Long sentences wrap at word boundaries", 12)
lines = split_lines(wrapped, "\n")
```

Text is split at spaces, tabs and dashes; dashes stay attached to the word
before them. Words longer than the width are broken with a trailing `-`;
breaking a word to a width below 2 raises `ValueError`. Pass
`multi_byte_characters=True` to measure text in display columns, so CJK and
other wide characters line up.

`split_lines` drops an empty final piece and raises `ValueError` for an empty
delimiter.

## What it does not do

The package provides settings, measurement and wrapping only. It has no table,
row or cell objects, does not lay out or print whole tables, writes no ANSI
colour or style escape sequences, and exports to no other format such as
AsciiDoc or Markdown.
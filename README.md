# cosmicterm

This package holds the input and view logic of a graphical terminal emulator.
It contains no widget toolkit and no font stack. Every function in it is a
plain function or a small class that you can call from your own terminal
front end.

- `cosmicterm.keys` turns key presses into the byte sequences that a program
  running in the terminal expects.
- `cosmicterm.pointer` counts clicks, turns wheel scrolling into line scrolls,
  maps pixel positions to cells and computes the scrollbar geometry.
- `cosmicterm.viewport` splits pasted text into chunks, works out where the
  scrollbar sits and how far to scroll, finds where a search starts and builds
  the text of a cell.
- `cosmicterm.thumbnailer` finds freedesktop thumbnailer entries and builds
  their command lines.

The package has no dependencies outside the standard library.

## Installation

```
pip install cosmicterm
```

To install the test tools as well:

```
pip install "cosmicterm[test]"
```

## Key encoding

`Modifiers(shift=False, alt=False, control=False, logo=False)` describes the
modifiers that are held down. `Modifiers.number()` returns the xterm modifier
parameter, which is 1 plus the bit mask (shift 1, alt 2, control 4, super 8).

`encode_named_key(key, modifiers, app_cursor, text=None)` takes a `NamedKey`.
`encode_character(key, text, modifiers)` takes a character key. Both return a
`KeyResult` with these fields:

- `input`: the bytes to send to the application.
- `scroll`: a `ScrollAction` (`PAGE_UP`, `PAGE_DOWN`, `TOP`, `BOTTOM`). Shift
  combined with Page Up, Page Down, Home or End scrolls the view and does not
  send anything.
- `captured`: whether the key press was consumed.
- `clears_selection`: set for Escape. If a selection exists, drop it instead of
  sending `input`.

```python
from cosmicterm.keys import Modifiers, NamedKey, encode_character, encode_named_key, csi

encode_named_key(NamedKey.ARROW_UP, Modifiers(control=True), app_cursor=False).input
# b'\x1b[1;5A'
encode_named_key(NamedKey.ARROW_UP, Modifiers(), app_cursor=True).input
# b'\x1bOA'
encode_named_key(NamedKey.END, Modifiers(shift=True), app_cursor=False).scroll
# ScrollAction.BOTTOM
encode_character("a", "a", Modifiers(alt=True)).input
# b'\x1ba'
csi("3", "~", 5)
# b'\x1b[3;5~'
```

The lower-level builders `csi(code, suffix, modifiers)`,
`csi2(code, modifiers)` and `ss3(code, modifiers)` are also available.

## Pointer handling

```python
from cosmicterm.pointer import ClickKind, PixelScroller, cell_position, next_click_kind, scrollbar_rect

next_click_kind(ClickKind.SINGLE, elapsed=0.2)     # ClickKind.DOUBLE
next_click_kind(ClickKind.TRIPLE, elapsed=0.2)     # ClickKind.SINGLE
next_click_kind(ClickKind.DOUBLE, elapsed=0.8)     # ClickKind.SINGLE

cell_position(25.0, 30.0, cell_width=10.0, cell_height=20.0)
# (1, 2, 'right')

scroller = PixelScroller()
scroller.scroll_pixels(-5.0, line_height=20.0)     # whole lines to scroll; the remainder is kept
scroller.scroll_lines(1.0)                         # wheel events measured in lines
```

By default, a click counts as the next click in a sequence if it comes within
`DEFAULT_CLICK_TIMING` seconds (0.5) of the previous one. Wheel deltas are
multiplied by `WHEEL_SCALE` before they are converted to lines.

`scrollbar_rect(start, end, view_w, view_h, scrollbar_w)` returns the
`(x, y, width, height)` of the scrollbar thumb. The thumb sits to the right of
the text area.

## Viewport helpers

```python
from cosmicterm.viewport import cell_text, paste_chunks, scroll_to_delta, scrollbar, search_origin

paste_chunks("a\nb", bracketed=False)   # [b'a\rb']
paste_chunks("a\x1bb", bracketed=True)  # [b'\x1b[200~', b'ab', b'\x1b[201~']
scrollbar(0, 24, 0)                     # None: there is no history
scrollbar(100, 24, 0)                   # (start, end) as fractions of all lines
scroll_to_delta(0.5, 100, 24, 0)        # lines to scroll to put the view's top at that ratio
search_origin(True, 100, 24, 80)        # (-100, 0)
search_origin(False, 100, 24, 80)       # (23, 79)
cell_text("\t")                         # ' '
```

These functions raise `ValueError` if a count is negative, if the display
offset is larger than the history, or if a cell does not hold exactly one
character.

## Thumbnailers

By default, `ThumbnailerCache()` scans the `thumbnailers` folder of each XDG
data directory. You can pass `search_dirs=` to scan other folders instead.
`get(mime)` returns the matching `Thumbnailer` entries in the order they were
found. `reload()` scans the folders again. The module-level function
`thumbnailer(mime)` uses a shared cache that is built on first use.

`Thumbnailer.command(input_path, output_path, thumbnail_size)` fills in the
`%i`/`%u`, `%o` and `%s` codes of the entry's Exec line and returns an argument
list. It returns `None` if the line cannot be parsed or uses any other code.

```python
from pathlib import Path
from cosmicterm.thumbnailer import Thumbnailer, thumbnailer

Thumbnailer("gdk-pixbuf-thumbnailer -s %s %u %o").command(Path("in.png"), Path("out.png"), 128)
# ['gdk-pixbuf-thumbnailer', '-s', '128', 'in.png', 'out.png']

for entry in thumbnailer("image/png"):
    print(entry.command(Path("in.png"), Path("out.png"), 128))
```

`parse_desktop_entry(path)` reads a desktop entry file and returns a dictionary
of sections. Each section is a dictionary of key/value pairs. It raises
`ValueError` if a line is malformed.

## What this package does not do

The package does not do the following:

- Run a pseudo-terminal or start a shell.
- Parse terminal output or keep a grid of cells.
- Provide color palettes or themes.
- Draw anything or open a window.
- Run the thumbnailer commands it builds. It only returns their argument
  lists.

Your own terminal front end supplies these parts and calls the functions
described above.

## Tests

```
pytest
```
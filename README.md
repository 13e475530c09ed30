# timehold

A timeline of the day. It lays out the 24 hours as a row of two-digit slots,
keeps a heading with the weekday and the current time, and places a dial over
the current hour according to the minutes. The `timehold` command draws this
timeline as text in the terminal.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
timehold
```

prints the timeline and redraws it every 240 seconds until interrupted with
Ctrl-C. A frame looks like this:

```
🔼 Timehold  🔒 📌
00 01 02 03 04 05 06 07 08 09 10 11 12 13 14 15 16 17 18 19 20 21 22 23
                           ^
```

The first line holds the window controls (compact/full, decorations, pin on
top) and the title. The caret sits under the current hour, one column further
right once the hour is half past.

Options:

- `--at TIME` shows the given ISO time (for example `2024-05-14T09:30`)
  instead of the current one, draws one frame and exits. An unparsable time is
  reported as an error.
- `--once` draws a single frame and exits.
- `--expanded` starts in full mode, which adds the heading line with the
  weekday, the time and the full timestamp.
- `--interval SECONDS` sets the time between redraws; it must be positive.

## Using it as a library

- `timehold.chronosphere.ChronoSphere` holds a moment (the current local time
  by default) and gives `hour()`, `minutes()`, `formatted_hh()`,
  `formatted_mm()`, `weekday()` and the header text `heading()`; `update()`
  moves it to now.
- `timehold.hours.Hour` enumerates the 24 hours; `str(hour)` is its two-digit
  label and `hour.matches(chrono)` tells whether it is the clock's hour.
- `timehold.geometry` computes pixel positions: `Point`, `Rect`,
  `rect_with_offset`, `dial_left_px`, `hour_slot_rects`, `cursor_canvas` and
  `cursor_line`.
- `timehold.layout` builds a tree of `Node` objects describing the window with
  `build_ui`, and keeps it current with `refresh_heading`,
  `update_dial_position` and `active_hours`. `Node.walk()` iterates the tree
  and `Node.find(tag)` returns the first node carrying a `Tag`.
- `timehold.app.TimeholdApp` ties a clock to a tree: `tick()` advances to now
  and refreshes it, `render()` returns the text frame. Its `window` is a
  `WindowState` with `size()`, `toggle_compact()`, `toggle_decorations()` and
  `toggle_always_on_top()`.

```python
from datetime import datetime

from timehold.chronosphere import ChronoSphere
from timehold.layout import build_ui, refresh_heading, update_dial_position

chrono = ChronoSphere(datetime(2024, 5, 14, 9, 30))
root = build_ui(chrono)
print(refresh_heading(root, chrono))
print(update_dial_position(root, chrono))
```

## What it does not do

There is no graphical window. The node tree describes the layout, colours,
fonts and images of a desktop window, but nothing renders it: fonts and icons
are only named by their file paths and are never loaded, and the spectrum
background is not drawn. `WindowState` only records compact mode, decorations
and always-on-top; it does not change any real window, and the command offers
no way to toggle them while it runs.
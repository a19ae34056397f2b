# snipmark

snipmark is the editing model behind a screenshot selector: dragging out a
region, moving and resizing it, annotating it with rectangles, ellipses,
arrows, freehand strokes and text boxes, undoing changes, and asking the
surrounding window to copy or pin the region. It has no dependencies beyond
the standard library.

## Installing

```
pip install snipmark
```

## What it does not do

snipmark contains no window, no screen capture, no pixel drawing and no
command to run. It keeps the state and decides what each mouse and key event
means; capturing the screen, painting the state, putting the region on the
clipboard and managing the window are left to the host you plug in (see
`EditorHost` below).

## Using it

`ScreenshotEditor` in `snipmark.editor` takes mouse and key events in screen
pixels:

```python
from snipmark.editor import ScreenshotEditor
from snipmark.geometry import Rect

editor = ScreenshotEditor(screen_width=1920, screen_height=1080)
editor.handle_left_button_down(100, 100)
editor.handle_mouse_move(300, 250)
editor.handle_left_button_up(300, 250)

assert editor.selection_rect == Rect(100, 100, 300, 250)
assert editor.toolbar.visible

editor.save_selection()
assert editor.host.copied == [Rect(100, 100, 300, 250)]
```

Event methods:

- `handle_left_button_down(x, y)`, `handle_mouse_move(x, y)`,
  `handle_left_button_up(x, y)` — select, move and resize the region, draw
  with the current tool, and select, move or resize annotations.
- `handle_double_click(x, y)` — hands the region to the host for copying.
- `handle_key_down(key, ctrl=False)` with a `Key`: `Key.ESCAPE` quits,
  `Key.RETURN` copies the region and quits, `Key.Z` with `ctrl=True` undoes.
  Once pinned, only `Key.ESCAPE` is handled.
- `handle_toolbar_click(button)` with a `ToolbarButton`.

Behaviour worth knowing:

- A region smaller than 50 × 50 pixels is discarded when the drag ends.
- The toolbar (`snipmark.toolbar.Toolbar`) is laid out centred below the
  region, or above it when there is no room below, and kept on screen. Its
  buttons, in order: rectangle, circle, arrow, pen, text, undo, save, pin,
  copy, confirm, cancel. The undo button is disabled while there is nothing
  to undo (`is_button_disabled`).
- Save and copy both call the host's `copy_selection`; confirm does that and
  quits; cancel clears the tool and quits; pin calls `pin_selection`.
- Drawn shapes smaller than 6 pixels in both directions and pen strokes of a
  single point are dropped. Pen strokes cannot be selected, moved or resized.
  Arrows are reshaped by their start and end points.
- With the text tool, a click inside the region adds a text box holding
  "Sample Text"; a click on an existing text box selects and moves it.
- Every new annotation records an undo step; up to 20 are kept.
- `pin_selection()` asks the host to move the window onto the region, then
  makes the region the whole (smaller) screen, clears annotations and hides
  the toolbar. While pinned, dragging calls the host's `move_window_by`.

### Hosts

The editor talks to its surroundings only through its `host`, an
`EditorHost`. The default `EditorHost` has no window; it records what it is
asked: `repaint_count`, the last `cursor` (a `snipmark.selection.Cursor`),
the `copied` rectangles, `quit_requested` and `window_rect`. Subclass it for a
real toolkit and override `repaint`, `set_cursor`, `copy_selection`,
`pin_window` (which returns the window's previous rectangle),
`move_window_by` and `quit`.

### Lower-level pieces

- `snipmark.geometry` — `Point`, `Rect`, `handle_points`,
  `point_to_line_distance`, `arrow_wings`.
- `snipmark.elements` — `DrawingTool`, `DragMode`, `ToolbarButton`,
  `DrawingElement` (hit testing, bounds, resize, move) and `HistoryState`.
- `snipmark.selection` — `SelectionModel` with undo history and hit testing
  for handles, elements and cursors; `point_near`.
- `snipmark.dragging` — `DragController`, which starts, follows and ends
  drags.
- `snipmark.constants` — sizes, `Color` values and toolbar icons.

## Tests

```
pip install "snipmark[test]"
pytest
```
# icedit-view

`icedit_view` is the view layer of a text editor. It covers four things:

- text measurement with tab stops every four characters
- a viewport that scrolls smoothly and keeps track of lines that are only partly visible
- scrollbar geometry
- a widget model that turns mouse input into cursor and selection requests

It does not paint pixels. Drawing returns a list of plain draw operations, `QuadOp` (a filled rectangle) and `TextOp` (a run of monospace text). Each operation carries its bounds and colour, so any drawing backend can paint them.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `icedit_view.utils`

Measures text, expanding tabs to tab stops. These functions are provided:

- `calculate_line_width(line, char_width, tab_width)`. A newline takes no width.
- `calculate_column_x_position(column, line_content, char_width)`
- `x_position_to_column(x_position, line_content, char_width)`. A position at or before the middle of a character maps to that character's column.
- `calculate_column_range_width(start_column, end_column, line_content, char_width)`
- `calculate_max_content_width(lines, char_width, max_lines_to_check)`. It returns the widest of the first lines, plus two characters of padding.
- `calculate_char_dimensions(font_size)` estimates `(char_width, line_height)` as 0.6 × and 1.3 × the font size.
- `get_tab_width(char_width)`

### `icedit_view.viewport`

- `Viewport` holds the scroll offset, the size and the character cell size. Call `set_size`, `set_scroll_offset` or `set_char_dimensions` and it recomputes `visible_lines` and `partial_lines`.
- `partial_lines` is a list of `PartialLineView` entries. Each entry gives the line's `y_offset`, its `clip_top` and `clip_bottom`, and its `visible_fraction`.
- `Viewport` also has `is_line_visible`, `is_position_visible` and `clamp_scroll_offset`.

### `icedit_view.geometry`

Frozen value types:

- `Point`
- `Size`
- `Rectangle`, with `position()`, `size()` and `contains(point)`
- `Color`, with `from_rgb`, `from_rgba`, `WHITE` and `BLACK`
- `Position`, a line and column, ordered
- `Selection`

### `icedit_view.scrollbars`

- `compute_scrollbars(viewport, bounds, content_width, content_height, ...)` returns a vertical and a horizontal `ScrollbarInfo`. Each one gives the track bounds, the thumb bounds and the scroll ratio.
- `editor_content_bounds(...)` returns the text area. That area lies to the right of the gutter and clear of any visible scrollbars.

### `icedit_view.columns`

- `calculate_visible_columns(...)` returns a `PartialColumnView` for a horizontally scrolled line. It returns `None` when the whole line fits.
- `extract_visible_line_content(...)` cuts that range out of the line.

### `icedit_view.renderer`

`EditorRenderer.render(lines, cursor_position, selection, viewport, bounds)` returns the draw operations in painting order:

1. background
2. gutter with line numbers, with the current line highlighted
3. selection quads
4. text
5. cursor
6. scrollbars, with a corner piece when both scrollbars show

On the frame straight after a full render, if the viewport and the selection have not changed, only the cursor is redrawn. If the cursor has not moved either, the list is empty. `calculate_content_dimensions` caches the content width, and `invalidate_content_cache` clears that cached width. `get_max_content_width` returns the cached width.

### `icedit_view.interaction`

Contains:

- the request types `MoveCursorTo` and `SetSelection`
- `compute_auto_scroll_delta`
- `clamp_scroll`
- `cursor_x_position`
- `is_cursor_visible_with_margin`, which keeps two lines of margin vertically and four characters horizontally

### `icedit_view.widget`

`EditorWidget` works over a sequence of lines, a cursor position and an optional selection. The factories `editor_widget` and `styled_editor` build one; `styled_editor` applies a dark or a light theme.

Configuration methods return the widget, so calls can be chained:

- `font_size`
- `colors`
- `gutter`

Geometry:

- `resize(bounds)`
- `calculate_gutter_width()`
- `char_dimensions()`
- `point_to_position(point)`, where the point is relative to the widget. A click in the gutter lands at column 0.

Mouse input:

- `mouse_pressed(point)`
- `mouse_moved(point)`
- `mouse_released()`
- `wheel_scrolled(x, y, in_lines)`
- `tick()`, which advances auto-scrolling while a drag is outside the bounds

Each handler passes `MoveCursorTo` or `SetSelection` to the `on_message` callback and returns a list of what the callback returned. `redraw_requested` is set whenever the view has scrolled. `ensure_cursor_visible()` scrolls so the cursor is inside the margins. `draw()` returns the draw operations.

## Example

```python
from icedit_view.utils import calculate_column_x_position, x_position_to_column

line = "a\tb\tc"
calculate_column_x_position(2, line, 8.0)   # 32.0, 'b' sits on the first tab stop
x_position_to_column(20.0, line, 8.0)       # 1, still inside the tab
```

```python
from icedit_view.geometry import Point, Position, Rectangle
from icedit_view.widget import styled_editor

requests = []
lines = ["def main():\n", "\treturn 0\n"]
widget = styled_editor(lines, Position(0, 0), 16.0, True, requests.append)
widget.resize(Rectangle(0, 0, 800, 600))
widget.mouse_pressed(Point(100, 5))     # requests now holds a MoveCursorTo
ops = widget.draw()
```

## What it does not do

The package holds no text buffer and applies no edits. The widget never moves its own cursor or changes its own selection in response to the requests it emits. Your application applies them to its own text model. It then sets `widget.cursor_position`, `widget.selection` and `widget.lines`.

There is no keyboard handling and no key-binding table. Nothing here opens a window or draws to a screen.
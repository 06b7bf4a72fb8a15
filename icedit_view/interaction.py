"""Pointer and keyboard interaction helpers for the editor widget.

These functions hold the widget's scrolling and hit-testing rules apart
from any event loop, so they can be driven and checked directly.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from icedit_view.geometry import Point, Position, Rectangle
from icedit_view.utils import calculate_column_x_position
from icedit_view.viewport import Viewport

AUTO_SCROLL_MARGIN = 50.0
AUTO_SCROLL_BASE_SPEED = 3.0
AUTO_SCROLL_MAX_FACTOR = 5.0
VERTICAL_MARGIN_LINES = 2.0
HORIZONTAL_MARGIN_CHARS = 4.0


@dataclass(frozen=True)
class MoveCursorTo:
    """Request to place the cursor at ``position``."""

    position: Position


@dataclass(frozen=True)
class SetSelection:
    """Request to select from ``start`` (the anchor) to ``end``."""

    start: Position
    end: Position


def _auto_scroll_speed(distance: float) -> float:
    return AUTO_SCROLL_BASE_SPEED * min(1.0 + distance / AUTO_SCROLL_MARGIN, AUTO_SCROLL_MAX_FACTOR)


def _axis_delta(value: float, low: float, high: float) -> float:
    if value < low:
        return -_auto_scroll_speed(low - value)
    if value > high:
        return _auto_scroll_speed(value - high)
    return 0.0


def compute_auto_scroll_delta(
    mouse_position: Point | None, bounds: Rectangle
) -> tuple[float, float]:
    """Return the ``(dx, dy)`` to scroll by while dragging outside ``bounds``.

    The speed grows with the distance from the edge and is capped. With no
    known mouse position, or a position inside the bounds, no scrolling
    happens.
    """
    if mouse_position is None:
        return 0.0, 0.0
    dx = _axis_delta(mouse_position.x, bounds.x, bounds.x + bounds.width)
    dy = _axis_delta(mouse_position.y, bounds.y, bounds.y + bounds.height)
    return dx, dy


def clamp_scroll(
    offset: tuple[float, float],
    content_width: float,
    content_height: float,
    bounds: Rectangle,
) -> tuple[float, float]:
    """Clamp a scroll offset so the content never scrolls past its edges."""
    x, y = offset
    max_scroll_x = max(content_width - bounds.width, 0.0)
    max_scroll_y = max(content_height - bounds.height, 0.0)
    return min(max(x, 0.0), max_scroll_x), min(max(y, 0.0), max_scroll_y)


def cursor_x_position(
    lines: Sequence[str], cursor_position: Position, char_width: float
) -> float:
    """Return the cursor's x offset in content coordinates, honouring tabs.

    Past the last line every column is taken to be one character wide.
    """
    if 0 <= cursor_position.line < len(lines):
        return calculate_column_x_position(
            cursor_position.column, lines[cursor_position.line], char_width
        )
    return cursor_position.column * char_width


def is_cursor_visible_with_margin(
    lines: Sequence[str],
    cursor_position: Position,
    viewport: Viewport,
    char_width: float,
    line_height: float,
) -> bool:
    """Return whether the cursor is on screen with room to spare.

    Two lines of margin are kept above and below, four characters left and
    right.
    """
    cursor_y = cursor_position.line * line_height
    cursor_x = cursor_x_position(lines, cursor_position, char_width)

    margin_v = line_height * VERTICAL_MARGIN_LINES
    margin_h = char_width * HORIZONTAL_MARGIN_CHARS
    scroll_x, scroll_y = viewport.scroll_offset
    width, height = viewport.size

    top = scroll_y + margin_v
    bottom = scroll_y + height - margin_v
    v_visible = cursor_y >= top and cursor_y + line_height <= bottom

    left = scroll_x + margin_h
    right = scroll_x + width - margin_h
    h_visible = cursor_x >= left and cursor_x + char_width <= right

    return v_visible and h_visible
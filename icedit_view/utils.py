"""Text measurement helpers shared by the renderer and the widget.

All widths are in pixels. Tabs advance to the next tab stop, which is a
multiple of the tab width (four characters by default).
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import islice

TAB_SIZE_IN_CHARS = 4


def _next_tab_stop(x: float, tab_width: float) -> float:
    return (math.floor(x / tab_width) + 1.0) * tab_width


def get_tab_width(char_width: float) -> float:
    """Return the width of a tab stop for the given character width."""
    return char_width * TAB_SIZE_IN_CHARS


def calculate_line_width(line: str, char_width: float, tab_width: float) -> float:
    """Return the rendered width of ``line``; newlines take no space."""
    width = 0.0
    for ch in line:
        if ch == "\t":
            width = _next_tab_stop(width, tab_width)
        elif ch != "\n":
            width += char_width
    return width


def calculate_max_content_width(
    lines: Iterable[str], char_width: float, max_lines_to_check: int
) -> float:
    """Return the widest of the first ``max_lines_to_check`` lines plus padding.

    Two characters of padding are added so the last glyph is never clipped.
    """
    tab_width = get_tab_width(char_width)
    max_width = max(
        (
            calculate_line_width(line, char_width, tab_width)
            for line in islice(lines, max(max_lines_to_check, 0))
        ),
        default=0.0,
    )
    return max(max_width, 0.0) + char_width * 2.0


def calculate_char_dimensions(font_size: float) -> tuple[float, float]:
    """Estimate ``(char_width, line_height)`` for a monospace font size."""
    char_width = max(font_size * 0.6, 1.0)
    line_height = max(font_size * 1.3, font_size)
    return char_width, line_height


def calculate_column_x_position(column: int, line_content: str, char_width: float) -> float:
    """Return the x offset at which ``column`` starts, honouring tab stops."""
    tab_width = get_tab_width(char_width)
    x = 0.0
    for ch in islice(line_content, max(column, 0)):
        if ch == "\t":
            x = _next_tab_stop(x, tab_width)
        else:
            x += char_width
    return x


def x_position_to_column(x_position: float, line_content: str, char_width: float) -> int:
    """Map an x offset to the nearest column boundary, honouring tab stops.

    A position at or before the middle of a character maps to that
    character's column; past the middle it maps to the next one.
    """
    tab_width = get_tab_width(char_width)
    current_x = 0.0
    column = 0
    for ch in line_content:
        if ch == "\n":
            break
        if ch == "\t":
            advance = _next_tab_stop(current_x, tab_width) - current_x
        else:
            advance = char_width
        if x_position <= current_x + advance / 2.0:
            break
        current_x += advance
        column += 1
    return column


def calculate_column_range_width(
    start_column: int, end_column: int, line_content: str, char_width: float
) -> float:
    """Return the width covered by columns ``[start_column, end_column)``."""
    if start_column >= end_column:
        return 0.0
    start_x = calculate_column_x_position(start_column, line_content, char_width)
    end_x = calculate_column_x_position(end_column, line_content, char_width)
    return end_x - start_x
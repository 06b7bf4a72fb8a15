"""Horizontal clipping of a line to the columns that are on screen."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from icedit_view.utils import calculate_line_width


@dataclass(frozen=True)
class PartialColumnView:
    """The visible column range of a horizontally scrolled line."""

    start_column: int
    end_column: int
    x_offset: float
    visible_width: float


def _column_starts(line: str, char_width: float, tab_width: float) -> Iterator[tuple[int, float]]:
    """Yield ``(column, x)`` for the left edge of every character in ``line``."""
    x = 0.0
    for column, ch in enumerate(line):
        yield column, x
        if ch == "\t":
            x = (math.floor(x / tab_width) + 1.0) * tab_width
        else:
            x += char_width


def calculate_visible_columns(
    line_content: str,
    horizontal_scroll: float,
    viewport_width: float,
    char_width: float,
    tab_width: float,
) -> PartialColumnView | None:
    """Return the visible part of a line, or ``None`` when it shows whole.

    The start column is the first one whose left edge lies at or after the
    scroll offset; the end column is the first one whose left edge lies at
    or past the right edge of the viewport.
    """
    line_width = calculate_line_width(line_content, char_width, tab_width)
    if line_width <= viewport_width and horizontal_scroll <= 0.0:
        return None

    start_column = 0
    x_offset = 0.0
    for column, x in _column_starts(line_content, char_width, tab_width):
        if x >= horizontal_scroll:
            start_column = column
            x_offset = x - horizontal_scroll
            break

    visible_end = horizontal_scroll + viewport_width
    end_column = len(line_content)
    for column, x in _column_starts(line_content, char_width, tab_width):
        if x >= visible_end:
            end_column = column
            break

    visible_width = min(viewport_width, line_width - horizontal_scroll)
    return PartialColumnView(start_column, end_column, x_offset, visible_width)


def extract_visible_line_content(line_content: str, column_view: PartialColumnView) -> str:
    """Return the characters of ``line_content`` inside ``column_view``."""
    length = len(line_content)
    start = min(column_view.start_column, length)
    end = min(column_view.end_column, length)
    if start >= end:
        return ""
    return line_content[start:end]
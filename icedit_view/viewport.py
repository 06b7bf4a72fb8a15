"""Viewport state: scroll offset, size and the lines it shows."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class PartialLineView:
    """A line that is wholly or partly visible in the viewport."""

    line_index: int
    y_offset: float
    visible_fraction: float
    clip_top: float
    clip_bottom: float


def _to_index(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    return int(value)


@dataclass
class Viewport:
    """Scrollable window onto the buffer, tracking which lines it covers."""

    scroll_offset: tuple[float, float] = (0.0, 0.0)
    size: tuple[float, float] = (800.0, 600.0)
    char_width: float = 8.0
    line_height: float = 18.0
    visible_lines: tuple[int, int] = (0, 0)
    partial_lines: list[PartialLineView] = field(default_factory=list)

    def set_size(self, width: float, height: float) -> None:
        """Resize the viewport and recompute the visible lines."""
        self.size = (width, height)
        self._update_visible_lines()

    def set_scroll_offset(self, x: float, y: float) -> None:
        """Scroll to ``(x, y)`` and recompute the visible lines."""
        self.scroll_offset = (x, y)
        self._update_visible_lines()

    def set_char_dimensions(self, char_width: float, line_height: float) -> None:
        """Set the character cell size and recompute the visible lines."""
        self.char_width = char_width
        self.line_height = line_height
        self._update_visible_lines()

    def _update_visible_lines(self) -> None:
        scroll_y = self.scroll_offset[1]
        viewport_height = self.size[1]
        line_height = self.line_height
        viewport_top = scroll_y
        viewport_bottom = scroll_y + viewport_height

        start_line = _to_index(math.floor(scroll_y / line_height))
        end_line = _to_index(math.ceil(viewport_bottom / line_height))
        self.visible_lines = (start_line, end_line)

        partial: list[PartialLineView] = []
        for line_idx in range(start_line, end_line):
            line_top = line_idx * line_height
            line_bottom = line_top + line_height
            if not (line_bottom > viewport_top and line_top < viewport_bottom):
                continue
            clip_top = viewport_top - line_top if line_top < viewport_top else 0.0
            clip_bottom = line_bottom - viewport_bottom if line_bottom > viewport_bottom else 0.0
            visible_fraction = (line_height - clip_top - clip_bottom) / line_height
            if visible_fraction > 0.0:
                partial.append(
                    PartialLineView(
                        line_index=line_idx,
                        y_offset=line_top - viewport_top,
                        visible_fraction=visible_fraction,
                        clip_top=clip_top,
                        clip_bottom=clip_bottom,
                    )
                )
        self.partial_lines = partial

    def is_line_visible(self, line: int) -> bool:
        """Return whether ``line`` lies in the visible range (inclusive)."""
        start, end = self.visible_lines
        return start <= line <= end

    def is_position_visible(self, line: int, column: int, char_width: float) -> bool:
        """Return whether the cell at ``(line, column)`` is fully on screen.

        Columns are treated as fixed width; tabs are not expanded.
        """
        if not self.is_line_visible(line):
            return False
        line_y = line * self.line_height
        column_x = column * char_width
        left, top = self.scroll_offset
        right = left + self.size[0]
        bottom = top + self.size[1]
        return (
            line_y >= top
            and line_y + self.line_height <= bottom
            and column_x >= left
            and column_x + char_width <= right
        )

    def clamp_scroll_offset(
        self, offset: tuple[float, float], content_lines: int
    ) -> tuple[float, float]:
        """Clamp ``offset`` so the view never scrolls past the content."""
        x, y = offset
        content_height = content_lines * self.line_height
        clamped_x = max(x, 0.0)
        if content_height > self.size[1]:
            clamped_y = min(max(y, 0.0), content_height - self.size[1])
        else:
            clamped_y = 0.0
        return clamped_x, clamped_y
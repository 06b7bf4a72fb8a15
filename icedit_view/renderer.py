"""Turns editor content and viewport state into a list of draw operations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from icedit_view.columns import calculate_visible_columns, extract_visible_line_content
from icedit_view.geometry import Color, Point, Position, Rectangle, Selection
from icedit_view.scrollbars import (
    DEFAULT_MIN_THUMB_SIZE,
    DEFAULT_SCROLLBAR_WIDTH,
    ScrollbarInfo,
    compute_scrollbars,
    editor_content_bounds,
)
from icedit_view.utils import (
    calculate_column_x_position,
    calculate_max_content_width,
    get_tab_width,
)
from icedit_view.viewport import PartialLineView, Viewport

MAX_LINES_FOR_WIDTH = 2000
CURSOR_WIDTH = 2.0
SCROLLBAR_TRACK_COLOR = Color.from_rgba(0.5, 0.5, 0.5, 0.2)
SCROLLBAR_THUMB_COLOR = Color.from_rgba(0.6, 0.6, 0.6, 0.8)


@dataclass(frozen=True)
class QuadOp:
    """A filled rectangle."""

    bounds: Rectangle
    color: Color


@dataclass(frozen=True)
class TextOp:
    """A run of monospace text drawn from ``position`` and clipped to ``bounds``."""

    content: str
    position: Point
    bounds: Rectangle
    color: Color
    font_size: float
    line_height: float


DrawOp = Union[QuadOp, TextOp]


class EditorRenderer:
    """Produces draw operations for the editor and caches what it can between frames."""

    def __init__(
        self,
        font_size: float,
        line_height: float,
        char_width: float,
        background_color: Color,
        text_color: Color,
        cursor_color: Color,
        selection_color: Color,
        gutter_width: float,
        gutter_background_color: Color,
        line_number_color: Color,
        current_line_number_color: Color,
        gutter_padding: float,
    ) -> None:
        self.font_size = font_size
        self.line_height = line_height
        self.char_width = char_width
        self.background_color = background_color
        self.text_color = text_color
        self.cursor_color = cursor_color
        self.selection_color = selection_color
        self.gutter_width = gutter_width
        self.gutter_background_color = gutter_background_color
        self.line_number_color = line_number_color
        self.current_line_number_color = current_line_number_color
        self.gutter_padding = gutter_padding

        self.scrollbar_width = DEFAULT_SCROLLBAR_WIDTH
        self.scrollbar_track_color = SCROLLBAR_TRACK_COLOR
        self.scrollbar_thumb_color = SCROLLBAR_THUMB_COLOR
        self.min_scrollbar_thumb_size = DEFAULT_MIN_THUMB_SIZE
        self.cursor_width = CURSOR_WIDTH
        self.tab_width = get_tab_width(char_width)

        self._last_view: tuple[tuple[float, float], tuple[float, float]] | None = None
        self._last_cursor_position: Position | None = None
        self._last_selection: Selection | None = None
        self._last_scrollbars: tuple[ScrollbarInfo, ScrollbarInfo] | None = None
        self._last_content_dimensions: tuple[float, float] | None = None
        self._frame_counter = 0
        self._last_render_frame = 0
        self._cached_max_line_width: float | None = None

    def render(
        self,
        lines: Sequence[str],
        cursor_position: Position,
        selection: Selection | None,
        viewport: Viewport,
        bounds: Rectangle,
    ) -> list[DrawOp]:
        """Return the operations that draw this frame, in painting order.

        When nothing but the cursor changed since the previous frame only the
        cursor is drawn, and nothing at all if it did not move either.
        """
        self._frame_counter += 1

        if (
            not self._full_render_needed(viewport, selection)
            and self._last_render_frame == self._frame_counter - 1
        ):
            ops: list[DrawOp] = []
            if self._last_cursor_position != cursor_position:
                ops.extend(self._cursor_ops(lines, cursor_position, viewport, bounds))
                self._last_cursor_position = cursor_position
            return ops

        ops = self._render_full(lines, cursor_position, selection, viewport, bounds)

        self._last_view = (viewport.scroll_offset, viewport.size)
        self._last_selection = selection
        self._last_cursor_position = cursor_position
        self._last_render_frame = self._frame_counter
        return ops

    def calculate_content_dimensions(self, lines: Sequence[str]) -> tuple[float, float]:
        """Return ``(width, height)`` of the content, caching the width."""
        content_height = len(lines) * self.line_height
        if self._cached_max_line_width is None:
            max_width = calculate_max_content_width(lines, self.char_width, MAX_LINES_FOR_WIDTH)
            self._cached_max_line_width = max_width - self.char_width * 2.0
            return max_width, content_height
        return self._cached_max_line_width + self.char_width * 2.0, content_height

    def invalidate_content_cache(self) -> None:
        """Forget the cached content width after the text changed."""
        self._cached_max_line_width = None

    def get_max_content_width(self) -> float | None:
        """Return the cached content width with padding, if one is known."""
        if self._cached_max_line_width is None:
            return None
        return self._cached_max_line_width + self.char_width * 2.0

    def _full_render_needed(self, viewport: Viewport, selection: Selection | None) -> bool:
        if self._last_view is None:
            return True
        last_scroll, last_size = self._last_view
        if last_scroll != viewport.scroll_offset or last_size != viewport.size:
            return True
        return self._last_selection != selection

    def _render_full(
        self,
        lines: Sequence[str],
        cursor_position: Position,
        selection: Selection | None,
        viewport: Viewport,
        bounds: Rectangle,
    ) -> list[DrawOp]:
        content_dimensions = self.calculate_content_dimensions(lines)
        vertical, horizontal = self._scrollbars(viewport, bounds, content_dimensions)
        text_bounds = editor_content_bounds(
            bounds, self.gutter_width, vertical.visible, horizontal.visible, self.scrollbar_width
        )

        ops: list[DrawOp] = [QuadOp(bounds, self.background_color)]
        ops.extend(self._gutter_ops(bounds, viewport, cursor_position))

        visible = [
            (lines[partial.line_index], partial)
            for partial in viewport.partial_lines
            if partial.line_index < len(lines)
        ]
        text_ops, selection_quads = self._line_ops(visible, text_bounds, viewport, selection)
        ops.extend(selection_quads)
        ops.extend(text_ops)
        ops.extend(self._cursor_ops(lines, cursor_position, viewport, text_bounds))
        ops.extend(self._scrollbar_ops(vertical, horizontal))

        self._last_scrollbars = (vertical, horizontal)
        self._last_content_dimensions = content_dimensions
        return ops

    def _scrollbars(
        self,
        viewport: Viewport,
        bounds: Rectangle,
        content_dimensions: tuple[float, float],
    ) -> tuple[ScrollbarInfo, ScrollbarInfo]:
        content_width, content_height = content_dimensions
        if (
            self._last_content_dimensions is not None
            and self._last_scrollbars is not None
            and self._last_view is not None
        ):
            last_width, last_height = self._last_content_dimensions
            last_size = self._last_view[1]
            if (
                abs(last_width - content_width) < 1.0
                and abs(last_height - content_height) < 1.0
                and abs(last_size[0] - viewport.size[0]) < 1.0
                and abs(last_size[1] - viewport.size[1]) < 1.0
            ):
                return self._last_scrollbars
        return compute_scrollbars(
            viewport,
            bounds,
            content_width,
            content_height,
            self.scrollbar_width,
            self.min_scrollbar_thumb_size,
        )

    def _line_ops(
        self,
        visible: list[tuple[str, PartialLineView]],
        bounds: Rectangle,
        viewport: Viewport,
        selection: Selection | None,
    ) -> tuple[list[TextOp], list[QuadOp]]:
        scroll_x = viewport.scroll_offset[0]
        text_ops: list[TextOp] = []
        selection_quads: list[QuadOp] = []

        for line_content, partial in visible:
            visible_height = self.line_height - partial.clip_top - partial.clip_bottom
            if visible_height <= 0.0:
                continue

            y = bounds.y + partial.y_offset + partial.clip_top
            x = bounds.x - scroll_x
            column_view = calculate_visible_columns(
                line_content, scroll_x, viewport.size[0], self.char_width, self.tab_width
            )
            if column_view is None:
                content, text_x, text_width = line_content, x, bounds.width
            else:
                content = extract_visible_line_content(line_content, column_view)
                text_x = x + column_view.x_offset
                text_width = column_view.visible_width

            text_ops.append(
                TextOp(
                    content=content,
                    position=Point(text_x, y),
                    bounds=Rectangle(text_x, y, text_width, visible_height),
                    color=self.text_color,
                    font_size=self.font_size,
                    line_height=self.line_height,
                )
            )

            quad = self._selection_quad(
                line_content, partial.line_index, selection, x, y, visible_height
            )
            if quad is not None:
                selection_quads.append(quad)

        return text_ops, selection_quads

    def _selection_quad(
        self,
        line_content: str,
        line_index: int,
        selection: Selection | None,
        x: float,
        y: float,
        height: float,
    ) -> QuadOp | None:
        if selection is None or not selection.start.line <= line_index <= selection.end.line:
            return None
        start_col = selection.start.column if line_index == selection.start.line else 0
        end_col = selection.end.column if line_index == selection.end.line else len(line_content)
        start_x = calculate_column_x_position(start_col, line_content, self.char_width)
        end_x = calculate_column_x_position(end_col, line_content, self.char_width)
        width = end_x - start_x
        if width <= 0.0:
            return None
        return QuadOp(Rectangle(start_x + x, y, width, height), self.selection_color)

    def _cursor_ops(
        self,
        lines: Sequence[str],
        cursor_position: Position,
        viewport: Viewport,
        bounds: Rectangle,
    ) -> list[QuadOp]:
        scroll_x, scroll_y = viewport.scroll_offset
        cursor_y = cursor_position.line * self.line_height - scroll_y
        if cursor_position.line < len(lines):
            column_x = calculate_column_x_position(
                cursor_position.column, lines[cursor_position.line], self.char_width
            )
        else:
            column_x = cursor_position.column * self.char_width
        cursor_x = column_x - scroll_x

        if (
            -self.cursor_width <= cursor_x <= bounds.width
            and -self.line_height <= cursor_y <= bounds.height
        ):
            return [
                QuadOp(
                    Rectangle(
                        bounds.x + cursor_x, bounds.y + cursor_y, self.cursor_width, self.line_height
                    ),
                    self.cursor_color,
                )
            ]
        return []

    def _gutter_ops(
        self, bounds: Rectangle, viewport: Viewport, cursor_position: Position
    ) -> list[DrawOp]:
        if self.gutter_width <= 0.0:
            return []

        ops: list[DrawOp] = [
            QuadOp(
                Rectangle(bounds.x, bounds.y, self.gutter_width, bounds.height),
                self.gutter_background_color,
            )
        ]
        for partial in viewport.partial_lines:
            y = bounds.y + partial.y_offset
            if y + self.line_height < bounds.y or y > bounds.y + bounds.height:
                continue
            color = (
                self.current_line_number_color
                if partial.line_index == cursor_position.line
                else self.line_number_color
            )
            position = Point(bounds.x + self.gutter_padding, y)
            ops.append(
                TextOp(
                    content=str(partial.line_index + 1),
                    position=position,
                    bounds=Rectangle(
                        position.x,
                        position.y,
                        self.gutter_width - self.gutter_padding,
                        self.line_height,
                    ),
                    color=color,
                    font_size=self.font_size,
                    line_height=self.line_height,
                )
            )
        return ops

    def _scrollbar_ops(self, vertical: ScrollbarInfo, horizontal: ScrollbarInfo) -> list[QuadOp]:
        ops: list[QuadOp] = []
        for bar in (vertical, horizontal):
            if bar.visible:
                ops.append(QuadOp(bar.track_bounds, self.scrollbar_track_color))
                ops.append(QuadOp(bar.thumb_bounds, self.scrollbar_thumb_color))
        if vertical.visible and horizontal.visible:
            corner = Rectangle(
                vertical.track_bounds.x,
                horizontal.track_bounds.y,
                self.scrollbar_width,
                self.scrollbar_width,
            )
            ops.append(QuadOp(corner, self.scrollbar_track_color))
        return ops
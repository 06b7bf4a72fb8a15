"""The editor widget: hit testing, scrolling, mouse selection and drawing."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar, Union

from icedit_view.geometry import Color, Point, Position, Rectangle, Selection
from icedit_view.interaction import (
    HORIZONTAL_MARGIN_CHARS,
    VERTICAL_MARGIN_LINES,
    MoveCursorTo,
    SetSelection,
    clamp_scroll,
    compute_auto_scroll_delta,
    cursor_x_position,
    is_cursor_visible_with_margin,
)
from icedit_view.renderer import DrawOp, EditorRenderer
from icedit_view.utils import (
    calculate_char_dimensions,
    calculate_max_content_width,
    x_position_to_column,
)
from icedit_view.viewport import Viewport

Message = TypeVar("Message")
EditorMessage = Union[MoveCursorTo, SetSelection]

DEFAULT_FONT_SIZE = 14.0
DEFAULT_GUTTER_PADDING = 8.0
MAX_LINES_FOR_SCROLL_WIDTH = 1000
WHEEL_LINES_PER_NOTCH = 3.0
MIN_GUTTER_DIGITS = 2


class EditorWidget(Generic[Message]):
    """A text editor view over a list of lines.

    Event handlers return the messages the widget publishes, already passed
    through ``on_message``. Whenever the view must be repainted,
    ``redraw_requested`` is set; the caller clears it after drawing.
    """

    def __init__(
        self,
        lines: Sequence[str],
        cursor_position: Position,
        on_message: Callable[[EditorMessage], Message],
        selection: Selection | None = None,
    ) -> None:
        self.lines = lines
        self.cursor_position = cursor_position
        self.selection = selection
        self.on_message = on_message

        self._font_size = DEFAULT_FONT_SIZE
        self._char_width, self._line_height = calculate_char_dimensions(DEFAULT_FONT_SIZE)

        self.background_color = Color.from_rgb(0.15, 0.15, 0.15)
        self.text_color = Color.from_rgb(0.9, 0.9, 0.9)
        self.cursor_color = Color.from_rgb(1.0, 1.0, 1.0)
        self.selection_color = Color.from_rgba(0.3, 0.5, 1.0, 0.3)
        self.gutter_background_color = Color.from_rgba(0.2, 0.2, 0.2, 0.0)
        self.line_number_color = Color.from_rgb(0.7, 0.7, 0.7)
        self.current_line_number_color = Color.from_rgb(1.0, 0.8, 0.2)
        self.gutter_padding = DEFAULT_GUTTER_PADDING

        self.viewport = Viewport()
        self.redraw_requested = False
        self._bounds = Rectangle()
        self._is_dragging = False
        self._drag_start_position: Position | None = None
        self._current_mouse_position: Point | None = None
        self._auto_scroll_delta: tuple[float, float] = (0.0, 0.0)
        self._is_auto_scrolling = False

    # Configuration -------------------------------------------------------

    def font_size(self, size: float) -> EditorWidget[Message]:
        """Set the font size and the character cell size that follows from it."""
        self._font_size = size
        self._char_width, self._line_height = calculate_char_dimensions(size)
        self.viewport.set_char_dimensions(self._char_width, self._line_height)
        return self

    def colors(
        self, background: Color, text: Color, cursor: Color, selection: Color
    ) -> EditorWidget[Message]:
        """Set the main colours."""
        self.background_color = background
        self.text_color = text
        self.cursor_color = cursor
        self.selection_color = selection
        return self

    def gutter(
        self,
        gutter_background_color: Color,
        line_number_color: Color,
        current_line_number_color: Color,
        gutter_padding: float,
    ) -> EditorWidget[Message]:
        """Set the line-number gutter's colours and padding."""
        self.gutter_background_color = gutter_background_color
        self.line_number_color = line_number_color
        self.current_line_number_color = current_line_number_color
        self.gutter_padding = gutter_padding
        return self

    def calculate_gutter_width(self) -> float:
        """Return the gutter width: room for the line count's digits plus padding."""
        line_count = len(self.lines)
        digits = len(str(line_count)) if line_count > 0 else 1
        return max(MIN_GUTTER_DIGITS, digits) * self._char_width + self.gutter_padding * 2.0

    def char_dimensions(self) -> tuple[float, float]:
        """Return ``(char_width, line_height)``."""
        return self._char_width, self._line_height

    # State ---------------------------------------------------------------

    @property
    def bounds(self) -> Rectangle:
        """The widget's bounds in window coordinates."""
        return self._bounds

    @property
    def is_dragging(self) -> bool:
        """Whether a mouse selection is in progress."""
        return self._is_dragging

    @property
    def is_auto_scrolling(self) -> bool:
        """Whether dragging outside the bounds is scrolling the view."""
        return self._is_auto_scrolling

    @property
    def auto_scroll_delta(self) -> tuple[float, float]:
        """The scroll step applied on each auto-scroll tick."""
        return self._auto_scroll_delta

    def resize(self, bounds: Rectangle) -> None:
        """Place the widget at ``bounds``, resizing the viewport if the size changed."""
        size_changed = bounds.size() != self._bounds.size()
        self._bounds = bounds
        if size_changed:
            self.viewport.set_char_dimensions(self._char_width, self._line_height)
            self.viewport.set_size(bounds.width, bounds.height)

    # Hit testing ---------------------------------------------------------

    def point_to_position(self, point: Point) -> Position:
        """Map a point relative to the widget's top-left corner to a buffer position.

        Clicks in the gutter land at the start of the line.
        """
        gutter_width = self.calculate_gutter_width()
        adjusted_x = 0.0 if point.x < gutter_width else point.x - gutter_width
        target_y = point.y
        scroll_x, scroll_y = self.viewport.scroll_offset

        if self.viewport.partial_lines:
            line = 0
            for partial in self.viewport.partial_lines:
                line_top = partial.y_offset
                line_bottom = line_top + self._line_height
                if line_top <= target_y < line_bottom:
                    line = partial.line_index
                    break
                if target_y >= line_bottom:
                    line = partial.line_index
        else:
            line = int(max((point.y + scroll_y) / self._line_height, 0.0))

        if line < len(self.lines):
            column = x_position_to_column(adjusted_x + scroll_x, self.lines[line], self._char_width)
        else:
            column = 0
        return Position(line, column)

    def _relative(self, point: Point) -> Point:
        return Point(point.x - self._bounds.x, point.y - self._bounds.y)

    # Mouse ---------------------------------------------------------------

    def mouse_pressed(self, point: Point) -> list[Message]:
        """Start a selection at ``point`` (window coordinates) and move the cursor there."""
        if not self._bounds.contains(point):
            return []
        position = self.point_to_position(self._relative(point))
        self._is_dragging = True
        self._drag_start_position = position
        self._current_mouse_position = point
        messages = [self.on_message(MoveCursorTo(position))]
        self.ensure_cursor_visible()
        return messages

    def mouse_released(self) -> None:
        """End any selection drag and stop auto-scrolling."""
        self._is_dragging = False
        self._drag_start_position = None
        self._current_mouse_position = None
        self._is_auto_scrolling = False

    def mouse_moved(self, point: Point) -> list[Message]:
        """Track the pointer; while dragging, extend the selection or auto-scroll."""
        self._current_mouse_position = point
        if not self._is_dragging:
            return []
        if self._bounds.contains(point):
            self._is_auto_scrolling = False
            self._auto_scroll_delta = (0.0, 0.0)
            if self._drag_start_position is None:
                return []
            position = self.point_to_position(self._relative(point))
            return [self.on_message(SetSelection(self._drag_start_position, position))]
        self._update_auto_scroll_delta()
        return self._apply_auto_scroll_and_selection()

    def wheel_scrolled(self, x: float, y: float, in_lines: bool) -> None:
        """Scroll by a wheel delta given in lines or in pixels.

        The wheel is ignored while the pointer is known to be outside the widget.
        """
        if self._current_mouse_position is not None and not self._bounds.contains(
            self._current_mouse_position
        ):
            return
        if in_lines:
            dx = x * self._char_width * WHEEL_LINES_PER_NOTCH
            dy = y * self._line_height * WHEEL_LINES_PER_NOTCH
        else:
            dx, dy = x, y
        scroll_x, scroll_y = self.viewport.scroll_offset
        self._scroll_to((scroll_x - dx, scroll_y - dy))
        self.redraw_requested = True

    def tick(self) -> list[Message]:
        """Advance auto-scrolling by one step while a drag is outside the bounds."""
        if not (self._is_auto_scrolling and self._is_dragging):
            return []
        messages = self._apply_auto_scroll_and_selection()
        self.redraw_requested = True
        return messages

    def _update_auto_scroll_delta(self) -> None:
        delta = compute_auto_scroll_delta(self._current_mouse_position, self._bounds)
        self._auto_scroll_delta = delta
        self._is_auto_scrolling = delta != (0.0, 0.0)

    def _apply_auto_scroll_and_selection(self) -> list[Message]:
        if not self._is_auto_scrolling:
            return []
        scroll_x, scroll_y = self.viewport.scroll_offset
        dx, dy = self._auto_scroll_delta
        self._scroll_to((scroll_x + dx, scroll_y + dy))
        self.redraw_requested = True

        if self._current_mouse_position is None or self._drag_start_position is None:
            return []
        position = self.point_to_position(self._relative(self._current_mouse_position))
        return [self.on_message(SetSelection(self._drag_start_position, position))]

    def _content_size(self) -> tuple[float, float]:
        width = calculate_max_content_width(
            self.lines, self._char_width, MAX_LINES_FOR_SCROLL_WIDTH
        )
        return width, len(self.lines) * self._line_height

    def _clamped(self, offset: tuple[float, float]) -> tuple[float, float]:
        content_width, content_height = self._content_size()
        return clamp_scroll(offset, content_width, content_height, self._bounds)

    def _scroll_to(self, offset: tuple[float, float]) -> None:
        x, y = self._clamped(offset)
        self.viewport.set_scroll_offset(x, y)

    # Cursor visibility ---------------------------------------------------

    def ensure_cursor_visible(self) -> bool:
        """Scroll so the cursor sits inside the comfortable margins.

        Returns whether the scroll offset changed.
        """
        viewport = self.viewport
        cursor = self.cursor_position
        if is_cursor_visible_with_margin(
            self.lines, cursor, viewport, self._char_width, self._line_height
        ):
            return False

        cursor_y = cursor.line * self._line_height
        cursor_x = cursor_x_position(self.lines, cursor, self._char_width)
        scroll_x, scroll_y = viewport.scroll_offset
        width, height = viewport.size
        new_x, new_y = scroll_x, scroll_y
        changed = False

        margin_v = self._line_height * VERTICAL_MARGIN_LINES
        cursor_bottom = cursor_y + self._line_height
        if cursor_y < scroll_y + margin_v:
            new_y = max(cursor_y - margin_v, 0.0)
            changed = True
        elif cursor_bottom > scroll_y + height - margin_v:
            new_y = cursor_bottom + margin_v - height
            changed = True

        margin_h = self._char_width * HORIZONTAL_MARGIN_CHARS
        cursor_right = cursor_x + self._char_width
        if cursor_x < scroll_x + margin_h:
            new_x = max(cursor_x - margin_h, 0.0)
            changed = True
        elif cursor_right > scroll_x + width - margin_h:
            new_x = cursor_right + margin_h - width
            changed = True

        if not changed:
            return False
        clamped_x, clamped_y = self._clamped((new_x, new_y))
        if abs(clamped_x - scroll_x) > 0.1 or abs(clamped_y - scroll_y) > 0.1:
            viewport.set_scroll_offset(clamped_x, clamped_y)
            self.redraw_requested = True
            return True
        return False

    # Drawing -------------------------------------------------------------

    def draw(self) -> list[DrawOp]:
        """Return the draw operations for the current state."""
        renderer = EditorRenderer(
            self._font_size,
            self._line_height,
            self._char_width,
            self.background_color,
            self.text_color,
            self.cursor_color,
            self.selection_color,
            self.calculate_gutter_width(),
            self.gutter_background_color,
            self.line_number_color,
            self.current_line_number_color,
            self.gutter_padding,
        )
        return renderer.render(
            self.lines, self.cursor_position, self.selection, self.viewport, self._bounds
        )


def editor_widget(
    lines: Sequence[str],
    cursor_position: Position,
    on_message: Callable[[EditorMessage], Any],
) -> EditorWidget[Any]:
    """Return an editor widget with the default styling."""
    return EditorWidget(lines, cursor_position, on_message)


def styled_editor(
    lines: Sequence[str],
    cursor_position: Position,
    font_size: float,
    dark_theme: bool,
    on_message: Callable[[EditorMessage], Any],
) -> EditorWidget[Any]:
    """Return an editor widget styled for a dark or a light theme."""
    if dark_theme:
        colors = (
            Color.from_rgb(0.12, 0.12, 0.15),
            Color.from_rgb(0.9, 0.9, 0.9),
            Color.from_rgb(1.0, 1.0, 1.0),
            Color.from_rgba(0.3, 0.5, 1.0, 0.3),
        )
        gutter_colors = (
            Color.from_rgba(0.2, 0.2, 0.2, 0.0),
            Color.from_rgb(0.7, 0.7, 0.7),
            Color.from_rgb(1.0, 0.8, 0.2),
        )
    else:
        colors = (
            Color.from_rgb(1.0, 1.0, 1.0),
            Color.WHITE,
            Color.from_rgb(0.0, 0.0, 0.0),
            Color.from_rgba(0.3, 0.5, 1.0, 0.3),
        )
        gutter_colors = (
            Color.from_rgba(0.9, 0.9, 0.9, 0.0),
            Color.from_rgb(0.4, 0.4, 0.4),
            Color.from_rgb(0.8, 0.4, 0.0),
        )
    return (
        EditorWidget(lines, cursor_position, on_message)
        .font_size(font_size)
        .colors(*colors)
        .gutter(*gutter_colors, DEFAULT_GUTTER_PADDING)
    )
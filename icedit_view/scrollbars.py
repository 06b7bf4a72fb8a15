"""Scrollbar geometry and the layout of the text area beside them."""

from __future__ import annotations

from dataclasses import dataclass, field

from icedit_view.geometry import Rectangle
from icedit_view.viewport import Viewport

DEFAULT_SCROLLBAR_WIDTH = 12.0
DEFAULT_MIN_THUMB_SIZE = 16.0
GUTTER_SPACING = 4.0


@dataclass(frozen=True)
class ScrollbarInfo:
    """Where a scrollbar's track and thumb are, and how far it is scrolled."""

    visible: bool = False
    track_bounds: Rectangle = field(default_factory=Rectangle)
    thumb_bounds: Rectangle = field(default_factory=Rectangle)
    scroll_ratio: float = 0.0


def _ratio(offset: float, scroll_range: float) -> float:
    return offset / scroll_range if scroll_range > 0.0 else 0.0


def compute_scrollbars(
    viewport: Viewport,
    bounds: Rectangle,
    content_width: float,
    content_height: float,
    scrollbar_width: float = DEFAULT_SCROLLBAR_WIDTH,
    min_thumb_size: float = DEFAULT_MIN_THUMB_SIZE,
) -> tuple[ScrollbarInfo, ScrollbarInfo]:
    """Return ``(vertical, horizontal)`` scrollbars for the given content.

    A scrollbar is shown only when the content exceeds the viewport along
    its axis; when both are shown each track leaves room for the corner.
    """
    view_width, view_height = viewport.size
    scroll_x, scroll_y = viewport.scroll_offset
    right_edge = bounds.x + bounds.width - scrollbar_width
    bottom_edge = bounds.y + bounds.height - scrollbar_width

    vertical = ScrollbarInfo()
    if content_height > view_height:
        track_height = bounds.height - (scrollbar_width if content_width > view_width else 0.0)
        thumb_height = max(view_height / content_height * track_height, min_thumb_size)
        ratio = _ratio(scroll_y, content_height - view_height)
        thumb_y = ratio * (track_height - thumb_height)
        vertical = ScrollbarInfo(
            visible=True,
            track_bounds=Rectangle(right_edge, bounds.y, scrollbar_width, track_height),
            thumb_bounds=Rectangle(right_edge, bounds.y + thumb_y, scrollbar_width, thumb_height),
            scroll_ratio=ratio,
        )

    horizontal = ScrollbarInfo()
    if content_width > view_width:
        track_width = bounds.width - (scrollbar_width if vertical.visible else 0.0)
        thumb_width = max(view_width / content_width * track_width, min_thumb_size)
        ratio = _ratio(scroll_x, content_width - view_width)
        thumb_x = ratio * (track_width - thumb_width)
        horizontal = ScrollbarInfo(
            visible=True,
            track_bounds=Rectangle(bounds.x, bottom_edge, track_width, scrollbar_width),
            thumb_bounds=Rectangle(bounds.x + thumb_x, bottom_edge, thumb_width, scrollbar_width),
            scroll_ratio=ratio,
        )

    return vertical, horizontal


def editor_content_bounds(
    bounds: Rectangle,
    gutter_width: float,
    vertical_visible: bool,
    horizontal_visible: bool,
    scrollbar_width: float = DEFAULT_SCROLLBAR_WIDTH,
) -> Rectangle:
    """Return the text area: right of the gutter and clear of any scrollbars."""
    width_reduction = scrollbar_width if vertical_visible else 0.0
    height_reduction = scrollbar_width if horizontal_visible else 0.0
    gutter_offset = gutter_width + GUTTER_SPACING
    return Rectangle(
        bounds.x + gutter_offset,
        bounds.y,
        bounds.width - width_reduction - gutter_offset,
        bounds.height - height_reduction,
    )
import pytest

from icedit_view.geometry import Rectangle
from icedit_view.scrollbars import (
    DEFAULT_MIN_THUMB_SIZE,
    DEFAULT_SCROLLBAR_WIDTH,
    GUTTER_SPACING,
    ScrollbarInfo,
    compute_scrollbars,
    editor_content_bounds,
)
from icedit_view.viewport import Viewport

SW = DEFAULT_SCROLLBAR_WIDTH


def _setup(scroll=(0.0, 0.0)):
    viewport = Viewport()
    viewport.set_size(800.0, 600.0)
    viewport.set_scroll_offset(*scroll)
    bounds = Rectangle(10.0, 20.0, 800.0, 600.0)
    return viewport, bounds


def _inside(inner: Rectangle, outer: Rectangle) -> bool:
    eps = 1e-6
    return (
        inner.x >= outer.x - eps
        and inner.y >= outer.y - eps
        and inner.x + inner.width <= outer.x + outer.width + eps
        and inner.y + inner.height <= outer.y + outer.height + eps
    )


def test_defaults_match_source_constants():
    assert SW == 12.0
    assert DEFAULT_MIN_THUMB_SIZE == 16.0
    info = ScrollbarInfo()
    assert not info.visible
    assert info.scroll_ratio == 0.0
    assert info.track_bounds == Rectangle()


def test_no_scrollbars_when_content_fits():
    viewport, bounds = _setup()
    vertical, horizontal = compute_scrollbars(viewport, bounds, 400.0, 300.0)
    assert vertical == ScrollbarInfo()
    assert horizontal == ScrollbarInfo()


def test_vertical_only_at_top():
    viewport, bounds = _setup()
    vertical, horizontal = compute_scrollbars(viewport, bounds, 400.0, 1200.0)
    assert vertical.visible
    assert not horizontal.visible
    assert vertical.scroll_ratio == 0.0
    track = vertical.track_bounds
    assert track.x == bounds.x + bounds.width - SW
    assert track.y == bounds.y
    assert track.height == bounds.height
    assert track.width == SW
    assert vertical.thumb_bounds.y == track.y
    assert _inside(vertical.thumb_bounds, track)


def test_vertical_thumb_reaches_bottom_when_fully_scrolled():
    viewport, bounds = _setup(scroll=(0.0, 600.0))
    vertical, _ = compute_scrollbars(viewport, bounds, 400.0, 1200.0)
    assert vertical.scroll_ratio == pytest.approx(1.0)
    thumb, track = vertical.thumb_bounds, vertical.track_bounds
    assert thumb.y + thumb.height == pytest.approx(track.y + track.height)


def test_horizontal_ratio_halfway():
    viewport, bounds = _setup(scroll=(400.0, 0.0))
    vertical, horizontal = compute_scrollbars(viewport, bounds, 1600.0, 300.0)
    assert not vertical.visible
    assert horizontal.visible
    assert horizontal.scroll_ratio == pytest.approx(0.5)
    track = horizontal.track_bounds
    assert track.y == bounds.y + bounds.height - SW
    assert track.width == bounds.width
    assert _inside(horizontal.thumb_bounds, track)


def test_both_scrollbars_leave_room_for_corner():
    viewport, bounds = _setup()
    vertical, horizontal = compute_scrollbars(viewport, bounds, 1600.0, 1200.0)
    assert vertical.visible and horizontal.visible
    assert vertical.track_bounds.height == bounds.height - SW
    assert horizontal.track_bounds.width == bounds.width - SW
    assert vertical.track_bounds.y + vertical.track_bounds.height == horizontal.track_bounds.y
    assert horizontal.track_bounds.x + horizontal.track_bounds.width == vertical.track_bounds.x


def test_thumb_never_smaller_than_minimum():
    viewport, bounds = _setup()
    vertical, horizontal = compute_scrollbars(viewport, bounds, 1e7, 1e7)
    assert vertical.thumb_bounds.height == DEFAULT_MIN_THUMB_SIZE
    assert horizontal.thumb_bounds.width == DEFAULT_MIN_THUMB_SIZE


def test_custom_scrollbar_width_and_min_thumb():
    viewport, bounds = _setup()
    vertical, _ = compute_scrollbars(viewport, bounds, 100.0, 1e7, 20.0, 40.0)
    assert vertical.track_bounds.width == 20.0
    assert vertical.thumb_bounds.height == 40.0


@pytest.mark.parametrize("scroll_y", [0.0, 150.0, 300.0, 450.0, 600.0])
def test_thumb_stays_within_track(scroll_y):
    viewport, bounds = _setup(scroll=(0.0, scroll_y))
    vertical, _ = compute_scrollbars(viewport, bounds, 100.0, 1200.0)
    assert 0.0 <= vertical.scroll_ratio <= 1.0
    assert _inside(vertical.thumb_bounds, vertical.track_bounds)


def test_editor_content_bounds_without_scrollbars():
    bounds = Rectangle(10.0, 20.0, 800.0, 600.0)
    content = editor_content_bounds(bounds, 40.0, False, False)
    assert GUTTER_SPACING == 4.0
    assert content.x == bounds.x + 40.0 + GUTTER_SPACING
    assert content.y == bounds.y
    assert content.width == bounds.width - 40.0 - GUTTER_SPACING
    assert content.height == bounds.height


def test_editor_content_bounds_with_scrollbars():
    bounds = Rectangle(10.0, 20.0, 800.0, 600.0)
    plain = editor_content_bounds(bounds, 40.0, False, False)
    both = editor_content_bounds(bounds, 40.0, True, True)
    assert both.x == plain.x
    assert both.width == plain.width - SW
    assert both.height == plain.height - SW
    only_v = editor_content_bounds(bounds, 40.0, True, False)
    assert only_v.height == plain.height
    assert only_v.width == plain.width - SW
from icedit_view.columns import calculate_visible_columns, extract_visible_line_content
from icedit_view.geometry import Color, Position, Rectangle, Selection
from icedit_view.renderer import (
    SCROLLBAR_THUMB_COLOR,
    SCROLLBAR_TRACK_COLOR,
    EditorRenderer,
    QuadOp,
    TextOp,
)
from icedit_view.utils import (
    calculate_column_range_width,
    calculate_column_x_position,
    calculate_max_content_width,
)
from icedit_view.viewport import Viewport

CHAR = 8.0
LINE = 18.0
BACKGROUND = Color(0.1, 0.0, 0.0)
TEXT = Color(0.0, 0.1, 0.0)
CURSOR = Color(0.0, 0.0, 0.1)
SELECTION = Color(0.2, 0.0, 0.0)
GUTTER_BG = Color(0.0, 0.2, 0.0)
LINE_NUMBER = Color(0.0, 0.0, 0.2)
CURRENT_LINE_NUMBER = Color(0.3, 0.0, 0.0)
BOUNDS = Rectangle(0.0, 0.0, 400.0, 180.0)


def make_renderer(gutter_width=0.0):
    return EditorRenderer(
        14.0, LINE, CHAR, BACKGROUND, TEXT, CURSOR, SELECTION,
        gutter_width, GUTTER_BG, LINE_NUMBER, CURRENT_LINE_NUMBER, 8.0,
    )


def make_viewport(scroll=(0.0, 0.0)):
    viewport = Viewport()
    viewport.set_char_dimensions(CHAR, LINE)
    viewport.set_size(BOUNDS.width, BOUNDS.height)
    viewport.set_scroll_offset(*scroll)
    return viewport


def text_ops(ops, color=TEXT):
    return [op for op in ops if isinstance(op, TextOp) and op.color == color]


def quads(ops, color):
    return [op for op in ops if isinstance(op, QuadOp) and op.color == color]


def test_background_is_drawn_first():
    ops = make_renderer().render(["hello"], Position(0, 0), None, make_viewport(), BOUNDS)
    assert ops[0] == QuadOp(BOUNDS, BACKGROUND)


def test_text_ops_hold_every_visible_line():
    lines = ["alpha\n", "beta\n", "gamma"]
    viewport = make_viewport()
    ops = make_renderer().render(lines, Position(0, 0), None, viewport, BOUNDS)
    texts = text_ops(ops)
    assert [op.content for op in texts] == lines
    for op, partial in zip(texts, viewport.partial_lines):
        assert op.position.y == BOUNDS.y + partial.y_offset + partial.clip_top


def test_second_identical_frame_draws_nothing():
    renderer = make_renderer()
    viewport = make_viewport()
    renderer.render(["hello"], Position(0, 0), None, viewport, BOUNDS)
    assert renderer.render(["hello"], Position(0, 0), None, viewport, BOUNDS) == []


def test_moved_cursor_alone_redraws_only_cursor():
    renderer = make_renderer()
    viewport = make_viewport()
    renderer.render(["hello"], Position(0, 0), None, viewport, BOUNDS)
    ops = renderer.render(["hello"], Position(0, 2), None, viewport, BOUNDS)
    assert len(ops) == 1
    assert ops[0].color == CURSOR
    assert ops[0].bounds.x == calculate_column_x_position(2, "hello", CHAR)


def test_cursor_is_drawn_in_full_frame():
    ops = make_renderer().render(["a\tb"], Position(0, 2), None, make_viewport(), BOUNDS)
    cursor = quads(ops, CURSOR)
    assert len(cursor) == 1
    assert cursor[0].bounds.height == LINE


def test_single_line_selection_width():
    ops = make_renderer().render(
        ["hello"], Position(0, 0), Selection(Position(0, 1), Position(0, 3)), make_viewport(), BOUNDS
    )
    selected = quads(ops, SELECTION)
    assert len(selected) == 1
    assert selected[0].bounds.width == calculate_column_range_width(1, 3, "hello", CHAR)


def test_multi_line_selection_covers_each_line():
    lines = ["ab\n", "cd\n", "ef"]
    selection = Selection(Position(0, 1), Position(2, 1))
    ops = make_renderer().render(lines, Position(0, 0), selection, make_viewport(), BOUNDS)
    selected = quads(ops, SELECTION)
    assert len(selected) == 3
    assert selected[1].bounds.width == calculate_column_x_position(3, "cd\n", CHAR)


def test_selections_are_painted_before_text():
    ops = make_renderer().render(
        ["hello"], Position(0, 0), Selection(Position(0, 0), Position(0, 4)), make_viewport(), BOUNDS
    )
    selection_index = ops.index(quads(ops, SELECTION)[0])
    text_index = ops.index(text_ops(ops)[0])
    assert selection_index < text_index


def test_short_content_has_no_scrollbars():
    ops = make_renderer().render(["hello"], Position(0, 0), None, make_viewport(), BOUNDS)
    assert quads(ops, SCROLLBAR_TRACK_COLOR) == []
    assert quads(ops, SCROLLBAR_THUMB_COLOR) == []


def test_tall_content_shows_vertical_scrollbar():
    lines = [f"line {n}\n" for n in range(100)]
    ops = make_renderer().render(lines, Position(0, 0), None, make_viewport(), BOUNDS)
    assert len(quads(ops, SCROLLBAR_TRACK_COLOR)) == 1
    thumbs = quads(ops, SCROLLBAR_THUMB_COLOR)
    assert len(thumbs) == 1
    assert thumbs[0].bounds.height < BOUNDS.height


def test_gutter_numbers_highlight_current_line():
    lines = ["a\n", "b\n", "c"]
    viewport = make_viewport()
    ops = make_renderer(gutter_width=40.0).render(lines, Position(1, 0), None, viewport, BOUNDS)
    numbers = [
        op for op in ops
        if isinstance(op, TextOp) and op.color in (LINE_NUMBER, CURRENT_LINE_NUMBER)
    ]
    assert len(numbers) == len(viewport.partial_lines)
    assert [op.content for op in numbers[:3]] == ["1", "2", "3"]
    assert numbers[1].color == CURRENT_LINE_NUMBER
    assert numbers[0].color == LINE_NUMBER
    assert quads(ops, GUTTER_BG)[0].bounds.width == 40.0


def test_horizontal_scroll_clips_text():
    line = "0123456789" * 10
    viewport = make_viewport(scroll=(80.0, 0.0))
    ops = make_renderer().render([line], Position(0, 0), None, viewport, BOUNDS)
    view = calculate_visible_columns(line, 80.0, BOUNDS.width, CHAR, CHAR * 4)
    assert text_ops(ops)[0].content == extract_visible_line_content(line, view)
    assert text_ops(ops)[0].content != line


def test_content_dimensions_and_cache():
    lines = ["short\n", "a much longer line\n", "x"]
    renderer = make_renderer()
    assert renderer.get_max_content_width() is None
    width, height = renderer.calculate_content_dimensions(lines)
    assert height == len(lines) * LINE
    assert width == calculate_max_content_width(lines, CHAR, 2000)
    assert renderer.get_max_content_width() == width
    assert renderer.calculate_content_dimensions(["z"]) == (width, LINE)
    renderer.invalidate_content_cache()
    assert renderer.get_max_content_width() is None
    assert renderer.calculate_content_dimensions(["z"])[0] == calculate_max_content_width(["z"], CHAR, 2000)
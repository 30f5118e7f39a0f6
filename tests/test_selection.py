import pytest

from imgview.geometry import Corner, Point, Rect
from imgview.selection import LockMode, Operation, SelectionRect, opposite_corner


@pytest.fixture
def events():
    return []


@pytest.fixture
def selection(events):
    return SelectionRect(lambda rect, visible: events.append((rect, visible)))


def draw(selection, start, end):
    selection.set_selection(Operation.BEGIN_DRAG, start)
    selection.set_selection(Operation.DRAG, end)
    selection.set_selection(Operation.END_DRAG, end)


@pytest.mark.parametrize(
    "corner, expected",
    [
        (Corner.TOP_LEFT, Corner.BOTTOM_RIGHT),
        (Corner.BOTTOM_RIGHT, Corner.TOP_LEFT),
        (Corner.TOP_RIGHT, Corner.BOTTOM_LEFT),
        (Corner.BOTTOM_LEFT, Corner.TOP_RIGHT),
    ],
)
def test_opposite_corner(corner, expected):
    assert opposite_corner(corner) is expected
    assert opposite_corner(expected) is corner


def test_opposite_of_no_corner_raises():
    with pytest.raises(ValueError):
        opposite_corner(Corner.NONE)


def test_draw_new_selection(selection, events):
    draw(selection, Point(10, 10), Point(110, 60))
    assert selection.rect == Rect(Point(10, 10), Point(110, 60))
    assert selection.operation is Operation.END_DRAG
    assert events[-1] == (Rect(Point(10, 10), Point(110, 60)), True)


def test_draw_is_normalised_when_dragging_up_left(selection):
    draw(selection, Point(110, 60), Point(10, 10))
    assert selection.rect == Rect(Point(10, 10), Point(110, 60))


def test_drag_without_size_in_one_axis_does_nothing(selection, events):
    selection.set_selection(Operation.BEGIN_DRAG, Point(10, 10))
    selection.set_selection(Operation.DRAG, Point(10, 50))
    assert events == []
    assert selection.rect == Rect()
    assert selection.operation is Operation.DRAG


def test_no_op_keeps_state(selection):
    selection.set_selection(Operation.NO_OP, Point(5, 5))
    assert selection.operation is Operation.NO_OP


def test_end_drag_only_after_drag(selection):
    selection.set_selection(Operation.BEGIN_DRAG, Point(10, 10))
    selection.set_selection(Operation.END_DRAG, Point(10, 10))
    assert selection.operation is Operation.BEGIN_DRAG


def test_closest_corner(selection):
    selection.update_selection(Rect(Point(0, 0), Point(10, 10)))
    assert selection.closest_corner(Point(9, 1)) is Corner.TOP_RIGHT
    assert selection.closest_corner(Point(1, 9)) is Corner.BOTTOM_LEFT
    assert selection.closest_corner(Point(-3, -3)) is Corner.TOP_LEFT
    assert selection.closest_corner(Point(12, 12)) is Corner.BOTTOM_RIGHT


def test_move_from_centre(selection):
    draw(selection, Point(10, 10), Point(110, 60))
    selection.set_selection(Operation.BEGIN_DRAG, Point(60, 35))
    assert selection.operation is Operation.END_DRAG
    selection.set_selection(Operation.DRAG, Point(70, 45))
    assert selection.rect == Rect(Point(10, 10), Point(110, 60)).translated(Point(10, 10))
    assert selection.rect.width == 100
    assert selection.rect.height == 50


def test_resize_from_corner(selection):
    draw(selection, Point(10, 10), Point(110, 60))
    selection.set_selection(Operation.BEGIN_DRAG, Point(108, 58))
    assert selection.operation is Operation.BEGIN_DRAG
    assert selection.lock_mode is LockMode.NO_LOCK
    selection.set_selection(Operation.DRAG, Point(150, 80))
    assert selection.rect == Rect(Point(10, 10), Point(150, 80))


def test_resize_from_lower_edge_locks_width(selection):
    draw(selection, Point(10, 10), Point(110, 60))
    selection.set_selection(Operation.BEGIN_DRAG, Point(60, 57))
    assert selection.lock_mode is LockMode.LOCK_WIDTH
    selection.set_selection(Operation.DRAG, Point(200, 90))
    assert selection.rect.top_left.x == 10
    assert selection.rect.bottom_right.x == 110
    assert selection.rect.bottom_right.y == 90


def test_click_outside_starts_new_selection(selection):
    draw(selection, Point(10, 10), Point(110, 60))
    selection.set_selection(Operation.BEGIN_DRAG, Point(500, 500))
    assert selection.operation is Operation.BEGIN_DRAG
    selection.set_selection(Operation.DRAG, Point(520, 530))
    assert selection.rect == Rect(Point(500, 500), Point(520, 530))


def test_cancel_resets(selection, events):
    draw(selection, Point(10, 10), Point(110, 60))
    selection.set_selection(Operation.CANCEL_SELECTION, Point(0, 0))
    assert selection.rect == Rect()
    assert selection.operation is Operation.NO_OP
    assert events[-1] == (Rect(), False)


def test_update_selection_notifies(selection, events):
    rect = Rect(Point(1, 2), Point(3, 4))
    selection.update_selection(rect)
    assert selection.rect == rect
    assert events == [(rect, True)]
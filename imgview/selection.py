"""Interactive rubber-band selection rectangle: draw, resize by corner or edge, move."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from imgview.geometry import Corner, Point, Rect

SelectionChangedCallback = Callable[[Rect, bool], None]

# Corner dragging
_CORNER_DRAG_FACTOR = 6
_INFLATION_FACTOR = 0.1
_MIN_INFLATION = 5

# Edge dragging
_EDGE_DRAG_FACTOR = 8
_MIN_CAPTURE_WIDTH = 8

_OPPOSITE = {
    Corner.TOP_RIGHT: Corner.BOTTOM_LEFT,
    Corner.BOTTOM_LEFT: Corner.TOP_RIGHT,
    Corner.TOP_LEFT: Corner.BOTTOM_RIGHT,
    Corner.BOTTOM_RIGHT: Corner.TOP_LEFT,
}

# Order in which corners are compared; the first closest one wins.
_CORNER_ORDER = (
    Corner.TOP_LEFT,
    Corner.BOTTOM_RIGHT,
    Corner.TOP_RIGHT,
    Corner.BOTTOM_LEFT,
)


class Operation(Enum):
    NO_OP = "no_op"
    BEGIN_DRAG = "begin_drag"
    DRAG = "drag"
    END_DRAG = "end_drag"
    CANCEL_SELECTION = "cancel_selection"


class LockMode(Enum):
    NO_LOCK = "no_lock"
    LOCK_WIDTH = "lock_width"
    LOCK_HEIGHT = "lock_height"


def opposite_corner(corner: Corner) -> Corner:
    """Return the diagonally opposite corner."""
    try:
        return _OPPOSITE[corner]
    except KeyError:
        raise ValueError("corner must be set to get opposite corner") from None


class SelectionRect:
    """Tracks a selection rectangle driven by mouse operations in window space."""

    def __init__(self, callback: Optional[SelectionChangedCallback] = None) -> None:
        self._callback = callback
        self._operation = Operation.NO_OP
        self._rect = Rect()
        self._start = Point(0, 0)
        self._end = Point(0, 0)
        self._lock_mode = LockMode.NO_LOCK

    @property
    def operation(self) -> Operation:
        return self._operation

    @property
    def rect(self) -> Rect:
        return self._rect

    @property
    def lock_mode(self) -> LockMode:
        return self._lock_mode

    def _notify(self, visible: bool) -> None:
        if self._callback is not None:
            self._callback(self._rect, visible)

    def closest_corner(self, point: Point) -> Corner:
        """Corner of the selection nearest to ``point``."""
        return min(
            _CORNER_ORDER,
            key=lambda corner: point.distance_squared(self._rect.corner(corner)),
        )

    def set_selection(self, operation: Operation, position: Point) -> None:
        """Apply a mouse operation at ``position`` (window coordinates)."""
        if operation is Operation.NO_OP:
            return
        if operation is Operation.BEGIN_DRAG:
            self._begin_drag(position)
        elif operation is Operation.DRAG:
            self._drag(position)
        elif operation is Operation.END_DRAG:
            if self._operation is Operation.DRAG:
                self._operation = Operation.END_DRAG
        elif operation is Operation.CANCEL_SELECTION:
            self._rect = Rect()
            self._start = Point(0, 0)
            self._end = Point(0, 0)
            self._operation = Operation.NO_OP
            self._lock_mode = LockMode.NO_LOCK
            self._notify(False)

    def update_selection(self, rect: Rect) -> None:
        """Replace the selection rectangle and report it as visible."""
        self._rect = rect
        self._notify(True)

    def _begin_drag(self, position: Point) -> None:
        if self._operation is Operation.NO_OP:
            self._start = position
            self._operation = Operation.BEGIN_DRAG
            return
        if self._operation is not Operation.END_DRAG:
            return

        rect = self._rect
        width, height = rect.width, rect.height
        inflated = rect.inflate(
            max(_MIN_INFLATION, int(width * _INFLATION_FACTOR)),
            max(_MIN_INFLATION, int(height * _INFLATION_FACTOR)),
        )

        if not inflated.contains(position):
            # Outside: start a new selection.
            self._start = position
            self._operation = Operation.BEGIN_DRAG
            self._lock_mode = LockMode.NO_LOCK
            return

        corner = self.closest_corner(position)
        distance = (inflated.corner(corner) - position).abs()
        if distance.x < width // _CORNER_DRAG_FACTOR and distance.y < height // _CORNER_DRAG_FACTOR:
            self._operation = Operation.BEGIN_DRAG
            self._start = rect.corner(opposite_corner(corner))
            self._lock_mode = LockMode.NO_LOCK
            return

        capture_width = max(_MIN_CAPTURE_WIDTH, width // _EDGE_DRAG_FACTOR)
        capture_height = max(_MIN_CAPTURE_WIDTH, height // _EDGE_DRAG_FACTOR)
        minimum = rect.top_left
        maximum = rect.bottom_right

        if maximum.y - position.y < capture_height:
            self._resize_from(rect.corner(Corner.TOP_LEFT), LockMode.LOCK_WIDTH)
        elif position.y - minimum.y < capture_height:
            self._resize_from(rect.corner(Corner.BOTTOM_RIGHT), LockMode.LOCK_WIDTH)
        elif maximum.x - position.x < capture_width:
            self._resize_from(rect.corner(Corner.TOP_LEFT), LockMode.LOCK_HEIGHT)
        elif position.x - minimum.x < capture_width:
            self._resize_from(rect.corner(Corner.TOP_RIGHT), LockMode.LOCK_HEIGHT)
        else:
            # Move the whole rectangle.
            self._end = position
            self._lock_mode = LockMode.NO_LOCK

    def _resize_from(self, anchor: Point, lock_mode: LockMode) -> None:
        self._operation = Operation.BEGIN_DRAG
        self._start = anchor
        self._lock_mode = lock_mode

    def _drag(self, position: Point) -> None:
        if self._operation in (Operation.BEGIN_DRAG, Operation.DRAG):
            top_left = self._rect.top_left
            bottom_right = self._rect.bottom_right
            diff = (position - self._start).abs()
            if diff.x != 0 and diff.y != 0:
                lock = self._lock_mode
                p0 = Point(
                    top_left.x if lock is LockMode.LOCK_WIDTH else min(position.x, self._start.x),
                    top_left.y if lock is LockMode.LOCK_HEIGHT else min(position.y, self._start.y),
                )
                p1 = Point(
                    bottom_right.x if lock is LockMode.LOCK_WIDTH else max(position.x, self._start.x),
                    bottom_right.y if lock is LockMode.LOCK_HEIGHT else max(position.y, self._start.y),
                )
                self._rect = Rect(p0, p1)
                self._notify(True)
            self._operation = Operation.DRAG
        elif self._operation is Operation.END_DRAG:
            self._rect = self._rect.translated(position - self._end)
            self._end = position
            self._notify(True)
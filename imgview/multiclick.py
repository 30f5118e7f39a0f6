"""Detection of single, double and multiple mouse clicks."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Hashable, Optional


class ButtonState(Enum):
    NOT_SET = "not_set"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class ClickEvent:
    button: Hashable
    click_count: int


@dataclass
class _ButtonData:
    timestamp_last_down: int = 0
    tap_counter: int = 0
    pos_x: int = 0
    pos_y: int = 0
    state: ButtonState = ButtonState.UP


def _int16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _default_clock_ms() -> float:
    return time.monotonic() * 1000.0


class MultiClickHandler:
    """Groups rapid presses of a mouse button into one click event with a count.

    A click is reported once the button has not been pressed again within
    ``multipress_rate`` milliseconds, or immediately when ``max_taps`` presses
    are reached. Presses farther than the click radius from the first press
    restart the count. The owner calls :meth:`process_pending` after
    :attr:`due_in_ms` milliseconds have passed.
    """

    max_click_radius = 10

    def __init__(
        self,
        multipress_rate: int = 250,
        max_taps: int = 3,
        *,
        on_click: Optional[Callable[[ClickEvent], None]] = None,
        clock_ms: Callable[[], float] = _default_clock_ms,
    ) -> None:
        self.multipress_rate = multipress_rate
        self.max_taps = max_taps
        self._on_click = on_click
        self._clock_ms = clock_ms
        self._start = clock_ms()
        self._pos_x = 0
        self._pos_y = 0
        self._buttons: Dict[Hashable, _ButtonData] = {}
        self._pressed: Dict[Hashable, None] = {}
        self._due_in_ms: Optional[int] = None

    @property
    def due_in_ms(self) -> Optional[int]:
        """Delay until pending clicks should be processed, or None if none are."""
        return self._due_in_ms

    @property
    def position(self) -> tuple:
        return self._pos_x, self._pos_y

    def _now(self) -> int:
        return int(self._clock_ms() - self._start)

    def _data(self, button: Hashable) -> _ButtonData:
        return self._buttons.setdefault(button, _ButtonData())

    def _raise(self, button: Hashable, count: int) -> None:
        if self._on_click is not None:
            self._on_click(ClickEvent(button, count))

    def set_mouse_delta(self, dx: int, dy: int) -> None:
        """Accumulate relative mouse movement."""
        self._pos_x = _int16(self._pos_x + dx)
        self._pos_y = _int16(self._pos_y + dy)

    def set_button_state(self, button: Hashable, state: ButtonState) -> None:
        """Feed a button transition."""
        if state is ButtonState.NOT_SET:
            return
        data = self._data(button)
        now = self._now()
        if data.state is state:
            return
        if state is ButtonState.DOWN and data.state is ButtonState.UP:
            data.tap_counter += 1
            data.timestamp_last_down = now
            if data.tap_counter == 1:
                data.pos_x = self._pos_x
                data.pos_y = self._pos_y
                self._pressed[button] = None
                if self._due_in_ms is None:
                    self._due_in_ms = self.multipress_rate
            else:
                dx = data.pos_x - self._pos_x
                dy = data.pos_y - self._pos_y
                if dx * dx + dy * dy < self.max_click_radius * self.max_click_radius:
                    if data.tap_counter == self.max_taps:
                        self._raise(button, data.tap_counter)
                        self._remove_button(button)
                else:
                    # Too far from the first press: count this one as the first.
                    data.pos_x = self._pos_x
                    data.pos_y = self._pos_y
                    data.tap_counter = 1
        data.state = state

    def process_pending(self) -> Optional[int]:
        """Report clicks whose wait has expired; return the next due delay in ms."""
        nearest: Optional[int] = None
        expired = []
        for button in self._pressed:
            data = self._data(button)
            time_to_event = (self._now() - data.timestamp_last_down) - self.multipress_rate
            if time_to_event >= 0:
                self._raise(button, data.tap_counter)
                data.tap_counter = 0
                expired.append(button)
            else:
                nearest = time_to_event if nearest is None else max(nearest, time_to_event)

        self._due_in_ms = None if nearest is None else -nearest
        for button in expired:
            self._pressed.pop(button, None)
        self._reset_position()
        return self._due_in_ms

    def _reset_position(self) -> None:
        if not self._pressed:
            self._pos_x = 0
            self._pos_y = 0
            self._due_in_ms = None

    def _remove_button(self, button: Hashable) -> None:
        self._pressed.pop(button, None)
        self._reset_position()
        self._data(button).tap_counter = 0
"""Middle-button style automatic scrolling."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from imgview.geometry import Point


@dataclass
class ScrollMetrics:
    """Tuning of the auto-scroll speed curve."""

    dead_zone_radius: int = 10  # pixels
    speed_factor_in: float = 0.9
    speed_factor_out: float = 1.7
    speed_factor_range: int = 40  # pixels
    max_speed: int = 5000  # pixels per second


def _axis_speed(distance: float, metrics: ScrollMetrics) -> float:
    beyond = 0 if distance <= metrics.dead_zone_radius else distance - metrics.dead_zone_radius
    if beyond == 0:
        return 0.0
    factor_out = metrics.speed_factor_out
    factor_in = metrics.speed_factor_in
    power = min(factor_out, (factor_out - factor_in) / metrics.speed_factor_range * beyond + factor_in)
    return min(float(metrics.max_speed), beyond ** power)


def scroll_amount(delta: Point, elapsed_ms: float, metrics: Optional[ScrollMetrics] = None) -> Point:
    """Scroll distance for one tick.

    ``delta`` is the anchor position minus the current mouse position.
    """
    metrics = metrics or ScrollMetrics()
    distance = delta.abs()
    speed = Point(_axis_speed(distance.x, metrics), _axis_speed(distance.y, metrics))
    return speed * (elapsed_ms * 0.001) * delta.sign()


class AutoScroll:
    """Scrolls proportionally to the mouse distance from an anchor point.

    With ``interval_ms`` set, a background timer calls :meth:`perform` while
    auto scrolling is on; with ``None`` the caller drives :meth:`perform`.
    """

    def __init__(
        self,
        mouse_position: Callable[[], Point],
        on_scroll: Callable[[Point], None],
        *,
        metrics: Optional[ScrollMetrics] = None,
        interval_ms: Optional[int] = 1,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.metrics = metrics or ScrollMetrics()
        self._mouse_position = mouse_position
        self._on_scroll = on_scroll
        self._interval_ms = interval_ms
        self._clock = clock
        self._scrolling = False
        self._anchor = Point(0, 0)
        self._last_tick: Optional[float] = None
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_auto_scrolling(self) -> bool:
        return self._scrolling

    @property
    def anchor(self) -> Point:
        return self._anchor

    def toggle(self) -> bool:
        """Switch auto scrolling on or off; return the new state."""
        self._scrolling = not self._scrolling
        if self._scrolling:
            with self._lock:
                self._anchor = self._mouse_position()
                self._last_tick = self._clock()
            self._start_timer()
        else:
            self._stop_timer()
            with self._lock:
                self._anchor = Point(0, 0)
        return self._scrolling

    def perform(self) -> Point:
        """Scroll by the amount due since the previous tick and return it."""
        with self._lock:
            now = self._clock()
            elapsed_ms = 0.0 if self._last_tick is None else (now - self._last_tick) * 1000.0
            self._last_tick = now
            delta = self._anchor - self._mouse_position()
        amount = scroll_amount(delta, elapsed_ms, self.metrics)
        self._on_scroll(amount)
        return amount

    def close(self) -> None:
        """Stop the background timer, if running."""
        self._stop_timer()

    def _run(self, stop: threading.Event, interval: float) -> None:
        while not stop.wait(interval):
            self.perform()

    def _start_timer(self) -> None:
        if self._interval_ms is None or self._thread is not None:
            return
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(self._stop, self._interval_ms / 1000.0), daemon=True
        )
        self._thread.start()

    def _stop_timer(self) -> None:
        if self._thread is None:
            return
        self._stop.set()
        if self._thread is not threading.current_thread():
            self._thread.join()
        self._thread = None
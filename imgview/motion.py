"""Velocity that grows the longer input keeps coming in one direction."""

from __future__ import annotations

import time
from typing import Callable, Optional

from imgview.geometry import sign


class AdaptiveMotion:
    """Turns a stream of input amounts into an accelerating velocity.

    Accumulated time decays with the real time that passes between inputs
    and resets whenever the input changes direction.
    """

    def __init__(
        self,
        base_step: float = 1.0,
        acceleration: float = 1.0,
        deceleration: float = 1.0,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.step = base_step
        self.acceleration = acceleration
        self.deceleration = deceleration
        self._clock = clock
        self._started_at: Optional[float] = None
        self._time = 0.0

    def _elapsed_seconds(self) -> float:
        if self._started_at is None:
            return 0.0
        return self._clock() - self._started_at

    def add(self, amount: float) -> float:
        """Feed an input amount and return the resulting velocity."""
        direction = sign(amount)
        self._time -= self._elapsed_seconds() * direction * self.deceleration
        self._started_at = self._clock()
        self._time = max(self._time, 0.0) if direction > 0 else min(self._time, 0.0)
        self._time += amount * self.step
        return self._velocity(self._time)

    def _velocity(self, t: float) -> float:
        # velocity = acceleration * t^2, keeping the sign of t
        return abs(self.acceleration * t * t) * sign(t)
from imgview.motion import AdaptiveMotion


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_first_step_with_unit_factors():
    motion = AdaptiveMotion(clock=FakeClock())
    assert motion.add(1.0) == 1.0


def test_repeated_input_accelerates():
    motion = AdaptiveMotion(clock=FakeClock())
    first = motion.add(1.0)
    second = motion.add(1.0)
    assert second == 4.0
    assert second > first


def test_direction_is_symmetric():
    forward = AdaptiveMotion(clock=FakeClock()).add(2.0)
    backward = AdaptiveMotion(clock=FakeClock()).add(-2.0)
    assert backward == -forward


def test_direction_change_resets_accumulation():
    motion = AdaptiveMotion(clock=FakeClock())
    motion.add(1.0)
    motion.add(1.0)
    fresh = AdaptiveMotion(clock=FakeClock()).add(-1.0)
    assert motion.add(-1.0) == fresh


def test_elapsed_time_decays_velocity():
    clock_fast = FakeClock()
    clock_slow = FakeClock()
    fast = AdaptiveMotion(clock=clock_fast)
    slow = AdaptiveMotion(clock=clock_slow)
    fast.add(1.0)
    slow.add(1.0)
    clock_slow.now += 0.5
    assert slow.add(1.0) < fast.add(1.0)


def test_long_pause_gives_fresh_start():
    clock = FakeClock()
    motion = AdaptiveMotion(clock=clock)
    motion.add(1.0)
    clock.now += 60.0
    assert motion.add(1.0) == AdaptiveMotion(clock=FakeClock()).add(1.0)


def test_acceleration_scales_velocity():
    plain = AdaptiveMotion(clock=FakeClock()).add(1.5)
    tripled = AdaptiveMotion(acceleration=3.0, clock=FakeClock()).add(1.5)
    assert tripled == 3 * plain
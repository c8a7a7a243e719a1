from helicity_lab.core.timekeeping import FrameTimer


def test_tick_reports_elapsed_time():
    timer = FrameTimer(last_time=0.0)
    first = timer.tick()
    assert first > 0.0
    assert timer.tick() >= 0.0
    assert timer.last_time > 0.0


def test_tick_uses_injected_clock():
    readings = iter([10.0, 10.5, 10.75, 10.6])
    timer = FrameTimer(clock=lambda: next(readings))
    assert timer.last_time == 10.0
    assert timer.tick() == 0.5
    assert timer.tick() == 0.25
    # a clock that steps backwards never yields a negative frame time
    assert timer.tick() == 0.0
    assert timer.last_time == 10.6

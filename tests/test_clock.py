from classic_snake.clock import TickClock


def test_waits_for_full_interval():
    clock = TickClock(now_ms=1000)
    assert clock.due(1119, 120) is False
    assert clock.due(1120, 120) is True
    assert clock.due(1200, 120) is False


def test_rearms_from_the_tick_time():
    clock = TickClock(now_ms=0)
    # A late frame does not cause a burst of catch-up ticks
    assert clock.due(500, 120) is True
    assert clock.due(501, 120) is False
    assert clock.due(620, 120) is True


def test_interval_change_takes_effect_immediately():
    clock = TickClock(now_ms=0)
    assert clock.due(100, 120) is False
    assert clock.due(100, 100) is True


def test_hold_prevents_tick_right_after_resume():
    clock = TickClock(now_ms=0)
    clock.hold(5000)
    assert clock.due(5010, 120) is False
    assert clock.due(5120, 120) is True

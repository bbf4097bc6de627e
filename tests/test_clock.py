import pytest

from clock import GravityClock, RepeatTimer
from conftest import Recorder


def test_gravity_clock_ticks_once_per_full_interval():
    ticks = Recorder()
    clock = GravityClock(ticks, interval_ms=500)
    assert clock.update(499) == 0
    assert clock.update(1) == 1
    assert len(ticks.calls) == 1
    assert clock.acc == 0


def test_gravity_clock_catch_up_carries_remainder():
    ticks = Recorder()
    clock = GravityClock(ticks, interval_ms=500)
    assert clock.update(1250) == 2
    assert len(ticks.calls) == 2
    assert clock.acc == 250


def test_gravity_clock_stop_start_reset_are_idempotent():
    ticks = Recorder()
    clock = GravityClock(ticks, interval_ms=100)
    clock.update(50)
    clock.stop()
    clock.stop()
    assert clock.update(1000) == 0
    assert clock.acc == 50
    clock.start()
    clock.start()
    clock.reset()
    clock.reset()
    assert clock.acc == 0
    assert clock.update(100) == 1


def test_gravity_clock_suspended():
    ticks = Recorder()
    clock = GravityClock(ticks, interval_ms=100)
    assert clock.update(1000, suspended=lambda: True) == 0
    assert clock.acc == 0
    assert ticks.calls == []


def test_repeat_timer_fires_on_press_then_after_delay():
    hits = Recorder()
    timer = RepeatTimer(delay_ms=140, interval_ms=60)
    timer.start(hits, key='left')
    assert len(hits.calls) == 1
    assert timer.active and timer.key == 'left'

    assert timer.update(139) == 0
    assert timer.update(1) == 0
    assert timer.update(60) == 1
    assert timer.update(120) == 2
    assert len(hits.calls) == 4


def test_repeat_timer_stop_cancels():
    hits = Recorder()
    timer = RepeatTimer(delay_ms=100, interval_ms=50)
    timer.start(hits)
    timer.stop()
    timer.stop()
    assert not timer.active
    assert timer.update(1000) == 0
    assert len(hits.calls) == 1


def test_repeat_timer_restart_replaces_action():
    first, second = Recorder(), Recorder()
    timer = RepeatTimer(delay_ms=100, interval_ms=50)
    timer.start(first, key='left')
    timer.update(90)
    timer.start(second, key='right')
    timer.update(90)
    assert len(first.calls) == 1
    assert len(second.calls) == 1
    assert timer.key == 'right'
    timer.update(60)
    assert len(second.calls) == 2


@pytest.mark.parametrize("make", [
    lambda: GravityClock(lambda: None, interval_ms=0),
    lambda: RepeatTimer(delay_ms=100, interval_ms=-5),
])
def test_non_positive_interval_is_rejected(make):
    with pytest.raises(ValueError):
        make()

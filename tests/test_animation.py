from __future__ import annotations

import random

import pytest

from kiosk.animation import AnimationScheduler, FadePhase, FadeTransition, FloatingMarker, LogoPulse, MarkerQueue


class FakeTimer:
    def __init__(self, paused: bool) -> None:
        self.paused = paused
        self.stopped = False

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def stop(self) -> None:
        self.stopped = True


class FakeHost:
    def __init__(self) -> None:
        self.timers: dict[str, FakeTimer] = {}

    def set_interval(self, interval, callback, *, name=None, pause=False):
        timer = FakeTimer(pause)
        self.timers[name] = timer
        return timer


def test_marker_rises_and_fades():
    marker = FloatingMarker(x=0, y=10.0, is_addition=True)
    marker.advance()

    assert marker.y == pytest.approx(9.7)
    assert marker.alpha == 250
    assert marker.glyph == "+"
    assert FloatingMarker(x=0, y=1.0, is_addition=False).glyph == "-"


def test_marker_queue_prunes_finished_markers():
    queue = MarkerQueue(width=5, height=200, rng=random.Random(3))
    queue.spawn(is_addition=True)
    queue.spawn(is_addition=False)

    ticks = 0
    while queue.tick():
        ticks += 1

    # Alpha 255 drops 5 per tick.
    assert ticks == 51
    assert len(queue) == 0
    assert queue.tick() is False


def test_marker_queue_spawns_inside_lane():
    queue = MarkerQueue(width=4, height=10, rng=random.Random(1))
    markers = [queue.spawn(is_addition=True) for _ in range(20)]

    assert all(0 <= marker.x < 4 for marker in markers)
    assert all(marker.y == 9.0 for marker in markers)


def test_marker_snapshot_is_a_copy():
    queue = MarkerQueue(width=3, height=10, rng=random.Random(1))
    queue.spawn(is_addition=True)
    snapshot = queue.snapshot()
    snapshot[0].alpha = 0

    assert queue.snapshot()[0].alpha == 255


def test_fade_runs_out_switch_in():
    fade = FadeTransition("welcome")
    fade.start("menu")
    switched = [fade.tick() for _ in range(10)]

    assert switched[-1] == "menu"
    assert fade.opacity == 0.0
    assert fade.phase is FadePhase.IN
    for _ in range(10):
        fade.tick()
    assert fade.opacity == 1.0
    assert not fade.active


def test_fade_retarget_keeps_opacity():
    fade = FadeTransition("welcome")
    fade.start("menu")
    for _ in range(4):
        fade.tick()
    fade.start("cart")

    assert fade.opacity == pytest.approx(0.6)
    assert fade.target == "cart"


def test_fade_finish_jumps_to_target():
    fade = FadeTransition("welcome")
    fade.start("about")

    assert fade.finish() == "about"
    assert not fade.active
    assert fade.opacity == 1.0


def test_logo_pulse_stays_in_range():
    pulse = LogoPulse()
    scales = [pulse.tick() for _ in range(300)]

    assert min(scales) == pytest.approx(0.95)
    assert max(scales) == pytest.approx(1.05)


def test_scheduler_starts_timers_with_pause_state():
    host = FakeHost()
    scheduler = AnimationScheduler(host)
    scheduler.add("markers", 0.1, lambda: None)
    scheduler.add("fade", 0.1, lambda: None, paused=True)

    scheduler.start()

    assert scheduler.running
    assert host.timers["markers"].paused is False
    assert host.timers["fade"].paused is True


def test_scheduler_suspend_and_wake_respect_paused_timers():
    host = FakeHost()
    scheduler = AnimationScheduler(host)
    scheduler.add("markers", 0.1, lambda: None)
    scheduler.add("pulse", 0.1, lambda: None)
    scheduler.start()
    scheduler.pause("pulse")

    scheduler.suspend()
    assert host.timers["markers"].paused
    assert scheduler.is_paused("markers")

    scheduler.wake()
    assert not host.timers["markers"].paused
    assert host.timers["pulse"].paused

    scheduler.resume("pulse")
    assert not host.timers["pulse"].paused


def test_scheduler_stop_and_errors():
    host = FakeHost()
    scheduler = AnimationScheduler(host)
    scheduler.add("markers", 0.1, lambda: None)
    scheduler.start()

    with pytest.raises(ValueError):
        scheduler.add("markers", 0.1, lambda: None)
    with pytest.raises(ValueError):
        scheduler.pause("confetti")

    scheduler.stop()
    assert host.timers["markers"].stopped
    assert not scheduler.running

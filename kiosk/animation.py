"""Cosmetic animation state and the timers that drive it."""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Protocol

from kiosk.config import (
    FADE_STEP_PERCENT,
    MARKER_FADE_PER_TICK,
    MARKER_LANE_WIDTH,
    MARKER_RISE_PER_TICK,
    MARKER_START_ALPHA,
    PULSE_MAX_MILLI,
    PULSE_MIN_MILLI,
    PULSE_STEP_MILLI,
)


@dataclass
class FloatingMarker:
    """A +/- indicator drifting upward while it fades."""

    x: int
    y: float
    is_addition: bool
    alpha: int = MARKER_START_ALPHA
    age: int = 0

    def advance(self) -> None:
        self.y -= MARKER_RISE_PER_TICK
        self.alpha = max(0, self.alpha - MARKER_FADE_PER_TICK)
        self.age += 1

    @property
    def done(self) -> bool:
        return self.alpha <= 0 or self.y < 0

    @property
    def opacity(self) -> float:
        return self.alpha / MARKER_START_ALPHA

    @property
    def glyph(self) -> str:
        return "+" if self.is_addition else "-"


class MarkerQueue:
    """
    Live feedback markers.

    The tick timer and the renderer may run on different schedulers, so every
    access goes through the lock and readers only ever get copies.
    """

    def __init__(self, width: int = MARKER_LANE_WIDTH, height: int = 24, rng: random.Random | None = None) -> None:
        self._lock = threading.Lock()
        self._markers: list[FloatingMarker] = []
        self._rng = rng or random.Random()
        self.width = max(1, width)
        self.height = max(1, height)

    def resize(self, width: int, height: int) -> None:
        with self._lock:
            self.width = max(1, width)
            self.height = max(1, height)

    def spawn(self, is_addition: bool) -> FloatingMarker:
        with self._lock:
            marker = FloatingMarker(
                x=self._rng.randrange(self.width),
                y=float(self.height - 1),
                is_addition=is_addition,
            )
            self._markers.append(marker)
            return replace(marker)

    def tick(self) -> bool:
        """Advance every marker and drop finished ones; False when there was nothing to do."""
        with self._lock:
            if not self._markers:
                return False
            for marker in self._markers:
                marker.advance()
            self._markers = [marker for marker in self._markers if not marker.done]
            return True

    def snapshot(self) -> list[FloatingMarker]:
        with self._lock:
            return [replace(marker) for marker in self._markers]

    def clear(self) -> None:
        with self._lock:
            self._markers.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._markers)


class FadePhase(Enum):
    IDLE = "idle"
    OUT = "out"
    IN = "in"


class FadeTransition:
    """
    Fade-out, switch, fade-in between screens.

    start() during a running fade retargets it: the fade keeps going from its
    current opacity and the switch lands on the latest target.
    """

    def __init__(self, displayed: str, step_percent: int = FADE_STEP_PERCENT) -> None:
        self.displayed = displayed
        self.target: str | None = None
        self.phase = FadePhase.IDLE
        self._percent = 100
        self._step = step_percent

    @property
    def opacity(self) -> float:
        return self._percent / 100

    @property
    def active(self) -> bool:
        return self.phase is not FadePhase.IDLE

    def start(self, target: str) -> None:
        self.target = target
        self.phase = FadePhase.OUT

    def tick(self) -> str | None:
        """Advance one step; returns the screen name at the moment the switch happens."""
        if self.phase is FadePhase.OUT:
            self._percent = max(0, self._percent - self._step)
            if self._percent == 0:
                assert self.target is not None
                self.displayed = self.target
                self.target = None
                self.phase = FadePhase.IN
                return self.displayed
        elif self.phase is FadePhase.IN:
            self._percent = min(100, self._percent + self._step)
            if self._percent == 100:
                self.phase = FadePhase.IDLE
        return None

    def finish(self) -> str:
        """Jump straight to the end state, e.g. when animations are disabled."""
        if self.target is not None:
            self.displayed = self.target
        self.target = None
        self.phase = FadePhase.IDLE
        self._percent = 100
        return self.displayed


class LogoPulse:
    """Welcome logo breathing between 0.95x and 1.05x."""

    def __init__(self) -> None:
        self._milli = 1000
        self._growing = False

    @property
    def scale(self) -> float:
        return self._milli / 1000

    def tick(self) -> float:
        if self._growing:
            self._milli += PULSE_STEP_MILLI
            if self._milli >= PULSE_MAX_MILLI:
                self._growing = False
        else:
            self._milli -= PULSE_STEP_MILLI
            if self._milli <= PULSE_MIN_MILLI:
                self._growing = True
        return self.scale


class TimerLike(Protocol):
    def pause(self) -> None: ...

    def resume(self) -> None: ...

    def stop(self) -> None: ...


class IntervalHost(Protocol):
    def set_interval(self, interval: float, callback: Callable[[], object], *, name: str | None = None, pause: bool = False) -> TimerLike: ...


class AnimationScheduler:
    """Named interval timers with one start/stop lifecycle, kept apart from business state."""

    def __init__(self, host: IntervalHost) -> None:
        self._host = host
        self._specs: dict[str, tuple[float, Callable[[], object]]] = {}
        self._timers: dict[str, TimerLike] = {}
        self._paused: set[str] = set()
        self._suspended = False

    @property
    def running(self) -> bool:
        return bool(self._timers)

    def add(self, name: str, interval: float, callback: Callable[[], object], *, paused: bool = False) -> None:
        if name in self._specs:
            raise ValueError(f"Animation {name!r} already registered")
        self._specs[name] = (interval, callback)
        if paused:
            self._paused.add(name)

    def start(self) -> None:
        for name, (interval, callback) in self._specs.items():
            if name in self._timers:
                continue
            self._timers[name] = self._host.set_interval(
                interval,
                callback,
                name=name,
                pause=self._suspended or name in self._paused,
            )

    def stop(self) -> None:
        for timer in self._timers.values():
            timer.stop()
        self._timers.clear()

    def pause(self, name: str) -> None:
        self._require(name)
        self._paused.add(name)
        timer = self._timers.get(name)
        if timer is not None:
            timer.pause()

    def resume(self, name: str) -> None:
        self._require(name)
        self._paused.discard(name)
        timer = self._timers.get(name)
        if timer is not None and not self._suspended:
            timer.resume()

    def suspend(self) -> None:
        """Pause everything, e.g. while the kiosk window is not visible."""
        self._suspended = True
        for timer in self._timers.values():
            timer.pause()

    def wake(self) -> None:
        self._suspended = False
        for name, timer in self._timers.items():
            if name not in self._paused:
                timer.resume()

    def is_paused(self, name: str) -> bool:
        self._require(name)
        return self._suspended or name in self._paused

    def _require(self, name: str) -> None:
        if name not in self._specs:
            raise ValueError(f"Unknown animation {name!r}")

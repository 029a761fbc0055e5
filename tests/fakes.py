# tests/fakes.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


class FakeClock:
    """
    Deterministic clock for unit tests.

    Callable like time.time(); only moves when the test says so.
    """

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass(slots=True)
class ManualTimer:
    delay_seconds: float
    callback: Callable[[], None]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        if self.cancelled or self.fired:
            return
        self.fired = True
        self.callback()


@dataclass(slots=True)
class ManualTimerFactory:
    """
    TimerFactory that never starts a thread.

    Tests fire the recorded timers by hand, standing in for the deadline elapsing.
    """

    timers: list[ManualTimer] = field(default_factory=list)

    def __call__(self, delay_seconds: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(delay_seconds=delay_seconds, callback=callback)
        self.timers.append(timer)
        return timer

    def fire_all(self) -> None:
        for timer in list(self.timers):
            timer.fire()

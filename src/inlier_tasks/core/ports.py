# src/inlier_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
Time and deferred execution are injected so tests can drive them by hand.
"""

from typing import Callable, Protocol

Clock = Callable[[], float]
# Returns epoch seconds, like time.time().


class TimerHandle(Protocol):
    """A started one-shot timer."""

    def cancel(self) -> None: ...


class TimerFactory(Protocol):
    """
    Starts `callback` once after `delay_seconds`, on a thread of its own.

    The default implementation wraps threading.Timer; tests substitute a
    factory that only records the callbacks and fires them on demand.
    """

    def __call__(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle: ...

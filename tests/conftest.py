# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace

import pytest

from inlier_tasks.cli.bootstrap import create_initial_state
from inlier_tasks.core.state import AppState

from .fakes import FakeClock, ManualTimerFactory


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="inlier-test",
        log_level="DEBUG",
        console_enabled=False,
        task_deadline_seconds=60,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def timers() -> ManualTimerFactory:
    return ManualTimerFactory()


@pytest.fixture()
def make_state(settings: SimpleNamespace) -> Callable[..., AppState]:
    """Build a fresh, independent AppState; handy when a test needs many."""

    def _make(clock=None, timer_factory=None) -> AppState:
        return create_initial_state(
            settings=settings,
            clock=clock or FakeClock(),
            timer_factory=timer_factory or ManualTimerFactory(),
        )

    return _make


@pytest.fixture()
def state(make_state, clock: FakeClock, timers: ManualTimerFactory) -> AppState:
    """
    AppState wired with a fake clock and hand-fired timers.

    NOTE: registry, store, scheduler and lifecycle are the real ones; only time is faked.
    """
    return make_state(clock=clock, timer_factory=timers)

# src/inlier_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the registry, store, scheduler and lifecycle into AppState.
"""

from __future__ import annotations

import logging
import time

from ..config import get_settings
from ..core.ports import Clock, TimerFactory
from ..core.state import AppState
from ..core.users import UserRegistry
from ..tasks.lifecycle import TaskLifecycleController
from ..tasks.task_scheduler import ExpirationScheduler, start_thread_timer
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    clock: Clock = time.time,
    timer_factory: TimerFactory = start_thread_timer,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings, clock and timers injectable makes the core testable
    without waiting on real deadlines. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    users = UserRegistry(clock=clock)
    store = TaskStore(users)
    scheduler = ExpirationScheduler(users, timer_factory=timer_factory)
    lifecycle = TaskLifecycleController(
        users,
        store,
        scheduler,
        deadline_seconds=settings.task_deadline_seconds,
        clock=clock,
    )

    logger.debug("State wired deadline=%ss", settings.task_deadline_seconds)
    return AppState(
        settings=settings,
        users=users,
        task_store=store,
        scheduler=scheduler,
        lifecycle=lifecycle,
    )

# src/inlier_tasks/tasks/task_scheduler.py

from __future__ import annotations

"""
Expiration scheduler.

For every assigned task, a one-shot deferred check that:
- waits for the task deadline on a thread of its own,
- takes the owning user's lock,
- expires the task if it is still that user's current, unfinished task,
- otherwise does nothing (a submit got there first).

There is no per-task cancel: a submit makes the later check a no-op.
"""

import logging
import threading
from collections.abc import Callable

from ..core.errors import UserNotFound
from ..core.ports import TimerFactory, TimerHandle
from ..core.users import UserRegistry
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

ExpirationListener = Callable[[Task], None]


def start_thread_timer(delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
    """Default TimerFactory: a daemon threading.Timer, already started."""
    timer = threading.Timer(max(0.0, float(delay_seconds)), callback)
    timer.name = "inlier-expiry"
    timer.daemon = True
    timer.start()
    return timer


class ExpirationScheduler:
    def __init__(
        self,
        users: UserRegistry,
        *,
        timer_factory: TimerFactory = start_thread_timer,
    ) -> None:
        self._users = users
        self._timer_factory = timer_factory
        self._pending: dict[int, TimerHandle] = {}
        self._listeners: list[ExpirationListener] = []
        self._lock = threading.Lock()

    def add_listener(self, listener: ExpirationListener) -> None:
        """Register a callback invoked (outside any user lock) for each expired task."""
        with self._lock:
            self._listeners.append(listener)

    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def arm(self, task: Task, deadline_seconds: float) -> None:
        """
        Schedule the deadline check for `task`, `deadline_seconds` after it was assigned.

        Arming cannot be revoked.
        """
        task_id = task.id

        def _fire() -> None:
            try:
                self.check(task)
            except Exception:
                logger.exception("Expiration check crashed task_id=%s", task_id)
            finally:
                with self._lock:
                    self._pending.pop(task_id, None)

        handle = self._timer_factory(deadline_seconds, _fire)
        with self._lock:
            # A zero-delay timer may already have fired and finished.
            if task.status is TaskStatus.ASSIGNED:
                self._pending[task_id] = handle
        logger.debug("Expiration armed task_id=%s in %.1fs", task_id, float(deadline_seconds))

    def check(self, task: Task) -> bool:
        """
        Expire `task` if it is still its owner's current, unfinished task.

        Returns True if this call performed the ASSIGNED -> EXPIRED transition.
        """
        try:
            user = self._users.lookup(task.user_name)
        except UserNotFound:
            logger.error("Expiration check for unknown user=%s task_id=%s", task.user_name, task.id)
            return False

        with user.lock:
            if user.current_task is not task or task.status is not TaskStatus.ASSIGNED:
                logger.debug(
                    "Expiration check no-op task_id=%s status=%s", task.id, task.status.value
                )
                return False

            task.status = TaskStatus.EXPIRED
            user.uncompleted_tasks.append(task)
            user.current_task = None

        logger.warning("Task %s for user %s has expired!", task.id, task.user_name)
        self._notify(task)
        return True

    def shutdown(self) -> None:
        """Cancel every pending timer. Process teardown only."""
        with self._lock:
            handles = list(self._pending.values())
            self._pending.clear()
        for handle in handles:
            handle.cancel()
        logger.debug("ExpirationScheduler shut down, cancelled=%d", len(handles))

    def _notify(self, task: Task) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(task)
            except Exception:
                logger.exception("Expiration listener failed task_id=%s", task.id)

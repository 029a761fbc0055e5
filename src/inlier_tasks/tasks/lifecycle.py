# src/inlier_tasks/tasks/lifecycle.py

from __future__ import annotations

import logging
import time

from ..config import DEFAULT_TASK_DEADLINE_SECONDS
from ..core.errors import NoActiveTask, TaskAlreadyActive
from ..core.ports import Clock
from ..core.users import UserRegistry
from .earnings import earnings
from .task_models import Task, TaskStatus
from .task_scheduler import ExpirationScheduler
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class TaskLifecycleController:
    """
    Assign/submit state machine, one active task per user.

    Per user:  IDLE -> ASSIGNED -> COMPLETED | EXPIRED -> IDLE

    Every transition runs under the owner's lock, so the only race left is
    between the owner's submit and that task's own expiration check, and
    exactly one of them finalizes the task.
    """

    def __init__(
        self,
        users: UserRegistry,
        store: TaskStore,
        scheduler: ExpirationScheduler,
        *,
        deadline_seconds: float = DEFAULT_TASK_DEADLINE_SECONDS,
        clock: Clock = time.time,
    ) -> None:
        self._users = users
        self._store = store
        self._scheduler = scheduler
        self._deadline_seconds = float(deadline_seconds)
        self._clock = clock

    @property
    def deadline_seconds(self) -> float:
        return self._deadline_seconds

    def assign(self, user_name: str) -> Task:
        user = self._users.lookup(user_name)

        with user.lock:
            if user.current_task is not None:
                raise TaskAlreadyActive(user.name, user.current_task.id)

            task = self._store.create_task(
                user_name=user.name,
                assigned_at=self._clock(),
                deadline_seconds=self._deadline_seconds,
            )
            user.current_task = task
            try:
                self._scheduler.arm(task, self.deadline_seconds)
            except Exception:
                # An unarmed task could never expire; leave the user idle.
                user.current_task = None
                logger.exception("Arming deadline failed task_id=%s user=%s", task.id, user.name)
                raise

        logger.info(
            "Task %s assigned to %s (deadline %.0fs)", task.id, user.name, self.deadline_seconds
        )
        return task

    def submit(self, user_name: str) -> Task:
        user = self._users.lookup(user_name)

        with user.lock:
            task = user.current_task
            if task is None or task.status.is_terminal:
                # Either never assigned, or the deadline check won the race.
                raise NoActiveTask(user.name)

            completed_at = self._clock()
            duration = max(0, int(completed_at - task.assigned_at))

            task.completed_at = completed_at
            task.duration_seconds = duration
            task.earnings = earnings(duration)
            task.status = TaskStatus.COMPLETED

            user.completed_tasks.append(task)
            user.current_task = None
            user.total_earnings += task.earnings

        logger.info(
            "Task %s submitted by %s duration=%ss earnings=%.2f",
            task.id,
            user.name,
            duration,
            task.earnings,
        )
        return task

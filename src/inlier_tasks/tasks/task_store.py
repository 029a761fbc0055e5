# src/inlier_tasks/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
import threading

from ..core.users import UserRegistry
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    - every task ever created stays here, keyed by id (append-only)
    - ids come from a process-wide counter starting at 1
    - owners are validated against the UserRegistry

    Thread-safety:
    - one internal lock guards the id counter and the dict
    - the lock is never held while calling out, so callers may hold a
      user lock when they get here
    """

    def __init__(self, users: UserRegistry) -> None:
        self._users = users
        self._tasks: dict[int, Task] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        logger.info("TaskStore ready")

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def create_task(self, *, user_name: str, assigned_at: float, deadline_seconds: float) -> Task:
        """
        Allocate a fresh id and register a new ASSIGNED task for `user_name`.

        Raises UserNotFound if the owner is not registered.
        """
        self._users.lookup(user_name)

        with self._lock:
            task = Task(
                id=next(self._ids),
                user_name=user_name,
                assigned_at=float(assigned_at),
                deadline_at=float(assigned_at) + float(deadline_seconds),
            )
            self._tasks[task.id] = task

        logger.debug(
            "Task added id=%s user=%s deadline_at=%s",
            task.id,
            user_name,
            task.deadline_at,
        )
        return task

    def get_task(self, task_id: int) -> Task | None:
        with self._lock:
            return self._tasks.get(int(task_id))

    def list_tasks(self, *, status: TaskStatus | None = None) -> list[Task]:
        """All tasks in id order, optionally filtered by status."""
        with self._lock:
            tasks = list(self._tasks.values())
        if status is not None:
            tasks = [t for t in tasks if t.status is status]
        return sorted(tasks, key=lambda t: t.id)

    def list_tasks_for_user(self, user_name: str) -> list[Task]:
        with self._lock:
            tasks = [t for t in self._tasks.values() if t.user_name == user_name]
        return sorted(tasks, key=lambda t: t.id)

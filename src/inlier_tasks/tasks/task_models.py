# src/inlier_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    ASSIGNED moves exactly once to COMPLETED (submitted in time) or
    EXPIRED (deadline check fired first). Both are terminal.
    """

    ASSIGNED = "assigned"
    COMPLETED = "completed"
    EXPIRED = "expired"

    @property
    def is_terminal(self) -> bool:
        return self is not TaskStatus.ASSIGNED


@dataclass(slots=True, eq=False)
class Task:
    id: int
    user_name: str
    assigned_at: float
    deadline_at: float
    status: TaskStatus = TaskStatus.ASSIGNED

    # Set only on submission.
    completed_at: float | None = None
    duration_seconds: int | None = None
    earnings: float | None = None

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED

    @property
    def is_expired(self) -> bool:
        return self.status is TaskStatus.EXPIRED

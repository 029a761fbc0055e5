# src/inlier_tasks/tasks/task_api.py

"""
Operations exposed to the presentation layer.

Each call is a single attempt. Failures are InlierTaskError subclasses
(DuplicateUser, InvalidName, UserNotFound, TaskAlreadyActive, NoActiveTask)
which the caller renders; none of them is fatal.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.state import AppState
from ..core.users import User
from .task_models import Task


@dataclass(slots=True, frozen=True)
class SubmitResult:
    task_id: int
    duration_seconds: int
    earnings: float


@dataclass(slots=True, frozen=True)
class TaskEarnings:
    task_id: int
    duration_seconds: int
    earnings: float


@dataclass(slots=True, frozen=True)
class EarningsReport:
    user_name: str
    total: float
    tasks: tuple[TaskEarnings, ...]


@dataclass(slots=True, frozen=True)
class UserSummary:
    user_name: str
    completed_count: int
    uncompleted_count: int
    total_earnings: float


def register_user(state: AppState, name: str) -> User:
    return state.users.register(name)


def assign_task(state: AppState, user_name: str) -> Task:
    return state.lifecycle.assign(user_name)


def submit_task(state: AppState, user_name: str) -> SubmitResult:
    task = state.lifecycle.submit(user_name)
    return SubmitResult(
        task_id=task.id,
        duration_seconds=int(task.duration_seconds or 0),
        earnings=float(task.earnings or 0.0),
    )


def get_earnings_report(state: AppState, user_name: str) -> EarningsReport:
    user = state.users.lookup(user_name)
    with user.lock:
        rows = tuple(
            TaskEarnings(
                task_id=t.id,
                duration_seconds=int(t.duration_seconds or 0),
                earnings=float(t.earnings or 0.0),
            )
            for t in user.completed_tasks
        )
        total = user.total_earnings
    return EarningsReport(user_name=user.name, total=total, tasks=rows)


def get_admin_summary(state: AppState) -> list[UserSummary]:
    out: list[UserSummary] = []
    for user in state.users.list_users():
        with user.lock:
            out.append(
                UserSummary(
                    user_name=user.name,
                    completed_count=len(user.completed_tasks),
                    uncompleted_count=len(user.uncompleted_tasks),
                    total_earnings=user.total_earnings,
                )
            )
    return out

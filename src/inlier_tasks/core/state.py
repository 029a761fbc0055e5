# src/inlier_tasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.lifecycle import TaskLifecycleController
from ..tasks.task_scheduler import ExpirationScheduler
from ..tasks.task_store import TaskStore
from .users import UserRegistry


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules.
    settings: Any

    users: UserRegistry
    task_store: TaskStore
    scheduler: ExpirationScheduler
    lifecycle: TaskLifecycleController

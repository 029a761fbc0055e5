# src/inlier_tasks/core/users.py

from __future__ import annotations

import logging
import re
import threading
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .errors import DuplicateUser, InvalidName, UserNotFound
from .ports import Clock

if TYPE_CHECKING:
    from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

# Letters only, including the Turkish dotted/accented variants.
NAME_PATTERN = re.compile(r"^[a-zA-ZğüşöçİĞÜŞÖÇ]+$")


@dataclass(slots=True, eq=False)
class User:
    """
    A registered user and everything that changes while they work.

    `lock` guards current_task, both history lists and total_earnings.
    Hold it for the whole of any state transition touching this user.
    """

    name: str
    login_at: float
    total_earnings: float = 0.0
    current_task: Task | None = None
    completed_tasks: list[Task] = field(default_factory=list)
    uncompleted_tasks: list[Task] = field(default_factory=list)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    @property
    def is_idle(self) -> bool:
        return self.current_task is None


def is_valid_name(name: str) -> bool:
    return bool(NAME_PATTERN.match(name or ""))


class UserRegistry:
    """
    In-memory registry of users, keyed by exact (case-sensitive) name.

    Append-only: users are never removed.
    """

    def __init__(self, clock: Clock = time.time) -> None:
        self._clock = clock
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    def register(self, name: str) -> User:
        name = (name or "").strip()
        if not is_valid_name(name):
            raise InvalidName(name)

        with self._lock:
            if name in self._users:
                raise DuplicateUser(name)
            user = User(name=name, login_at=self._clock())
            self._users[name] = user

        logger.info("User registered name=%s", name)
        return user

    def lookup(self, name: str) -> User:
        with self._lock:
            user = self._users.get(name)
        if user is None:
            raise UserNotFound(name)
        return user

    def list_users(self) -> list[User]:
        """Users in registration order."""
        with self._lock:
            return list(self._users.values())

    def count_users(self) -> int:
        with self._lock:
            return len(self._users)

# src/inlier_tasks/core/errors.py

from __future__ import annotations


class InlierTaskError(Exception):
    """Base class for recoverable errors raised by core operations."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name
        self.message = message


class InvalidName(InlierTaskError):
    def __init__(self, name: str) -> None:
        super().__init__(name, "Invalid name. Please use only letters.")


class DuplicateUser(InlierTaskError):
    def __init__(self, name: str) -> None:
        super().__init__(name, "User already exists!")


class UserNotFound(InlierTaskError):
    def __init__(self, name: str) -> None:
        super().__init__(name, "User not found. Register first!")


class TaskAlreadyActive(InlierTaskError):
    def __init__(self, name: str, task_id: int) -> None:
        super().__init__(name, "You are already working on a task!")
        self.task_id = task_id


class NoActiveTask(InlierTaskError):
    def __init__(self, name: str) -> None:
        super().__init__(name, "No active task to submit!")

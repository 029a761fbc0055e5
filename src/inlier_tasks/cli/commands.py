# src/inlier_tasks/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core.errors import InlierTaskError
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_api import EarningsReport, SubmitResult, UserSummary
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /take, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Core errors come back as their message; they never escape.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except InlierTaskError as e:
            logger.debug("/%s rejected: %s", name, e.message)
            return e.message

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering (shared with the console menu) ----


def format_ts(ts: float) -> str:
    return datetime.fromtimestamp(ts).strftime("%Y-%m-%d %H:%M:%S")


def format_assigned(task: Task) -> str:
    return (
        f"Task assigned: Task ID {task.id} assigned to {task.user_name} "
        f"at {format_ts(task.assigned_at)}"
    )


def format_submitted(result: SubmitResult) -> str:
    return (
        f"Task {result.task_id} submitted successfully!\n"
        f"Task duration: {result.duration_seconds} seconds\n"
        f"Earnings for this task: ${result.earnings:.2f}"
    )


def format_earnings_report(report: EarningsReport) -> str:
    lines = [
        f"--- Earnings Details for {report.user_name} ---",
        f"Total Earnings: ${report.total:.2f}",
        "",
        "Completed Tasks:",
        "Task ID\tTask Duration (s)\tTask Earnings",
    ]
    for row in report.tasks:
        lines.append(f"{row.task_id}\t{row.duration_seconds}\t${row.earnings:.2f}")
    return "\n".join(lines)


def format_admin_summary(rows: list[UserSummary]) -> str:
    lines = ["--- Admin Panel ---"]
    if not rows:
        lines.append("No users registered.")
    for row in rows:
        lines.extend(
            [
                f"User: {row.user_name}",
                f"Completed Tasks: {row.completed_count}",
                f"Uncompleted Tasks: {row.uncompleted_count}",
                f"Total Earnings: ${row.total_earnings:.2f}",
                "-------------------",
            ]
        )
    return "\n".join(lines)


def format_expired(task: Task) -> str:
    return f"WARNING: Task {task.id} for user {task.user_name} has expired!"


# ---- handlers ----


def _name_arg(args: list[str]) -> str | None:
    if len(args) != 1:
        return None
    return args[0]


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_register(state: AppState, args: list[str]) -> str:
    name = _name_arg(args)
    if name is None:
        return "Usage: /register <name>"
    user = task_api.register_user(state, name)
    return f"User {user.name} registered successfully!"


def cmd_take(state: AppState, args: list[str]) -> str:
    name = _name_arg(args)
    if name is None:
        return "Usage: /take <name>"
    return format_assigned(task_api.assign_task(state, name))


def cmd_submit(state: AppState, args: list[str]) -> str:
    name = _name_arg(args)
    if name is None:
        return "Usage: /submit <name>"
    return format_submitted(task_api.submit_task(state, name))


def cmd_earnings(state: AppState, args: list[str]) -> str:
    name = _name_arg(args)
    if name is None:
        return "Usage: /earnings <name>"
    return format_earnings_report(task_api.get_earnings_report(state, name))


def cmd_admin(state: AppState, args: list[str]) -> str:
    return format_admin_summary(task_api.get_admin_summary(state))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("register", cmd_register, help_text="Register a user: /register <name>.")
registry.register("take", cmd_take, help_text="Take a task: /take <name>.", aliases=["assign"])
registry.register("submit", cmd_submit, help_text="Submit the current task: /submit <name>.")
registry.register("earnings", cmd_earnings, help_text="Show earnings: /earnings <name>.")
registry.register("admin", cmd_admin, help_text="Show every user's task counts and totals.")

# src/inlier_tasks/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from ..cli.commands import (
    format_admin_summary,
    format_assigned,
    format_earnings_report,
    format_expired,
    format_submitted,
)
from ..cli.commands import registry as command_registry
from ..core.errors import InlierTaskError
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

MENU = (
    "1. Register\n"
    "2. Take Task\n"
    "3. Submit Task\n"
    "4. Earnings\n"
    "5. Admin Panel\n"
    "6. Exit"
)

EXIT_CHOICE = 6

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def _stderr_writer(text: str) -> None:
    print(text, file=sys.stderr, flush=True)


def _register_until_ok(state: AppState, read: Reader, write: Writer) -> None:
    """Keep prompting until a valid, unused name is registered."""
    while True:
        name = read("Enter your name: ").strip()
        try:
            task_api.register_user(state, name)
        except InlierTaskError as e:
            write(e.message)
            continue
        write("User registered successfully!")
        return


def handle_choice(state: AppState, choice: int, read: Reader, write: Writer) -> None:
    """Run one menu action. Core errors are printed, never raised."""
    if choice == 1:
        _register_until_ok(state, read, write)
        return

    if choice not in (2, 3, 4, 5):
        write("Invalid option!")
        return

    try:
        if choice == 2:
            name = read("Enter your name: ")
            write(format_assigned(task_api.assign_task(state, name)))
        elif choice == 3:
            name = read("Enter your name: ")
            write(format_submitted(task_api.submit_task(state, name)))
        elif choice == 4:
            name = read("Enter your name: ")
            write(format_earnings_report(task_api.get_earnings_report(state, name)))
        else:
            write(format_admin_summary(task_api.get_admin_summary(state)))
    except InlierTaskError as e:
        write(e.message)


def run_console_loop(
    state: AppState,
    *,
    read: Reader = input,
    write: Writer = print,
    warn: Writer = _stderr_writer,
) -> None:
    """
    Numeric menu REPL. Slash commands (/help, /take Ana, ...) are accepted too.

    Expiration warnings arrive on timer threads and go to `warn`.
    """
    logger.info("Console connector started.")

    def _on_expired(task: Task) -> None:
        warn("\n" + format_expired(task))

    state.scheduler.add_listener(_on_expired)

    while True:
        write(MENU)
        try:
            raw = read("Select: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if raw.startswith("/"):
            try:
                reply = command_registry.handle(state, raw)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."
            if reply is not None:
                write(reply)
            continue

        try:
            choice = int(raw)
        except ValueError:
            write("Invalid input. Enter a number.")
            continue

        if choice == EXIT_CHOICE:
            logger.info("Console exit choice received.")
            break

        try:
            handle_choice(state, choice, read, write)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt at a name prompt, exiting.")
            write("")
            break
        except Exception:
            logger.exception("Menu action crashed choice=%s", choice)
            write("Internal error while handling the request.")

    logger.info("Console connector finished.")

# src/inlier_tasks/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console menu in the
main thread. Expiration checks run on their own timer threads.
"""

from __future__ import annotations

import logging
import signal
import threading

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        state.scheduler.shutdown()
    except Exception:
        logger.exception("Scheduler shutdown failed.")


def make_signal_handler(stop_main: threading.Event, *, console: bool):
    """
    SIGTERM handler. Headless mode only needs the Event; the console is
    blocked in input() and never looks at it, so there it also exits.
    """

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()
        if console:
            raise SystemExit(128 + int(signum))

    return _handle_signal


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info(
        "Starting %s (task deadline %ss)...",
        settings.app_name,
        settings.task_deadline_seconds,
    )

    state = create_initial_state(settings=settings)

    # Use an Event so main can wait without a busy while-loop.
    stop_main = threading.Event()

    try:
        signal.signal(
            signal.SIGTERM,
            make_signal_handler(stop_main, console=settings.console_enabled),
        )
    except (ValueError, OSError):
        # Not in the main thread, or the platform lacks SIGTERM.
        logger.debug("SIGTERM handler not installed.", exc_info=True)

    try:
        if settings.console_enabled:
            run_console_loop(state)
            stop_main.set()
        else:
            logger.info("Console disabled. Nothing to drive the core; press Ctrl+C to stop.")
            try:
                stop_main.wait()
            except KeyboardInterrupt:
                pass
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()

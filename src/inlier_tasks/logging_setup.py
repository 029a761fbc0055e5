# src/inlier_tasks/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """
    stderr shares the terminal with the menu prompts, and expiry warnings
    land there from timer threads in the middle of a prompt.

    Keep it to what a person at the menu needs:
    - task lifecycle logs (assign/submit/expire) pass
    - connector logs only at WARNING+, the menu already echoes every action
    - anything else, py.warnings included, only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if not name.startswith("inlier_tasks."):
            return record.levelno >= logging.ERROR
        if name.startswith("inlier_tasks.connectors."):
            return record.levelno >= logging.WARNING
        return True


def setup_logging(
    *,
    log_dir: str | Path = ".local/inlier",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler: readable + filtered for interactive use
    - File handler: full logs for debugging

    Call this ONCE, very early (before first logger.info).
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "inlier.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(threadName)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)

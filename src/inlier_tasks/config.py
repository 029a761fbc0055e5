# src/inlier_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
- The task deadline is fixed per process, never per call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "INLIER"

DEFAULT_TASK_DEADLINE_SECONDS = 60

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Connector flags ----
    console_enabled: bool

    # ---- Tasks ----
    task_deadline_seconds: int

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "inlier").strip() or "inlier"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        deadline = _env_int(_k("TASK_DEADLINE_SECONDS"), DEFAULT_TASK_DEADLINE_SECONDS)
        if deadline <= 0:
            deadline = DEFAULT_TASK_DEADLINE_SECONDS

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/inlier"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            task_deadline_seconds=deadline,
            data_dir=data_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

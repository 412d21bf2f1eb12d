# src/taskmaster/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required: every field has a default.
- Malformed values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKMASTER"

DEFAULT_APP_NAME = "Task Master"
DEFAULT_SUBTITLE = "Stay organized, get things done"

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "no", "n", "off"}


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
    val = raw.strip().lower()
    if val in _TRUE_VALUES:
        return True
    if val in _FALSE_VALUES:
        return False
    return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / labels ----
    app_name: str
    subtitle: str

    # ---- Logging ----
    log_level: str
    log_dir: Path
    file_logging: bool

    # ---- Console ----
    show_timestamps: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), DEFAULT_APP_NAME).strip() or DEFAULT_APP_NAME
        subtitle = _env(_k("SUBTITLE"), DEFAULT_SUBTITLE)

        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/taskmaster"))
        file_logging = _env_bool(_k("FILE_LOGGING"), False)

        show_timestamps = _env_bool(_k("SHOW_TIMESTAMPS"), True)

        return Settings(
            app_name=app_name,
            subtitle=subtitle,
            log_level=log_level,
            log_dir=log_dir,
            file_logging=file_logging,
            show_timestamps=show_timestamps,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load .env once and build the process-wide Settings on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS

from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

from lispy.errors import LispyConfigError


_DEFAULT_PROMPT = "lispy> "
_DEFAULT_HISTORY_FILE = Path.home() / ".lispy_history"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_prompt() -> str:
    return os.environ.get("LISPY_PROMPT", _DEFAULT_PROMPT)


def get_history_file() -> Optional[Path]:
    # Set but empty disables persistence
    raw = os.environ.get("LISPY_HISTORY_FILE")
    if raw is None:
        return _DEFAULT_HISTORY_FILE
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def use_color() -> bool:
    raw = os.environ.get("LISPY_COLOR", "0").strip()
    if raw not in ("0", "1"):
        raise LispyConfigError(f"LISPY_COLOR must be 0 or 1, got {raw!r}")
    return raw == "1"


def get_log_level() -> str:
    level = os.environ.get("LISPY_LOG_LEVEL", "WARNING").strip().upper()
    if level not in _LOG_LEVELS:
        raise LispyConfigError(f"Unknown LISPY_LOG_LEVEL {level!r}")
    return level


def get_print_options() -> Optional[str]:
    """Raw JSON printer options from LISPY_PRINT_OPTIONS, if set."""
    raw = os.environ.get("LISPY_PRINT_OPTIONS", "").strip()
    return raw or None

"""
Environment configuration for the loxfront driver.
"""

import logging
import os
from typing import Optional

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PROMPT = "<- "


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value


def get_log_level(override: Optional[str] = None) -> int:
    """
    Resolve the logging level from `override` or LOX_LOG_LEVEL.

    Unknown level names fall back to WARNING.
    """
    name = (override or _env_str("LOX_LOG_LEVEL", DEFAULT_LOG_LEVEL)).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.WARNING


def get_prompt() -> str:
    """REPL prompt from LOX_PROMPT."""
    return os.getenv("LOX_PROMPT", DEFAULT_PROMPT)

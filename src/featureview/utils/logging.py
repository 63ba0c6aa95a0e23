from __future__ import annotations

import logging
from typing import Any, Optional

from featureview.config.settings import current_settings

LOGGER_NAME = "featureview"


def cascade(*values, fallback=None):
    """Return the first non-None value, or ``fallback``."""
    return next((value for value in values if value is not None), fallback)


def level_number(level: Any) -> int:
    if isinstance(level, int):
        return level
    number = logging.getLevelName(str(level).strip().upper())
    if not isinstance(number, int):
        raise ValueError(f"unknown log level {level!r}")
    return number


def configure_logging(level: Optional[Any] = None) -> int:
    """Set the package logger level and return it.

    The explicit ``level`` wins, then the active settings' ``log_level``, then
    WARNING. Handlers are left to the application.
    """
    number = level_number(cascade(level, current_settings().log_level, fallback="WARNING"))
    logging.getLogger(LOGGER_NAME).setLevel(number)
    return number

"""Mini README: Application-wide logging helpers for the expense tracker.

Structure:
    * LOG_FORMAT - shared record layout for console output.
    * level_for_environment - maps the configured environment to a level.
    * configure_root_logger - installs the console handler exactly once.
    * get_logger - factory returning module loggers.

Usage:
    Modules call ``get_logger(__name__)`` at import time. Entry points call
    ``configure_root_logger`` with the level derived from settings; repeated
    calls only adjust the level so reloads never stack duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER: Optional[logging.Handler] = None


def level_for_environment(environment: str) -> int:
    """Development runs log everything, other environments stay at INFO."""

    return logging.DEBUG if environment.lower() == "development" else logging.INFO


def configure_root_logger(level: int = logging.INFO) -> None:
    """Attach a formatted stream handler to the root logger once."""

    global _HANDLER
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _HANDLER is not None:
        return

    _HANDLER = logging.StreamHandler()
    _HANDLER.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(_HANDLER)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger."""

    return logging.getLogger(name)

"""
Logging setup for the catalog service.

Call ``configure_logging()`` once at startup (see ``app/main.py``). Modules log
through ``logging.getLogger(__name__)`` so everything lands under the ``app``
logger hierarchy.
"""

from __future__ import annotations

import logging
from typing import Optional

APP_LOGGER_NAME = "app"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _parse_level(value: Optional[str]) -> int:
    """
    Map a string level ('debug', 'INFO', ...) to a logging constant.
    Unknown or empty values fall back to INFO.
    """
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(_parse_level(level))
    # uvicorn installs its own handlers; only add one when nothing is attached yet
    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger

"""Structured logging setup.

The package never configures structlog on import. Hosts call
configure_logging() once at startup, as they would for any other logger.
"""

import logging
from typing import Optional

import structlog

from signup_form.config import get_settings


def configure_logging(debug: Optional[bool] = None, level: Optional[str] = None) -> None:
    """Configure structlog processors and level filtering.

    Anything not passed explicitly falls back to settings. Unknown level
    names fall back to info.
    """
    settings = get_settings()
    debug = settings.DEBUG if debug is None else debug
    level_number = logging.getLevelName((level or settings.LOG_LEVEL).upper())
    if not isinstance(level_number, int):
        level_number = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_number),
    )

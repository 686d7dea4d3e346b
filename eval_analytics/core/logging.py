"""
Logging setup - Evaluation Analytics
eval_analytics/core/logging.py

Wires structlog and the stdlib root logger from Settings.LOG_LEVEL / LOG_FORMAT.
Called once by the embedding application; importing the library never
configures logging.
"""

import logging
from typing import Optional

import structlog

from eval_analytics.config import settings


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure structlog and stdlib logging.

    Args:
        level: Log level name; defaults to settings.LOG_LEVEL.
        fmt: "json" or "console"; defaults to settings.LOG_FORMAT.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    renderer = (
        structlog.dev.ConsoleRenderer()
        if (fmt or settings.LOG_FORMAT) == "console"
        else structlog.processors.JSONRenderer()
    )

    logging.basicConfig(level=numeric_level, format="%(message)s")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

"""
Logging setup - Script Manifest Ranking Engine
ranking_service/core/logging.py

Routes structlog events through stdlib logging so both share LOG_LEVEL.
"""

import logging
from typing import Optional

import structlog

from ranking_service.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure stdlib logging and structlog from settings."""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL)

    logging.basicConfig(
        level=level,
        format="%(message)s",
    )

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

"""
Core Package - Script Manifest Ranking Engine
ranking_service/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from ranking_service.core.exceptions import (
    InvalidTimestampError,
    ScoringException,
)
from ranking_service.core.logging import configure_logging

__all__ = [
    # Exceptions
    "InvalidTimestampError",
    "ScoringException",
    # Logging
    "configure_logging",
]

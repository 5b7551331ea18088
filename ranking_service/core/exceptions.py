"""
Custom Exceptions - Script Manifest Ranking Engine
ranking_service/core/exceptions.py

The scoring functions are total over their documented domain; these only
cover input that never made it into that domain.
"""

from typing import Any


class ScoringException(Exception):
    """Base exception for the ranking engine."""

    pass


class InvalidTimestampError(ScoringException, ValueError):
    """Timestamp could not be interpreted as an instant."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid timestamp: {value!r}")

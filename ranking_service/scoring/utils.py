"""
Scoring Utilities
ranking_service/scoring/utils.py

Instant normalisation and rounding shared by the scoring modules.
"""

import math
from datetime import datetime, timezone
from typing import Union

from pydantic import TypeAdapter, ValidationError

from ranking_service.core.exceptions import InvalidTimestampError

Instant = Union[datetime, str]

SECONDS_PER_DAY = 86_400

_datetime_adapter = TypeAdapter(datetime)


def to_utc(value: Instant) -> datetime:
    """
    Convert a datetime or ISO-8601 string to an aware UTC datetime.

    Strings are parsed the same way the pydantic record models parse them.
    Naive datetimes are assumed to already be in UTC.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        try:
            dt = _datetime_adapter.validate_python(value.strip())
        except ValidationError as exc:
            raise InvalidTimestampError(value) from exc
    else:
        raise InvalidTimestampError(value)

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def days_between(start: Instant, end: Instant) -> float:
    """Signed number of days from start to end."""
    return (to_utc(end) - to_utc(start)).total_seconds() / SECONDS_PER_DAY


def round_score(value: float, places: int = 2) -> float:
    """Round half up to ``places`` decimals: floor(x * 10^p + 0.5) / 10^p."""
    scale = 10 ** places
    return math.floor(value * scale + 0.5) / scale

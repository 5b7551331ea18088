"""
scoring/time_decay.py

Exponential decay of a placement's weight as it ages.

Formula:
    decay = 0.5 ^ (elapsed_days / HALF_LIFE)

A placement dated now or in the future decays by nothing (1.0). Very old
placements bottom out at the smallest positive float rather than 0.
"""

import sys

from ranking_service.scoring.utils import Instant, days_between

TIME_DECAY_HALF_LIFE_DAYS = 365


def compute_time_decay(placement_date: Instant, now: Instant) -> float:
    """
    Time decay multiplier in (0, 1].

    Args:
        placement_date: When the placement was recorded.
        now: Evaluation reference instant.

    Examples:
        >>> compute_time_decay("2025-01-15T00:00:00Z", "2026-01-15T00:00:00Z")
        0.5
    """
    elapsed_days = days_between(placement_date, now)
    if elapsed_days <= 0:
        return 1.0
    return max(0.5 ** (elapsed_days / TIME_DECAY_HALF_LIFE_DAYS), sys.float_info.min)

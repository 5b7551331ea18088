"""
scoring/tiers.py

Percentile tier assignment from a writer's leaderboard rank.

    percentile = rank / total_writers     (rank is 1-indexed)

Thresholds are inclusive and checked from most to least exclusive.
"""

from typing import Dict, Optional

from ranking_service.models.enumerations import TierDesignation

TIER_THRESHOLDS: Dict[TierDesignation, float] = {
    TierDesignation.TOP_1:  0.01,
    TierDesignation.TOP_2:  0.02,
    TierDesignation.TOP_10: 0.10,
    TierDesignation.TOP_25: 0.25,
}


def assign_tier(rank: int, total_writers: int) -> Optional[TierDesignation]:
    """
    Tier for a rank within a population, or None when outside every tier.

    An empty population or a non-positive rank has no tier.

    Examples:
        >>> assign_tier(25, 100)
        <TierDesignation.TOP_25: 'top_25'>
        >>> assign_tier(26, 100) is None
        True
    """
    if total_writers == 0 or rank <= 0:
        return None

    percentile = rank / total_writers
    for tier, threshold in TIER_THRESHOLDS.items():
        if percentile <= threshold:
            return tier
    return None

"""
scoring/methodology.py

Publishes the scoring constants in effect, including configured prestige
multipliers, so a leaderboard page can explain how ranks are computed.
"""

from typing import Optional

from ranking_service.config import Settings, get_settings
from ranking_service.models.ranking import Methodology
from ranking_service.scoring.placement_score import (
    CONFIDENCE_THRESHOLD,
    STATUS_WEIGHTS,
    VERIFICATION_MULTIPLIERS,
)
from ranking_service.scoring.tiers import TIER_THRESHOLDS
from ranking_service.scoring.time_decay import TIME_DECAY_HALF_LIFE_DAYS

METHODOLOGY_VERSION = "1.0.0"


def get_methodology(settings: Optional[Settings] = None) -> Methodology:
    settings = settings or get_settings()
    return Methodology(
        status_weights=dict(STATUS_WEIGHTS),
        prestige_multipliers=settings.prestige_multipliers,
        verification_multipliers=dict(VERIFICATION_MULTIPLIERS),
        time_decay_half_life_days=TIME_DECAY_HALF_LIFE_DAYS,
        confidence_threshold=CONFIDENCE_THRESHOLD,
        tier_thresholds=dict(TIER_THRESHOLDS),
        version=METHODOLOGY_VERSION,
    )

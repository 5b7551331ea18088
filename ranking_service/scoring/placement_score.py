"""
scoring/placement_score.py

Computes the score of a single competition placement.

Formula:
    score = StatusWeight × Prestige × Verification × TimeDecay × Confidence

Where:
    - StatusWeight: fixed table, pending contributes 0
    - Verification: verified 1.0, pending 0.5, rejected 0
    - Confidence = min(1, 0.5 + 0.5 × n / CONFIDENCE_THRESHOLD)

The composition is purely multiplicative, so any zero factor zeroes the
whole score. No rounding is applied here.
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Union

from ranking_service.models.enumerations import (
    PrestigeTier,
    SubmissionStatus,
    VerificationState,
)
from ranking_service.models.ranking import (
    DEFAULT_PRESTIGE_MULTIPLIERS,
    PlacementScoreInput,
)
from ranking_service.scoring.time_decay import compute_time_decay

STATUS_WEIGHTS: Dict[SubmissionStatus, float] = {
    SubmissionStatus.PENDING:         0,
    SubmissionStatus.QUARTERFINALIST: 2,
    SubmissionStatus.SEMIFINALIST:    4,
    SubmissionStatus.FINALIST:        7,
    SubmissionStatus.WINNER:          10,
}

VERIFICATION_MULTIPLIERS: Dict[VerificationState, float] = {
    VerificationState.VERIFIED: 1.0,
    VerificationState.PENDING:  0.5,
    VerificationState.REJECTED: 0.0,
}

CONFIDENCE_THRESHOLD = 5


@dataclass(frozen=True)
class PlacementScoreBreakdown:
    """Every factor that went into a placement score."""
    status_weight: float
    prestige_multiplier: float
    verification_multiplier: float
    time_decay_factor: float
    confidence_factor: float
    raw_score: float


def status_weight(status: Union[SubmissionStatus, str]) -> float:
    return STATUS_WEIGHTS[SubmissionStatus(status)]


def resolve_prestige_multiplier(
    tier: Union[PrestigeTier, str],
    multipliers: Optional[Mapping[PrestigeTier, float]] = None,
) -> float:
    """Multiplier for a prestige tier, from ``multipliers`` or the defaults."""
    table = multipliers if multipliers is not None else DEFAULT_PRESTIGE_MULTIPLIERS
    return table[PrestigeTier(tier)]


def compute_verification_multiplier(state: Union[VerificationState, str]) -> float:
    return VERIFICATION_MULTIPLIERS[VerificationState(state)]


def compute_confidence_factor(evaluation_count: int) -> float:
    """
    Confidence in [0.5, 1.0], reaching 1.0 at CONFIDENCE_THRESHOLD evaluations.

    An unevaluated placement keeps half its weight rather than being zeroed.
    """
    count = max(0, evaluation_count)
    return min(1.0, 0.5 + (0.5 * count) / CONFIDENCE_THRESHOLD)


def compute_placement_breakdown(params: PlacementScoreInput) -> PlacementScoreBreakdown:
    """
    Score a placement and keep each factor.

    Examples:
        >>> from datetime import datetime, timezone
        >>> now = datetime(2026, 1, 1, tzinfo=timezone.utc)
        >>> compute_placement_breakdown(PlacementScoreInput(
        ...     status="winner", prestige_multiplier=2.0, verification_state="verified",
        ...     placement_date=now, now=now, evaluation_count=10,
        ... )).raw_score
        20.0
    """
    weight = status_weight(params.status)
    verification = compute_verification_multiplier(params.verification_state)
    decay = compute_time_decay(params.placement_date, params.now)
    confidence = compute_confidence_factor(params.evaluation_count)

    raw = weight * params.prestige_multiplier * verification * decay * confidence

    return PlacementScoreBreakdown(
        status_weight=weight,
        prestige_multiplier=params.prestige_multiplier,
        verification_multiplier=verification,
        time_decay_factor=decay,
        confidence_factor=confidence,
        raw_score=raw,
    )


def compute_placement_score(params: PlacementScoreInput) -> float:
    """Composite placement score, always >= 0."""
    return compute_placement_breakdown(params).raw_score

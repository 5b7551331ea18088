from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Dict, Mapping, Optional

from ranking_service.models.enumerations import (
    PrestigeTier,
    SubmissionStatus,
    TierDesignation,
    VerificationState,
)

DEFAULT_PRESTIGE_MULTIPLIERS: Dict[PrestigeTier, float] = {
    PrestigeTier.STANDARD: 1.0,
    PrestigeTier.NOTABLE:  1.5,
    PrestigeTier.ELITE:    2.0,
    PrestigeTier.PREMIER:  3.0,
}


class PlacementScoreInput(BaseModel):
    """
    Everything needed to score a single placement.
    """

    model_config = ConfigDict(frozen=True)

    status: SubmissionStatus = Field(
        ...,
        description="Placement status reached in the competition"
    )

    prestige_multiplier: float = Field(
        ...,
        ge=0,
        description="Multiplier for the competition's prestige tier"
    )

    verification_state: VerificationState = Field(
        ...,
        description="Trust level of the placement claim"
    )

    placement_date: datetime = Field(
        ...,
        description="When the placement was recorded"
    )

    now: datetime = Field(
        ...,
        description="Evaluation reference instant"
    )

    evaluation_count: int = Field(
        ...,
        ge=0,
        description="Number of evaluations corroborating the placement"
    )


class SubmissionEntry(BaseModel):
    """
    Minimal submission identity used for duplicate detection.
    """

    writer_id: str = Field(..., min_length=1)
    competition_id: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)


class SubmissionRecord(SubmissionEntry):
    """
    Submission as reported by the submission tracking service.
    """

    id: str = Field(..., min_length=1)

    status: SubmissionStatus = Field(
        default=SubmissionStatus.PENDING,
        description="Current submission status"
    )

    created_at: datetime
    updated_at: datetime


class PlacementRecord(BaseModel):
    """
    Placement attached to a submission.
    """

    id: str = Field(..., min_length=1)
    submission_id: str = Field(..., min_length=1)
    status: SubmissionStatus
    verification_state: VerificationState = VerificationState.PENDING
    created_at: datetime
    updated_at: datetime
    verified_at: Optional[datetime] = None


class CompetitionRecord(BaseModel):
    """
    Competition as listed in the competition directory.
    """

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)


class CompetitionPrestige(BaseModel):
    """
    Prestige configuration for one competition.

    When ``multiplier`` is omitted the tier's multiplier applies.
    """

    competition_id: str = Field(..., min_length=1)

    tier: PrestigeTier = Field(
        default=PrestigeTier.STANDARD,
        description="Prestige classification of the competition"
    )

    multiplier: Optional[float] = Field(
        default=None,
        ge=0,
        description="Explicit multiplier; overrides the tier multiplier"
    )

    def resolved_multiplier(
        self,
        tier_multipliers: Optional[Mapping[PrestigeTier, float]] = None,
    ) -> float:
        """Explicit multiplier if set, otherwise the tier's from ``tier_multipliers`` or the defaults."""
        if self.multiplier is not None:
            return self.multiplier
        table = tier_multipliers if tier_multipliers is not None else DEFAULT_PRESTIGE_MULTIPLIERS
        return table[PrestigeTier(self.tier)]


class Methodology(BaseModel):
    """
    Published scoring constants.
    """

    status_weights: Dict[SubmissionStatus, float]
    prestige_multipliers: Dict[PrestigeTier, float]
    verification_multipliers: Dict[VerificationState, float]
    time_decay_half_life_days: float
    confidence_threshold: int
    tier_thresholds: Dict[TierDesignation, float]
    version: str = "1.0.0"

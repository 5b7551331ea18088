"""
scoring/badges.py

Display labels for placement badges, e.g. "Finalist - Austin Film Festival 2025".
"""

from typing import Dict, Union

from ranking_service.models.enumerations import SubmissionStatus, VerificationState

STATUS_LABELS: Dict[SubmissionStatus, str] = {
    SubmissionStatus.PENDING:         "",
    SubmissionStatus.QUARTERFINALIST: "Quarterfinalist",
    SubmissionStatus.SEMIFINALIST:    "Semifinalist",
    SubmissionStatus.FINALIST:        "Finalist",
    SubmissionStatus.WINNER:          "Winner",
}


def generate_badge_label(
    status: Union[SubmissionStatus, str],
    competition_title: str,
    year: int,
) -> str:
    """Badge label for a placement; empty when the status has nothing to show."""
    label = STATUS_LABELS[SubmissionStatus(status)]
    if not label:
        return ""
    return f"{label} - {competition_title} {year}"


def is_badge_eligible(
    status: Union[SubmissionStatus, str],
    verification_state: Union[VerificationState, str],
) -> bool:
    """Only verified placements past the pending stage earn a badge."""
    return (
        VerificationState(verification_state) == VerificationState.VERIFIED
        and SubmissionStatus(status) != SubmissionStatus.PENDING
    )

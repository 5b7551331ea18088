"""
scoring/duplicates.py

Flags writers who entered more than one project into the same competition.
Detection only; what to do about a flag is up to the caller.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

import structlog

from ranking_service.models.enumerations import FlagReason
from ranking_service.models.ranking import SubmissionEntry

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DuplicateSubmissionFlag:
    """One writer/competition pair with several submitted projects."""
    writer_id: str
    competition_id: str
    duplicate_project_ids: List[str]   # encounter order, length >= 2
    reason: FlagReason = FlagReason.DUPLICATE_SUBMISSION

    @property
    def details(self) -> str:
        return (
            f"Writer submitted {len(self.duplicate_project_ids)} projects to "
            f"competition {self.competition_id}: {', '.join(self.duplicate_project_ids)}"
        )


def detect_duplicate_submissions(
    submissions: Iterable[SubmissionEntry],
) -> List[DuplicateSubmissionFlag]:
    """
    Group submissions by (writer_id, competition_id) and flag groups of 2+.

    Flags come out in the order each group's key was first seen.
    """
    by_writer_competition: Dict[Tuple[str, str], List[str]] = {}
    for sub in submissions:
        key = (sub.writer_id, sub.competition_id)
        by_writer_competition.setdefault(key, []).append(sub.project_id)

    flags: List[DuplicateSubmissionFlag] = []
    for (writer_id, competition_id), project_ids in by_writer_competition.items():
        if len(project_ids) < 2:
            continue
        flag = DuplicateSubmissionFlag(
            writer_id=writer_id,
            competition_id=competition_id,
            duplicate_project_ids=project_ids,
        )
        logger.warning(
            "duplicate_submission_detected",
            writer_id=writer_id,
            competition_id=competition_id,
            project_ids=project_ids,
        )
        flags.append(flag)

    return flags

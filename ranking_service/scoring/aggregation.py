"""
scoring/aggregation.py

Full leaderboard recompute: tracked submissions and placements → ranked writers.

Class: RankingAggregator
Method: recompute(...) → RecomputeResult

Steps:
  1. Register every writer that has a submission
  2. Resolve prestige multiplier per competition
  3. Score each placement (unknown submissions are skipped)
  4. Award badges for verified placements past pending
  5. Rank writers by total score, assign percentile tiers
  6. Compute 30-day score change from a previous snapshot
  7. Flag duplicate submissions

Nothing is read or written here; callers load the records and persist the result.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Mapping, Optional, Set, Union

import structlog

from ranking_service.config import Settings, get_settings
from ranking_service.models.enumerations import TierDesignation
from ranking_service.models.ranking import (
    CompetitionPrestige,
    CompetitionRecord,
    PlacementRecord,
    PlacementScoreInput,
    SubmissionRecord,
)
from ranking_service.scoring.badges import generate_badge_label, is_badge_eligible
from ranking_service.scoring.duplicates import (
    DuplicateSubmissionFlag,
    detect_duplicate_submissions,
)
from ranking_service.scoring.placement_score import compute_placement_breakdown
from ranking_service.scoring.tiers import assign_tier
from ranking_service.scoring.utils import Instant, round_score, to_utc

logger = structlog.get_logger(__name__)

PrestigeInput = Union[Mapping[str, float], Iterable[CompetitionPrestige]]


@dataclass
class PlacementScoreRow:
    """Scored placement with its factor breakdown."""
    placement_id: str
    writer_id: str
    competition_id: str
    project_id: str
    status_weight: float
    prestige_multiplier: float
    verification_multiplier: float
    time_decay_factor: float
    confidence_factor: float
    raw_score: float
    placement_date: datetime


@dataclass
class WriterScoreRow:
    """One leaderboard row."""
    writer_id: str
    total_score: float            # rounded to 2 dp
    submission_count: int
    placement_count: int
    rank: int                     # 1-indexed
    tier: Optional[TierDesignation]
    score_change_30d: float
    last_updated_at: datetime


@dataclass
class BadgeAward:
    writer_id: str
    label: str
    placement_id: str
    competition_id: str


@dataclass
class RecomputeResult:
    """Output of RankingAggregator.recompute()."""
    recomputed_at: datetime
    writer_scores: List[WriterScoreRow] = field(default_factory=list)
    placement_scores: List[PlacementScoreRow] = field(default_factory=list)
    badges: List[BadgeAward] = field(default_factory=list)
    flags: List[DuplicateSubmissionFlag] = field(default_factory=list)
    placement_count: int = 0

    @property
    def writer_count(self) -> int:
        return len(self.writer_scores)

    @property
    def badges_awarded(self) -> int:
        return len(self.badges)

    @property
    def flags_created(self) -> int:
        return len(self.flags)


@dataclass
class _WriterTally:
    total_score: float
    submission_ids: Set[str]
    placement_count: int
    last_updated: datetime


class RankingAggregator:
    """Recompute the writer leaderboard from tracked submissions and placements."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def resolve_prestige(self, prestige: Optional[PrestigeInput]) -> Dict[str, float]:
        """
        Competition id → multiplier.

        Prestige entries that only name a tier use the configured tier
        multipliers rather than the built-in defaults.
        """
        if prestige is None:
            return {}
        if isinstance(prestige, Mapping):
            return {cid: float(m) for cid, m in prestige.items()}

        tier_multipliers = self.settings.prestige_multipliers
        return {
            entry.competition_id: entry.resolved_multiplier(tier_multipliers)
            for entry in prestige
        }

    def recompute(
        self,
        submissions: Iterable[SubmissionRecord],
        placements: Iterable[PlacementRecord],
        competitions: Iterable[CompetitionRecord] = (),
        prestige: Optional[PrestigeInput] = None,
        now: Optional[Instant] = None,
        previous_scores: Optional[Mapping[str, float]] = None,
        badged_placement_ids: Iterable[str] = (),
    ) -> RecomputeResult:
        """
        Rank every writer.

        Args:
            submissions: All tracked submissions.
            placements: All placements; each references a submission by id.
            competitions: Used for badge titles. Unknown ids fall back to the id.
            prestige: Per-competition multipliers, as a mapping or prestige entries.
                      Competitions without one use DEFAULT_PRESTIGE_MULTIPLIER.
            now: Reference instant for time decay. Defaults to the current time.
            previous_scores: Writer id → total score from the snapshot 30 days ago.
            badged_placement_ids: Placements that already hold a badge.

        Returns:
            RecomputeResult with leaderboard rows, placement rows, new badges and flags.
        """
        now_dt = to_utc(now) if now is not None else datetime.now(timezone.utc)
        submissions = list(submissions)
        placements = list(placements)
        previous_scores = previous_scores or {}
        already_badged = set(badged_placement_ids)

        prestige_map = self.resolve_prestige(prestige)
        competition_titles = {c.id: c.title for c in competitions}
        submission_map = {s.id: s for s in submissions}

        # 1. Writers with submissions
        writers: Dict[str, _WriterTally] = {}
        for sub in submissions:
            tally = self._tally_for(writers, sub.writer_id, sub.updated_at)
            tally.submission_ids.add(sub.id)
            tally.last_updated = max(tally.last_updated, to_utc(sub.updated_at))

        # 2-4. Placement scores and badges
        result = RecomputeResult(recomputed_at=now_dt, placement_count=len(placements))
        for placement in placements:
            submission = submission_map.get(placement.submission_id)
            if submission is None:
                logger.debug(
                    "placement_skipped",
                    placement_id=placement.id,
                    submission_id=placement.submission_id,
                )
                continue

            tally = self._tally_for(writers, submission.writer_id, submission.updated_at)
            multiplier = prestige_map.get(
                submission.competition_id, self.settings.DEFAULT_PRESTIGE_MULTIPLIER
            )
            breakdown = compute_placement_breakdown(PlacementScoreInput(
                status=placement.status,
                prestige_multiplier=multiplier,
                verification_state=placement.verification_state,
                placement_date=placement.created_at,
                now=now_dt,
                evaluation_count=tally.placement_count + 1,
            ))

            result.placement_scores.append(PlacementScoreRow(
                placement_id=placement.id,
                writer_id=submission.writer_id,
                competition_id=submission.competition_id,
                project_id=submission.project_id,
                status_weight=breakdown.status_weight,
                prestige_multiplier=breakdown.prestige_multiplier,
                verification_multiplier=breakdown.verification_multiplier,
                time_decay_factor=breakdown.time_decay_factor,
                confidence_factor=breakdown.confidence_factor,
                raw_score=breakdown.raw_score,
                placement_date=placement.created_at,
            ))

            tally.total_score += breakdown.raw_score
            tally.placement_count += 1
            tally.last_updated = max(tally.last_updated, to_utc(placement.updated_at))

            badge = self._badge_for(placement, submission, competition_titles, already_badged)
            if badge is not None:
                already_badged.add(placement.id)
                result.badges.append(badge)

        # 5-6. Ranks, tiers and 30-day change
        ranked = sorted(writers.items(), key=lambda item: item[1].total_score, reverse=True)
        total_writers = len(ranked)
        for index, (writer_id, tally) in enumerate(ranked):
            total = round_score(tally.total_score)
            previous = previous_scores.get(writer_id)
            change = round_score(total - previous) if previous is not None else 0.0
            result.writer_scores.append(WriterScoreRow(
                writer_id=writer_id,
                total_score=total,
                submission_count=len(tally.submission_ids),
                placement_count=tally.placement_count,
                rank=index + 1,
                tier=assign_tier(index + 1, total_writers),
                score_change_30d=change,
                last_updated_at=tally.last_updated,
            ))

        # 7. Anti-gaming
        result.flags = detect_duplicate_submissions(submissions)

        logger.info(
            "ranking_recomputed",
            recomputed_at=now_dt.isoformat(),
            writer_count=result.writer_count,
            placement_count=result.placement_count,
            badges_awarded=result.badges_awarded,
            flags_created=result.flags_created,
        )
        return result

    @staticmethod
    def _tally_for(
        writers: Dict[str, _WriterTally],
        writer_id: str,
        updated_at: datetime,
    ) -> _WriterTally:
        tally = writers.get(writer_id)
        if tally is None:
            tally = _WriterTally(
                total_score=0.0,
                submission_ids=set(),
                placement_count=0,
                last_updated=to_utc(updated_at),
            )
            writers[writer_id] = tally
        return tally

    @staticmethod
    def _badge_for(
        placement: PlacementRecord,
        submission: SubmissionRecord,
        competition_titles: Mapping[str, str],
        already_badged: Set[str],
    ) -> Optional[BadgeAward]:
        if placement.id in already_badged:
            return None
        if not is_badge_eligible(placement.status, placement.verification_state):
            return None

        title = competition_titles.get(submission.competition_id, submission.competition_id)
        label = generate_badge_label(
            placement.status, title, to_utc(placement.created_at).year
        )
        if not label:
            return None
        return BadgeAward(
            writer_id=submission.writer_id,
            label=label,
            placement_id=placement.id,
            competition_id=submission.competition_id,
        )


def build_snapshot(writer_scores: Iterable[WriterScoreRow]) -> Dict[str, float]:
    """Writer id → total score, for use as ``previous_scores`` on a later run."""
    return {row.writer_id: row.total_score for row in writer_scores}

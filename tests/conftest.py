# tests/conftest.py

"""
Pytest Fixtures - Shared settings and ranking records for all tests

RECORD REFERENCE:
- Writers:      w1 (two projects in c1), w2 (one project in c2), w3, w4 (no placements)
- Competitions: c1 Austin Film Festival (elite), c2 Sundance (explicit 3.0)
- Placements:   pl1 winner/verified, pl2 finalist/pending, pl3 semifinalist/verified
                (one year old), pl-orphan (unknown submission)
"""

from datetime import datetime, timezone

import pytest

from ranking_service.config import Settings
from ranking_service.models.enumerations import PrestigeTier
from ranking_service.models.ranking import (
    CompetitionPrestige,
    CompetitionRecord,
    PlacementRecord,
    SubmissionRecord,
)
from ranking_service.scoring.aggregation import RankingAggregator


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================

@pytest.fixture
def settings():
    """Default settings, isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def aggregator(settings):
    return RankingAggregator(settings=settings)


# =============================================================================
# TIME FIXTURES
# =============================================================================

@pytest.fixture
def now():
    """Evaluation reference instant."""
    return datetime(2026, 1, 15, tzinfo=timezone.utc)


@pytest.fixture
def one_year_ago():
    return datetime(2025, 1, 15, tzinfo=timezone.utc)


# =============================================================================
# RECORD FIXTURES
# =============================================================================

@pytest.fixture
def competitions():
    return [
        CompetitionRecord(id="c1", title="Austin Film Festival"),
        CompetitionRecord(id="c2", title="Sundance"),
    ]


@pytest.fixture
def prestige():
    """c1 only names a tier; c2 carries an explicit multiplier."""
    return [
        CompetitionPrestige(competition_id="c1", tier=PrestigeTier.ELITE),
        CompetitionPrestige(competition_id="c2", tier=PrestigeTier.NOTABLE, multiplier=3.0),
    ]


@pytest.fixture
def submissions():
    return [
        SubmissionRecord(
            id="s1", writer_id="w1", competition_id="c1", project_id="p1",
            status="winner",
            created_at="2025-12-01T00:00:00Z", updated_at="2026-01-10T00:00:00Z",
        ),
        SubmissionRecord(
            id="s2", writer_id="w1", competition_id="c1", project_id="p2",
            status="finalist",
            created_at="2025-12-01T00:00:00Z", updated_at="2026-01-05T00:00:00Z",
        ),
        SubmissionRecord(
            id="s3", writer_id="w2", competition_id="c2", project_id="p3",
            status="semifinalist",
            created_at="2024-12-01T00:00:00Z", updated_at="2025-01-15T00:00:00Z",
        ),
        SubmissionRecord(
            id="s4", writer_id="w3", competition_id="c1", project_id="p4",
            created_at="2025-11-01T00:00:00Z", updated_at="2025-11-01T00:00:00Z",
        ),
        SubmissionRecord(
            id="s5", writer_id="w4", competition_id="c2", project_id="p5",
            created_at="2025-11-02T00:00:00Z", updated_at="2025-11-02T00:00:00Z",
        ),
    ]


@pytest.fixture
def placements(now, one_year_ago):
    return [
        PlacementRecord(
            id="pl1", submission_id="s1", status="winner", verification_state="verified",
            created_at=now, updated_at="2026-01-12T00:00:00Z",
        ),
        PlacementRecord(
            id="pl2", submission_id="s2", status="finalist", verification_state="pending",
            created_at=now, updated_at=now,
        ),
        PlacementRecord(
            id="pl3", submission_id="s3", status="semifinalist", verification_state="verified",
            created_at=one_year_ago, updated_at=one_year_ago,
        ),
        PlacementRecord(
            id="pl-orphan", submission_id="missing", status="winner",
            verification_state="verified", created_at=now, updated_at=now,
        ),
    ]

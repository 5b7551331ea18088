"""
scoring/: Placement Ranking Engine

Modules:
    utils.py            - Instant normalisation and rounding helpers
    time_decay.py       - Exponential time decay (1-year half-life)
    placement_score.py  - Status weights, verification, confidence, composite score
    tiers.py            - Percentile tier assignment
    badges.py           - Placement badge labels
    duplicates.py       - Duplicate submission detection
    methodology.py      - Published scoring constants
    aggregation.py      - Writer leaderboard recompute
"""

"""Score tiers - coarse labels for a 0-100 match score."""

from enum import Enum


class ScoreTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


# Lower bounds, checked top-down.
TIER_THRESHOLDS = (
    (85, ScoreTier.EXCELLENT),
    (70, ScoreTier.GOOD),
    (55, ScoreTier.FAIR),
)


def score_tier(score: float) -> ScoreTier:
    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return ScoreTier.POOR

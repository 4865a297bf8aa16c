#!/usr/bin/env python3
"""
Match Scoring Service - Weighted Dream Job Match Score.

Runs the five factor scorers and combines them with the user's priority
weights:

    total_score = round(sum(score * weight / 100))

The company_size weight takes part in the sum-to-100 invariant but has no
scorer, so it never contributes to the total.

Everything here is a pure function of (application, preferences, config);
the service object only carries configuration.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence
import logging

from career_crush.config_loader import RankingPolicy, ScorerConfig
from career_crush.scorer import factors
from career_crush.scorer.models import (
    FactorScore,
    JobApplication,
    JobPreferences,
    MatchBreakdown,
)
from career_crush.scorer.weights import (
    WEIGHT_TOTAL,
    sanitize_weights,
    weights_total,
)

logger = logging.getLogger(__name__)

FACTOR_SCORERS = {
    "location": factors.score_location,
    "salary": factors.score_salary,
    "role_type": factors.score_role_type,
    "industry": factors.score_industry,
    "work_style": factors.score_work_style,
}


def _no_preferences_breakdown(config: ScorerConfig) -> MatchBreakdown:
    weights = config.default_priority_weights.as_dict()
    scored = {
        key: FactorScore(config.neutral_score, weights[key], "No preferences set")
        for key in FACTOR_SCORERS
    }
    return _aggregate(scored)


def _aggregate(scored: dict) -> MatchBreakdown:
    total = sum(f.contribution for f in scored.values())
    return MatchBreakdown(total_score=factors.clamp_score(total), **scored)


def compute_match_score(
    application: JobApplication,
    preferences: Optional[JobPreferences],
    config: Optional[ScorerConfig] = None
) -> MatchBreakdown:
    """
    Calculate the Dream Job Match Score for one application.

    Args:
        application: Application being scored
        preferences: The user's job preferences (None if never filled in)
        config: Scoring thresholds; defaults to ScorerConfig()

    Returns:
        MatchBreakdown with per-factor scores, weights, reasons and total
    """
    config = config or ScorerConfig()
    if preferences is None:
        return _no_preferences_breakdown(config)

    weights = sanitize_weights(preferences.priority_weights)
    total_weight = weights_total(weights)
    if total_weight != WEIGHT_TOTAL:
        logger.warning(
            "Priority weights sum to %d instead of %d: %s",
            total_weight, WEIGHT_TOTAL, weights
        )

    scored = {}
    for key, scorer in FACTOR_SCORERS.items():
        result = scorer(application, preferences, config)
        scored[key] = FactorScore(
            score=factors.clamp_score(result.score),
            weight=weights[key],
            reason=result.reason,
        )

    breakdown = _aggregate(scored)
    logger.debug("Scored %s: %d", application.label, breakdown.total_score)
    return breakdown


@dataclass
class RankedApplication:
    application: JobApplication
    breakdown: MatchBreakdown

    @property
    def total_score(self) -> int:
        return self.breakdown.total_score


class MatchScoringService:
    """Scores and ranks applications against one set of preferences."""

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()

    def score(
        self,
        application: JobApplication,
        preferences: Optional[JobPreferences]
    ) -> MatchBreakdown:
        return compute_match_score(application, preferences, self.config)

    def rank(
        self,
        applications: Sequence[JobApplication],
        preferences: Optional[JobPreferences],
        policy: Optional[RankingPolicy] = None
    ) -> List[RankedApplication]:
        """
        Score every application and return them best-first.

        Ties keep their input order. The policy drops results below
        min_score and keeps at most top_k.
        """
        policy = policy or RankingPolicy()
        ranked = [
            RankedApplication(app, self.score(app, preferences))
            for app in applications
        ]
        ranked.sort(key=lambda r: -r.total_score)

        kept = [r for r in ranked if r.total_score >= policy.min_score][:policy.top_k]
        logger.info(
            "Ranked %d applications -> %d kept (min_score=%d, top_k=%d)",
            len(applications), len(kept), policy.min_score, policy.top_k
        )
        return kept


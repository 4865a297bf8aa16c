#!/usr/bin/env python3
"""
Scoring Module - Dream Job Match Score.

Public API:
- Data structures and weight editing are exported here
- compute_match_score and MatchScoringService live in service.py, which
  depends on career_crush.config_loader and is not imported here

Modules:
- models.py: Data structures (JobApplication, JobPreferences, MatchBreakdown)
- text_match.py: Case-insensitive containment and region matching
- factors.py: Per-factor scorers (location, salary, role type, industry, work style)
- service.py: Weighted aggregation and ranking
- weights.py: Sum-to-100 weight maps and proportional redistribution
- tiers.py: Score tier labels
"""

from career_crush.scorer.models import (
    FactorScore,
    JobApplication,
    JobPreferences,
    MatchBreakdown,
    RemotePreference,
    SalaryRange,
)
from career_crush.scorer.tiers import ScoreTier, score_tier
from career_crush.scorer.weights import (
    DEFAULT_PRIORITY_WEIGHTS,
    WEIGHT_KEYS,
    redistribute_weight,
    reset_weights,
)

__all__ = [
    'JobApplication',
    'JobPreferences',
    'MatchBreakdown',
    'FactorScore',
    'RemotePreference',
    'SalaryRange',
    'ScoreTier',
    'score_tier',
    'DEFAULT_PRIORITY_WEIGHTS',
    'WEIGHT_KEYS',
    'redistribute_weight',
    'reset_weights',
]

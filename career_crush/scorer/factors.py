#!/usr/bin/env python3
"""
Factor Scorers - One pure scorer per preference dimension.

Each scorer returns a FactorScore (0-100 plus a human-readable reason).
Scorers never raise: missing data on either side yields the neutral
score so that an incomplete record is neither rewarded nor penalized.
Weights are filled in later by the aggregator.
"""

from typing import Optional
import logging
import math

from career_crush.config_loader import ScorerConfig
from career_crush.scorer.models import (
    FactorScore,
    JobApplication,
    JobPreferences,
    RemotePreference,
)
from career_crush.scorer.text_match import (
    location_matches,
    matches_any,
    normalize,
)
from career_crush.scorer.weights import round_half_up

logger = logging.getLogger(__name__)

INSUFFICIENT_DATA = "Insufficient data to compare"

WORK_STYLE_ALIASES = {
    "remote": RemotePreference.REMOTE,
    "fully remote": RemotePreference.REMOTE,
    "hybrid": RemotePreference.HYBRID,
    "on-site": RemotePreference.ONSITE,
    "onsite": RemotePreference.ONSITE,
    "on site": RemotePreference.ONSITE,
    "in-office": RemotePreference.ONSITE,
    "in office": RemotePreference.ONSITE,
    "office": RemotePreference.ONSITE,
}


def clamp_score(value: float) -> int:
    return max(0, min(100, round_half_up(value)))


def canonical_work_style(value: Optional[str]) -> Optional[RemotePreference]:
    """Map a free-form work style ("On-site", "Remote", ...) onto a preference value."""
    return WORK_STYLE_ALIASES.get(normalize(value))


def is_remote_job(application: JobApplication) -> bool:
    return (
        canonical_work_style(application.work_style) == RemotePreference.REMOTE
        or normalize(application.location) == "remote"
    )


def _money(amount: float) -> str:
    return f"${amount:,.0f}"


def score_location(
    application: JobApplication,
    preferences: JobPreferences,
    config: ScorerConfig
) -> FactorScore:
    remote_job = is_remote_job(application)
    remote_pref = preferences.remote_preference

    if remote_job and remote_pref == RemotePreference.REMOTE:
        return FactorScore(100, reason="Remote role matches your remote preference")

    if preferences.locations and normalize(application.location):
        regions = config.region_mapping()
        for preferred in preferences.locations:
            pref = normalize(preferred)
            if pref == "anywhere" or (pref == "remote" and remote_job):
                return FactorScore(100, reason=f"Open to {preferred}")
            if location_matches(application.location, preferred, regions):
                return FactorScore(100, reason=f"{application.location} matches {preferred}")

    # Remote tolerance applies whether or not any locations are listed
    if remote_job and remote_pref in (RemotePreference.FLEXIBLE, RemotePreference.HYBRID):
        return FactorScore(config.flexible_remote_score, reason="Remote work available")

    if not preferences.locations or not normalize(application.location):
        return FactorScore(config.neutral_score, reason=f"{INSUFFICIENT_DATA} location")

    return FactorScore(
        config.mismatch_score,
        reason=f"{application.location} has no overlap with your preferred locations",
    )


def score_salary(
    application: JobApplication,
    preferences: JobPreferences,
    config: ScorerConfig
) -> FactorScore:
    """
    Score the application's pay range against the user's target range.

    Only an underpaying job loses points: the score falls linearly from 100
    to 0 as the shortfall below the user's minimum grows to
    salary_gap_tolerance (a fraction of that minimum).
    """
    target = preferences.salary_range
    if target.is_unset:
        return FactorScore(100, reason="No salary preference set")
    if not target.min or target.min <= 0:
        return FactorScore(100, reason="No minimum salary set")

    if application.salary_min is None and application.salary_max is None:
        return FactorScore(config.neutral_score, reason=f"{INSUFFICIENT_DATA} salary")

    app_min = application.salary_min if application.salary_min is not None else -math.inf
    app_max = application.salary_max if application.salary_max is not None else math.inf
    pref_max = target.max if target.max and target.max > 0 else math.inf

    if app_max >= target.min:
        overlap = min(app_max, pref_max) - max(app_min, target.min)
        if math.isfinite(overlap) and overlap > 0:
            reason = f"Salary range overlaps your target by {_money(overlap)}"
        else:
            reason = f"Salary meets your {_money(target.min)} minimum"
        return FactorScore(100, reason=reason)

    gap = target.min - app_max
    shortfall = gap / target.min
    score = clamp_score(100 * (1 - shortfall / config.salary_gap_tolerance))
    logger.debug("Salary gap %s (%.1f%%) -> %d", gap, shortfall * 100, score)
    return FactorScore(
        score,
        reason=f"Salary tops out {_money(gap)} below your {_money(target.min)} minimum",
    )


def _score_free_text(
    label: str,
    value: Optional[str],
    preferred: list,
    config: ScorerConfig
) -> FactorScore:
    if not preferred or not normalize(value):
        return FactorScore(config.neutral_score, reason=f"{INSUFFICIENT_DATA} {label}")

    hit = matches_any(value, preferred)
    if hit is not None:
        return FactorScore(100, reason=f"{label.capitalize()} matches {hit}")
    return FactorScore(
        config.mismatch_score,
        reason=f"{label.capitalize()} {value} is not one of your targets",
    )


def score_role_type(
    application: JobApplication,
    preferences: JobPreferences,
    config: ScorerConfig
) -> FactorScore:
    return _score_free_text("role type", application.role_type, preferences.all_role_types, config)


def score_industry(
    application: JobApplication,
    preferences: JobPreferences,
    config: ScorerConfig
) -> FactorScore:
    return _score_free_text("industry", application.industry, preferences.all_industries, config)


def score_work_style(
    application: JobApplication,
    preferences: JobPreferences,
    config: ScorerConfig
) -> FactorScore:
    pref = preferences.remote_preference
    if not normalize(application.work_style) or pref is None:
        return FactorScore(config.neutral_score, reason=f"{INSUFFICIENT_DATA} work style")

    if pref == RemotePreference.FLEXIBLE:
        return FactorScore(100, reason="Flexible on work arrangement")

    style = canonical_work_style(application.work_style)
    if style is None:
        return FactorScore(
            config.neutral_score,
            reason=f"Unrecognized work style {application.work_style}",
        )
    if style == pref:
        return FactorScore(100, reason=f"{application.work_style} matches your preference")
    return FactorScore(
        config.mismatch_score,
        reason=f"{application.work_style} does not match your {pref.value} preference",
    )

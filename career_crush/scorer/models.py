#!/usr/bin/env python3
"""
Scoring Models - Applications, preferences and match breakdowns.

Row adapters accept both the database column names (snake_case) and the
web client's record shape (camelCase, nested salaryRange).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional
import logging

from career_crush.scorer.text_match import normalize
from career_crush.scorer.tiers import ScoreTier, score_tier
from career_crush.scorer.weights import (
    DEFAULT_PRIORITY_WEIGHTS,
    reset_weights,
    sanitize_weights,
)

logger = logging.getLogger(__name__)


def _pick(row: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = row.get(key)
        if value is not None:
            return value
    return None


def _to_amount(value: Any) -> Optional[int]:
    """Parse a salary figure ("$120,000", 120000.0, "120000") into an int."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.replace("$", "").replace(",", "").strip()
        if not value:
            return None
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        logger.warning("Could not parse salary value %r", value)
        return None


def _to_str_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        value = [value]
    return [str(v).strip() for v in value if v is not None and str(v).strip()]


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class RemotePreference(str, Enum):
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"
    FLEXIBLE = "flexible"

    @classmethod
    def parse(cls, value: Any) -> Optional["RemotePreference"]:
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        key = str(value).strip().lower().replace("-", "").replace(" ", "").replace("_", "")
        for member in cls:
            if member.value == key:
                return member
        logger.debug("Unknown remote preference %r", value)
        return None


@dataclass
class JobApplication:
    """The fields of a tracked application that take part in scoring."""
    location: Optional[str] = None
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    role_type: Optional[str] = None
    industry: Optional[str] = None
    work_style: Optional[str] = None

    # Display only
    id: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "JobApplication":
        return cls(
            location=_optional_str(row.get("location")),
            salary_min=_to_amount(_pick(row, "salary_min", "salaryMin")),
            salary_max=_to_amount(_pick(row, "salary_max", "salaryMax")),
            role_type=_optional_str(_pick(row, "role_type", "roleType")),
            industry=_optional_str(row.get("industry")),
            work_style=_optional_str(_pick(row, "work_style", "workStyle")),
            id=_optional_str(row.get("id")),
            company=_optional_str(_pick(row, "company", "companyName")),
            position=_optional_str(_pick(row, "position", "roleTitle")),
        )

    @property
    def label(self) -> str:
        parts = [p for p in (self.position, self.company) if p]
        return " at ".join(parts) if parts else (self.id or "application")


@dataclass
class WorkStylePreferences:
    """Reserved; not used by any scorer."""
    pace_preference: Optional[str] = None
    collaboration_style: Optional[str] = None
    management_preference: Optional[str] = None
    growth_priority: Optional[str] = None


@dataclass
class SalaryRange:
    min: int = 0
    max: int = 0

    @property
    def is_unset(self) -> bool:
        return not self.min and not self.max


@dataclass
class JobPreferences:
    """A user's Dream Job profile."""
    locations: List[str] = field(default_factory=list)
    remote_preference: Optional[RemotePreference] = RemotePreference.FLEXIBLE
    role_types: List[str] = field(default_factory=list)
    custom_role_types: List[str] = field(default_factory=list)
    industries: List[str] = field(default_factory=list)
    custom_industries: List[str] = field(default_factory=list)
    work_style: WorkStylePreferences = field(default_factory=WorkStylePreferences)
    salary_range: SalaryRange = field(default_factory=SalaryRange)
    dealbreakers: List[str] = field(default_factory=list)
    priority_weights: Dict[str, int] = field(default_factory=reset_weights)

    @property
    def all_role_types(self) -> List[str]:
        return _merge_unique(self.role_types, self.custom_role_types)

    @property
    def all_industries(self) -> List[str]:
        return _merge_unique(self.industries, self.custom_industries)

    @classmethod
    def from_row(
        cls,
        row: Mapping[str, Any],
        default_weights: Mapping[str, int] = DEFAULT_PRIORITY_WEIGHTS
    ) -> "JobPreferences":
        """
        Build preferences from a job_preferences row or a client record.

        The database row has no remote preference column, only a
        work_styles list; a single entry is taken as the preference and
        several entries mean flexible.
        """
        remote = RemotePreference.parse(_pick(row, "remote_preference", "remotePreference"))
        if remote is None:
            styles = _to_str_list(row.get("work_styles"))
            if len(styles) == 1:
                remote = RemotePreference.parse(styles[0])
            elif len(styles) > 1:
                remote = RemotePreference.FLEXIBLE

        salary = _pick(row, "salaryRange", "salary_range")
        if isinstance(salary, Mapping):
            salary_min, salary_max = salary.get("min"), salary.get("max")
        else:
            salary_min, salary_max = row.get("salary_min"), row.get("salary_max")

        work_style = _pick(row, "workStyle", "work_style") or {}
        if not isinstance(work_style, Mapping):
            work_style = {}

        raw_weights = _pick(row, "priorityWeights", "priority_weights")
        if isinstance(raw_weights, Mapping) and raw_weights:
            weights = sanitize_weights(raw_weights)
        else:
            weights = reset_weights(default_weights)

        return cls(
            locations=_to_str_list(row.get("locations")),
            remote_preference=remote,
            role_types=_to_str_list(_pick(row, "roleTypes", "role_types")),
            custom_role_types=_to_str_list(_pick(row, "customRoleTypes", "custom_role_types")),
            industries=_to_str_list(row.get("industries")),
            custom_industries=_to_str_list(_pick(row, "customIndustries", "custom_industries")),
            work_style=WorkStylePreferences(
                pace_preference=_pick(work_style, "pacePreference", "pace_preference"),
                collaboration_style=_pick(work_style, "collaborationStyle", "collaboration_style"),
                management_preference=_pick(work_style, "managementPreference", "management_preference"),
                growth_priority=_pick(work_style, "growthPriority", "growth_priority"),
            ),
            salary_range=SalaryRange(
                min=_to_amount(salary_min) or 0,
                max=_to_amount(salary_max) or 0,
            ),
            dealbreakers=_to_str_list(row.get("dealbreakers")),
            priority_weights=weights,
        )


def _merge_unique(*groups: List[str]) -> List[str]:
    seen = set()
    merged = []
    for group in groups:
        for item in group or []:
            key = normalize(item)
            if key and key not in seen:
                seen.add(key)
                merged.append(item)
    return merged


@dataclass
class FactorScore:
    """One scored preference dimension."""
    score: int
    weight: int = 0
    reason: str = ""

    @property
    def contribution(self) -> float:
        return self.score * self.weight / 100

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "weight": self.weight, "reason": self.reason}


@dataclass
class MatchBreakdown:
    """Per-factor scores plus the weighted total for one application."""
    location: FactorScore
    salary: FactorScore
    role_type: FactorScore
    industry: FactorScore
    work_style: FactorScore
    total_score: int = 0

    @property
    def tier(self) -> ScoreTier:
        return score_tier(self.total_score)

    def factors(self) -> Dict[str, FactorScore]:
        return {
            "location": self.location,
            "salary": self.salary,
            "role_type": self.role_type,
            "industry": self.industry,
            "work_style": self.work_style,
        }

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {k: f.to_dict() for k, f in self.factors().items()}
        data["total_score"] = self.total_score
        data["tier"] = self.tier.value
        return data

import yaml
import os
import logging
from typing import List, Dict, Optional
from pydantic import BaseModel, Field, model_validator

from career_crush.scorer.regions import REGION_MAPPING
from career_crush.scorer.weights import DEFAULT_PRIORITY_WEIGHTS, WEIGHT_TOTAL

logger = logging.getLogger(__name__)


class PriorityWeights(BaseModel):
    """Default priority weights (percent). Must sum to 100."""
    location: int = Field(DEFAULT_PRIORITY_WEIGHTS["location"], ge=0, le=100)
    salary: int = Field(DEFAULT_PRIORITY_WEIGHTS["salary"], ge=0, le=100)
    role_type: int = Field(DEFAULT_PRIORITY_WEIGHTS["role_type"], ge=0, le=100)
    industry: int = Field(DEFAULT_PRIORITY_WEIGHTS["industry"], ge=0, le=100)
    company_size: int = Field(DEFAULT_PRIORITY_WEIGHTS["company_size"], ge=0, le=100)
    work_style: int = Field(DEFAULT_PRIORITY_WEIGHTS["work_style"], ge=0, le=100)

    @model_validator(mode="after")
    def check_total(self):
        total = sum(self.model_dump().values())
        if total != WEIGHT_TOTAL:
            raise ValueError(f"priority weights must sum to {WEIGHT_TOTAL}, got {total}")
        return self

    def as_dict(self) -> Dict[str, int]:
        return self.model_dump()


class ScorerConfig(BaseModel):
    """
    Configuration for the match scoring engine.

    Scores are integer percents. The neutral score is used whenever there is
    not enough data to judge a factor either way.
    """
    neutral_score: int = Field(50, ge=0, le=100)
    mismatch_score: int = Field(30, ge=0, le=100)
    # Remote job, user open to remote but not set on it
    flexible_remote_score: int = Field(80, ge=0, le=100)
    # Salary shortfall (fraction of the user's minimum) at which the score hits 0
    salary_gap_tolerance: float = Field(0.15, gt=0.0)

    default_priority_weights: PriorityWeights = Field(default_factory=PriorityWeights)

    # Extra or extended regions, e.g. {"pacific northwest": ["seattle", "portland"]}
    extra_regions: Dict[str, List[str]] = Field(default_factory=dict)

    def region_mapping(self) -> Dict[str, List[str]]:
        regions = {name: list(places) for name, places in REGION_MAPPING.items()}
        for name, places in self.extra_regions.items():
            key = name.strip().lower()
            merged = regions.setdefault(key, [])
            merged.extend(p.strip().lower() for p in places if p.strip().lower() not in merged)
        return regions


class RankingPolicy(BaseModel):
    """Post-scoring filtering and truncation for ranked lists."""
    min_score: int = Field(0, ge=0, le=100)
    top_k: int = Field(100, ge=1)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseModel):
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    ranking: RankingPolicy = Field(default_factory=RankingPolicy)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = "config.yaml") -> AppConfig:
    env_config_path = os.environ.get("CAREER_CRUSH_CONFIG")
    if env_config_path:
        config_path = env_config_path

    # If not found at relative path (e.g. running from another directory), try the repo root
    if not config_path or not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")
    else:
        logger.info("No config file found, using defaults")

    # Allow env var override for log level
    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level:
        if not data.get("logging"):
            data["logging"] = {}
        data["logging"]["level"] = env_log_level.upper()

    return AppConfig(**data)

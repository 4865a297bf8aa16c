#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    uv run python -m pytest tests/ -v

    # Using unittest
    uv run python -m unittest discover tests -v

Shared builders for applications and preferences live here so that each
suite states only the fields it cares about.
"""

from career_crush.scorer.models import (
    JobApplication,
    JobPreferences,
    RemotePreference,
    SalaryRange,
)

EQUAL_WEIGHTS = {
    "location": 20,
    "salary": 20,
    "role_type": 20,
    "industry": 20,
    "company_size": 0,
    "work_style": 20,
}


def make_application(**overrides) -> JobApplication:
    """Remote product design role paying 120k-150k."""
    fields = dict(
        location="Remote",
        salary_min=120000,
        salary_max=150000,
        role_type="Product Designer",
        industry="Tech",
        work_style="Remote",
        company="Linear",
        position="Product Designer",
    )
    fields.update(overrides)
    return JobApplication(**fields)


def make_preferences(**overrides) -> JobPreferences:
    """Remote-only product designer targeting 100k-160k with equal weights."""
    fields = dict(
        remote_preference=RemotePreference.REMOTE,
        salary_range=SalaryRange(min=100000, max=160000),
        role_types=["Product Designer"],
        industries=["Tech"],
        priority_weights=dict(EQUAL_WEIGHTS),
    )
    fields.update(overrides)
    return JobPreferences(**fields)

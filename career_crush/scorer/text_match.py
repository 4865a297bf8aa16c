#!/usr/bin/env python3
"""
Text Matching - Case-insensitive containment rules for free-text fields.

Role types, industries and locations are free strings entered by the
user. Two values match when, after trimming and lowercasing, one contains
the other. Locations additionally understand named regions
("bay area", "midwest", ...).
"""

from typing import Iterable, Mapping, Optional, Sequence
import re

from career_crush.scorer.regions import REGION_MAPPING


def normalize(value: Optional[str]) -> str:
    if value is None:
        return ""
    return str(value).strip().lower()


def contains_either(a: Optional[str], b: Optional[str]) -> bool:
    """True when both values are non-empty and one contains the other."""
    left, right = normalize(a), normalize(b)
    if not left or not right:
        return False
    return left in right or right in left


def matches_any(value: Optional[str], candidates: Iterable[str]) -> Optional[str]:
    """Return the first candidate that matches value, or None."""
    if not normalize(value):
        return None
    for candidate in candidates:
        if contains_either(value, candidate):
            return candidate
    return None


def _mentions(text: str, place: str) -> bool:
    # Whole-token match so "la" does not hit "atlanta".
    pattern = r"(?<![a-z0-9])" + re.escape(place) + r"(?![a-z0-9])"
    return re.search(pattern, text) is not None


def location_matches(
    job_location: Optional[str],
    preference: Optional[str],
    regions: Mapping[str, Sequence[str]] = REGION_MAPPING
) -> bool:
    """
    Check whether a job location satisfies one preferred location.

    Matches on direct containment first. If the preference is (or overlaps
    with) a region name, the job matches when it mentions any city or
    state of that region.
    """
    job = normalize(job_location)
    pref = normalize(preference)
    if not job or not pref:
        return False

    if job in pref or pref in job:
        return True

    places = regions.get(pref)
    if places:
        return any(_mentions(job, place) for place in places)

    for region, places in regions.items():
        if region in pref or pref in region:
            if any(_mentions(job, place) for place in places):
                return True

    return False

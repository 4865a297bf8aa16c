#!/usr/bin/env python3
"""
Priority Weights - Sum-to-100 weight maps and proportional redistribution.

A weight map assigns an integer percent to each of the six preference
dimensions. The values always sum to exactly 100. When the user drags one
slider, redistribute_weight() moves the others proportionally to their
current share so that the total stays at 100.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
import logging
import math

logger = logging.getLogger(__name__)

WEIGHT_TOTAL = 100

WEIGHT_KEYS = (
    "location",
    "salary",
    "role_type",
    "industry",
    "company_size",
    "work_style",
)

# company_size has no scorer; its weight only takes part in the sum.
SCORED_WEIGHT_KEYS = tuple(k for k in WEIGHT_KEYS if k != "company_size")

# Keys as stored by the web client (priorityWeights JSON column).
WEIGHT_KEY_ALIASES = {
    "roleType": "role_type",
    "companySize": "company_size",
    "workStyle": "work_style",
}

DEFAULT_PRIORITY_WEIGHTS: Mapping[str, int] = MappingProxyType({
    "location": 20,
    "salary": 25,
    "role_type": 20,
    "industry": 15,
    "company_size": 5,
    "work_style": 15,
})


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def _coerce_weight(key: str, raw: Any) -> int:
    try:
        value = round_half_up(float(raw))
    except (TypeError, ValueError, OverflowError):
        logger.warning("Invalid weight %s=%r; using 0", key, raw)
        return 0
    return max(0, value)


def sanitize_weights(weights: Optional[Mapping[str, Any]]) -> Dict[str, int]:
    """
    Return a complete weight map: all six keys, integers >= 0.

    Accepts camelCase client keys. Missing keys become 0, unknown keys are
    dropped. The sum is not corrected here.
    """
    result = {k: 0 for k in WEIGHT_KEYS}
    if not weights:
        return result

    for raw_key, raw_value in weights.items():
        key = WEIGHT_KEY_ALIASES.get(raw_key, raw_key)
        if key not in result:
            logger.debug("Ignoring unknown weight key %r", raw_key)
            continue
        result[key] = _coerce_weight(key, raw_value)
    return result


def weights_total(weights: Mapping[str, int]) -> int:
    return sum(weights.get(k, 0) for k in WEIGHT_KEYS)


def is_valid_weights(weights: Mapping[str, Any]) -> bool:
    """True when every key is present as a non-negative int and the total is 100."""
    for key in WEIGHT_KEYS:
        value = weights.get(key)
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            return False
    return weights_total(weights) == WEIGHT_TOTAL


def reset_weights(defaults: Mapping[str, int] = DEFAULT_PRIORITY_WEIGHTS) -> Dict[str, int]:
    """Return a fresh copy of the canonical weight distribution."""
    return sanitize_weights(defaults)


def _largest_key(weights: Mapping[str, int], keys) -> str:
    # Pairwise reduction: the earlier key wins ties.
    best = keys[0]
    for key in keys[1:]:
        if weights[key] > weights[best]:
            best = key
    return best


def redistribute_weight(
    weights: Mapping[str, Any],
    changed_key: str,
    new_value: Any
) -> Dict[str, int]:
    """
    Set one weight and rebalance the others so the total stays at 100.

    The change is spread over the other keys in proportion to their
    current values. Rounding drift, or clamping at zero, is then corrected
    on the largest of the other keys.

    Args:
        weights: Current weight map (not mutated)
        changed_key: Key being edited (snake_case or client camelCase)
        new_value: Requested value, clamped to [0, 100]

    Returns:
        New weight map summing to exactly 100 with all values >= 0

    Raises:
        ValueError: If changed_key is not a weight key
    """
    key = WEIGHT_KEY_ALIASES.get(changed_key, changed_key)
    if key not in WEIGHT_KEYS:
        raise ValueError(f"Unknown weight key: {changed_key!r}")

    result = sanitize_weights(weights)
    target = min(WEIGHT_TOTAL, _coerce_weight(key, new_value))

    diff = target - result[key]
    others = [k for k in WEIGHT_KEYS if k != key]
    other_total = sum(result[k] for k in others)

    if other_total > 0 and diff != 0:
        shares = {k: result[k] / other_total for k in others}
        for k in others:
            result[k] = max(0, result[k] - round_half_up(diff * shares[k]))

    result[key] = target

    adjustment = WEIGHT_TOTAL - weights_total(result)
    if adjustment != 0:
        largest = _largest_key(result, others)
        absorbed = max(-result[largest], adjustment)
        result[largest] += absorbed
        adjustment -= absorbed

    if adjustment != 0:
        # Only a decrease can be left over; take it from the next largest.
        for k in sorted(others, key=lambda name: -result[name]):
            taken = min(result[k], -adjustment)
            result[k] -= taken
            adjustment += taken
            if adjustment == 0:
                break

    logger.debug(
        "Redistributed %s: %s -> %s (total=%d)",
        key, dict(weights), result, weights_total(result)
    )
    return result

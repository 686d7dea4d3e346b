"""
Float Utilities
eval_analytics/scoring/utils.py

Shared arithmetic for the scoring and layout modules.
"""

from dataclasses import asdict
from typing import Any, Dict, Mapping

from pydantic.alias_generators import to_camel


def clamp(value: float, min_val: float = 0.0, max_val: float = 1.0) -> float:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def weighted_mean(values: Mapping[str, float], weights: Mapping[str, float]) -> float:
    """
    Weighted mean over the keys present in both mappings.

    Formula: Σ(value_k × weight_k) / Σ(weight_k)
    Returns 0.0 if no weight applies.
    """
    total_weight = 0.0
    numerator = 0.0
    for key, weight in weights.items():
        if not weight or key not in values or values[key] is None:
            continue
        numerator += values[key] * weight
        total_weight += weight

    if total_weight == 0:
        return 0.0
    return numerator / total_weight


def camel_record(obj: Any) -> Dict[str, Any]:
    """Dataclass → dict with camelCase keys, the field names the views read."""
    return {to_camel(key): value for key, value in asdict(obj).items()}

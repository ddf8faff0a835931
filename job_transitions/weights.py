"""
Weight normalization for the five relatedness metrics.

Weights come straight from the sliders of the UI and do not need to sum to 1.
``normalize`` turns them into a vector that does, and refuses inputs it
cannot normalize instead of guessing.
"""

from __future__ import annotations

import math
from typing import Dict, Mapping, Union

from job_transitions.errors import DegenerateWeightError, InvalidWeightError
from job_transitions.metrics import METRICS, Metric

WeightKey = Union[Metric, str]

# Original UI starts every slider at 0.2.
DEFAULT_WEIGHTS: Dict[Metric, float] = {metric: 0.2 for metric in METRICS}


def _as_metric(key: WeightKey) -> Metric:
    try:
        return Metric(key)
    except ValueError:
        raise InvalidWeightError(f"Unknown metric {key!r}", metric=str(key)) from None


def validate_weights(weights: Mapping[WeightKey, float]) -> Dict[Metric, float]:
    """
    Check that ``weights`` has one finite, non-negative value per metric.

    Keys may be :class:`Metric` members or their string values. Returns the
    weights keyed by :class:`Metric` in canonical order.
    """
    checked: Dict[Metric, float] = {}
    for key, raw in weights.items():
        metric = _as_metric(key)
        if metric in checked:
            raise InvalidWeightError(f"Duplicate weight for {metric.value}", metric=metric.value)
        try:
            value = float(raw)
        except (TypeError, ValueError):
            raise InvalidWeightError(
                f"Weight for {metric.value} is not a number: {raw!r}", metric=metric.value
            ) from None
        if not math.isfinite(value):
            raise InvalidWeightError(f"Weight for {metric.value} is not finite", metric=metric.value)
        if value < 0:
            raise InvalidWeightError(
                f"Weight for {metric.value} is negative: {value}", metric=metric.value
            )
        checked[metric] = value

    missing = [metric.value for metric in METRICS if metric not in checked]
    if missing:
        raise InvalidWeightError(f"Missing weights for: {', '.join(missing)}")

    return {metric: checked[metric] for metric in METRICS}


def normalize(weights: Mapping[WeightKey, float]) -> Dict[Metric, float]:
    """
    Scale ``weights`` so that they sum to 1.

    Raises ``InvalidWeightError`` for negative, non-finite or unknown entries and
    ``DegenerateWeightError`` when every weight is zero. Falling back to
    :func:`uniform_weights` in that case is up to the caller.
    """
    checked = validate_weights(weights)
    total = sum(checked.values())
    if total == 0:
        raise DegenerateWeightError("All metric weights are zero")
    return {metric: value / total for metric, value in checked.items()}


def uniform_weights() -> Dict[Metric, float]:
    """Equal share for every metric."""
    share = 1.0 / len(METRICS)
    return {metric: share for metric in METRICS}


def weight_key(normalized: Mapping[Metric, float]) -> tuple:
    """Hashable form of a normalized vector, in :class:`Metric` order."""
    return tuple(float(normalized[metric]) for metric in METRICS)

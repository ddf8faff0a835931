"""
One recomputation of the transition graph: normalize -> combine -> build.

The UI owns the selections (weights, job, direction, threshold) and passes
them in as a frozen :class:`TransitionParams` on every change; nothing here
keeps state between calls apart from the combiner's cache.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Dict, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from job_transitions.combiner import MatrixCombiner
from job_transitions.errors import DegenerateWeightError
from job_transitions.graph import Direction, Graph, build
from job_transitions.metrics import Metric
from job_transitions.weights import DEFAULT_WEIGHTS, WeightKey, normalize, uniform_weights

logger = logging.getLogger(__name__)

ZeroWeightPolicy = Literal["reject", "uniform"]


class TransitionParams(BaseModel):
    """User selections driving one graph."""

    model_config = ConfigDict(frozen=True)

    focal_job: str
    weights: Dict[str, float] = Field(
        default_factory=lambda: {metric.value: w for metric, w in DEFAULT_WEIGHTS.items()}
    )
    direction: Direction = Direction.OUTBOUND
    threshold: float = Field(default=0.3, ge=0.0, le=1.0)


@dataclass(frozen=True)
class TransitionResult:
    weights: Dict[Metric, float]
    graph: Optional[Graph]


def resolve_weights(
    weights: Mapping[WeightKey, float],
    policy: ZeroWeightPolicy = "reject",
) -> Dict[Metric, float]:
    """
    Normalize ``weights``, applying ``policy`` when they are all zero.

    ``"reject"`` re-raises ``DegenerateWeightError``; ``"uniform"`` gives every
    metric the same share.
    """
    try:
        return normalize(weights)
    except DegenerateWeightError:
        if policy != "uniform":
            raise
        logger.info("All weights are zero, falling back to uniform weights")
        return uniform_weights()


def explore(
    combiner: MatrixCombiner,
    params: TransitionParams,
    zero_weight_policy: ZeroWeightPolicy = "reject",
) -> TransitionResult:
    normalized = resolve_weights(params.weights, zero_weight_policy)
    combined = combiner.combine(normalized)
    graph = build(combined, params.focal_job, params.direction, params.threshold)
    return TransitionResult(weights=normalized, graph=graph)

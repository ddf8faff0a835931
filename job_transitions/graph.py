"""
Neighborhood graph around a focal job, read from a combined distance matrix.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
import math
from typing import List, Optional, Tuple

import numpy as np

from job_transitions.combiner import CombinedMatrix

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Which way transitions are read relative to the focal job."""

    OUTBOUND = "outbound"  # from the focal job to others
    INBOUND = "inbound"  # from others to the focal job


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    similarity: float


@dataclass(frozen=True)
class Graph:
    """Focal job first in ``nodes``; ``edges`` sorted by similarity, highest first."""

    nodes: Tuple[str, ...]
    edges: Tuple[Edge, ...]


def build(
    combined: CombinedMatrix,
    focal: str,
    direction: Direction,
    threshold: float,
) -> Optional[Graph]:
    """
    Collect the jobs within ``threshold`` distance of ``focal``.

    Outbound reads the focal job's row (focal -> target), inbound its column
    (source -> focal). Missing distances and the focal job itself are skipped,
    and each edge carries ``1 - distance`` as similarity. Edges with equal
    similarity keep the matrix job order.

    Returns None when no edge survives, including when ``focal`` is not a job
    of the matrix.
    """
    threshold = float(threshold)
    if not math.isfinite(threshold) or not 0.0 <= threshold <= 1.0:
        raise ValueError(f"Threshold must be within [0, 1], got {threshold}")
    direction = Direction(direction)

    if focal not in combined:
        logger.debug("Focal job %r not in combined matrix", focal)
        return None

    if direction is Direction.OUTBOUND:
        distances = combined.row(focal)
    else:
        distances = combined.column(focal)

    focal_pos = combined.position(focal)
    nodes: List[str] = [focal]
    edges: List[Edge] = []
    seen = {focal}
    with np.errstate(invalid="ignore"):
        within = np.flatnonzero(distances <= threshold)
    for pos in within:
        if pos == focal_pos:
            continue
        other = combined.jobs[pos]
        if other in seen:
            continue
        seen.add(other)
        nodes.append(other)
        similarity = 1.0 - float(distances[pos])
        if direction is Direction.OUTBOUND:
            edges.append(Edge(source=focal, target=other, similarity=similarity))
        else:
            edges.append(Edge(source=other, target=focal, similarity=similarity))

    if not edges:
        return None

    # Stable sort: ties stay in job order.
    edges.sort(key=lambda edge: edge.similarity, reverse=True)
    logger.debug("Graph for %r (%s): %d edges", focal, direction.value, len(edges))
    return Graph(nodes=tuple(nodes), edges=tuple(edges))

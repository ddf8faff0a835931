"""
Pydantic models for API payloads and responses.
"""

from typing import Dict, List

from pydantic import BaseModel

from job_transitions.graph import Direction


class JobList(BaseModel):
    """Jobs available as focal job, in table order."""

    jobs: List[str]


class Node(BaseModel):
    id: str


class Link(BaseModel):
    """Sankey link; ``value`` is the similarity (1 - distance)."""

    source: str
    target: str
    value: float


class TransitionStats(BaseModel):
    transitions: int
    average_similarity: float


class TransitionResponse(BaseModel):
    """Graph around one focal job plus the weights it was computed with."""

    job: str
    direction: Direction
    threshold: float
    weights: Dict[str, float]
    nodes: List[Node]
    links: List[Link]
    stats: TransitionStats

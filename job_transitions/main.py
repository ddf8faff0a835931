"""
FastAPI application exposing the job list and transition graphs.
"""

from functools import lru_cache
import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query

from job_transitions.combiner import MatrixCombiner
from job_transitions.config import get_settings
from job_transitions.errors import TransitionError
from job_transitions.explorer import TransitionParams, explore
from job_transitions.graph import Direction, Graph
from job_transitions.loader import load_store
from job_transitions.models import JobList, Link, Node, TransitionResponse, TransitionStats

logging.basicConfig(level=get_settings().log_level.upper())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Job Transition Explorer API",
    description="Weighted relatedness between jobs and the transitions around a chosen job.",
    version="0.1.0",
)


@lru_cache(maxsize=1)
def get_combiner() -> MatrixCombiner:
    """
    Load the relatedness tables once per process.

    Raises ``SchemaMismatchError`` or ``FileNotFoundError`` when the tables
    cannot be loaded; no partially loaded store is ever cached.
    """
    settings = get_settings()
    logger.info("Loading relatedness tables from %s", settings.data_dir)
    store = load_store(settings.data_dir, settings.label_column)
    return MatrixCombiner(store, cache_size=settings.combine_cache_size)


def summarize(graph: Graph) -> TransitionStats:
    """Number of transitions and their mean similarity."""
    total = sum(edge.similarity for edge in graph.edges)
    return TransitionStats(
        transitions=len(graph.edges),
        average_similarity=total / len(graph.edges),
    )


@app.get("/api/jobs", response_model=JobList)
async def list_jobs(combiner: MatrixCombiner = Depends(get_combiner)) -> JobList:
    """Jobs to populate the job picker."""
    return JobList(jobs=list(combiner.store.jobs()))


@app.get("/api/transitions", response_model=TransitionResponse)
async def transitions(
    job: str = Query(..., description="Focal job label"),
    direction: Direction = Direction.OUTBOUND,
    threshold: Optional[float] = Query(None, ge=0.0, le=1.0, description="Maximum distance"),
    skills: float = 0.2,
    ability: float = 0.2,
    age: float = 0.2,
    income: float = 0.2,
    gender: float = 0.2,
    combiner: MatrixCombiner = Depends(get_combiner),
) -> TransitionResponse:
    """
    Transitions from (outbound) or to (inbound) ``job`` within ``threshold``.

    Weights are normalized before use; links carry similarity as ``value``.
    """
    settings = get_settings()
    if job not in combiner.store:
        raise HTTPException(status_code=404, detail=f"Unknown job: {job}")
    if threshold is None:
        threshold = settings.default_threshold

    params = TransitionParams(
        focal_job=job,
        weights={
            "skills": skills,
            "ability": ability,
            "age": age,
            "income": income,
            "gender": gender,
        },
        direction=direction,
        threshold=threshold,
    )
    try:
        result = explore(combiner, params, settings.zero_weight_policy)
    except TransitionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    if result.graph is None:
        raise HTTPException(status_code=404, detail="No transitions found")

    graph = result.graph
    return TransitionResponse(
        job=job,
        direction=direction,
        threshold=threshold,
        weights={metric.value: weight for metric, weight in result.weights.items()},
        nodes=[Node(id=node) for node in graph.nodes],
        links=[
            Link(source=edge.source, target=edge.target, value=edge.similarity)
            for edge in graph.edges
        ],
        stats=summarize(graph),
    )


@app.get("/health")
async def health() -> dict:
    """Simple health-check endpoint used by external probes."""
    return {"status": "ok"}

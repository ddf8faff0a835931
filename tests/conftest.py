"""
Shared fixtures: small hand-built relatedness tables.
"""

from typing import Dict, List, Optional

import numpy as np
import pandas as pd
import pytest

from job_transitions.metrics import METRICS, Metric
from job_transitions.store import MatrixStore

JOBS = ["Nurse", "Teacher", "Chef", "Driver"]

# Base distances; row = source, column = target. Diagonal is never read.
BASE = [
    [0.0, 0.2, 0.6, 0.9],
    [0.4, 0.0, 0.3, 0.5],
    [0.7, 0.1, 0.0, 0.25],
    [0.8, 0.55, 0.35, 0.0],
]


def make_table(values: List[List[Optional[float]]], jobs: List[str] = JOBS) -> pd.DataFrame:
    data = np.array(
        [[np.nan if v is None else v for v in row] for row in values], dtype=float
    )
    return pd.DataFrame(data, index=list(jobs), columns=list(jobs))


def same_tables(values=BASE, jobs=JOBS) -> Dict[Metric, pd.DataFrame]:
    return {metric: make_table(values, jobs) for metric in METRICS}


@pytest.fixture
def tables() -> Dict[Metric, pd.DataFrame]:
    """Five different tables: each metric shifts the base distances."""
    out = {}
    for i, metric in enumerate(METRICS):
        shifted = [[min(1.0, v + 0.02 * i) for v in row] for row in BASE]
        out[metric] = make_table(shifted)
    return out


@pytest.fixture
def store(tables) -> MatrixStore:
    return MatrixStore.load(tables)


@pytest.fixture
def uniform_store() -> MatrixStore:
    """All five metrics hold the same BASE matrix."""
    return MatrixStore.load(same_tables())

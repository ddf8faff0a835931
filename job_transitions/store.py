"""
Validated, read-only container for the five relatedness matrices.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from job_transitions.errors import SchemaMismatchError
from job_transitions.metrics import METRICS, Metric

logger = logging.getLogger(__name__)

# How many differing labels to quote in a mismatch message.
_SAMPLE_SIZE = 3


def _sample(labels: Iterable[str]) -> str:
    ordered = sorted(labels)
    shown = ", ".join(repr(label) for label in ordered[:_SAMPLE_SIZE])
    if len(ordered) > _SAMPLE_SIZE:
        shown += f" (+{len(ordered) - _SAMPLE_SIZE} more)"
    return shown


def _with_str_labels(table: pd.DataFrame) -> pd.DataFrame:
    table = table.copy()
    table.index = table.index.map(str)
    table.columns = table.columns.map(str)
    return table


def _check_square(metric: Metric, table: pd.DataFrame) -> None:
    """Rows and columns of one table must carry the same unique labels."""
    name = metric.table_name
    if table.index.empty:
        raise SchemaMismatchError(name, "table has no job rows")
    if table.index.has_duplicates:
        dupes = set(table.index[table.index.duplicated()])
        raise SchemaMismatchError(name, f"duplicate row labels {_sample(dupes)}")
    if table.columns.has_duplicates:
        dupes = set(table.columns[table.columns.duplicated()])
        raise SchemaMismatchError(name, f"duplicate column labels {_sample(dupes)}")

    rows, cols = set(table.index), set(table.columns)
    if rows != cols:
        parts = []
        if rows - cols:
            parts.append(f"rows without a column: {_sample(rows - cols)}")
        if cols - rows:
            parts.append(f"columns without a row: {_sample(cols - rows)}")
        raise SchemaMismatchError(name, "; ".join(parts))


class MatrixStore:
    """
    The five per-metric distance matrices over one shared set of jobs.

    Every table is reindexed once to the job order of the skills table, so
    lookups go through a label -> position index and combination works on a
    single stacked array of shape ``(metrics, jobs, jobs)``. Missing cells are
    stored as ``NaN``.

    Build instances with :meth:`load`; they are immutable afterwards.
    """

    def __init__(self, jobs: Tuple[str, ...], stack: np.ndarray) -> None:
        self._jobs = jobs
        self._index: Dict[str, int] = {job: i for i, job in enumerate(jobs)}
        stack.setflags(write=False)
        self._stack = stack

    @classmethod
    def load(cls, tables: Mapping[Metric, pd.DataFrame]) -> "MatrixStore":
        """
        Validate the five tables and build a store.

        Each table is indexed by source job with one column per target job.
        Raises ``SchemaMismatchError`` naming the offending table when a table
        is missing or its job labels differ from the skills table.
        """
        by_metric: Dict[Metric, pd.DataFrame] = {}
        for key, table in tables.items():
            try:
                metric = Metric(key)
            except ValueError:
                raise SchemaMismatchError(str(key), "not a known metric") from None
            by_metric[metric] = _with_str_labels(table)
        for metric in METRICS:
            if metric not in by_metric:
                raise SchemaMismatchError(metric.table_name, "table is missing")

        reference = by_metric[METRICS[0]]
        _check_square(METRICS[0], reference)
        jobs = tuple(str(label) for label in reference.index)
        expected = set(jobs)

        layers = []
        for metric in METRICS:
            table = by_metric[metric]
            _check_square(metric, table)
            labels = set(table.index)
            if labels != expected:
                parts = []
                if labels - expected:
                    parts.append(f"unexpected jobs {_sample(labels - expected)}")
                if expected - labels:
                    parts.append(f"missing jobs {_sample(expected - labels)}")
                raise SchemaMismatchError(metric.table_name, "; ".join(parts))

            aligned = table.reindex(index=list(jobs), columns=list(jobs))
            values = aligned.apply(pd.to_numeric, errors="coerce").to_numpy(dtype=float)
            layers.append(values)

            missing = int(np.isnan(values).sum())
            with np.errstate(invalid="ignore"):
                out_of_range = int(((values < 0) | (values > 1)).sum())
            if out_of_range:
                logger.warning(
                    "%s has %d distances outside [0, 1]", metric.table_name, out_of_range
                )
            logger.debug("%s: %d missing cells", metric.table_name, missing)

        store = cls(jobs, np.stack(layers))
        logger.info("Matrix store built with %d jobs", len(jobs))
        return store

    def jobs(self) -> Tuple[str, ...]:
        """Job labels in the row order of the skills table."""
        return self._jobs

    def __len__(self) -> int:
        return len(self._jobs)

    def __contains__(self, job: object) -> bool:
        return job in self._index

    def position(self, job: str) -> int:
        """Row/column index of ``job``; ``KeyError`` if unknown."""
        return self._index[job]

    def value(self, metric: Metric, source: str, target: str) -> Optional[float]:
        """Distance from ``source`` to ``target`` under ``metric``, or None if missing."""
        layer = METRICS.index(Metric(metric))
        value = self._stack[layer, self._index[source], self._index[target]]
        if np.isnan(value):
            return None
        return float(value)

    @property
    def stack(self) -> np.ndarray:
        """Read-only array of shape ``(len(METRICS), len(jobs), len(jobs))``."""
        return self._stack

    def missing_counts(self) -> Dict[Metric, int]:
        """Number of missing off-diagonal cells per metric."""
        off_diagonal = ~np.eye(len(self._jobs), dtype=bool)
        return {
            metric: int(np.isnan(self._stack[i])[off_diagonal].sum())
            for i, metric in enumerate(METRICS)
        }

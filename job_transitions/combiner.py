"""
Weighted combination of the five relatedness matrices into one distance matrix.
"""

from __future__ import annotations

from collections import OrderedDict
import logging
from typing import Dict, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from job_transitions.metrics import Metric
from job_transitions.store import MatrixStore
from job_transitions.weights import weight_key

logger = logging.getLogger(__name__)


class CombinedMatrix:
    """
    Weighted-average distance between every ordered pair of jobs.

    Pairs missing in any metric are ``NaN`` in :attr:`values` and ``None``
    through :meth:`value`.
    """

    def __init__(self, jobs: Tuple[str, ...], values: np.ndarray) -> None:
        self.jobs = jobs
        self._index: Dict[str, int] = {job: i for i, job in enumerate(jobs)}
        values.setflags(write=False)
        self.values = values

    def __contains__(self, job: object) -> bool:
        return job in self._index

    def position(self, job: str) -> int:
        return self._index[job]

    def value(self, source: str, target: str) -> Optional[float]:
        distance = self.values[self._index[source], self._index[target]]
        if np.isnan(distance):
            return None
        return float(distance)

    def row(self, source: str) -> np.ndarray:
        """Distances from ``source`` to every job, in :attr:`jobs` order."""
        return self.values[self._index[source], :]

    def column(self, target: str) -> np.ndarray:
        """Distances from every job to ``target``, in :attr:`jobs` order."""
        return self.values[:, self._index[target]]

    def to_frame(self) -> pd.DataFrame:
        """Source jobs as index, target jobs as columns."""
        return pd.DataFrame(self.values, index=list(self.jobs), columns=list(self.jobs))


def combine(store: MatrixStore, normalized: Mapping[Metric, float]) -> CombinedMatrix:
    """
    Weighted sum of the store's matrices using already normalized weights.

    A pair missing in any metric stays missing, even when that metric's weight
    is zero; the remaining metrics are not re-weighted.
    """
    weights = np.array(weight_key(normalized), dtype=float)
    stack = store.stack
    # NaN in any layer propagates through the product and the sum.
    values = np.einsum("m,mij->ij", weights, stack)
    return CombinedMatrix(store.jobs(), values)


class MatrixCombiner:
    """
    :func:`combine` bound to one store, with a small LRU cache.

    The store never changes after loading, so the normalized weight vector is
    a sufficient cache key. ``cache_size=0`` disables caching.
    """

    def __init__(self, store: MatrixStore, cache_size: int = 32) -> None:
        self.store = store
        self.cache_size = cache_size
        self._cache: "OrderedDict[tuple, CombinedMatrix]" = OrderedDict()

    def combine(self, normalized: Mapping[Metric, float]) -> CombinedMatrix:
        key = weight_key(normalized)
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            logger.debug("Combined matrix cache hit for %s", key)
            return cached

        logger.debug("Combined matrix cache miss for %s", key)
        combined = combine(self.store, normalized)
        if self.cache_size > 0:
            self._cache[key] = combined
            while len(self._cache) > self.cache_size:
                self._cache.popitem(last=False)
        return combined

    def cache_info(self) -> Dict[str, int]:
        return {"size": len(self._cache), "maxsize": self.cache_size}

    def clear_cache(self) -> None:
        self._cache.clear()

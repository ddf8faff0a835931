"""
Read the five relatedness CSV tables from a data directory.

Each file is named after its metric (``Relatedness skills.csv``, ...), has one
label column naming the source job and one column per target job.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Union

import pandas as pd

from job_transitions.config import DEFAULT_LABEL_COLUMN
from job_transitions.errors import SchemaMismatchError
from job_transitions.metrics import METRICS, Metric
from job_transitions.store import MatrixStore

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def table_path(data_dir: PathLike, metric: Metric) -> Path:
    return Path(data_dir) / f"{metric.table_name}.csv"


def read_table(path: PathLike, label_column: str = DEFAULT_LABEL_COLUMN) -> pd.DataFrame:
    """
    Load one relatedness table indexed by source job.

    Job labels are stripped of surrounding whitespace; cells that are empty or
    not numeric become ``NaN``.
    """
    path = Path(path)
    df = pd.read_csv(path, dtype={label_column: str}, skip_blank_lines=True)
    df.columns = [str(col).strip() for col in df.columns]
    if label_column not in df.columns:
        raise SchemaMismatchError(path.stem, f"label column {label_column!r} not found")

    df = df.dropna(subset=[label_column])
    df[label_column] = df[label_column].astype(str).str.strip()
    df = df.set_index(label_column)
    df.index.name = None
    df = df.apply(pd.to_numeric, errors="coerce")
    logger.info("Read %s: %d rows, %d columns", path, len(df), len(df.columns))
    return df


def load_tables(
    data_dir: PathLike,
    label_column: str = DEFAULT_LABEL_COLUMN,
) -> Dict[Metric, pd.DataFrame]:
    """Read all five tables; a missing file raises ``FileNotFoundError``."""
    tables: Dict[Metric, pd.DataFrame] = {}
    for metric in METRICS:
        path = table_path(data_dir, metric)
        if not path.is_file():
            raise FileNotFoundError(f"Relatedness table not found: {path}")
        tables[metric] = read_table(path, label_column)
    return tables


def load_store(
    data_dir: PathLike,
    label_column: str = DEFAULT_LABEL_COLUMN,
) -> MatrixStore:
    """Read and validate the five tables in ``data_dir``."""
    return MatrixStore.load(load_tables(data_dir, label_column))

"""
Unit tests for loading and validating the relatedness matrices.
"""

import numpy as np
import pandas as pd
import pytest

from conftest import BASE, JOBS, make_table, same_tables
from job_transitions.errors import SchemaMismatchError
from job_transitions.metrics import METRICS, Metric
from job_transitions.store import MatrixStore


def test_jobs_follow_first_table_row_order(tables):
    reordered = ["Chef", "Nurse", "Driver", "Teacher"]
    tables[Metric.ABILITY] = tables[Metric.ABILITY].loc[reordered, reordered[::-1]]
    store = MatrixStore.load(tables)
    assert store.jobs() == tuple(JOBS)
    assert len(store) == 4
    assert "Chef" in store
    assert "Pilot" not in store


def test_value_lookup_is_aligned_across_tables(tables):
    shuffled = ["Driver", "Chef", "Teacher", "Nurse"]
    expected = tables[Metric.INCOME].loc["Teacher", "Chef"]
    tables[Metric.INCOME] = tables[Metric.INCOME].loc[shuffled, shuffled]
    store = MatrixStore.load(tables)
    assert np.isclose(store.value(Metric.INCOME, "Teacher", "Chef"), expected)
    assert np.isclose(store.value("skills", "Nurse", "Teacher"), 0.2)


def test_missing_cells_read_as_none():
    values = [row[:] for row in BASE]
    values[0][1] = None
    tables = same_tables()
    tables[Metric.AGE] = make_table(values)
    store = MatrixStore.load(tables)
    assert store.value(Metric.AGE, "Nurse", "Teacher") is None
    assert store.value(Metric.SKILLS, "Nurse", "Teacher") == 0.2
    assert store.missing_counts()[Metric.AGE] == 1
    assert store.missing_counts()[Metric.SKILLS] == 0


def test_store_is_read_only(store):
    with pytest.raises(ValueError):
        store.stack[0, 0, 1] = 0.5


def test_stack_shape(store):
    assert store.stack.shape == (len(METRICS), 4, 4)


def test_differing_job_sets_name_the_table():
    tables = same_tables()
    other = ["Nurse", "Teacher", "Chef", "Pilot"]
    tables[Metric.INCOME] = make_table(BASE, other)
    with pytest.raises(SchemaMismatchError) as excinfo:
        MatrixStore.load(tables)
    assert excinfo.value.table == "Relatedness income"
    assert "Pilot" in str(excinfo.value)


def test_missing_table_is_rejected():
    tables = same_tables()
    del tables[Metric.GENDER]
    with pytest.raises(SchemaMismatchError) as excinfo:
        MatrixStore.load(tables)
    assert excinfo.value.table == "Relatedness gender"


def test_rows_and_columns_must_match():
    tables = same_tables()
    table = tables[Metric.SKILLS].copy()
    table.columns = ["Nurse", "Teacher", "Chef", "Pilot"]
    tables[Metric.SKILLS] = table
    with pytest.raises(SchemaMismatchError) as excinfo:
        MatrixStore.load(tables)
    assert excinfo.value.table == "Relatedness skills"


def test_duplicate_rows_are_rejected():
    tables = same_tables()
    table = tables[Metric.ABILITY]
    table.index = ["Nurse", "Teacher", "Teacher", "Driver"]
    with pytest.raises(SchemaMismatchError, match="duplicate"):
        MatrixStore.load(tables)


def test_empty_tables_are_rejected():
    tables = {metric: pd.DataFrame(index=[], columns=[], dtype=float) for metric in METRICS}
    with pytest.raises(SchemaMismatchError, match="no job rows"):
        MatrixStore.load(tables)


def test_unknown_table_key_is_rejected():
    tables = same_tables()
    tables["salary"] = tables[Metric.INCOME]
    with pytest.raises(SchemaMismatchError):
        MatrixStore.load(tables)


def test_string_metric_keys_are_accepted():
    tables = {metric.value: table for metric, table in same_tables().items()}
    store = MatrixStore.load(tables)
    assert store.jobs() == tuple(JOBS)

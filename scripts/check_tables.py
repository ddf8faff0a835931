"""
Simple script to check the five relatedness tables before serving them.
Run this to diagnose loading issues.

It reads every ``Relatedness *.csv`` file from the configured data directory,
validates that they share one job label set, and prints per-metric counts of
missing job pairs.
"""

import sys
import traceback

from job_transitions.config import get_settings
from job_transitions.errors import SchemaMismatchError
from job_transitions.loader import load_store, table_path
from job_transitions.metrics import METRICS


def check_tables() -> bool:
    """Load the tables and show basic stats."""
    settings = get_settings()
    print(f"[TABLES] Data directory: {settings.data_dir}")
    print(f"[TABLES] Label column: {settings.label_column!r}")
    for metric in METRICS:
        path = table_path(settings.data_dir, metric)
        mark = "✓" if path.is_file() else "✗"
        print(f"[TABLES] {mark} {metric.value}: {path}")
    print()

    try:
        store = load_store(settings.data_dir, settings.label_column)
    except FileNotFoundError as e:
        print(f"[TABLES] ✗ {e}")
        return False
    except SchemaMismatchError as e:
        print(f"[TABLES] ✗ Tables disagree on jobs in {e.table!r}: {e}")
        return False
    except Exception as e:
        print(f"[TABLES] ✗ Unexpected error: {e}")
        traceback.print_exc()
        return False

    jobs = store.jobs()
    pairs = len(jobs) * (len(jobs) - 1)
    print(f"[TABLES] ✓ {len(jobs)} jobs shared by all tables")
    for metric, missing in store.missing_counts().items():
        print(f"[TABLES]   {metric.value}: {missing}/{pairs} job pairs missing")
    print("[TABLES] ✓ Check completed successfully")
    return True


if __name__ == "__main__":
    sys.exit(0 if check_tables() else 1)

"""
Offline script to export the combined distance matrix for a set of weights.

The output CSV has the same layout as the input relatedness tables, so it can
be inspected in a spreadsheet or fed back as a single table.

Usage:
    python -m scripts.export_combined combined.csv --skills 0.4 --income 0.1
"""

from __future__ import annotations

import argparse

import numpy as np

from job_transitions.combiner import combine
from job_transitions.config import get_settings
from job_transitions.loader import load_store
from job_transitions.metrics import METRICS
from job_transitions.weights import DEFAULT_WEIGHTS, normalize


def run(output: str, weights: dict) -> None:
    """Combine the tables with ``weights`` and write the result to ``output``."""
    settings = get_settings()
    print(f"[EXPORT] Loading relatedness tables from: {settings.data_dir}")
    store = load_store(settings.data_dir, settings.label_column)
    print(f"[EXPORT] ✓ Loaded {len(store)} jobs")

    normalized = normalize(weights)
    shown = ", ".join(f"{metric.value}={w:.3f}" for metric, w in normalized.items())
    print(f"[EXPORT] Normalized weights: {shown}")

    combined = combine(store, normalized)
    frame = combined.to_frame()
    frame.index.name = settings.label_column
    frame.to_csv(output)
    off_diagonal = ~np.eye(len(store), dtype=bool)
    missing = int(np.isnan(combined.values)[off_diagonal].sum())
    print(f"[EXPORT] ✓ Wrote {output} ({missing} missing job pairs)")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("output", help="Path of the CSV file to write")
    for metric in METRICS:
        parser.add_argument(
            f"--{metric.value}",
            type=float,
            default=DEFAULT_WEIGHTS[metric],
            help=f"Weight of the {metric.table_name} table",
        )
    args = parser.parse_args()
    run(args.output, {metric: getattr(args, metric.value) for metric in METRICS})


if __name__ == "__main__":
    main()

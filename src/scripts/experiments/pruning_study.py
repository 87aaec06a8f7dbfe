"""Reduced Error Pruning study: ID3 before/after pruning vs an sklearn baseline."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from id3.dataset import Dataset
from scripts.data.partition import split_dataset
from scripts.table import compute_column_widths, print_header, print_run_row
from scripts.training.id3 import train_id3
from scripts.training.sklearn_dt import train_sklearn_dt


def run_pruning_study(
    instances: Dataset,
    *,
    n_runs: int = 5,
    train_size: float = 0.6,
    validation_size: float = 0.2,
    max_iterations: int | None = None,
    random_state: int = 42,
    output_path: str | None = None,
) -> pd.DataFrame:
    """
    Train, prune and evaluate ID3 over several random partitions.

    Each run uses seed `random_state + run` for its split. The sklearn
    baseline is trained on the same training partition and tested on the
    whole test partition, since one-hot encoding ignores unseen values.

    Args:
        instances: Full labeled dataset
        n_runs: Number of random partitions
        train_size: Fraction for training split
        validation_size: Fraction for validation split
        max_iterations: Shared recursion budget for ID3 (None = unbounded)
        random_state: Base random seed
        output_path: Path to save CSV results

    Returns:
        DataFrame with one row per run
    """
    n_features = len(instances[0].features)
    n_positive = sum(1 for instance in instances if instance.target)
    print(f"Dataset: {len(instances)} instances, {n_features} features")
    print(f"Label distribution: {n_positive} positive, {len(instances) - n_positive} negative")
    print()

    widths = compute_column_widths(len(instances))
    print_header(widths)

    rows: list[dict[str, Any]] = []
    overall_start = time.time()

    for run in range(n_runs):
        train, validation, test = split_dataset(
            instances,
            train_size=train_size,
            validation_size=validation_size,
            random_state=random_state + run,
        )
        result = train_id3(train, validation, test, max_iterations=max_iterations)
        cart_result = train_sklearn_dt(train, test or None, random_state=random_state)

        row = {
            "run": run + 1,
            "n_train": len(train),
            "n_validation": result.n_validation,
            "n_test": result.n_test,
            "leaves_before": result.leaves_before,
            "leaves_after": result.leaves_after,
            "train_error": round(result.train_error, 4),
            "val_error_before": round(result.validation_error_before, 4),
            "val_error_after": round(result.validation_error_after, 4),
            "test_error_before": result.test_error_before,
            "test_error_after": result.test_error_after,
            "cart_leaves": cart_result.n_leaves,
            "cart_test_error": cart_result.test_error,
            "time_s": round(result.elapsed, 4),
        }
        rows.append(row)
        print_run_row(row, widths)

    print("=" * (sum(widths.values()) + 3 * (len(widths) - 1)))
    df = pd.DataFrame(rows)
    mean_after = df["test_error_after"].dropna()
    if not mean_after.empty:
        print(f"Mean pruned test error: {float(np.mean(mean_after)):.4f}")
    print(f"Total time: {time.time() - overall_start:.1f}s")

    if output_path:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_path, index=False)
        print(f"Results saved to {output_path}")

    return df

#!/usr/bin/env python3
"""Reduced Error Pruning experiment for ID3 decision trees.

Data Pipeline per Run:
    1. Load a header-less delimited file (default: UCI agaricus-lepiota
       mushroom data) or a PMLB dataset
    2. Encode categorical tokens to per-feature codes; drop rows with "?"
    3. Shuffle and split into train / validation / test
    4. Train ID3 on train, prune against validation
    5. Train sklearn's entropy tree on the same train split as a baseline
    6. Collect error rates and tree sizes

Usage:
    python exp/reduced_error_pruning.py --data agaricus-lepiota.data
    python exp/reduced_error_pruning.py --pmlb mushroom --runs 10
    python exp/reduced_error_pruning.py --data votes.csv --target-column 0 \
        --positive democrat --negative republican --no-feature-names
"""

from __future__ import annotations

import argparse
from datetime import datetime

from id3.logging import enable_logging
from scripts.data.loading import load_delimited
from scripts.data.pmlb import load_pmlb
from scripts.experiments.pruning_study import run_pruning_study

MUSHROOM_FEATURE_NAMES: list[str] = [
    "cap-shape",
    "cap-surface",
    "cap-color",
    "bruises?",
    "odor",
    "gill-attachment",
    "gill-spacing",
    "gill-size",
    "gill-color",
    "stalk-shape",
    "stalk-root",
    "stalk-surface-above-ring",
    "stalk-surface-below-ring",
    "stalk-color-above-ring",
    "stalk-color-below-ring",
    "veil-type",
    "veil-color",
    "ring-number",
    "ring-type",
    "spore-print-color",
    "population",
    "habitat",
]

DEFAULT_DATA = "agaricus-lepiota.data"
DEFAULT_RUNS = 5
DEFAULT_TRAIN_SIZE = 0.6
DEFAULT_VALIDATION_SIZE = 0.2
DEFAULT_RANDOM_STATE = 42


def default_output_path() -> str:
    """Generate default output path with ISO 8601 timestamp."""
    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")
    return f"output/{timestamp}.csv"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reduced Error Pruning experiment: ID3 vs CART"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--data",
        type=str,
        default=DEFAULT_DATA,
        help=f"Header-less delimited file (default: {DEFAULT_DATA})",
    )
    source.add_argument(
        "--pmlb",
        type=str,
        default=None,
        help="PMLB dataset name to fetch instead of a local file",
    )
    parser.add_argument(
        "--target-column",
        type=int,
        default=0,
        help="0-indexed label column of --data (default: 0)",
    )
    parser.add_argument(
        "--positive",
        type=str,
        default="e",
        help="Label token mapped to True (default: e)",
    )
    parser.add_argument(
        "--negative",
        type=str,
        default="p",
        help="Label token mapped to False (default: p)",
    )
    parser.add_argument(
        "--missing",
        type=str,
        default="?",
        help="Token marking a missing value; such rows are dropped (default: ?)",
    )
    parser.add_argument(
        "--delimiter",
        type=str,
        default=",",
        help="Field delimiter of --data (default: ,)",
    )
    parser.add_argument(
        "--no-feature-names",
        action="store_true",
        help="Name features f1, f2, ... instead of the mushroom attribute names",
    )
    parser.add_argument(
        "--train-size",
        type=float,
        default=DEFAULT_TRAIN_SIZE,
        help=f"Training fraction (default: {DEFAULT_TRAIN_SIZE})",
    )
    parser.add_argument(
        "--validation-size",
        type=float,
        default=DEFAULT_VALIDATION_SIZE,
        help=f"Validation fraction (default: {DEFAULT_VALIDATION_SIZE})",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=None,
        help="Shared ID3 recursion budget (default: unbounded)",
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=DEFAULT_RUNS,
        help=f"Number of random partitions (default: {DEFAULT_RUNS})",
    )
    parser.add_argument(
        "--random-state",
        type=int,
        default=DEFAULT_RANDOM_STATE,
        help=f"Base random seed (default: {DEFAULT_RANDOM_STATE})",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output CSV file path (default: output/<timestamp>.csv)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable id3 debug logging",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    output_path = args.output if args.output is not None else default_output_path()

    if args.verbose:
        enable_logging("DEBUG")

    if args.pmlb is not None:
        print(f"Loading PMLB dataset: {args.pmlb}")
        instances, _ = load_pmlb(args.pmlb)
    else:
        print(f"Loading file: {args.data}")
        instances, _ = load_delimited(
            args.data,
            None if args.no_feature_names else MUSHROOM_FEATURE_NAMES,
            target_column=args.target_column,
            positive=args.positive,
            negative=args.negative,
            missing=args.missing,
            delimiter=args.delimiter,
        )

    print(f"Runs: {args.runs}")
    print(f"Split: {args.train_size} / {args.validation_size} / rest")
    print(f"Max iterations: {args.max_iterations}")
    print(f"Output: {output_path}")
    print()

    run_pruning_study(
        instances,
        n_runs=args.runs,
        train_size=args.train_size,
        validation_size=args.validation_size,
        max_iterations=args.max_iterations,
        random_state=args.random_state,
        output_path=output_path,
    )

    print("\nDone.")


if __name__ == "__main__":
    main()

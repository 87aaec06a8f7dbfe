"""Training utilities for the ID3 classifier."""

from __future__ import annotations

import dataclasses
import time

from id3 import ID3Classifier
from id3.dataset import Dataset, Instance
from id3.exceptions import ClassificationError
from id3.tree import Decision, classify


def filter_classifiable(tree: Decision, instances: Dataset) -> list[Instance]:
    """
    Instances that `tree` can route to a leaf.

    Held-out data may carry feature values never seen on some branch during
    training; those instances cannot be classified, and pruning only ever
    removes branches, so anything kept here stays classifiable after pruning.
    """
    kept: list[Instance] = []
    for instance in instances:
        try:
            classify(tree, instance.clone())
        except ClassificationError:
            continue
        kept.append(instance)
    return kept


@dataclasses.dataclass(frozen=True)
class ID3Result:
    """Result from training and pruning an ID3 classifier."""

    classifier: ID3Classifier
    train_error: float
    validation_error_before: float
    validation_error_after: float
    test_error_before: float | None
    test_error_after: float | None
    leaves_before: int
    leaves_after: int
    n_validation: int
    n_test: int
    elapsed: float


def train_id3(
    train: Dataset,
    validation: Dataset,
    test: Dataset | None = None,
    *,
    max_iterations: int | None = None,
    prune: bool = True,
) -> ID3Result:
    """
    Train ID3, then prune it against the validation partition.

    Validation and test instances the unpruned tree cannot classify are
    dropped before any error is measured.

    Args:
        train: Training instances
        validation: Validation instances used for pruning
        test: Optional test instances for evaluation
        max_iterations: Shared recursion budget (None = unbounded)
        prune: Apply Reduced Error Pruning

    Returns:
        ID3Result with classifier, error rates before/after pruning, and timing
    """
    start = time.time()
    clf = ID3Classifier(train, max_iterations=max_iterations)
    validation = filter_classifiable(clf.tree, validation)
    test = filter_classifiable(clf.tree, test) if test is not None else None

    leaves_before = clf.n_leaves
    validation_before = clf.error(validation) if validation else 0.0
    test_before = clf.error(test) if test else None

    if prune and validation:
        clf.prune(validation)
    elapsed = time.time() - start

    return ID3Result(
        classifier=clf,
        train_error=clf.error(train),
        validation_error_before=validation_before,
        validation_error_after=clf.error(validation) if validation else 0.0,
        test_error_before=test_before,
        test_error_after=clf.error(test) if test else None,
        leaves_before=leaves_before,
        leaves_after=clf.n_leaves,
        n_validation=len(validation),
        n_test=len(test) if test is not None else 0,
        elapsed=elapsed,
    )

"""Entropy, information gain and the default feature-selection strategy."""

from collections.abc import Callable

import numpy

from id3.dataset import Dataset, Instance
from id3.exceptions import EmptyDatasetError
from id3.types import Feature

FeatureSelector = Callable[[Dataset], str | None]
"""Picks the feature to split on, or None when no feature is useful"""


def entropy(instances: Dataset) -> float:
    """Shannon entropy in bits of the target distribution of `instances`."""
    if len(instances) == 0:
        raise EmptyDatasetError("Entropy of an empty instance set is undefined.")
    targets = numpy.fromiter(
        (instance.target for instance in instances), dtype=numpy.bool_
    )
    n_positive = int(numpy.count_nonzero(targets))
    counts = numpy.array([n_positive, targets.size - n_positive], dtype=float)
    p = counts[counts > 0] / targets.size
    return float(-numpy.sum(p * numpy.log2(p)))


def information_gain(instances: Dataset, feature: str) -> float:
    """Entropy of `instances` minus the weighted entropy of each observed value of `feature`."""
    partitions: dict[Feature, list[Instance]] = {}
    for instance in instances:
        partitions.setdefault(instance.features[feature], []).append(instance)

    gain = entropy(instances)
    for partition in partitions.values():
        gain -= len(partition) / len(instances) * entropy(partition)
    return gain


def best_feature_information_gain(instances: Dataset) -> str | None:
    """
    Feature with the strictly greatest positive information gain.

    Candidates are the features of the first instance, visited in name
    order, so among equal gains the lexicographically smallest name wins.
    Returns None if no candidate has a gain above zero.
    """
    greatest_gain = 0.0
    greatest_feature: str | None = None
    for feature in sorted(instances[0].features):
        gain = information_gain(instances, feature)
        if gain > greatest_gain:
            greatest_gain = gain
            greatest_feature = feature
    return greatest_feature

import dataclasses

from loguru import logger

from id3.dataset import Dataset, Instance, majority_target, targets_identical
from id3.exceptions import EmptyDatasetError, InternalInvariantViolationError
from id3.selection import FeatureSelector, best_feature_information_gain
from id3.tree import Decision, Output, Split
from id3.types import Edge, Feature


@dataclasses.dataclass
class _Budget:
    """Iteration budget shared by every recursive call of one training run."""

    remaining: int | None
    """None for unbounded training"""

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0

    def spend(self) -> None:
        if self.remaining is not None and self.remaining > 0:
            self.remaining -= 1


def _partition(
    instances: Dataset, feature: str
) -> dict[Feature, list[Instance]]:
    """
    Bucket clones of `instances` by their value for `feature`.

    The clones have `feature` removed; the caller's instances are untouched.
    """
    buckets: dict[Feature, list[Instance]] = {}
    for instance in instances:
        clone = instance.clone()
        value = clone.features.pop(feature)
        buckets.setdefault(value, []).append(clone)
    return buckets


def _train(
    instances: Dataset,
    selector: FeatureSelector,
    budget: _Budget,
    edge: Edge | None,
) -> Decision:
    if len(instances) == 0:
        if edge is None:
            raise EmptyDatasetError()
        raise InternalInvariantViolationError(*edge)

    feature = selector(instances)
    if feature is None:
        logger.debug(
            "No useful feature left at {}, collapsing {} instances",
            edge,
            len(instances),
        )
        return Output(majority_target(instances))

    if budget.exhausted:
        logger.debug(
            "Iteration budget exhausted at {}, collapsing {} instances",
            edge,
            len(instances),
        )
        return Output(majority_target(instances))

    if targets_identical(instances):
        return Output(instances[0].target)

    children: dict[Feature, Decision] = {}
    for value, bucket in _partition(instances, feature).items():
        budget.spend()
        children[value] = _train(bucket, selector, budget, (feature, value))
    return Split(feature=feature, children=children)


def train(
    instances: Dataset,
    selector: FeatureSelector = best_feature_information_gain,
    max_iterations: int | None = None,
) -> Decision:
    """
    Induce a decision tree with ID3.

    Args:
        instances: labeled training instances; never mutated
        selector: feature selection strategy (default: information gain)
        max_iterations: budget of recursive calls shared across the whole
            tree, or None for unbounded. Once spent, every remaining node
            becomes a majority-vote leaf.

    Returns:
        Root of the trained tree

    Raises:
        EmptyDatasetError: if `instances` is empty
        InternalInvariantViolationError: if induction reaches an empty partition
    """
    if max_iterations is not None and max_iterations < 0:
        raise ValueError(f"max_iterations must be non-negative, got {max_iterations}")

    tree = _train(instances, selector, _Budget(max_iterations), None)
    logger.opt(lazy=True).debug(
        "Trained tree on {} instances: {} leaves, depth {}",
        lambda: len(instances),
        tree.n_leaves,
        tree.depth,
    )
    return tree

import dataclasses
from collections.abc import Sequence

from id3.types import FeatureValues, Target


@dataclasses.dataclass
class Instance:
    """A single labeled (or to-be-labeled) record."""

    features: FeatureValues
    """Feature name to feature code"""

    target: Target = False
    """Label; overwritten in place by classification"""

    def clone(self) -> "Instance":
        """Return a copy whose feature mapping is not shared with this one."""
        return Instance(features=dict(self.features), target=self.target)


Dataset = Sequence[Instance]
"""Ordered instances; order and duplicates carry no meaning"""


def majority_target(instances: Dataset) -> Target:
    """
    Most frequent target among `instances`.

    Counting follows dataset order and the first value to reach a strictly
    higher count wins. An empty dataset yields False.
    """
    counts: dict[Target, int] = {}
    highest_count = 0
    highest_target: Target = False
    for instance in instances:
        count = counts.get(instance.target, 0) + 1
        counts[instance.target] = count
        if count > highest_count:
            highest_count = count
            highest_target = instance.target
    return highest_target


def targets_identical(instances: Dataset) -> bool:
    return all(
        instance.target == instances[0].target for instance in instances[1:]
    )

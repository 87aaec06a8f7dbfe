import dataclasses
from collections.abc import Iterator

from id3.dataset import Instance
from id3.exceptions import MissingFeatureError, UnknownFeatureValueError
from id3.types import Edge, Feature, Target

PATH_SEPARATOR: str = " ==> "
"""Separator between the edges of a serialized root-to-leaf path"""


@dataclasses.dataclass
class Output:
    """Leaf node with a fixed prediction."""

    value: Target

    def classify(self, instance: Instance) -> None:
        classify(self, instance)

    def paths(self) -> list[str]:
        return to_paths(self)

    def n_leaves(self) -> int:
        return 1

    def depth(self) -> int:
        return 0


@dataclasses.dataclass
class Split:
    """
    Internal node branching on one feature.

    `children` holds exactly one child per feature value observed in the
    partition that produced this node, in order of first observation.
    """

    feature: str
    children: dict[Feature, "Decision"]

    def __post_init__(self) -> None:
        assert self.children, f"split on {self.feature!r} has no children"

    def classify(self, instance: Instance) -> None:
        classify(self, instance)

    def paths(self) -> list[str]:
        return to_paths(self)

    def n_leaves(self) -> int:
        return sum(child.n_leaves() for child in self.children.values())

    def depth(self) -> int:
        return 1 + max(child.depth() for child in self.children.values())


Decision = Output | Split


def classify(tree: Decision, instance: Instance) -> None:
    """
    Label `instance` in place with the prediction of `tree`.

    Raises:
        MissingFeatureError: if the instance lacks a feature the path branches on
        UnknownFeatureValueError: if no branch was trained for the instance's value
    """
    node = tree
    while isinstance(node, Split):
        if node.feature not in instance.features:
            raise MissingFeatureError(node.feature)
        value = instance.features[node.feature]
        if value not in node.children:
            raise UnknownFeatureValueError(node.feature, value)
        node = node.children[value]
    instance.target = node.value


def _format_target(value: Target) -> str:
    return "true" if value else "false"


def _walk_paths(node: Decision, edges: list[Edge]) -> Iterator[str]:
    if isinstance(node, Output):
        parts = [f"{feature}[{value}]" for feature, value in edges]
        parts.append(_format_target(node.value))
        yield PATH_SEPARATOR.join(parts)
        return
    for value, child in node.children.items():
        yield from _walk_paths(child, [*edges, (node.feature, value)])


def to_paths(tree: Decision) -> list[str]:
    """
    Sorted root-to-leaf paths of `tree`, e.g. `"outlook[2] ==> humidity[1] ==> false"`.

    Two trees with the same structure produce the same list regardless of
    the order their children were inserted in.
    """
    return sorted(_walk_paths(tree, []))

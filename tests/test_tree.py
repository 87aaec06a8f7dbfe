import typing

import pytest

from id3.builder import train
from id3.dataset import Instance
from id3.exceptions import (
    ClassificationError,
    MissingFeatureError,
    UnknownFeatureValueError,
)
from id3.tree import Decision, Output, Split, classify, to_paths


def weather_tree() -> Split:
    return Split(
        feature="outlook",
        children={
            2: Split(feature="humidity", children={1: Output(False), 0: Output(True)}),
            1: Output(True),
            0: Split(feature="wind", children={0: Output(True), 1: Output(False)}),
        },
    )


class TestDecisionNodes:
    def test_decision_is_leaf_or_split(self):
        assert set(typing.get_args(Decision)) == {Output, Split}

    def test_split_requires_children(self):
        with pytest.raises(AssertionError):
            Split(feature="a", children={})

    def test_leaf_stats(self):
        assert Output(True).n_leaves() == 1
        assert Output(True).depth() == 0

    def test_split_stats(self):
        tree = weather_tree()
        assert tree.n_leaves() == 5
        assert tree.depth() == 2


class TestClassify:
    def test_leaf_overwrites_target(self):
        instance = Instance(features={}, target=False)
        classify(Output(True), instance)
        assert instance.target is True

    def test_follows_branches(self):
        tree = weather_tree()
        sunny_humid = Instance(features={"outlook": 2, "humidity": 1, "wind": 0}, target=True)
        rainy_calm = Instance(features={"outlook": 0, "humidity": 1, "wind": 0}, target=False)

        classify(tree, sunny_humid)
        classify(tree, rainy_calm)

        assert sunny_humid.target is False
        assert rainy_calm.target is True

    def test_method_form(self):
        instance = Instance(features={"outlook": 1})
        weather_tree().classify(instance)
        assert instance.target is True

    def test_missing_feature(self):
        instance = Instance(features={"outlook": 2}, target=True)
        with pytest.raises(MissingFeatureError) as exc_info:
            classify(weather_tree(), instance)
        assert exc_info.value.feature == "humidity"
        assert instance.target is True

    def test_unknown_feature_value(self, tennis_dataset):
        """A value never seen in training is rejected rather than guessed."""
        tree = train(tennis_dataset)
        foggy = Instance(features={"outlook": 3, "temp": 0, "humidity": 0, "wind": 0})
        with pytest.raises(UnknownFeatureValueError) as exc_info:
            classify(tree, foggy)
        assert exc_info.value.feature == "outlook"
        assert exc_info.value.value == 3

    def test_unknown_value_below_root(self, tennis_dataset):
        tree = train(tennis_dataset)
        instance = Instance(features={"outlook": 0, "temp": 0, "humidity": 0, "wind": 5})
        with pytest.raises(UnknownFeatureValueError):
            classify(tree, instance)

    def test_errors_share_base(self):
        assert issubclass(MissingFeatureError, ClassificationError)
        assert issubclass(UnknownFeatureValueError, ClassificationError)


class TestToPaths:
    def test_single_leaf(self):
        assert to_paths(Output(False)) == ["false"]

    def test_paths_are_sorted(self):
        assert weather_tree().paths() == [
            "outlook[0] ==> wind[0] ==> true",
            "outlook[0] ==> wind[1] ==> false",
            "outlook[1] ==> true",
            "outlook[2] ==> humidity[0] ==> true",
            "outlook[2] ==> humidity[1] ==> false",
        ]

    def test_child_order_does_not_matter(self):
        forward = Split(feature="a", children={0: Output(False), 1: Output(True)})
        backward = Split(feature="a", children={1: Output(True), 0: Output(False)})
        assert to_paths(forward) == to_paths(backward)

    def test_shared_leaf_objects(self):
        """Edge labels come from the child map, so reused leaf objects serialize correctly."""
        leaf = Output(True)
        tree = Split(feature="a", children={0: leaf, 1: leaf})
        assert to_paths(tree) == ["a[0] ==> true", "a[1] ==> true"]

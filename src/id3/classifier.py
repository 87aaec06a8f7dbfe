import numpy

from id3.builder import train
from id3.dataset import Dataset, Instance
from id3.evaluation import calculate_error
from id3.pruning import reduced_error_prune
from id3.selection import FeatureSelector, best_feature_information_gain
from id3.tree import Decision, classify, to_paths


class ID3Classifier:
    _decision_tree: Decision
    _n_training_instances: int

    def __init__(
        self,
        instances: Dataset,
        selector: FeatureSelector = best_feature_information_gain,
        max_iterations: int | None = None,
        *,
        validation: Dataset | None = None,
    ) -> None:
        """
        Initialize and train an ID3 classifier.

        Args:
            instances: labeled training instances (not mutated)
            selector: feature selection strategy (default: information gain)
            max_iterations: shared recursion budget, None for unbounded
            validation: if given, the trained tree is pruned against it
                with Reduced Error Pruning

        Raises:
            EmptyDatasetError: if `instances` is empty
            ClassificationError: if pruning fails to classify a validation instance
        """
        self._n_training_instances = len(instances)
        self._decision_tree = train(instances, selector, max_iterations)
        if validation is not None:
            self.prune(validation)

    @property
    def tree(self) -> Decision:
        return self._decision_tree

    @property
    def n_leaves(self) -> int:
        return self._decision_tree.n_leaves()

    @property
    def depth(self) -> int:
        return self._decision_tree.depth()

    def prune(self, validation: Dataset) -> None:
        reduced_error_prune(self._decision_tree, validation)

    def classify(self, instance: Instance) -> None:
        """Overwrite `instance.target` with the predicted label."""
        classify(self._decision_tree, instance)

    def predict(self, instance: Instance) -> bool:
        """Predicted label for `instance`, leaving the instance untouched."""
        probe = instance.clone()
        classify(self._decision_tree, probe)
        return probe.target

    def predict_many(self, instances: Dataset) -> numpy.ndarray:
        return numpy.array(
            [self.predict(instance) for instance in instances], dtype=numpy.bool_
        )

    def error(self, instances: Dataset) -> float:
        return calculate_error(self._decision_tree, instances)

    def paths(self) -> list[str]:
        return to_paths(self._decision_tree)

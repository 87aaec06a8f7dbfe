from id3.dataset import Dataset
from id3.exceptions import EmptyDatasetError
from id3.tree import Decision, classify


def calculate_error(tree: Decision, instances: Dataset) -> float:
    """
    Fraction of `instances` that `tree` misclassifies.

    Each instance is classified in place and its target restored afterwards,
    so the dataset reads the same before and after the call.

    Raises:
        EmptyDatasetError: if `instances` is empty
        ClassificationError: on the first instance that cannot be classified
    """
    if len(instances) == 0:
        raise EmptyDatasetError("Cannot compute the error rate of an empty dataset.")

    wrong_classifications = 0
    for instance in instances:
        correct_target = instance.target
        try:
            classify(tree, instance)
            if instance.target != correct_target:
                wrong_classifications += 1
        finally:
            instance.target = correct_target
    return wrong_classifications / len(instances)

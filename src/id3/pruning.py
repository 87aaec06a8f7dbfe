from loguru import logger

from id3.dataset import Dataset, Instance, majority_target
from id3.evaluation import calculate_error
from id3.tree import Decision, Output, Split
from id3.types import Feature


def reduced_error_prune(tree: Decision, validation: Dataset) -> None:
    """
    Simplify `tree` in place with Reduced Error Pruning.

    Every child of every internal node is tentatively replaced by a leaf
    predicting the majority target of the validation instances that reach
    it. The replacement is kept unless the whole-tree validation error gets
    worse, in which case the original child is restored and its own
    children are tried later. Whole-tree error is recomputed from the root
    for every candidate.

    The pass is not transactional: if classification fails midway the tree
    is left partially pruned and the error propagates.

    Raises:
        EmptyDatasetError: if `validation` is empty and `tree` has a split
        ClassificationError: if a validation instance cannot be classified
    """
    stack: list[tuple[Decision, list[Instance]]] = [(tree, list(validation))]
    n_replaced = 0
    while stack:
        node, applicable = stack.pop()
        if isinstance(node, Output):
            continue
        assert isinstance(node, Split)

        by_value: dict[Feature | None, list[Instance]] = {}
        for instance in applicable:
            by_value.setdefault(instance.features.get(node.feature), []).append(
                instance
            )

        for value, child in list(node.children.items()):
            subset = by_value.get(value, [])
            error_before = calculate_error(tree, validation)
            node.children[value] = Output(majority_target(subset))
            error_after = calculate_error(tree, validation)
            if error_after > error_before:
                node.children[value] = child
                stack.append((child, subset))
            else:
                n_replaced += 1
                logger.debug(
                    "Replaced {}[{}] with leaf (error {:.4f} -> {:.4f})",
                    node.feature,
                    value,
                    error_before,
                    error_after,
                )

    logger.opt(lazy=True).info(
        "Reduced error pruning replaced {} subtrees, {} leaves remain",
        lambda: n_replaced,
        tree.n_leaves,
    )

"""Training utilities for sklearn DecisionTreeClassifier as an ID3 baseline."""

from __future__ import annotations

import dataclasses

import numpy as np
from sklearn.preprocessing import OneHotEncoder
from sklearn.tree import DecisionTreeClassifier

from id3.dataset import Dataset


def to_matrix(
    instances: Dataset, feature_names: list[str]
) -> tuple[np.ndarray, np.ndarray]:
    """Stack instances into a (n_samples, n_features) code matrix and label vector."""
    features = np.array(
        [[instance.features[name] for name in feature_names] for instance in instances],
        dtype=np.int64,
    ).reshape(len(instances), len(feature_names))
    labels = np.array([instance.target for instance in instances], dtype=bool)
    return features, labels


@dataclasses.dataclass(frozen=True)
class SklearnDTResult:
    """Result from training sklearn DecisionTreeClassifier."""

    classifier: DecisionTreeClassifier
    train_error: float
    test_error: float | None
    n_leaves: int
    depth: int


def train_sklearn_dt(
    train: Dataset,
    test: Dataset | None = None,
    *,
    max_depth: int | None = None,
    random_state: int | None = None,
) -> SklearnDTResult:
    """
    Train an entropy-criterion sklearn tree on one-hot encoded feature codes.

    Args:
        train: Training instances
        test: Optional test instances for evaluation
        max_depth: Maximum tree depth (None = unlimited)
        random_state: Random seed for reproducibility

    Returns:
        SklearnDTResult with classifier, error rates, and tree stats
    """
    feature_names = sorted(train[0].features)
    X_train, y_train = to_matrix(train, feature_names)

    encoder = OneHotEncoder(sparse_output=False, handle_unknown="ignore")
    X_train = encoder.fit_transform(X_train).astype(bool)

    clf = DecisionTreeClassifier(
        criterion="entropy",
        max_depth=max_depth,
        random_state=random_state,
    )
    clf.fit(X_train, y_train)

    train_error = float(np.mean(clf.predict(X_train) != y_train))

    test_error: float | None = None
    if test:
        X_test, y_test = to_matrix(test, feature_names)
        X_test = encoder.transform(X_test).astype(bool)
        test_error = float(np.mean(clf.predict(X_test) != y_test))

    return SklearnDTResult(
        classifier=clf,
        train_error=train_error,
        test_error=test_error,
        n_leaves=int(clf.get_n_leaves()),
        depth=int(clf.get_depth()),
    )

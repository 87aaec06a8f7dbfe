"""Delimited-file ingestion: raw categorical tokens to ID3 instances."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from id3.dataset import Instance
from id3.exceptions import InvalidDatasetError
from id3.types import MAX_FEATURE_CODE, Feature


class FeatureEncoder:
    """Per-feature bijection between raw tokens and feature codes.

    Codes are assigned incrementally: the first token seen for a feature
    gets 0, the next new token gets 1, and so on up to MAX_FEATURE_CODE.
    """

    def __init__(self):
        self.codes_: dict[str, dict[str, Feature]] = {}

    def encode(self, feature: str, token: str) -> Feature:
        codes = self.codes_.setdefault(feature, {})
        if token not in codes:
            if len(codes) > MAX_FEATURE_CODE:
                raise InvalidDatasetError(
                    f"Feature {feature!r} has more than {MAX_FEATURE_CODE + 1} distinct values."
                )
            codes[token] = len(codes)
        return codes[token]

    def decode(self, feature: str, code: Feature) -> str:
        for token, known_code in self.codes_.get(feature, {}).items():
            if known_code == code:
                return token
        raise KeyError(f"No token for code {code} of feature {feature!r}")

    def n_values(self, feature: str) -> int:
        return len(self.codes_.get(feature, {}))


def records_to_instances(
    frame: pd.DataFrame,
    target_column: str,
    *,
    positive: str,
    negative: str | None = None,
    missing: str | None = "?",
    encoder: FeatureEncoder | None = None,
) -> tuple[list[Instance], FeatureEncoder]:
    """
    Convert a frame of string tokens to instances.

    Args:
        frame: one row per record; every column except `target_column` is a feature
        target_column: column holding the label token
        positive: label token mapped to True
        negative: label token mapped to False, or None to map every other token to False
        missing: token marking a missing value; rows containing it are discarded
        encoder: encoder to extend, e.g. one already fitted on a training file

    Returns:
        Tuple of (instances, encoder)

    Raises:
        InvalidDatasetError: on an unrecognized label token or too many feature values
    """
    if target_column not in frame.columns:
        raise InvalidDatasetError(f"No target column {target_column!r} in records.")
    if encoder is None:
        encoder = FeatureEncoder()

    feature_names = [str(c) for c in frame.columns if c != target_column]
    feature_frame = frame.drop(columns=[target_column]).astype(str)
    feature_frame.columns = feature_names
    labels = frame[target_column].astype(str)

    if missing is not None:
        keep = ~(feature_frame == missing).any(axis=1)
        feature_frame = feature_frame[keep]
        labels = labels[keep]

    instances: list[Instance] = []
    for (_, row), label in zip(feature_frame.iterrows(), labels):
        if label == positive:
            target = True
        elif negative is None or label == negative:
            target = False
        else:
            raise InvalidDatasetError(f"Invalid label token {label!r}.")
        features = {name: encoder.encode(name, row[name]) for name in feature_names}
        instances.append(Instance(features=features, target=target))

    return instances, encoder


def load_delimited(
    path: str | Path,
    feature_names: Sequence[str] | None = None,
    *,
    target_column: int = 0,
    positive: str = "e",
    negative: str | None = "p",
    missing: str | None = "?",
    delimiter: str = ",",
    encoder: FeatureEncoder | None = None,
) -> tuple[list[Instance], FeatureEncoder]:
    """
    Load a header-less delimited file of categorical tokens.

    Defaults match the UCI agaricus-lepiota (mushroom) data: label in the
    first column, "e" (edible) is positive, "?" marks a missing value.

    Args:
        path: file to read
        feature_names: names for the non-target columns, in file order.
            Defaults to f1, f2, ...
        target_column: 0-indexed column holding the label

    Returns:
        Tuple of (instances, encoder)

    Raises:
        InvalidDatasetError: if the column count does not match `feature_names`
            or a record is invalid
    """
    frame = pd.read_csv(
        path, header=None, sep=delimiter, dtype=str, keep_default_na=False
    )
    n_features = frame.shape[1] - 1
    if feature_names is None:
        feature_names = [f"f{i + 1}" for i in range(n_features)]
    if len(feature_names) != n_features:
        raise InvalidDatasetError(
            f"Expected {len(feature_names)} feature columns, found {n_features}."
        )

    names = list(feature_names)
    names.insert(target_column, "__target__")
    frame.columns = names
    return records_to_instances(
        frame,
        "__target__",
        positive=positive,
        negative=negative,
        missing=missing,
        encoder=encoder,
    )

"""Train/validation/test partitioning."""

from __future__ import annotations

from sklearn.model_selection import train_test_split

from id3.dataset import Dataset, Instance


def split_dataset(
    instances: Dataset,
    *,
    train_size: float = 0.6,
    validation_size: float = 0.2,
    random_state: int | None = None,
) -> tuple[list[Instance], list[Instance], list[Instance]]:
    """
    Shuffle and split instances into train, validation and test partitions.

    The test partition receives whatever `train_size` and `validation_size`
    leave over, which must be a positive fraction.

    Returns:
        Tuple of (train, validation, test)
    """
    if train_size <= 0 or validation_size <= 0:
        raise ValueError("train_size and validation_size must be positive")
    if train_size + validation_size >= 1:
        raise ValueError(
            f"train_size + validation_size must be below 1, got {train_size + validation_size}"
        )

    train, rest = train_test_split(
        list(instances), train_size=train_size, random_state=random_state
    )
    validation_fraction = validation_size / (1 - train_size)
    validation, test = train_test_split(
        rest, train_size=validation_fraction, random_state=random_state
    )
    return train, validation, test

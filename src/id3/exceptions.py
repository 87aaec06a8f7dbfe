from id3.types import Feature


class ID3Exception(Exception):
    """Library-specific exceptions in ID3."""


class EmptyDatasetError(ID3Exception):
    """Raised when an operation needs at least one instance but got none."""

    def __init__(self, message: str = "No instances provided."):
        super().__init__(message)


class InternalInvariantViolationError(ID3Exception):
    """
    Raised when tree induction recurses into an empty partition.

    Partitions are built from non-empty datasets, so this signals a logic bug.
    """

    feature: str
    value: Feature

    def __init__(self, feature: str, value: Feature):
        self.feature = feature
        self.value = value
        super().__init__(
            f"No instances available to extend tree for feature {feature!r} "
            f"with value {value}."
        )


class ClassificationError(ID3Exception):
    """Raised when an instance cannot be routed to a leaf."""


class MissingFeatureError(ClassificationError):
    """Raised when an instance lacks the feature a decision node branches on."""

    feature: str

    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"Instance has no value for feature {feature!r}.")


class UnknownFeatureValueError(ClassificationError):
    """Raised when no branch exists for the instance's feature value."""

    feature: str
    value: Feature

    def __init__(self, feature: str, value: Feature):
        self.feature = feature
        self.value = value
        super().__init__(
            f"No decision node corresponding to value {value} for feature {feature!r}."
        )


class InvalidDatasetError(ID3Exception):
    """Raised when raw records cannot be turned into instances."""

    def __init__(self, message: str):
        super().__init__(message)

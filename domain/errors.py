"""Error types raised by confusion matrix construction and queries."""


class ConfusionMatrixError(Exception):
    """Base class for every confusion matrix error."""


class ShapeError(ConfusionMatrixError, ValueError):
    """Raised when the grid is not square or does not match the labels."""


class LengthMismatchError(ConfusionMatrixError, ValueError):
    """Raised when actual and predicted label sequences differ in length."""


class UnknownLabelError(ConfusionMatrixError, LookupError):
    """Raised when a queried label is not one of the matrix labels."""

    def __init__(self, label: object) -> None:
        super().__init__(f"The label does not exist: {label!r}")
        self.label = label

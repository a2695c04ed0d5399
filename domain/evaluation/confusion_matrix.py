"""
Confusion matrix with one-vs-rest counts and derived classification metrics.

Rows are actual labels, columns are predicted labels. Every metric is
computed on demand from the stored grid; nothing derived is cached.
"""

import math
import warnings
from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

import numpy as np
import pandas as pd

from domain.errors import LengthMismatchError, ShapeError, UnknownLabelError
from domain.evaluation.labels import (
    Comparator,
    distinct_labels,
    find_label,
    label_key,
    order_labels,
    same_label,
)

L = TypeVar("L", bool, int, float, str)


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.nan
    return numerator / denominator


class ConfusionMatrix(Generic[L]):
    """
    Square count grid indexed by an ordered list of labels.

    ``matrix[i][j]`` counts observations whose actual label is ``labels[i]``
    and whose predicted label is ``labels[j]``.

    The grid and labels passed to the constructor are stored as-is, without
    copying. Mutating the grid afterwards changes every subsequent result;
    callers sharing an instance across threads must not mutate it while
    others read.

    Example:
        >>> cm = ConfusionMatrix([[13, 2], [10, 5]], ["cat", "dog"])
        >>> cm.get_true_positive_count("cat")
        13
    """

    def __init__(self, matrix: list[list[float]], labels: list[L]) -> None:
        n = len(matrix)
        if any(len(row) != n for row in matrix):
            raise ShapeError("Confusion matrix must be square")
        if len(labels) != n:
            raise ShapeError("Confusion matrix and labels should have the same length")
        self._matrix = matrix
        self._labels = labels

    @classmethod
    def from_labels(
        cls,
        actual: Sequence[L],
        predicted: Sequence[L],
        *,
        labels: Sequence[L] | None = None,
        sort: Comparator | None = None,
        key: Callable[[L], Any] | None = None,
    ) -> "ConfusionMatrix[L]":
        """
        Tabulate a confusion matrix from parallel actual/predicted labels.

        Args:
            actual: Ground-truth label per observation
            predicted: Predicted label per observation, same length as ``actual``
            labels: Labels to use as dimensions. Observations whose actual or
                predicted label is not listed are skipped. Defaults to the
                distinct labels of ``actual`` then ``predicted``, first-seen order.
            sort: Three-way comparator ``(a, b) -> int`` ordering the labels
            key: Key function ordering the labels (alternative to ``sort``)

        Returns:
            New ConfusionMatrix

        Raises:
            LengthMismatchError: If ``actual`` and ``predicted`` differ in length
            ValueError: If both ``sort`` and ``key`` are given
        """
        if len(actual) != len(predicted):
            raise LengthMismatchError("actual and predicted must have the same length")

        if labels is not None:
            label_list = distinct_labels(labels)
        else:
            label_list = distinct_labels(actual, predicted)
        label_list = order_labels(label_list, sort=sort, key=key)

        positions = {label_key(label): idx for idx, label in enumerate(label_list)}
        n = len(label_list)
        matrix = [[0] * n for _ in range(n)]

        for actual_label, predicted_label in zip(actual, predicted, strict=True):
            actual_idx = positions.get(label_key(actual_label))
            predicted_idx = positions.get(label_key(predicted_label))
            if actual_idx is None or predicted_idx is None:
                continue
            matrix[actual_idx][predicted_idx] += 1

        return cls(matrix, label_list)

    # ----- Accessors -----

    @property
    def matrix(self) -> list[list[float]]:
        return self._matrix

    @property
    def labels(self) -> list[L]:
        return self._labels

    def _grid(self) -> np.ndarray:
        n = len(self._labels)
        return np.asarray(self._matrix).reshape(n, n)

    def to_dataframe(self) -> pd.DataFrame:
        """Grid as a DataFrame (index ``true_<label>``, columns ``pred_<label>``)."""
        return pd.DataFrame(
            self._grid(),
            index=[f"true_{label}" for label in self._labels],
            columns=[f"pred_{label}" for label in self._labels],
        )

    def get_index(self, label: L) -> int:
        """
        Position of ``label`` in the label list.

        Raises:
            UnknownLabelError: If the label is not in the matrix
        """
        idx = find_label(self._labels, label)
        if idx == -1:
            raise UnknownLabelError(label)
        return idx

    # ----- Aggregate counts -----

    def get_total_count(self) -> float:
        """Total number of observations."""
        return self._grid().sum().item()

    def get_true_count(self) -> float:
        """Number of correct predictions (diagonal sum)."""
        return np.trace(self._grid()).item()

    def get_false_count(self) -> float:
        return self.get_total_count() - self.get_true_count()

    def get_count(self, actual: L, predicted: L) -> float:
        """Cell for the given actual and predicted labels."""
        actual_idx = self.get_index(actual)
        predicted_idx = self.get_index(predicted)
        return self._grid()[actual_idx, predicted_idx].item()

    # ----- One-vs-rest counts -----

    def get_true_positive_count(self, label: L) -> float:
        idx = self.get_index(label)
        return self._grid()[idx, idx].item()

    def get_false_negative_count(self, label: L) -> float:
        """Actual ``label`` predicted as something else (row minus diagonal)."""
        idx = self.get_index(label)
        grid = self._grid()
        return (grid[idx, :].sum() - grid[idx, idx]).item()

    def get_false_positive_count(self, label: L) -> float:
        """Other labels predicted as ``label`` (column minus diagonal)."""
        idx = self.get_index(label)
        grid = self._grid()
        return (grid[:, idx].sum() - grid[idx, idx]).item()

    def get_true_negative_count(self, label: L) -> float:
        """Cells outside both the row and the column of ``label``."""
        idx = self.get_index(label)
        grid = self._grid()
        return (grid.sum() - grid[idx, :].sum() - grid[:, idx].sum() + grid[idx, idx]).item()

    def get_positive_count(self, label: L) -> float:
        """Number of actual ``label`` samples (TP + FN)."""
        return self.get_true_positive_count(label) + self.get_false_negative_count(label)

    def get_negative_count(self, label: L) -> float:
        """Number of samples of every other label (TN + FP)."""
        return self.get_true_negative_count(label) + self.get_false_positive_count(label)

    def get_confusion_table(self, label: L) -> list[list[float]]:
        """2x2 one-vs-rest table ``[[TP, FN], [FP, TN]]``."""
        return [
            [self.get_true_positive_count(label), self.get_false_negative_count(label)],
            [self.get_false_positive_count(label), self.get_true_negative_count(label)],
        ]

    # ----- Derived metrics -----

    def get_accuracy(self) -> float:
        """Share of correct predictions; NaN for an empty matrix."""
        return _ratio(self.get_true_count(), self.get_total_count())

    def get_true_positive_rate(self, label: L) -> float:
        """Sensitivity / recall: TP / (TP + FN)."""
        return _ratio(self.get_true_positive_count(label), self.get_positive_count(label))

    def get_true_negative_rate(self, label: L) -> float:
        """Specificity: TN / (TN + FP)."""
        return _ratio(self.get_true_negative_count(label), self.get_negative_count(label))

    def get_positive_predictive_value(self, label: L) -> float:
        """Precision: TP / (TP + FP)."""
        tp = self.get_true_positive_count(label)
        return _ratio(tp, tp + self.get_false_positive_count(label))

    def get_negative_predictive_value(self, label: L) -> float:
        """TN / (TN + FN)."""
        tn = self.get_true_negative_count(label)
        return _ratio(tn, tn + self.get_false_negative_count(label))

    def get_false_negative_rate(self, label: L) -> float:
        """Miss rate: 1 - TPR."""
        return 1 - self.get_true_positive_rate(label)

    def get_false_positive_rate(self, label: L) -> float:
        """Fall-out: 1 - TNR."""
        return 1 - self.get_true_negative_rate(label)

    def get_false_discovery_rate(self, label: L) -> float:
        """FP / (FP + TP)."""
        fp = self.get_false_positive_count(label)
        return _ratio(fp, fp + self.get_true_positive_count(label))

    def get_false_omission_rate(self, label: L) -> float:
        """FN / (FN + TP)."""
        fn = self.get_false_negative_count(label)
        return _ratio(fn, fn + self.get_true_positive_count(label))

    def get_f1_score(self, label: L) -> float:
        """2TP / (2TP + FP + FN)."""
        tp = self.get_true_positive_count(label)
        return _ratio(
            2 * tp,
            2 * tp + self.get_false_positive_count(label) + self.get_false_negative_count(label),
        )

    def get_matthews_correlation_coefficient(self, label: L) -> float:
        """
        Matthews correlation coefficient of the one-vs-rest table.

        (TP*TN - FP*FN) / sqrt((TP+FP)(TP+FN)(TN+FP)(TN+FN)); NaN when any
        of the four sums is zero.
        """
        tp = self.get_true_positive_count(label)
        tn = self.get_true_negative_count(label)
        fp = self.get_false_positive_count(label)
        fn = self.get_false_negative_count(label)
        return _ratio(
            tp * tn - fp * fn,
            math.sqrt((tp + fp) * (tp + fn) * (tn + fp) * (tn + fn)),
        )

    def get_informedness(self, label: L) -> float:
        """Youden's J: TPR + TNR - 1."""
        return self.get_true_positive_rate(label) + self.get_true_negative_rate(label) - 1

    def get_markedness(self, label: L) -> float:
        """PPV + NPV - 1."""
        return self.get_positive_predictive_value(label) + self.get_negative_predictive_value(label) - 1

    # ----- Deprecated aliases -----

    @property
    def accuracy(self) -> float:
        """Deprecated: use ``get_accuracy()``."""
        warnings.warn(
            "ConfusionMatrix.accuracy is deprecated; use get_accuracy()", DeprecationWarning, stacklevel=2
        )
        return self.get_accuracy()

    @property
    def total(self) -> float:
        """Deprecated: use ``get_total_count()``."""
        warnings.warn(
            "ConfusionMatrix.total is deprecated; use get_total_count()", DeprecationWarning, stacklevel=2
        )
        return self.get_total_count()

    # ----- Value semantics -----

    def __len__(self) -> int:
        return len(self._labels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfusionMatrix):
            return NotImplemented
        if len(self) != len(other):
            return False
        if not all(same_label(a, b) for a, b in zip(self._labels, other._labels, strict=True)):
            return False
        return bool(np.array_equal(self._grid(), other._grid()))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(labels={self._labels!r}, matrix={self._matrix!r})"

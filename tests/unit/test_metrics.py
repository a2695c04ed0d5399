import math

import numpy as np
import pytest
from sklearn.metrics import f1_score, matthews_corrcoef, precision_score, recall_score

from domain.evaluation.confusion_matrix import ConfusionMatrix

# Example from https://en.wikipedia.org/wiki/Confusion_matrix
MATRIX = [
    [5, 3, 0],
    [2, 3, 1],
    [0, 2, 11],
]
LABELS = ["cat", "dog", "rabbit"]


@pytest.fixture
def cm() -> ConfusionMatrix:
    return ConfusionMatrix(MATRIX, LABELS)


def _expand(matrix: list[list[int]], labels: list[str]) -> tuple[np.ndarray, np.ndarray]:
    """Turn a count grid back into parallel y_true / y_pred arrays."""
    y_true: list[str] = []
    y_pred: list[str] = []
    for i, actual in enumerate(labels):
        for j, predicted in enumerate(labels):
            y_true.extend([actual] * matrix[i][j])
            y_pred.extend([predicted] * matrix[i][j])
    return np.array(y_true), np.array(y_pred)


def test_aggregate_counts(cm: ConfusionMatrix) -> None:
    assert cm.get_total_count() == 27
    assert cm.get_true_count() == 5 + 3 + 11
    assert cm.get_false_count() == 3 + 2 + 1 + 2
    assert cm.get_accuracy() == 19 / 27


def test_one_vs_rest_counts_for_cat(cm: ConfusionMatrix) -> None:
    assert cm.get_positive_count("cat") == 5 + 3
    assert cm.get_negative_count("cat") == 2 + 3 + 1 + 2 + 11
    assert cm.get_true_positive_count("cat") == 5
    assert cm.get_true_negative_count("cat") == 17
    assert cm.get_false_positive_count("cat") == 2
    assert cm.get_false_negative_count("cat") == 3


def test_confusion_table(cm: ConfusionMatrix) -> None:
    assert cm.get_confusion_table("cat") == [[5, 3], [2, 17]]
    assert cm.get_confusion_table("dog") == [[3, 3], [5, 16]]
    assert cm.get_confusion_table("rabbit") == [[11, 2], [1, 13]]


@pytest.mark.parametrize("label", LABELS)
def test_count_identities(cm: ConfusionMatrix, label: str) -> None:
    total = cm.get_total_count()
    assert cm.get_positive_count(label) + cm.get_negative_count(label) == total
    assert (
        cm.get_true_positive_count(label)
        + cm.get_false_positive_count(label)
        + cm.get_false_negative_count(label)
        + cm.get_true_negative_count(label)
        == total
    )


def test_rates_for_cat(cm: ConfusionMatrix) -> None:
    assert cm.get_true_positive_rate("cat") == pytest.approx(5 / 8)
    assert cm.get_true_negative_rate("cat") == pytest.approx(17 / 19)
    assert cm.get_positive_predictive_value("cat") == pytest.approx(5 / 7)
    assert cm.get_negative_predictive_value("cat") == pytest.approx(17 / 20)
    assert cm.get_false_negative_rate("cat") == pytest.approx(3 / 8)
    assert cm.get_false_positive_rate("cat") == pytest.approx(2 / 19)
    assert cm.get_false_discovery_rate("cat") == pytest.approx(2 / 7)
    assert cm.get_false_omission_rate("cat") == pytest.approx(3 / 8)
    assert cm.get_f1_score("cat") == pytest.approx(10 / 15)


def test_composite_scores_for_cat(cm: ConfusionMatrix) -> None:
    expected_mcc = (5 * 17 - 2 * 3) / math.sqrt((5 + 2) * (5 + 3) * (17 + 2) * (17 + 3))
    assert cm.get_matthews_correlation_coefficient("cat") == pytest.approx(expected_mcc)
    assert cm.get_informedness("cat") == pytest.approx(5 / 8 + 17 / 19 - 1)
    assert cm.get_markedness("cat") == pytest.approx(5 / 7 + 17 / 20 - 1)


@pytest.mark.parametrize("label", LABELS)
def test_metrics_agree_with_sklearn_one_vs_rest(cm: ConfusionMatrix, label: str) -> None:
    y_true, y_pred = _expand(MATRIX, LABELS)
    bin_true = y_true == label
    bin_pred = y_pred == label

    assert cm.get_positive_predictive_value(label) == pytest.approx(precision_score(bin_true, bin_pred))
    assert cm.get_true_positive_rate(label) == pytest.approx(recall_score(bin_true, bin_pred))
    assert cm.get_true_negative_rate(label) == pytest.approx(recall_score(~bin_true, ~bin_pred))
    assert cm.get_f1_score(label) == pytest.approx(f1_score(bin_true, bin_pred))
    assert cm.get_matthews_correlation_coefficient(label) == pytest.approx(matthews_corrcoef(bin_true, bin_pred))


def test_unobserved_label_yields_nan_not_errors() -> None:
    cm = ConfusionMatrix.from_labels(["A", "A"], ["A", "A"], labels=["A", "D"])

    assert cm.get_positive_count("D") == 0
    assert cm.get_true_negative_count("D") == 2
    assert math.isnan(cm.get_true_positive_rate("D"))
    assert math.isnan(cm.get_false_negative_rate("D"))
    assert math.isnan(cm.get_positive_predictive_value("D"))
    assert math.isnan(cm.get_false_discovery_rate("D"))
    assert math.isnan(cm.get_false_omission_rate("D"))
    assert math.isnan(cm.get_f1_score("D"))
    assert math.isnan(cm.get_matthews_correlation_coefficient("D"))
    assert math.isnan(cm.get_informedness("D"))
    assert cm.get_true_negative_rate("D") == 1
    assert cm.get_negative_predictive_value("D") == 1


def test_single_label_matrix_has_nan_specificity() -> None:
    cm = ConfusionMatrix([[4]], ["only"])
    assert cm.get_accuracy() == 1
    assert cm.get_true_positive_rate("only") == 1
    assert math.isnan(cm.get_true_negative_rate("only"))
    assert math.isnan(cm.get_false_positive_rate("only"))
    assert math.isnan(cm.get_matthews_correlation_coefficient("only"))


def test_perfect_binary_classifier() -> None:
    cm = ConfusionMatrix([[3, 0], [0, 7]], [False, True])
    assert cm.get_f1_score(True) == 1
    assert cm.get_matthews_correlation_coefficient(True) == 1
    assert cm.get_informedness(True) == 1
    assert cm.get_markedness(False) == 1

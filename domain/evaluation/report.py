"""Per-label metric tables built from a ConfusionMatrix."""

from collections.abc import Iterable

import numpy as np
import pandas as pd

from domain.evaluation.confusion_matrix import ConfusionMatrix
from domain.evaluation.labels import as_label
from domain.schemas import METRIC_FIELDS, LabelMetrics


def label_metrics(cm: ConfusionMatrix, label: object) -> LabelMetrics:
    """
    Collect one-vs-rest counts and every ratio metric for ``label``.

    Raises:
        UnknownLabelError: If the label is not in the matrix
    """
    return LabelMetrics(
        label=as_label(label),
        support=cm.get_positive_count(label),
        true_positive=cm.get_true_positive_count(label),
        false_negative=cm.get_false_negative_count(label),
        false_positive=cm.get_false_positive_count(label),
        true_negative=cm.get_true_negative_count(label),
        true_positive_rate=cm.get_true_positive_rate(label),
        true_negative_rate=cm.get_true_negative_rate(label),
        positive_predictive_value=cm.get_positive_predictive_value(label),
        negative_predictive_value=cm.get_negative_predictive_value(label),
        false_negative_rate=cm.get_false_negative_rate(label),
        false_positive_rate=cm.get_false_positive_rate(label),
        false_discovery_rate=cm.get_false_discovery_rate(label),
        false_omission_rate=cm.get_false_omission_rate(label),
        f1_score=cm.get_f1_score(label),
        matthews_correlation_coefficient=cm.get_matthews_correlation_coefficient(label),
        informedness=cm.get_informedness(label),
        markedness=cm.get_markedness(label),
    )


def compute_label_report(cm: ConfusionMatrix) -> pd.DataFrame:
    """
    Build a per-label report table.

    Columns in the result:
      - support, true_positive, false_negative, false_positive, true_negative
      - one column per ratio metric (NaN where undefined)

    Args:
        cm: Confusion matrix to report on

    Returns:
        DataFrame indexed by label, rows in matrix label order
    """
    rows = [label_metrics(cm, label).model_dump() for label in cm.labels]
    if not rows:
        return pd.DataFrame(columns=list(LabelMetrics.model_fields)).set_index("label")
    return pd.DataFrame(rows).set_index("label")


def macro_average(report_df: pd.DataFrame, columns: Iterable[str] = METRIC_FIELDS) -> dict[str, float]:
    """
    Unweighted mean of each metric column over labels.

    Undefined (NaN) entries are skipped; a column with no defined entry
    averages to NaN.
    """
    averages: dict[str, float] = {}
    for col in columns:
        if col not in report_df.columns:
            raise KeyError(f"Required column '{col}' not found in report.")
        values = report_df[col].astype(float)
        averages[col] = float(values.mean(skipna=True)) if values.notna().any() else float(np.nan)
    return averages

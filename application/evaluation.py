"""Evaluation workflow and summary logging."""

import logging
from collections.abc import Sequence

import numpy as np
import pandas as pd

from domain.evaluation.confusion_matrix import ConfusionMatrix
from domain.evaluation.report import compute_label_report, macro_average
from infrastructure.config.models import ReportConfig
from infrastructure.observability import get_log_context, make_run_tag, set_log_context

logger = logging.getLogger(__name__)

PER_CLASS_COLUMNS: dict[str, str] = {
    "precision_per_class": "positive_predictive_value",
    "recall_per_class": "true_positive_rate",
    "specificity_per_class": "true_negative_rate",
    "f1_per_class": "f1_score",
    "mcc_per_class": "matthews_correlation_coefficient",
}

MACRO_COLUMNS: dict[str, str] = {
    "macro_precision": "positive_predictive_value",
    "macro_recall": "true_positive_rate",
    "macro_f1": "f1_score",
    "macro_mcc": "matthews_correlation_coefficient",
    "macro_informedness": "informedness",
    "macro_markedness": "markedness",
}


def build_confusion_matrix(y_true: Sequence, y_pred: Sequence, cfg: ReportConfig) -> ConfusionMatrix:
    """Tabulate y_true/y_pred according to the label settings in ``cfg``."""
    return ConfusionMatrix.from_labels(
        y_true,
        y_pred,
        labels=cfg.labels_order,
        key=(lambda label: label) if cfg.sort_labels else None,
    )


def evaluate_predictions(
    y_true: Sequence,
    y_pred: Sequence,
    cfg: ReportConfig,
    *,
    run_id: str | None = None,
) -> tuple[dict, pd.DataFrame, pd.DataFrame]:
    """
    Build a confusion matrix from raw labels and compute a suite of metrics.

    Args:
        y_true: True labels (list, numpy array or pandas Series)
        y_pred: Predicted labels, same length as y_true
        cfg: Report configuration (label order, sorting, rounding)
        run_id: Optional run identifier; tags every following log line and the metrics dict

    Returns:
        Tuple of (metrics dict, confusion_matrix DataFrame, per-label report DataFrame)

    Raises:
        LengthMismatchError: If y_true and y_pred differ in length
    """
    if run_id is not None:
        set_log_context(run_id_full=run_id)
        logger.info("Starting evaluation: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))

    cm = build_confusion_matrix(y_true, y_pred, cfg)
    cm_df = cm.to_dataframe()
    report_df = compute_label_report(cm)

    logger.info("Confusion matrix built: %d labels, %s observations", len(cm), cm.get_total_count())
    skipped = len(y_true) - cm.get_total_count()
    if skipped:
        logger.info("Excluded %d observations with labels outside labels_order", skipped)

    def _per_class(column: str) -> dict:
        values = np.round(report_df[column].astype(float).to_numpy(), cfg.decimals)
        return dict(zip(cm.labels, values.tolist(), strict=False))

    metrics: dict = {
        "run_tag": get_log_context()["run_tag"],
        "labels": list(cm.labels),
        "confusion_matrix": cm.matrix,
        "total_count": cm.get_total_count(),
        "true_count": cm.get_true_count(),
        "false_count": cm.get_false_count(),
        "accuracy": cm.get_accuracy(),
    }
    averages = macro_average(report_df, MACRO_COLUMNS.values())
    for key, column in MACRO_COLUMNS.items():
        metrics[key] = averages[column]
    for key, column in PER_CLASS_COLUMNS.items():
        metrics[key] = _per_class(column)
    metrics["support_per_class"] = dict(zip(cm.labels, report_df["support"].tolist(), strict=False))

    logger.info("Accuracy: %.4f", metrics["accuracy"])

    return metrics, cm_df, report_df


def log_evaluation_summary(
    metrics: dict,
    cm_df: pd.DataFrame | None,
    cfg: ReportConfig | None = None,
) -> None:
    """
    Log a concise, human-readable evaluation summary.

    Args:
        metrics: Dictionary returned by evaluate_predictions
        cm_df: Confusion matrix DataFrame (optional)
        cfg: Report configuration; controls confusion matrix logging
    """
    logger.info("=== Evaluation Summary ===")
    logger.info("Run tag: %s", metrics.get("run_tag", "-"))

    if not metrics:
        logger.info("No metrics computed.")
        return

    if cm_df is not None and (cfg is None or cfg.log_confusion_matrix):
        logger.debug("Confusion matrix (rows=true, cols=pred):\n%s", cm_df)

    logger.info(
        "Observations: total=%s, correct=%s, incorrect=%s",
        metrics["total_count"],
        metrics["true_count"],
        metrics["false_count"],
    )
    logger.info("Accuracy: %.4f", metrics["accuracy"])
    logger.info("Macro precision: %.4f", metrics["macro_precision"])
    logger.info("Macro recall: %.4f", metrics["macro_recall"])
    logger.info("Macro F1: %.4f", metrics["macro_f1"])
    logger.info("Macro MCC: %.4f", metrics["macro_mcc"])

    # per-label metrics
    logger.info("Per-class precision: %s", metrics["precision_per_class"])
    logger.info("Per-class recall: %s", metrics["recall_per_class"])
    logger.info("Per-class F1: %s", metrics["f1_per_class"])
    logger.info("Per-class support: %s", metrics["support_per_class"])

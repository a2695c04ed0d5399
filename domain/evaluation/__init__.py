"""
Confusion matrix and classification metrics.

Provides:
- ConfusionMatrix: count grid, one-vs-rest counts, derived rates/scores
- Label identity helpers (exact matching, first-seen ordering)
- Per-label report tables and macro averages

All functions are pure (depend only on numpy, pandas, pydantic).
"""

from domain.evaluation.confusion_matrix import ConfusionMatrix
from domain.evaluation.labels import distinct_labels, order_labels
from domain.evaluation.report import compute_label_report, label_metrics, macro_average

__all__ = [
    "ConfusionMatrix",
    "distinct_labels",
    "order_labels",
    "compute_label_report",
    "label_metrics",
    "macro_average",
]

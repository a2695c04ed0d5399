"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
turning raw label arrays into confusion matrix reports.
"""

from application.evaluation import build_confusion_matrix, evaluate_predictions, log_evaluation_summary

__all__ = [
    "build_confusion_matrix",
    "evaluate_predictions",
    "log_evaluation_summary",
]

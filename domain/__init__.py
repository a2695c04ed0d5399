"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- errors: Shape, length and unknown-label errors
- schemas: Pydantic per-label metric records
- evaluation: ConfusionMatrix and metric reports
"""

from domain.errors import ConfusionMatrixError, LengthMismatchError, ShapeError, UnknownLabelError
from domain.evaluation import ConfusionMatrix
from domain.schemas import LabelMetrics

__all__ = [
    "ConfusionMatrix",
    "LabelMetrics",
    "ConfusionMatrixError",
    "ShapeError",
    "LengthMismatchError",
    "UnknownLabelError",
]

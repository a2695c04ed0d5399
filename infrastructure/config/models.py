"""Configuration models (Pydantic classes)."""

from pydantic import BaseModel, Field, model_validator

from domain.evaluation.labels import distinct_labels
from domain.schemas import Label


class ReportConfig(BaseModel):
    """
    Configuration for building a confusion matrix report from raw labels.

    - Loaded from report.yaml (or constructed directly)
    - Consumed by application.evaluation
    """

    labels_order: list[Label] | None = Field(
        default=None,
        description="Explicit labels (and their order). Observations with other labels are excluded. "
        "If None, labels are inferred from the data in first-seen order.",
    )
    sort_labels: bool = Field(
        default=False,
        description="If true, sort inferred labels in natural order. Not allowed with labels_order.",
    )
    decimals: int = Field(default=4, ge=0, description="Rounding applied to per-class metric dicts.")
    log_confusion_matrix: bool = Field(
        default=True,
        description="If true, log the confusion matrix (DEBUG) in the evaluation summary.",
    )

    @model_validator(mode="after")
    def _validate(self) -> "ReportConfig":
        if self.labels_order is not None:
            if len(distinct_labels(self.labels_order)) != len(self.labels_order):
                raise ValueError("labels_order must not contain duplicate labels")
            if self.sort_labels:
                raise ValueError("sort_labels cannot be combined with an explicit labels_order")
        return self

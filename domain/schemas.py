"""Pydantic models for per-label evaluation records."""

from pydantic import BaseModel, Field

Label = bool | int | float | str
Count = int | float

METRIC_FIELDS: tuple[str, ...] = (
    "true_positive_rate",
    "true_negative_rate",
    "positive_predictive_value",
    "negative_predictive_value",
    "false_negative_rate",
    "false_positive_rate",
    "false_discovery_rate",
    "false_omission_rate",
    "f1_score",
    "matthews_correlation_coefficient",
    "informedness",
    "markedness",
)


class LabelMetrics(BaseModel):
    """One-vs-rest counts and metrics for a single label."""

    label: Label = Field(..., description="The label treated as positive.")
    support: Count = Field(..., description="Number of actual samples of the label (TP + FN).")

    true_positive: Count
    false_negative: Count
    false_positive: Count
    true_negative: Count

    # Ratio metrics; NaN when undefined (0/0)
    true_positive_rate: float
    true_negative_rate: float
    positive_predictive_value: float
    negative_predictive_value: float
    false_negative_rate: float
    false_positive_rate: float
    false_discovery_rate: float
    false_omission_rate: float
    f1_score: float
    matthews_correlation_coefficient: float
    informedness: float
    markedness: float

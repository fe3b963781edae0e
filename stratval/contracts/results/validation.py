from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import Field

from .common import ResultModel


class HoldoutResult(ResultModel):
    """Outcome of one stratified holdout evaluation."""

    metric_name: Literal["accuracy"] = "accuracy"
    metric_value: float = Field(ge=0.0, le=1.0)

    train_frac: float
    n_train: int
    n_validation: int
    n_correct: int

    # Keyed by class label.
    class_counts: Dict[int, int] = Field(default_factory=dict)
    quotas: Dict[int, int] = Field(default_factory=dict)

    idx_train: List[int] = Field(default_factory=list)
    idx_validation: List[int] = Field(default_factory=list)
    # Predictions aligned with idx_validation.
    y_pred: List[int] = Field(default_factory=list)

    notes: List[str] = Field(default_factory=list)

    @property
    def accuracy(self) -> float:
        return self.metric_value

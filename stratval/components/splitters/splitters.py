from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator
import numpy as np

from stratval.contracts.split_configs import HoldoutSplitConfig
from stratval.core.shapes import ensure_samples_labels
from stratval.components.splitters.stratified_holdout import HoldoutPlan, plan_holdout
from stratval.components.splitters.types import Split
from ..interfaces import Splitter


def gather_split(X: np.ndarray, y: np.ndarray, plan: HoldoutPlan) -> Split:
    """Materialize a :class:`Split` from a plan (order-preserving row gather)."""
    return Split(
        Xtr=X[plan.idx_tr],
        Xte=X[plan.idx_te],
        ytr=y[plan.idx_tr],
        yte=y[plan.idx_te],
        idx_tr=plan.idx_tr,
        idx_te=plan.idx_te,
    )


@dataclass
class StratifiedHoldoutSplitter(Splitter):
    cfg: HoldoutSplitConfig = field(default_factory=HoldoutSplitConfig)

    def split(self, X: np.ndarray, y: np.ndarray) -> Iterator[Split]:
        X, y = ensure_samples_labels(X, y, dense=self.cfg.dense_labels)
        yield gather_split(X, y, plan_holdout(y, self.cfg.train_frac))

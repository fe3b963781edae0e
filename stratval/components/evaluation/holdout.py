from __future__ import annotations

import logging
import sys
import warnings
from dataclasses import dataclass, field
from typing import Any, List

import numpy as np

from stratval.contracts.split_configs import HoldoutSplitConfig
from stratval.contracts.results.validation import HoldoutResult
from stratval.core.errors import ZeroQuotaWarning
from stratval.core.shapes import ensure_samples_labels
from stratval.components.interfaces import Classifier, Validation
from stratval.components.splitters.stratified_holdout import HoldoutPlan, plan_holdout
from stratval.components.splitters.splitters import gather_split
from stratval.components.evaluation.scoring import accuracy, predict_each

logger = logging.getLogger(__name__)


def _caller_stacklevel() -> int:
    """Stacklevel for a warning issued by the calling function that lands on
    the first frame outside this package."""
    level = 1
    frame = sys._getframe(1)
    while frame is not None and frame.f_globals.get("__name__", "").startswith("stratval."):
        frame = frame.f_back
        level += 1
    return level


def _zero_quota_notes(plan: HoldoutPlan) -> List[str]:
    return [
        f"class {label} has {plan.class_counts[label]} sample(s); "
        f"train_frac={plan.train_frac:g} leaves it no training examples."
        for label in plan.zero_quota_classes
    ]


@dataclass
class HoldoutValidation(Validation):
    """
    Stratified holdout validation.

    Each class contributes ``floor(count * train_frac)`` of its first rows (in
    input order) to training; everything else is held out. The classifier is
    trained once on the training rows and scored by accuracy on the rest.

    The config is a frozen value, so one instance can be reused freely; the
    classifier passed to :meth:`compute` is the only thing that gets mutated.
    """

    cfg: HoldoutSplitConfig = field(default_factory=HoldoutSplitConfig)

    @property
    def train_frac(self) -> float:
        return self.cfg.train_frac

    def compute(self, classifier: Classifier, samples: Any, labels: Any) -> float:
        """Return validation accuracy in [0, 1]."""
        return self.evaluate(classifier, samples, labels).metric_value

    def evaluate(self, classifier: Classifier, samples: Any, labels: Any) -> HoldoutResult:
        """Run the full holdout evaluation and return a typed :class:`HoldoutResult`."""
        X, y = ensure_samples_labels(samples, labels, dense=self.cfg.dense_labels)

        plan = plan_holdout(y, self.cfg.train_frac)
        logger.debug(
            "holdout plan: n=%d counts=%s quotas=%s n_train=%d n_validation=%d",
            y.shape[0], plan.class_counts, plan.quotas, plan.n_train, plan.n_validation,
        )

        notes = _zero_quota_notes(plan)
        if notes and self.cfg.warn_on_zero_quota:
            stacklevel = _caller_stacklevel()
            for msg in notes:
                warnings.warn(msg, ZeroQuotaWarning, stacklevel=stacklevel)

        split = gather_split(X, y, plan)

        classifier.train(split.Xtr, split.ytr)
        y_pred = predict_each(classifier, split.Xte)

        acc, n_correct = accuracy(split.yte, y_pred)
        logger.debug("holdout accuracy: %d/%d = %.4f", n_correct, split.n_test, acc)

        return HoldoutResult(
            metric_value=acc,
            train_frac=plan.train_frac,
            n_train=plan.n_train,
            n_validation=plan.n_validation,
            n_correct=n_correct,
            class_counts=plan.class_counts,
            quotas=plan.quotas,
            idx_train=[int(i) for i in plan.idx_tr],
            idx_validation=[int(i) for i in plan.idx_te],
            y_pred=[int(v) for v in np.asarray(y_pred).tolist()],
            notes=notes,
        )

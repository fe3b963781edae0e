from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional
import numpy as np
from sklearn.base import clone

from stratval.components.interfaces import Classifier
from stratval.components.classifiers.fitting import fit_model


@dataclass
class SklearnClassifier(Classifier):
    """
    Adapts a scikit-learn estimator to the train/predict classifier contract.

    `train` fits a fresh clone of `estimator` each time, so the template
    estimator is never mutated and repeated evaluations start clean.
    """

    estimator: Any
    fitted_: Optional[Any] = field(default=None, init=False, repr=False)

    def train(self, samples: np.ndarray, labels: np.ndarray) -> None:
        self.fitted_ = fit_model(clone(self.estimator), samples, labels)

    def predict(self, sample: np.ndarray) -> int:
        if self.fitted_ is None:
            raise RuntimeError("SklearnClassifier.predict() called before train().")
        x = np.asarray(sample).reshape(1, -1)
        return int(np.asarray(self.fitted_.predict(x)).reshape(-1)[0])

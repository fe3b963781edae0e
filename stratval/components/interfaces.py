from __future__ import annotations
from typing import Any, Iterator, Protocol

import numpy as np

from stratval.components.splitters.types import Split


class Classifier(Protocol):
    """Trainable predictor consumed by validations.

    Any object with these two methods qualifies; no base class is required.
    """

    def train(self, samples: np.ndarray, labels: np.ndarray) -> None:
        """Fit on (samples, labels). Called once per evaluation, before predict."""
        ...

    def predict(self, sample: np.ndarray) -> Any:
        """Return one integer label for a single feature vector."""
        ...


class Splitter(Protocol):
    def split(
        self,
        X: np.ndarray,
        y: np.ndarray,
    ) -> Iterator[Split]:
        """Yield a sequence of train/validation splits.

        Implementations must yield :class:`stratval.components.splitters.types.Split`.
        """
        ...


class Validation(Protocol):
    def compute(self, classifier: Classifier, samples: Any, labels: Any) -> float:
        """Train ``classifier`` on part of the data and return a score on the rest."""
        ...

    def evaluate(self, classifier: Classifier, samples: Any, labels: Any) -> Any:
        """Like :meth:`compute`, but return the full typed result."""
        ...

"""Shared test classifiers."""

from collections import Counter
from typing import List

import numpy as np
import pytest


class ConstantClassifier:
    """Always predicts the same label."""

    def __init__(self, label: int):
        self.label = label
        self.trained = False

    def train(self, samples, labels) -> None:
        self.trained = True

    def predict(self, sample) -> int:
        return self.label


class MajorityClassifier:
    """Predicts the most frequent training label (ties -> smallest label)."""

    def __init__(self):
        self.majority = None

    def train(self, samples, labels) -> None:
        counts = Counter(int(v) for v in labels)
        top = max(counts.values())
        self.majority = min(label for label, n in counts.items() if n == top)

    def predict(self, sample) -> int:
        return self.majority


class RecordingClassifier:
    """Nearest-neighbour lookup that records every call it receives."""

    def __init__(self):
        self.calls: List[str] = []
        self.train_X = None
        self.train_y = None

    def train(self, samples, labels) -> None:
        self.calls.append("train")
        self.train_X = np.array(samples, copy=True)
        self.train_y = np.array(labels, copy=True)

    def predict(self, sample) -> int:
        self.calls.append("predict")
        d = np.linalg.norm(self.train_X - np.asarray(sample)[None, :], axis=1)
        return int(self.train_y[int(np.argmin(d))])


@pytest.fixture
def separable_six():
    """Two well-separated classes, three samples each, grouped by class."""
    X = np.array([[0.0], [0.1], [0.2], [10.0], [10.1], [10.2]])
    y = np.array([0, 0, 0, 1, 1, 1])
    return X, y

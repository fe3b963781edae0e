from __future__ import annotations

from typing import Any, List, Tuple

import numpy as np
from sklearn.metrics import accuracy_score

from stratval.core.errors import EmptyValidationSet


def _check_len(y_true: np.ndarray, y_pred: np.ndarray) -> None:
    if y_true.shape[0] != y_pred.shape[0]:
        raise ValueError(
            f"Length mismatch: y_true({y_true.shape[0]}) vs y_pred({y_pred.shape[0]})."
        )


def as_label(value: Any) -> int:
    """Coerce a single prediction (python int, numpy scalar, 1-element array) to int."""
    arr = np.asarray(value)
    if arr.size != 1:
        raise ValueError(f"predict() must return a single label; got shape {arr.shape}.")
    item = arr.reshape(-1)[0]
    if isinstance(item, (np.floating, float)) and float(item) != int(item):
        raise ValueError(f"predict() returned a non-integral label: {item!r}.")
    return int(item)


def predict_each(classifier: Any, X: np.ndarray) -> np.ndarray:
    """Call ``classifier.predict`` once per row of X, in row order."""
    preds: List[int] = [as_label(classifier.predict(x)) for x in X]
    return np.asarray(preds, dtype=np.int64)


def accuracy(y_true: np.ndarray, y_pred: np.ndarray) -> Tuple[float, int]:
    """Return ``(accuracy, n_correct)``; an empty validation set is an error, not NaN."""
    y_true = np.asarray(y_true).ravel()
    y_pred = np.asarray(y_pred).ravel()
    _check_len(y_true, y_pred)

    if y_true.shape[0] == 0:
        raise EmptyValidationSet("cannot score an empty validation set.")

    n_correct = int(accuracy_score(y_true, y_pred, normalize=False))
    return float(accuracy_score(y_true, y_pred)), n_correct

from __future__ import annotations

"""Public shape/label coercion utilities.

Conventions
-----------
- X is 2D: (n_samples, n_features)
- y is 1D: (n_samples,) holding non-negative integer class codes

Unlike looser loaders, nothing here transposes or truncates: a holdout
evaluation must see exactly the rows it was given, in the order given.
"""

from typing import Tuple

import numpy as np

from stratval.core.errors import DimensionMismatch, InvalidLabel


def coerce_samples(X) -> np.ndarray:
    """Return X as a 2D array; 1D input is treated as a single feature column."""

    X = np.asarray(X)
    if X.ndim == 1:
        X = X[:, None]

    if X.ndim != 2:
        raise DimensionMismatch(f"samples must be 1D or 2D; got shape {X.shape}.")

    return X


def coerce_labels(y) -> np.ndarray:
    """Return y as a 1D array. A column vector (n, 1) is flattened."""

    y = np.asarray(y)
    if y.ndim == 2 and y.shape[1] == 1:
        y = y.ravel()
    if y.ndim != 1:
        raise DimensionMismatch(f"labels must be 1D (n_samples,). Got {y.shape}.")
    return y


def check_label_codes(y: np.ndarray) -> np.ndarray:
    """Return y as ``int64`` after checking every entry is a non-negative integer.

    Integral floats (``1.0``) are accepted and cast. Booleans, strings and
    objects are rejected; encode categorical labels first.
    """

    if y.size == 0:
        return y.astype(np.int64)

    if y.dtype.kind not in "iuf":
        raise InvalidLabel(f"labels must be integer class codes; got dtype {y.dtype}.")

    if y.dtype.kind == "f":
        if not np.all(np.isfinite(y)):
            raise InvalidLabel("labels contain NaN or infinite values.")
        if not np.all(np.floor(y) == y):
            raise InvalidLabel("labels contain non-integral values.")

    if np.any(y < 0):
        raise InvalidLabel(f"labels must be non-negative class codes; found {int(np.min(y))}.")

    return y.astype(np.int64)


def check_dense_labels(y: np.ndarray) -> int:
    """Ensure labels cover ``0..C-1`` with no gaps; return C."""

    present = np.unique(y)
    n_classes = int(present.size)
    if n_classes and int(present[-1]) != n_classes - 1:
        missing = sorted(set(range(int(present[-1]) + 1)) - {int(v) for v in present})
        shown = ", ".join(str(m) for m in missing[:10])
        if len(missing) > 10:
            shown += ", ..."
        raise InvalidLabel(f"labels must be densely coded 0..C-1; missing class codes [{shown}].")
    return n_classes


def ensure_samples_labels(X, y, *, dense: bool = True) -> Tuple[np.ndarray, np.ndarray]:
    """Strict alignment check: no transposition, no truncation.

    - X must be 1D or 2D (n_samples[, n_features])
    - y must be 1D (n_samples,)
    - n_samples must match and be at least 1 (checked before labels are scanned)
    - labels must be non-negative integers, and dense when ``dense`` is set
    """

    X = coerce_samples(X)
    y = coerce_labels(y)

    if X.shape[0] != y.shape[0]:
        raise DimensionMismatch(
            f"samples and labels length mismatch: {X.shape[0]} vs {y.shape[0]}."
        )
    if X.shape[0] < 1:
        raise DimensionMismatch("at least one sample is required.")

    y = check_label_codes(y)
    if dense:
        check_dense_labels(y)

    return X, y

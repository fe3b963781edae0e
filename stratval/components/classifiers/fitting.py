from __future__ import annotations

from typing import Any
import numpy as np


def fit_model(model: Any, X_train: np.ndarray, y_train: np.ndarray) -> Any:
    """
    Fit an estimator exposing `fit(X, y)` on the gathered training rows.

    Parameters
    ----------
    model : Any
        Estimator exposing `fit(X, y)`.
    X_train : array-like of shape (n_samples, n_features)
    y_train : array-like of shape (n_samples,)

    Returns
    -------
    model : Any
        The same estimator, fitted in place.

    Raises
    ------
    AttributeError
        If `model` does not have a `fit` method.
    ValueError
        If input shapes are inconsistent.
    """
    if not hasattr(model, "fit"):
        raise AttributeError("`model` has no `.fit(...)` method.")

    X_train = np.asarray(X_train)
    y_train = np.asarray(y_train).ravel()

    if X_train.ndim != 2:
        raise ValueError(f"X_train must be 2D; got {X_train.shape}.")
    if X_train.shape[0] != y_train.shape[0]:
        raise ValueError(
            f"X_train and y_train length mismatch: {X_train.shape[0]} vs {y_train.shape[0]}."
        )

    model.fit(X_train, y_train)
    return model

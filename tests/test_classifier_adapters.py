"""Tests for the scikit-learn classifier adapter."""

import numpy as np
import pytest
from sklearn.linear_model import LogisticRegression
from sklearn.neighbors import KNeighborsClassifier

from stratval.components.classifiers.adapters import SklearnClassifier
from stratval.components.classifiers.fitting import fit_model


def test_predict_before_train() -> None:
    with pytest.raises(RuntimeError):
        SklearnClassifier(KNeighborsClassifier(n_neighbors=1)).predict(np.zeros(2))


def test_template_estimator_is_not_fitted() -> None:
    est = LogisticRegression()
    clf = SklearnClassifier(est)
    clf.train(np.array([[0.0], [1.0], [10.0], [11.0]]), np.array([0, 0, 1, 1]))

    assert not hasattr(est, "classes_")
    assert clf.predict(np.array([10.5])) == 1
    assert isinstance(clf.predict([0.5]), int)


def test_retrain_replaces_fitted_model() -> None:
    clf = SklearnClassifier(KNeighborsClassifier(n_neighbors=1))
    clf.train(np.array([[0.0], [1.0]]), np.array([0, 1]))
    first = clf.fitted_
    clf.train(np.array([[0.0], [1.0]]), np.array([1, 0]))

    assert clf.fitted_ is not first
    assert clf.predict([0.0]) == 1


def test_fit_model_rejects_objects_without_fit() -> None:
    with pytest.raises(AttributeError):
        fit_model(object(), np.zeros((2, 1)), np.zeros(2))


def test_fit_model_length_mismatch() -> None:
    with pytest.raises(ValueError, match="length mismatch"):
        fit_model(KNeighborsClassifier(n_neighbors=1), np.zeros((3, 1)), np.zeros(2))

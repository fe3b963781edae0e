"""Tests for the count / quota / partition phases."""

import math
from fractions import Fraction

import numpy as np
import pytest

from stratval.components.splitters.stratified_holdout import (
    class_quotas,
    count_classes,
    partition_indices,
    plan_holdout,
)
from stratval.core.errors import EmptyValidationSet, InvalidConfiguration


def test_count_classes_counts_each_label() -> None:
    assert count_classes(np.array([2, 0, 1, 0, 1, 1])) == {0: 2, 1: 3, 2: 1}


def test_class_quotas_floor_count_times_ratio() -> None:
    assert class_quotas({0: 10, 1: 3, 2: 1}, 0.66) == {0: 6, 1: 1, 2: 0}


@pytest.mark.parametrize(
    "train_frac, n, expected",
    [(0.57, 100, 57), (0.58, 100, 58), (0.29, 100, 29), (0.7, 10, 7), (0.1, 30, 3), (0.66, 3, 1)],
)
def test_quota_is_exact_for_decimal_ratios(train_frac: float, n: int, expected: int) -> None:
    assert class_quotas({0: n}, train_frac) == {0: expected}
    assert plan_holdout(np.zeros(n, dtype=int), train_frac).quotas == {0: expected}


def test_single_class_takes_first_rows_for_training() -> None:
    plan = plan_holdout(np.zeros(10, dtype=int), 0.66)

    assert plan.quotas == {0: 6}
    assert plan.idx_tr.tolist() == [0, 1, 2, 3, 4, 5]
    assert plan.idx_te.tolist() == [6, 7, 8, 9]


def test_two_classes_grouped_by_label() -> None:
    plan = plan_holdout(np.array([0, 0, 0, 1, 1, 1]), 0.67)

    assert plan.quotas == {0: 2, 1: 2}
    assert plan.idx_tr.tolist() == [0, 1, 3, 4]
    assert plan.idx_te.tolist() == [2, 5]


def test_quota_uses_floor_not_rounding() -> None:
    # 3 * 0.66 = 1.98 -> one training row per class
    plan = plan_holdout(np.array([0, 0, 0, 1, 1, 1]), 0.66)

    assert plan.quotas == {0: 1, 1: 1}
    assert plan.idx_tr.tolist() == [0, 3]
    assert plan.idx_te.tolist() == [1, 2, 4, 5]


def test_interleaved_labels_keep_input_order() -> None:
    y = np.array([1, 0, 1, 0, 1, 0, 1, 0])
    plan = plan_holdout(y, 0.5)

    assert plan.idx_tr.tolist() == [0, 1, 2, 3]
    assert plan.idx_te.tolist() == [4, 5, 6, 7]


def test_tiny_class_lands_entirely_in_validation() -> None:
    y = np.array([0, 0, 0, 0, 1])
    plan = plan_holdout(y, 0.5)

    assert plan.quotas == {0: 2, 1: 0}
    assert plan.zero_quota_classes == [1]
    assert 4 in plan.idx_te.tolist()
    assert 4 not in plan.idx_tr.tolist()


def test_full_ratio_leaves_no_validation() -> None:
    with pytest.raises(EmptyValidationSet):
        plan_holdout(np.array([0, 0, 1, 1]), 1.0)


def test_empty_validation_is_a_configuration_error() -> None:
    with pytest.raises(InvalidConfiguration):
        plan_holdout(np.array([0, 1, 2, 3]), 1.0)


def test_every_quota_zero_leaves_nothing_to_train() -> None:
    with pytest.raises(InvalidConfiguration, match="training"):
        plan_holdout(np.array([0, 1, 2]), 0.5)


def test_partition_ignores_quota_for_unseen_labels() -> None:
    idx_tr, idx_te = partition_indices(np.array([0, 0, 1]), {0: 1, 1: 0, 7: 3})

    assert idx_tr.tolist() == [0]
    assert idx_te.tolist() == [1, 2]


@pytest.mark.parametrize("train_frac", [0.1, 0.25, 0.29, 0.5, 0.57, 0.66, 0.9])
def test_partition_properties_on_random_labels(train_frac: float) -> None:
    rng = np.random.default_rng(7)
    y = rng.integers(0, 4, size=257)
    n = y.shape[0]

    plan = plan_holdout(y, train_frac)
    tr, te = plan.idx_tr, plan.idx_te

    # complete and disjoint
    assert set(tr.tolist()).isdisjoint(te.tolist())
    assert sorted(tr.tolist() + te.tolist()) == list(range(n))

    # increasing within each partition
    assert np.all(np.diff(tr) > 0)
    assert np.all(np.diff(te) > 0)

    # per-class quota is exact and uses the first occurrences
    for label in np.unique(y):
        rows = np.flatnonzero(y == label)
        quota = math.floor(rows.size * Fraction(str(train_frac)))
        assert plan.quotas[int(label)] == quota
        assert tr[y[tr] == label].tolist() == rows[:quota].tolist()


def test_plan_is_deterministic() -> None:
    y = np.random.default_rng(3).integers(0, 3, size=50)

    a = plan_holdout(y, 0.7)
    b = plan_holdout(y.copy(), 0.7)

    assert a.idx_tr.tolist() == b.idx_tr.tolist()
    assert a.idx_te.tolist() == b.idx_te.tolist()
    assert a.quotas == b.quotas

from __future__ import annotations

"""Deterministic stratified holdout partitioning.

The split is computed in three phases over the label vector:

1. count   -- occurrences per class label
2. quota   -- ``floor(count * train_frac)`` training slots per class
3. partition -- one pass in original order; a row goes to training while its
   class still has slots left, otherwise to validation

No shuffling happens anywhere: the first ``quota[c]`` rows of class ``c`` are
its training rows, so the same input order always yields the same split.
"""

import math
from collections import Counter
from fractions import Fraction
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np

from stratval.core.errors import EmptyValidationSet, InvalidConfiguration


def count_classes(y: np.ndarray) -> Dict[int, int]:
    """Map each label to its number of occurrences (sorted by label)."""
    counts = Counter(int(v) for v in np.asarray(y).ravel())
    return dict(sorted(counts.items()))


def class_quotas(counts: Dict[int, int], train_frac: float) -> Dict[int, int]:
    """Training slots per class: ``floor(count * train_frac)``.

    The product is taken on the decimal value of the ratio, so 100 * 0.57
    gives 57 rather than the 56 a binary float product floors to.
    """
    frac = Fraction(repr(float(train_frac)))
    return {label: math.floor(n * frac) for label, n in counts.items()}


def partition_indices(
    y: np.ndarray,
    quotas: Dict[int, int],
) -> Tuple[np.ndarray, np.ndarray]:
    """Greedy single-pass partition of row indices.

    Returns ``(idx_train, idx_validation)``, both increasing.
    """
    y = np.asarray(y).ravel()
    remaining = dict(quotas)
    idx_tr: List[int] = []
    idx_te: List[int] = []

    for i, label in enumerate(y.tolist()):
        if remaining.get(label, 0) > 0:
            idx_tr.append(i)
            remaining[label] -= 1
        else:
            idx_te.append(i)

    return np.asarray(idx_tr, dtype=int), np.asarray(idx_te, dtype=int)


@dataclass(frozen=True)
class HoldoutPlan:
    """Counts, quotas and the resulting partition for one label vector."""

    train_frac: float
    class_counts: Dict[int, int]
    quotas: Dict[int, int]
    idx_tr: np.ndarray
    idx_te: np.ndarray
    zero_quota_classes: List[int] = field(default_factory=list)

    @property
    def n_train(self) -> int:
        return int(self.idx_tr.shape[0])

    @property
    def n_validation(self) -> int:
        return int(self.idx_te.shape[0])


def plan_holdout(y: np.ndarray, train_frac: float) -> HoldoutPlan:
    """Run the count, quota and partition phases.

    Raises
    ------
    EmptyValidationSet
        If the quotas would consume every row. This is detected from the
        quota totals, before the partition pass runs.
    InvalidConfiguration
        If every class rounds down to a zero quota.
    """
    y = np.asarray(y).ravel()
    n = int(y.shape[0])

    counts = count_classes(y)
    quotas = class_quotas(counts, train_frac)

    n_train = sum(quotas.values())
    if n - n_train <= 0:
        raise EmptyValidationSet(
            f"train_frac={train_frac:g} assigns all {n} samples to training; "
            "no samples are left for validation."
        )
    if n_train == 0:
        raise InvalidConfiguration(
            f"train_frac={train_frac:g} leaves every class without training samples "
            f"(class counts {counts})."
        )

    idx_tr, idx_te = partition_indices(y, quotas)

    return HoldoutPlan(
        train_frac=float(train_frac),
        class_counts=counts,
        quotas=quotas,
        idx_tr=idx_tr,
        idx_te=idx_te,
        zero_quota_classes=[label for label, q in quotas.items() if q == 0],
    )

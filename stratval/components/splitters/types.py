from __future__ import annotations

"""Splitter return contracts.

Splitters yield a *single, stable* fold payload shape so evaluators never
have to guess tuple layouts.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Split:
    """A single train/validation split.

    Notes
    -----
    - `idx_tr` / `idx_te` are row indices into the *original* X/y, both in
      increasing order. Together they cover every row exactly once.
    - `Xtr`/`ytr` are gathered in `idx_tr` order (likewise for the test side).
    """

    Xtr: np.ndarray
    Xte: np.ndarray
    ytr: np.ndarray
    yte: np.ndarray
    idx_tr: np.ndarray
    idx_te: np.ndarray

    @property
    def n_train(self) -> int:
        return int(self.idx_tr.shape[0])

    @property
    def n_test(self) -> int:
        return int(self.idx_te.shape[0])

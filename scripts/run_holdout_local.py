# scripts/run_holdout_local.py
from __future__ import annotations

import logging

from sklearn.datasets import load_iris
from sklearn.linear_model import LogisticRegression

from stratval.api import HoldoutSplitConfig, SklearnClassifier, run_holdout_validation

# ==== EDIT THESE AS YOU LIKE ==================================================
SPLIT = HoldoutSplitConfig(
    train_frac=0.66,          # clamped to [0.1, 1.0]
    dense_labels=True,        # reject label sets with gaps in 0..C-1
    warn_on_zero_quota=True,  # warn when a class gets no training rows
)

MODEL = LogisticRegression(C=1.0, max_iter=1000)
# ============================================================================


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    X, y = load_iris(return_X_y=True)
    result = run_holdout_validation(SklearnClassifier(MODEL), X, y, split=SPLIT)

    print("\n=== HOLDOUT RESULT ===")
    print(f"Metric: {result.metric_name} = {result.metric_value:.4f}")
    print(f"Train / validation: {result.n_train} / {result.n_validation}")
    print(f"Class counts: {result.class_counts}")
    print(f"Quotas: {result.quotas}")
    for note in result.notes:
        print(f"Note: {note}")


if __name__ == "__main__":
    main()

from __future__ import annotations

"""Holdout validation use-cases.

These wrap config resolution + registry lookup around the evaluator so that
callers only deal with plain arrays, a classifier and (optionally) a config.
"""

import logging
from typing import Any, Mapping, Optional, Union

from stratval.components.interfaces import Classifier
from stratval.components.splitters.splitters import StratifiedHoldoutSplitter
from stratval.components.splitters.types import Split
from stratval.contracts.results.validation import HoldoutResult
from stratval.contracts.split_configs import HoldoutSplitConfig, make_split_config
from stratval.registries.validations import make_validation

logger = logging.getLogger(__name__)

SplitLike = Union[HoldoutSplitConfig, Mapping[str, Any], None]


def resolve_split_config(split: SplitLike = None, **overrides: Any) -> HoldoutSplitConfig:
    """Turn None / a mapping / a config into a :class:`HoldoutSplitConfig`.

    Keyword overrides that are None are ignored.
    """
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if isinstance(split, HoldoutSplitConfig):
        if not overrides:
            return split
        return make_split_config(**{**split.model_dump(), **overrides})
    return make_split_config(**{**dict(split or {}), **overrides})


def run_holdout_validation(
    classifier: Classifier,
    samples: Any,
    labels: Any,
    *,
    split: SplitLike = None,
) -> HoldoutResult:
    cfg = resolve_split_config(split)
    validation = make_validation(cfg)
    result = validation.evaluate(classifier, samples, labels)
    logger.info(
        "holdout validation (train_frac=%.2f): accuracy=%.4f on %d held-out samples (%d trained)",
        result.train_frac, result.metric_value, result.n_validation, result.n_train,
    )
    return result


def holdout_accuracy(
    classifier: Classifier,
    samples: Any,
    labels: Any,
    *,
    train_frac: Optional[float] = None,
) -> float:
    cfg = resolve_split_config(None, train_frac=train_frac)
    return make_validation(cfg).compute(classifier, samples, labels)


def stratified_holdout_split(
    samples: Any,
    labels: Any,
    *,
    train_frac: Optional[float] = None,
    split: SplitLike = None,
) -> Split:
    cfg = resolve_split_config(split, train_frac=train_frac)
    (out,) = StratifiedHoldoutSplitter(cfg=cfg).split(samples, labels)
    return out

"""Public stratval API.

This module is the **stable public surface**; prefer importing from here
instead of reaching into internal subpackages:

    from stratval.api import holdout_accuracy, SklearnClassifier

The underlying implementations live under :mod:`stratval.use_cases` and
:mod:`stratval.components`.
"""

from __future__ import annotations

from stratval.use_cases.holdout import (
    holdout_accuracy,
    run_holdout_validation,
    stratified_holdout_split,
)

from stratval.components.attributes import (
    Attribute,
    AttributeType,
    NominalAttribute,
    NumericAttribute,
)
from stratval.components.classifiers.adapters import SklearnClassifier
from stratval.components.evaluation.holdout import HoldoutValidation
from stratval.components.interfaces import Classifier, Splitter, Validation
from stratval.components.splitters.splitters import StratifiedHoldoutSplitter
from stratval.components.splitters.types import Split
from stratval.contracts.results.validation import HoldoutResult
from stratval.contracts.split_configs import HoldoutSplitConfig, make_split_config
from stratval.core.errors import (
    DimensionMismatch,
    EmptyValidationSet,
    HoldoutValidationError,
    InvalidConfiguration,
    InvalidLabel,
    ZeroQuotaWarning,
)
from stratval.registries import list_validation_modes, make_validation, register_validation

__all__ = [
    "holdout_accuracy",
    "run_holdout_validation",
    "stratified_holdout_split",
    "make_validation",
    "register_validation",
    "list_validation_modes",
    "HoldoutValidation",
    "StratifiedHoldoutSplitter",
    "Split",
    "HoldoutSplitConfig",
    "make_split_config",
    "HoldoutResult",
    "Classifier",
    "Splitter",
    "Validation",
    "SklearnClassifier",
    "Attribute",
    "AttributeType",
    "NominalAttribute",
    "NumericAttribute",
    "HoldoutValidationError",
    "InvalidConfiguration",
    "EmptyValidationSet",
    "InvalidLabel",
    "DimensionMismatch",
    "ZeroQuotaWarning",
]

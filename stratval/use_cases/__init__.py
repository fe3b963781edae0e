from .holdout import (
    holdout_accuracy,
    resolve_split_config,
    run_holdout_validation,
    stratified_holdout_split,
)

__all__ = [
    "holdout_accuracy",
    "resolve_split_config",
    "run_holdout_validation",
    "stratified_holdout_split",
]

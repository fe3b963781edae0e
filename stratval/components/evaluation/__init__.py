from .holdout import HoldoutValidation
from .scoring import accuracy, predict_each

__all__ = ["HoldoutValidation", "accuracy", "predict_each"]

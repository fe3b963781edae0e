from .common import ResultModel
from .validation import HoldoutResult

__all__ = ["ResultModel", "HoldoutResult"]

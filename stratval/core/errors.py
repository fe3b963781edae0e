"""Validation-specific exceptions.

These are intentionally lightweight so they can be raised from compute paths
and config contracts alike. All of them derive from :class:`ValueError` so
callers that only care about "bad input" can keep catching that.
"""


class HoldoutValidationError(ValueError):
    """Base class for input-validation failures of a holdout evaluation."""


class InvalidConfiguration(HoldoutValidationError):
    """Raised when a split configuration cannot be used (bad ratio, unknown mode)."""


class EmptyValidationSet(InvalidConfiguration):
    """Raised when the quotas leave no example for the validation partition."""


class InvalidLabel(HoldoutValidationError):
    """Raised when labels are not dense, non-negative integer class codes."""


class DimensionMismatch(HoldoutValidationError):
    """Raised when samples and labels disagree in length or shape."""


class ZeroQuotaWarning(UserWarning):
    """Emitted when a class receives no training examples at the current ratio."""

from __future__ import annotations

import math
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from stratval.core.errors import InvalidConfiguration

MIN_TRAIN_FRAC = 0.1
MAX_TRAIN_FRAC = 1.0
DEFAULT_TRAIN_FRAC = 0.66


def clamp_train_frac(value: Any) -> float:
    """Clamp a training fraction into ``[0.1, 1.0]``.

    Out-of-range numbers are clamped silently; only values that are not finite
    numbers are rejected.
    """
    if isinstance(value, bool):
        raise InvalidConfiguration(f"train_frac must be a number; got {value!r}.")
    try:
        frac = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfiguration(f"train_frac must be a number; got {value!r}.") from exc
    if not math.isfinite(frac):
        raise InvalidConfiguration(f"train_frac must be finite; got {value!r}.")
    return max(MIN_TRAIN_FRAC, min(MAX_TRAIN_FRAC, frac))


class HoldoutSplitConfig(BaseModel):
    """Immutable configuration of a stratified holdout split."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Literal["holdout"] = "holdout"
    train_frac: float = DEFAULT_TRAIN_FRAC
    # Reject label sets with gaps in 0..C-1 instead of counting them as-is.
    dense_labels: bool = True
    warn_on_zero_quota: bool = False

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidConfiguration(str(exc)) from exc

    @field_validator("train_frac", mode="before")
    @classmethod
    def _clamp(cls, v: Any) -> float:
        return clamp_train_frac(v)


def make_split_config(**kwargs: Any) -> HoldoutSplitConfig:
    """Build a :class:`HoldoutSplitConfig`; bad values raise InvalidConfiguration."""
    return HoldoutSplitConfig(**kwargs)

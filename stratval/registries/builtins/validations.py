"""Built-in validation registrations."""

from __future__ import annotations

from stratval.registries.validations import ValidationConfig, register_validation

from stratval.components.evaluation.holdout import HoldoutValidation


@register_validation("holdout")
def _holdout(cfg: ValidationConfig):
    return HoldoutValidation(cfg=cfg)

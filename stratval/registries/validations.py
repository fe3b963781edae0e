from __future__ import annotations

from typing import Callable

from stratval.components.interfaces import Validation
from stratval.contracts.split_configs import HoldoutSplitConfig
from stratval.core.errors import InvalidConfiguration
from stratval.registries.base import Registry

ValidationConfig = HoldoutSplitConfig

ValidationFactory = Callable[[ValidationConfig], Validation]

_VALIDATIONS: Registry[str, ValidationFactory] = Registry(_name="validations")

_BUILTINS_LOADED = False


def register_validation(mode: str) -> Callable[[ValidationFactory], ValidationFactory]:
    return _VALIDATIONS.register(mode.lower())


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    from stratval.registries.builtins import validations as _  # noqa: F401
    _BUILTINS_LOADED = True


def make_validation(cfg: ValidationConfig) -> Validation:
    _ensure_builtins()
    mode = getattr(cfg, "mode", "holdout")
    factory = _VALIDATIONS.try_get(str(mode).lower())
    if factory is None:
        raise InvalidConfiguration(f"Unknown validation mode: {mode!r}")
    return factory(cfg)


def list_validation_modes() -> list[str]:
    _ensure_builtins()
    return sorted(_VALIDATIONS.keys())

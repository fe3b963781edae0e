from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterable, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Registry(Generic[K, V]):
    """Named mapping from keys to factories.

    Typical usage:
        VALIDATIONS = Registry[str, Callable[..., Validation]](_name="validations")

        @VALIDATIONS.register("holdout")
        def _holdout(cfg):
            ...

    Registering the same key twice replaces the earlier value.
    """

    _items: Dict[K, V] = field(default_factory=dict)
    _name: str = "registry"

    def register(self, key: K) -> Callable[[V], V]:
        def deco(value: V) -> V:
            self._items[key] = value
            return value

        return deco

    def try_get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._items.get(key, default)

    def keys(self) -> Iterable[K]:
        return self._items.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._items

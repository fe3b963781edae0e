from __future__ import annotations

"""Named dataset attributes and their string <-> numeric encodings.

Nominal attributes turn categorical strings into integer codes ``0..K-1``,
which is the label form the holdout validation expects.
"""

import math
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np


class AttributeType(str, Enum):
    NUMERIC = "NUMERIC"
    NOMINAL = "NOMINAL"


class Attribute:
    """Base class for a named attribute/variable.

    `weight` defaults to 1.0; what it means is up to the consuming algorithm.
    """

    def __init__(
        self,
        type: AttributeType,
        name: str,
        description: Optional[str] = None,
        weight: float = 1.0,
    ):
        self.type = AttributeType(type)
        self.name = name
        self.description = description
        self.weight = float(weight)

    def to_string(self, x: float) -> Optional[str]:
        raise NotImplementedError

    def value_of(self, s: str) -> float:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        if self.name != other.name or self.type != other.type:
            return False
        # Attributes without a description never compare equal.
        return (
            self.description is not None
            and other.description is not None
            and self.description == other.description
        )

    def __hash__(self) -> int:
        return hash((self.type, self.name, self.description))

    def __str__(self) -> str:
        return f"{self.type.value}[{self.name}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, description={self.description!r}, weight={self.weight!r})"


class NumericAttribute(Attribute):
    def __init__(self, name: str, description: Optional[str] = None, weight: float = 1.0):
        super().__init__(AttributeType.NUMERIC, name, description, weight)

    def to_string(self, x: float) -> str:
        if math.isnan(x):
            return "NaN"
        return repr(float(x))

    def value_of(self, s: str) -> float:
        try:
            return float(s)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{self}: not a number: {s!r}") from exc


class NominalAttribute(Attribute):
    """Categorical attribute defined on a list of unordered string values.

    With no `values`, the vocabulary is open: unseen strings passed to
    :meth:`value_of` are appended and get the next code. With `values`, the
    vocabulary is closed and unseen strings raise ``ValueError``.
    """

    def __init__(
        self,
        name: str,
        values: Optional[Sequence[str]] = None,
        description: Optional[str] = None,
        weight: float = 1.0,
    ):
        super().__init__(AttributeType.NOMINAL, name, description, weight)
        self._values: List[str] = []
        self._codes: Dict[str, int] = {}
        self.is_open = values is None
        for v in values or ():
            if v in self._codes:
                raise ValueError(f"{self}: duplicate nominal value {v!r}")
            self._codes[v] = len(self._values)
            self._values.append(v)

    @property
    def size(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    @property
    def values(self) -> List[str]:
        return list(self._values)

    def value_of(self, s: str) -> float:
        code = self._codes.get(s)
        if code is None:
            if not self.is_open:
                raise ValueError(f"{self}: invalid string value {s!r}")
            code = len(self._values)
            self._codes[s] = code
            self._values.append(s)
        return float(code)

    def to_string(self, x: float) -> Optional[str]:
        x = float(x)
        if math.isnan(x):
            return None
        if math.floor(x) != x:
            raise ValueError(f"{self}: nominal value is not an integer: {x!r}")
        if x < 0 or x >= len(self._values):
            raise ValueError(f"{self}: invalid nominal value: {x!r}")
        return self._values[int(x)]

    def encode(self, items: Iterable[str]) -> np.ndarray:
        """Vectorised :meth:`value_of`; returns int64 codes."""
        return np.asarray([int(self.value_of(s)) for s in items], dtype=np.int64)

    def decode(self, codes: Iterable[float]) -> List[Optional[str]]:
        """Vectorised :meth:`to_string`."""
        return [self.to_string(c) for c in np.asarray(list(codes), dtype=float).ravel()]

"""Value types for DocTree Core."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union


@dataclass
class VNull:
    def __str__(self) -> str:
        return "null"


@dataclass
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass
class VNumber:
    value: float

    def __str__(self) -> str:
        v = self.value
        if math.isfinite(v) and v == int(v):
            return str(int(v))
        return str(v)


@dataclass
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class VList:
    items: list["Value"] = field(default_factory=list)


@dataclass
class VDict:
    entries: dict[str, "Value"] = field(default_factory=dict)


class _Missing:
    """Singleton for paths that do not resolve."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Missing"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "Missing"


Missing = _Missing()

Value = Union[VNull, VBool, VNumber, VText, VList, VDict]
Scalar = Union[VNull, VBool, VNumber, VText]


def type_name(value: Value) -> str:
    """Short lowercase name of a value's variant."""
    if isinstance(value, VNull):
        return "null"
    if isinstance(value, VBool):
        return "bool"
    if isinstance(value, VNumber):
        return "number"
    if isinstance(value, VText):
        return "string"
    if isinstance(value, VList):
        return "sequence"
    if isinstance(value, VDict):
        return "mapping"
    raise TypeError(f"not a tree value: {value!r}")

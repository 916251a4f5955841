"""Value types for Ember Core."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .nodes import Expr


INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def wrap_int(n: int) -> int:
    """Fold *n* into the signed 64-bit range (two's-complement wrap)."""
    return (n - INT_MIN) % 2**64 + INT_MIN


@dataclass
class VInt:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class VStr:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass
class VFunction:
    name: str
    params: list[str]
    body: "Expr"

    def __str__(self) -> str:
        return f"{self.name}({', '.join(self.params)})"


Element = Union[VInt, VStr]


@dataclass
class VArray:
    """Mutable sequence of Int/Str elements, shared by every holder."""

    items: list[Element] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


class _Nothing:
    """Singleton unit value."""

    _instance: "_Nothing | None" = None

    def __new__(cls) -> "_Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "None"


Nothing = _Nothing()

Value = Union[VInt, VStr, VBool, VFunction, VArray, _Nothing]


_KIND_NAMES = {
    VInt: "Int",
    VStr: "Str",
    VBool: "Bool",
    VFunction: "Function",
    VArray: "Array",
    _Nothing: "None",
}


def kind_name(value: Value) -> str:
    """Short variant name used in diagnostics (``Int``, ``Str``, ...)."""
    return _KIND_NAMES.get(type(value), type(value).__name__)


def is_element(value: Value) -> bool:
    return isinstance(value, (VInt, VStr))

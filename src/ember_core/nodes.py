"""Expression node set consumed by the evaluator.

Nodes are plain data built by an external front end. They carry no behaviour;
:mod:`ember_core.evaluator` interprets them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------

class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        return self.value


class Comparator(Enum):
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    EQ = "=="
    NE = "!="

    @property
    def symbol(self) -> str:
        return self.value


def _freeze(node: object, name: str) -> None:
    """Store the sequence field *name* as a tuple so built trees stay immutable."""
    object.__setattr__(node, name, tuple(getattr(node, name)))


# ---------------------------------------------------------------------------
# Literals and names
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NoneLiteral:
    pass


@dataclass(frozen=True, slots=True)
class IntLiteral:
    lexeme: str


@dataclass(frozen=True, slots=True)
class StringLiteral:
    lexeme: str


@dataclass(frozen=True, slots=True)
class Identifier:
    name: str


@dataclass(frozen=True, slots=True)
class Assignment:
    name: str
    value: Expr


@dataclass(frozen=True, slots=True)
class PlusPlus:
    """``++name``"""

    name: str


# ---------------------------------------------------------------------------
# Sequencing and output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Block:
    exprs: Sequence[Expr]

    def __post_init__(self) -> None:
        _freeze(self, "exprs")


@dataclass(frozen=True, slots=True)
class Print:
    value: Expr


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Concatenation:
    """``left ++ right``"""

    left: Expr
    right: Expr


@dataclass(frozen=True, slots=True)
class Multiply:
    """``left * right``: string repeat or integer product."""

    left: Expr
    right: Expr


@dataclass(frozen=True, slots=True)
class Arithmetic:
    op: Operator
    left: Expr
    right: Expr


@dataclass(frozen=True, slots=True)
class Compare:
    comparator: Comparator
    left: Expr
    right: Expr


# ---------------------------------------------------------------------------
# Control flow
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class IfElse:
    cond: Expr
    then: Expr
    otherwise: Expr


@dataclass(frozen=True, slots=True)
class While:
    cond: Expr
    body: Expr


@dataclass(frozen=True, slots=True)
class ForLoop:
    """``for variable in start..end`` (inclusive)."""

    variable: str
    start: int
    end: int
    body: Sequence[Expr]

    def __post_init__(self) -> None:
        _freeze(self, "body")


# ---------------------------------------------------------------------------
# Functions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Declare:
    name: str
    params: Sequence[str]
    body: Expr

    def __post_init__(self) -> None:
        _freeze(self, "params")


@dataclass(frozen=True, slots=True)
class Invoke:
    name: str
    args: Sequence[Expr]

    def __post_init__(self) -> None:
        _freeze(self, "args")


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ArrayLiteral:
    name: str
    elements: Sequence[Expr]

    def __post_init__(self) -> None:
        _freeze(self, "elements")


@dataclass(frozen=True, slots=True)
class ArrayAccess:
    name: str
    index: int


@dataclass(frozen=True, slots=True)
class ArrayReassign:
    name: str
    index: int
    value: Expr


Expr = Union[
    NoneLiteral,
    IntLiteral,
    StringLiteral,
    Identifier,
    Assignment,
    PlusPlus,
    Block,
    Print,
    Concatenation,
    Multiply,
    Arithmetic,
    Compare,
    IfElse,
    While,
    ForLoop,
    Declare,
    Invoke,
    ArrayLiteral,
    ArrayAccess,
    ArrayReassign,
]

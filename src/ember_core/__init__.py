"""Ember Core: tree-walking evaluation engine for Ember expression trees."""

from .config import EvalConfig
from .document import Document, run
from .environment import Environment
from .errors import (
    ArityMismatch,
    ArrayNotFound,
    DivisionByZero,
    EmberCoreError,
    EvaluationError,
    IndexOutOfBounds,
    MalformedLiteral,
    NotAFunction,
    TypeMismatch,
    UndefinedFunction,
    UndefinedIdentifier,
    UnsupportedElementType,
)
from .evaluator import evaluate
from .values import (
    Element,
    Nothing,
    Value,
    VArray,
    VBool,
    VFunction,
    VInt,
    VStr,
)

__all__ = [
    "evaluate",
    "run",
    "Document",
    "Environment",
    "EvalConfig",
    "Element",
    "Nothing",
    "Value",
    "VArray",
    "VBool",
    "VFunction",
    "VInt",
    "VStr",
    "EmberCoreError",
    "EvaluationError",
    "UndefinedIdentifier",
    "UndefinedFunction",
    "NotAFunction",
    "ArityMismatch",
    "TypeMismatch",
    "DivisionByZero",
    "IndexOutOfBounds",
    "ArrayNotFound",
    "UnsupportedElementType",
    "MalformedLiteral",
]

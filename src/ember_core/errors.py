"""Error taxonomy for Ember Core evaluation.

Every error propagates out of :func:`ember_core.evaluate` unchanged; the
language has no construct that catches them.
"""

from __future__ import annotations


class EmberCoreError(Exception):
    """Base exception for everything raised by ember_core."""


class EvaluationError(EmberCoreError):
    """A runtime failure raised while evaluating an expression tree."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class UndefinedIdentifier(EvaluationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"identifier '{name}' is not defined")


class UndefinedFunction(EvaluationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"function '{name}' does not exist")


class NotAFunction(EvaluationError):
    def __init__(self, name: str, actual: str) -> None:
        self.name = name
        self.actual = actual
        super().__init__(f"'{name}' is not a function (got {actual})")


class ArityMismatch(EvaluationError):
    def __init__(self, name: str, expected: int, given: int) -> None:
        self.name = name
        self.expected = expected
        self.given = given
        super().__init__(
            f"'{name}' expects {expected} arguments, but {given} given"
        )


class TypeMismatch(EvaluationError):
    """An operator received an operand of the wrong variant."""

    def __init__(self, operator: str, expected: str, actual: str) -> None:
        self.operator = operator
        self.expected = expected
        self.actual = actual
        super().__init__(f"'{operator}' expects {expected}, got {actual}")


class DivisionByZero(EvaluationError):
    def __init__(self) -> None:
        super().__init__("cannot divide by zero")


class IndexOutOfBounds(EvaluationError):
    def __init__(self, name: str, index: int, length: int) -> None:
        self.name = name
        self.index = index
        self.length = length
        super().__init__(
            f"index {index} out of bounds for '{name}' of length {length}"
        )


class ArrayNotFound(EvaluationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"array '{name}' not found")


class UnsupportedElementType(EvaluationError):
    def __init__(self, actual: str) -> None:
        self.actual = actual
        super().__init__(f"arrays hold Int or Str elements, got {actual}")


class MalformedLiteral(EvaluationError):
    def __init__(self, lexeme: str, expected: str) -> None:
        self.lexeme = lexeme
        self.expected = expected
        super().__init__(f"cannot read {lexeme!r} as {expected}")

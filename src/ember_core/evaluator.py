"""Evaluator: recursive tree-walking interpretation of an expression tree."""

from __future__ import annotations

import logging
import operator
import re
from typing import Callable

from .config import EvalConfig
from .environment import Environment
from .errors import (
    ArityMismatch,
    ArrayNotFound,
    DivisionByZero,
    EmberCoreError,
    IndexOutOfBounds,
    MalformedLiteral,
    NotAFunction,
    TypeMismatch,
    UndefinedFunction,
    UnsupportedElementType,
)
from .nodes import (
    Arithmetic,
    ArrayAccess,
    ArrayLiteral,
    ArrayReassign,
    Assignment,
    Block,
    Compare,
    Comparator,
    Concatenation,
    Declare,
    Expr,
    ForLoop,
    Identifier,
    IfElse,
    IntLiteral,
    Invoke,
    Multiply,
    NoneLiteral,
    Operator,
    PlusPlus,
    Print,
    StringLiteral,
    While,
)
from .values import (
    INT_MAX,
    INT_MIN,
    Element,
    Nothing,
    Value,
    VArray,
    VBool,
    VFunction,
    VInt,
    VStr,
    is_element,
    kind_name,
    wrap_int,
)

logger = logging.getLogger(__name__)

_INT_LEXEME = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate(
    node: Expr, env: Environment, config: EvalConfig | None = None
) -> Value:
    """Evaluate *node* against *env* and return the resulting Value.

    *env* is mutated by assignments, declarations and array writes. Any
    :class:`~ember_core.errors.EvaluationError` raised below propagates
    unchanged and aborts the whole evaluation.
    """
    return _eval(node, env, config or EvalConfig())


def _eval(node: Expr, env: Environment, cfg: EvalConfig) -> Value:
    handler = _HANDLERS.get(type(node))
    if handler is None:
        raise EmberCoreError(f"cannot evaluate {type(node).__name__}")
    return handler(node, env, cfg)


# ---------------------------------------------------------------------------
# Operand checks
# ---------------------------------------------------------------------------

def _expect_int(value: Value, op: str) -> int:
    if not isinstance(value, VInt):
        raise TypeMismatch(op, "Int", kind_name(value))
    return value.value


def _expect_bool(value: Value, op: str) -> bool:
    if not isinstance(value, VBool):
        raise TypeMismatch(op, "Bool", kind_name(value))
    return value.value


def _expect_element(value: Value) -> Element:
    if not is_element(value):
        raise UnsupportedElementType(kind_name(value))
    return value


# ---------------------------------------------------------------------------
# Literals and names
# ---------------------------------------------------------------------------

def _eval_none_literal(node: NoneLiteral, env: Environment, cfg: EvalConfig) -> Value:
    return Nothing


def _eval_int_literal(node: IntLiteral, env: Environment, cfg: EvalConfig) -> Value:
    if not _INT_LEXEME.fullmatch(node.lexeme):
        raise MalformedLiteral(node.lexeme, "Int")
    try:
        n = int(node.lexeme)
    except ValueError:
        # Lexemes beyond the interpreter's digit limit.
        raise MalformedLiteral(node.lexeme, "Int") from None
    if not INT_MIN <= n <= INT_MAX:
        raise MalformedLiteral(node.lexeme, "Int")
    return VInt(n)


def _eval_string_literal(node: StringLiteral, env: Environment, cfg: EvalConfig) -> Value:
    return VStr(node.lexeme)


def _eval_identifier(node: Identifier, env: Environment, cfg: EvalConfig) -> Value:
    return env.lookup(node.name)


def _eval_assignment(node: Assignment, env: Environment, cfg: EvalConfig) -> Value:
    value = _eval(node.value, env, cfg)
    env.define(node.name, value)
    return value


def _eval_plus_plus(node: PlusPlus, env: Environment, cfg: EvalConfig) -> Value:
    current = _expect_int(env.lookup(node.name), "++")
    value = VInt(wrap_int(current + 1))
    env.define(node.name, value)
    return value


# ---------------------------------------------------------------------------
# Sequencing and output
# ---------------------------------------------------------------------------

def _eval_block(node: Block, env: Environment, cfg: EvalConfig) -> Value:
    result: Value = Nothing
    for expr in node.exprs:
        result = _eval(expr, env, cfg)
    return result


def _eval_print(node: Print, env: Environment, cfg: EvalConfig) -> Value:
    value = _eval(node.value, env, cfg)
    print(str(value), file=cfg.stream)
    return value


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------

def _eval_concatenation(node: Concatenation, env: Environment, cfg: EvalConfig) -> Value:
    left = _eval(node.left, env, cfg)
    right = _eval(node.right, env, cfg)
    for operand in (left, right):
        if not isinstance(operand, VStr):
            raise TypeMismatch("++", "Str", kind_name(operand))
    return VStr(left.value + right.value)


def _eval_multiply(node: Multiply, env: Environment, cfg: EvalConfig) -> Value:
    left = _eval(node.left, env, cfg)
    right = _eval(node.right, env, cfg)
    if isinstance(left, VStr) and isinstance(right, VInt):
        # A non-positive count yields the empty string.
        return VStr(left.value * right.value)
    if isinstance(left, VInt) and isinstance(right, VInt):
        return VInt(wrap_int(left.value * right.value))
    raise TypeMismatch(
        "*", "(Str, Int) or (Int, Int)", f"({kind_name(left)}, {kind_name(right)})"
    )


def _divide(x: int, y: int) -> int:
    """Integer division truncating toward zero."""
    if y == 0:
        raise DivisionByZero()
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


_ARITHMETIC: dict[Operator, Callable[[int, int], int]] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: _divide,
}


def _eval_arithmetic(node: Arithmetic, env: Environment, cfg: EvalConfig) -> Value:
    x = _expect_int(_eval(node.left, env, cfg), node.op.symbol)
    y = _expect_int(_eval(node.right, env, cfg), node.op.symbol)
    return VInt(wrap_int(_ARITHMETIC[node.op](x, y)))


_COMPARISONS: dict[Comparator, Callable[[int, int], bool]] = {
    Comparator.LT: operator.lt,
    Comparator.LE: operator.le,
    Comparator.GT: operator.gt,
    Comparator.GE: operator.ge,
    Comparator.EQ: operator.eq,
    Comparator.NE: operator.ne,
}


def _eval_compare(node: Compare, env: Environment, cfg: EvalConfig) -> Value:
    x = _expect_int(_eval(node.left, env, cfg), node.comparator.symbol)
    y = _expect_int(_eval(node.right, env, cfg), node.comparator.symbol)
    return VBool(_COMPARISONS[node.comparator](x, y))


# ---------------------------------------------------------------------------
# Control flow
# ---------------------------------------------------------------------------

def _eval_if_else(node: IfElse, env: Environment, cfg: EvalConfig) -> Value:
    if _expect_bool(_eval(node.cond, env, cfg), "if"):
        return _eval(node.then, env, cfg)
    return _eval(node.otherwise, env, cfg)


def _eval_while(node: While, env: Environment, cfg: EvalConfig) -> Value:
    """Run the body while the condition holds, at most ``cfg.max_iterations`` times.

    When the condition is still true after the last permitted pass, the
    environment is dumped to the output stream and the loop yields Nothing.
    """
    result: Value = Nothing
    passes = 0
    while _expect_bool(_eval(node.cond, env, cfg), "while"):
        if passes == cfg.max_iterations:
            logger.warning(
                f"while loop aborted after {passes} iterations; "
                f"bindings: {sorted(env)}"
            )
            print("MAX_ITER reached", file=cfg.stream)
            print(env.dump(), file=cfg.stream)
            return Nothing
        result = _eval(node.body, env, cfg)
        passes += 1
    logger.debug(f"while loop finished after {passes} iterations")
    return result


def _eval_for_loop(node: ForLoop, env: Environment, cfg: EvalConfig) -> Value:
    """Iterate ``start..end`` inclusive, then sum every Int bound in *env*.

    The result covers the whole scope, not just values produced by the loop.
    """
    logger.debug(f"for {node.variable} in {node.start}..{node.end}")
    for i in range(node.start, node.end + 1):
        env.define(node.variable, VInt(i))
        for expr in node.body:
            _eval(expr, env, cfg)
    total = sum(v.value for _, v in env.items() if isinstance(v, VInt))
    return VInt(wrap_int(total))


# ---------------------------------------------------------------------------
# Functions
# ---------------------------------------------------------------------------

def _eval_declare(node: Declare, env: Environment, cfg: EvalConfig) -> Value:
    env.define(node.name, VFunction(node.name, list(node.params), node.body))
    return Nothing


def _eval_invoke(node: Invoke, env: Environment, cfg: EvalConfig) -> Value:
    func = env.get(node.name)
    if func is None:
        raise UndefinedFunction(node.name)
    if not isinstance(func, VFunction):
        raise NotAFunction(node.name, kind_name(func))
    if len(node.args) != len(func.params):
        raise ArityMismatch(node.name, len(func.params), len(node.args))

    args = [_eval(arg, env, cfg) for arg in node.args]
    logger.debug(f"Invoking {func} with arguments {[str(a) for a in args]}")

    # The body sees its parameters and nothing else.
    scope = env.child_scope(dict(zip(func.params, args)))
    return _eval(func.body, scope, cfg)


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------

def _bound_array(env: Environment, name: str, index: int) -> VArray:
    array = env.get(name)
    if not isinstance(array, VArray):
        raise ArrayNotFound(name)
    if not 0 <= index < len(array):
        raise IndexOutOfBounds(name, index, len(array))
    return array


def _eval_array_literal(node: ArrayLiteral, env: Environment, cfg: EvalConfig) -> Value:
    items = [_expect_element(_eval(expr, env, cfg)) for expr in node.elements]
    env.define(node.name, VArray(items))
    # The result is a separate array holding the same elements.
    return VArray(list(items))


def _eval_array_access(node: ArrayAccess, env: Environment, cfg: EvalConfig) -> Value:
    element = _bound_array(env, node.name, node.index).items[node.index]
    return type(element)(element.value)


def _eval_array_reassign(node: ArrayReassign, env: Environment, cfg: EvalConfig) -> Value:
    array = _bound_array(env, node.name, node.index)
    value = _expect_element(_eval(node.value, env, cfg))
    array.items[node.index] = value
    return value


_HANDLERS: dict[type, Callable[..., Value]] = {
    NoneLiteral: _eval_none_literal,
    IntLiteral: _eval_int_literal,
    StringLiteral: _eval_string_literal,
    Identifier: _eval_identifier,
    Assignment: _eval_assignment,
    PlusPlus: _eval_plus_plus,
    Block: _eval_block,
    Print: _eval_print,
    Concatenation: _eval_concatenation,
    Multiply: _eval_multiply,
    Arithmetic: _eval_arithmetic,
    Compare: _eval_compare,
    IfElse: _eval_if_else,
    While: _eval_while,
    ForLoop: _eval_for_loop,
    Declare: _eval_declare,
    Invoke: _eval_invoke,
    ArrayLiteral: _eval_array_literal,
    ArrayAccess: _eval_array_access,
    ArrayReassign: _eval_array_reassign,
}

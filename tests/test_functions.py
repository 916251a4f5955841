"""Tests for function declaration and invocation."""

import io

import pytest

from ember_core import (
    ArityMismatch,
    Environment,
    EvalConfig,
    NotAFunction,
    Nothing,
    UndefinedFunction,
    UndefinedIdentifier,
    VFunction,
    VInt,
    VStr,
    evaluate,
)
from ember_core.nodes import (
    Arithmetic,
    Assignment,
    Block,
    Declare,
    Identifier,
    IntLiteral,
    Invoke,
    Operator,
    Print,
    StringLiteral,
)


def _declare_add(env: Environment) -> None:
    evaluate(
        Declare("add", ["a", "b"], Arithmetic(Operator.ADD, Identifier("a"), Identifier("b"))),
        env,
    )


class TestDeclare:
    def test_returns_nothing_and_binds(self):
        env = Environment()
        body = IntLiteral("1")
        assert evaluate(Declare("f", ["x"], body), env) is Nothing
        f = env.lookup("f")
        assert isinstance(f, VFunction)
        assert f.name == "f"
        assert f.params == ["x"]
        assert f.body is body

    def test_identifier_yields_function_value(self):
        env = Environment()
        evaluate(Declare("g", ["p", "q"], IntLiteral("0")), env)
        assert str(evaluate(Identifier("g"), env)) == "g(p, q)"


class TestInvoke:
    def test_returns_body_value(self):
        env = Environment()
        _declare_add(env)
        result = evaluate(Invoke("add", [IntLiteral("2"), IntLiteral("40")]), env)
        assert result == VInt(42)

    def test_zero_arity(self):
        env = Environment()
        evaluate(Declare("hello", [], StringLiteral("hi")), env)
        assert evaluate(Invoke("hello", []), env) == VStr("hi")

    def test_arguments_evaluated_in_caller_scope(self):
        env = Environment()
        env.define("n", VInt(5))
        _declare_add(env)
        result = evaluate(Invoke("add", [Identifier("n"), Identifier("n")]), env)
        assert result == VInt(10)

    def test_arguments_evaluated_left_to_right(self):
        out = io.StringIO()
        env = Environment()
        _declare_add(env)
        evaluate(
            Invoke("add", [Print(IntLiteral("1")), Print(IntLiteral("2"))]),
            env,
            EvalConfig(out=out),
        )
        assert out.getvalue() == "1\n2\n"

    def test_body_assignments_stay_local(self):
        env = Environment()
        evaluate(
            Declare("f", ["x"], Block([Assignment("tmp", Identifier("x")), Identifier("tmp")])),
            env,
        )
        assert evaluate(Invoke("f", [IntLiteral("3")]), env) == VInt(3)
        assert "tmp" not in env
        assert "x" not in env

    def test_parameters_shadow_nothing_in_caller(self):
        env = Environment()
        env.define("x", VInt(99))
        evaluate(Declare("f", ["x"], Assignment("x", IntLiteral("0"))), env)
        evaluate(Invoke("f", [IntLiteral("1")]), env)
        assert env.lookup("x") == VInt(99)


class TestInvokeErrors:
    def test_undefined_function(self):
        with pytest.raises(UndefinedFunction) as excinfo:
            evaluate(Invoke("nope", []), Environment())
        assert excinfo.value.name == "nope"

    def test_not_a_function(self):
        env = Environment()
        env.define("x", VInt(1))
        with pytest.raises(NotAFunction) as excinfo:
            evaluate(Invoke("x", []), env)
        assert excinfo.value.actual == "Int"

    @pytest.mark.parametrize("count", [0, 1, 3, 5])
    def test_arity_mismatch(self, count):
        env = Environment()
        _declare_add(env)
        args = [IntLiteral(str(i)) for i in range(count)]
        with pytest.raises(ArityMismatch) as excinfo:
            evaluate(Invoke("add", args), env)
        assert excinfo.value.expected == 2
        assert excinfo.value.given == count

    def test_arity_checked_before_arguments_run(self):
        out = io.StringIO()
        env = Environment()
        _declare_add(env)
        with pytest.raises(ArityMismatch):
            evaluate(Invoke("add", [Print(IntLiteral("1"))]), env, EvalConfig(out=out))
        assert out.getvalue() == ""


class TestIsolatedScope:
    """Function bodies see their parameters only."""

    def test_globals_invisible(self):
        env = Environment()
        env.define("g", VInt(1))
        evaluate(Declare("f", [], Identifier("g")), env)
        with pytest.raises(UndefinedIdentifier):
            evaluate(Invoke("f", []), env)

    def test_recursion_unsupported(self):
        env = Environment()
        evaluate(Declare("loop", ["n"], Invoke("loop", [Identifier("n")])), env)
        with pytest.raises(UndefinedFunction):
            evaluate(Invoke("loop", [IntLiteral("1")]), env)

    def test_function_passed_as_argument_is_callable(self):
        env = Environment()
        evaluate(Declare("one", [], IntLiteral("1")), env)
        evaluate(Declare("call", ["one"], Invoke("one", [])), env)
        assert evaluate(Invoke("call", [Identifier("one")]), env) == VInt(1)

"""Tests for ember_core.values."""

from ember_core.nodes import IntLiteral
from ember_core.values import (
    INT_MAX,
    INT_MIN,
    Nothing,
    VArray,
    VBool,
    VFunction,
    VInt,
    VStr,
    _Nothing,
    is_element,
    kind_name,
    wrap_int,
)


class TestDisplay:
    def test_nothing(self):
        assert str(Nothing) == "None"

    def test_int(self):
        assert str(VInt(42)) == "42"
        assert str(VInt(-7)) == "-7"

    def test_str_is_raw(self):
        assert str(VStr("hello world")) == "hello world"

    def test_bool(self):
        assert str(VBool(True)) == "true"
        assert str(VBool(False)) == "false"

    def test_function(self):
        f = VFunction("add", ["a", "b"], IntLiteral("0"))
        assert str(f) == "add(a, b)"

    def test_function_without_params(self):
        assert str(VFunction("f", [], IntLiteral("0"))) == "f()"

    def test_array(self):
        assert str(VArray([VInt(1), VStr("x"), VInt(3)])) == "[1, x, 3]"

    def test_empty_array(self):
        assert str(VArray()) == "[]"


class TestNothing:
    def test_singleton(self):
        assert _Nothing() is Nothing

    def test_falsy(self):
        assert not Nothing


class TestKinds:
    def test_kind_names(self):
        assert kind_name(VInt(1)) == "Int"
        assert kind_name(VStr("")) == "Str"
        assert kind_name(VBool(True)) == "Bool"
        assert kind_name(Nothing) == "None"
        assert kind_name(VArray()) == "Array"
        assert kind_name(VFunction("f", [], IntLiteral("0"))) == "Function"

    def test_is_element(self):
        assert is_element(VInt(1))
        assert is_element(VStr("a"))
        assert not is_element(VBool(True))
        assert not is_element(Nothing)
        assert not is_element(VArray())


class TestWrapInt:
    def test_in_range_unchanged(self):
        assert wrap_int(0) == 0
        assert wrap_int(-5) == -5
        assert wrap_int(INT_MAX) == INT_MAX
        assert wrap_int(INT_MIN) == INT_MIN

    def test_overflow_wraps(self):
        assert wrap_int(INT_MAX + 1) == INT_MIN
        assert wrap_int(INT_MIN - 1) == INT_MAX

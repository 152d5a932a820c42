import pytest
from hypothesis import given, strategies as st

from schemer.printer import to_string
from schemer.reader.parser import parse
from schemer.types import Builtin, Closure, Environment, Symbol, Unspecified


@pytest.mark.parametrize(
    "value,expected",
    [
        (3, "3"),
        (-3, "-3"),
        (2.5, "2.5"),
        (3.0, "3.0"),
        (Symbol("abc"), "abc"),
        (True, "#t"),
        (False, "#f"),
        ([], "()"),
        ([1, [2.5, Symbol("x")], []], "(1 (2.5 x) ())"),
        (Unspecified, "#<unspecified>"),
    ]
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_round_trip():
    assert to_string(parse("(a (b c) d)")) == "(a (b c) d)"
    assert to_string(parse("(  a(b   c)d )")) == "(a (b c) d)"


def test_procedures_render_as_placeholders():
    closure = Closure([Symbol("x"), Symbol("y")], Symbol("x"), Environment())
    builtin = Builtin("car", lambda xs: xs[0], 1)
    assert to_string(closure) == "#<closure (x y)>"
    assert to_string(builtin) == "#<builtin car>"
    assert to_string([closure]) == "(#<closure (x y)>)"


@pytest.mark.parametrize(
    "value,expected",
    [
        (1e16, "1.0e+16"),
        (-2e-07, "-2.0e-07"),
        (1.5e300, "1.5e+300"),
        (float("inf"), "+inf.0"),
        (float("-inf"), "-inf.0"),
        (float("nan"), "+nan.0"),
    ]
)
def test_float_always_has_decimal_point(value, expected):
    assert to_string(value) == expected


def test_large_float_result_prints_with_point(interp):
    assert interp.run("(* 1.0 10000000000000000)") == "1.0e+16"


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_printed_floats_read_back_as_floats(f):
    text = to_string(f)
    assert "." in text
    result = parse(text)
    assert isinstance(result, float)
    assert result == f

import pytest
from hypothesis import given, strategies as st

from schemer.errors import SchemerSyntaxError
from schemer.printer import to_string
from schemer.reader.parser import (
    TokenStream,
    atom,
    parse,
    parse_float,
    parse_integer,
    tokenize,
)
from schemer.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", ["(", "+", "1", "2", ")"]),
        ("a", ["a"]),
        ("((a)(b))", ["(", "(", "a", ")", "(", "b", ")", ")"]),
        ("  (set!   x\n\t6) ", ["(", "set!", "x", "6", ")"]),
        ("", []),
        ("   ", []),
    ]
)
def test_tokenize(source, expected):
    assert tokenize(source) == expected


@pytest.mark.parametrize(
    "token,expected",
    [
        ("42", 42),
        ("-7", -7),
        ("+3", 3),
        ("0", 0),
        ("3.14", 3.14),
        ("-2.5", -2.5),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
        (".5", 0.5),
        ("1.", 1.0),
    ]
)
def test_atom_numbers(token, expected):
    result = atom(token)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "token",
    ["abc", "ABC", "set!", "+", "-", "null?", "1+", "inf", "nan", "1_000", "0x1A", "e5", "1.2.3",
     "\u0661\u0662", "\u0663.\u0665", "\uff11"],
)
def test_atom_symbols(token):
    result = atom(token)
    assert isinstance(result, Symbol)
    assert str(result) == token


def test_atom_parsers_report_failure_without_raising():
    assert parse_integer("1.5") is None
    assert parse_integer("abc") is None
    assert parse_float("12") is None
    assert parse_float("infinity") is None
    assert parse_integer("\u0661\u0662") is None
    assert parse_float("\u0661.\u0662") is None


@pytest.mark.parametrize(
    "source,expected",
    [
        ("x", Symbol("x")),
        ("12", 12),
        ("()", []),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("(a (b) ())", [Symbol("a"), [Symbol("b")], []]),
        ("(+ 1 2.5)", [Symbol("+"), 1, 2.5]),
        ("((a b) (c d))", [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]),
    ]
)
def test_parse(source, expected):
    assert parse(source) == expected


@pytest.mark.parametrize(
    "source,message",
    [
        ("(+ 1 2", "unexpected EOF while reading"),
        ("((a)", "unexpected EOF while reading"),
        ("", "unexpected EOF while reading"),
        (")", "unexpected ')'"),
        ("(a))", "unexpected ')'"),
    ]
)
def test_parse_errors(source, message):
    with pytest.raises(SchemerSyntaxError) as exc:
        parse(source)
    assert str(exc.value) == message


def test_parse_rejects_trailing_forms():
    with pytest.raises(SchemerSyntaxError):
        parse("(a) (b)")


def test_token_stream_shares_cursor():
    stream = TokenStream(tokenize("(a (b)) c"))
    assert stream.read_from() == [Symbol("a"), [Symbol("b")]]
    assert stream.read_from() == Symbol("c")
    assert stream.at_end()
    with pytest.raises(SchemerSyntaxError):
        stream.read_from()


def test_symbols_preserve_case():
    assert parse("Foo") == Symbol("Foo")
    assert parse("Foo") != Symbol("foo")


# -----------------------------------------------------
# Property tests
# -----------------------------------------------------

symbol_strat = st.from_regex(r"[a-z][a-z0-9!?*<>=-]{0,8}", fullmatch=True)
sexpr_strat = st.recursive(
    st.one_of(symbol_strat, st.integers(-10**6, 10**6).map(str)),
    lambda children: st.lists(children, max_size=4).map(lambda xs: "(" + " ".join(xs) + ")"),
    max_leaves=20,
)


@given(st.integers())
def test_integer_tokens_classify_as_int(i):
    assert atom(str(i)) == i


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_float_repr_classifies_as_float(f):
    result = atom(repr(f))
    assert isinstance(result, float)
    assert result == f


@given(symbol_strat)
def test_symbol_tokens_classify_as_symbols(name):
    assert atom(name) == Symbol(name)


@given(sexpr_strat)
def test_printed_parse_is_canonical(source):
    assert to_string(parse(source)) == source

"""
  Lisp Reader: tokenizer, atom classifier and recursive-descent parser.

- Parens are standalone tokens; everything else is split on whitespace.
- Emits Python primitives instead of Cons cells:

    - lists   -> Python list
    - symbols -> Symbol (case preserved)
    - numbers -> int/float

One call to `parse` reads exactly one top-level form.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, Optional

from schemer import SExpression
from schemer.errors import SchemerSyntaxError
from schemer.types.symbol import Symbol

LPAREN = "("
RPAREN = ")"

INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
FLOAT_RE = re.compile(
    r"[+-]?(?:\d+\.\d*|\.\d+)(?:[eE][+-]?\d+)?"  # decimal point, optional exponent
    r"|[+-]?\d+[eE][+-]?\d+",  # exponent only
    re.ASCII,
)


def tokenize(source: str) -> list[str]:
    """Pad parens with whitespace, then split on whitespace."""
    return source.replace(LPAREN, " ( ").replace(RPAREN, " ) ").split()


# -------------------------------
# Atom classification
# -------------------------------
def parse_integer(token: str) -> Optional[int]:
    """Base-10 integer with optional sign, or None."""
    if INT_RE.fullmatch(token):
        return int(token)
    return None


def parse_float(token: str) -> Optional[float]:
    """Float literal with a decimal point and/or exponent, or None."""
    if FLOAT_RE.fullmatch(token):
        return float(token)
    return None


# Tried in order; the first non-None result wins.
ATOM_PARSERS: tuple[Callable[[str], Optional[SExpression]], ...] = (
    parse_integer,
    parse_float,
)


def atom(token: str) -> SExpression:
    """Numbers become numbers; every other token is a symbol."""
    for attempt in ATOM_PARSERS:
        value = attempt(token)
        if value is not None:
            return value
    return Symbol(token)


# -------------------------------
# Parser
# -------------------------------
class TokenStream:
    """A cursor over a token sequence shared by recursive `read_from` calls."""

    def __init__(self, tokens: Iterable[str]):
        self.tokens: list[str] = list(tokens)
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> str:
        token = self.peek()
        if token is None:
            raise SchemerSyntaxError("unexpected EOF while reading")
        self.pos += 1
        return token

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def read_from(self) -> SExpression:
        """Read one expression, consuming its tokens."""
        token = self.advance()
        if token == LPAREN:
            items: list[SExpression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise SchemerSyntaxError("unexpected EOF while reading")
                if nxt == RPAREN:
                    self.advance()
                    return items
                items.append(self.read_from())
        if token == RPAREN:
            raise SchemerSyntaxError("unexpected ')'")
        return atom(token)


def parse(source: str) -> SExpression:
    """Read a single Scheme expression from a string."""
    stream = TokenStream(tokenize(source))
    expr = stream.read_from()
    if stream.peek() == RPAREN:
        raise SchemerSyntaxError("unexpected ')'")
    if not stream.at_end():
        raise SchemerSyntaxError(
            f"unexpected trailing tokens: {' '.join(stream.tokens[stream.pos:])}"
        )
    return expr

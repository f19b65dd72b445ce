"""
  Lisp Reader: token list -> expression tree.

Emits Python primitives instead of Cons cells:

    - nil      -> Nil
    - t        -> T
    - lists    -> Python list
    - integers -> int    ([+-]?digits)
    - floats   -> float  (signed decimal-point numeral, optional exponent)
    - anything else -> Symbol

Classification is purely lexical, so no token is ever a parse error.
Unbalanced input is not rejected: a list left open at end of input is closed,
and a stray ")" at the top level is skipped.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from lisparse import SExpression
from lisparse.reader.lexer import tokenize, LPAREN, RPAREN
from lisparse.types.nil import Nil, T
from lisparse.types.symbol import Symbol

logger = logging.getLogger(__name__)

INTEGER_RE = re.compile(r"^[+-]?\d+$")
FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.\d*|\.\d+)(?:[eE][+-]?\d+)?$")

LITERALS = {"nil": Nil, "t": T}


def parse_atom(token: str) -> SExpression:
    """Classify a single non-bracket token."""
    if token in LITERALS:
        return LITERALS[token]
    if INTEGER_RE.match(token):
        return int(token)
    if FLOAT_RE.match(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, tokens: list[str], start_index: int = 0):
        self.tokens = tokens
        self.pos = start_index

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> str | None:
        if self.at_end():
            return None
        return self.tokens[self.pos]

    def advance(self) -> str | None:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def _parse_list(self) -> list[SExpression]:
        # the "(" has already been consumed
        items: list[SExpression] = []
        while True:
            tok = self.advance()
            if tok is None:
                logger.debug("Unclosed list at end of input, closing it")
                return items
            if tok == RPAREN:
                return items
            if tok == LPAREN:
                items.append(self._parse_list())
            else:
                items.append(parse_atom(tok))

    def parse_expr(self) -> SExpression | None:
        """Read one top-level expression; None once the tokens run out."""
        while self.peek() == RPAREN:
            logger.debug("Skipping unmatched ')' at token %d", self.pos)
            self.advance()
        tok = self.advance()
        if tok is None:
            return None
        if tok == LPAREN:
            return self._parse_list()
        return parse_atom(tok)

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def read(tokens: list[str], start_index: int = 0) -> tuple[SExpression | None, int]:
    """Parse one expression from `tokens` starting at `start_index`.

    Returns the expression (None if nothing is left) and the index just past
    what was consumed.
    """
    stream = TokenStream(tokens, start_index)
    expr = stream.parse_expr()
    return expr, stream.pos


def read_str(source: str) -> list[SExpression]:
    """Tokenize `source` and read every top-level expression in it."""
    return list(TokenStream(tokenize(source)).parse_all())

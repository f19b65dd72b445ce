"""
  Lexer: source text -> flat list of token strings.

- Brackets are padded with whitespace so splitting never merges them.
- Quote shorthand is rewritten before the Reader runs:

    'x        -> ( quote x )
    '(a b)    -> ( quote ( a b ) )

  The closing paren of a quoted list is emitted twice, tracked with an
  explicit bracket stack.
- `nil` and `t` pass through untouched; the Reader recognizes them.
- Balance is not validated here.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

LPAREN = "("
RPAREN = ")"
QUOTE_CHAR = "'"
QUOTE = "quote"

# "'(" stays one token so the quote can be attached to its list.
_OPEN_RE = re.compile(r"('*\()")
_CLOSE_RE = re.compile(r"\)")


def _pad_brackets(source: str) -> str:
    padded = _OPEN_RE.sub(r" \1 ", source.strip())
    return _CLOSE_RE.sub(" ) ", padded)


def tokenize(source: str) -> list[str]:
    """Split `source` into tokens, expanding quote shorthand."""
    tokens: list[str] = []
    # one entry per open list: how many extra ")" its close must emit
    pending: list[int] = []

    for raw in _pad_brackets(source).split():
        if raw == RPAREN:
            extra = pending.pop() if pending else 0
            tokens.extend([RPAREN] * (1 + extra))
            continue

        rest = raw.lstrip(QUOTE_CHAR)
        quotes = len(raw) - len(rest)

        if rest == LPAREN:
            tokens.extend([LPAREN, QUOTE] * quotes)
            tokens.append(LPAREN)
            pending.append(quotes)
        elif quotes and rest:
            tokens.extend([LPAREN, QUOTE] * quotes)
            tokens.append(rest)
            tokens.extend([RPAREN] * quotes)
        else:
            # plain atoms, and a lone "'" kept as a symbol
            tokens.append(raw)

    logger.debug("Expanded command: %s", " ".join(tokens))
    return tokens

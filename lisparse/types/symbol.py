from __future__ import annotations
import sys


class Symbol:
    """An identifier: a variable name, a special-form keyword or quoted data.

    Names are interned, so two Symbols with the same name compare equal and
    hash alike.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(("symbol", self.id))

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id

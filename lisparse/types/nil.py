"""The two Boolean singletons.

`Nil` is boolean false and the empty list at the same time; `T` is the
canonical true value. Every value other than `Nil` (or an empty list) is
truthy.
"""
from __future__ import annotations


class NilType:
    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash("nil")


class TrueType:
    __slots__ = ()

    def __repr__(self): return "t"
    def __bool__(self): return True

    def __eq__(self, other):
        return isinstance(other, TrueType)

    def __hash__(self):
        return hash("t")


Nil = NilType()
T = TrueType()


def is_nil(value) -> bool:
    """True for Nil and for the empty list."""
    return value is Nil or (isinstance(value, list) and not value)


def truthy(value) -> bool:
    return not is_nil(value)


def boolean(flag: bool):
    """Convert a host bool into T or Nil."""
    return T if flag else Nil

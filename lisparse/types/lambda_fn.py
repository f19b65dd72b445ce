"""Closure representation and argument binding for lisparse."""

from __future__ import annotations

from io import StringIO

from lisparse import SExpression, LispValue
from lisparse.types.environment import Environment
from lisparse.types.symbol import Symbol
from lisparse.errors import LispArityError


class Lambda:
    """A first-class closure: formal parameters, body forms and captured env."""

    __slots__ = ("formals", "body", "env")

    def __init__(
        self, formals: list[Symbol], body: list[SExpression], env: Environment | None = None
    ):
        self.formals: list[Symbol] = formals
        self.body: list[SExpression] = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the argument values to the formal parameters in a fresh child
        of the captured environment and return it.
        """
        if len(args) != self.arity:
            raise LispArityError(
                f"{self} expects {self.arity} argument(s), got {len(args)}"
            )
        frame = self.env.new_child()
        # The frame starts empty, so define cannot collide.
        for name, value in zip(self.formals, args):
            frame.define(name, value)
        return frame

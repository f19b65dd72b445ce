"""Runtime environment for lisparse.

The Environment stores bindings of Symbols to evaluated Lisp values and
supports nested scopes via an `outer` link. Closures keep a reference to the
frame they were created in, so a frame lives for as long as the root, a
running call, or any closure still refers to it.
"""

from __future__ import annotations

from typing import Optional

from lisparse import LispValue
from lisparse.errors import (
    LispInvalidSymbol,
    LispRedefinitionError,
    LispUnboundAssignment,
    LispUnboundSymbol,
)
from lisparse.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def new_child(self) -> Environment:
        """Return an empty frame whose parent is this one."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only.

        Raises LispInvalidSymbol if `name` is not a Symbol and
        LispRedefinitionError if this frame already binds it; the existing
        binding is left untouched. Rebinding goes through `set`.
        """
        if not isinstance(name, Symbol):
            raise LispInvalidSymbol(f"Cannot define {name} as a symbol")
        if name in self.vars:
            raise LispRedefinitionError(
                f"Symbol {name} is already defined in this scope, use set! to rebind it"
            )
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        for env in self.frames():
            if symbol in env.vars:
                return env
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Mutate the binding of `name` in the nearest frame that holds it."""
        if not isinstance(name, Symbol):
            raise LispInvalidSymbol(f"Cannot set {name}, it is not a symbol")
        env = self.find(name)
        if env is None:
            raise LispUnboundAssignment(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Return the innermost binding of `name`."""
        env = self.find(name)
        if env is None:
            raise LispUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame.

        Used to install builtins; replaces existing bindings.
        """
        for k, v in mapping.items():
            if not isinstance(k, Symbol):
                raise LispInvalidSymbol(f"Cannot define {k} as a symbol")
            self.vars[k] = v

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def frames(self):
        """Yield this frame, then each enclosing frame out to the root."""
        env = self
        while env is not None:
            yield env
            env = env.outer

    def _frame_text(self) -> str:
        return "{" + ", ".join(f"{k}: {v!r}" for k, v in self.vars.items()) + "}"

    def __str__(self) -> str:
        """Single-frame view, with an indicator when there is a parent."""
        return self._frame_text() + (" -> ..." if self.outer is not None else "")

    def __repr__(self) -> str:
        return "<Environment chain: " + " -> ".join(f._frame_text() for f in self.frames()) + ">"

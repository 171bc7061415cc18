"""Runtime environment for Lispy.

A single flat table binding symbol names to values. There are no nested
scopes: the interpreter creates one Environment at startup, builtins are
registered into it, and only `def` mutates it afterwards.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator

from lispy.types.value import Error, ErrorKind, Value


class Environment:
    """Ordered mapping from symbol names to owned values."""

    __slots__ = ("vars",)

    def __init__(self):
        # dict keeps insertion order, so rebinding keeps a name's position
        self.vars: dict[str, Value] = {}

    def lookup(self, name: str) -> Value:
        """Return a copy of the value bound to `name`, or an unbound-symbol Error."""
        value = self.vars.get(name)
        if value is None:
            return Error(ErrorKind.UNBOUND_SYMBOL, detail=name)
        return value.copy()

    def bind(self, name: str, value: Value) -> None:
        """Bind `name` to a copy of `value`, replacing any previous binding."""
        self.vars[name] = value.copy()

    def names(self) -> list[str]:
        return list(self.vars)

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for k, v in self.vars.items():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{k}: {v}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings>"

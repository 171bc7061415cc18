"""Builtin protocol and argument checks shared by every native operation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from lispy.errors import LispyArityError, LispyBuiltinError, LispyEmptyListError, LispyTypeError
from lispy.types.environment import Environment
from lispy.types.value import ListValue, SExpr, Value

logger = logging.getLogger(__name__)


class Builtin(ABC):
    """A native function callable from Lispy code.

    `invoke` owns the argument bundle for the duration of the call: whatever
    `apply` does not move into its result is released before returning, on
    success and on every error path. Checks inside `apply` raise
    LispyBuiltinError subclasses, which `invoke` turns into Error values, so
    the evaluator only ever sees values.
    """

    name: str = "<anonymous>"

    def invoke(self, env: Environment, args: SExpr) -> Value:
        try:
            return self.apply(env, args)
        except LispyBuiltinError as e:
            logger.debug("builtin %r failed: %s", self.name, e)
            return e.to_value()
        finally:
            args.clear()

    @abstractmethod
    def apply(self, env: Environment, args: SExpr) -> Value:
        ...

    def __repr__(self):
        return f"<builtin {self.name}>"


# -------------------------------
# Argument checks
# -------------------------------
def check_count(name: str, args: SExpr, expected: int) -> None:
    if len(args) != expected:
        raise LispyArityError(name, len(args), expected)


def check_at_least(name: str, args: SExpr, minimum: int) -> None:
    if len(args) < minimum:
        raise LispyArityError(name, len(args), f"at least {minimum}")


def check_type(name: str, args: SExpr, i: int, *types: type[Value], detail: str | None = None) -> None:
    cell = args[i]
    if not isinstance(cell, types):
        expected = " or ".join(t.type_name() for t in types)
        raise LispyTypeError(name, i, cell.type_name(), expected, detail)


def check_not_empty(name: str, args: SExpr, i: int) -> None:
    cell = args[i]
    if isinstance(cell, ListValue) and len(cell) == 0:
        raise LispyEmptyListError(name)

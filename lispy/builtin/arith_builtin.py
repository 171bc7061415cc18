"""Arithmetic builtins.

Every operator is a left fold over Number arguments. Results wrap to signed
64 bits like a C `long`. Integer division truncates toward zero and the
remainder takes the sign of the dividend.
"""

from __future__ import annotations

import operator
from typing import Callable

from lispy.builtin.base import Builtin, check_at_least, check_type
from lispy.errors import LispyDivisionByZero
from lispy.types.environment import Environment
from lispy.types.value import I64_MIN, Number, SExpr, Value

NON_NUMBER = "Cannot operate on a non-number!"

_U64 = 2**64


def wrap64(x: int) -> int:
    """Reduce `x` to signed 64-bit two's complement."""
    return (x - I64_MIN) % _U64 + I64_MIN


def truncdiv(x: int, y: int) -> int:
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def truncmod(x: int, y: int) -> int:
    return x - y * truncdiv(x, y)


def ipow(x: int, y: int) -> int:
    """Integer power; a negative exponent keeps only the integer part."""
    if y >= 0:
        return pow(x, y, _U64)
    if x == 0:
        raise ZeroDivisionError("0 cannot be raised to a negative power")
    if x == 1:
        return 1
    if x == -1:
        return -1 if y % 2 else 1
    return 0


OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": truncdiv,
    "%": truncmod,
    "exp": ipow,
    "min": min,
    "max": max,
}

# Word aliases registered next to the symbolic names
ALIASES: dict[str, str] = {
    "add": "+",
    "sub": "-",
    "mul": "*",
    "div": "/",
    "mod": "%",
}


class ArithmeticBuiltin(Builtin):
    def __init__(self, name: str, op: str | None = None):
        self.name = name
        self.op = op or ALIASES.get(name, name)
        self.fn = OPERATORS[self.op]

    def apply(self, env: Environment, args: SExpr) -> Value:
        check_at_least(self.name, args, 1)
        for i in range(len(args)):
            check_type(self.name, args, i, Number, detail=NON_NUMBER)

        x = args.pop(0)
        if self.op == "-" and len(args) == 0:
            return Number(wrap64(-x.value))

        while len(args):
            y = args.pop(0)
            try:
                x = Number(wrap64(self.fn(x.value, y.value)))
            except ZeroDivisionError:
                # remaining operands are released by invoke
                raise LispyDivisionByZero(self.name) from None
        return x

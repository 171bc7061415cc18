"""Core evaluator for the Lispy interpreter.

`evaluate` consumes the value it is given and returns a new one. S-Expressions
are reduced by evaluating every child left to right and then applying the
leading Function to the rest. Recursion follows the Python call stack, so very
deeply nested input ends in RecursionError; the host loop reports that.
"""

from __future__ import annotations

from lispy.types.environment import Environment
from lispy.types.value import Error, ErrorKind, Function, SExpr, Symbol, Value


def evaluate(env: Environment, value: Value) -> Value:
    match value:
        case Symbol(name):
            return env.lookup(name)
        case SExpr():
            return reduce_sexpr(env, value)
    # --- Everything else evaluates to itself ---
    return value


def reduce_sexpr(env: Environment, v: SExpr) -> Value:
    v.cells = [evaluate(env, cell) for cell in v.cells]

    for i, cell in enumerate(v.cells):
        if isinstance(cell, Error):
            return v.take(i)

    if len(v) == 0:
        return v
    if len(v) == 1:
        return v.take(0)

    f = v.pop(0)
    if not isinstance(f, Function):
        v.clear()
        return Error(ErrorKind.NOT_A_FUNCTION, actual=f.type_name())
    # v is now the argument bundle and belongs to the builtin
    return f.builtin.invoke(env, v)

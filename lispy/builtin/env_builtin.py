"""Environment builtins and the builtin registry.

`def` is the only builtin that mutates the environment. `BUILTINS` is the
name table used both to register Function values at startup and to dispatch
a builtin by name.
"""

from __future__ import annotations

from lispy.builtin.arith_builtin import ALIASES, OPERATORS, ArithmeticBuiltin
from lispy.builtin.base import Builtin, check_at_least, check_type
from lispy.builtin.list_builtin import (
    ConsBuiltin,
    EvalBuiltin,
    HeadBuiltin,
    InitBuiltin,
    JoinBuiltin,
    LenBuiltin,
    ListBuiltin,
    TailBuiltin,
)
from lispy.errors import LispyArityError, LispyTypeError, LispyUnknownFunction
from lispy.types.environment import Environment
from lispy.types.value import Function, QExpr, SExpr, Symbol, Value


class DefBuiltin(Builtin):
    """(def {a b} 1 2) binds a to 1 and b to 2 in the global environment."""

    name = "def"

    def apply(self, env: Environment, args: SExpr) -> Value:
        check_at_least(self.name, args, 1)
        check_type(self.name, args, 0, QExpr)

        names = args[0]
        for cell in names:
            if not isinstance(cell, Symbol):
                raise LispyTypeError(
                    self.name, 0, cell.type_name(), Symbol.type_name(),
                    "Cannot define non-symbol!",
                )
        if len(names) != len(args) - 1:
            raise LispyArityError(
                self.name, len(args) - 1, len(names),
                "Cannot define incorrect number of values to symbols!",
            )

        # nothing is bound until every check has passed
        for sym, value in zip(names, args.cells[1:]):
            env.bind(sym.name, value)
        return SExpr()


def _make_table() -> dict[str, Builtin]:
    table: dict[str, Builtin] = {}
    for cls in (
        ListBuiltin,
        HeadBuiltin,
        TailBuiltin,
        EvalBuiltin,
        JoinBuiltin,
        ConsBuiltin,
        LenBuiltin,
        InitBuiltin,
        DefBuiltin,
    ):
        table[cls.name] = cls()
    for name in (*OPERATORS, *ALIASES):
        table[name] = ArithmeticBuiltin(name)
    return table


BUILTINS: dict[str, Builtin] = _make_table()


def call_builtin(env: Environment, name: str, args: SExpr) -> Value:
    """Invoke the builtin registered under `name`, consuming `args`."""
    builtin = BUILTINS.get(name)
    if builtin is None:
        args.clear()
        return LispyUnknownFunction(name).to_value()
    return builtin.invoke(env, args)


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    for name, builtin in BUILTINS.items():
        env.bind(name, Function(builtin))

"""List builtins: list, head, tail, eval, join, cons, len, init."""

from __future__ import annotations

from lispy.builtin.base import Builtin, check_at_least, check_count, check_not_empty, check_type
from lispy.evaluation.evaluator import evaluate
from lispy.types.environment import Environment
from lispy.types.value import Number, QExpr, SExpr, Value


class ListBuiltin(Builtin):
    """(list a b ...) => {a b ...}"""

    name = "list"

    def apply(self, env: Environment, args: SExpr) -> Value:
        # Move the cells over instead of copying them
        q = QExpr(args.cells)
        args.cells = []
        return q


class HeadBuiltin(Builtin):
    """(head {a b ...}) => {a}"""

    name = "head"

    def apply(self, env: Environment, args: SExpr) -> Value:
        check_count(self.name, args, 1)
        check_type(self.name, args, 0, QExpr)
        check_not_empty(self.name, args, 0)
        v = args.take(0)
        del v.cells[1:]
        return v


class TailBuiltin(Builtin):
    """(tail {a b ...}) => {b ...}"""

    name = "tail"

    def apply(self, env: Environment, args: SExpr) -> Value:
        check_count(self.name, args, 1)
        check_type(self.name, args, 0, QExpr)
        check_not_empty(self.name, args, 0)
        v = args.take(0)
        v.pop(0)
        return v


class EvalBuiltin(Builtin):
    name = "eval"

    def apply(self, env: Environment, args: SExpr) -> Value:
        check_count(self.name, args, 1)
        check_type(self.name, args, 0, QExpr)
        q = args.take(0)
        return evaluate(env, SExpr(q.cells))


class JoinBuiltin(Builtin):
    """(join {a} {b c} ...) => {a b c ...}"""

    name = "join"

    def apply(self, env: Environment, args: SExpr) -> Value:
        check_at_least(self.name, args, 1)
        for i in range(len(args)):
            check_type(self.name, args, i, QExpr)
        x = args.pop(0)
        while len(args):
            y = args.pop(0)
            x.cells.extend(y.cells)
        return x


class ConsBuiltin(Builtin):
    """(cons x {a b}) => {x a b}; x is a Number or a Q-Expression."""

    name = "cons"

    def apply(self, env: Environment, args: SExpr) -> Value:
        check_count(self.name, args, 2)
        check_type(self.name, args, 0, QExpr, Number)
        check_type(self.name, args, 1, QExpr)
        head = args.pop(0)
        tail = args.pop(0)
        tail.cells.insert(0, head)
        return tail


class LenBuiltin(Builtin):
    name = "len"

    def apply(self, env: Environment, args: SExpr) -> Value:
        check_count(self.name, args, 1)
        check_type(self.name, args, 0, QExpr)
        return Number(len(args[0]))


class InitBuiltin(Builtin):
    """(init {a b c}) => {a b}"""

    name = "init"

    def apply(self, env: Environment, args: SExpr) -> Value:
        check_count(self.name, args, 1)
        check_type(self.name, args, 0, QExpr)
        check_not_empty(self.name, args, 0)
        v = args.take(0)
        v.pop(-1)
        return v

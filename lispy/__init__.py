# Lispy: a small interpreter for a Lisp with S-Expressions and Q-Expressions.
#
# Data flow: text -> parse tree (lispy.reader.parser) -> Value tree
# (lispy.reader.reader) -> evaluate (lispy.evaluation) -> text (lispy.printer).
# Errors produced while evaluating are Error values, never exceptions.

from lispy.types import (
    Value,
    Number,
    Error,
    ErrorKind,
    Symbol,
    Function,
    SExpr,
    QExpr,
    Environment,
)
from lispy.interpreter import Interpreter

__all__ = [
    "Value",
    "Number",
    "Error",
    "ErrorKind",
    "Symbol",
    "Function",
    "SExpr",
    "QExpr",
    "Environment",
    "Interpreter",
]

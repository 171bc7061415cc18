from lispy.types.value import (
    Value,
    Number,
    Error,
    ErrorKind,
    Symbol,
    Function,
    ListValue,
    SExpr,
    QExpr,
    sexpr,
    qexpr,
)
from lispy.types.environment import Environment

__all__ = [
    "Value",
    "Number",
    "Error",
    "ErrorKind",
    "Symbol",
    "Function",
    "ListValue",
    "SExpr",
    "QExpr",
    "sexpr",
    "qexpr",
    "Environment",
]

# Printer for Lispy values.

from __future__ import annotations

import sys
from typing import TextIO

from lispy.types.value import Error, Function, Number, QExpr, SExpr, Symbol, Value


def to_string(value: Value) -> str:
    match value:
        case Number(n):
            return str(n)
        case Error():
            return f"Error: {value.message}"
        case Symbol(name):
            return name
        case Function():
            return "<function>"
        case SExpr(cells):
            return "(" + " ".join(to_string(cell) for cell in cells) + ")"
        case QExpr(cells):
            return "{" + " ".join(to_string(cell) for cell in cells) + "}"
    raise TypeError(f"Cannot print {type(value).__name__}")


def println(value: Value, file: TextIO | None = None) -> None:
    out = file if file is not None else sys.stdout
    out.write(to_string(value))
    out.write("\n")

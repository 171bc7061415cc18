"""Reader: converts a parse tree into a Value tree."""

from __future__ import annotations

from lispy.reader.parser import AstNode, ROOT_TAG, REGEX_TAG
from lispy.types.value import (
    I64_MIN,
    I64_MAX,
    Error,
    ErrorKind,
    ListValue,
    Number,
    QExpr,
    SExpr,
    Symbol,
    Value,
)

BRACKETS = frozenset("(){}")


def read_number(node: AstNode) -> Value:
    try:
        x = int(node.contents, 10)
    except ValueError:
        return Error(ErrorKind.INVALID_NUMBER)
    if not I64_MIN <= x <= I64_MAX:
        return Error(ErrorKind.INVALID_NUMBER)
    return Number(x)


def read(node: AstNode) -> Value:
    if "number" in node.tag:
        return read_number(node)
    if "symbol" in node.tag:
        return Symbol(node.contents)

    x: ListValue
    if node.tag == ROOT_TAG or "sexpr" in node.tag:
        x = SExpr()
    elif "qexpr" in node.tag:
        x = QExpr()
    else:
        # Not produced by the grammar; read as () rather than fail
        return SExpr()

    for child in node.children:
        if child.contents in BRACKETS or child.tag == REGEX_TAG:
            continue
        x.add(read(child))
    return x

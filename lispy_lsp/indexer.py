from __future__ import annotations

"""
Lightweight indexer for Lispy source files without evaluating code.

We scan the token stream for definitions made with `def {name ...} ...`, keep
a running balance of () and {} brackets, and run the real parser once to
report the first syntax error. Only enough structure is extracted to power
LSP features (document symbols, hover, completion, diagnostics).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import re

from lispy.builtin.arith_builtin import ALIASES
from lispy.errors import LispySyntaxError
from lispy.reader.parser import parse

# Simple token pattern for scanning
TOKEN_REGEX = re.compile(r"\s+|[(){}]|[^\s(){}]+")


@dataclass
class SymbolDef:
    name: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    paren_balance: int = 0
    brace_balance: int = 0
    syntax_error: Optional[LispySyntaxError] = None


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        tok = m.group(0)
        if not tok or tok.isspace():
            continue
        yield tok, m.start(), m.end()


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))

    i = 0
    while i < len(tokens):
        tok, start, end = tokens[i]
        if tok == '(':
            idx.paren_balance += 1
        elif tok == ')':
            idx.paren_balance -= 1
        elif tok == '{':
            idx.brace_balance += 1
        elif tok == '}':
            idx.brace_balance -= 1
        elif tok == 'def' and i + 1 < len(tokens) and tokens[i + 1][0] == '{':
            # (def {a b} ...) : every symbol up to the closing brace is defined
            j = i + 2
            while j < len(tokens):
                t, s, e = tokens[j]
                if t in ('(', ')', '{', '}'):
                    break
                line, col = _position_from_offset(text, s)
                idx.symbols[t] = SymbolDef(name=t, line=line, col=col)
                j += 1
        i += 1

    try:
        parse(text, "<document>")
    except LispySyntaxError as e:
        idx.syntax_error = e

    return idx


# Builtin signatures for quick hover/completion without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "list": "(list x ...) -> {x ...}",
    "head": "(head {x ...}) -> {x}",
    "tail": "(tail {x y ...}) -> {y ...}",
    "eval": "(eval {f x ...}) -> (f x ...)",
    "join": "(join {x ...} {y ...} ...) -> {x ... y ...}",
    "cons": "(cons x {y ...}) -> {x y ...}",
    "len": "(len {x ...}) -> n",
    "init": "(init {x ... z}) -> {x ...}",
    "def": "(def {name ...} value ...) -> ()",
    "+": "(+ n ...)",
    "-": "(- n ...)",
    "*": "(* n ...)",
    "/": "(/ n d ...)",
    "%": "(% n d ...)",
    "exp": "(exp n e ...)",
    "min": "(min n ...)",
    "max": "(max n ...)",
}
BUILTIN_SIGNATURES.update(
    {alias: BUILTIN_SIGNATURES[op].replace(op, alias, 1) for alias, op in ALIASES.items()}
)


def builtin_completions(prefix: str = "") -> List[str]:
    return sorted(name for name in BUILTIN_SIGNATURES if name.startswith(prefix))

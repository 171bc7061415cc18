"""
  Lispy Parser

Turns source text into a generic, tagged parse tree. The tree mirrors the
output of a parser-combinator grammar:

    number : /-?[0-9]+/ ;
    symbol : /[a-zA-Z0-9_+\\-*\\/\\\\=<>!&%]+/ ;
    sexpr  : '(' <expr>* ')' ;
    qexpr  : '{' <expr>* '}' ;
    expr   : <number> | <symbol> | <sexpr> | <qexpr> ;
    lispy  : /^/ <expr>* /$/ ;

- the root node is tagged ">"
- leaves are tagged "expr|number|regex" / "expr|symbol|regex"
- lists are tagged "expr|sexpr|>" / "expr|qexpr|>"
- brackets are kept as "char" leaves and the /^/ and /$/ anchors as empty
  "regex" leaves; the reader skips both.

No values are built here; see lispy.reader.reader for that step.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator

from lispy.errors import LispySyntaxError


NUMBER_RE = re.compile(r"-?[0-9]+")
SYMBOL_RE = re.compile(r"[a-zA-Z0-9_+\-*/\\=<>!&%]+")
WHITESPACE_RE = re.compile(r"\s*")

ROOT_TAG = ">"
REGEX_TAG = "regex"
CHAR_TAG = "char"
NUMBER_TAG = "expr|number|regex"
SYMBOL_TAG = "expr|symbol|regex"
SEXPR_TAG = "expr|sexpr|>"
QEXPR_TAG = "expr|qexpr|>"

CLOSERS: dict[str, str] = {"(": ")", "{": "}"}
LIST_TAGS: dict[str, str] = {"(": SEXPR_TAG, "{": QEXPR_TAG}


@dataclass
class AstNode:
    tag: str
    contents: str = ""
    children: list[AstNode] = field(default_factory=list)
    line: int = 1
    column: int = 1

    def walk(self) -> Iterator[AstNode]:
        yield self
        for child in self.children:
            yield from child.walk()

    def __repr__(self):
        if self.children:
            return f"AstNode({self.tag!r}, {self.children!r})"
        return f"AstNode({self.tag!r}, {self.contents!r})"


class Parser:
    def __init__(self, source: str, filename: str = "<stdin>"):
        self.source = source
        self.filename = filename
        self.pos = 0

    def position(self, offset: int | None = None) -> tuple[int, int]:
        """Return the 1-based (line, column) of `offset`."""
        if offset is None:
            offset = self.pos
        line = self.source.count("\n", 0, offset) + 1
        last_nl = self.source.rfind("\n", 0, offset)
        return line, offset - last_nl

    def error(self, message: str) -> LispySyntaxError:
        line, col = self.position()
        return LispySyntaxError(message, self.filename, line, col)

    def node(self, tag: str, contents: str = "", start: int | None = None) -> AstNode:
        line, col = self.position(start)
        return AstNode(tag, contents, [], line, col)

    def skip_whitespace(self) -> None:
        self.pos = WHITESPACE_RE.match(self.source, self.pos).end()

    def eof(self) -> bool:
        return self.pos >= len(self.source)

    def peek(self) -> str:
        return self.source[self.pos]

    def parse(self) -> AstNode:
        root = self.node(ROOT_TAG, start=0)
        root.children.append(self.node(REGEX_TAG, start=0))
        while True:
            self.skip_whitespace()
            if self.eof():
                break
            root.children.append(self.parse_expr())
        root.children.append(self.node(REGEX_TAG))
        return root

    def parse_expr(self) -> AstNode:
        ch = self.peek()
        if ch in CLOSERS:
            return self.parse_list(ch)
        if ch in CLOSERS.values():
            raise self.error(f"Unexpected '{ch}'")
        start = self.pos
        # number is tried first, so '-5' is a number and '-' a symbol
        m = NUMBER_RE.match(self.source, self.pos)
        if m:
            self.pos = m.end()
            return self.node(NUMBER_TAG, m.group(0), start)
        m = SYMBOL_RE.match(self.source, self.pos)
        if m:
            self.pos = m.end()
            return self.node(SYMBOL_TAG, m.group(0), start)
        raise self.error(f"Unexpected character {ch!r}, expected number, symbol, '(' or '{{'")

    def parse_list(self, opener: str) -> AstNode:
        closer = CLOSERS[opener]
        lst = self.node(LIST_TAGS[opener])
        lst.children.append(self.node(CHAR_TAG, opener))
        self.pos += 1
        while True:
            self.skip_whitespace()
            if self.eof():
                raise self.error(f"Expected '{closer}' before end of input")
            ch = self.peek()
            if ch == closer:
                lst.children.append(self.node(CHAR_TAG, closer))
                self.pos += 1
                return lst
            if ch in CLOSERS.values():
                raise self.error(f"Expected '{closer}' but found '{ch}'")
            lst.children.append(self.parse_expr())


def parse(source: str, filename: str = "<stdin>") -> AstNode:
    """Parse a whole input into a tree rooted at a ">" node."""
    return Parser(source, filename).parse()

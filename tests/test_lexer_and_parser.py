import pytest

from lispy.errors import LispySyntaxError
from lispy.reader.parser import AstNode, parse


def _leaves(node: AstNode):
    """(tag, contents) for every leaf, in order."""
    return [(n.tag, n.contents) for n in node.walk() if not n.children]


def test_root_is_anchored():
    tree = parse("+ 1 2")
    assert tree.tag == ">"
    assert tree.children[0].tag == "regex"
    assert tree.children[-1].tag == "regex"
    assert [(c.tag, c.contents) for c in tree.children[1:-1]] == [
        ("expr|symbol|regex", "+"),
        ("expr|number|regex", "1"),
        ("expr|number|regex", "2"),
    ]


def test_nested_lists_keep_brackets():
    tree = parse("(+ 1 {2 x})")
    sexpr = tree.children[1]
    assert sexpr.tag == "expr|sexpr|>"
    assert [c.contents for c in sexpr.children if c.tag == "char"] == ["(", ")"]
    qexpr = sexpr.children[3]
    assert qexpr.tag == "expr|qexpr|>"
    assert [(c.tag, c.contents) for c in qexpr.children] == [
        ("char", "{"),
        ("expr|number|regex", "2"),
        ("expr|symbol|regex", "x"),
        ("char", "}"),
    ]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("-5", [("expr|number|regex", "-5")]),
        ("-", [("expr|symbol|regex", "-")]),
        ("--5", [("expr|symbol|regex", "--5")]),
        ("12abc", [("expr|number|regex", "12"), ("expr|symbol|regex", "abc")]),
        ("undefined_name", [("expr|symbol|regex", "undefined_name")]),
        ("a\\b", [("expr|symbol|regex", "a\\b")]),
        ("<= >= == != && %", [
            ("expr|symbol|regex", "<="),
            ("expr|symbol|regex", ">="),
            ("expr|symbol|regex", "=="),
            ("expr|symbol|regex", "!="),
            ("expr|symbol|regex", "&&"),
            ("expr|symbol|regex", "%"),
        ]),
        ("  \t 7 \n ", [("expr|number|regex", "7")]),
    ],
)
def test_tokens(source, expected):
    leaves = [leaf for leaf in _leaves(parse(source)) if leaf[0] != "regex"]
    assert leaves == expected


def test_empty_input():
    tree = parse("")
    assert [c.tag for c in tree.children] == ["regex", "regex"]


def test_positions():
    tree = parse("1\n  (x)")
    sexpr = tree.children[2]
    assert (sexpr.line, sexpr.column) == (2, 3)
    assert (sexpr.children[1].line, sexpr.children[1].column) == (2, 4)


@pytest.mark.parametrize(
    "source,message,column",
    [
        ("(+ 1 2", "Expected ')' before end of input", 7),
        ("{1 2", "Expected '}' before end of input", 5),
        (")", "Unexpected ')'", 1),
        ("1 }", "Unexpected '}'", 3),
        ("(1 }", "Expected ')' but found '}'", 4),
        ("{1 )", "Expected '}' but found ')'", 4),
    ],
)
def test_syntax_errors(source, message, column):
    with pytest.raises(LispySyntaxError) as exc:
        parse(source)
    assert exc.value.message == message
    assert exc.value.line == 1
    assert exc.value.column == column


def test_unexpected_character():
    with pytest.raises(LispySyntaxError) as exc:
        parse("(+ 1 #)", filename="<test>")
    assert exc.value.message.startswith("Unexpected character '#'")
    assert str(exc.value).startswith("<test>:1:6:")


def test_error_on_later_line():
    with pytest.raises(LispySyntaxError) as exc:
        parse("1\n)")
    assert (exc.value.line, exc.value.column) == (2, 1)

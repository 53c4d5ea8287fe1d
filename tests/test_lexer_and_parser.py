import pytest
from hypothesis import given, strategies as st

from eden.errors import EdenSyntaxError, EdenIncompleteInput
from eden.reader import lex, TokenStream, read, read_all
from eden.types import DottedList, Quoted, Symbol


# Convert nested list to Lisp source string
def _to_lisp_source(expr):
    if isinstance(expr, list):
        return f"({' '.join(_to_lisp_source(e) for e in expr)})"
    return str(expr)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        ('"say \\"hi\\""', [("string", '"say \\"hi\\""')]),
        ("#t #f", [("boolean", "#t"), ("boolean", "#f")]),
        ("-42 +7 0", [("number", "-42"), ("number", "+7"), ("number", "0")]),
        ("(a . b)", [("lparen", "("), ("symbol", "a"), ("dot", "."), ("symbol", "b"), ("rparen", ")")]),
        ("- set! string<? 1+", [("symbol", "-"), ("symbol", "set!"), ("symbol", "string<?"), ("symbol", "1+")]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("#| block #| nested |# |# x", [("symbol", "x")]),
        ("(f'x)", [("lparen", "("), ("symbol", "f"), ("quote", "'"), ("symbol", "x"), ("rparen", ")")]),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("+6", 6),
        ("#t", True),
        ("#f", False),
        ('"hello"', "hello"),
        ('"a\\nb\\t\\\\"', "a\nb\t\\"),
        ("sym", Symbol("sym")),
        ("'a", Quoted(Symbol("a"))),
        ("'()", Quoted([])),
        ("()", []),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("(a . b)", DottedList([Symbol("a")], Symbol("b"))),
        ("(1 2 . 3)", DottedList([1, 2], 3)),
        ("(a . (b c))", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("(a . (b . c))", DottedList([Symbol("a"), Symbol("b")], Symbol("c"))),
        ("(quote x)", [Symbol("quote"), Symbol("x")]),
    ]
)
def test_parser(source, expected):
    stream = TokenStream(lex(source))
    result = list(stream.parse_all())
    assert result[0] == expected     # Parser yields one expression
    assert len(result) == 1


def test_nested_lists():
    source = "((a b) (c d))"
    expected = [[Symbol('a'), Symbol('b')], [Symbol('c'), Symbol('d')]]
    assert read(source) == expected


def test_booleans_are_not_numbers():
    assert read("#t") is True
    assert read("1") is not True


def test_read_all_keeps_order():
    assert read_all("1 (a) 'b") == [1, [Symbol("a")], Quoted(Symbol("b"))]


@pytest.mark.parametrize(
    "source",
    [
        "",             # empty string
        "    ",         # spaces only
        "; comment",    # comment only
        "#| multi-line \n comment |#",  # multiline comment
    ]
)
def test_lexer_edge_cases_no_crash(source):
    assert read_all(source) == []


@pytest.mark.parametrize("source", ["(a b", "((a)", '"abc', "#| open", "'", "(a .", '"abc\\"'])
def test_incomplete_input(source):
    with pytest.raises(EdenIncompleteInput):
        read_all(source)


@pytest.mark.parametrize(
    "source",
    [")", "(. a)", "(a . b c)", "(a .)", "99999999999999999999", '"\\q"', "."]
)
def test_syntax_errors(source):
    with pytest.raises(EdenSyntaxError):
        read_all(source)


def test_read_requires_exactly_one_expression():
    assert read(" 7 ") == 7
    with pytest.raises(EdenSyntaxError):
        read("")
    with pytest.raises(EdenSyntaxError):
        read("1 2")


symbols = st.from_regex(r"[a-z][a-z0-9?!<>=*-]{0,8}", fullmatch=True)
trees = st.recursive(
    symbols | st.integers(min_value=0, max_value=10**6).map(str),
    lambda children: st.lists(children, max_size=5),
    max_leaves=20,
)


@given(trees)
def test_parse_generated_trees(tree):
    def expected(node):
        if isinstance(node, list):
            return [expected(n) for n in node]
        return int(node) if node.isdigit() else Symbol(node)

    assert read(_to_lisp_source(tree)) == expected(tree)

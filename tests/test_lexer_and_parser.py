import pytest
from hypothesis import given, strategies as st

from fexl.errors import FexlIncompleteInput, FexlParseError
from fexl.reader.parser import lex, parse_all, parse_node
from fexl.types.node import Identifier, IntegerLiteral, ListNode, QuoteNode, StringLiteral


def L(*items):
    return ListNode(items)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("identifier", "a")]),
        ("'a", [("quote", "'"), ("identifier", "a")]),
        ("(a b c)", [("lparen", "("), ("identifier", "a"), ("identifier", "b"), ("identifier", "c"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        ("42", [("integer", "42")]),
        ("(+ 1 2)", [("lparen", "("), ("identifier", "+"), ("integer", "1"), ("integer", "2"), ("rparen", ")")]),
        ("\t a\n b ", [("identifier", "a"), ("identifier", "b")]),
    ]
)
def test_lexer_basic(source, expected):
    tokens = [(kind, value) for kind, value, _ in lex(source)]
    assert tokens == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("hello", Identifier("hello")),
        ("mod", Identifier("mod")),
        ("!=", Identifier("!=")),
        ("a_b-c*d/e+f1", Identifier("a_b-c*d/e+f1")),
        ("123", IntegerLiteral(123)),
        ("2147483647", IntegerLiteral(2147483647)),
        ('"Hello {}"', StringLiteral("Hello {}")),
        ('"a\\"b"', StringLiteral('a"b')),
        ('"a\\\\b"', StringLiteral("a\\b")),
        ('"line\\nbreak"', StringLiteral("line\nbreak")),
        ("(hello world)", L(Identifier("hello"), Identifier("world"))),
        ("(test)", L(Identifier("test"))),
        ("( a b c )", L(Identifier("a"), Identifier("b"), Identifier("c"))),
        ("(a\n  b)", L(Identifier("a"), Identifier("b"))),
        (
            '(print 1 "Hello {}" (getName))',
            L(Identifier("print"), IntegerLiteral(1), StringLiteral("Hello {}"), L(Identifier("getName"))),
        ),
        (
            "('(1) '1 '\"x\" ''1)",
            L(
                QuoteNode(L(IntegerLiteral(1))),
                QuoteNode(IntegerLiteral(1)),
                QuoteNode(StringLiteral("x")),
                QuoteNode(QuoteNode(IntegerLiteral(1))),
            ),
        ),
    ]
)
def test_parse_node(source, expected):
    node, rest = parse_node(source)
    assert node == expected
    assert rest == ""


def test_parse_node_returns_remaining_source():
    node, rest = parse_node("(a b) (c)")
    assert node == L(Identifier("a"), Identifier("b"))
    assert rest == " (c)"


def test_parse_all_reads_every_node():
    assert parse_all("(let x 5) x") == [
        L(Identifier("let"), Identifier("x"), IntegerLiteral(5)),
        Identifier("x"),
    ]
    assert parse_all("   \n") == []


@pytest.mark.parametrize(
    "source",
    ["()", "( )", ")", "(a))", "2147483648", '"bad \\t escape"', "12abc", "#t", "(a [b])"],
)
def test_malformed_input(source):
    with pytest.raises(FexlParseError) as exc_info:
        parse_all(source)
    assert not isinstance(exc_info.value, FexlIncompleteInput)


@pytest.mark.parametrize(
    "source",
    ["(", "(a b", "(a (b c)", "'", "''", '"open', '"open\\', "(a\n"],
)
def test_incomplete_input(source):
    with pytest.raises(FexlIncompleteInput):
        parse_all(source)


def test_parse_node_on_empty_source_is_incomplete():
    with pytest.raises(FexlIncompleteInput):
        parse_node("  ")


@given(st.integers(min_value=0, max_value=2 ** 31 - 1))
def test_integer_literals_in_range(n):
    assert parse_all(str(n)) == [IntegerLiteral(n)]


@given(st.from_regex(r"\A[A-Za-z+\-*/_][A-Za-z0-9+\-*/_]{0,10}\Z"))
def test_identifiers_match_grammar(name):
    assert parse_all(f"({name})") == [L(Identifier(name))]


@pytest.mark.parametrize(
    "source",
    ["'" * 3000 + "1", "(+ 1 " * 2000 + "1" + ")" * 2000, "(" * 3000],
)
def test_nesting_past_the_limit_is_a_parse_error(source):
    with pytest.raises(FexlParseError) as exc_info:
        parse_all(source)
    assert not isinstance(exc_info.value, FexlIncompleteInput)
    assert "Nesting deeper than 256 levels" in str(exc_info.value)


def test_nesting_up_to_the_limit_parses():
    [node] = parse_all("(+ 1 " * 250 + "1" + ")" * 250)
    for _ in range(250):
        assert node.items[:2] == (Identifier("+"), IntegerLiteral(1))
        node = node.items[2]
    assert node == IntegerLiteral(1)
    [quoted] = parse_all("'" * 256 + "x")
    assert isinstance(quoted, QuoteNode)

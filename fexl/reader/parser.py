"""
  fexl Reader: Lexer and Parser

Grammar:

    - identifiers -> [A-Za-z+-*/_=!][A-Za-z0-9+-*/_=!]*  -> Identifier
    - lists       -> ( node node ... )                  -> ListNode (never empty)
    - strings     -> "..." with escapes \\" \\\\ \\n      -> StringLiteral
    - integers    -> unsigned decimal digits, i32 range -> IntegerLiteral
    - quote       -> 'node (nests: ''x)                 -> QuoteNode

Separators are spaces, tabs and newlines. Input that ends before a node is
complete raises FexlIncompleteInput so a line-oriented driver can keep
reading; anything malformed raises FexlParseError.
"""

from __future__ import annotations

import re
from contextlib import contextmanager
from typing import Iterator, Optional

from fexl.errors import FexlIncompleteInput, FexlParseError
from fexl.types.data import INT_MAX
from fexl.types.node import Identifier, IntegerLiteral, ListNode, Node, QuoteNode, StringLiteral

Token = tuple[str, str, int]  # (token_type, token_value, end_position)

# Deepest list or quote nesting the reader accepts
MAX_NESTING = 256

TOKEN_RE = re.compile(
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<quote>')"
    r'|(?P<string>"(?:\\.|[^\\"])*")'
    r"|(?P<integer>[0-9]+)"
    r"|(?P<identifier>[A-Za-z+\-*/_=!][A-Za-z0-9+\-*/_=!]*)"
)

SEPARATORS = " \t\r\n"
# What may directly follow an integer or identifier
DELIMITERS = SEPARATORS + "()'\""

UNTERMINATED_STRING_RE = re.compile(r'"(?:\\.|[^\\"])*\\?\Z', re.DOTALL)

ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
}


def unescape(body: str) -> str:
    """Decode the escapes of a string literal body (without the quotes)."""
    out: list[str] = []
    chars = iter(body)
    for c in chars:
        if c != "\\":
            out.append(c)
            continue
        e = next(chars)
        if e not in ESCAPES:
            raise FexlParseError(f"Unknown escape sequence \\{e} in string literal")
        out.append(ESCAPES[e])
    return "".join(out)


def lex(source: str, pos: int = 0) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, end_position) tuples."""
    n = len(source)
    while pos < n:
        if source[pos] in SEPARATORS:
            pos += 1
            continue

        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"' and UNTERMINATED_STRING_RE.match(source, pos):
                raise FexlIncompleteInput("Unterminated string literal")
            raise FexlParseError(f"Unexpected char at {pos}: {source[pos]!r}")

        kind = m.lastgroup
        end = m.end()
        if kind in ("integer", "identifier") and end < n and source[end] not in DELIMITERS:
            raise FexlParseError(f"Unexpected char at {end}: {source[end]!r}")
        yield kind, m.group(kind), end
        pos = end


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.position = 0
        self.nesting = 0

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Token:
        tok = self.peek()
        if tok is None:
            raise FexlIncompleteInput("Unexpected end of input")
        self.buffer.pop(0)
        self.position = tok[2]
        return tok

    @contextmanager
    def _nested(self):
        if self.nesting >= MAX_NESTING:
            raise FexlParseError(f"Nesting deeper than {MAX_NESTING} levels")
        self.nesting += 1
        try:
            yield
        finally:
            self.nesting -= 1

    def parse_expr(self) -> Optional[Node]:
        """Parse the next node, or return None at a clean end of input."""
        if self.peek() is None:
            return None
        return self._parse_node()

    def _parse_node(self) -> Node:
        tok_type, tok_val, _ = self.advance()

        if tok_type == "identifier":
            return Identifier(tok_val)

        if tok_type == "integer":
            value = int(tok_val)
            if value > INT_MAX:
                raise FexlParseError(f"Integer literal {tok_val} does not fit in 32 bits")
            return IntegerLiteral(value)

        if tok_type == "string":
            return StringLiteral(unescape(tok_val[1:-1]))

        if tok_type == "quote":
            with self._nested():
                return QuoteNode(self._parse_node())

        if tok_type == "lparen":
            items: list[Node] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise FexlIncompleteInput("Unmatched '('")
                if nxt[0] == "rparen":
                    self.advance()
                    break
                with self._nested():
                    items.append(self._parse_node())
            if not items:
                raise FexlParseError("Empty list")
            return ListNode(tuple(items))

        raise FexlParseError(f"Unexpected token {tok_val!r}")

    def parse_all(self) -> Iterator[Node]:
        while (node := self.parse_expr()) is not None:
            yield node


def parse_node(source: str) -> tuple[Node, str]:
    """Parse the first node of `source`; return it with the unconsumed rest."""
    stream = TokenStream(lex(source))
    node = stream.parse_expr()
    if node is None:
        raise FexlIncompleteInput("No expression in input")
    return node, source[stream.position:]


def parse_all(source: str) -> list[Node]:
    """Parse every node in `source`."""
    return list(TokenStream(lex(source)).parse_all())

"""Source-style rendering of syntax nodes and runtime values.

`repr()` of nodes and values gives the structural debug form used by the
`debug` intrinsic and the REPL (e.g. `Int(3)`); the functions here give the
form a user would type back in (e.g. `3`, `'(+ 1 2)`).
"""

from __future__ import annotations

from fexl.types.data import Data, EmptyType, Function, Int, Intrinsic, Quote, Str
from fexl.types.node import (
    Identifier,
    IntegerLiteral,
    ListNode,
    Node,
    QuoteNode,
    StringLiteral,
    quote_string,
)


def to_source(node: Node) -> str:
    """Render a syntax node back into reader syntax."""
    if isinstance(node, Identifier):
        return node.name
    if isinstance(node, IntegerLiteral):
        return str(node.value)
    if isinstance(node, StringLiteral):
        return quote_string(node.value)
    if isinstance(node, QuoteNode):
        return "'" + to_source(node.node)
    if isinstance(node, ListNode):
        return "(" + " ".join(to_source(n) for n in node.items) + ")"
    raise TypeError(f"Not a syntax node: {node!r}")


def format_value(value: Data) -> str:
    if isinstance(value, Int):
        return str(value.value)
    if isinstance(value, Str):
        return quote_string(value.value)
    if isinstance(value, Quote):
        return "'" + to_source(value.node)
    if isinstance(value, Function):
        return f"(fn ({' '.join(value.params)}) {to_source(value.body)})"
    if isinstance(value, Intrinsic):
        return f"<intrinsic {value.name}>"
    if isinstance(value, EmptyType):
        return ""
    return repr(value)

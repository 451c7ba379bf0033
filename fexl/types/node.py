"""Syntax nodes produced by the reader and consumed by the evaluator.

Nodes are immutable and compare structurally, so captured code (quotes and
function bodies) can be compared and hashed like any other value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


def quote_string(s: str) -> str:
    """Render `s` as a double-quoted literal using the reader's escape set."""
    escaped = s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


@dataclass(frozen=True, repr=False)
class Identifier:
    name: str

    def __repr__(self) -> str:
        return f"Identifier({quote_string(self.name)})"


@dataclass(frozen=True, repr=False)
class ListNode:
    items: tuple[Node, ...]

    def __post_init__(self):
        # Accept any sequence but store a tuple so the node stays hashable
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __repr__(self) -> str:
        return f"List([{', '.join(repr(n) for n in self.items)}])"


@dataclass(frozen=True, repr=False)
class StringLiteral:
    value: str

    def __repr__(self) -> str:
        return f"StringLiteral({quote_string(self.value)})"


@dataclass(frozen=True, repr=False)
class IntegerLiteral:
    value: int

    def __repr__(self) -> str:
        return f"IntegerLiteral({self.value})"


@dataclass(frozen=True, repr=False)
class QuoteNode:
    node: Node

    def __repr__(self) -> str:
        return f"Quote({self.node!r})"


Node = Union[Identifier, ListNode, StringLiteral, IntegerLiteral, QuoteNode]

"""Core evaluator for fexl.

Walks a syntax tree against the scope stack. List nodes are applications:
the head is evaluated to a callable and the remaining nodes are handed to
the application protocol unevaluated, so special forms need no case here.
"""

from __future__ import annotations

from fexl import LispValue
from fexl.evaluation.apply import apply
from fexl.errors import FexlRuntimeError, FexlSyntaxError
from fexl.types.data import Int, Quote, Str
from fexl.types.node import Identifier, IntegerLiteral, ListNode, Node, QuoteNode, StringLiteral
from fexl.types.ns_stack import NSStack


def evaluate(node: Node, stack: NSStack) -> LispValue:
    """Evaluate `node` in the innermost frame of `stack`."""
    stack.eval_depth += 1
    try:
        if stack.eval_depth > stack.max_depth:
            raise FexlRuntimeError(
                f"Maximum evaluation depth {stack.max_depth} exceeded."
            )

        match node:
            case Identifier(name):
                return stack.lookup(name)
            case StringLiteral(value):
                return Str(value)
            case IntegerLiteral(value):
                return Int(value)
            case QuoteNode(inner):
                # Quoting is inert: the inner node is captured, not evaluated
                return Quote(inner)
            case ListNode(items):
                if not items:
                    raise FexlSyntaxError("List expression with zero arguments.")
                head, *raw_args = items
                fn = evaluate(head, stack)
                return apply(fn, raw_args, stack)

        raise FexlSyntaxError(f"{node!r} is not a syntax node.")
    finally:
        stack.eval_depth -= 1


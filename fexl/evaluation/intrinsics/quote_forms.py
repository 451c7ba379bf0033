from __future__ import annotations

from typing import Sequence

from fexl import LispValue
from fexl.errors import FexlSyntaxError, FexlTypeError
from fexl.evaluation.evaluator import evaluate
from fexl.types.data import Quote
from fexl.types.node import Node
from fexl.types.ns_stack import NSStack


def quote_form(stack: NSStack, tail: Sequence[Node]) -> LispValue:
    if not tail:
        raise FexlSyntaxError("Quote received zero arguments.")
    return Quote(tail[0])


def unquote_form(stack: NSStack, tail: Sequence[Node]) -> LispValue:
    """Evaluate the argument; if it yields a Quote, evaluate the captured node."""
    if not tail:
        raise FexlSyntaxError("Unquote received zero arguments.")
    value = evaluate(tail[0], stack)
    if not isinstance(value, Quote):
        raise FexlTypeError(f"{value!r} is not a quote.")
    return evaluate(value.node, stack)

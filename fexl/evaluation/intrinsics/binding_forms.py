from __future__ import annotations

from typing import Sequence

from fexl import LispValue
from fexl.errors import FexlSyntaxError, FexlTypeError
from fexl.evaluation.evaluator import evaluate
from fexl.types.data import Empty
from fexl.types.node import Identifier, Node
from fexl.types.ns_stack import NSStack


def let_form(stack: NSStack, tail: Sequence[Node]) -> LispValue:
    """
    (let name value name value ...)
    Binds each name in the current frame, in order; later pairs see earlier ones.
    """
    if len(tail) % 2 != 0:
        raise FexlSyntaxError("Variable declaration mismatch.")

    for key, val_expr in zip(tail[0::2], tail[1::2]):
        if not isinstance(key, Identifier):
            raise FexlTypeError(f"{key!r} is not an identifier.")
        value = evaluate(val_expr, stack)
        stack.top()[key.name] = value
    return Empty


def do_form(stack: NSStack, tail: Sequence[Node]) -> LispValue:
    if not tail:
        raise FexlSyntaxError("Empty do block")
    result: LispValue = Empty
    for expr in tail:
        result = evaluate(expr, stack)
    return result

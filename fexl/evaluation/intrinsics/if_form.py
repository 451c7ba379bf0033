from __future__ import annotations

from typing import Sequence

from fexl import LispValue
from fexl.errors import FexlSyntaxError
from fexl.evaluation.evaluator import evaluate
from fexl.types.node import Node
from fexl.types.ns_stack import NSStack


def if_form(stack: NSStack, tail: Sequence[Node]) -> LispValue:
    if len(tail) != 3:
        raise FexlSyntaxError("If statement should have 3 arguments.")

    cond, then_expr, else_expr = tail
    # Only the chosen branch is evaluated
    if evaluate(cond, stack).is_truthy():
        return evaluate(then_expr, stack)
    return evaluate(else_expr, stack)

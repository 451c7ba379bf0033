from __future__ import annotations

from typing import Sequence

from fexl import LispValue
from fexl.errors import FexlSyntaxError
from fexl.evaluation.evaluator import evaluate
from fexl.types.data import Int
from fexl.types.node import Node
from fexl.types.ns_stack import NSStack


def _operands(name: str, stack: NSStack, tail: Sequence[Node]) -> tuple[LispValue, LispValue]:
    if len(tail) != 2:
        raise FexlSyntaxError(f"{name} only takes 2 arguments")
    return evaluate(tail[0], stack), evaluate(tail[1], stack)


def equals(stack: NSStack, tail: Sequence[Node]) -> LispValue:
    """(= a b) => Int(1) if the values are equal, else Int(0)."""
    left, right = _operands("=", stack, tail)
    return Int(1 if left == right else 0)


def not_equals(stack: NSStack, tail: Sequence[Node]) -> LispValue:
    left, right = _operands("!=", stack, tail)
    return Int(0 if left == right else 1)

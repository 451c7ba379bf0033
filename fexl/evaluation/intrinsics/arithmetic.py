"""Integer arithmetic intrinsics.

Every operator takes exactly two arguments that must evaluate to Int, and
follows 32-bit signed semantics: `/` truncates toward zero, `mod` takes the
sign of the dividend, and results outside the i32 range are runtime errors.
"""

from __future__ import annotations

from typing import Callable, Sequence

from fexl import IntrinsicFn, LispValue
from fexl.errors import FexlRuntimeError, FexlSyntaxError, FexlTypeError
from fexl.evaluation.evaluator import evaluate
from fexl.types.data import INT_MAX, INT_MIN, Int
from fexl.types.node import Node
from fexl.types.ns_stack import NSStack


def int_operands(name: str, stack: NSStack, tail: Sequence[Node]) -> tuple[int, int]:
    """Check arity, evaluate both operands left to right, and unwrap them as ints."""
    if len(tail) != 2:
        raise FexlSyntaxError(f"{name} only takes 2 arguments")
    left = evaluate(tail[0], stack)
    right = evaluate(tail[1], stack)
    if not (isinstance(left, Int) and isinstance(right, Int)):
        raise FexlTypeError(
            f"{name} only works on integers, got {left!r} and {right!r}."
        )
    return left.value, right.value


def checked(name: str, value: int) -> Int:
    if not INT_MIN <= value <= INT_MAX:
        raise FexlRuntimeError(f"Integer overflow in {name}.")
    return Int(value)


def trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _divide(a: int, b: int) -> int:
    if b == 0:
        raise FexlRuntimeError("Division by zero.")
    return trunc_div(a, b)


def _modulo(a: int, b: int) -> int:
    if b == 0:
        raise FexlRuntimeError("Modulo by zero.")
    return a - b * trunc_div(a, b)


def binary_int_op(name: str, op: Callable[[int, int], int]) -> IntrinsicFn:
    def intrinsic(stack: NSStack, tail: Sequence[Node]) -> LispValue:
        a, b = int_operands(name, stack, tail)
        return checked(name, op(a, b))

    intrinsic.__name__ = f"intrinsic_{name}"
    return intrinsic


add = binary_int_op("+", lambda a, b: a + b)
sub = binary_int_op("-", lambda a, b: a - b)
mul = binary_int_op("*", lambda a, b: a * b)
div = binary_int_op("/", _divide)
mod = binary_int_op("mod", _modulo)

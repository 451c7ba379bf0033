"""Application protocol for fexl.

Intrinsics and user functions are the only callables. Both receive the raw,
unevaluated argument nodes:

- an Intrinsic is handed the live stack and decides itself what to
  evaluate, which is how `if`, `let` and `do` work without evaluator support;
- a Function evaluates its arguments in the caller's frame, then binds them
  in a freshly pushed frame and evaluates its body there. The frame is
  popped on every exit path.
"""

from __future__ import annotations

import logging
from typing import Sequence

from fexl import LispValue
from fexl.errors import FexlSyntaxError, FexlTypeError
from fexl.types.data import Function, Intrinsic
from fexl.types.node import Node
from fexl.types.ns_stack import NSStack

log = logging.getLogger(__name__)


def apply_function(fn: Function, raw_args: Sequence[Node], stack: NSStack) -> LispValue:
    """Apply a user-defined Function.

    Arguments are evaluated left to right in the caller's scope before the
    callee frame exists, so argument expressions never see the callee's
    parameter names. Raises FexlSyntaxError on an arity mismatch.
    """
    from fexl.evaluation.evaluator import evaluate

    if len(raw_args) != len(fn.params):
        raise FexlSyntaxError(
            f"Wrong function argument count: expected {len(fn.params)}, got {len(raw_args)}."
        )

    values = [evaluate(arg, stack) for arg in raw_args]
    log.debug("apply %r to %r", fn.params, values)

    with stack.scope() as frame:
        for name, value in zip(fn.params, values):
            frame[name] = value
        return evaluate(fn.body, stack)


def apply(fn: LispValue, raw_args: Sequence[Node], stack: NSStack) -> LispValue:
    """Apply `fn` to the raw argument nodes.

    Raises FexlTypeError when `fn` is not callable.
    """
    if not isinstance(fn, (Intrinsic, Function)):
        raise FexlTypeError(f"{fn!r} is not callable.")
    return fn.apply(stack, raw_args)

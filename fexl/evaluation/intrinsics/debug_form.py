from __future__ import annotations

import sys
from typing import Sequence, TextIO

from fexl import LispValue
from fexl.evaluation.evaluator import evaluate
from fexl.types.data import Empty
from fexl.types.node import Node
from fexl.types.ns_stack import NSStack


def make_debug_form(out: TextIO | None = None):
    """Build a `debug` intrinsic writing to `out` (stdout when None, resolved per call)."""

    def debug_form(stack: NSStack, tail: Sequence[Node]) -> LispValue:
        stream = out if out is not None else sys.stdout
        for expr in tail:
            value = evaluate(expr, stack)
            stream.write(f"{value!r}\n")
        return Empty

    return debug_form


debug_form = make_debug_form()

from __future__ import annotations

import logging
from typing import TextIO

from fexl import LispValue
from fexl.config import ensure_recursion_limit
from fexl.evaluation.evaluator import evaluate
from fexl.evaluation.intrinsics import register
from fexl.reader.parser import lex, TokenStream
from fexl.types.data import Empty
from fexl.types.node import Node
from fexl.types.ns_stack import NSStack

log = logging.getLogger(__name__)


class Runtime:
    """
    One interpreter instance: a scope stack whose base frame holds the
    intrinsics. Bindings made at top level persist across calls, and
    independent Runtime instances share nothing.
    """

    def __init__(self, *, max_depth: int | None = None, out: TextIO | None = None):
        self.stack: NSStack = NSStack(max_depth=max_depth)
        ensure_recursion_limit(self.stack.max_depth)
        register(self.stack, out)
        log.debug("runtime ready with %d intrinsics", len(self.stack.spaces[0]))

    def eval(self, node: Node) -> LispValue:
        """Evaluate one parsed node against this runtime's scope stack."""
        return evaluate(node, self.stack)

    def eval_source(self, code: str) -> LispValue:
        """Parse and evaluate every node in `code`, returning the last result."""
        stream = TokenStream(lex(code))
        result: LispValue = Empty
        while (node := stream.parse_expr()) is not None:
            result = self.eval(node)
        return result

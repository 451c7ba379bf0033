from __future__ import annotations

from typing import Sequence

from fexl import LispValue
from fexl.errors import FexlSyntaxError
from fexl.types.data import Function
from fexl.types.node import Identifier, ListNode, Node
from fexl.types.ns_stack import NSStack


def fn_form(stack: NSStack, tail: Sequence[Node]) -> LispValue:
    """
    (fn (param ...) body)
    Returns a Function; nothing is evaluated here. Duplicate parameter names
    are accepted, the last binding wins when the function is called.
    """
    if not tail:
        raise FexlSyntaxError(
            "Function declaration should get a list of arguments and a body!"
        )

    params = tail[0]
    if not isinstance(params, ListNode):
        raise FexlSyntaxError("Function arguments should be given in a list.")

    names: list[str] = []
    for param in params:
        if not isinstance(param, Identifier):
            raise FexlSyntaxError(
                "When declaring function, all arguments should be identifiers."
            )
        names.append(param.name)

    if len(tail) < 2:
        raise FexlSyntaxError("Function declaration doesn't have a body!")

    return Function(tuple(names), tail[1])

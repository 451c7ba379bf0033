"""Registry of intrinsics for the fexl runtime.

Maps names to native fexprs. A Runtime installs this table into the base
frame of its scope stack when it is constructed.
"""

from __future__ import annotations

from typing import TextIO

from fexl import IntrinsicFn
from fexl.evaluation.intrinsics.arithmetic import add, sub, mul, div, mod
from fexl.evaluation.intrinsics.binding_forms import let_form, do_form
from fexl.evaluation.intrinsics.comparison import equals, not_equals
from fexl.evaluation.intrinsics.debug_form import debug_form, make_debug_form
from fexl.evaluation.intrinsics.fn_form import fn_form
from fexl.evaluation.intrinsics.if_form import if_form
from fexl.evaluation.intrinsics.quote_forms import quote_form, unquote_form
from fexl.types.ns_stack import NSStack

INTRINSICS: dict[str, IntrinsicFn] = {
    "let": let_form,
    "quote": quote_form,
    "unquote": unquote_form,
    "do": do_form,
    "if": if_form,
    "fn": fn_form,
    "debug": debug_form,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "mod": mod,
    "=": equals,
    "!=": not_equals,
}


def register(stack: NSStack, out: TextIO | None = None) -> None:
    """Install every intrinsic into the base frame of `stack`.

    `out` redirects the output of `debug`.
    """
    for name, fn in INTRINSICS.items():
        if name == "debug" and out is not None:
            fn = make_debug_form(out)
        stack.register_intrinsic(name, fn)

# Core type aliases for fexl's data model.
#
# Naming guidance:
# - Node:      a syntax node produced by the reader (code, never evaluated on its own).
# - LispValue: a runtime value (a `Data` instance) produced by the evaluator.
#
# Intrinsics are fexprs: they receive the live scope stack and the raw,
# unevaluated argument nodes, and decide themselves what to evaluate.

from typing import Any, Callable, Sequence

# Runtime value alias
LispValue = Any

# Native fexpr signature: (stack, raw_args) -> LispValue
IntrinsicFn = Callable[[Any, Sequence[Any]], LispValue]

__version__ = "0.1.0"

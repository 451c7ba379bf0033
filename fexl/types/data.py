"""Runtime values produced by the evaluator and consumed by intrinsics.

`Data` is a closed set of variants. Equality is variant-wise: two values of
different variants never compare equal. Intrinsics compare (and print) by
name only, so two intrinsics registered under the same name are equal even
when their native functions differ.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from fexl import IntrinsicFn
from fexl.types.node import Identifier, Node, quote_string

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

TRUE_QUOTE = Identifier("true")


class Data:
    """Base class of every runtime value."""

    __slots__ = ()

    def is_truthy(self) -> bool:
        return False

    def __str__(self) -> str:
        from fexl.debug_utils.pprint import format_value
        return format_value(self)


@dataclass(frozen=True, repr=False, eq=True)
class Quote(Data):
    node: Node

    def is_truthy(self) -> bool:
        # No boolean type: only the quoted identifier `true` counts as true
        return self.node == TRUE_QUOTE

    def __repr__(self) -> str:
        return f"Quote({self.node!r})"


@dataclass(frozen=True, repr=False, eq=True)
class Int(Data):
    value: int

    def is_truthy(self) -> bool:
        return self.value != 0

    def __repr__(self) -> str:
        return f"Int({self.value})"


@dataclass(frozen=True, repr=False, eq=True)
class Str(Data):
    value: str

    def is_truthy(self) -> bool:
        return self.value != ""

    def __repr__(self) -> str:
        return f"Str({quote_string(self.value)})"


@dataclass(frozen=True, repr=False, eq=True)
class Intrinsic(Data):
    name: str
    fn: IntrinsicFn = field(compare=False)

    def apply(self, stack, raw_args: Sequence[Node]) -> Data:
        return self.fn(stack, raw_args)

    def __repr__(self) -> str:
        return f"Intrinsic({quote_string(self.name)})"


@dataclass(frozen=True, repr=False, eq=True)
class Function(Data):
    params: tuple[str, ...]
    body: Node

    def __post_init__(self):
        if not isinstance(self.params, tuple):
            object.__setattr__(self, "params", tuple(self.params))

    def apply(self, stack, raw_args: Sequence[Node]) -> Data:
        from fexl.evaluation.apply import apply_function
        return apply_function(self, raw_args, stack)

    def __repr__(self) -> str:
        params = ", ".join(quote_string(p) for p in self.params)
        return f"Function([{params}], {self.body!r})"


class EmptyType(Data):
    """Unit result, e.g. of `let`. There is exactly one instance."""

    __slots__ = ()
    _instance: EmptyType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other):
        return isinstance(other, EmptyType)

    def __hash__(self) -> int:
        return hash(EmptyType)

    def __repr__(self) -> str:
        return "Empty"


Empty = EmptyType()

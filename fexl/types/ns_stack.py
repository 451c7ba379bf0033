"""Scope stack for fexl.

The NSStack is an ordered list of namespaces. Frame 0 is the base frame: it
holds every registered intrinsic, is created with the stack and is never
removed. Frames above it are pushed and popped in strict LIFO order by
function application. Lookups search from the innermost frame outwards;
binding forms write into the innermost frame only.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from io import StringIO
from typing import Iterator

from fexl import IntrinsicFn, LispValue
from fexl.config import get_max_depth
from fexl.errors import FexlStackEmpty, FexlVariableNotFound
from fexl.types.data import Intrinsic

log = logging.getLogger(__name__)

Namespace = dict[str, LispValue]


class NSStack:
    """Ordered namespaces; index 0 is the base frame, the last is the innermost."""

    __slots__ = ("spaces", "eval_depth", "max_depth")

    def __init__(self, max_depth: int | None = None):
        self.spaces: list[Namespace] = [{}]
        # Nested evaluation counter maintained by the evaluator
        self.eval_depth: int = 0
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()

    def lookup(self, name: str) -> LispValue:
        """Return the innermost binding of `name`.

        Raises FexlVariableNotFound if no frame binds it.
        """
        for space in reversed(self.spaces):
            if name in space:
                return space[name]
        raise FexlVariableNotFound(name)

    def lookup_mut(self, name: str) -> Namespace:
        """Return the frame holding the innermost binding of `name`, for in-place updates."""
        for space in reversed(self.spaces):
            if name in space:
                return space
        raise FexlVariableNotFound(name)

    def assign(self, name: str, value: LispValue) -> None:
        """Rebind an existing `name` in the frame that owns it."""
        self.lookup_mut(name)[name] = value

    def enter_scope(self) -> None:
        self.spaces.append({})
        log.debug("enter scope, depth=%d", len(self.spaces))

    def exit_scope(self) -> None:
        if len(self.spaces) <= 1:
            raise FexlStackEmpty()
        self.spaces.pop()
        log.debug("exit scope, depth=%d", len(self.spaces))

    @contextmanager
    def scope(self) -> Iterator[Namespace]:
        """Push a frame for the duration of the block; it is popped on every exit path."""
        self.enter_scope()
        try:
            yield self.spaces[-1]
        finally:
            self.exit_scope()

    def top(self) -> Namespace:
        if not self.spaces:
            raise FexlStackEmpty()
        return self.spaces[-1]

    def register_intrinsic(self, name: str, fn: IntrinsicFn) -> None:
        # Always the base frame, whatever is currently pushed
        if not self.spaces:
            raise FexlStackEmpty()
        self.spaces[0][name] = Intrinsic(name, fn)
        log.debug("registered intrinsic %s", name)

    @property
    def depth(self) -> int:
        return len(self.spaces)

    def __len__(self) -> int:
        return len(self.spaces)

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<NSStack ")
            frames = []
            for space in self.spaces:
                frames.append("{" + ", ".join(f"{k}: {v!r}" for k, v in space.items()) + "}")
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()

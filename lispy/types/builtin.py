from __future__ import annotations

from lispy import BuiltinFn


class Builtin:
    """A host-implemented function, called as fn(env, args) -> value."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name: str = name
        self.fn: BuiltinFn = fn

    def __call__(self, env, args):
        return self.fn(env, args)

    def copy(self) -> Builtin:
        # The callable itself is stateless, only the reference is duplicated
        return Builtin(self.name, self.fn)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Builtin) and self.fn is other.fn

    def __hash__(self) -> int:
        return hash(self.fn)

    def __repr__(self):
        return f"Builtin({self.name!r})"

    def __str__(self):
        return f"<builtin {self.name}>"

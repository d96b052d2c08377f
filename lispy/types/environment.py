"""Runtime environment for Lispy.

The Environment stores bindings of Symbols to Lisp values. There is a single
flat global scope; `outer` is kept so that a later closure implementation can
chain scopes, but nothing in this interpreter sets it.

Every value crossing the environment boundary is copied: `put` stores a copy
of its argument and `get` hands out a copy of the stored value, so no two
holders ever share a mutable value.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator, Optional

from lispy import LispValue
from lispy.errors import LispyInvalidSymbol
from lispy.types.error import Error, ErrorKind
from lispy.types.symbol import Symbol


class Environment:
    """Ordered mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer", "_logger")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        self._logger = logging.getLogger("Environment")

    def get(self, name: Symbol) -> LispValue:
        """Return a copy of the value bound to `name`.

        A miss is reported as an Unbound Error value, not raised.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env.vars[name].copy()
            env = env.outer
        return Error(f"Unbound Symbol '{name}'", ErrorKind.UNBOUND)

    def put(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to a copy of `value`, replacing any existing binding.

        Raises LispyInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispyInvalidSymbol(f"Cannot define {name} as a symbol")
        if name in self.vars:
            self._logger.debug("rebinding %s", name)
        self.vars[name] = value.copy()

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in this frame."""
        for k, v in mapping.items():
            self.put(k, v)

    def names(self) -> list[str]:
        """Bound names in insertion order."""
        return [str(k) for k in self.vars]

    def __contains__(self, name: object) -> bool:
        if isinstance(name, str):
            name = Symbol(name)
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings>"

"""S-expression and Q-expression containers.

Both hold an ordered list of child values in `cells`. They differ only in
how the evaluator treats them: an SExpr is reduced, a QExpr is left alone.
Children are owned by their container; `add` and `join` move values in,
`pop` and `take` move them out.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator, Optional

from lispy import LispValue


class ExprList:
    __slots__ = ("cells",)

    open_char = "("
    close_char = ")"

    def __init__(self, cells: Optional[Iterable[LispValue]] = None):
        self.cells: list[LispValue] = list(cells) if cells is not None else []

    def add(self, value: LispValue) -> ExprList:
        """Append `value` and return self so calls can be chained."""
        self.cells.append(value)
        return self

    def pop(self, index: int = 0) -> LispValue:
        """Remove and return the child at `index`."""
        return self.cells.pop(index)

    def take(self, index: int) -> LispValue:
        """Remove the child at `index`, discard the remainder and return it."""
        value = self.cells.pop(index)
        self.cells.clear()
        return value

    def join(self, other: ExprList) -> ExprList:
        """Move all of `other`'s children onto the end of self."""
        self.cells.extend(other.cells)
        other.cells.clear()
        return self

    def retag(self, cls: type[ExprList]) -> ExprList:
        """Return the same children under another list type (SExpr/QExpr)."""
        return cls(self.cells)

    def copy(self):
        return type(self)(cell.copy() for cell in self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.cells)

    def __getitem__(self, index):
        return self.cells[index]

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.cells == other.cells

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.cells!r})"

    def __str__(self):
        with StringIO() as buffer:
            buffer.write(self.open_char)
            buffer.write(" ".join(str(c) for c in self.cells))
            buffer.write(self.close_char)
            return buffer.getvalue()


class SExpr(ExprList):
    """An expression awaiting evaluation."""

    __slots__ = ()


class QExpr(ExprList):
    """A quoted expression: structurally an SExpr, never auto-evaluated."""

    __slots__ = ()

    open_char = "{"
    close_char = "}"

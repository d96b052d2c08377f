"""First-class error values.

An Error is an ordinary Lispy value: builtins return one instead of raising,
and the evaluator hands it back untouched when asked to evaluate it again.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    DIVIDE_BY_ZERO = "DivideByZero"
    BAD_OPERATOR = "BadOperator"
    BAD_NUMBER = "BadNumber"
    ARITY = "Arity"
    TYPE = "Type"
    UNBOUND = "Unbound"
    GENERIC = "Generic"


class Error:
    __slots__ = ("message", "kind")

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.GENERIC):
        self.message: str = message
        self.kind: ErrorKind = kind

    def copy(self) -> Error:
        return Error(self.message, self.kind)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Error)
            and self.kind is other.kind
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self):
        return f"Error({self.message!r}, {self.kind.value})"

    def __str__(self):
        return f"Error: {self.message}"

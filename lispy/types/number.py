from __future__ import annotations

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def in_range(n: int) -> bool:
    """True if `n` fits a signed 64-bit integer."""
    return INT64_MIN <= n <= INT64_MAX


class Number:
    """Signed 64-bit integer value."""

    __slots__ = ("value",)

    def __init__(self, value: int):
        if not in_range(value):
            raise OverflowError(f"{value} does not fit in 64 bits")
        self.value: int = value

    def copy(self) -> Number:
        return Number(self.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"Number({self.value})"

    def __str__(self):
        return str(self.value)

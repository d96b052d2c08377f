"""Lispy runtime value types."""

from lispy.types.symbol import Symbol
from lispy.types.number import Number, INT64_MIN, INT64_MAX
from lispy.types.error import Error, ErrorKind
from lispy.types.builtin import Builtin
from lispy.types.expr import ExprList, SExpr, QExpr
from lispy.types.environment import Environment

__all__ = [
    "Symbol",
    "Number",
    "INT64_MIN",
    "INT64_MAX",
    "Error",
    "ErrorKind",
    "Builtin",
    "ExprList",
    "SExpr",
    "QExpr",
    "Environment",
]

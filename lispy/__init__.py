# Core type aliases for Lispy's data model.
# Runtime values are instances of the classes in lispy.types (Number, Error,
# Symbol, Builtin, SExpr, QExpr). Code and data share one representation:
# an SExpr read from source is evaluated, a QExpr is kept as data.
#
# Naming guidance:
# - LispValue: any evaluated or unevaluated Lispy value.
# - BuiltinFn: the host callable wrapped by a Builtin value.

from typing import Any, Callable

__version__ = "0.0.0.0.1"

# Runtime value alias
LispValue = Any

# Host function signature: fn(env, args) -> LispValue
BuiltinFn = Callable[..., LispValue]

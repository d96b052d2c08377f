"""Built-in functions for the Lispy runtime environment.

This module defines the arithmetic and list-processing builtins and the
`def` binding form, plus `register`, which installs all of them into an
Environment.

Every builtin has the signature fn(env, args) where `args` is the list of
already-evaluated arguments. Arguments are validated (count first, then
types) before anything happens; a failed check returns an Error value and
leaves the environment untouched.
"""
from __future__ import annotations

import logging

from lispy import LispValue
from lispy.types.builtin import Builtin
from lispy.types.environment import Environment
from lispy.types.error import Error, ErrorKind
from lispy.types.expr import SExpr, QExpr
from lispy.types.number import Number, in_range
from lispy.types.symbol import Symbol
from lispy.evaluation.evaluator import evaluate

_logger = logging.getLogger("Builtins")


def _arity_error(name: str, args: list[LispValue], expected: int) -> Error | None:
    if len(args) == expected:
        return None
    if len(args) < expected:
        if not args:
            return Error(f"Function '{name}' passed no arguments!", ErrorKind.ARITY)
        return Error(f"Function '{name}' passed too few arguments!", ErrorKind.ARITY)
    return Error(f"Function '{name}' passed too many arguments!", ErrorKind.ARITY)


def _type_error(name: str) -> Error:
    return Error(f"Function '{name}' passed incorrect type!", ErrorKind.TYPE)


def _single_qexpr(name: str, args: list[LispValue], non_empty: bool) -> Error | None:
    """Shared check for builtins taking exactly one Q-expression."""
    err = _arity_error(name, args, 1)
    if err is not None:
        return err
    if not isinstance(args[0], QExpr):
        return _type_error(name)
    if non_empty and not args[0].cells:
        return Error(f"Function '{name}' passed {{}}!", ErrorKind.TYPE)
    return None


# -------------------------------
# Arithmetic
# -------------------------------
def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def builtin_op(env: Environment, args: list[LispValue], op: str) -> LispValue:
    """Fold `op` over a list of Numbers, left to right."""
    if not args:
        return Error(f"Function '{op}' passed no arguments!", ErrorKind.ARITY)
    for arg in args:
        if not isinstance(arg, Number):
            return Error("Cannot operate on non-number!", ErrorKind.TYPE)

    x = args[0].value

    if op == "-" and len(args) == 1:
        x = -x
        if not in_range(x):
            return Error("Integer overflow!", ErrorKind.BAD_NUMBER)

    for y in (a.value for a in args[1:]):
        if op == "+":
            x += y
        elif op == "-":
            x -= y
        elif op == "*":
            x *= y
        elif op == "/":
            if y == 0:
                return Error("Division By Zero!", ErrorKind.DIVIDE_BY_ZERO)
            x = _truncating_div(x, y)
        elif op == "min":
            x = min(x, y)
        elif op == "max":
            x = max(x, y)
        else:
            _logger.error("arithmetic reducer called with unknown operator %r", op)
            return Error(f"Unsupported operator '{op}'", ErrorKind.BAD_OPERATOR)
        # Checked per step so a later operand cannot pull the total back in range
        if not in_range(x):
            return Error("Integer overflow!", ErrorKind.BAD_NUMBER)

    return Number(x)


def add(env: Environment, args: list[LispValue]) -> LispValue:
    return builtin_op(env, args, "+")


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract in order; a single argument is negated."""
    return builtin_op(env, args, "-")


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    return builtin_op(env, args, "*")


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide in order, truncating toward zero; errors on a zero divisor."""
    return builtin_op(env, args, "/")


def minimum(env: Environment, args: list[LispValue]) -> LispValue:
    return builtin_op(env, args, "min")


def maximum(env: Environment, args: list[LispValue]) -> LispValue:
    return builtin_op(env, args, "max")


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(list a b c) => {a b c}"""
    return QExpr(args)


def head(env: Environment, args: list[LispValue]) -> LispValue:
    """(head {a b c}) => {a}"""
    err = _single_qexpr("head", args, non_empty=True)
    if err is not None:
        return err
    v = args[0]
    del v.cells[1:]
    return v


def tail(env: Environment, args: list[LispValue]) -> LispValue:
    """(tail {a b c}) => {b c}"""
    err = _single_qexpr("tail", args, non_empty=True)
    if err is not None:
        return err
    v = args[0]
    v.pop(0)
    return v


def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(eval {+ 1 2}) => 3: evaluate a Q-expression as code."""
    err = _single_qexpr("eval", args, non_empty=False)
    if err is not None:
        return err
    return evaluate(args[0].retag(SExpr), env)


def join(env: Environment, args: list[LispValue]) -> LispValue:
    """(join {a} {b c}) => {a b c}"""
    if not args:
        return Error("Function 'join' passed no arguments!", ErrorKind.ARITY)
    for arg in args:
        if not isinstance(arg, QExpr):
            return _type_error("join")
    x = args[0]
    for y in args[1:]:
        x.join(y)
    return x


def cons(env: Environment, args: list[LispValue]) -> LispValue:
    """(cons 1 {2 3}) => {1 {2 3}}

    Only a Number followed by a Q-expression is accepted; the result is the
    whole argument list quoted, as `list` would build it.
    """
    if len(args) < 2:
        return Error("Function 'cons' passed too few arguments!", ErrorKind.ARITY)
    if not (isinstance(args[0], Number) and isinstance(args[1], QExpr)):
        return Error("Function 'cons' passed wrong types!", ErrorKind.TYPE)
    return QExpr(args)


# -------------------------------
# Binding
# -------------------------------
def define(env: Environment, args: list[LispValue]) -> LispValue:
    """(def {a b} 1 2) binds a to 1 and b to 2; returns ()."""
    if not args:
        return Error("Function 'def' passed no arguments!", ErrorKind.ARITY)
    names = args[0]
    if not isinstance(names, QExpr):
        return _type_error("def")
    for name in names:
        if not isinstance(name, Symbol):
            return Error("Function 'def' cannot define non-symbol!", ErrorKind.TYPE)
    values = args[1:]
    if len(names) != len(values):
        return Error(
            "Function 'def' cannot define incorrect number of values to symbols!",
            ErrorKind.ARITY,
        )
    for name, value in zip(names, values):
        _logger.debug("def %s = %s", name, value)
        env.put(name, value)
    return SExpr()


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "eval": eval_builtin,
    "join": join,
    "cons": cons,
    "def": define,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "min": minimum,
    "max": maximum,
}


def register(env: Environment) -> None:
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})

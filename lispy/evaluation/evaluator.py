"""Core evaluator for the Lispy interpreter.

Reduces a value to normal form. Symbols resolve through the environment,
S-expressions evaluate their children left to right and apply the first to
the rest, everything else (numbers, errors, builtins, Q-expressions) is
already reduced and comes back unchanged.

Errors are values: the first error among an S-expression's children becomes
the result of the whole expression.

Kept free of `match` statements so the module can be compiled with Cython
(see setup.py).
"""

from __future__ import annotations

import logging

from lispy import LispValue
from lispy.reader.parser import AstNode
from lispy.reader.reader import read
from lispy.types.builtin import Builtin
from lispy.types.environment import Environment
from lispy.types.error import Error, ErrorKind
from lispy.types.expr import SExpr
from lispy.types.symbol import Symbol

_logger = logging.getLogger("Evaluator")


def evaluate(expr: LispValue, env: Environment) -> LispValue:
    if isinstance(expr, Symbol):
        return env.get(expr)
    if isinstance(expr, SExpr):
        return eval_sexpr(expr, env)
    # --- Already in normal form ---
    return expr


def eval_sexpr(expr: SExpr, env: Environment) -> LispValue:
    cells = expr.cells
    for i in range(len(cells)):
        cells[i] = evaluate(cells[i], env)

    for i, cell in enumerate(cells):
        if isinstance(cell, Error):
            return expr.take(i)

    if not cells:
        return expr

    if len(cells) == 1:
        return expr.take(0)

    f = expr.pop(0)
    if not isinstance(f, Builtin):
        return Error("first element is not callable", ErrorKind.TYPE)

    _logger.debug("applying %s to %d argument(s)", f.name, len(cells))
    return f(env, cells)


def read_eval(tree: AstNode, env: Environment) -> LispValue:
    """Read a parse tree into values and evaluate the result."""
    return evaluate(read(tree), env)

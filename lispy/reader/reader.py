"""Convert a parse tree into a tree of Lispy values."""

from __future__ import annotations

import re

from lispy import LispValue
from lispy.reader.parser import AstNode, ROOT_TAG
from lispy.types.error import Error, ErrorKind
from lispy.types.expr import ExprList, SExpr, QExpr
from lispy.types.number import Number, in_range
from lispy.types.symbol import Symbol

DELIMITERS = frozenset(("(", ")", "{", "}"))
NUMBER_RE = re.compile(r"-?[0-9]+")


def read_number(node: AstNode) -> LispValue:
    """Base-10 integer, or a BadNumber Error if it does not fit 64 bits."""
    if not NUMBER_RE.fullmatch(node.contents):
        return Error("invalid number", ErrorKind.BAD_NUMBER)
    n = int(node.contents, 10)
    if not in_range(n):
        return Error("invalid number", ErrorKind.BAD_NUMBER)
    return Number(n)


def _skip(child: AstNode) -> bool:
    return child.contents in DELIMITERS or child.tag == "regex"


def read(node: AstNode) -> LispValue:
    if "number" in node.tag:
        return read_number(node)
    if "symbol" in node.tag:
        return Symbol(node.contents)

    x: ExprList
    if node.tag == ROOT_TAG or "sexpr" in node.tag:
        x = SExpr()
    elif "qexpr" in node.tag:
        x = QExpr()
    else:
        return Error(f"unknown node tag {node.tag!r}", ErrorKind.GENERIC)

    for child in node.children:
        if _skip(child):
            continue
        x.add(read(child))
    return x

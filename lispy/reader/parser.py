"""
  Lispy Lexer and Parser

Grammar:

    number : /-?[0-9]+/ ;
    symbol : /[a-zA-Z0-9_+\\-*\\/\\\\=<>!&]+/ ;
    sexpr  : '(' <expr>* ')' ;
    qexpr  : '{' <expr>* '}' ;
    expr   : <number> | <symbol> | <sexpr> | <qexpr> ;
    lispy  : /^/ <expr>* /$/ ;

The parser does not build Lisp values. It emits a tagged tree (AstNode) in the
shape produced by parser-combinator libraries:

    - root              -> tag ">", children [start-anchor, expr*, end-anchor]
    - number / symbol   -> tag "expr|number|regex" / "expr|symbol|regex"
    - ( ... ) / { ... } -> tag "expr|sexpr|>" / "expr|qexpr|>"
    - delimiters        -> tag "char", contents "(" ")" "{" "}"
    - anchors           -> tag "regex", empty contents

lispy.reader.reader turns that tree into values.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from lispy.errors import LispySyntaxError


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<number>-?[0-9]+)"  # tried before symbol, so "-5" is a number
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&]+)"
    r")",
)

CLOSERS: dict[str, tuple[str, str]] = {
    "lparen": ("rparen", ")"),
    "lbrace": ("rbrace", "}"),
}

LIST_TAGS: dict[str, str] = {
    "lparen": "expr|sexpr|>",
    "lbrace": "expr|qexpr|>",
}

ROOT_TAG = ">"

# Deepest list nesting accepted. Reading, evaluation and printing all recurse
# on nesting, so this keeps them under the interpreter recursion limit.
MAX_DEPTH = 256


class AstNode:
    """A node of the parse tree: grammatical tag, matched text, children."""

    __slots__ = ("tag", "contents", "children", "position")

    def __init__(
        self,
        tag: str,
        contents: str = "",
        children: Optional[list[AstNode]] = None,
        position: int = 0,
    ):
        self.tag = tag
        self.contents = contents
        self.children: list[AstNode] = children if children is not None else []
        self.position = position

    def __repr__(self):
        if self.children:
            return f"AstNode({self.tag!r}, children={self.children!r})"
        return f"AstNode({self.tag!r}, {self.contents!r})"


def lex(source: str) -> Iterator[tuple[str, str, int]]:
    """Token generator: yields (token_type, token_value, position) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise LispySyntaxError(
                f"unexpected character {source[pos]!r}", pos, source
            )
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                yield nm, m.group(nm), m.start(nm)
                pos = m.end()
                break


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str, int]], source: str = ""):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str, int]] = []
        self.source = source

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, len(self.source)
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, len(self.source)))

    def parse_expr(self, depth: int = 0) -> Optional[AstNode]:
        tok_type, tok_val, pos = self.peek()
        if tok_type is None:
            return None

        if tok_type in ("number", "symbol"):
            self.advance()
            return AstNode(f"expr|{tok_type}|regex", tok_val, position=pos)

        if tok_type in LIST_TAGS:
            if depth >= MAX_DEPTH:
                raise LispySyntaxError("expression nested too deeply", pos, self.source)
            self.advance()
            node = AstNode(LIST_TAGS[tok_type], position=pos)
            node.children.append(AstNode("char", tok_val, position=pos))
            closer, closer_text = CLOSERS[tok_type]
            while True:
                next_type, next_val, next_pos = self.peek()
                if next_type is None:
                    raise LispySyntaxError(
                        f"expected {closer_text!r} to close {tok_val!r} at {pos + 1}",
                        next_pos,
                        self.source,
                    )
                if next_type == closer:
                    self.advance()
                    node.children.append(AstNode("char", next_val, position=next_pos))
                    return node
                if next_type in ("rparen", "rbrace"):
                    raise LispySyntaxError(
                        f"unexpected {next_val!r}", next_pos, self.source
                    )
                node.children.append(self.parse_expr(depth + 1))

        raise LispySyntaxError(f"unexpected {tok_val!r}", pos, self.source)

    def parse_all(self) -> Iterator[AstNode]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def parse(source: str) -> AstNode:
    """Parse a whole line of source into a root node.

    Raises LispySyntaxError if the text does not match the grammar.
    """
    stream = TokenStream(lex(source), source)
    root = AstNode(ROOT_TAG)
    root.children.append(AstNode("regex", "", position=0))
    root.children.extend(stream.parse_all())
    root.children.append(AstNode("regex", "", position=len(source)))
    return root

from __future__ import annotations
from typing import Callable

from lispy import LispValue
from lispy.errors import LispyRecursionError
from lispy.reader.parser import parse
from lispy.reader.reader import read
from lispy.types.environment import Environment
from lispy.builtin.env_builtin import register


class Interpreter:
    """
    Orchestrates parsing, reading and evaluating Lispy code via a pluggable
    evaluator. Maintains one Environment across calls, so definitions made by
    `def` persist for the life of the interpreter.
    """

    def __init__(
        self,
        eval_fn: Callable[[LispValue, Environment], LispValue] | None = None,
        prelude: str | None = None,
    ):
        if eval_fn is None:
            from lispy.evaluation.evaluator import evaluate
            eval_fn = evaluate
        self.eval_fn = eval_fn
        self.env: Environment = Environment()
        register(self.env)

        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for line in code.splitlines():
            if line.strip():
                self.eval(line)

    def eval(self, code: str) -> LispValue:
        """Evaluate one line of source.

        The whole line is read as a single S-expression, so `+ 1 2` and
        `(+ 1 2)` both evaluate to 3. Raises LispySyntaxError if the line does
        not parse, and LispyRecursionError if a value built up across lines
        is nested too deeply to copy or evaluate. Language errors come back as
        Error values.
        """
        try:
            return self.eval_fn(read(parse(code)), self.env)
        except RecursionError:
            raise LispyRecursionError("expression nested too deeply") from None

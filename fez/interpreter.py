from __future__ import annotations

from fez import LispValue
from fez.builtin.env_builtin import make_global_environment
from fez.evaluation.evaluator import evaluate
from fez.reader.parser import lex, TokenStream
from fez.types.environment import Environment
from fez.types.marker import EMPTY_BEGIN


class Interpreter:
    """
    Reads and evaluates Fez source against one global environment.
    The environment persists across calls, so definitions made with `set!`
    on placeholders stay visible to later input.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else make_global_environment()

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code` in order; return the last value."""
        stream = TokenStream(lex(code))
        result: LispValue = EMPTY_BEGIN
        while (expr := stream.parse_expr()) is not None:
            result = evaluate(expr, self.env)
        return result

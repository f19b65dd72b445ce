from __future__ import annotations
import logging
from typing import Literal

from lisparse import LispValue
from lisparse.config import get_prelude_path
from lisparse.reader.lexer import tokenize
from lisparse.reader.parser import TokenStream
from lisparse.types.nil import Nil
from lisparse.types.environment import Environment
from lisparse.builtin.env_builtin import register
from lisparse.evaluation.evaluator import evaluate as evaluate_expr

logger = logging.getLogger(__name__)


def global_environment() -> Environment:
    """A fresh root environment with every builtin and keyword bound."""
    env = Environment()
    register(env)
    return env


def evaluate(source: str, env: Environment | None = None) -> LispValue:
    """Read and evaluate every top-level form of `source` in `env`.

    Returns the value of the last form, or Nil if `source` holds none.
    """
    if env is None:
        env = global_environment()
    stream = TokenStream(tokenize(source))
    result: LispValue = Nil
    while (expr := stream.parse_expr()) is not None:
        result = evaluate_expr(expr, env)
    return result


class Interpreter:
    """
    Keeps one root Environment alive across calls so definitions persist
    from one command to the next.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = global_environment()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_path()
            if path is not None:
                try:
                    self.eval_prelude(path.read_text())
                except FileNotFoundError:
                    # Be permissive: a missing prelude file leaves the root env bare
                    logger.warning("Prelude file %s not found", path)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        evaluate(code, self.env)

    def eval(self, code: str) -> LispValue:
        return evaluate(code, self.env)

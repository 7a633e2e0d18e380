from __future__ import annotations

import logging

from minischeme import LispValue, config
from minischeme.evaluation.evaluator import evaluate
from minischeme.reader.parser import parse
from minischeme.types.environment import Environment

logger = logging.getLogger(__name__)


def evaluate_source(source: str, env: Environment) -> LispValue:
    """Tokenize, parse and evaluate `source` against the caller-owned `env`.

    Raises a SchemeError subclass on failure. Definitions made before the
    failure stay in `env`.
    """
    config.ensure_recursion_limit()
    tree = parse(source)
    logger.debug("Evaluating %s", tree)
    return evaluate(tree, env)


class Interpreter:
    """
    A session: one global Environment kept across calls to `eval`.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else Environment()
        config.ensure_recursion_limit()

    def eval(self, code: str) -> LispValue:
        return evaluate_source(code, self.env)

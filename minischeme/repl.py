"""Interactive front-end.

Reads one line at a time, evaluates it in a persistent session and prints
the rendered value or the error message. ``exit`` or end of input stops the
loop.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from minischeme import config
from minischeme.errors import SchemeError
from minischeme.interpreter import Interpreter
from minischeme.printer import render

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


def repl(
    interp: Optional[Interpreter] = None,
    input_fn: Optional[Callable[[str], str]] = None,
    output: Optional[TextIO] = None,
    prompt: Optional[str] = None,
) -> Interpreter:
    """Run the read-eval-print loop until `exit` or EOF; returns the session."""
    interp = interp if interp is not None else Interpreter()
    input_fn = input_fn if input_fn is not None else input
    output = output if output is not None else sys.stdout
    prompt = prompt if prompt is not None else config.get_prompt()

    while True:
        try:
            line = input_fn(prompt)
        except (EOFError, KeyboardInterrupt):
            break
        if line.strip() == EXIT_COMMAND:
            break
        if not line.strip():
            continue

        try:
            result = interp.eval(line)
        except SchemeError as e:
            logger.debug("Evaluation failed: %s", e)
            print(e, file=output)
        except RecursionError:
            logger.debug("Recursion limit hit while evaluating %r", line)
            print("Recursion depth exceeded", file=output)
        else:
            print(render(result), file=output)

    print("Goodbye", file=output)
    return interp


def main() -> int:
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.info("Recursion limit is %d", config.ensure_recursion_limit())
    repl()
    return 0

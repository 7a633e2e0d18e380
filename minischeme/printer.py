"""Textual rendering of values and tokens for display and diagnostics."""

from __future__ import annotations

from minischeme import LispValue
from minischeme.types.lambda_fn import Lambda
from minischeme.types.symbol import Symbol


def render(value: LispValue) -> str:
    """Render a value the way the REPL displays it.

    >>> render([Symbol("define"), Symbol("x"), 1, 2.5, True, "hi"])
    '(define x 1 2.5 true "hi")'
    """
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (Symbol, Lambda)):
        return str(value)
    if isinstance(value, list):
        return "(" + " ".join(render(v) for v in value) + ")"
    return repr(value)


def format_token(token: tuple[str, LispValue] | None) -> str:
    """Render a lexer token; `None` stands for the end of the token stream."""
    if token is None:
        return "end of input"
    tok_type, tok_val = token
    if tok_type == "string":
        return f'"{tok_val}"'
    if tok_type in ("integer", "float"):
        return repr(tok_val)
    return str(tok_val)

"""
  Tokenizer

- Streaming, lazy: `lex` is a generator and reads the source once, forward only.
- Emits `(token_type, value)` tuples:

    - integer   -> int (signed 64-bit range)
    - float     -> float
    - string    -> str, taken literally (no escape sequences)
    - symbol    -> str
    - lparen    -> "("
    - rparen    -> ")"
    - lex_error -> message with (line, column)

- Errors are tokens, not exceptions. The stream ends right after the first one.
"""

from __future__ import annotations

import re
from typing import Iterator

from minischeme import LispValue

Token = tuple[str, LispValue]

INTEGER = "integer"
FLOAT = "float"
STRING = "string"
SYMBOL = "symbol"
LPAREN = "lparen"
RPAREN = "rparen"
LEX_ERROR = "lex_error"

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

INTEGER_RE = re.compile(r"[+-]?[0-9]+\Z")
FLOAT_RE = re.compile(
    r"[+-]?(?:"
    r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"  # 1, 1., 1.5, .5, 1e3
    r"|inf|infinity|nan"
    r")\Z",
    re.IGNORECASE,
)


def classify(text: str) -> Token:
    """Classify a bare token: integer, then float, then symbol."""
    # More than 19 significant digits can never fit in 64 bits
    if INTEGER_RE.match(text) and len(text.lstrip("+-").lstrip("0")) <= 19:
        value = int(text)
        if I64_MIN <= value <= I64_MAX:
            return INTEGER, value
    if FLOAT_RE.match(text):
        return FLOAT, float(text)
    return SYMBOL, text


# str.isspace() also accepts the information separators U+001C..U+001F,
# which are not Unicode White_Space
INFORMATION_SEPARATORS = "\x1c\x1d\x1e\x1f"


def is_whitespace(c: str) -> bool:
    return c.isspace() and c not in INFORMATION_SEPARATORS


def _is_delimiter(c: str) -> bool:
    return is_whitespace(c) or c in "()"


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    line = 1
    column = 1

    def advance() -> str:
        nonlocal pos, line, column
        c = source[pos]
        pos += 1
        if c == "\n":
            line += 1
            column = 0
        else:
            column += 1
        return c

    def error(message: str) -> Token:
        return LEX_ERROR, f"{message} (line {line}, column {column})"

    while True:
        while pos < n and is_whitespace(source[pos]):
            advance()
        if pos >= n:
            return

        current_char = source[pos]

        if current_char == "(":
            advance()
            yield LPAREN, "("
            continue

        if current_char == ")":
            advance()
            yield RPAREN, ")"
            continue

        # ----------------------
        # String literal
        # ----------------------
        if current_char == '"':
            advance()
            start = pos
            while pos < n and source[pos] != '"':
                advance()
            if pos >= n:
                yield error("Unexpected EOF")
                return
            text = source[start:pos]
            advance()  # closing quote
            if pos < n and not _is_delimiter(source[pos]):
                yield error(f"Unexpected character {source[pos]}")
                return
            yield STRING, text
            continue

        # ----------------------
        # Bare token: number or symbol
        # ----------------------
        start = pos
        while pos < n and not _is_delimiter(source[pos]) and source[pos] != '"':
            advance()
        if pos < n and source[pos] == '"':
            yield error('Unexpected character "')
            return
        yield classify(source[start:pos])

"""
  Recursive-descent parser

A program is one parenthesised list. Atoms map onto plain Python values:

    - integer -> int
    - float   -> float
    - string  -> str
    - symbol  -> Symbol
    - lists   -> Python list

Lexer error tokens surface here as SchemeSyntaxError. Nesting depth is
bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Iterable, Optional

from minischeme import SExpression
from minischeme.errors import SchemeSyntaxError
from minischeme.printer import format_token
from minischeme.reader.lexer import (
    FLOAT,
    INTEGER,
    LEX_ERROR,
    LPAREN,
    RPAREN,
    STRING,
    SYMBOL,
    Token,
    lex,
)
from minischeme.types.symbol import Symbol


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)

    def advance(self) -> Optional[Token]:
        return next(self.tokens, None)

    def parse_program(self) -> list[SExpression]:
        """Parse the top-level list; the first token must open it."""
        token = self.advance()
        if token is None or token[0] != LPAREN:
            raise SchemeSyntaxError(f"Expected '(' but found {format_token(token)}")
        return self.parse_list()

    def parse_list(self) -> list[SExpression]:
        """Parse list elements up to the matching ')' (the '(' is already consumed)."""
        items: list[SExpression] = []
        while (token := self.advance()) is not None:
            tok_type, tok_val = token
            if tok_type in (INTEGER, FLOAT, STRING):
                items.append(tok_val)
            elif tok_type == SYMBOL:
                items.append(Symbol(tok_val))
            elif tok_type == LPAREN:
                items.append(self.parse_list())
            elif tok_type == RPAREN:
                return items
            elif tok_type == LEX_ERROR:
                raise SchemeSyntaxError(tok_val)
            else:
                raise SchemeSyntaxError(f"Unknown token: {tok_type} {tok_val}")
        raise SchemeSyntaxError("Unexpected EOF, missing ')'")


def parse(source: str) -> list[SExpression]:
    """Tokenize and parse `source` into its top-level list."""
    return TokenStream(lex(source)).parse_program()

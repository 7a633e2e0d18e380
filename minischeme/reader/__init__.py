from minischeme.reader.lexer import lex, Token
from minischeme.reader.parser import TokenStream, parse

__all__ = ["lex", "Token", "TokenStream", "parse"]

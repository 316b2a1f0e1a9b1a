from bugslang.lexer.lexer import Lexer, tokenize
from bugslang.lexer.tokens import Token

__all__ = ["Lexer", "Token", "tokenize"]

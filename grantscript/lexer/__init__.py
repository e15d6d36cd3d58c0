"""
GrantScript Lexer Package

Implements the lexical analyzer (tokenizer) for the GrantScript language.

Key Features:
- Single pass over an immutable source buffer
- Lookahead for the two-character operators ==, != and &&
- Lexer-level rewrite of x++ / x-- into = x + 1 / = x - 1
- Named, catchable errors for unrecognized characters
- Optional strict mode for unterminated strings and dangling ++/--
"""

from .tokens import Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EOF_VALUE
from .lexer import Lexer, tokenize, tokenize_file
from .errors import (
    Diagnostic, LexerError, UnrecognizedCharacterError, UnterminatedStringError,
    DanglingIncrementError, ERROR_CODES
)

__all__ = [
    "Lexer",
    "tokenize",
    "tokenize_file",
    "Token",
    "TokenType",
    "KEYWORDS",
    "SINGLE_CHAR_TOKENS",
    "EOF_VALUE",
    "Diagnostic",
    "LexerError",
    "UnrecognizedCharacterError",
    "UnterminatedStringError",
    "DanglingIncrementError",
    "ERROR_CODES",
]

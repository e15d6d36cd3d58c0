"""
GrantScript Front End Package

Lexical front end for the GrantScript scripting language: a tokenizer that
turns source text into typed tokens, plus the AST node shapes a parser
builds from them.

Architecture:
    grantscript/
    ├── lexer/           # Tokenization and lexical errors
    ├── ast_nodes.py     # Tagged AST node dataclasses
    └── cli.py           # grant-lex token dump tool
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerError, tokenize, tokenize_file
from . import ast_nodes

__all__ = [
    # Core
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",
    "tokenize",
    "tokenize_file",
    "ast_nodes",

    # Version info
    "__version__",
    "__license__",
]

"""
Token definitions for the GrantScript lexer.

This module defines every token type the language understands:
- Literals (numbers, identifiers, strings)
- Keywords (grant, entitle, fncn, if, else, loop)
- Operators and punctuation
- The end-of-file sentinel

Both lookup tables are read-only and shared by every lexer instance.
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


class TokenType(Enum):
    """
    Enumeration of all token types in GrantScript.

    Organized by category; the set is closed.
    """

    # ========================================================================
    # Literals
    # ========================================================================
    NUMBER = auto()                 # 42, -7, 3.14
    IDENTIFIER = auto()             # variable_name
    STRING = auto()                 # "hello"

    # ========================================================================
    # Keywords
    # ========================================================================
    LET = auto()                    # grant
    CONST = auto()                  # entitle
    FUNC = auto()                   # fncn
    IF = auto()                     # if
    ELSE = auto()                   # else
    FOR = auto()                    # loop

    # ========================================================================
    # Grouping and operators
    # ========================================================================
    BINARY_OPERATOR = auto()        # + - * % /
    EQUALS = auto()                 # =
    COMMA = auto()                  # ,
    COLON = auto()                  # :
    SEMICOLON = auto()              # ;
    DOT = auto()                    # .
    OPEN_PAREN = auto()             # (
    CLOSE_PAREN = auto()            # )
    OPEN_BRACE = auto()             # {
    CLOSE_BRACE = auto()            # }
    OPEN_BRACKET = auto()           # [
    CLOSE_BRACKET = auto()          # ]
    GREATER = auto()                # >
    LESSER = auto()                 # <
    EQUALS_COMPARE = auto()         # == (value is "is")
    NOT_EQUALS_COMPARE = auto()     # !=
    EXCLAMATION = auto()            # !
    AND = auto()                    # &&
    AMPERSAND = auto()              # &
    BAR = auto()                    # |

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of file


EOF_VALUE = "EndOfFile"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the GrantScript language.

    `value` holds the raw text as seen in the source, except for the
    canonical spellings of `==` ("is") and EOF ("EndOfFile").
    """
    value: str
    type: TokenType

    def __str__(self) -> str:
        return f"{self.type.name}({self.value!r})"

    def __repr__(self) -> str:
        return f"Token({self.value!r}, {self.type.name})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    @property
    def is_eof(self) -> bool:
        return self.type is TokenType.EOF


def eof_token() -> Token:
    """Build the end-of-file sentinel."""
    return Token(EOF_VALUE, TokenType.EOF)


# Lookup tables for token recognition

# Reserved words, matched case-sensitively
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "grant": TokenType.LET,
    "entitle": TokenType.CONST,
    "fncn": TokenType.FUNC,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "loop": TokenType.FOR,
})

# Characters that never need lookahead. '+' and '-' are also handled by the
# numeric and increment rules before this table is consulted.
SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType({
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "{": TokenType.OPEN_BRACE,
    "}": TokenType.CLOSE_BRACE,
    "[": TokenType.OPEN_BRACKET,
    "]": TokenType.CLOSE_BRACKET,
    "+": TokenType.BINARY_OPERATOR,
    "-": TokenType.BINARY_OPERATOR,
    "*": TokenType.BINARY_OPERATOR,
    "%": TokenType.BINARY_OPERATOR,
    "/": TokenType.BINARY_OPERATOR,
    "<": TokenType.LESSER,
    ">": TokenType.GREATER,
    ".": TokenType.DOT,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    "|": TokenType.BAR,
})

LITERAL_TYPES = frozenset({
    TokenType.NUMBER,
    TokenType.IDENTIFIER,
    TokenType.STRING,
})

KEYWORD_TYPES = frozenset(KEYWORDS.values())

WHITESPACE_CHARS = frozenset(" \t\n\r")

"""
GrantScript Lexer - turns source text into tokens

One left-to-right pass over an immutable source string with an advancing
index. Rules are tried in a fixed order: numbers, the lookahead operators
(= & !), strings, the ++/-- rewrite, single characters, words, whitespace.
Anything else stops the scan with UnrecognizedCharacterError.
"""

import logging
import string
from typing import List, Optional, Tuple

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, WHITESPACE_CHARS, eof_token
)
from .errors import (
    UnrecognizedCharacterError, UnterminatedStringError, DanglingIncrementError
)

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)
IDENTIFIER_START = frozenset(string.ascii_letters + "_")
IDENTIFIER_CONTINUE = frozenset(string.ascii_letters + string.digits + "_")


class Lexer:
    """
    GrantScript lexical analyzer.

    Converts source code text into a list of tokens terminated by an EOF
    token. With ``strict=True`` the two inputs the language tolerates
    silently (an unterminated string, ``++``/``--`` at the very start of
    input) raise LexerError subclasses instead.
    """

    def __init__(self, source: str, filename: str = "<unknown>", strict: bool = False):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file, used in log records
            strict: Reject unterminated strings and dangling ++/--
        """
        self.source = source
        self.filename = filename
        self.strict = strict
        self.pos = 0
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens, always ending with the EOF token

        Raises:
            UnrecognizedCharacterError: on the first character no rule accepts
            UnterminatedStringError: strict mode only
            DanglingIncrementError: strict mode only
        """
        self.pos = 0
        self.tokens = []

        while self.pos < len(self.source):
            self._scan_token()

        self.tokens.append(eof_token())
        logger.debug("%s: produced %d tokens", self.filename, len(self.tokens))
        return self.tokens

    def _scan_token(self):
        """Consume at least one character, appending zero or more tokens."""
        char = self.source[self.pos]

        if char in DIGITS or (char == "-" and self._peek() in DIGITS):
            self._scan_number()
        elif char == "=":
            self._scan_pair("=", ("is", TokenType.EQUALS_COMPARE), ("=", TokenType.EQUALS))
        elif char == "&":
            self._scan_pair("&", ("&&", TokenType.AND), ("&", TokenType.AMPERSAND))
        elif char == "!":
            self._scan_pair("=", ("!=", TokenType.NOT_EQUALS_COMPARE), ("!", TokenType.EXCLAMATION))
        elif char == '"':
            self._scan_string()
        elif char in "+-" and self._peek() == char:
            self._expand_increment(char)
        elif char in SINGLE_CHAR_TOKENS:
            self._advance()
            self._emit(char, SINGLE_CHAR_TOKENS[char])
        elif char in IDENTIFIER_START:
            self._scan_word()
        elif char in WHITESPACE_CHARS:
            self._advance()
        else:
            raise UnrecognizedCharacterError(char)

    def _scan_number(self):
        """
        Accumulate a numeric literal.

        At most one '.' belongs to a literal. A second '.' ends it; when a
        digit follows that '.', it begins the next literal ("3.14.5" gives
        "3.14" and ".5"), otherwise it is left for the DOT rule.
        """
        start = self.pos
        self._advance()  # first digit or leading '-'
        period = False

        while self.pos < len(self.source):
            current = self.source[self.pos]
            if current == "." and not period:
                period = True
                self._advance()
            elif current in DIGITS:
                self._advance()
            elif current == "." and self._peek() in DIGITS:
                # second period: close this literal and open the next one
                self._emit(self.source[start:self.pos], TokenType.NUMBER)
                start = self.pos
                self._advance()
            else:
                break

        self._emit(self.source[start:self.pos], TokenType.NUMBER)

    def _scan_pair(self, second: str, matched: Tuple[str, TokenType],
                   single: Tuple[str, TokenType]):
        """Emit `matched` if the next character is `second`, else `single`."""
        self._advance()
        if self._current() == second:
            self._advance()
            self._emit(*matched)
        else:
            self._emit(*single)

    def _scan_string(self):
        """Tokenize a string literal. Contents are taken verbatim."""
        self._advance()  # Skip opening quote
        start = self.pos

        while self.pos < len(self.source) and self.source[self.pos] != '"':
            self._advance()

        value = self.source[start:self.pos]

        if self.pos >= len(self.source):
            if self.strict:
                raise UnterminatedStringError(value)
            logger.debug("%s: unterminated string literal runs to end of input", self.filename)
        else:
            self._advance()  # Skip closing quote

        self._emit(value, TokenType.STRING)

    def _expand_increment(self, operator: str):
        """
        Rewrite `target++` as `= target + 1` (likewise for --).

        The target is whatever token came right before, copied as is.
        """
        self._advance_by(2)
        previous = self._previous_token()

        if previous is None:
            if self.strict:
                raise DanglingIncrementError(operator)
            logger.debug("%s: dropping '%s%s' with no preceding token",
                         self.filename, operator, operator)
            return

        self._emit("=", TokenType.EQUALS)
        self._emit(previous.value, previous.type)
        self._emit(operator, TokenType.BINARY_OPERATOR)
        self._emit("1", TokenType.NUMBER)
        logger.debug("%s: expanded '%s%s' on %s", self.filename, operator, operator, previous)

    def _scan_word(self):
        """Tokenize an identifier or keyword."""
        start = self.pos
        self._advance()

        while self.pos < len(self.source) and self.source[self.pos] in IDENTIFIER_CONTINUE:
            self._advance()

        lexeme = self.source[start:self.pos]
        self._emit(lexeme, KEYWORDS.get(lexeme, TokenType.IDENTIFIER))

    def _emit(self, value: str, token_type: TokenType):
        self.tokens.append(Token(value, token_type))

    def _previous_token(self) -> Optional[Token]:
        return self.tokens[-1] if self.tokens else None

    def _current(self) -> str:
        """Character at the cursor, or '' at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ""

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return ""

    def _advance(self):
        self.pos += 1

    def _advance_by(self, count: int):
        self.pos = min(self.pos + count, len(self.source))


def tokenize(source: str, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        strict: Reject unterminated strings and dangling ++/--

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, "<string>", strict=strict).tokenize()


def tokenize_file(filepath: str, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return Lexer(source, str(filepath), strict=strict).tokenize()


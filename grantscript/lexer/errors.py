"""
Error handling for the GrantScript lexer.

Every tokenizer failure is a LexerError carrying a Diagnostic, so embedding
callers can catch one exception type and still tell failures apart by class
or by diagnostic code. Source positions are not tracked, so diagnostics name
the offending text instead of a location.
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A single lexer diagnostic (error, warning, info)."""
    message: str
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            result = f"{severity_prefix}[{self.code}]: {self.message}\n"
        else:
            result = f"{severity_prefix}: {self.message}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a fatal error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnrecognizedCharacterError(LexerError):
    """A character that starts no token and is not whitespace."""

    def __init__(self, char: str):
        self.char = char
        self.code_point = ord(char)

        if char.isprintable():
            help_text = f"The character '{char}' is not valid in GrantScript source code."
        else:
            help_text = f"Non-printable character (U+{self.code_point:04X}) is not allowed."

        super().__init__(
            message=f"Unrecognized character found in source: {self.code_point} {char!r}",
            code="L001",
            help_text=help_text,
            suggestions=_suggest_for(char),
        )


class UnterminatedStringError(LexerError):
    """Raised in strict mode when input ends inside a string literal."""

    def __init__(self, partial: str):
        self.partial = partial
        preview = partial if len(partial) <= 20 else partial[:20] + "..."
        super().__init__(
            message=f"Unterminated string literal starting with {preview!r}",
            code="L002",
            help_text='String literals must be closed with a matching " quote.',
            suggestions=['Add a closing " quote'],
        )


class DanglingIncrementError(LexerError):
    """Raised in strict mode when ++ or -- has no preceding token to update."""

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(
            message=f"'{operator}{operator}' has no target before it",
            code="L003",
            help_text=f"Write the variable before '{operator}{operator}', as in 'x{operator}{operator}'.",
        )


# Characters people commonly type expecting an operator the language lacks
_CHAR_SUGGESTIONS = {
    "^": ["Use '*' repeatedly; there is no power operator"],
    "'": ['Use double quotes for string literals: "text"'],
    "#": ["Comments are not supported"],
    "~": ["Use '!' for logical negation"],
    "?": ["Use an 'if' / 'else' statement"],
}


def _suggest_for(char: str) -> List[str]:
    return list(_CHAR_SUGGESTIONS.get(char, []))


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unrecognized character",
    "L002": "Unterminated string literal",
    "L003": "Increment or decrement without a target",
}

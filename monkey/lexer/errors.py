"""
Error handling for the monkey lexer.

Every lexer failure is a ``LexerError`` carrying a ``Diagnostic``: the
message, the 0-based character offset it happened at, an error code and an
optional help line. Callers decide whether to stop or to resume scanning.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A single lexer diagnostic (errors and warnings share the shape)."""
    message: str
    position: int
    severity: str  # "error" or "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        code = f"[{self.code}] " if self.code else ""
        result = f"{severity_prefix}: {code}{self.message}\n"
        result += f"  --> position {self.position}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer cannot produce a token.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        position: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.position = position
        self.diagnostic = Diagnostic(
            message=message,
            position=position,
            severity="error",
            code=code,
            help_text=help_text,
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class IntegerOverflowError(LexerError):
    """A numeral whose value does not fit a signed 32-bit integer."""

    def __init__(self, lexeme: str, position: int, **kwargs):
        self.lexeme = lexeme
        super().__init__(
            message=f"Integer literal out of range: '{lexeme}'",
            position=position,
            code="L007",
            **kwargs,
        )


class UnexpectedCharacterError(LexerError):
    """A character that cannot start any token."""

    def __init__(self, char: str, position: int, **kwargs):
        self.char = char
        shown = char if char.isprintable() else f"U+{ord(char):04X}"
        super().__init__(
            message=f"Unexpected character: '{shown}'",
            position=position,
            code="L001",
            **kwargs,
        )


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L007": "Integer literal overflow",
}


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, position: int) -> UnexpectedCharacterError:
    """Create an error for a character that starts no token."""
    if not char.isprintable():
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."
    elif not char.isascii():
        help_text = "Only ASCII letters and digits may appear in identifiers and numbers."
    else:
        help_text = f"The character '{char}' is not valid in monkey source code."

    return UnexpectedCharacterError(char, position, help_text=help_text)


def create_integer_overflow_error(lexeme: str, position: int, limit: int) -> IntegerOverflowError:
    """Create an error for an integer literal above ``limit``."""
    return IntegerOverflowError(
        lexeme,
        position,
        help_text=f"Integer literals must not exceed {limit}.",
    )

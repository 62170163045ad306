"""
Token definitions for the monkey lexer.

This module defines every token kind the monkey language knows about:
- Literals (identifiers, integers, booleans)
- Keywords (let, fn, if, else)
- Operators and punctuation

It also holds the two lookup tables the lexer classifies with. Both tables
are read-only and map source text straight to a ready-made token, since
keyword and punctuation tokens carry no payload beyond their kind.
"""

from enum import Enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping


class TokenType(Enum):
    """
    Enumeration of all token kinds in monkey.

    The value of each member is its kind label, the left half of the
    canonical ``<kind, literal>`` rendering.
    """

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = "identifier"       # abc, x1
    INTEGER = "integer"             # 42 (signed 32-bit)
    BOOLEAN = "boolean"             # true, false

    # ========================================================================
    # Keywords
    # ========================================================================
    LET = "let"
    FN = "fn"
    IF = "if"
    ELSE = "else"

    # ========================================================================
    # Operators and Punctuation
    # ========================================================================
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    ASSIGN = "="
    EQUALS = "=="

    SEMICOLON = ";"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"

    @property
    def label(self) -> str:
        return self.value


LITERAL_TYPES = frozenset({TokenType.IDENTIFIER, TokenType.INTEGER, TokenType.BOOLEAN})
KEYWORD_TYPES = frozenset({TokenType.LET, TokenType.FN, TokenType.IF, TokenType.ELSE})

# Largest value an INTEGER token may carry (numerals are unsigned)
INT32_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class Token:
    """
    A lexical token of the monkey language.

    ``lexeme`` is the raw source text, ``value`` the parsed payload for
    literal-carrying kinds (str for identifiers, int for integers, bool for
    booleans) and ``None`` for keywords and punctuation.
    """
    type: TokenType
    lexeme: str
    value: Any = None

    @property
    def literal(self) -> str:
        """Text shown on the right side of the rendering."""
        if self.type == TokenType.BOOLEAN:
            return "true" if self.value else "false"
        if self.type in (TokenType.IDENTIFIER, TokenType.INTEGER):
            return str(self.value)
        return self.type.label

    def render(self) -> str:
        """Canonical ``<kind, literal>`` form used for inspection and tests."""
        return f"<{self.type.label}, {self.literal}>"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.name}, {self.lexeme!r})"
        return f"Token({self.type.name}, {self.lexeme!r}, {self.value!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword (booleans are literals, not keywords)."""
        return self.type in KEYWORD_TYPES

    @property
    def is_punctuation(self) -> bool:
        return not self.is_literal and not self.is_keyword

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER


def identifier(text: str) -> Token:
    return Token(TokenType.IDENTIFIER, text, text)


def integer(lexeme: str, value: int) -> Token:
    return Token(TokenType.INTEGER, lexeme, value)


def boolean(value: bool) -> Token:
    return Token(TokenType.BOOLEAN, "true" if value else "false", value)


def _fixed(token_type: TokenType) -> Token:
    return Token(token_type, token_type.label)


# Lookup tables used by the lexer. Tokens are frozen, so the same instance
# is handed out for every occurrence.

KEYWORDS: Mapping[str, Token] = MappingProxyType({
    "let": _fixed(TokenType.LET),
    "fn": _fixed(TokenType.FN),
    "if": _fixed(TokenType.IF),
    "else": _fixed(TokenType.ELSE),
    "true": boolean(True),
    "false": boolean(False),
})

PUNCTUATION: Mapping[str, Token] = MappingProxyType({
    "+": _fixed(TokenType.PLUS),
    "-": _fixed(TokenType.MINUS),
    "*": _fixed(TokenType.STAR),
    "/": _fixed(TokenType.SLASH),
    "=": _fixed(TokenType.ASSIGN),
    "==": _fixed(TokenType.EQUALS),
    ";": _fixed(TokenType.SEMICOLON),
    "(": _fixed(TokenType.LEFT_PAREN),
    ")": _fixed(TokenType.RIGHT_PAREN),
    "{": _fixed(TokenType.LEFT_BRACE),
    "}": _fixed(TokenType.RIGHT_BRACE),
})

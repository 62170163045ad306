"""
Monkey Lexer Package

Implements the lexical analyzer (tokenizer) for the monkey language: a
single-pass scanner over an in-memory string that produces identifiers,
32-bit integers, booleans, keywords and punctuation.

Key Features:
- Maximal munch for identifiers, keywords and integers
- Longest match for ``==`` over ``=``
- Explicit, resumable errors for overflowing numerals and stray characters
"""

from .tokens import Token, TokenType, KEYWORDS, PUNCTUATION
from .lexer import ErrorPolicy, Lexer, tokenize, tokenize_file
from .errors import (
    Diagnostic, IntegerOverflowError, LexerError, UnexpectedCharacterError
)

__all__ = [
    "Lexer",
    "ErrorPolicy",
    "Token",
    "TokenType",
    "KEYWORDS",
    "PUNCTUATION",
    "tokenize",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
    "IntegerOverflowError",
    "UnexpectedCharacterError",
]

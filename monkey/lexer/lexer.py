"""
Monkey lexer - turns source text into tokens

Scans a single immutable string with an index cursor. Each call to
``next_token`` skips whitespace and then dispatches on the lead character:
letters start identifiers/keywords, digits start integers, and everything
else goes through the punctuation table (``==`` is tried before ``=``).
"""

import logging
from enum import Enum
from typing import Callable, Iterator, List, Optional

from .tokens import (
    Token, KEYWORDS, PUNCTUATION, INT32_MAX, identifier, integer
)
from .errors import (
    LexerError, UnexpectedCharacterError, create_unexpected_character_error,
    create_integer_overflow_error
)

logger = logging.getLogger(__name__)

# Space, tab, LF, CR and form feed; vertical tab is not whitespace
ASCII_WHITESPACE = frozenset(" \t\n\r\f")

_INT32_MAX_DIGITS = len(str(INT32_MAX))


def _is_ascii_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


class ErrorPolicy(Enum):
    """What ``Lexer.tokenize`` does when the scanner hits a bad lexeme."""

    RAISE = "raise"         # propagate the first error
    COLLECT = "collect"     # record it, skip the lexeme, keep going
    TRUNCATE = "truncate"   # unexpected character ends the stream


class Lexer:
    """
    Monkey lexical analyzer.

    Converts source text into a list of tokens. The source is never copied
    or re-sliced while scanning; ``pos`` only moves forward.
    """

    def __init__(self, source: str, error_policy: ErrorPolicy = ErrorPolicy.RAISE):
        """
        Initialize the lexer with source code.

        Args:
            source: Source text to scan
            error_policy: How ``tokenize`` reacts to lexer errors
        """
        self.source = source
        self.error_policy = error_policy
        self.pos = 0
        self.errors: List[LexerError] = []

        self.keywords = KEYWORDS
        self.punctuation = PUNCTUATION

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens in source order (no end-of-file marker)

        Raises:
            LexerError: Under ``ErrorPolicy.RAISE``, the first error found.
                Integer overflow is raised under ``TRUNCATE`` as well.
        """
        self.pos = 0
        self.errors.clear()
        tokens: List[Token] = []

        while True:
            try:
                token = self.next_token()
            except LexerError as e:
                if not self._recover(e):
                    break
                continue

            if token is None:
                break
            tokens.append(token)

        logger.debug("Produced %d tokens from %d characters", len(tokens), len(self.source))
        return tokens

    def _recover(self, error: LexerError) -> bool:
        """Apply the error policy. Returns True if scanning should go on."""
        if self.error_policy == ErrorPolicy.COLLECT:
            self.errors.append(error)
            logger.warning("Skipping bad lexeme at position %d: %s", error.position, error.diagnostic.message)
            return True

        if self.error_policy == ErrorPolicy.TRUNCATE and isinstance(error, UnexpectedCharacterError):
            self.errors.append(error)
            logger.warning("Input truncated at position %d: %s", error.position, error.diagnostic.message)
            return False

        raise error

    def next_token(self) -> Optional[Token]:
        """
        Produce the next token, or ``None`` once the input is exhausted.

        A raised ``LexerError`` has already consumed the offending lexeme,
        so calling ``next_token`` again resumes right after it.
        """
        self._skip_whitespace()

        if self.at_end():
            return None

        current_char = self.source[self.pos]

        if _is_ascii_alpha(current_char):
            return self._chop_identifier_or_keyword()
        if _is_ascii_digit(current_char):
            return self._chop_integer()
        return self._chop_punctuation()

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def _chop_identifier_or_keyword(self) -> Token:
        start_pos = self.pos
        self.pos = self._scan_while(_is_ascii_alnum)
        lexeme = self.source[start_pos:self.pos]

        keyword = self.keywords.get(lexeme)
        if keyword is not None:
            return keyword
        return identifier(lexeme)

    def _chop_integer(self) -> Token:
        start_pos = self.pos
        self.pos = self._scan_while(_is_ascii_digit)
        lexeme = self.source[start_pos:self.pos]

        # Only the significant digits are parsed: int() refuses very long
        # digit strings, zero padding included
        significant = lexeme.lstrip("0")
        if len(significant) > _INT32_MAX_DIGITS:
            raise create_integer_overflow_error(lexeme, start_pos, INT32_MAX)

        value = int(significant) if significant else 0
        if value > INT32_MAX:
            raise create_integer_overflow_error(lexeme, start_pos, INT32_MAX)

        return integer(lexeme, value)

    def _chop_punctuation(self) -> Token:
        start_pos = self.pos

        if self.source.startswith("==", start_pos):
            self.pos += 2
            return self.punctuation["=="]

        char = self.source[start_pos]
        self.pos += 1
        token = self.punctuation.get(char)
        if token is None:
            raise create_unexpected_character_error(char, start_pos)
        return token

    def _skip_whitespace(self):
        self.pos = self._scan_while(ASCII_WHITESPACE.__contains__)

    def _scan_while(self, predicate: Callable[[str], bool]) -> int:
        """Index of the first character at or after ``pos`` failing ``predicate``."""
        end = self.pos
        while end < len(self.source) and predicate(self.source[end]):
            end += 1
        return end

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def has_errors(self) -> bool:
        """Check if the last ``tokenize`` recorded any errors."""
        return len(self.errors) > 0


def tokenize(source: str) -> List[Token]:
    """
    Tokenize ``source``, raising on the first lexer error.

    Raises:
        IntegerOverflowError: A numeral does not fit in 32 bits
        UnexpectedCharacterError: A character starts no token
    """
    return Lexer(source).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to a UTF-8 source file

    Raises:
        LexerError: If lexing fails
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize(source)

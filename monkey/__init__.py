"""
Monkey Interpreter Package

Front end of an interpreter for the monkey language. Only the first stage
exists so far:

    monkey/
    ├── lexer/           # Tokenization and lexical analysis
    └── repl.py          # Read-tokenize-print loop
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, tokenize

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",

    # Version info
    "__version__",
    "__license__",
]

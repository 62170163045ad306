"""
Interactive read-tokenize-print loop for monkey.

Reads one line at a time, runs the lexer over it and prints the rendered
tokens. Lexer errors are reported and the loop carries on with the next
line. Given a file path instead, tokenizes the whole file once.
"""

import logging
import os
import sys
from typing import Iterable, List, Optional, TextIO

from .lexer import LexerError, Token, tokenize, tokenize_file

PROMPT = ">> "
BANNER = "Welcome to monkey interpreter!\n"
LOG_LEVEL_ENV = "MONKEY_LOG_LEVEL"

logger = logging.getLogger(__name__)


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens as ``[<kind, literal>, ...]``."""
    return "[" + ", ".join(token.render() for token in tokens) + "]"


def resolve_log_level(name: Optional[str]) -> Optional[int]:
    """Numeric level for a level name such as ``debug``, or None if unknown."""
    if not name:
        return None
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def configure_logging() -> int:
    requested = os.environ.get(LOG_LEVEL_ENV)
    level = resolve_log_level(requested)
    unknown = bool(requested) and level is None
    if level is None:
        level = logging.WARNING

    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    if unknown:
        logger.warning("Unknown %s value %r, using WARNING", LOG_LEVEL_ENV, requested)
    return level


def run_repl(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    print(BANNER, file=stdout)

    while True:
        stdout.write(PROMPT)
        stdout.flush()

        try:
            line = stdin.readline()
        except KeyboardInterrupt:
            print("\nBye.", file=stdout)
            return 0

        # readline() returns "" only at end of input
        if line == "":
            print(file=stdout)
            return 0

        try:
            tokens = tokenize(line)
        except LexerError as e:
            logger.debug("Line rejected by lexer: %r", line)
            print(f"{type(e).__name__}: {e}", file=stderr, end="")
            continue

        print(format_tokens(tokens), file=stdout)


def run_file(path: str, stdout: TextIO, stderr: TextIO) -> int:
    try:
        tokens = tokenize_file(path)
    except OSError as e:
        print(f"error: cannot read {path}: {e}", file=stderr)
        return 1
    except LexerError as e:
        print(f"{path}: {type(e).__name__}: {e}", file=stderr, end="")
        return 1

    for token in tokens:
        print(token.render(), file=stdout)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    configure_logging()

    if len(args) > 1:
        print("usage: monkey [FILE]", file=sys.stderr)
        return 2
    if args:
        return run_file(args[0], sys.stdout, sys.stderr)
    return run_repl(sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())

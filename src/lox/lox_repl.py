"""
Lox REPL.

Reads one line at a time and runs it against a single `Lox` session, so the
error flags are reset per line while the interpreter persists.

Line handling:
    - `exit` / `quit`, Ctrl-C or EOF leave the loop.
    - Blank or comment-only lines are skipped.
    - A line that does not end in `;` and does not start with `print` is
      evaluated as one expression and its value is echoed.
    - Anything else runs as a sequence of statements.
"""

import logging

from lox.lox_scanner import scan
from lox.lox_session import Lox
from lox.lox_token import TokenKind

logger = logging.getLogger(__name__)

PROMPT = "> "
EXIT_COMMANDS = ("exit", "quit")


def is_bare_expression(src: str) -> bool:
    """True when the line is neither `;`-terminated nor a print statement."""
    tokens, _ = scan(src)
    meaningful = [t for t in tokens if t.kind is not TokenKind.EOF]
    if not meaningful or meaningful[0].kind is TokenKind.PRINT:
        return False
    return meaningful[-1].kind is not TokenKind.SEMICOLON


def is_blank(src: str) -> bool:
    tokens, errors = scan(src)
    return not errors and all(t.kind is TokenKind.EOF for t in tokens)


def run_line(lox: Lox, src: str) -> list[str]:
    if is_bare_expression(src):
        return lox.run_expression(src)
    return lox.run(src)


def start_repl(lox: Lox | None = None) -> None:
    lox = lox if lox is not None else Lox()
    print("Lox REPL. Type 'exit' or 'quit' to leave.", file=lox.out)

    while True:
        try:
            line = input(PROMPT)
        except (KeyboardInterrupt, EOFError):
            print("\nExiting Lox REPL.", file=lox.out)
            break

        src = line.strip()
        if src in EXIT_COMMANDS:
            print("Exiting Lox REPL.", file=lox.out)
            return
        if is_blank(src):
            continue

        errors = run_line(lox, src)
        logger.debug("line %r finished with %d error(s)", src, len(errors))


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()

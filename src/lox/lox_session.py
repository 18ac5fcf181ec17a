"""
Lox driver session.

A `Lox` object runs source text through the full pipeline
(scan → parse → interpret) and owns the error state that the command line
and the REPL use to pick exit codes or keep prompting.

Error state is explicit: `had_error` (scan/parse) and `had_runtime_error`
are reset at the start of every `run()` call, so a REPL line never inherits
the failure of the previous one.

Example:
    >>> lox = Lox()
    >>> lox.run('print "hi";')
    hi
    []

Functions:
    Lox.run(source) -> list[str]: Run a program, returning formatted errors.
    Lox.run_expression(source) -> list[str]: Evaluate one expression and echo it.
    Lox.run_file(path) -> int: Run a file and return the process exit code.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from lox.lox_constants import EXIT_DATAERR, EXIT_OK, EXIT_SOFTWARE
from lox.lox_errors import LoxError, LoxRuntimeError
from lox.lox_interpreter import Interpreter
from lox.lox_parser import Parser
from lox.lox_scanner import scan
from lox.lox_values import stringify

logger = logging.getLogger(__name__)


class Lox:
    """Runs Lox source and reports errors.

    Attributes:
        out (IO[str]): Program output (print statements, REPL echo).
        err (IO[str]): Error output, one formatted line per error.
        interpreter (Interpreter): Evaluator writing to `out`.
        had_error (bool): A scan or parse error occurred during the last run.
        had_runtime_error (bool): A runtime error occurred during the last run.
    """

    def __init__(self, out: IO[str] | None = None, err: IO[str] | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.interpreter = Interpreter(self.out)
        self.had_error = False
        self.had_runtime_error = False

    def reset(self) -> None:
        self.had_error = False
        self.had_runtime_error = False

    def run(self, source: str) -> list[str]:
        """Scan, parse and execute a program of statements."""
        self.reset()
        tokens, scan_errors = scan(source)
        statements, parse_errors = Parser(tokens).parse()
        logger.debug(
            "scanned %d tokens, parsed %d statements", len(tokens), len(statements)
        )

        errors: list[LoxError] = [*scan_errors, *parse_errors]
        if errors:
            return self.report(errors)

        runtime_error = self.interpreter.interpret(statements)
        if runtime_error is not None:
            return self.report([runtime_error])
        return []

    def run_expression(self, source: str) -> list[str]:
        """Evaluate a single bare expression and echo its value to `out`."""
        self.reset()
        tokens, scan_errors = scan(source)
        expr, parse_errors = Parser(tokens).parse_expression()
        logger.debug("scanned %d tokens for expression", len(tokens))

        errors: list[LoxError] = [*scan_errors, *parse_errors]
        if errors or expr is None:
            return self.report(errors)

        try:
            value = self.interpreter.evaluate(expr)
        except LoxRuntimeError as e:
            return self.report([e])
        print(stringify(value), file=self.out)
        return []

    def run_file(self, path: str) -> int:
        """Run the file at `path` and map the outcome to a sysexits code."""
        with open(path, encoding="utf-8") as f:
            source = f.read()
        self.run(source)
        return self.exit_code()

    def exit_code(self) -> int:
        if self.had_error:
            return EXIT_DATAERR
        if self.had_runtime_error:
            return EXIT_SOFTWARE
        return EXIT_OK

    def report(self, errors: list[LoxError]) -> list[str]:
        """Print each error on its own line and update the error flags."""
        lines = []
        for error in errors:
            if isinstance(error, LoxRuntimeError):
                self.had_runtime_error = True
            else:
                self.had_error = True
            lines.append(str(error))
            print(str(error), file=self.err)
        logger.debug("reported %d error(s)", len(lines))
        return lines


__all__ = ["Lox"]

"""
Lox CLI Entrypoint.

This module provides the command-line interface for running Lox source code.

Features:
    - Run a `.lox` file or an inline source string.
    - Dump the front-end product (tokens, AST, RPN, or JSON) instead of executing.
    - Launch an interactive REPL when no source is given.

Example usage:
    lox hello.lox
    lox -s 'print 1 + 2;'
    lox -s '-123 * (45.67);' --dump ast
    lox --repl --verbose

Exit codes follow sysexits: 0 on success, 64 for bad usage, 65 for scan or
parse errors or undecodable files, 70 for runtime errors.

Functions:
    dump(source, mode, out, err) -> int:
        Scans and parses `source` and writes the requested representation.
    main(argv) -> int:
        Parses CLI arguments and dispatches to the REPL, a dump, or execution.
"""

import argparse
import json
import logging
import sys
from typing import IO

from lox.lox_constants import EXIT_DATAERR, EXIT_OK, EXIT_USAGE
from lox.lox_parser import Parser
from lox.lox_printer import AstPrinter, RpnPrinter
from lox.lox_repl import start_repl
from lox.lox_scanner import scan
from lox.lox_session import Lox

DUMP_MODES = ("tokens", "ast", "rpn", "json")


def dump(source: str, mode: str, out: IO[str], err: IO[str]) -> int:
    """
    Write the tokens or the parsed statements of `source` in the given form.

    Args:
        source (str): Lox source text.
        mode (str): One of "tokens", "ast", "rpn", "json".
        out (IO[str]): Destination for the dump.
        err (IO[str]): Destination for formatted scan/parse errors.

    Returns:
        int: EXIT_OK, or EXIT_DATAERR if any scan or parse error occurred.
    """
    if mode not in DUMP_MODES:
        raise ValueError(f"Unknown dump mode: {mode!r}")

    tokens, scan_errors = scan(source)
    if mode == "tokens":
        for tok in tokens:
            print(repr(tok), file=out)
        for error in scan_errors:
            print(str(error), file=err)
        return EXIT_DATAERR if scan_errors else EXIT_OK

    statements, parse_errors = Parser(tokens).parse()
    errors = [*scan_errors, *parse_errors]
    for error in errors:
        print(str(error), file=err)
    if errors:
        return EXIT_DATAERR

    if mode == "json":
        print(json.dumps([s.to_dict() for s in statements], indent=2), file=out)
    else:
        printer = AstPrinter() if mode == "ast" else RpnPrinter()
        for stmt in statements:
            print(printer.print(stmt), file=out)
    return EXIT_OK


def read_source(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lox")
    parser.add_argument("source", nargs="?", help="Script path or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-d",
        "--dump",
        choices=DUMP_MODES,
        help="Print tokens, AST, RPN or JSON instead of executing",
    )
    parser.add_argument(
        "--repl", action="store_true", help="Launch the interactive REPL"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the Lox CLI.

    - Launches the REPL if no source is given or `--repl` is specified.
    - Otherwise runs (or dumps) the file or string passed as `source`.
    """
    args = build_arg_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    if args.repl or args.source is None:
        if args.string:
            print("lox: --string requires a source argument", file=sys.stderr)
            return EXIT_USAGE
        start_repl()
        return EXIT_OK

    lox = Lox()
    try:
        if args.dump:
            source = args.source if args.string else read_source(args.source)
            return dump(source, args.dump, sys.stdout, sys.stderr)
        if args.string:
            lox.run(args.source)
            return lox.exit_code()
        return lox.run_file(args.source)
    except OSError as e:
        print(f"lox: cannot read {args.source}: {e.strerror}", file=sys.stderr)
        return EXIT_USAGE
    except UnicodeDecodeError as e:
        print(f"lox: {args.source} is not valid UTF-8: {e.reason}", file=sys.stderr)
        return EXIT_DATAERR


if __name__ == "__main__":
    sys.exit(main())

import builtins
from collections.abc import Iterator
from typing import Any

import pytest

from lox.lox_repl import is_bare_expression, is_blank, run_line, start_repl


def feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it: Iterator[str] = iter(lines)

    def fake_input(_: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_repl_quit(monkeypatch: pytest.MonkeyPatch, lox: Any, streams: Any) -> None:
    feed(monkeypatch, ["quit"])
    start_repl(lox)
    assert "Exiting Lox REPL" in streams.output()


def test_repl_exit(monkeypatch: pytest.MonkeyPatch, lox: Any, streams: Any) -> None:
    feed(monkeypatch, ["exit"])
    start_repl(lox)
    assert "Exiting Lox REPL" in streams.output()


def test_repl_eof_exits(monkeypatch: pytest.MonkeyPatch, lox: Any, streams: Any) -> None:
    feed(monkeypatch, [])
    start_repl(lox)
    assert streams.output().rstrip().endswith("Exiting Lox REPL.")


def test_repl_keyboard_interrupt(
    monkeypatch: pytest.MonkeyPatch, lox: Any, streams: Any
) -> None:
    def interrupt(_: str) -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr(builtins, "input", interrupt)
    start_repl(lox)
    assert "Exiting Lox REPL" in streams.output()


def test_repl_echoes_expressions_and_runs_statements(
    monkeypatch: pytest.MonkeyPatch, lox: Any, streams: Any
) -> None:
    feed(monkeypatch, ["1 + 2", 'print "x";', "   ", "// only a comment", "nil ? 1 : 2"])
    start_repl(lox)
    lines = streams.output().splitlines()
    assert lines[1:4] == ["3", "x", "2"]
    assert streams.errors() == []


def test_repl_continues_after_errors(
    monkeypatch: pytest.MonkeyPatch, lox: Any, streams: Any
) -> None:
    feed(monkeypatch, ['-"a"', "print (;", "print 5;"])
    start_repl(lox)
    assert streams.errors() == [
        "[line 1] Error at '-': Operand must be a number.",
        "[line 1] Error at ';': Expect expression.",
    ]
    assert "5" in streams.output().splitlines()
    assert not lox.had_error


def test_is_bare_expression() -> None:
    assert is_bare_expression("1 + 2")
    assert not is_bare_expression("print 1;")
    assert not is_bare_expression("")
    assert not is_bare_expression("// comment")
    assert not is_bare_expression("print 1")


def test_print_without_semicolon_reports_missing_semicolon(
    lox: Any, streams: Any
) -> None:
    assert run_line(lox, "print 1") == [
        "[line 1] Error at end: Expect ';' after value."
    ]
    assert streams.output() == ""
    assert lox.had_error


def test_is_blank() -> None:
    assert is_blank("")
    assert is_blank("/* note */")
    assert not is_blank("1")
    assert not is_blank("@")


def test_run_line_dispatch(lox: Any, streams: Any) -> None:
    assert run_line(lox, "2 * 2") == []
    assert run_line(lox, "2 * 2;") == []
    assert streams.output() == "4\n"

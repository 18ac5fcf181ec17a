"""
Error records for the three Lox pipeline stages.

Each error pairs a human-readable message with positional context and renders
itself as the single user-visible line::

    [line {N}] Error{context}: {message}

where ``context`` is empty for scan errors, ``" at end"`` when the offending
token is EOF, and ``" at '{lexeme}'"`` otherwise.

Classes:
    LoxError: Common base carrying line, message and optional token.
    ScanError: Malformed lexical input. Collected by the scanner, never raised out of it.
    ParseError: Grammar violation anchored at the offending token.
    LoxRuntimeError: Operand type mismatch found while evaluating.
"""

from __future__ import annotations

from lox.lox_token import Token


class LoxError(Exception):
    """Base class for every error produced by the Lox front end and evaluator.

    Attributes:
        message (str): Description of what went wrong.
        line (int): Source line the error refers to.
        token (Token | None): The offending token, when one is known.
    """

    def __init__(self, message: str, line: int, token: Token | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.token = token

    @property
    def where(self) -> str:
        if self.token is None:
            return ""
        if self.token.is_eof:
            return " at end"
        return f" at '{self.token.lexeme}'"

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, line={self.line})"

    def __eq__(self, other: object) -> bool:
        return (
            type(self) is type(other)
            and isinstance(other, LoxError)
            and self.message == other.message
            and self.line == other.line
            and self.token == other.token
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.message, self.line, self.token))


class ScanError(LoxError):
    def __init__(self, message: str, line: int) -> None:
        super().__init__(message, line)


class ParseError(LoxError):
    def __init__(self, token: Token, message: str) -> None:
        super().__init__(message, token.line, token)


class LoxRuntimeError(LoxError):
    def __init__(self, token: Token, message: str) -> None:
        super().__init__(message, token.line, token)


__all__ = ["LoxError", "LoxRuntimeError", "ParseError", "ScanError"]

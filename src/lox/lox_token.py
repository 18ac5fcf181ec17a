"""
Token model for the Lox expression language.

Classes:
    TokenKind: Closed enumeration of every token category the scanner can emit.
    Token: Immutable record of one lexeme with its kind, literal payload and line.

A token is created once by the scanner and never mutated afterwards. Tokens are
small value objects: they compare and hash by content, so tests and the parser
can copy or rebuild them freely.

Example:
    >>> Token(TokenKind.NUMBER, "1", 1.0, 1)
    Token(NUMBER, '1', 1.0, line=1)

Exports:
    - TokenKind
    - Token
    - Literal
"""

from enum import Enum, auto
from typing import Any, Union

Literal = Union[None, bool, float, str]
"""Scanning-time literal payload: absent, boolean, 64-bit float, or text."""


class TokenKind(Enum):
    # Single-character punctuation
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()
    QUESTION = auto()
    COLON = auto()

    # One or two character operators
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    FUN = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()

    def __str__(self) -> str:
        return self.name


class Token:
    """Represents a single lexical token.

    Attributes:
        kind (TokenKind): The token category.
        lexeme (str): The exact source text that produced the token.
        literal (Literal): The parsed payload for NUMBER and STRING tokens, else None.
        line (int): The 1-based source line the token ends on.
    """

    __slots__ = ("kind", "lexeme", "literal", "line")

    def __init__(
        self, kind: TokenKind, lexeme: str, literal: Literal = None, line: int = 1
    ) -> None:
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "lexeme", lexeme)
        object.__setattr__(self, "literal", literal)
        object.__setattr__(self, "line", line)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Token is immutable; cannot set {name!r}")

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.lexeme!r}, {self.literal!r}, line={self.line})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.kind == other.kind
            and self.lexeme == other.lexeme
            and type(self.literal) is type(other.literal)
            and self.literal == other.literal
            and self.line == other.line
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.lexeme, self.literal, self.line))

    @property
    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF


__all__ = ["Literal", "Token", "TokenKind"]

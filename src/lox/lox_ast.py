"""
Defines the abstract syntax tree (AST) node structure for the Lox expression language.

Expression nodes:
    Binary, Grouping, Literal, Ternary, Unary

Statement nodes:
    Expression, Print

Every node is a frozen dataclass that exclusively owns its children, so a
parsed tree is a strict tree: no sharing, no cycles, never mutated after the
parser builds it. Each class exposes a `kind` string that printers and the
interpreter use to pick a handler method by name.

Serialization:
    `to_dict()` converts a node and all its descendants into plain dictionaries
    (shaped by the `TypedDict`s below) for JSON output or debugging.

Example:
    Binary(Literal(1.0), Token(TokenKind.PLUS, "+", None, 1), Literal(2.0))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, TypedDict, Union

from lox.lox_token import Literal as LiteralValue
from lox.lox_token import Token


class TokenDict(TypedDict):
    kind: str
    lexeme: str
    line: int


class NodeDict(TypedDict, total=False):
    """
    Serialized form of an AST node.

    Fields:
        kind (str): The node kind (e.g. "binary", "literal", "print").
        operator (TokenDict): Operator token for binary and unary nodes.
        value (Any): Literal payload for literal nodes.
        left, mid, right, expression (NodeDict): Child nodes, by role.
    """

    kind: str
    operator: TokenDict
    value: Any
    left: "NodeDict"
    mid: "NodeDict"
    right: "NodeDict"
    expression: "NodeDict"


def token_to_dict(token: Token) -> TokenDict:
    return {"kind": token.kind.name, "lexeme": token.lexeme, "line": token.line}


@dataclass(frozen=True)
class Binary:
    left: Expr
    operator: Token
    right: Expr

    kind: ClassVar[str] = "binary"

    def to_dict(self) -> NodeDict:
        return {
            "kind": self.kind,
            "left": self.left.to_dict(),
            "operator": token_to_dict(self.operator),
            "right": self.right.to_dict(),
        }


@dataclass(frozen=True)
class Grouping:
    expression: Expr

    kind: ClassVar[str] = "grouping"

    def to_dict(self) -> NodeDict:
        return {"kind": self.kind, "expression": self.expression.to_dict()}


@dataclass(frozen=True)
class Literal:
    """A constant carried from the scanner. `None` stands for `nil`."""

    value: LiteralValue

    kind: ClassVar[str] = "literal"

    def to_dict(self) -> NodeDict:
        return {"kind": self.kind, "value": self.value}


@dataclass(frozen=True)
class Ternary:
    """`left ? mid : right`; `left` is the condition."""

    left: Expr
    mid: Expr
    right: Expr

    kind: ClassVar[str] = "ternary"

    def to_dict(self) -> NodeDict:
        return {
            "kind": self.kind,
            "left": self.left.to_dict(),
            "mid": self.mid.to_dict(),
            "right": self.right.to_dict(),
        }


@dataclass(frozen=True)
class Unary:
    operator: Token
    right: Expr

    kind: ClassVar[str] = "unary"

    def to_dict(self) -> NodeDict:
        return {
            "kind": self.kind,
            "operator": token_to_dict(self.operator),
            "right": self.right.to_dict(),
        }


@dataclass(frozen=True)
class Expression:
    """Statement that evaluates an expression and discards the result."""

    expression: Expr

    kind: ClassVar[str] = "expression"

    def to_dict(self) -> NodeDict:
        return {"kind": self.kind, "expression": self.expression.to_dict()}


@dataclass(frozen=True)
class Print:
    expression: Expr

    kind: ClassVar[str] = "print"

    def to_dict(self) -> NodeDict:
        return {"kind": self.kind, "expression": self.expression.to_dict()}


Expr = Union[Binary, Grouping, Literal, Ternary, Unary]
Stmt = Union[Expression, Print]

EXPR_TYPES: tuple[type, ...] = (Binary, Grouping, Literal, Ternary, Unary)
STMT_TYPES: tuple[type, ...] = (Expression, Print)


__all__ = [
    "Binary",
    "Expr",
    "Expression",
    "Grouping",
    "Literal",
    "NodeDict",
    "Print",
    "Stmt",
    "Ternary",
    "Unary",
]

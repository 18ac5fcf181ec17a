"""
Lox Language Parser

Turns the scanner's token list into abstract syntax trees (ASTs) by recursive
descent over a precedence ladder.

Grammar
-------
Lowest to highest precedence::

    statement   → "print" expression ";" | expression ";"
    expression  → comma
    comma       → ternary ( "," ternary )*
    ternary     → equality ( "?" expression ":" ternary )?
    equality    → comparison ( ( "!=" | "==" ) comparison )*
    comparison  → term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        → factor ( ( "-" | "+" ) factor )*
    factor      → unary ( ( "/" | "*" ) unary )*
    unary       → ( "!" | "-" ) unary | primary
    primary     → "false" | "true" | "nil" | NUMBER | STRING | "(" expression ")"

Binary levels loop and fold to the left, so `1 - 2 - 3` is `(1 - 2) - 3`.
The ternary recurses on its else branch, so `a ? b : c ? d : e` is
`a ? b : (c ? d : e)`.

Error Recovery
--------------
Rule methods raise `ParseError` anchored at the token that could not be
consumed. `parse()` catches it per statement, records it and synchronizes:
tokens are discarded until just after a `;`, or until the next token starts a
statement, or until EOF. One broken statement therefore yields one error and
parsing continues with the next one.

`parse_expression()` parses a single bare expression (REPL mode). There is
no statement boundary to recover at, so the first error aborts the parse.

Entry Points
------------
- `Parser.parse()` -> (list[Stmt], list[ParseError])
- `Parser.parse_expression()` -> (Expr | None, list[ParseError])
- `parse(tokens)` / `parse_expression(tokens)` module-level shortcuts
"""

from __future__ import annotations

from typing import Callable

from lox.lox_ast import (
    Binary,
    Expr,
    Expression,
    Grouping,
    Literal,
    Print,
    Stmt,
    Ternary,
    Unary,
)
from lox.lox_constants import STATEMENT_STARTS
from lox.lox_errors import ParseError
from lox.lox_token import Token, TokenKind


class Parser:
    """
    Lox Parser Class

    Consumes a token list (which must end with an EOF token) and produces
    statements or a single expression. A parser is single-use and owns its
    cursor; build a fresh one per token list.

    Attributes
    ----------
    tokens : list[Token]
        The input token stream.
    position : int
        Index of the next unconsumed token.
    errors : list[ParseError]
        Errors recorded during `parse()`.
    """

    EQUALITY_OPS = (TokenKind.BANG_EQUAL, TokenKind.EQUAL_EQUAL)
    COMPARISON_OPS = (
        TokenKind.GREATER,
        TokenKind.GREATER_EQUAL,
        TokenKind.LESS,
        TokenKind.LESS_EQUAL,
    )
    TERM_OPS = (TokenKind.MINUS, TokenKind.PLUS)
    FACTOR_OPS = (TokenKind.SLASH, TokenKind.STAR)
    UNARY_OPS = (TokenKind.BANG, TokenKind.MINUS)

    def __init__(self, tokens: list[Token]) -> None:
        if not tokens or not tokens[-1].is_eof:
            raise ValueError("Token list must end with an EOF token")
        self.tokens: list[Token] = tokens
        self.position: int = 0
        self.errors: list[ParseError] = []

    # Entry points

    def parse(self) -> tuple[list[Stmt], list[ParseError]]:
        """Parse every statement, recovering after each syntax error."""
        statements: list[Stmt] = []
        while not self.is_at_end():
            try:
                statements.append(self.statement())
            except ParseError as e:
                self.errors.append(e)
                self.synchronize()
        return statements, self.errors

    def parse_expression(self) -> tuple[Expr | None, list[ParseError]]:
        """Parse exactly one expression spanning the whole token list."""
        try:
            expr = self.expression()
            if not self.is_at_end():
                raise ParseError(self.current(), "Expect end of expression.")
        except ParseError as e:
            self.errors.append(e)
            return None, self.errors
        return expr, self.errors

    # Statements

    def statement(self) -> Stmt:
        if self.match(TokenKind.PRINT):
            return self.print_statement()
        return self.expression_statement()

    def print_statement(self) -> Stmt:
        value = self.expression()
        self.consume(TokenKind.SEMICOLON, "Expect ';' after value.")
        return Print(value)

    def expression_statement(self) -> Stmt:
        expr = self.expression()
        self.consume(TokenKind.SEMICOLON, "Expect ';' after expression.")
        return Expression(expr)

    # Expressions, lowest precedence first

    def expression(self) -> Expr:
        return self.comma()

    def comma(self) -> Expr:
        expr = self.ternary()
        while self.match(TokenKind.COMMA):
            operator = self.previous()
            right = self.ternary()
            expr = Binary(expr, operator, right)
        return expr

    def ternary(self) -> Expr:
        condition = self.equality()
        if self.match(TokenKind.QUESTION):
            then_branch = self.expression()
            self.consume(
                TokenKind.COLON, "Expect ':' after then branch of conditional expression."
            )
            else_branch = self.ternary()
            return Ternary(condition, then_branch, else_branch)
        return condition

    def equality(self) -> Expr:
        return self.binary_level(self.comparison, self.EQUALITY_OPS)

    def comparison(self) -> Expr:
        return self.binary_level(self.term, self.COMPARISON_OPS)

    def term(self) -> Expr:
        return self.binary_level(self.factor, self.TERM_OPS)

    def factor(self) -> Expr:
        return self.binary_level(self.unary, self.FACTOR_OPS)

    def binary_level(
        self, operand: Callable[[], Expr], operators: tuple[TokenKind, ...]
    ) -> Expr:
        """Fold `operand (op operand)*` into a left-leaning Binary chain."""
        expr = operand()
        while self.match(*operators):
            operator = self.previous()
            right = operand()
            expr = Binary(expr, operator, right)
        return expr

    def unary(self) -> Expr:
        if self.match(*self.UNARY_OPS):
            operator = self.previous()
            return Unary(operator, self.unary())
        return self.primary()

    def primary(self) -> Expr:
        if self.match(TokenKind.FALSE):
            return Literal(False)
        if self.match(TokenKind.TRUE):
            return Literal(True)
        if self.match(TokenKind.NIL):
            return Literal(None)
        if self.match(TokenKind.NUMBER, TokenKind.STRING):
            return Literal(self.previous().literal)
        if self.match(TokenKind.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenKind.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)
        raise ParseError(self.current(), "Expect expression.")

    # Cursor helpers

    def current(self) -> Token:
        return self.tokens[self.position]

    def previous(self) -> Token:
        return self.tokens[self.position - 1]

    def is_at_end(self) -> bool:
        return self.current().is_eof

    def check(self, kind: TokenKind) -> bool:
        return not self.is_at_end() and self.current().kind is kind

    def advance(self) -> Token:
        if not self.is_at_end():
            self.position += 1
        return self.previous()

    def match(self, *kinds: TokenKind) -> bool:
        """Consume the current token if it is one of `kinds`."""
        for kind in kinds:
            if self.check(kind):
                self.advance()
                return True
        return False

    def consume(self, kind: TokenKind, message: str) -> Token:
        if self.check(kind):
            return self.advance()
        raise ParseError(self.current(), message)

    def synchronize(self) -> None:
        """Discard tokens up to the next statement boundary."""
        self.advance()
        while not self.is_at_end():
            if self.previous().kind is TokenKind.SEMICOLON:
                return
            if self.current().kind in STATEMENT_STARTS:
                return
            self.advance()


def parse(tokens: list[Token]) -> tuple[list[Stmt], list[ParseError]]:
    return Parser(tokens).parse()


def parse_expression(tokens: list[Token]) -> tuple[Expr | None, list[ParseError]]:
    return Parser(tokens).parse_expression()


__all__ = ["Parser", "parse", "parse_expression"]

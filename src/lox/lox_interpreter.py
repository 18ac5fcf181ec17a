"""
Tree-walking evaluator for Lox ASTs.

The `Interpreter` reduces an expression to a runtime `Value` and executes the
two statement shapes:

    - Expression statements evaluate and discard their value.
    - Print statements write the displayed value and a newline to `out`.

Semantics:
    - Operands evaluate strictly left to right.
    - `>`, `>=`, `<`, `<=`, `-`, `/`, `*` need two numbers.
    - `+` adds two numbers or concatenates two strings.
    - `==` / `!=` use structural equality; mixed types are simply unequal.
    - `,` evaluates its left operand, discards it and yields the right one.
    - `?:` evaluates the condition and then only the selected branch.
    - Division by zero follows IEEE floats (inf / nan), it is not an error.

Raises:
    LoxRuntimeError: From `evaluate()`/`execute()` on an operand type
        mismatch. `interpret()` catches it and returns it instead.
"""

from __future__ import annotations

import math
import operator
import sys
from typing import IO, Any, Callable

from lox.lox_ast import (
    EXPR_TYPES,
    STMT_TYPES,
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
from lox.lox_errors import LoxRuntimeError
from lox.lox_token import Token, TokenKind
from lox.lox_values import (
    Value,
    VBool,
    VNumber,
    VString,
    from_literal,
    is_equal,
    is_truthy,
    stringify,
)


def divide(a: float, b: float) -> float:
    """IEEE division: `x / 0` is a signed infinity and `0 / 0` is NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


NUMERIC_OPS: dict[TokenKind, Callable[[float, float], Any]] = {
    TokenKind.GREATER: operator.gt,
    TokenKind.GREATER_EQUAL: operator.ge,
    TokenKind.LESS: operator.lt,
    TokenKind.LESS_EQUAL: operator.le,
    TokenKind.MINUS: operator.sub,
    TokenKind.SLASH: divide,
    TokenKind.STAR: operator.mul,
}


class Interpreter:
    """Evaluates expressions and executes statements.

    Attributes:
        out (IO[str]): Where print statements write. Defaults to stdout.
    """

    def __init__(self, out: IO[str] | None = None) -> None:
        self.out = out if out is not None else sys.stdout

    def interpret(self, statements: list[Stmt]) -> LoxRuntimeError | None:
        """Execute `statements` in order, stopping at the first runtime error.

        Returns:
            The runtime error that stopped execution, or None on success.
        """
        try:
            for stmt in statements:
                self.execute(stmt)
        except LoxRuntimeError as e:
            return e
        return None

    def execute(self, stmt: Stmt) -> None:
        if not isinstance(stmt, STMT_TYPES):
            raise TypeError(f"Expected a statement node, got {stmt!r}")
        getattr(self, f"exec_{stmt.kind}")(stmt)

    def evaluate(self, expr: Expr) -> Value:
        if not isinstance(expr, EXPR_TYPES):
            raise TypeError(f"Expected an expression node, got {expr!r}")
        return getattr(self, f"eval_{expr.kind}")(expr)

    # Statements

    def exec_expression(self, stmt: Expression) -> None:
        self.evaluate(stmt.expression)

    def exec_print(self, stmt: Print) -> None:
        value = self.evaluate(stmt.expression)
        print(stringify(value), file=self.out)

    # Expressions

    def eval_literal(self, expr: Literal) -> Value:
        return from_literal(expr.value)

    def eval_grouping(self, expr: Grouping) -> Value:
        return self.evaluate(expr.expression)

    def eval_unary(self, expr: Unary) -> Value:
        right = self.evaluate(expr.right)
        kind = expr.operator.kind

        if kind is TokenKind.BANG:
            return VBool(not is_truthy(right))
        if kind is TokenKind.MINUS:
            return VNumber(-self.number_operand(expr.operator, right))
        raise TypeError(f"Unknown unary operator: {expr.operator!r}")

    def eval_binary(self, expr: Binary) -> Value:
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        op = expr.operator
        kind = op.kind

        if kind in NUMERIC_OPS:
            a, b = self.number_operands(op, left, right)
            result = NUMERIC_OPS[kind](a, b)
            return VBool(result) if isinstance(result, bool) else VNumber(result)
        if kind is TokenKind.PLUS:
            if isinstance(left, VNumber) and isinstance(right, VNumber):
                return VNumber(left.value + right.value)
            if isinstance(left, VString) and isinstance(right, VString):
                return VString(left.value + right.value)
            raise LoxRuntimeError(op, "Operands must be two numbers or two strings.")
        if kind is TokenKind.EQUAL_EQUAL:
            return VBool(is_equal(left, right))
        if kind is TokenKind.BANG_EQUAL:
            return VBool(not is_equal(left, right))
        if kind is TokenKind.COMMA:
            return right
        raise TypeError(f"Unknown binary operator: {op!r}")

    def eval_ternary(self, expr: Ternary) -> Value:
        if is_truthy(self.evaluate(expr.left)):
            return self.evaluate(expr.mid)
        return self.evaluate(expr.right)

    # Operand checks

    @staticmethod
    def number_operand(op: Token, operand: Value) -> float:
        if isinstance(operand, VNumber):
            return operand.value
        raise LoxRuntimeError(op, "Operand must be a number.")

    @staticmethod
    def number_operands(op: Token, left: Value, right: Value) -> tuple[float, float]:
        if isinstance(left, VNumber) and isinstance(right, VNumber):
            return left.value, right.value
        raise LoxRuntimeError(op, "Operands must be two numbers.")


def evaluate(expr: Expr) -> Value:
    """Evaluate a single expression with a fresh interpreter."""
    return Interpreter().evaluate(expr)


__all__ = ["Interpreter", "divide", "evaluate"]

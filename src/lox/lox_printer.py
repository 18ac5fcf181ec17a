"""
Debug renderers for Lox ASTs.

Classes:
    - AstPrinter: Parenthesized prefix form, e.g. `(* (- 123) (group 45.67))`.
    - RpnPrinter: Reverse Polish form, e.g. `-123 45.67 *`.

Both printers walk the tree read-only and dispatch to a `print_<kind>` method
per node kind. String literals are double-quoted so they stay distinguishable
from identifiers and keywords in the output.

Raises:
    NotImplementedError: If a node kind has no matching `print_*` method.
"""

from lox.lox_ast import Binary, Expression, Grouping, Literal, Print, Ternary, Unary
from lox.lox_token import Literal as LiteralValue
from lox.lox_values import format_number


def literal_text(value: LiteralValue) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    return f'"{value}"'


class Printer:
    """Dispatches a node to the `print_<kind>` method of the concrete printer."""

    def print(self, node: object) -> str:
        kind = getattr(node, "kind", None)
        method_name = f"print_{kind}"
        if kind is None or not hasattr(self, method_name):
            raise NotImplementedError(
                f"{type(self).__name__} has no printer for node {node!r}"
            )
        return str(getattr(self, method_name)(node))

    def print_literal(self, node: Literal) -> str:
        return literal_text(node.value)


class AstPrinter(Printer):
    def parenthesize(self, name: str, *nodes: object) -> str:
        parts = [name] + [self.print(n) for n in nodes]
        return "(" + " ".join(parts) + ")"

    def print_binary(self, node: Binary) -> str:
        return self.parenthesize(node.operator.lexeme, node.left, node.right)

    def print_grouping(self, node: Grouping) -> str:
        return self.parenthesize("group", node.expression)

    def print_ternary(self, node: Ternary) -> str:
        return self.parenthesize("?:", node.left, node.mid, node.right)

    def print_unary(self, node: Unary) -> str:
        return self.parenthesize(node.operator.lexeme, node.right)

    def print_expression(self, node: Expression) -> str:
        return self.parenthesize(";", node.expression)

    def print_print(self, node: Print) -> str:
        return self.parenthesize("print", node.expression)


class RpnPrinter(Printer):
    def print_binary(self, node: Binary) -> str:
        return f"{self.print(node.left)} {self.print(node.right)} {node.operator.lexeme}"

    def print_grouping(self, node: Grouping) -> str:
        return self.print(node.expression)

    def print_ternary(self, node: Ternary) -> str:
        return f"{self.print(node.left)} {self.print(node.mid)} {self.print(node.right)} ?:"

    def print_unary(self, node: Unary) -> str:
        return f"{node.operator.lexeme}{self.print(node.right)}"

    def print_expression(self, node: Expression) -> str:
        return self.print(node.expression)

    def print_print(self, node: Print) -> str:
        return f"{self.print(node.expression)} print"


__all__ = ["AstPrinter", "RpnPrinter", "literal_text"]

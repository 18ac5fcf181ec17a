import pytest

from lox.lox_ast import Binary, Expression, Grouping, Literal, Print, Ternary, Unary
from lox.lox_parser import parse
from lox.lox_printer import AstPrinter, RpnPrinter, literal_text
from lox.lox_scanner import scan
from lox.lox_token import Token, TokenKind

MINUS = Token(TokenKind.MINUS, "-", None, 1)
STAR = Token(TokenKind.STAR, "*", None, 1)

SAMPLE = Binary(
    Unary(MINUS, Literal(123.0)),
    STAR,
    Grouping(Literal(45.67)),
)


def test_ast_printer_sample() -> None:
    assert AstPrinter().print(SAMPLE) == "(* (- 123) (group 45.67))"


def test_rpn_printer_sample() -> None:
    assert RpnPrinter().print(SAMPLE) == "-123 45.67 *"


def test_ternary_forms() -> None:
    node = Ternary(Literal(True), Literal(1.0), Literal(None))
    assert AstPrinter().print(node) == "(?: true 1 nil)"
    assert RpnPrinter().print(node) == "true 1 nil ?:"


def test_statement_forms() -> None:
    statements, _ = parse(scan('print "hi"; 1 + 2;')[0])
    printer = AstPrinter()
    assert [printer.print(s) for s in statements] == ['(print "hi")', "(; (+ 1 2))"]
    rpn = RpnPrinter()
    assert [rpn.print(s) for s in statements] == ['"hi" print', "1 2 +"]


@pytest.mark.parametrize(
    "value,text",
    [
        (None, "nil"),
        (True, "true"),
        (False, "false"),
        (3.0, "3"),
        (0.5, "0.5"),
        ("s", '"s"'),
    ],
)
def test_literal_text(value: object, text: str) -> None:
    assert literal_text(value) == text  # type: ignore[arg-type]


def test_unknown_node_raises() -> None:
    with pytest.raises(NotImplementedError):
        AstPrinter().print(object())
    with pytest.raises(NotImplementedError):
        RpnPrinter().print(MINUS)


def test_expression_statement_unwrapped_in_rpn() -> None:
    assert RpnPrinter().print(Expression(Literal(1.0))) == "1"
    assert AstPrinter().print(Print(Literal(1.0))) == "(print 1)"

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lox.lox_constants import KEYWORDS
from lox.lox_errors import ScanError
from lox.lox_scanner import CharacterStream, Scanner, scan
from lox.lox_token import Token, TokenKind


def kinds(source: str) -> list[TokenKind]:
    tokens, _ = scan(source)
    return [t.kind for t in tokens]


@pytest.mark.parametrize(
    "lexeme,kind",
    [
        ("(", TokenKind.LEFT_PAREN),
        (")", TokenKind.RIGHT_PAREN),
        ("{", TokenKind.LEFT_BRACE),
        ("}", TokenKind.RIGHT_BRACE),
        (",", TokenKind.COMMA),
        (".", TokenKind.DOT),
        ("-", TokenKind.MINUS),
        ("+", TokenKind.PLUS),
        (";", TokenKind.SEMICOLON),
        ("/", TokenKind.SLASH),
        ("*", TokenKind.STAR),
        ("?", TokenKind.QUESTION),
        (":", TokenKind.COLON),
        ("!", TokenKind.BANG),
        ("!=", TokenKind.BANG_EQUAL),
        ("=", TokenKind.EQUAL),
        ("==", TokenKind.EQUAL_EQUAL),
        (">", TokenKind.GREATER),
        (">=", TokenKind.GREATER_EQUAL),
        ("<", TokenKind.LESS),
        ("<=", TokenKind.LESS_EQUAL),
    ],
)
def test_operator_lexeme_scans_to_one_token(lexeme: str, kind: TokenKind) -> None:
    tokens, errors = scan(lexeme)
    assert errors == []
    assert [t.kind for t in tokens] == [kind, TokenKind.EOF]
    assert tokens[0].lexeme == lexeme


def test_eof_token_shape() -> None:
    tokens, errors = scan("")
    assert errors == []
    assert tokens == [Token(TokenKind.EOF, "", None, 1)]


def test_keyword_prefix_is_identifier() -> None:
    assert kinds("classify") == [TokenKind.IDENTIFIER, TokenKind.EOF]
    assert kinds("class") == [TokenKind.CLASS, TokenKind.EOF]


@pytest.mark.parametrize("word,kind", sorted(KEYWORDS.items()))
def test_every_keyword(word: str, kind: TokenKind) -> None:
    assert kinds(word) == [kind, TokenKind.EOF]


def test_identifier_with_underscore_and_digits() -> None:
    tokens, _ = scan("_foo42")
    assert tokens[0].kind is TokenKind.IDENTIFIER
    assert tokens[0].lexeme == "_foo42"


def test_number_with_fraction() -> None:
    tokens, _ = scan("45.67")
    assert tokens[0] == Token(TokenKind.NUMBER, "45.67", 45.67, 1)
    assert len(tokens) == 2


def test_trailing_dot_not_consumed() -> None:
    tokens, _ = scan("45.")
    assert [t.kind for t in tokens] == [TokenKind.NUMBER, TokenKind.DOT, TokenKind.EOF]
    assert tokens[0].lexeme == "45"
    assert tokens[0].literal == 45.0


def test_leading_dot_is_separate_token() -> None:
    assert kinds(".5") == [TokenKind.DOT, TokenKind.NUMBER, TokenKind.EOF]


def test_string_literal_excludes_quotes() -> None:
    tokens, errors = scan('"hello world"')
    assert errors == []
    assert tokens[0].kind is TokenKind.STRING
    assert tokens[0].lexeme == '"hello world"'
    assert tokens[0].literal == "hello world"


def test_escaped_quote_does_not_end_string() -> None:
    tokens, errors = scan('"say \\"hi\\""')
    assert errors == []
    assert tokens[0].literal == 'say \\"hi\\"'


def test_multiline_string_counts_lines() -> None:
    tokens, _ = scan('"a\nb"\n1')
    assert tokens[0].literal == "a\nb"
    assert tokens[0].line == 2
    assert tokens[1].line == 3


def test_unterminated_string() -> None:
    tokens, errors = scan('"abc')
    assert errors == [ScanError("Unterminated string", 1)]
    assert [t.kind for t in tokens] == [TokenKind.EOF]


def test_line_comment_discarded() -> None:
    assert kinds("1 // comment + 2\n3") == [
        TokenKind.NUMBER,
        TokenKind.NUMBER,
        TokenKind.EOF,
    ]


def test_block_comment_discarded_and_lines_counted() -> None:
    tokens, errors = scan("1 /* a\nb\n*/ 2")
    assert errors == []
    assert [t.kind for t in tokens] == [TokenKind.NUMBER, TokenKind.NUMBER, TokenKind.EOF]
    assert tokens[1].line == 3


def test_unterminated_block_comment() -> None:
    tokens, errors = scan("1 /* never closed\n")
    assert errors == [ScanError("Unterminated multiline comment", 2)]
    assert [t.kind for t in tokens] == [TokenKind.NUMBER, TokenKind.EOF]


def test_unexpected_characters_are_accumulated() -> None:
    tokens, errors = scan("1 @ 2 #\n3")
    assert [str(e) for e in errors] == [
        "[line 1] Error: Unexpected character",
        "[line 1] Error: Unexpected character",
    ]
    assert [t.kind for t in tokens] == [TokenKind.NUMBER] * 3 + [TokenKind.EOF]


def test_whitespace_and_newlines() -> None:
    tokens, _ = scan(" \t\r\n\n+")
    assert tokens[0].kind is TokenKind.PLUS
    assert tokens[0].line == 3


def test_scanner_keeps_errors_on_instance() -> None:
    scanner = Scanner("~")
    tokens = scanner.scan_tokens()
    assert len(scanner.errors) == 1
    assert tokens[-1].kind is TokenKind.EOF


def test_scan_is_lossy() -> None:
    source = "1 + /* note */ 2 // done"
    tokens, _ = scan(source)
    assert "".join(t.lexeme for t in tokens) == "1+2"
    assert "".join(t.lexeme for t in tokens) != source


def test_character_stream_peek_and_match() -> None:
    stream = CharacterStream("ab")
    assert stream.peek() == "a"
    assert stream.peek(1) == "b"
    assert stream.peek(5) == ""
    assert stream.match("b") is False
    assert stream.match("a") is True
    assert stream.next() == "b"
    assert stream.end_of_file()
    with pytest.raises(IndexError):
        stream.next()


@given(st.text())
def test_scan_never_crashes_and_ends_with_single_eof(text: str) -> None:
    tokens, errors = scan(text)
    assert tokens[-1].kind is TokenKind.EOF
    assert sum(1 for t in tokens if t.kind is TokenKind.EOF) == 1
    assert all(isinstance(e, ScanError) for e in errors)


@given(st.integers(min_value=0, max_value=10**12))
def test_integer_literals(n: int) -> None:
    tokens, _ = scan(str(n))
    assert tokens[0].kind is TokenKind.NUMBER
    assert tokens[0].literal == float(n)

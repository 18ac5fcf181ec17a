"""
Lexical scanner for the Lox expression language.

This module converts raw source text into an ordered list of tokens:

Classes:
    CharacterStream: Cursor over the source with line tracking.
    Scanner: Converts a source string into tokens, collecting scan errors.

Features:
    - Skips whitespace, `//` line comments and `/* ... */` block comments
    - Selects two-character operators (`!=`, `==`, `<=`, `>=`) by one character of lookahead
    - Recognizes:
        * Identifiers and reserved keywords
        * Numbers (digits with an optional fractional part)
        * Strings (a backslash keeps the next character, including a quote)
        * Single-character punctuation

Errors:
    Malformed input never stops the scan. Each problem is recorded as a
    `ScanError` and scanning resumes with the next character, so the token list
    is always complete and always ends with exactly one EOF token.

Scanning is lossy: comments and whitespace are discarded, so joining the
lexemes back together does not reproduce the source.

Example:
    >>> tokens, errors = scan("1 + 2")
    >>> [t.kind.name for t in tokens]
    ['NUMBER', 'PLUS', 'NUMBER', 'EOF']

Exports:
    - CharacterStream
    - Scanner
    - scan
"""

from lox.lox_constants import KEYWORDS, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS, WHITESPACE
from lox.lox_errors import ScanError
from lox.lox_token import Literal, Token, TokenKind


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def is_alphanumeric(ch: str) -> bool:
    return is_alpha(ch) or is_digit(ch)


class CharacterStream:
    """
    Reads characters from a source string while counting lines.

    The line counter advances on every newline consumed, including newlines
    inside strings and block comments.

    Attributes:
        source (str): The input source string.
        position (int): Index of the next unread character.
        line (int): Current line number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1):
        self.source = source
        self.position = position
        self.line = line

    def next(self) -> str:
        """
        Consumes and returns the next character.

        Raises:
            IndexError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise IndexError(
                f"Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character `offset` places ahead, or "" when out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def match(self, expected: str) -> bool:
        """Consumes the next character only if it equals `expected`."""
        if self.peek() != expected:
            return False
        self.next()
        return True

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)

    def text(self, start: int, end: int | None = None) -> str:
        return self.source[start : self.position if end is None else end]


class Scanner:
    """Lexical analyzer for Lox.

    A scanner is single-use: construct one per source text and call
    `scan_tokens()` once.

    Attributes:
        stream (CharacterStream): The cursor over the source.
        start (int): Offset where the token being scanned begins.
        tokens (list[Token]): Tokens emitted so far.
        errors (list[ScanError]): Errors recorded so far.
    """

    def __init__(self, source: str) -> None:
        self.stream = CharacterStream(source)
        self.start = 0
        self.tokens: list[Token] = []
        self.errors: list[ScanError] = []

    def scan_tokens(self) -> list[Token]:
        """Scans the whole source and returns the token list, EOF included."""
        while not self.stream.end_of_file():
            self.start = self.stream.position
            self.scan_token()

        self.tokens.append(Token(TokenKind.EOF, "", None, self.stream.line))
        return self.tokens

    def scan_token(self) -> None:
        ch = self.stream.next()

        if ch in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[ch])
        elif ch in TWO_CHAR_TOKENS:
            with_equal, without = TWO_CHAR_TOKENS[ch]
            self.add_token(with_equal if self.stream.match("=") else without)
        elif ch == "/":
            if self.stream.match("/"):
                self.skip_line_comment()
            elif self.stream.match("*"):
                self.skip_block_comment()
            else:
                self.add_token(TokenKind.SLASH)
        elif ch in WHITESPACE or ch == "\n":
            # the stream already counted the newline
            pass
        elif ch == '"':
            self.string()
        elif is_digit(ch):
            self.number()
        elif is_alpha(ch):
            self.identifier()
        else:
            self.error("Unexpected character")

    def skip_line_comment(self) -> None:
        while not self.stream.end_of_file() and self.stream.peek() != "\n":
            self.stream.next()

    def skip_block_comment(self) -> None:
        while not self.stream.end_of_file():
            if self.stream.peek() == "*" and self.stream.peek(1) == "/":
                self.stream.next()
                self.stream.next()
                return
            self.stream.next()
        self.error("Unterminated multiline comment")

    def string(self) -> None:
        while not self.stream.end_of_file() and self.stream.peek() != '"':
            if self.stream.next() == "\\" and not self.stream.end_of_file():
                self.stream.next()

        if self.stream.end_of_file():
            self.error("Unterminated string")
            return

        self.stream.next()  # closing quote
        value = self.stream.text(self.start + 1, self.stream.position - 1)
        self.add_token(TokenKind.STRING, value)

    def number(self) -> None:
        while is_digit(self.stream.peek()):
            self.stream.next()

        # a trailing dot without a digit after it belongs to the next token
        if self.stream.peek() == "." and is_digit(self.stream.peek(1)):
            self.stream.next()
            while is_digit(self.stream.peek()):
                self.stream.next()

        self.add_token(TokenKind.NUMBER, float(self.stream.text(self.start)))

    def identifier(self) -> None:
        while is_alphanumeric(self.stream.peek()):
            self.stream.next()

        text = self.stream.text(self.start)
        self.add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))

    def add_token(self, kind: TokenKind, literal: Literal = None) -> None:
        lexeme = self.stream.text(self.start)
        self.tokens.append(Token(kind, lexeme, literal, self.stream.line))

    def error(self, message: str) -> None:
        self.errors.append(ScanError(message, self.stream.line))


def scan(source: str) -> tuple[list[Token], list[ScanError]]:
    """Scans `source` and returns its tokens together with any scan errors."""
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    return tokens, scanner.errors


__all__ = ["CharacterStream", "Scanner", "scan"]

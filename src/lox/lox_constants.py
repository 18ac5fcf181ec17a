"""
Lookup tables shared by the Lox scanner, parser and driver.

Exports:
    - KEYWORDS: reserved word text -> TokenKind
    - SINGLE_CHAR_TOKENS: punctuation character -> TokenKind
    - TWO_CHAR_TOKENS: leading character -> (kind with trailing '=', kind without)
    - STATEMENT_STARTS: token kinds at which panic-mode recovery resumes
    - EXIT_* codes used by the command-line driver
"""

from lox.lox_token import TokenKind

KEYWORDS: dict[str, TokenKind] = {
    "and": TokenKind.AND,
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "for": TokenKind.FOR,
    "fun": TokenKind.FUN,
    "if": TokenKind.IF,
    "nil": TokenKind.NIL,
    "or": TokenKind.OR,
    "print": TokenKind.PRINT,
    "return": TokenKind.RETURN,
    "super": TokenKind.SUPER,
    "this": TokenKind.THIS,
    "true": TokenKind.TRUE,
    "var": TokenKind.VAR,
    "while": TokenKind.WHILE,
}

SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
    "?": TokenKind.QUESTION,
    ":": TokenKind.COLON,
}

TWO_CHAR_TOKENS: dict[str, tuple[TokenKind, TokenKind]] = {
    "!": (TokenKind.BANG_EQUAL, TokenKind.BANG),
    "=": (TokenKind.EQUAL_EQUAL, TokenKind.EQUAL),
    "<": (TokenKind.LESS_EQUAL, TokenKind.LESS),
    ">": (TokenKind.GREATER_EQUAL, TokenKind.GREATER),
}

WHITESPACE = " \r\t"

STATEMENT_STARTS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.CLASS,
        TokenKind.FUN,
        TokenKind.VAR,
        TokenKind.FOR,
        TokenKind.IF,
        TokenKind.WHILE,
        TokenKind.PRINT,
        TokenKind.RETURN,
    }
)

# sysexits.h
EXIT_OK = 0
EXIT_USAGE = 64
EXIT_DATAERR = 65
EXIT_SOFTWARE = 70

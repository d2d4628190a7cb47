"""Token definitions for the monkey language. Token kinds double as the names used in parser error messages, so
'expected next token to be IDENT, got = instead.' reads straight off TokenKind values.
"""

import enum
from dataclasses import dataclass


class TokenKind(enum.Enum):
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # identifiers + literals
    IDENT = "IDENT"
    INT = "INT"
    STRING = "STRING"

    # operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    # delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"

    def __str__(self):
        return self.value


KEYWORDS = {
    "fn": TokenKind.FUNCTION,
    "let": TokenKind.LET,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "return": TokenKind.RETURN,
}


@dataclass(frozen=True)
class Token:
    """Smallest lexical unit: a kind tag plus the source text it was read from (unescaped, for strings)."""
    kind: TokenKind
    literal: str

    def __str__(self):
        return f"{self.kind.name}({self.literal!r})"


def lookup_ident(ident):
    """Returns the keyword kind for ident, or IDENT if ident isn't a keyword."""
    return KEYWORDS.get(ident, TokenKind.IDENT)

r"""Tokenizer for the monkey language. Scans source one character at a time, holding only the current character and
the one after it:

```
<ident>   ::= (<letter> | "_") (<letter> | "_")*   ; resolved against KEYWORDS once scanned
<int>     ::= <digit>+                             ; no sign: "-5" is a prefix expression
<string>  ::= '"' (<char> | <escape>)* '"'         ; escapes: \n \t \" \\ (anything else is kept as-is)
```
"""

from monkey.pure.token import Token, TokenKind, lookup_ident


SINGLE_CHAR_TOKENS = {
    "=": TokenKind.ASSIGN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "!": TokenKind.BANG,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}

# "=" and "!" become "==" and "!=" when followed by "="
DOUBLE_CHAR_TOKENS = {
    "==": TokenKind.EQ,
    "!=": TokenKind.NOT_EQ,
}

ESCAPES = {"n": "\n", "t": "\t", "\"": "\"", "\\": "\\"}

WHITESPACE = " \t\n\r"
EOF_CHAR = ""


def is_letter(char):
    return char == "_" or ("a" <= char <= "z") or ("A" <= char <= "Z")


def is_digit(char):
    return "0" <= char <= "9"


class Lexer:
    """Produces Tokens from source on demand. Once EOF is reached, next_token keeps returning EOF."""

    def __init__(self, source):
        self.source = source
        self.position = 0       # index of self.char
        self.read_position = 0  # index of the char after self.char
        self.char = EOF_CHAR

        self._read_char()

    def next_token(self):
        self._skip_whitespace()

        if self.char == EOF_CHAR:
            return Token(TokenKind.EOF, "")

        pair = self.char + self._peek_char()
        if pair in DOUBLE_CHAR_TOKENS:
            self._read_char()
            self._read_char()
            return Token(DOUBLE_CHAR_TOKENS[pair], pair)

        if self.char in SINGLE_CHAR_TOKENS:
            token = Token(SINGLE_CHAR_TOKENS[self.char], self.char)
            self._read_char()
            return token

        if is_letter(self.char):
            ident = self._read_while(is_letter)
            return Token(lookup_ident(ident), ident)

        if is_digit(self.char):
            return Token(TokenKind.INT, self._read_while(is_digit))

        if self.char == "\"":
            return self._read_string()

        token = Token(TokenKind.ILLEGAL, self.char)
        self._read_char()
        return token

    def _read_char(self):
        """Advances by one character. Past the end of source, self.char is EOF_CHAR."""
        if self.read_position >= len(self.source):
            self.char = EOF_CHAR
        else:
            self.char = self.source[self.read_position]

        self.position = self.read_position
        self.read_position += 1

    def _peek_char(self):
        if self.read_position >= len(self.source):
            return EOF_CHAR
        return self.source[self.read_position]

    def _skip_whitespace(self):
        while self.char and self.char in WHITESPACE:
            self._read_char()

    def _read_while(self, predicate):
        start = self.position
        while self.char and predicate(self.char):
            self._read_char()
        return self.source[start:self.position]

    def _read_string(self):
        """Reads a string literal starting at the opening quote. An unterminated string becomes an ILLEGAL token
        holding everything from the opening quote onwards.
        """
        start = self.position
        chars = []
        self._read_char()  # opening quote

        while self.char != "\"":
            if self.char == EOF_CHAR:
                return Token(TokenKind.ILLEGAL, self.source[start:])

            if self.char == "\\":
                self._read_char()
                if self.char == EOF_CHAR:
                    return Token(TokenKind.ILLEGAL, self.source[start:])
                chars.append(ESCAPES.get(self.char, "\\" + self.char))
            else:
                chars.append(self.char)
            self._read_char()

        self._read_char()  # closing quote
        return Token(TokenKind.STRING, "".join(chars))

    def __iter__(self):
        """Yields tokens up to (not including) EOF."""
        token = self.next_token()
        while token.kind is not TokenKind.EOF:
            yield token
            token = self.next_token()


def tokenize(source):
    """Returns every token in source, terminated by a single EOF token."""
    lexer = Lexer(source)
    return list(lexer) + [lexer.next_token()]

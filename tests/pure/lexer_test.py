import unittest

from monkey.pure.lexer import Lexer, tokenize
from monkey.pure.token import Token, TokenKind, lookup_ident


class LookupIdentTestCase(unittest.TestCase):

    def test_lookup_ident(self):
        cases = {
            "fn": TokenKind.FUNCTION,
            "let": TokenKind.LET,
            "true": TokenKind.TRUE,
            "false": TokenKind.FALSE,
            "if": TokenKind.IF,
            "else": TokenKind.ELSE,
            "return": TokenKind.RETURN,
            "foobar": TokenKind.IDENT,
            "lets": TokenKind.IDENT,
            "Fn": TokenKind.IDENT,
        }
        for case, expected in cases.items():
            self.assertIs(expected, lookup_ident(case), case)


class LexerTestCase(unittest.TestCase):

    def assertTokens(self, expected, source):
        actual = [(token.kind, token.literal) for token in tokenize(source)]
        self.assertEqual(expected + [(TokenKind.EOF, "")], actual, source)

    def test_delimiters(self):
        self.assertTokens([
            (TokenKind.ASSIGN, "="),
            (TokenKind.PLUS, "+"),
            (TokenKind.LPAREN, "("),
            (TokenKind.RPAREN, ")"),
            (TokenKind.LBRACE, "{"),
            (TokenKind.RBRACE, "}"),
            (TokenKind.COMMA, ","),
            (TokenKind.SEMICOLON, ";"),
        ], "=+(){},;")

    def test_program(self):
        source = """let five = 5;
            let add = fn(x, y) {
                x + y;
            };
            let result = add(five, 10);
            !-/*5;
            5 < 10 > 5;
            10 == 10; 10 != 9;
            if (true) { return 1; } else { return false; }
            "foo bar"
        """
        self.assertTokens([
            (TokenKind.LET, "let"), (TokenKind.IDENT, "five"), (TokenKind.ASSIGN, "="), (TokenKind.INT, "5"),
            (TokenKind.SEMICOLON, ";"),
            (TokenKind.LET, "let"), (TokenKind.IDENT, "add"), (TokenKind.ASSIGN, "="), (TokenKind.FUNCTION, "fn"),
            (TokenKind.LPAREN, "("), (TokenKind.IDENT, "x"), (TokenKind.COMMA, ","), (TokenKind.IDENT, "y"),
            (TokenKind.RPAREN, ")"), (TokenKind.LBRACE, "{"),
            (TokenKind.IDENT, "x"), (TokenKind.PLUS, "+"), (TokenKind.IDENT, "y"), (TokenKind.SEMICOLON, ";"),
            (TokenKind.RBRACE, "}"), (TokenKind.SEMICOLON, ";"),
            (TokenKind.LET, "let"), (TokenKind.IDENT, "result"), (TokenKind.ASSIGN, "="), (TokenKind.IDENT, "add"),
            (TokenKind.LPAREN, "("), (TokenKind.IDENT, "five"), (TokenKind.COMMA, ","), (TokenKind.INT, "10"),
            (TokenKind.RPAREN, ")"), (TokenKind.SEMICOLON, ";"),
            (TokenKind.BANG, "!"), (TokenKind.MINUS, "-"), (TokenKind.SLASH, "/"), (TokenKind.ASTERISK, "*"),
            (TokenKind.INT, "5"), (TokenKind.SEMICOLON, ";"),
            (TokenKind.INT, "5"), (TokenKind.LT, "<"), (TokenKind.INT, "10"), (TokenKind.GT, ">"),
            (TokenKind.INT, "5"), (TokenKind.SEMICOLON, ";"),
            (TokenKind.INT, "10"), (TokenKind.EQ, "=="), (TokenKind.INT, "10"), (TokenKind.SEMICOLON, ";"),
            (TokenKind.INT, "10"), (TokenKind.NOT_EQ, "!="), (TokenKind.INT, "9"), (TokenKind.SEMICOLON, ";"),
            (TokenKind.IF, "if"), (TokenKind.LPAREN, "("), (TokenKind.TRUE, "true"), (TokenKind.RPAREN, ")"),
            (TokenKind.LBRACE, "{"), (TokenKind.RETURN, "return"), (TokenKind.INT, "1"), (TokenKind.SEMICOLON, ";"),
            (TokenKind.RBRACE, "}"), (TokenKind.ELSE, "else"), (TokenKind.LBRACE, "{"),
            (TokenKind.RETURN, "return"), (TokenKind.FALSE, "false"), (TokenKind.SEMICOLON, ";"),
            (TokenKind.RBRACE, "}"),
            (TokenKind.STRING, "foo bar"),
        ], source)

    def test_integers_have_no_sign(self):
        self.assertTokens([(TokenKind.MINUS, "-"), (TokenKind.INT, "42")], "-42")
        self.assertTokens([(TokenKind.INT, "12"), (TokenKind.IDENT, "ab")], "12ab")

    def test_identifiers(self):
        self.assertTokens([(TokenKind.IDENT, "foo_bar"), (TokenKind.IDENT, "_x")], "foo_bar _x")

    def test_strings(self):
        cases = {
            "\"\"": "",
            "\"hello world\"": "hello world",
            "\"a\\nb\"": "a\nb",
            "\"a\\tb\"": "a\tb",
            "\"say \\\"hi\\\"\"": "say \"hi\"",
            "\"back\\\\slash\"": "back\\slash",
            "\"keep \\q\"": "keep \\q",
        }
        for case, expected in cases.items():
            self.assertTokens([(TokenKind.STRING, expected)], case)

    def test_illegal(self):
        cases = {
            "@": [(TokenKind.ILLEGAL, "@")],
            "5 # 3": [(TokenKind.INT, "5"), (TokenKind.ILLEGAL, "#"), (TokenKind.INT, "3")],
            "\"open": [(TokenKind.ILLEGAL, "\"open")],
            "\"open\\": [(TokenKind.ILLEGAL, "\"open\\")],
        }
        for case, expected in cases.items():
            self.assertTokens(expected, case)

    def test_eof_repeats(self):
        lexer = Lexer("x")
        self.assertEqual(Token(TokenKind.IDENT, "x"), lexer.next_token())
        for __ in range(3):
            self.assertEqual(Token(TokenKind.EOF, ""), lexer.next_token())

    def test_empty(self):
        self.assertTokens([], "")
        self.assertTokens([], " \t\r\n ")

    def test_iter_excludes_eof(self):
        self.assertEqual([Token(TokenKind.INT, "1"), Token(TokenKind.PLUS, "+")], list(Lexer("1 +")))


if __name__ == '__main__':
    unittest.main()

"""Parser for the monkey language: recursive descent for statements, precedence climbing (Pratt parsing) for
expressions.

Every token kind that can start an expression has a prefix rule; every token kind that can continue one has an infix
rule and a precedence. parse_expression(precedence) reads one prefix expression, then keeps handing it to infix rules
as the left operand for as long as the next operator binds tighter than precedence. Equal precedence stops the loop,
which is what makes binary operators left-associative:

    1 + 2 + 3  ->  ((1 + 2) + 3)
    1 + 2 * 3  ->  (1 + (2 * 3))
    -1 + 2     ->  ((-1) + 2)

Errors never abort the whole parse: the failing construct is dropped and parsing continues with the next statement.
"""

import enum

from monkey.pure import ast
from monkey.pure.lexer import Lexer
from monkey.pure.token import Token, TokenKind


INT64_MAX = 2 ** 63 - 1


class Precedence(enum.IntEnum):
    # fmt: off
    LOWEST       = enum.auto()
    EQUALS       = enum.auto()  # == !=
    LESS_GREATER = enum.auto()  # < >
    SUM          = enum.auto()  # + -
    PRODUCT      = enum.auto()  # * /
    PREFIX       = enum.auto()  # -x !x
    CALL         = enum.auto()  # f(x)
    # fmt: on


PRECEDENCES = {
    TokenKind.EQ: Precedence.EQUALS,
    TokenKind.NOT_EQ: Precedence.EQUALS,
    TokenKind.LT: Precedence.LESS_GREATER,
    TokenKind.GT: Precedence.LESS_GREATER,
    TokenKind.PLUS: Precedence.SUM,
    TokenKind.MINUS: Precedence.SUM,
    TokenKind.ASTERISK: Precedence.PRODUCT,
    TokenKind.SLASH: Precedence.PRODUCT,
    TokenKind.LPAREN: Precedence.CALL,
}


class Parser:
    """Builds a Program from a Lexer, keeping a two-token window (current_token, peek_token). Syntax errors are
    collected in self.errors in the order they are found.
    """

    def __init__(self, lexer):
        self.lexer = lexer
        self.errors = []

        self.current_token = Token(TokenKind.ILLEGAL, "")
        self.peek_token = Token(TokenKind.ILLEGAL, "")

        self.prefix_rules = {
            TokenKind.IDENT: self.parse_identifier,
            TokenKind.INT: self.parse_integer_literal,
            TokenKind.STRING: self.parse_string_literal,
            TokenKind.TRUE: self.parse_boolean,
            TokenKind.FALSE: self.parse_boolean,
            TokenKind.BANG: self.parse_prefix_expression,
            TokenKind.MINUS: self.parse_prefix_expression,
            TokenKind.LPAREN: self.parse_grouped_expression,
            TokenKind.IF: self.parse_if_expression,
            TokenKind.FUNCTION: self.parse_function_literal,
        }
        self.infix_rules = {kind: self.parse_infix_expression for kind in PRECEDENCES}
        self.infix_rules[TokenKind.LPAREN] = self.parse_call_expression

        # read two tokens so that current_token and peek_token are both set
        self.next_token()
        self.next_token()

    def next_token(self):
        self.current_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def current_is(self, kind):
        return self.current_token.kind is kind

    def peek_is(self, kind):
        return self.peek_token.kind is kind

    def expect_peek(self, kind):
        """Advances if the next token is kind. Otherwise records an error and returns False, and the caller gives up
        on the construct it was building.
        """
        if self.peek_is(kind):
            self.next_token()
            return True

        self.errors.append(f"expected next token to be {kind}, got {self.peek_token.kind} instead.")
        return False

    def peek_precedence(self):
        return PRECEDENCES.get(self.peek_token.kind, Precedence.LOWEST)

    def current_precedence(self):
        return PRECEDENCES.get(self.current_token.kind, Precedence.LOWEST)

    def parse_program(self):
        statements = []
        while not self.current_is(TokenKind.EOF):
            statement = self.parse_statement()
            if statement is not None:
                statements.append(statement)
            self.next_token()
        return ast.Program(tuple(statements))

    # statements

    def parse_statement(self):
        if self.current_is(TokenKind.LET):
            return self.parse_let_statement()
        elif self.current_is(TokenKind.RETURN):
            return self.parse_return_statement()
        return self.parse_expression_statement()

    def parse_let_statement(self):
        if not self.expect_peek(TokenKind.IDENT):
            return None
        name = ast.Identifier(self.current_token.literal)

        if not self.expect_peek(TokenKind.ASSIGN):
            return None
        self.next_token()

        value = self.parse_expression(Precedence.LOWEST)
        if value is None:
            return None

        self._skip_semicolon()
        return ast.LetStatement(name, value)

    def parse_return_statement(self):
        self.next_token()

        value = self.parse_expression(Precedence.LOWEST)
        if value is None:
            return None

        self._skip_semicolon()
        return ast.ReturnStatement(value)

    def parse_expression_statement(self):
        value = self.parse_expression(Precedence.LOWEST)
        if value is None:
            return None

        self._skip_semicolon()
        return ast.ExpressionStatement(value)

    def parse_block_statement(self):
        """Parses statements up to the closing brace. Assumes current_token is the opening brace."""
        statements = []
        self.next_token()

        while not self.current_is(TokenKind.RBRACE) and not self.current_is(TokenKind.EOF):
            statement = self.parse_statement()
            if statement is not None:
                statements.append(statement)
            self.next_token()

        if not self.current_is(TokenKind.RBRACE):
            self.errors.append(f"expected next token to be {TokenKind.RBRACE}, got {TokenKind.EOF} instead.")
            return None
        return ast.BlockStatement(tuple(statements))

    def _skip_semicolon(self):
        if self.peek_is(TokenKind.SEMICOLON):
            self.next_token()

    # expressions

    def parse_expression(self, precedence):
        prefix = self.prefix_rules.get(self.current_token.kind)
        if prefix is None:
            self.errors.append(f"no prefix parse function for {self.current_token.kind} found")
            return None

        left = prefix()
        while left is not None and not self.peek_is(TokenKind.SEMICOLON) and precedence < self.peek_precedence():
            infix = self.infix_rules.get(self.peek_token.kind)
            if infix is None:
                return left

            self.next_token()
            left = infix(left)

        return left

    def parse_identifier(self):
        return ast.Identifier(self.current_token.literal)

    def parse_integer_literal(self):
        literal = self.current_token.literal
        try:
            value = int(literal)
            if value > INT64_MAX:
                raise ValueError(literal)
        except ValueError:
            self.errors.append(f"could not parse \"{literal}\" as integer")
            return None
        return ast.IntegerLiteral(value)

    def parse_string_literal(self):
        return ast.StringLiteral(self.current_token.literal)

    def parse_boolean(self):
        return ast.BooleanLiteral(self.current_is(TokenKind.TRUE))

    def parse_prefix_expression(self):
        operator = self.current_token.literal
        self.next_token()

        operand = self.parse_expression(Precedence.PREFIX)
        if operand is None:
            return None
        return ast.PrefixExpression(operator, operand)

    def parse_infix_expression(self, left):
        operator = self.current_token.literal
        precedence = self.current_precedence()
        self.next_token()

        right = self.parse_expression(precedence)
        if right is None:
            return None
        return ast.InfixExpression(operator, left, right)

    def parse_grouped_expression(self):
        self.next_token()

        expression = self.parse_expression(Precedence.LOWEST)
        if expression is None or not self.expect_peek(TokenKind.RPAREN):
            return None
        return expression

    def parse_if_expression(self):
        if not self.expect_peek(TokenKind.LPAREN):
            return None
        self.next_token()

        condition = self.parse_expression(Precedence.LOWEST)
        if condition is None or not self.expect_peek(TokenKind.RPAREN) or not self.expect_peek(TokenKind.LBRACE):
            return None

        consequence = self.parse_block_statement()
        if consequence is None:
            return None

        alternative = None
        if self.peek_is(TokenKind.ELSE):
            self.next_token()
            if not self.expect_peek(TokenKind.LBRACE):
                return None
            alternative = self.parse_block_statement()
            if alternative is None:
                return None

        return ast.IfExpression(condition, consequence, alternative)

    def parse_function_literal(self):
        if not self.expect_peek(TokenKind.LPAREN):
            return None

        parameters = self.parse_function_parameters()
        if parameters is None or not self.expect_peek(TokenKind.LBRACE):
            return None

        body = self.parse_block_statement()
        if body is None:
            return None
        return ast.FunctionLiteral(parameters, body)

    def parse_function_parameters(self):
        """Parses a comma-separated identifier list. Assumes current_token is the opening paren."""
        if self.peek_is(TokenKind.RPAREN):
            self.next_token()
            return ()

        if not self.expect_peek(TokenKind.IDENT):
            return None
        parameters = [ast.Identifier(self.current_token.literal)]

        while self.peek_is(TokenKind.COMMA):
            self.next_token()
            if not self.expect_peek(TokenKind.IDENT):
                return None
            parameters.append(ast.Identifier(self.current_token.literal))

        if not self.expect_peek(TokenKind.RPAREN):
            return None
        return tuple(parameters)

    def parse_call_expression(self, function):
        arguments = self.parse_call_arguments()
        if arguments is None:
            return None
        return ast.CallExpression(function, arguments)

    def parse_call_arguments(self):
        """Parses a comma-separated expression list. Assumes current_token is the opening paren."""
        if self.peek_is(TokenKind.RPAREN):
            self.next_token()
            return ()

        self.next_token()
        arguments = [self.parse_expression(Precedence.LOWEST)]

        while arguments[-1] is not None and self.peek_is(TokenKind.COMMA):
            self.next_token()
            self.next_token()
            arguments.append(self.parse_expression(Precedence.LOWEST))

        if arguments[-1] is None or not self.expect_peek(TokenKind.RPAREN):
            return None
        return tuple(arguments)


def parse(source):
    """Parses source, returning (Program, errors). A Program is always returned, even if errors is non-empty."""
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, parser.errors

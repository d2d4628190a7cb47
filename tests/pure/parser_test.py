import unittest

from monkey.pure import ast
from monkey.pure.lexer import Lexer
from monkey.pure.parser import Parser, Precedence, parse


def parse_clean(test_case, source):
    """Parses source, failing test_case if there were any syntax errors."""
    program, errors = parse(source)
    test_case.assertEqual([], errors, source)
    return program


class ParserStatementTestCase(unittest.TestCase):

    def test_let_statements(self):
        cases = {
            "let x = 5;": ("x", ast.IntegerLiteral(5)),
            "let y = true;": ("y", ast.BooleanLiteral(True)),
            "let foobar = y;": ("foobar", ast.Identifier("y")),
            "let s = \"hi\"": ("s", ast.StringLiteral("hi")),
        }
        for case, (name, value) in cases.items():
            program = parse_clean(self, case)
            self.assertEqual((ast.LetStatement(ast.Identifier(name), value),), program.statements, case)

    def test_return_statements(self):
        cases = {
            "return 5;": ast.IntegerLiteral(5),
            "return true;": ast.BooleanLiteral(True),
            "return foobar": ast.Identifier("foobar"),
        }
        for case, value in cases.items():
            program = parse_clean(self, case)
            self.assertEqual((ast.ReturnStatement(value),), program.statements, case)

    def test_multiple_statements(self):
        program = parse_clean(self, "let x = 5;\nlet y = 10;\nlet foobar = 838383;")
        self.assertEqual(["x", "y", "foobar"], [stmt.name.name for stmt in program.statements])

    def test_expression_statements(self):
        cases = {
            "foobar;": ast.Identifier("foobar"),
            "5;": ast.IntegerLiteral(5),
            "false": ast.BooleanLiteral(False),
            "\"hello world\"": ast.StringLiteral("hello world"),
            "-15": ast.PrefixExpression("-", ast.IntegerLiteral(15)),
            "!true": ast.PrefixExpression("!", ast.BooleanLiteral(True)),
            "5 != 5": ast.InfixExpression("!=", ast.IntegerLiteral(5), ast.IntegerLiteral(5)),
            "true == false": ast.InfixExpression("==", ast.BooleanLiteral(True), ast.BooleanLiteral(False)),
        }
        for case, value in cases.items():
            program = parse_clean(self, case)
            self.assertEqual((ast.ExpressionStatement(value),), program.statements, case)

    def test_infix_operators(self):
        for operator in ["+", "-", "*", "/", "<", ">", "==", "!="]:
            case = f"5 {operator} 6;"
            program = parse_clean(self, case)
            expected = ast.InfixExpression(operator, ast.IntegerLiteral(5), ast.IntegerLiteral(6))
            self.assertEqual(expected, program.statements[0].value, case)


class ParserPrecedenceTestCase(unittest.TestCase):

    def test_operator_precedence(self):
        cases = {
            "-a * b": "((-a) * b)",
            "!-a": "(!(-a))",
            "a + b + c": "((a + b) + c)",
            "a + b - c": "((a + b) - c)",
            "a * b * c": "((a * b) * c)",
            "a * b / c": "((a * b) / c)",
            "a + b / c": "(a + (b / c))",
            "a + b * c + d / e - f": "(((a + (b * c)) + (d / e)) - f)",
            "3 + 4; -5 * 5": "(3 + 4)((-5) * 5)",
            "5 > 4 == 3 < 4": "((5 > 4) == (3 < 4))",
            "5 < 4 != 3 > 4": "((5 < 4) != (3 > 4))",
            "3 + 4 * 5 == 3 * 1 + 4 * 5": "((3 + (4 * 5)) == ((3 * 1) + (4 * 5)))",
            "true": "true",
            "3 > 5 == false": "((3 > 5) == false)",
            "3 < 5 == true": "((3 < 5) == true)",
            "1 + (2 + 3) + 4": "((1 + (2 + 3)) + 4)",
            "(5 + 5) * 2": "((5 + 5) * 2)",
            "2 / (5 + 5)": "(2 / (5 + 5))",
            "-(5 + 5)": "(-(5 + 5))",
            "!(true == true)": "(!(true == true))",
            "a + add(b * c) + d": "((a + add((b * c))) + d)",
            "add(a, b, 1, 2 * 3, 4 + 5, add(6, 7 * 8))": "add(a, b, 1, (2 * 3), (4 + 5), add(6, (7 * 8)))",
            "add(a + b + c * d / f + g)": "add((((a + b) + ((c * d) / f)) + g))",
            "f(1)(2)": "f(1)(2)",
            "-f(x)": "(-f(x))",
        }
        for case, expected in cases.items():
            program = parse_clean(self, case)
            self.assertEqual(expected, str(program), case)

    def test_precedence_order(self):
        order = [Precedence.LOWEST, Precedence.EQUALS, Precedence.LESS_GREATER, Precedence.SUM, Precedence.PRODUCT,
                 Precedence.PREFIX, Precedence.CALL]
        self.assertEqual(sorted(order), order)


class ParserCompoundTestCase(unittest.TestCase):

    def test_if_expression(self):
        program = parse_clean(self, "if (x < y) { x }")
        expected = ast.IfExpression(
            ast.InfixExpression("<", ast.Identifier("x"), ast.Identifier("y")),
            ast.BlockStatement((ast.ExpressionStatement(ast.Identifier("x")),)),
        )
        self.assertEqual(expected, program.statements[0].value)
        self.assertIsNone(program.statements[0].value.alternative)

    def test_if_else_expression(self):
        program = parse_clean(self, "if (x < y) { x } else { y }")
        node = program.statements[0].value
        self.assertEqual(ast.BlockStatement((ast.ExpressionStatement(ast.Identifier("y")),)), node.alternative)
        self.assertEqual("if(x < y) xelse y", str(program))

    def test_function_literal(self):
        program = parse_clean(self, "fn(x, y) { x + y; }")
        expected = ast.FunctionLiteral(
            (ast.Identifier("x"), ast.Identifier("y")),
            ast.BlockStatement((ast.ExpressionStatement(
                ast.InfixExpression("+", ast.Identifier("x"), ast.Identifier("y"))),)),
        )
        self.assertEqual(expected, program.statements[0].value)
        self.assertEqual("fn(x, y) (x + y)", str(program))

    def test_function_parameters(self):
        cases = {
            "fn() {};": [],
            "fn(x) {};": ["x"],
            "fn(x, y, z) {};": ["x", "y", "z"],
        }
        for case, expected in cases.items():
            program = parse_clean(self, case)
            self.assertEqual(expected, [param.name for param in program.statements[0].value.parameters], case)

    def test_call_expression(self):
        program = parse_clean(self, "add(1, 2 * 3, 4 + 5)")
        node = program.statements[0].value
        self.assertEqual(ast.Identifier("add"), node.function)
        self.assertEqual(["1", "(2 * 3)", "(4 + 5)"], [str(arg) for arg in node.arguments])

    def test_call_without_arguments(self):
        program = parse_clean(self, "f()")
        self.assertEqual(ast.CallExpression(ast.Identifier("f"), ()), program.statements[0].value)

    def test_canonical_statements(self):
        cases = {
            "let x = 1 + 2;": "let x = (1 + 2);",
            "return -x;": "return (-x);",
            "let f = fn(a) { return a; };": "let f = fn(a) return a;;",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, str(parse_clean(self, case)), case)


class ParserErrorTestCase(unittest.TestCase):

    def test_errors(self):
        cases = {
            "let x 5;": ["expected next token to be =, got INT instead."],
            "let = 10;": ["expected next token to be IDENT, got = instead.",
                          "no prefix parse function for = found"],
            "let 838383;": ["expected next token to be IDENT, got INT instead."],
            "(1 + 2": ["expected next token to be ), got EOF instead."],
            "if (x) { 1 ": ["expected next token to be }, got EOF instead."],
            "fn(1) {}": ["expected next token to be IDENT, got INT instead.",
                         "no prefix parse function for ) found",
                         "no prefix parse function for { found",
                         "no prefix parse function for } found"],
            "add(1, 2": ["expected next token to be ), got EOF instead."],
            "9223372036854775808": ["could not parse \"9223372036854775808\" as integer"],
            "@": ["no prefix parse function for ILLEGAL found"],
        }
        for case, expected in cases.items():
            __, errors = parse(case)
            self.assertEqual(expected, errors, case)

    def test_parse_continues_after_error(self):
        program, errors = parse("let = 1; let y = 2; y;")
        self.assertTrue(errors)
        self.assertIn(ast.LetStatement(ast.Identifier("y"), ast.IntegerLiteral(2)), program.statements)
        self.assertEqual(ast.ExpressionStatement(ast.Identifier("y")), program.statements[-1])

    def test_max_integer(self):
        program = parse_clean(self, "9223372036854775807")
        self.assertEqual(ast.IntegerLiteral(2 ** 63 - 1), program.statements[0].value)

    def test_parser_object(self):
        parser = Parser(Lexer("let x = ;"))
        program = parser.parse_program()
        self.assertIsInstance(program, ast.Program)
        self.assertEqual(["no prefix parse function for ; found"], parser.errors)


if __name__ == '__main__':
    unittest.main()

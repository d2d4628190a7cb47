"""Tree-walking evaluator for the monkey language.

evaluate(node, env) dispatches on the node's type through HANDLERS. A node type missing from HANDLERS raises
TypeError instead of evaluating to NULL.

Runtime errors are not Python exceptions. They are Error values returned like any other result, and every caller
checks its sub-results with is_error before using them, returning the Error unchanged if it finds one.
"""

from monkey.pure import ast
from monkey.pure.environment import Environment
from monkey.pure.objects import (
    NULL,
    Error,
    Function,
    Integer,
    ReturnValue,
    String,
    is_error,
    is_truthy,
    native_bool,
)


def evaluate(node, env):
    """Evaluates node in env. Returns None only when nothing was produced (e.g. an empty block)."""
    handler = HANDLERS.get(type(node))
    if handler is None:
        raise TypeError(f"unhandled node: {type(node).__name__}")
    return handler(node, env)


def eval_program(program, env):
    """Runs statements in order. A top-level return just yields its value."""
    result = None
    for statement in program.statements:
        result = evaluate(statement, env)

        if isinstance(result, ReturnValue):
            return result.value
        elif is_error(result):
            return result
    return result


def eval_block_statement(block, env):
    """Like eval_program, but a ReturnValue is passed up still wrapped, so the enclosing call can unwrap it."""
    result = None
    for statement in block.statements:
        result = evaluate(statement, env)

        if isinstance(result, (ReturnValue, Error)):
            return result
    return result


def eval_let_statement(node, env):
    value = evaluate(node.value, env)
    if is_error(value):
        return value
    return env.set(node.name.name, value)


def eval_return_statement(node, env):
    value = evaluate(node.value, env)
    if is_error(value):
        return value
    return ReturnValue(value)


def eval_expression_statement(node, env):
    return evaluate(node.value, env)


def eval_identifier(node, env):
    value = env.get(node.name)
    if value is None:
        return Error(f"identifier not found: {node.name}")
    return value


def eval_integer_literal(node, env):
    return Integer(node.value)


def eval_boolean_literal(node, env):
    return native_bool(node.value)


def eval_string_literal(node, env):
    return String(node.value)


def eval_prefix_expression(node, env):
    operand = evaluate(node.operand, env)
    if is_error(operand):
        return operand

    if node.operator == "!":
        return native_bool(not is_truthy(operand))
    elif node.operator == "-":
        if not isinstance(operand, Integer):
            return Error(f"unknown operator: -{operand.type_name}")
        return Integer(-operand.value)
    return Error(f"unknown operator: {node.operator}{operand.type_name}")


def eval_infix_expression(node, env):
    left = evaluate(node.left, env)
    if is_error(left):
        return left

    right = evaluate(node.right, env)
    if is_error(right):
        return right

    return infix(node.operator, left, right)


def infix(operator, left, right):
    """Applies a binary operator to two (non-error) values."""
    if isinstance(left, Integer) and isinstance(right, Integer):
        return integer_infix(operator, left, right)
    elif isinstance(left, String) and isinstance(right, String):
        return string_infix(operator, left, right)
    elif operator == "==":
        return native_bool(left is right)
    elif operator == "!=":
        return native_bool(left is not right)
    elif left.type_name != right.type_name:
        return Error(f"type mismatch: {left.type_name} {operator} {right.type_name}")
    return Error(f"unknown operator: {left.type_name} {operator} {right.type_name}")


def integer_infix(operator, left, right):
    a, b = left.value, right.value

    if operator == "+":
        return Integer(a + b)
    elif operator == "-":
        return Integer(a - b)
    elif operator == "*":
        return Integer(a * b)
    elif operator == "/":
        if b == 0:
            return Error("division by zero")
        quotient = abs(a) // abs(b)  # truncate towards zero, not floor
        return Integer(quotient if (a < 0) == (b < 0) else -quotient)
    elif operator == "<":
        return native_bool(a < b)
    elif operator == ">":
        return native_bool(a > b)
    elif operator == "==":
        return native_bool(a == b)
    elif operator == "!=":
        return native_bool(a != b)
    return Error(f"unknown operator: {left.type_name} {operator} {right.type_name}")


def string_infix(operator, left, right):
    if operator == "+":
        return String(left.value + right.value)
    elif operator == "==":
        return native_bool(left.value == right.value)
    elif operator == "!=":
        return native_bool(left.value != right.value)
    return Error(f"unknown operator: {left.type_name} {operator} {right.type_name}")


def eval_if_expression(node, env):
    condition = evaluate(node.condition, env)
    if is_error(condition):
        return condition

    if is_truthy(condition):
        result = evaluate(node.consequence, env)
    elif node.alternative is not None:
        result = evaluate(node.alternative, env)
    else:
        return NULL
    return NULL if result is None else result


def eval_function_literal(node, env):
    return Function(node.parameters, node.body, env)


def eval_call_expression(node, env):
    function = evaluate(node.function, env)
    if is_error(function):
        return function

    args = []
    for arg in node.arguments:
        value = evaluate(arg, env)
        if is_error(value):
            return value
        args.append(value)

    return apply_function(function, args)


def apply_function(function, args):
    """Calls function with already-evaluated args in a scope enclosed by the function's own environment (not the
    caller's), which is what lets closures see their defining scope.
    """
    if not isinstance(function, Function):
        return Error(f"not a function: {function.type_name}")

    if len(args) != len(function.parameters):
        return Error(f"wrong number of arguments: want={len(function.parameters)}, got={len(args)}")

    call_env = Environment.enclosed(function.env)
    for param, arg in zip(function.parameters, args):
        call_env.set(param.name, arg)

    result = evaluate(function.body, call_env)
    if isinstance(result, ReturnValue):
        return result.value
    return NULL if result is None else result


HANDLERS = {
    ast.Program: eval_program,
    ast.LetStatement: eval_let_statement,
    ast.ReturnStatement: eval_return_statement,
    ast.ExpressionStatement: eval_expression_statement,
    ast.BlockStatement: eval_block_statement,
    ast.Identifier: eval_identifier,
    ast.IntegerLiteral: eval_integer_literal,
    ast.BooleanLiteral: eval_boolean_literal,
    ast.StringLiteral: eval_string_literal,
    ast.PrefixExpression: eval_prefix_expression,
    ast.InfixExpression: eval_infix_expression,
    ast.IfExpression: eval_if_expression,
    ast.FunctionLiteral: eval_function_literal,
    ast.CallExpression: eval_call_expression,
}

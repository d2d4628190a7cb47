"""Abstract syntax tree for the monkey language. Nodes are frozen dataclasses built bottom-up by the parser: a node is
only constructed once all of its children exist, so no node is ever visible half-built.

Formally (see parser.py for precedence),

```
<program>    ::= <statement>*
<statement>  ::= "let" <ident> "=" <expr> [";"]
               | "return" <expr> [";"]
               | <expr> [";"]
<block>      ::= "{" <statement>* "}"
<expr>       ::= <ident> | <int> | <string> | "true" | "false"
               | <prefix_op> <expr>                    ; prefix_op: ! -
               | <expr> <infix_op> <expr>              ; infix_op: + - * / < > == !=
               | "(" <expr> ")"
               | "if" "(" <expr> ")" <block> ["else" <block>]
               | "fn" "(" [<ident> ("," <ident>)*] ")" <block>
               | <expr> "(" [<expr> ("," <expr>)*] ")"
```

str(node) is the canonical form: every prefix and infix expression is fully parenthesized, so it shows exactly how
the parser grouped operators.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Optional, Tuple


class Node(ABC):
    """Superclass of every syntax tree node."""

    def display(self, indents=0):
        """Recursively displays node and its children in a readable format.

        Format:
        <Node>(
            <field>=<Node>(...)
            <field>=[
                <Node>(...)
            ]
        )
        """
        pad = "    " * indents
        lines = [f"{pad}{type(self).__name__}("]
        for name, value in vars(self).items():
            if isinstance(value, Node):
                lines.append(f"{pad}    {name}=" + value.display(indents + 1).lstrip())
            elif isinstance(value, tuple):
                lines.append(f"{pad}    {name}=[")
                lines.extend(node.display(indents + 2) for node in value)
                lines.append(f"{pad}    ]")
            else:
                lines.append(f"{pad}    {name}={value!r}")
        lines.append(f"{pad})")
        return "\n".join(lines)


class Statement(Node):
    """A node that appears in a statement list."""


class Expression(Node):
    """A node that produces a value when evaluated."""


@dataclass(frozen=True)
class Program(Node):
    statements: Tuple[Statement, ...] = ()

    def __str__(self):
        return "".join(str(statement) for statement in self.statements)


@dataclass(frozen=True)
class Identifier(Expression):
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class IntegerLiteral(Expression):
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class BooleanLiteral(Expression):
    value: bool

    def __str__(self):
        return "true" if self.value else "false"


@dataclass(frozen=True)
class StringLiteral(Expression):
    value: str

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class PrefixExpression(Expression):
    operator: str
    operand: Expression

    def __str__(self):
        return f"({self.operator}{self.operand})"


@dataclass(frozen=True)
class InfixExpression(Expression):
    operator: str
    left: Expression
    right: Expression

    def __str__(self):
        return f"({self.left} {self.operator} {self.right})"


@dataclass(frozen=True)
class LetStatement(Statement):
    name: Identifier
    value: Expression

    def __str__(self):
        return f"let {self.name} = {self.value};"


@dataclass(frozen=True)
class ReturnStatement(Statement):
    value: Expression

    def __str__(self):
        return f"return {self.value};"


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    value: Expression

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class BlockStatement(Statement):
    statements: Tuple[Statement, ...] = ()

    def __str__(self):
        return "".join(str(statement) for statement in self.statements)


@dataclass(frozen=True)
class IfExpression(Expression):
    condition: Expression
    consequence: BlockStatement
    alternative: Optional[BlockStatement] = None

    def __str__(self):
        result = f"if{self.condition} {self.consequence}"
        if self.alternative is not None:
            result += f"else {self.alternative}"
        return result


@dataclass(frozen=True)
class FunctionLiteral(Expression):
    parameters: Tuple[Identifier, ...]
    body: BlockStatement

    def __str__(self):
        params = ", ".join(str(param) for param in self.parameters)
        return f"fn({params}) {self.body}"


@dataclass(frozen=True)
class CallExpression(Expression):
    function: Expression
    arguments: Tuple[Expression, ...] = ()

    def __str__(self):
        args = ", ".join(str(arg) for arg in self.arguments)
        return f"{self.function}({args})"


# closed variant sets; the evaluator must handle every one of these
STATEMENT_TYPES = (LetStatement, ReturnStatement, ExpressionStatement, BlockStatement)
EXPRESSION_TYPES = (
    Identifier,
    IntegerLiteral,
    BooleanLiteral,
    StringLiteral,
    PrefixExpression,
    InfixExpression,
    IfExpression,
    FunctionLiteral,
    CallExpression,
)

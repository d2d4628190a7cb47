"""Runtime values produced by evaluating monkey programs.

NULL, TRUE and FALSE are the only instances of their types, so identity and equality coincide for them and the
evaluator compares them with `is`. ReturnValue and Error are signals rather than ordinary values: a ReturnValue never
escapes the function call (or program) that produced it, and an Error short-circuits everything that encloses it.
"""

from abc import ABC, abstractmethod


INT64_MIN = -2 ** 63
INT64_MASK = 2 ** 64 - 1


def wrap_int64(value):
    """Wraps value onto a signed 64-bit integer (two's complement overflow)."""
    value &= INT64_MASK
    return value + INT64_MIN * 2 if value > -INT64_MIN - 1 else value


class Object(ABC):
    """Superclass of every runtime value."""
    type_name = "OBJECT"

    @abstractmethod
    def describe(self):
        """Human-readable form of this value, as shown by the shell."""

    def __repr__(self):
        return f"{type(self).__name__}({self.describe()!r})"

    def __str__(self):
        return self.describe()


class Integer(Object):
    type_name = "INTEGER"

    def __init__(self, value):
        self.value = wrap_int64(value)

    def describe(self):
        return str(self.value)

    def __eq__(self, other):
        return isinstance(other, Integer) and other.value == self.value

    def __hash__(self):
        return hash(self.value)


class String(Object):
    type_name = "STRING"

    def __init__(self, value):
        self.value = value

    def describe(self):
        return self.value

    def __eq__(self, other):
        return isinstance(other, String) and other.value == self.value

    def __hash__(self):
        return hash(self.value)


class Boolean(Object):
    """Only TRUE and FALSE should ever exist; use native_bool to get one."""
    type_name = "BOOLEAN"

    def __init__(self, value):
        self.value = value

    def describe(self):
        return "true" if self.value else "false"


class Null(Object):
    """Only NULL should ever exist."""
    type_name = "NULL"

    def describe(self):
        return "null"


class ReturnValue(Object):
    type_name = "RETURN_VALUE"

    def __init__(self, value):
        self.value = value

    def describe(self):
        return self.value.describe()


class Error(Object):
    type_name = "ERROR"

    def __init__(self, message):
        self.message = message

    def describe(self):
        return f"ERROR: {self.message}"

    def __eq__(self, other):
        return isinstance(other, Error) and other.message == self.message

    def __hash__(self):
        return hash(self.message)


class Function(Object):
    """A closure: parameters and body of a function literal, plus the environment it was evaluated in. The
    environment is shared, not copied, so later bindings in the defining scope are visible to the function.
    """
    type_name = "FUNCTION"

    def __init__(self, parameters, body, env):
        self.parameters = parameters
        self.body = body
        self.env = env

    def describe(self):
        params = ", ".join(str(param) for param in self.parameters)
        return f"fn({params}) {{ {self.body} }}"


NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)


def native_bool(value):
    return TRUE if value else FALSE


def is_truthy(value):
    """Everything except NULL and FALSE is truthy."""
    return value is not NULL and value is not FALSE


def is_error(value):
    return isinstance(value, Error)

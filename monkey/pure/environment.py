"""Lexically scoped name bindings. Environments form a chain through outer: lookups walk outwards, writes only ever
touch the innermost scope.
"""


class Environment:
    """A scope of name: value bindings with an optional enclosing scope."""

    def __init__(self, outer=None):
        self.outer = outer
        self.store = {}

    @classmethod
    def enclosed(cls, outer):
        """New scope whose lookups fall back to outer. Used for function calls."""
        return cls(outer)

    def get(self, name):
        """Returns the value bound to name in the nearest scope that has it, or None."""
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return None

    def set(self, name, value):
        self.store[name] = value
        return value

    def __repr__(self):
        return f"Environment({sorted(self.store)}, outer={self.outer!r})"

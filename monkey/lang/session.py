"""Session control for the monkey interpreter: feeds source lines through the lexer, parser and evaluator, either in
command-line mode or file interpretation mode. A session owns one top-level Environment, so let bindings made by one
line are visible to every later line.
"""

from monkey.lang.error import GenericException
from monkey.pure.environment import Environment
from monkey.pure.evaluator import evaluate
from monkey.pure.lexer import Lexer
from monkey.pure.objects import is_error
from monkey.pure.parser import parse
from monkey.pure.token import TokenKind


COMMENT = "//"

OPENERS = (TokenKind.LPAREN, TokenKind.LBRACE)
CLOSERS = (TokenKind.RPAREN, TokenKind.RBRACE)


def strip_comment(line):
    """Removes a trailing // comment from line, ignoring any // inside a string literal."""
    in_string = False
    escaped = False
    for idx, char in enumerate(line):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == "\"":
                in_string = False
        elif char == "\"":
            in_string = True
        elif line.startswith(COMMENT, idx):
            return line[:idx]
    return line


class Session:
    """Governs a monkey session, with control over the top-level environment."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, lexer_mode=False, parser_mode=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path                # used for error messages
        self.cmd_line = path == Session.SH_FILE
        self.lexer_mode = lexer_mode    # print tokens of every line
        self.parser_mode = parser_mode  # print canonical form of every parsed line

        self.env = Environment()
        self.to_exec = {}  # dict of line num: (source, Program) to evaluate
        self.results = []  # values produced by run, oldest first

        if self.cmd_line:
            self.error_handler.fatal = False
        else:
            exprs = []
            add_to_prev = False

            try:
                with open(path, "r") as file:
                    for line_num, line in enumerate(file):
                        __, add_to_prev = self.preprocess_line(line, line_num + 1, add_to_prev, exprs)
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            for expr in exprs:
                self.add(*expr)

    @staticmethod
    def preprocess_line(line, line_num, add_to_prev, exprs=None):
        """Preprocesses a line from a file or command-line. In command-line mode, exprs can be ignored (used to keep
        track of file's exprs), but the returned add_to_prev will indicate whether a line continuation is necessary,
        i.e. whether line leaves a paren or brace open. Returns updated value of line and add_to_prev.
        """
        line = strip_comment(line).rstrip()

        if exprs is not None:
            if add_to_prev and exprs:
                prev, first_line_num = exprs.pop()
                line = prev + "\n" + line
                exprs.append((line, first_line_num))
            elif line.strip():
                exprs.append((line, line_num))

        balance = 0
        for token in Lexer(line):
            if token.kind in OPENERS:
                balance += 1
            elif token.kind in CLOSERS:
                balance -= 1

        return line, balance > 0

    def add(self, source, line_num):
        """Parses source and queues it for run. Returns whether source parsed cleanly: if not, its syntax errors are
        reported and nothing is queued.
        """
        if not source.strip():
            raise ValueError("source cannot be empty")

        self.error_handler.register_line(self.path, source, line_num)  # in case error is raised

        if self.lexer_mode:
            self._print_tokens(source)

        program, errors = parse(source)
        if errors:
            self.error_handler.syntax_errors(errors)
            self.error_handler.remove_line(self.path)
            return False

        if self.parser_mode:
            print("--- Parser ---")
            print(program)
            print(program.display())

        self.to_exec[line_num] = (source, program)
        self.error_handler.remove_line(self.path)  # error was not raised
        return True

    def run(self):
        """Evaluates every queued program in order, in the session's environment. Runtime errors are reported through
        the error handler rather than stored in results. In file mode, each result is also printed as soon as it is
        produced.
        """
        for line_num, (source, program) in list(self.to_exec.items()):
            self.error_handler.register_line(self.path, source, line_num)

            try:
                result = evaluate(program, self.env)
            finally:
                del self.to_exec[line_num]

            if is_error(result):
                self.error_handler.runtime_error(result)
            elif result is not None:
                self.results.append(result)
                if not self.cmd_line:
                    print(result.describe())

            self.error_handler.remove_line(self.path)

    def pop(self):
        """Removes and returns the most recent result."""
        return self.results.pop()

    def _print_tokens(self, source):
        print("--- Lexer ---")
        for token in Lexer(source):
            print(token)
            if token.kind is TokenKind.ILLEGAL:
                self.error_handler.warn("illegal token '{}'", token.literal, diagnosis=False)

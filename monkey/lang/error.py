"""Error reporting for the monkey interpreter. Only GenericExceptions should be encountered during running: if another
type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Syntax errors and runtime Error values are not exceptions. They are reported through ErrorHandler.syntax_errors and
ErrorHandler.runtime_error, which print them and, unless the handler is fatal, let the session carry on.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a monkey error/warning."""

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        """Parses args for GenericException or warning."""
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        super().__init__(msg.format(*exprs))

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]  # exprs[0] should be the offending expr that caused the error
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal


class ErrorHandler:
    """Context manager that reports monkey errors/warnings instead of letting Python tracebacks through."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to Session add/run."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after successful Session add/run."""
        self.traceback[path] = (None, None)

    def _location(self):
        """Returns (file, line, line_num) of the line currently being processed."""
        for file, (line, line_num) in self.traceback.items():
            if line is not None:
                return file, line, line_num
        return next(iter(self.traceback), "<in>"), None, None

    @staticmethod
    def diagnose(error, warning=False):
        """Returns offending part of error.expr highlighted and bolded."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        diagnosis = "  " + error.expr[:error.start]

        end = max(error.end, error.start + 1)
        diagnosis += colored(error.expr[error.start:end], color, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), color, attrs=["bold"])

        return diagnosis

    def warn(self, *args, **kwargs):
        """Generates and prints warning message based on args."""
        error = GenericException(*args, **kwargs)

        file, line, line_num = self._location()
        if line is not None and error.expr in line:
            col = line.index(error.expr) + error.start + 1
            error_msg = colored(f"{file}:{line_num}:{col}: ", attrs=["bold"])
        else:
            error_msg = colored(f"{file}: ", attrs=["bold"])
        error_msg += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg

        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=True))

    def syntax_errors(self, messages):
        """Prints every syntax error collected while parsing the current line. Exits if fatal."""
        file, line, line_num = self._location()
        where = f"{file}:{line_num}: " if line_num is not None else f"{file}: "

        for message in messages:
            print(colored(where, attrs=["bold"]) + colored("syntax error: ", ErrorHandler.ERROR, attrs=["bold"]) +
                  message)

        if line is not None:
            print(f"  {line}")

        if self.fatal:
            sys.exit(1)

    def runtime_error(self, error):
        """Prints a runtime Error value produced by evaluation. Exits if fatal."""
        file, __, line_num = self._location()
        where = f"{file}:{line_num}: " if line_num is not None else f"{file}: "
        print(colored(where, attrs=["bold"]) + colored("ERROR: ", ErrorHandler.ERROR, attrs=["bold"]) + error.message)

        if self.fatal:
            sys.exit(1)

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException, and self.traceback must be a
        dict of file: (line, line_num) representing origination of error.
        """
        error_msg = ""
        lines = 0
        for file, (line, line_num) in self.traceback.items():  # assumes dict is insertion-ordered
            if line:
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line}\n"
                lines += 1

        if lines > 1:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)
        for path in self.traceback:  # if error occurred, reset traceback (no need if error is fatal)
            self.remove_line(path)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("maximum recursion depth exceeded"))
        elif exc_type is GenericException:
            self.throw(exc_val)
        elif exc_type is not None:
            self.fatal = True  # internal errors always abort, even in the shell
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))

        return not do_exit

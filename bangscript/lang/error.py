"""Error handling for bangscript. Only GenericExceptions (and subclasses) should be encountered during running: if
another type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
Errors and warnings go to stderr so that stdout only ever holds program output.

Every diagnostic is located as `<path>:<line>:<col>:`, where line is the 0-based statement index and col the offset
of the offending text in that statement, followed by the statement with the offending text underlined.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a bangscript error/warning."""

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False, line_num=None):
        """Parses args for GenericException or warning. line_num is the statement the error belongs to, if the
        raiser knows it; otherwise ErrorHandler uses the statement that was running.
        """
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]  # exprs[0] should be the offending statement
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal
        self.line_num = line_num

        super().__init__(self.msg)


class IllegalCharacter(GenericException):
    """Raised by the lexer on a character that starts no token. Always fatal to the run."""

    def __init__(self, char, line_num, expr, start):
        self.char = char
        msg = "'{}' contains illegal character '{}' at line {}"
        super().__init__(msg, (expr, char, str(line_num)), start=start, end=start + len(char), line_num=line_num)


class UndefinedVariable(GenericException):
    """Raised when a print statement looks up a name that has not been declared."""

    def __init__(self, name, expr=None):
        self.name = name
        if not expr:
            super().__init__("undefined variable '{}'", name)
            return

        start = max(expr.rfind(name), 0)
        super().__init__("'{}' uses undefined variable '{}'", (expr, name), start=start, end=start + len(name))


class ErrorHandler:
    """Context manager that reports bangscript errors for one script. Fatal handlers exit with status 1, others
    (command-line mode) report the error and carry on.
    """
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.path = None      # script being run
        self.line = None      # source of the statement being run
        self.line_num = None  # its line number

    def register_file(self, path):
        self.path = path

    def register_line(self, line, line_num):
        """Marks line as the running statement. Errors without their own line number are reported against it."""
        self.line, self.line_num = line, line_num

    def remove_line(self):
        """Should be called once the running statement finished without error."""
        self.line, self.line_num = None, None

    def locate(self, error):
        """Returns the '<path>:<line>:<col>: ' prefix for error, leaving out whatever is unknown."""
        line_num = error.line_num if error.line_num is not None else self.line_num
        parts = [self.path if self.path else "<bang>"]
        if line_num is not None:
            parts.append(str(line_num))
            if error.expr and error.diagnosis:
                parts.append(str(error.start))
        return colored(":".join(parts) + ": ", attrs=["bold"])

    @staticmethod
    def diagnose(error, warning=False):
        """Returns error.expr with the offending span highlighted and underlined by carets."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR
        start, end = error.start, max(error.end, error.start + 1)

        before, offending, after = error.expr[:start], error.expr[start:end], error.expr[end:]
        carets = colored("^" + "~" * (len(offending) - 1), color, attrs=["bold"])

        highlighted = before + colored(offending, color, attrs=["bold"]) + after
        return f"  {highlighted}\n  {' ' * start}{carets}"

    def report(self, error, label, color):
        print(self.locate(error) + colored(label, color, attrs=["bold"]) + error.msg, file=sys.stderr)
        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=color == ErrorHandler.WARNING), file=sys.stderr)
        elif self.line:
            print(f"  {self.line}", file=sys.stderr)  # no snippet of its own, show the running statement

    def warn(self, *args, **kwargs):
        """Builds a GenericException from args and prints it as a warning. Never stops the run."""
        self.report(GenericException(*args, **kwargs), "warning: ", ErrorHandler.WARNING)

    def throw(self, error):
        """Prints error. Exits if fatal, otherwise forgets the running statement."""
        label = "[internal] error: " if error.internal else "error: "
        self.report(error, label, ErrorHandler.ERROR)

        if self.fatal:
            sys.exit(1)
        self.remove_line()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None or exc_type is SystemExit:
            return False

        if issubclass(exc_type, GenericException):
            error = exc_val
        elif exc_type is KeyboardInterrupt:
            error = GenericException("interrupted")
        else:
            error = GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True)

        self.throw(error)
        return not error.internal  # internal errors keep propagating

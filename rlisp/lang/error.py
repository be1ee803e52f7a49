"""Error handling for rlisp. Only LispErrors should be encountered during running: if another type of error is raised
and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Error taxonomy:
    LispError
    ├── LexError            unterminated string/escape
    ├── ParseError          unmatched list delimiters, trailing input, unsupported tokens
    └── EvalError
        ├── SymbolNotFound
        ├── ArityError
        ├── ArgumentTypeError
        └── NotCallable
"""

import sys

from termcolor import colored


class LispError(Exception):
    """Templates an error message so that it can be used to throw an rlisp error. exprs are substituted into msg and
    are bolded when the error is displayed.
    """

    def __init__(self, msg, exprs=None, internal=False):
        if exprs is None:
            exprs = []
        elif not isinstance(exprs, (list, tuple)):
            exprs = [exprs]

        self.msg = msg
        self.exprs = [str(expr) for expr in exprs]
        self.reason = msg.format(*self.exprs)
        self.internal = internal

        super().__init__(self.reason)

    def colored_reason(self):
        """Reason with expr snippets bolded."""
        return self.msg.format(*(colored(expr, attrs=["bold"]) for expr in self.exprs))

    def __str__(self):
        return self.reason


class LexError(LispError):
    """Raised while tokenizing."""


class ParseError(LispError):
    """Raised while building the syntax tree."""


class EvalError(LispError):
    """Raised while evaluating a syntax tree."""


class SymbolNotFound(EvalError):

    def __init__(self, name):
        super().__init__("symbol not found: {}", name)
        self.name = name


class ArityError(EvalError):

    def __init__(self, name, expected, actual):
        super().__init__("procedure '{}' expects {} argument(s), got {}", [name, expected, actual])
        self.name = name
        self.expected = expected
        self.actual = actual


class ArgumentTypeError(EvalError):
    pass


class NotCallable(EvalError):
    pass


class ErrorHandler:
    """Context manager that will report rlisp errors and, unless fatal, suppress them so the next line can run."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, file=None):
        self.fatal = fatal
        self.file = file if file is not None else sys.stdout
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to Session add."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after successful Session add."""
        self.traceback[path] = (None, None)

    def warn(self, msg, exprs=None):
        """Generates and prints a warning message."""
        warning = LispError(msg, exprs)
        print(colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + warning.colored_reason(), file=self.file)

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a LispError, and self.traceback must be a dict of
        file: (line, line_num) representing origination of error.
        """
        error_msg = ""
        for file, (line, line_num) in self.traceback.items():  # dicts are insertion-ordered
            if line:
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line}\n"

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.colored_reason()
        print(error_msg, file=self.file)

        if self.fatal:
            sys.exit(1)
        for path in self.traceback:  # if error occurred, reset traceback (no need if error is fatal)
            self.remove_line(path)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(LispError("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(LispError("maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, LispError):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(LispError("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit

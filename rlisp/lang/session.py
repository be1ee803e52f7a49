"""Session control for rlisp. Owns the root environment and runs lines through the tokenize -> parse -> evaluate
pipeline, either from a file or from the command-line shell.
"""

from rlisp.lang.env import default_environment
from rlisp.lang.error import LispError
from rlisp.lang.evaluator import evaluate
from rlisp.pure.parser import read
from rlisp.pure.syntax import to_string


class Session:
    """Governs an rlisp session. Every line is evaluated against the same root environment."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, cmd_line, env=None, show_tree=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path            # used for error messages
        self.cmd_line = cmd_line    # whether or not in command-line mode
        self.show_tree = show_tree  # whether or not parse trees are recorded alongside results

        self.env = env if env is not None else default_environment()
        self.results = []  # list of (parse tree, value) for evaluated lines, in order
        self.to_exec = []  # list of (line, line num) waiting for run

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            add_to_prev = False
            try:
                with open(path, "r") as file:
                    for line_num, line in enumerate(file):
                        __, add_to_prev = self.preprocess_line(line, line_num + 1, add_to_prev, self.to_exec)
            except OSError:
                raise LispError("'{}' could not be opened", path)

            if add_to_prev:
                raise LispError("'{}' ends inside an unclosed list", path)

        elif not cmd_line:
            raise LispError("'<in>' is a reserved filename")

    @staticmethod
    def preprocess_line(line, line_num, add_to_prev, exprs=None):
        """Preprocesses a line from a file or command-line. In command-line mode, exprs can be ignored (used to keep
        track of file's exprs), but add_to_prev will indicate whether a line continuation is necessary. Returns
        updated value of line and add_to_prev.
        """
        line = line.rstrip()
        if exprs is not None:
            if add_to_prev:
                prev, prev_num = exprs.pop()
                line = prev + " " + line
                line_num = prev_num
            if line.strip():
                exprs.append((line, line_num))

        return line, line.count("(") > line.count(")")

    def add(self, line, line_num):
        """Tokenizes, parses and evaluates line, then records its result. Returns the resulting value."""
        self.error_handler.register_line(self.path, line, line_num)  # in case error is raised

        tree = read(line)
        value = evaluate(tree, self.env)
        self.results.append((tree, value))

        self.error_handler.remove_line(self.path)  # error was not raised
        return value

    def run(self):
        """Evaluates every line read from this session's file, yielding the printable result of each. Will raise any
        errors that are encountered.
        """
        while self.to_exec:
            line, line_num = self.to_exec.pop(0)
            self.add(line, line_num)
            yield self.pop()

    def pop(self):
        """Removes the most recent result and returns its printable form."""
        tree, value = self.results.pop()
        if self.show_tree:
            return f"Parse Tree:\n{tree.display(1)}\n{to_string(value)}"
        return to_string(value)

"""Handles interactive/command-line mode for the rlisp interpreter. Uses cmd as backend."""

import cmd

from termcolor import colored

from rlisp.lang.history import history_path, load_history, save_history


class Shell(cmd.Cmd):
    """rlisp interpreter shell."""
    intro = "rlisp :: a minimal S-expression interpreter\nType 'help' for more information, 'exit' or Ctrl-D to quit."
    prompt = colored(">> ", "red")
    secondary_prompt = "... "  # used for line continuations
    _tmp_prompt = prompt       # also used for prompt swapping in line continuations

    def __init__(self, sess, histfile=None, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.histfile = histfile if histfile is not None else history_path()

        self._tmp_line = ""
        self.line_num = 0

    def preloop(self):
        """Loads line history."""
        load_history(self.histfile, self.sess.error_handler)

    def postloop(self):
        """Saves line history."""
        save_history(self.histfile, self.sess.error_handler)

    def default(self, line):
        """Evaluates an arbitrary rlisp expression and prints its value."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            if self._tmp_line:
                line = self._tmp_line + " " + line
            line, add_to_prev = self.sess.preprocess_line(line, self.line_num, bool(self._tmp_line))

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
                return

            self._tmp_line = ""
            self.prompt = self._tmp_prompt

            self.sess.add(line, self.line_num)
            print(self.sess.pop())

    def do_help(self, arg):
        """Prints a short intro to the language instead of command docs."""
        print("Welcome to rlisp!\n\n"
              "Expressions are numbers, symbols and lists. A non-empty list is a procedure \n"
              "call: try '(+ 1 2 3)' or '(- 5 2)'. Procedures are made with lambda: \n"
              "'(lambda (x y) (- x y))' is a procedure of two arguments.\n\n"
              "Lists with unclosed parentheses continue on the next line.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        if self._tmp_line:
            return self.default("")
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True

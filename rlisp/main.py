"""Runs the rlisp interpreter on a file, or in command-line mode. Also uses error handling context manager. Called from
the rlisp console script and from `python -m rlisp`.
"""

import argparse

from rlisp.lang.error import ErrorHandler
from rlisp.lang.history import history_path
from rlisp.lang.session import Session
from rlisp.lang.shell import Shell


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="rlisp", description="Minimal S-expression interpreter.")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--tree", action="store_true", help="print the parse tree of each line before its value")
    parser.add_argument("--histfile", default=None,
                        help="command-line history file (default: $RLISP_HISTFILE or the user cache directory)")
    return parser.parse_args(argv)


def main(argv=None):
    """Runs rlisp interpreter. Called from rlisp executable script."""
    args = parse_args(argv)

    with ErrorHandler() as error_handler:
        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False, show_tree=args.tree)
            for result in sess.run():
                print(result)

        else:
            sess = Session(error_handler, Session.SH_FILE, cmd_line=True, show_tree=args.tree)
            Shell(sess, args.histfile or history_path()).cmdloop()


if __name__ == "__main__":
    main()

"""Persistent line history for the shell, backed by readline when it is available."""

import os

try:
    import readline
except ImportError:
    readline = None

HISTFILE_NAME = "rlisp_history"
HISTFILE_SIZE = 9000


def history_path(environ=None):
    """Resolves the history file location: $RLISP_HISTFILE, else the rlisp directory of $XDG_CACHE_HOME, else
    ~/.cache/rlisp.
    """
    if environ is None:
        environ = os.environ

    if environ.get("RLISP_HISTFILE"):
        return environ["RLISP_HISTFILE"]

    cache_home = environ.get("XDG_CACHE_HOME") or os.path.join(os.path.expanduser("~"), ".cache")
    return os.path.join(cache_home, "rlisp", HISTFILE_NAME)


def load_history(path, error_handler=None):
    """Reads history from path, if there is any. Returns whether history was loaded."""
    if readline is None or not os.path.exists(path):
        return False

    try:
        readline.read_history_file(path)
    except OSError as error:
        if error_handler is not None:
            error_handler.warn("failed to read history file {}: {}", [path, error.strerror])
        return False

    readline.set_history_length(HISTFILE_SIZE)
    return True


def save_history(path, error_handler=None):
    """Writes history to path, creating its directory if needed. Returns whether history was saved."""
    if readline is None:
        return False

    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        readline.set_history_length(HISTFILE_SIZE)
        readline.write_history_file(path)
    except OSError as error:
        if error_handler is not None:
            error_handler.warn("failed to write history file {}: {}", [path, error.strerror])
        return False
    return True

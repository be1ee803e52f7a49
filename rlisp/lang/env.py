"""Lexically-scoped environments: a chain of scopes, each mapping symbol names to Expression values."""

from rlisp.lang.builtins import BUILTINS
from rlisp.lang.error import SymbolNotFound


class Environment:
    """A single scope plus an optional parent. Lookups walk outward, so inner bindings shadow outer ones. Scopes are
    never mutated by evaluation: procedure calls extend the chain instead.
    """

    def __init__(self, bindings=None, parent=None):
        self.bindings = dict(bindings) if bindings else {}
        self.parent = parent

    def lookup(self, name):
        """Returns value bound to name in the innermost scope that binds it."""
        env = self
        while env is not None:
            if name in env.bindings:
                return env.bindings[name]
            env = env.parent
        raise SymbolNotFound(name)

    def extend(self, bindings=None):
        """Returns a new scope whose parent is self."""
        return Environment(bindings, parent=self)

    def __contains__(self, name):
        try:
            self.lookup(name)
        except SymbolNotFound:
            return False
        return True

    def __repr__(self):
        depth, env = 0, self.parent
        while env is not None:
            depth, env = depth + 1, env.parent
        return f"Environment({sorted(self.bindings)}, depth={depth})"


def default_environment():
    """Returns a new root scope holding the builtin procedures."""
    return Environment({builtin.name: builtin for builtin in BUILTINS})

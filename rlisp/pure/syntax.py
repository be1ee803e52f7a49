"""rlisp abstract syntax tree. Expressions are both the parser's output and the evaluator's values:

```
<expr> ::= <symbol>                         ; resolved by environment lookup
         | <number>                         ; self-evaluating float
         | "(" <expr>* ")"                  ; application when non-empty, the empty-list value otherwise
```

Lambda and Builtin never come out of the parser. They are procedure values produced by evaluation and bound in
environments, and are included here so that every value the evaluator handles is an Expression.
"""

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Tuple


class Expression:
    """Superclass of all AST nodes/values."""

    def display(self, indents=0):
        """Recursively displays the tree with a readable format, one node per line."""
        return "    " * indents + repr(self)

    def __str__(self):
        return to_string(self)


@dataclass(frozen=True, repr=False, eq=True)
class Symbol(Expression):
    name: str

    def __repr__(self):
        return f"Symbol({self.name})"


@dataclass(frozen=True, repr=False, eq=True)
class Number(Expression):
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def __repr__(self):
        return f"Number({format_number(self.value)})"


@dataclass(frozen=True, repr=False, eq=True)
class List(Expression):
    elements: Tuple[Expression, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))

    def display(self, indents=0):
        """List(
            <Expression>,
            ...
        )
        """
        if not self.elements:
            return super().display(indents)
        result = f"{'    ' * indents}List("
        for element in self.elements:
            result += "\n" + element.display(indents + 1) + ","
        return result[:-1] + f"\n{'    ' * indents})"

    def __repr__(self):
        return f"List({', '.join(repr(element) for element in self.elements)})"


@dataclass(frozen=True, repr=False, eq=True)
class Lambda(Expression):
    """User-defined procedure: parameter names plus an unevaluated body. env is the environment the lambda was created
    in, which call frames extend. It does not take part in equality.
    """
    params: Tuple[str, ...]
    body: Expression
    env: Any = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "params", tuple(self.params))

    def __repr__(self):
        return f"Lambda(params={list(self.params)}, body={self.body!r})"


@dataclass(frozen=True, repr=False, eq=True)
class Builtin(Expression):
    """Primitive procedure. procedure(name, args, env) receives its arguments unevaluated."""
    name: str
    procedure: Callable = field(compare=False)

    def __call__(self, args, env):
        return self.procedure(self.name, args, env)

    def __repr__(self):
        return f"Builtin({self.name})"


def format_number(value):
    """Finite floats are displayed in positional notation, in the shortest form that reads back as the same value.
    Integral floats are displayed without a trailing '.0'.
    """
    if not math.isfinite(value):
        return repr(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def to_string(expr):
    """Serializes expr back to source form."""
    if isinstance(expr, Number):
        return format_number(expr.value)
    elif isinstance(expr, Symbol):
        return expr.name
    elif isinstance(expr, List):
        return "(" + " ".join(to_string(element) for element in expr.elements) + ")"
    elif isinstance(expr, Lambda):
        return f"(lambda ({' '.join(expr.params)}) {to_string(expr.body)})"
    elif isinstance(expr, Builtin):
        return f"#<builtin {expr.name}>"
    raise TypeError(f"cannot serialize {type(expr).__name__}")

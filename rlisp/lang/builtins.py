"""Builtin procedures. Each is called as procedure(name, args, env) with unevaluated args, and is responsible for
evaluating them itself: this lets lambda receive its parameter list without it being looked up.
"""

import math

from rlisp.lang.error import ArgumentTypeError, ArityError, EvalError
from rlisp.lang.evaluator import evaluate
from rlisp.pure.syntax import Builtin, Lambda, List, Number, Symbol


def check_arity(name, args, arity):
    if len(args) != arity:
        raise ArityError(name, arity, len(args))


def finite(name, value):
    """Wraps value in a Number. Results that overflow to inf or nan are errors."""
    if not math.isfinite(value):
        raise EvalError("'{}' result out of range", name)
    return Number(value)


def evaluate_number(name, arg, env):
    """Evaluates arg, which must result in a Number."""
    value = evaluate(arg, env)
    if not isinstance(value, Number):
        raise ArgumentTypeError("'{}' expects numbers, got '{}'", [name, value])
    return value


def add(name, args, env):
    """(+ a b ...): sum of any number of numbers, folded from 0."""
    total = 0.0
    for arg in args:
        total += evaluate_number(name, arg, env).value
    return finite(name, total)


def subtract(name, args, env):
    """(- a b): a minus b."""
    check_arity(name, args, 2)
    first, second = (evaluate_number(name, arg, env) for arg in args)
    return finite(name, first.value - second.value)


def make_lambda(name, args, env):
    """(lambda (p1 p2 ...) body): procedure value closing over env. Neither argument is evaluated."""
    check_arity(name, args, 2)
    params, body = args

    if not isinstance(params, List):
        raise ArgumentTypeError("lambda parameters must be a list, got '{}'", params)
    for param in params.elements:
        if not isinstance(param, Symbol):
            raise ArgumentTypeError("parameters must be symbols, got '{}'", param)

    return Lambda(tuple(param.name for param in params.elements), body, env)


BUILTINS = (
    Builtin("+", add),
    Builtin("-", subtract),
    Builtin("lambda", make_lambda),
)

"""Tree-walking evaluator for rlisp.

Evaluation rules:
    - Numbers, Lambdas and Builtins evaluate to themselves
    - Symbols evaluate to their binding in the environment
    - the empty List evaluates to itself
    - (f arg1 arg2 ...) looks up f, which must name a Builtin or a Lambda. Builtins receive their arguments unevaluated
      and evaluate them as needed. Lambdas receive evaluated arguments, bound to their parameter names in a scope
      extended from the environment they were created in.

Evaluation runs to completion or raises an EvalError. Deeply recursive programs will raise RecursionError, which is
left to the ErrorHandler.
"""

from rlisp.lang.error import ArityError, NotCallable
from rlisp.pure.syntax import Builtin, Lambda, List, Symbol


def evaluate(expr, env):
    """Evaluates expr in env and returns the resulting Expression."""
    if isinstance(expr, Symbol):
        return env.lookup(expr.name)
    elif isinstance(expr, List):
        return evaluate_list(expr, env)
    return expr


def evaluate_list(expr, env):
    if not expr.elements:
        return expr

    head, *args = expr.elements
    if not isinstance(head, Symbol):
        raise NotCallable("expected a function/procedure name, got '{}'", head)

    procedure = env.lookup(head.name)
    if isinstance(procedure, Builtin):
        return procedure(args, env)
    elif isinstance(procedure, Lambda):
        values = evaluate_args(head.name, len(procedure.params), args, env)
        return apply_lambda(head.name, procedure, values, env)
    raise NotCallable("expected a function/procedure name, got '{}' bound to '{}'", [head, procedure])


def evaluate_args(name, arity, args, env):
    """Checks that name was given arity args, then evaluates them left to right."""
    if len(args) != arity:
        raise ArityError(name, arity, len(args))
    return [evaluate(arg, env) for arg in args]


def apply_lambda(name, procedure, values, env=None):
    """Binds values to procedure's parameters in a new scope and evaluates its body there. The new scope extends the
    lambda's defining environment; env (the call site) is only used for lambdas that were built without one.
    """
    if len(values) != len(procedure.params):
        raise ArityError(name, len(procedure.params), len(values))

    defining_env = procedure.env if procedure.env is not None else env
    frame = defining_env.extend(dict(zip(procedure.params, values)))
    return evaluate(procedure.body, frame)

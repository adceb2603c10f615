"""Application engine for yascm.

Centralizes procedure application so the evaluator, the `let` form and the
`apply` primitive share one set of semantics.
"""

from __future__ import annotations

from yascm import LispValue, EvaluatorFn
from yascm.types.closure import Closure
from yascm.types.environment import Environment
from yascm.types.errors import YascmNotCallable
from yascm.types.procedure import Primitive
from yascm.types.sentinels import Unspecified


def apply_closure(
    fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Apply a user-defined closure.

    The body is evaluated in a new frame extending the closure's captured
    environment (not the caller's); the last body value is the result.
    """
    new_env = fn.extend_env(args)
    result: LispValue = Unspecified
    for form in fn.body:
        result = evaluate_fn(form, new_env)
    return result


def apply(
    head: Closure | Primitive | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a Primitive to already-evaluated arguments.

    Raises YascmNotCallable for anything else.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, Primitive):
        return head(env, args)
    else:
        raise YascmNotCallable(f"Cannot apply non-procedure of type {type(head).__name__}")

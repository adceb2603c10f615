from yascm import EvaluatorFn
from yascm import SExpression, LispValue
from yascm.types.environment import Environment
from yascm.types.sentinels import Unspecified


def eval_sequence(
    forms: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Evaluate `forms` in order and return the last value (Unspecified if empty)."""
    result: LispValue = Unspecified
    for e in forms:
        result = evaluate_fn(e, env)
    return result


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    return eval_sequence(tail, env, evaluate_fn)

from yascm import EvaluatorFn
from yascm import SExpression, LispValue
from yascm.types.errors import YascmArityError
from yascm.types.environment import Environment
from yascm.types.sentinels import FALSE, Unspecified


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise YascmArityError("if requires a test, a consequent and an optional alternative")

    test = evaluate_fn(tail[0], env)
    # Only #f is false
    if test is not FALSE:
        return evaluate_fn(tail[1], env)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env)
    else:
        return Unspecified

from yascm import EvaluatorFn
from yascm import SExpression, LispValue
from yascm.types.closure import Closure
from yascm.types.environment import Environment
from yascm.types.errors import YascmArityError


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda params body...) closes over the defining environment.
    if not tail:
        raise YascmArityError("lambda requires at least a parameter list")
    return Closure(tail[0], tail[1:], env)

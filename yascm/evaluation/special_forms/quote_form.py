from yascm import SExpression, LispValue, EvaluatorFn
from yascm.types.errors import YascmArityError


def quote_form(
    tail: list[SExpression], env, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise YascmArityError("quote expects exactly 1 argument")
    return tail[0]

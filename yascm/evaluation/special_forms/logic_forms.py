from yascm import SExpression, EvaluatorFn
from yascm.types.environment import Environment
from yascm.types.sentinels import FALSE, TRUE


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until #f is found,
    which is returned immediately. Otherwise returns the value of the last
    operand. With zero operands, returns #t.
    """
    result: SExpression = TRUE
    for expr in tail:
        result = evaluate_fn(expr, env)
        if result is FALSE:
            return result
    return result


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    value that is not #f. Otherwise returns the last value. With zero
    operands, returns #f.
    """
    result: SExpression = FALSE
    for expr in tail:
        result = evaluate_fn(expr, env)
        if result is not FALSE:
            return result
    return result

from yascm import EvaluatorFn
from yascm import SExpression, LispValue
from yascm.types.errors import YascmInvalidSymbol, YascmArityError
from yascm.types.environment import Environment
from yascm.types.sentinels import Ok
from yascm.types.symbol import Symbol


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise YascmArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise YascmInvalidSymbol(f"set! first argument must be a Symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)
    return Ok

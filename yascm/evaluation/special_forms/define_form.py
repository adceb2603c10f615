from yascm import EvaluatorFn
from yascm import SExpression, LispValue
from yascm.types.closure import Closure
from yascm.types.environment import Environment
from yascm.types.errors import YascmArityError, YascmInvalidSymbol
from yascm.types.pair import Pair
from yascm.types.sentinels import Ok
from yascm.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    (define (name . params) body...)  ; same as (define name (lambda params body...))

    Binds in the current frame only and returns ok.
    """
    if not tail:
        raise YascmArityError("define requires a name")

    target = tail[0]
    if isinstance(target, Pair):
        name = target.car
        if not isinstance(name, Symbol):
            raise YascmInvalidSymbol(f"Cannot define {name!r} as a symbol")
        env.define(name, Closure(target.cdr, tail[1:], env))
        return Ok

    if len(tail) != 2:
        raise YascmArityError("define requires exactly 2 arguments")
    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise YascmInvalidSymbol(f"Cannot define {name!r} as a symbol")
    env.define(name, evaluate_fn(val_expr, env))
    return Ok

from yascm import EvaluatorFn
from yascm import SExpression, LispValue
from yascm.types.closure import Closure
from yascm.types.environment import Environment
from yascm.types.errors import YascmArityError, YascmInvalidSymbol, YascmTypeError
from yascm.types.pair import Pair, from_iterable, iterate, to_python_list
from yascm.types.symbol import Symbol
from yascm.evaluation.apply import apply_closure


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((var expr) ...) body...)

    Equivalent to ((lambda (var ...) body...) expr ...): the init expressions
    are evaluated in the outer environment, then the body runs in a fresh frame.
    """
    if not tail:
        raise YascmArityError("let requires a binding list")

    names: list[Symbol] = []
    inits: list[SExpression] = []
    for binding in iterate(tail[0]):
        if not isinstance(binding, Pair):
            raise YascmTypeError(f"let binding must be a list, got {binding!r}")
        parts = to_python_list(binding)
        if len(parts) != 2:
            raise YascmArityError("let binding must be (name expr)")
        name, init = parts
        if not isinstance(name, Symbol):
            raise YascmInvalidSymbol(f"let binding name must be a Symbol, got {name!r}")
        names.append(name)
        inits.append(init)

    fn = Closure(from_iterable(names), tail[1:], env)
    args = [evaluate_fn(init, env) for init in inits]
    return apply_closure(fn, args, evaluate_fn)

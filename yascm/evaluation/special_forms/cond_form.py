from yascm import EvaluatorFn
from yascm import SExpression, LispValue
from yascm.types.environment import Environment
from yascm.types.errors import YascmTypeError
from yascm.types.pair import Pair, to_python_list
from yascm.types.sentinels import Else, FALSE, Unspecified
from yascm.evaluation.special_forms.progn_form import eval_sequence


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(cond (test body...) ... (else body...))

    Clauses are tried top to bottom. A clause matches when its test evaluates
    to the `else` sentinel or to anything other than #f; its body then runs
    in sequence. A clause with no body yields the test value itself.
    """
    for clause in tail:
        if not isinstance(clause, Pair):
            raise YascmTypeError(f"cond clause must be a list, got {clause!r}")
        test = evaluate_fn(clause.car, env)
        if test is Else or test is not FALSE:
            body = to_python_list(clause.cdr)
            if not body:
                return test
            return eval_sequence(body, env, evaluate_fn)
    return Unspecified

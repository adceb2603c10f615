import pytest

from yascm.evaluation.evaluator import evaluate
from yascm.types.closure import Closure
from yascm.types.environment import Environment
from yascm.types.errors import YascmArityError, YascmNotCallable
from yascm.types.pair import Pair, from_iterable, to_python_list
from yascm.types.procedure import Primitive, SpecialForm
from yascm.types.sentinels import EmptyList, Ok, TRUE
from yascm.types.character import Character
from yascm.types.symbol import SymbolTable


@pytest.fixture
def symbols():
    return SymbolTable()


@pytest.fixture
def env(symbols):
    env = Environment()
    env.define(symbols.intern("+"), Primitive("+", lambda _, args: sum(args)))
    env.define(symbols.intern("x"), 42)
    env.define(symbols.intern("y"), 100)
    return env


# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate(3.5, env) == 3.5
    assert evaluate("hello", env) == "hello"
    assert evaluate(TRUE, env) is TRUE
    assert evaluate(EmptyList, env) is EmptyList
    ch = Character("a")
    assert evaluate(ch, env) is ch
    assert evaluate(env, env) is env


def test_symbol_lookup(env, symbols):
    assert evaluate(symbols.intern("x"), env) == 42
    assert evaluate(symbols.intern("y"), env) == 100


def test_unbound_symbol_evaluates_to_empty_list(env, symbols):
    assert evaluate(symbols.intern("nope"), env) is EmptyList


def test_primitive_application(env, symbols):
    expr = from_iterable([symbols.intern("+"), 1, symbols.intern("x")])
    assert evaluate(expr, env) == 43


def test_non_callable_head_returns_form_unevaluated(env, symbols):
    expr = from_iterable([1, 2, 3])
    assert evaluate(expr, env) is expr
    unbound_head = from_iterable([symbols.intern("undefined-op"), 1])
    assert evaluate(unbound_head, env) is unbound_head


def test_arguments_are_evaluated_left_to_right(interp, capsys):
    interp.eval("(define (show x) (display x) x)")
    assert interp.eval("(+ (show 1) (show 2) (show 3))") == 6
    assert capsys.readouterr().out == "123"


def test_special_form_receives_unevaluated_arguments(env, symbols):
    seen = []

    def capture(tail, env, evaluate_fn):
        seen.extend(tail)
        return Ok

    env.define(symbols.intern("capture"), SpecialForm("capture", capture))
    unbound = symbols.intern("not-bound")
    assert evaluate(from_iterable([symbols.intern("capture"), unbound, 7]), env) is Ok
    assert seen == [unbound, 7]


def test_closure_application_uses_defining_environment(env, symbols):
    x = symbols.intern("x")
    inner = Environment(env)
    inner.define(x, 1)
    fn = Closure(from_iterable([symbols.intern("a")]), [from_iterable([symbols.intern("+"), symbols.intern("a"), x])], inner)
    env.define(symbols.intern("f"), fn)
    # called from the global frame where x is 42, but the closure sees x = 1
    assert evaluate(from_iterable([symbols.intern("f"), 10]), env) == 11


def test_closure_body_returns_last_value(interp):
    assert interp.eval("((lambda () 1 2 3))") == 3


def test_closure_with_empty_body(run):
    assert run("((lambda ()))") == ""


def test_variadic_rest_parameter(run):
    assert run("((lambda args args) 1 2 3)") == "(1 2 3)"
    assert run("((lambda args args))") == "()"


def test_closure_arity_faults(interp):
    interp.eval("(define (f a b) a)")
    with pytest.raises(YascmArityError):
        interp.eval("(f 1)")
    with pytest.raises(YascmArityError):
        interp.eval("(f 1 2 3)")


def test_eval_primitive_reenters_evaluator(run):
    assert run("(eval '(+ 1 2))") == "3"
    assert run("(eval (list '* 2 3))") == "6"


def test_eval_uses_callers_environment(run):
    assert run("(let ((z 5)) (eval 'z))") == "5"


def test_apply_primitive(run):
    assert run("(apply + (list 1 2 3))") == "6"
    assert run("(apply (lambda (a b) (cons a b)) '(1 2))") == "(1 . 2)"


def test_apply_non_procedure_faults(interp):
    with pytest.raises(YascmNotCallable):
        interp.eval("(apply 5 '(1))")
    with pytest.raises(YascmNotCallable):
        interp.eval("(apply if '(#t 1 2))")


def test_recursion(run):
    run("(define (fact n) (if (= n 0) 1 (* n (fact (- n 1)))))")
    assert run("(fact 10)") == "3628800"
    assert run("(fact 30)") == "265252859812191058636308480000000"


def test_deep_recursion_overflows_host_stack(interp):
    interp.eval("(define (down n) (if (= n 0) 0 (down (- n 1))))")
    with pytest.raises(RecursionError):
        interp.eval("(down 1000000)")


def test_special_form_values_can_be_aliased(run):
    run("(define my-if if)")
    assert run("(my-if #f 1 2)") == "2"


def test_quote_returns_same_structure(interp):
    result = interp.eval("'(a b)")
    assert isinstance(result, Pair)
    assert [s.name for s in to_python_list(result)] == ["a", "b"]


def test_apply_cyclic_pair_reports_type_only(interp):
    interp.eval("(define p (list 1))")
    interp.eval("(set-cdr! p p)")
    with pytest.raises(YascmNotCallable, match="Pair"):
        interp.eval("(apply p '())")


def test_eval_all_returns_every_result(interp):
    results = interp.eval_all("(define x 2) (* x 3) 'done")
    assert results[0] is Ok
    assert results[1] == 6
    assert results[2] is interp.symbol("done")
    assert interp.eval_all("") == []

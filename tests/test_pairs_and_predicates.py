import pytest

from yascm.types.errors import YascmArityError, YascmTypeError
from yascm.types.pair import Pair
from yascm.types.sentinels import Ok


# ------------------ structure ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cons 1 2)", "(1 . 2)"),
        ("(cons 1 '())", "(1)"),
        ("(cons 1 (cons 2 '()))", "(1 2)"),
        ("(car '(1 2))", "1"),
        ("(cdr '(1 2))", "(2)"),
        ("(cdr '(1))", "()"),
        ("(list)", "()"),
        ("(list 1 (+ 1 1) 'c)", "(1 2 c)"),
        ("(length '())", "0"),
        ("(length '(a b c))", "3"),
    ]
)
def test_structural_primitives(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("source", ["(car 1)", "(cdr '())", "(set-car! 'a 1)", "(set-cdr! \"s\" 1)", "(length (cons 1 2))"])
def test_structural_type_faults(interp, source):
    with pytest.raises(YascmTypeError):
        interp.eval(source)


@pytest.mark.parametrize("source", ["(cons 1)", "(car)", "(cdr 1 2)", "(set-car! '(1))"])
def test_structural_arity_faults(interp, source):
    with pytest.raises(YascmArityError):
        interp.eval(source)


def test_set_car_is_visible_through_aliases(interp):
    interp.eval("(define p (list 1 2 3))")
    interp.eval("(define q p)")
    interp.eval("(define holder (list p))")
    assert interp.eval("(set-car! p 'x)") is Ok
    assert interp.symbol("x") is interp.eval("(car q)")
    assert interp.symbol("x") is interp.eval("(car (car holder))")


def test_set_cdr_builds_improper_list(run):
    run("(define p (list 1 2))")
    run("(set-cdr! (cdr p) 3)")
    assert run("p") == "(1 2 . 3)"


def test_cyclic_structure_is_representable(interp):
    interp.eval("(define p (list 1 2))")
    interp.eval("(set-cdr! (cdr p) p)")
    p = interp.eval("p")
    assert isinstance(p, Pair)
    assert p.cdr.cdr is p
    assert interp.eval("(car (cdr (cdr (cdr p))))") == 2


def test_quoted_literal_is_shared_structure(interp):
    interp.eval("(define (get) '(1 2))")
    interp.eval("(set-car! (get) 9)")
    assert interp.eval("(car (get))") == 9


# ------------------ predicates ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(null? '())", "#t"),
        ("(null? '(1))", "#f"),
        ("(null? #f)", "#f"),
        ("(boolean? #f)", "#t"),
        ("(boolean? 0)", "#f"),
        ("(pair? '(1))", "#t"),
        ("(pair? '())", "#f"),
        ("(symbol? 'a)", "#t"),
        ("(symbol? \"a\")", "#f"),
        ("(number? 12)", "#t"),
        ("(number? #t)", "#f"),
        ("(char? #\\a)", "#t"),
        ("(char? \"a\")", "#f"),
        ("(string? \"a\")", "#t"),
        ("(string? #\\a)", "#f"),
        ("(procedure? car)", "#t"),
        ("(procedure? (lambda (x) x))", "#t"),
        ("(procedure? if)", "#f"),
        ("(procedure? 'car)", "#f"),
    ]
)
def test_predicates(run, source, expected):
    assert run(source) == expected


def test_predicate_arity(interp):
    with pytest.raises(YascmArityError):
        interp.eval("(null? 1 2)")


# ------------------ eq? ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(eq? 'a 'a)", "#t"),
        ("(eq? \"ab\" \"ab\")", "#t"),
        ("(eq? \"ab\" \"ba\")", "#f"),
        ("(eq? 3 3)", "#t"),
        ("(eq? 3 4)", "#f"),
        ("(eq? #t #t)", "#t"),
        ("(eq? #t #f)", "#f"),
        ("(eq? #\\a #\\a)", "#t"),
        ("(eq? '() '())", "#t"),
        ("(eq? '(1) '(1))", "#f"),
        ("(eq? car car)", "#t"),
        ("(eq? 1 \"1\")", "#f"),
        ("(let ((p '(1))) (eq? p p))", "#t"),
        ("(let ((f (lambda () 1))) (eq? f f))", "#t"),
        ("(eq? (lambda () 1) (lambda () 1))", "#f"),
    ]
)
def test_eq(run, source, expected):
    assert run(source) == expected


def test_eq_arity(interp):
    with pytest.raises(YascmArityError):
        interp.eval("(eq? 1)")

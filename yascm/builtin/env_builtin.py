"""Built-in procedures for the yascm runtime environment.

This module defines arithmetic, comparison, pair and list processing,
predicates, application helpers, console output, and the `register` function
that binds them into an interpreter's global environment.

Every primitive takes `(env, args)` where `args` is the list of already
evaluated argument values.
"""
from __future__ import annotations

import sys

from yascm import LispValue
from yascm.types.character import Character
from yascm.types.closure import Closure
from yascm.types.environment import Environment
from yascm.types.errors import YascmArityError, YascmTypeError
from yascm.types.pair import Pair, from_iterable, iterate, to_python_list
from yascm.types.procedure import Primitive
from yascm.types.sentinels import (
    Boolean,
    EmptyList,
    Ok,
    Unspecified,
    make_bool,
)
from yascm.types.symbol import Symbol, SymbolTable
from yascm.evaluation.apply import apply as apply_engine
from yascm.evaluation.evaluator import evaluate
from yascm.printer import display


def _expect_arity(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        plural = "argument" if n == 1 else "arguments"
        raise YascmArityError(f"{name} requires exactly {n} {plural}")


def _is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float))


def _check_numbers(name: str, args: list[LispValue]) -> None:
    if not all(_is_number(x) for x in args):
        raise YascmTypeError(f"All arguments to {name} must be numbers")


def _check_integers(name: str, args: list[LispValue]) -> None:
    if not all(isinstance(x, int) for x in args):
        raise YascmTypeError(f"All arguments to {name} must be integers")


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; (+) is 0."""
    _check_numbers("+", args)
    return sum(args)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise YascmArityError("- requires at least 1 argument")
    _check_numbers("-", args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the product of all arguments; (*) is 1."""
    _check_numbers("*", args)
    result = 1
    for x in args:
        result *= x
    return result


def _truncating_div(n: int, d: int) -> int:
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


def quotient(env: Environment, args: list[LispValue]) -> LispValue:
    """Integer division truncating toward zero, folded left-to-right."""
    if len(args) < 2:
        raise YascmArityError("quotient requires at least 2 arguments")
    _check_integers("quotient", args)
    result = args[0]
    for d in args[1:]:
        if d == 0:
            raise ZeroDivisionError("Division by zero")
        result = _truncating_div(result, d)
    return result


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, args: list[LispValue], holds) -> Boolean:
    _check_integers(name, args)
    if not args:
        return make_bool(True)
    acc = args[0]
    for x in args[1:]:
        if not holds(acc, x):
            return make_bool(False)
        acc = x
    return make_bool(True)


def num_eq(env: Environment, args: list[LispValue]) -> Boolean:
    """(= a b c ...) is #t when every integer equals its predecessor."""
    return _chain("=", args, lambda a, b: a == b)


def gt(env: Environment, args: list[LispValue]) -> Boolean:
    """(> a b c ...) is #t for a strictly decreasing run of integers."""
    return _chain(">", args, lambda a, b: a > b)


def is_eq(a: LispValue, b: LispValue) -> bool:
    """Identity for pairs, symbols and procedures; value for scalars and strings."""
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, (int, float, str, Character)):
        return a == b
    # Boolean and the sentinels are singletons, covered by the identity check
    return False


def eq(env: Environment, args: list[LispValue]) -> Boolean:
    _expect_arity("eq?", args, 2)
    return make_bool(is_eq(args[0], args[1]))


# -------------------------------
# Pairs and lists
# -------------------------------
def cons(env: Environment, args: list[LispValue]) -> Pair:
    _expect_arity("cons", args, 2)
    return Pair(args[0], args[1])


def _expect_pair(name: str, x: LispValue) -> Pair:
    if not isinstance(x, Pair):
        raise YascmTypeError(f"{name} expects a pair, got {x!r}")
    return x


def car(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_arity("car", args, 1)
    return _expect_pair("car", args[0]).car


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_arity("cdr", args, 1)
    return _expect_pair("cdr", args[0]).cdr


def set_car(env: Environment, args: list[LispValue]) -> LispValue:
    """(set-car! p v) rebinds the head of p in place; every alias sees it."""
    _expect_arity("set-car!", args, 2)
    _expect_pair("set-car!", args[0]).car = args[1]
    return Ok


def set_cdr(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_arity("set-cdr!", args, 2)
    _expect_pair("set-cdr!", args[0]).cdr = args[1]
    return Ok


def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Construct a proper list from the provided arguments."""
    return from_iterable(args)


def length(env: Environment, args: list[LispValue]) -> int:
    _expect_arity("length", args, 1)
    return sum(1 for _ in iterate(args[0]))


# -------------------------------
# Predicates
# -------------------------------
def _type_predicate(name: str, test):
    def predicate(env: Environment, args: list[LispValue]) -> Boolean:
        _expect_arity(name, args, 1)
        return make_bool(test(args[0]))

    predicate.__name__ = name
    predicate.__doc__ = f"({name} x) tag test."
    return predicate


is_null = _type_predicate("null?", lambda x: x is EmptyList)
is_boolean = _type_predicate("boolean?", lambda x: isinstance(x, Boolean))
is_pair = _type_predicate("pair?", lambda x: isinstance(x, Pair))
is_symbol = _type_predicate("symbol?", lambda x: isinstance(x, Symbol))
is_number = _type_predicate("number?", _is_number)
is_char = _type_predicate("char?", lambda x: isinstance(x, Character))
is_string = _type_predicate("string?", lambda x: isinstance(x, str))
is_procedure = _type_predicate(
    "procedure?", lambda x: isinstance(x, (Primitive, Closure))
)


# -------------------------------
# Evaluation and application
# -------------------------------
def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(eval form) evaluates an already-built form in the caller's environment."""
    _expect_arity("eval", args, 1)
    return evaluate(args[0], env)


def apply(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply proc lst) calls proc with the elements of lst as arguments."""
    _expect_arity("apply", args, 2)
    func, lst = args
    return apply_engine(func, to_python_list(lst), env, evaluate)


# -------------------------------
# Console output
# -------------------------------
def display_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_arity("display", args, 1)
    display(args[0], sys.stdout)
    return Unspecified


def newline(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_arity("newline", args, 0)
    sys.stdout.write("\n")
    return Unspecified


BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "quotient": quotient,
    "=": num_eq,
    ">": gt,
    "eq?": eq,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "set-car!": set_car,
    "set-cdr!": set_cdr,
    "list": list_builtin,
    "length": length,
    "null?": is_null,
    "boolean?": is_boolean,
    "pair?": is_pair,
    "symbol?": is_symbol,
    "number?": is_number,
    "char?": is_char,
    "string?": is_string,
    "procedure?": is_procedure,
    "eval": eval_builtin,
    "apply": apply,
    "display": display_builtin,
    "newline": newline,
}


def register(env: Environment, symbols: SymbolTable) -> None:
    """Register all builtin procedures into the given environment."""
    env.update(
        {symbols.intern(name): Primitive(name, fn) for name, fn in BUILTINS.items()}
    )

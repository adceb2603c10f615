import io

import pytest

from yascm.printer import display, to_string, write_value
from yascm.types.character import Character
from yascm.types.pair import Pair, from_iterable
from yascm.types.sentinels import EmptyList, Else, FALSE, Ok, TRUE, Unspecified
from yascm.types.symbol import Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (42, "42"),
        (-3, "-3"),
        (TRUE, "#t"),
        (FALSE, "#f"),
        (Character("x"), "#\\x"),
        ("no \"escapes\"", '"no "escapes""'),
        (Symbol("abc"), "abc"),
        (EmptyList, "()"),
        (Unspecified, ""),
        (Ok, "ok"),
        (Else, "else"),
        (from_iterable([1, 2, 3]), "(1 2 3)"),
        (Pair(1, 2), "(1 . 2)"),
        (from_iterable([1, 2], tail=3), "(1 2 . 3)"),
        (from_iterable([from_iterable([1]), EmptyList]), "((1) ())"),
    ]
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_procedures_print_opaquely(interp):
    assert to_string(interp.eval("car")) == "#<primitive-procedure car>"
    assert to_string(interp.eval("(lambda (x) x)")) == "#<compound-procedure>"
    assert to_string(interp.eval("if")) == "#<special-form if>"


def test_write_value_to_stream():
    buffer = io.StringIO()
    write_value(from_iterable([Symbol("a"), "b"]), buffer)
    assert buffer.getvalue() == '(a "b")'


def test_display_defaults_to_stdout(capsys):
    display(from_iterable([1, TRUE]))
    assert capsys.readouterr().out == "(1 #t)"


def test_display_and_newline_builtins(interp, capsys):
    assert interp.eval('(display "hi")') is Unspecified
    assert interp.eval("(newline)") is Unspecified
    interp.eval("(display '(a #\\b 3))")
    assert capsys.readouterr().out == '"hi"\n(a #\\b 3)'


def test_unspecified_prints_nothing(interp, capsys):
    interp.eval("(display (if #f #f))")
    assert capsys.readouterr().out == ""

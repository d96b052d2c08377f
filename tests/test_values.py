import pytest

from lispy.types import (
    Builtin, Error, ErrorKind, Number, QExpr, SExpr, Symbol, INT64_MAX, INT64_MIN,
)


def test_number_range():
    assert Number(INT64_MAX).value == INT64_MAX
    assert Number(INT64_MIN).value == INT64_MIN
    with pytest.raises(OverflowError):
        Number(INT64_MAX + 1)


def test_symbols_compare_by_name():
    assert Symbol("abc") == Symbol("abc")
    assert Symbol("abc") != Symbol("abd")
    assert Symbol("abc") != "abc"
    assert len({Symbol("a"), Symbol("a")}) == 1


def test_errors_compare_by_kind_and_message():
    assert Error("x", ErrorKind.TYPE) == Error("x", ErrorKind.TYPE)
    assert Error("x", ErrorKind.TYPE) != Error("x", ErrorKind.ARITY)
    assert Error("x").kind is ErrorKind.GENERIC


def test_sexpr_and_qexpr_are_distinct():
    assert SExpr([Number(1)]) != QExpr([Number(1)])
    assert QExpr([Number(1)]) == QExpr([Number(1)])


def test_copy_is_deep():
    original = QExpr([Number(1), SExpr([Symbol("x"), QExpr([Number(2)])])])
    clone = original.copy()
    assert clone == original

    clone.cells[1].cells[1].cells.append(Number(3))
    assert original.cells[1].cells[1] == QExpr([Number(2)])


def test_builtin_copy_keeps_the_callable():
    def fn(env, args):
        return Number(0)

    b = Builtin("zero", fn)
    c = b.copy()
    assert c == b
    assert c is not b
    assert c.fn is fn


def test_pop_and_take():
    x = SExpr([Number(1), Number(2), Number(3)])
    assert x.pop(0) == Number(1)
    assert x == SExpr([Number(2), Number(3)])
    assert x.take(1) == Number(3)
    assert len(x) == 0


def test_join_moves_children():
    a = QExpr([Number(1)])
    b = QExpr([Number(2), Number(3)])
    assert a.join(b) is a
    assert a == QExpr([Number(1), Number(2), Number(3)])
    assert len(b) == 0


def test_retag():
    q = QExpr([Symbol("+"), Number(1)])
    s = q.retag(SExpr)
    assert isinstance(s, SExpr)
    assert s.cells == q.cells


@pytest.mark.parametrize(
    "value,text",
    [
        (Number(-12), "-12"),
        (Error("Division By Zero!", ErrorKind.DIVIDE_BY_ZERO), "Error: Division By Zero!"),
        (Symbol("head"), "head"),
        (SExpr(), "()"),
        (QExpr(), "{}"),
        (SExpr([Symbol("+"), Number(1), QExpr([Number(2), Number(3)])]), "(+ 1 {2 3})"),
    ]
)
def test_str(value, text):
    assert str(value) == text


def test_builtin_str_is_opaque():
    assert str(Builtin("head", lambda env, args: args)) == "<builtin head>"

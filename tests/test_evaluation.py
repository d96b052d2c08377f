import pytest
from hypothesis import given, strategies as st

from lispy.evaluation.evaluator import evaluate, eval_sexpr, read_eval
from lispy.reader.parser import parse
from lispy.types import Builtin, Error, ErrorKind, Number, QExpr, SExpr, Symbol


# -----------------------------------------------------
# Normal forms
# -----------------------------------------------------

@pytest.mark.parametrize(
    "value",
    [
        Number(1),
        Error("boom", ErrorKind.GENERIC),
        QExpr([Symbol("+"), Number(1), Number(2)]),
        QExpr(),
    ]
)
def test_normal_forms_are_returned_unchanged(env, value):
    assert evaluate(value, env) is value


def test_builtin_is_a_fixed_point(env):
    plus = evaluate(Symbol("+"), env)
    assert isinstance(plus, Builtin)
    assert evaluate(plus, env) is plus


def test_symbol_lookup(env):
    env.put(Symbol("x"), Number(42))
    assert evaluate(Symbol("x"), env) == Number(42)
    assert evaluate(Symbol("z"), env) == Error("Unbound Symbol 'z'", ErrorKind.UNBOUND)


# -----------------------------------------------------
# S-expression reduction
# -----------------------------------------------------

def test_empty_sexpr_is_unit(env):
    assert eval_sexpr(SExpr(), env) == SExpr()


def test_singleton_reduces_to_its_element(env):
    assert eval_sexpr(SExpr([Number(5)]), env) == Number(5)
    assert evaluate(SExpr([SExpr([SExpr([Number(5)])])]), env) == Number(5)


def test_singleton_qexpr_is_unwrapped_not_evaluated(env):
    result = evaluate(SExpr([QExpr([Symbol("x")])]), env)
    assert result == QExpr([Symbol("x")])


def test_non_callable_head(env):
    result = evaluate(SExpr([Number(1), Number(2)]), env)
    assert result == Error("first element is not callable", ErrorKind.TYPE)


def test_first_error_wins(interp):
    result = interp.eval("(+ 1 (/ 1 0) (head {}))")
    assert result == Error("Division By Zero!", ErrorKind.DIVIDE_BY_ZERO)


def test_error_inside_head_position(interp):
    result = interp.eval("(undefined 1 2)")
    assert result == Error("Unbound Symbol 'undefined'", ErrorKind.UNBOUND)


def test_bad_number_literal_flows_as_error(interp):
    result = interp.eval("+ 1 99999999999999999999")
    assert result == Error("invalid number", ErrorKind.BAD_NUMBER)


def test_children_evaluate_left_to_right(env):
    seen = []

    def mark(env, args):
        seen.append(args[0].value)
        return args[0]

    env.put(Symbol("mark"), Builtin("mark", mark))
    result = read_eval(parse("(+ (mark 1) (mark 2) (mark 3))"), env)

    assert result == Number(6)
    assert seen == [1, 2, 3]


def test_all_children_evaluate_before_error_check(env):
    seen = []

    def mark(env, args):
        seen.append(args[0].value)
        return args[0]

    env.put(Symbol("mark"), Builtin("mark", mark))
    result = read_eval(parse("(+ (/ 1 0) (mark 2))"), env)

    assert isinstance(result, Error)
    assert seen == [2]


def test_read_eval_of_empty_line(env):
    assert read_eval(parse(""), env) == SExpr()


# -----------------------------------------------------
# Idempotence
# -----------------------------------------------------

atoms = st.integers(min_value=-10**6, max_value=10**6).map(str)
qexprs = st.recursive(
    atoms,
    lambda children: st.lists(children, max_size=4).map(lambda xs: "{" + " ".join(xs) + "}"),
    max_leaves=10,
)
reducible = st.one_of(
    atoms,
    qexprs,
    st.lists(atoms, min_size=1, max_size=4).map(lambda xs: "(+ " + " ".join(xs) + ")"),
    st.lists(atoms, min_size=1, max_size=4).map(lambda xs: "(/ " + " ".join(xs) + " 0)"),
)


@given(reducible)
def test_evaluation_is_idempotent(source):
    from lispy.interpreter import Interpreter
    interp = Interpreter()
    once = interp.eval(source)
    twice = evaluate(once.copy(), interp.env)
    assert twice == once

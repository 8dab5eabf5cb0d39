import pytest
from hypothesis import given, strategies as st

from fez.errors import (
    ArityMismatch,
    FezSyntaxError,
    NotCallable,
    UnboundVariable,
    UnevaluableExpression,
)
from fez.evaluation.evaluator import evaluate
from fez.types.boolean import TRUE, FALSE
from fez.types.closure import Closure
from fez.types.environment import Environment
from fez.types.marker import EMPTY_BEGIN
from fez.types.pair import NIL, Pair, from_list
from fez.types.symbol import Symbol

S = Symbol
quote, if_, begin, set_, lambda_ = S("quote"), S("if"), S("begin"), S("set!"), S("lambda")


def L(*items):
    return from_list(items)


# -----------------------------------------------------
# Atoms
# -----------------------------------------------------

self_evaluating = st.one_of(
    st.integers(),
    st.floats(),
    st.text(),
    st.sampled_from([TRUE, FALSE]),
    st.lists(st.integers()),
)


@given(self_evaluating)
def test_self_evaluating_atoms(atom):
    assert evaluate(atom, Environment()) is atom


def test_symbol_lookup(env):
    env.update(S("foo"), 42)
    assert evaluate(S("foo"), env) == 42
    with pytest.raises(UnboundVariable):
        evaluate(S("nope"), env)


@pytest.mark.parametrize("atom", [None, True, NIL, EMPTY_BEGIN, object(), {"a": 1}])
def test_unevaluable_atoms(env, atom):
    with pytest.raises(UnevaluableExpression) as exc:
        evaluate(atom, env)
    assert exc.value.expr is atom


# -----------------------------------------------------
# quote
# -----------------------------------------------------

def test_quote_returns_literal_list(env):
    literal = L(1, 2, 3)
    assert evaluate(L(quote, literal), env) is literal


def test_quote_does_not_evaluate_unbound_symbols(env):
    assert evaluate(L(quote, S("undefined-anywhere")), env) == S("undefined-anywhere")
    assert evaluate(L(quote, L(S("a"), S("b"))), env) == L(S("a"), S("b"))


def test_quote_arity(env):
    with pytest.raises(ArityMismatch):
        evaluate(L(quote), env)
    with pytest.raises(ArityMismatch):
        evaluate(L(quote, 1, 2), env)


# -----------------------------------------------------
# if
# -----------------------------------------------------

def test_if_false_takes_alternate(env):
    assert evaluate(L(if_, FALSE, 1, 2), env) == 2


def test_if_true_takes_consequent(env):
    assert evaluate(L(if_, TRUE, 1, 2), env) == 1


@pytest.mark.parametrize("test_expr", [0, 0.0, "", [], L(quote, NIL), L(quote, S("nil"))])
def test_if_everything_but_false_is_true(env, test_expr):
    assert evaluate(L(if_, test_expr, 1, 2), env) == 1


def test_if_only_evaluates_chosen_branch(env):
    assert evaluate(L(if_, TRUE, 1, S("unbound")), env) == 1
    assert evaluate(L(if_, FALSE, S("unbound"), 2), env) == 2


def test_if_without_alternate(env):
    assert evaluate(L(if_, FALSE, 1), env) is FALSE
    assert evaluate(L(if_, TRUE, 1), env) == 1


def test_if_arity(env):
    with pytest.raises(ArityMismatch):
        evaluate(L(if_, TRUE), env)
    with pytest.raises(ArityMismatch):
        evaluate(L(if_, TRUE, 1, 2, 3), env)


# -----------------------------------------------------
# begin
# -----------------------------------------------------

def test_empty_begin_returns_marker(env):
    result = evaluate(L(begin), env)
    assert result is EMPTY_BEGIN
    assert result is not FALSE
    assert result is not NIL


def test_begin_returns_last(env):
    assert evaluate(L(begin, 1, 2, 3), env) == 3


def test_begin_side_effects_in_order(env):
    foo = S("foo")
    expr = L(begin, L(set_, foo, 1), L(set_, foo, L(S("+"), foo, 10)), foo)
    assert evaluate(expr, env) == 11
    assert env.lookup(foo) == 11


# -----------------------------------------------------
# set!
# -----------------------------------------------------

def test_set_unbound(env):
    with pytest.raises(UnboundVariable):
        evaluate(L(set_, S("nope"), 1), env)


def test_set_bound_returns_value(env):
    assert evaluate(L(set_, S("foo"), 7), env) == 7
    assert env.lookup(S("foo")) == 7


def test_set_evaluates_value_first(env):
    with pytest.raises(UnboundVariable) as exc:
        evaluate(L(set_, S("foo"), S("missing")), env)
    assert exc.value.name == S("missing")


def test_set_target_must_be_symbol(env):
    with pytest.raises(FezSyntaxError):
        evaluate(L(set_, 1, 2), env)


# -----------------------------------------------------
# lambda and application
# -----------------------------------------------------

def test_lambda_builds_closure_over_current_env(env):
    local = env.extend(L(S("x")), [1])
    closure = evaluate(L(lambda_, L(S("y")), S("x")), local)
    assert isinstance(closure, Closure)
    assert closure.env is local
    assert closure.formals == L(S("y"))
    assert closure.body == L(S("x"))


def test_frame_isolation(env):
    x = S("x")
    outer = env.extend(L(x), [100])
    fn = L(lambda_, L(x), L(set_, x, L(S("+"), x, 1)), x)
    assert evaluate(L(fn, 5), outer) == 6
    assert outer.lookup(x) == 100


def test_closure_sees_later_mutation(env):
    foo, bar = S("foo"), S("bar")
    evaluate(L(set_, foo, 1), env)
    evaluate(L(set_, bar, L(lambda_, NIL, foo)), env)
    evaluate(L(set_, foo, 2), env)
    assert evaluate(L(bar), env) == 2


def test_lambda_with_empty_body(env):
    assert evaluate(L(L(lambda_, NIL)), env) is EMPTY_BEGIN


def test_variadic_lambda(env):
    args = S("args")
    assert evaluate(L(L(lambda_, args, args), 1, 2, 3), env) == L(1, 2, 3)


def test_operands_evaluated_left_to_right(env):
    foo = S("foo")
    evaluate(L(set_, foo, 0), env)
    step = L(set_, foo, L(S("+"), foo, 1))
    result = evaluate(L(S("cons"), step, step), env)
    assert (result.car, result.cdr) == (1, 2)


def test_operator_position_is_evaluated(env):
    expr = L(L(if_, TRUE, S("+"), S("-")), 5, 3)
    assert evaluate(expr, env) == 8


def test_applying_non_callable(env):
    with pytest.raises(NotCallable) as exc:
        evaluate(L(1, 2), env)
    assert exc.value.value == 1


def test_improper_combination(env):
    with pytest.raises(FezSyntaxError):
        evaluate(Pair(S("+"), 1), env)


def test_lambda_requires_formals(env):
    with pytest.raises(ArityMismatch):
        evaluate(L(lambda_), env)


@pytest.mark.parametrize(
    "form",
    [
        from_list([quote, 1], 2),
        from_list([if_, TRUE, 1], 2),
        from_list([begin, 1], 2),
        from_list([set_, S("foo"), 1], 2),
        from_list([lambda_, L(S("x"))], 5),
    ],
)
def test_improper_special_forms(env, form):
    with pytest.raises(FezSyntaxError):
        evaluate(form, env)
    assert env.lookup(S("foo")) == S("void")


def test_if_arity_reports_both_counts(env):
    with pytest.raises(ArityMismatch) as exc:
        evaluate(L(if_, TRUE), env)
    assert exc.value.context == "if requires 2 or 3 operands"
    assert exc.value.expected is None
    assert exc.value.actual == 1
    assert str(exc.value) == "if requires 2 or 3 operands, got 1"

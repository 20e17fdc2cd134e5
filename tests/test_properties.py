import pytest
from hypothesis import given, strategies as st

from orelang import errors
from orelang.evaluation.evaluator import Evaluator
from orelang.evaluation.operators import Operator
from orelang.types.node import Node
from orelang.types.store import VariableStore
from orelang.types.value import Value

names = st.text(min_size=1, max_size=12)
finite = st.floats(allow_nan=False, allow_infinity=False)
numbers = st.floats(allow_nan=False)


def _num(x: float) -> Node:
    return Node.number(repr(x))


def _form(op: str, *args: Node) -> Node:
    return Node.array([Node.string(op), *args])


def _fresh() -> Evaluator:
    return Evaluator(VariableStore())


@given(names, numbers)
def test_get_reads_back_what_set_wrote(name, x):
    ev = _fresh()
    ev.run(_form("set", Node.string(name), _num(x)).children)
    assert ev.evaluate(_form("get", Node.string(name))) == Value(x)


@given(names, numbers, numbers)
def test_second_set_overwrites_first(name, x, y):
    ev = _fresh()
    ev.run(_form("set", Node.string(name), _num(x)).children)
    ev.run(_form("set", Node.string(name), _num(y)).children)
    assert ev.evaluate(Node.string(name)) == Value(y)


@given(numbers)
def test_less_equal_is_reflexive(x):
    assert _fresh().evaluate(_form("<=", _num(x), _num(x))).to_bool()


@given(finite, finite)
def test_less_equal_agrees_with_floats(a, b):
    assert _fresh().evaluate(_form("<=", _num(a), _num(b))) == Value(1.0 if a <= b else 0.0)


@given(finite, finite)
def test_addition_commutes(a, b):
    ev = _fresh()
    assert ev.evaluate(_form("+", _num(a), _num(b))) == ev.evaluate(_form("+", _num(b), _num(a)))


@given(*[st.integers(min_value=-(2 ** 50), max_value=2 ** 50)] * 3)
def test_addition_associates_on_exact_values(a, b, c):
    ev = _fresh()
    left = ev.evaluate(_form("+", _form("+", _num(a), _num(b)), _num(c)))
    right = ev.evaluate(_form("+", _num(a), _form("+", _num(b), _num(c))))
    assert left == right == Value(a + b + c)


@given(finite, names)
def test_false_while_never_runs_body(x, name):
    # |x| + 1 <= -|x| never holds
    ev = _fresh()
    cond = _form("<=", _num(abs(x) + 1.0), _num(-abs(x)))
    body = _form("set", Node.string(name), _num(x))
    ev.run(_form("while", cond, body).children)
    assert name not in ev.store


@given(names)
def test_unbound_variable_error_carries_name(name):
    with pytest.raises(errors.VariableNotFound) as info:
        _fresh().run(_form("print", Node.string(name)).children)
    assert info.value.name == name


@given(st.text().filter(lambda t: t not in {op.value for op in Operator}))
def test_unknown_operator_error_carries_token(token):
    with pytest.raises(errors.UnknownOperator) as info:
        _fresh().run([Node.string(token), Node.number("1")])
    assert info.value.name == token

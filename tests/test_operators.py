import inspect

import pytest

from orelang import errors
from orelang.evaluation.operators import OPERATORS, Operator


def test_every_operator_has_a_handler():
    assert set(OPERATORS) == set(Operator)


@pytest.mark.parametrize(
    "token,arity,yields",
    [
        ("step", None, False),
        ("set", 3, False),
        ("get", 2, True),
        ("while", 3, False),
        ("<=", 3, True),
        ("+", 3, True),
        ("print", 2, False),
    ],
)
def test_operator_table(token, arity, yields):
    spec = OPERATORS[Operator.from_token(token)]
    assert spec.arity == arity
    assert spec.yields is yields


@pytest.mark.parametrize("token", ["nope", "", "Set", "-", " print", "step "])
def test_from_token_rejects_unknown(token):
    with pytest.raises(errors.UnknownOperator) as info:
        Operator.from_token(token)
    assert info.value.name == token


# Forms with the wrong element count, run in the context each operator expects.
VOID_MISMATCHES = [
    '["set"]',
    '["set", "a"]',
    '["set", "a", ["print", 1], 2]',
    '["while", ["<=", 0, 1]]',
    '["while", ["<=", 0, 1], ["print", 1], ["print", 2]]',
    '["print"]',
    '["print", 1, ["print", 2]]',
]

VALUE_MISMATCHES = [
    '["get"]',
    '["get", "a", "b"]',
    '["<=", 1]',
    '["<=", ["print", 1], 2, 3]',
    '["+"]',
    '["+", ["set", "a", 1], 2, 3]',
]


@pytest.mark.parametrize("source", VOID_MISMATCHES)
def test_arity_mismatch_in_void_context(source, evaluator, store, capsys, node):
    with pytest.raises(errors.ArgumentCountIncorrect) as info:
        evaluator.run(node(source).children)
    assert info.value.message == "Argument count incorrect."
    assert capsys.readouterr().out == ""
    assert len(store) == 0


@pytest.mark.parametrize("source", VALUE_MISMATCHES)
def test_arity_mismatch_in_value_context(source, evaluator, store, capsys, node):
    with pytest.raises(errors.ArgumentCountIncorrect):
        evaluator.evaluate(node(source))
    assert capsys.readouterr().out == ""
    assert len(store) == 0


def test_arity_error_carries_counts(evaluator, node):
    with pytest.raises(errors.ArgumentCountIncorrect) as info:
        evaluator.run(node('["set", "a"]').children)
    assert info.value.operator == "set"
    assert info.value.expected == 3
    assert info.value.actual == 2


def test_handlers_share_one_signature():
    for spec in OPERATORS.values():
        params = list(inspect.signature(spec.handler).parameters)
        assert params == ["program", "position", "evaluator"]

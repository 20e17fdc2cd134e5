"""Binary numeric operators: <= and +.

Both evaluate their two operands left to right and yield a new Value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from orelang import Program
from orelang.types.value import Value

if TYPE_CHECKING:
    from orelang.evaluation.evaluator import Evaluator


def _operands(program: Program, evaluator: Evaluator) -> tuple[Value, Value]:
    lv = evaluator.evaluate(program[1])
    rv = evaluator.evaluate(program[2])
    return lv, rv


def less_equal_form(
    program: Program,
    position: int,
    evaluator: Evaluator,
) -> tuple[int, Optional[Value]]:
    """["<=", a, b] yields 1.0 when a <= b, else 0.0."""
    lv, rv = _operands(program, evaluator)
    return position + 3, Value(1.0 if lv <= rv else 0.0)


def add_form(
    program: Program,
    position: int,
    evaluator: Evaluator,
) -> tuple[int, Optional[Value]]:
    """["+", a, b] yields a + b."""
    lv, rv = _operands(program, evaluator)
    return position + 3, lv + rv

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from orelang import Program
from orelang.types.value import Value

if TYPE_CHECKING:
    from orelang.evaluation.evaluator import Evaluator


def get_form(
    program: Program,
    position: int,
    evaluator: Evaluator,
) -> tuple[int, Optional[Value]]:
    return position + 2, evaluator.evaluate(program[1])

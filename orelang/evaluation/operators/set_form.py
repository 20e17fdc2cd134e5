from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from orelang import Program
from orelang.types.value import Value

if TYPE_CHECKING:
    from orelang.evaluation.evaluator import Evaluator


def set_form(
    program: Program,
    position: int,
    evaluator: Evaluator,
) -> tuple[int, Optional[Value]]:
    # The name node is never evaluated; its text is the variable name.
    name = program[1].value
    value = evaluator.evaluate(program[2])
    evaluator.store.set(name, value)
    return position + 3, None

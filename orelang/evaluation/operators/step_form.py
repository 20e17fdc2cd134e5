from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from orelang import Program
from orelang.types.value import Value

if TYPE_CHECKING:
    from orelang.evaluation.evaluator import Evaluator


def step_form(
    program: Program,
    position: int,
    evaluator: Evaluator,
) -> tuple[int, Optional[Value]]:
    """
    ["step", sub1, sub2, ...]
    The sub-programs are the siblings of `step` in the same array, run in order
    to the end of that array. Produces no value.
    """
    end, _ = evaluator.run(program, position + 1)
    return end, None

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from orelang import Program
from orelang.types.value import Value

if TYPE_CHECKING:
    from orelang.evaluation.evaluator import Evaluator


def print_form(
    program: Program,
    position: int,
    evaluator: Evaluator,
) -> tuple[int, Optional[Value]]:
    """
    ["print", expr]
    Writes the value with six fractional digits followed by a newline.
    """
    value = evaluator.evaluate(program[1])
    print(value.to_string(), file=evaluator.out)
    return position + 2, None

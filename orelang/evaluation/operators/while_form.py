"""The while loop.

["while", condition, body]: condition and body are each their own array,
run from index 0. The condition is re-run before every pass; the body's
result is discarded. With no iteration cap the loop is unbounded.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from orelang import Program
from orelang.errors import IterationLimitExceeded
from orelang.types.value import Value

if TYPE_CHECKING:
    from orelang.evaluation.evaluator import Evaluator

logger = logging.getLogger(__name__)


def while_form(
    program: Program,
    position: int,
    evaluator: Evaluator,
) -> tuple[int, Optional[Value]]:
    condition, body = program[1], program[2]
    limit = evaluator.max_iterations
    iterations = 0

    while True:
        _, ret = evaluator.run(condition.children, 0, want_result=True)
        if ret is None or not ret.to_bool():
            break
        if limit is not None and iterations >= limit:
            raise IterationLimitExceeded(limit)
        evaluator.run(body.children)
        iterations += 1

    logger.debug("while finished after %d iteration(s)", iterations)
    return position + 3, None

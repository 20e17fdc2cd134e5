# Core type aliases for the orelang data model.
# Programs are trees of Node objects produced by the reader; the only runtime
# datum is Value (a float). No symbol type exists: string nodes double as
# operator names and variable references.
#
# Naming guidance:
# - Program: a flat sequence of nodes scanned by the executor.
# - OperatorFn: handler signature used by the operator registry.

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Tuple

from orelang.types.node import Node
from orelang.types.value import Value

if TYPE_CHECKING:
    from orelang.evaluation.evaluator import Evaluator

# A sequence of sibling nodes, i.e. the children of one array node
Program = list[Node]

# Operator handler: (program, position, evaluator) -> (next position, yielded value)
OperatorFn = Callable[[Program, int, "Evaluator"], Tuple[int, Optional[Value]]]

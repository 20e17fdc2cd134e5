"""Core evaluator and program executor for the orelang interpreter.

`evaluate` reduces one node to a Value; `run` scans a flat sequence of nodes,
dispatching each leading operator token through the operator registry. Arity
is always measured against the whole enclosing sequence, so an operator form
has to be the entire array it appears in.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from orelang import Program
from orelang.errors import ArgumentCountIncorrect, InvariantViolation, UnknownOperator
from orelang.evaluation.operators import OPERATORS, Operator
from orelang.types.node import Node, NodeType
from orelang.types.store import VariableStore
from orelang.types.value import Value

logger = logging.getLogger(__name__)


class Evaluator:
    """
    Walks a Node tree against a VariableStore.
    `out` receives `print` output (None means the current sys.stdout);
    `max_iterations` caps each while loop, None for unbounded.
    """

    def __init__(
        self,
        store: VariableStore,
        out: TextIO | None = None,
        max_iterations: int | None = None,
    ):
        self.store = store
        self.out = out
        self.max_iterations = max_iterations

    def evaluate(self, node: Node) -> Value:
        """Reduce `node` to a Value."""
        match node.type:
            case NodeType.ARRAY:
                _, value = self.run(node.children, 0, want_result=True)
                # A fragment made only of void forms leaves the result at zero
                return value if value is not None else Value()
            case NodeType.STRING:
                return self.store.lookup(node.value)
            case NodeType.NUMBER | NodeType.BOOLEAN:
                return Value.from_text(node.value)
        raise InvariantViolation(f"Unhandled node type {node.type!r}")

    def run(
        self,
        program: Program,
        position: int = 0,
        want_result: bool = False,
    ) -> tuple[int, Optional[Value]]:
        """
        Execute `program` from `position` to its end.
        Returns the end position and the last value yielded by a form, if any.
        """
        pos = position
        result: Optional[Value] = None
        while pos < len(program):
            node = program[pos]
            match node.type:
                case NodeType.STRING:
                    op = Operator.from_token(node.value)
                    spec = OPERATORS[op]
                    if spec.yields and not want_result:
                        raise InvariantViolation(f"'{op.value}' yields a value where none is expected")
                    if spec.arity is not None and len(program) != spec.arity:
                        raise ArgumentCountIncorrect(op.value, spec.arity, len(program))
                    logger.debug("dispatch %s at %d/%d", op.value, pos, len(program))
                    pos, value = spec.handler(program, pos, self)
                    if value is not None:
                        result = value
                case NodeType.ARRAY:
                    # Bare sub-program: run for side effects only
                    self.run(node.children)
                    pos += 1
                case _:
                    raise UnknownOperator(node.value)
        return pos, result

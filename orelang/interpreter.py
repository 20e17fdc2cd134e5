from __future__ import annotations

import logging
from typing import Literal, TextIO

from orelang import config
from orelang.errors import NestingTooDeep
from orelang.evaluation.evaluator import Evaluator
from orelang.reader.parser import parse
from orelang.types.node import Node
from orelang.types.store import VariableStore

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and running orelang programs.
    Owns one VariableStore for its whole lifetime; create a fresh instance per run.
    """

    # Class-level default to avoid env-variable coupling in tests
    DefaultMaxIterations: int | None = None

    # Sums 1..10 and prints 55.000000
    DEFAULT_PROGRAM = """
    ["step",
      ["set", "sum", 0],
      ["set", "i", 1],
      ["while", ["<=", ["get", "i"], 10],
        ["step",
          ["set", "sum", ["+", ["get", "sum"], ["get", "i"]]],
          ["set", "i", ["+", ["get", "i"], 1]]]],
      ["print", ["get", "sum"]]]
    """

    def __init__(
        self,
        out: TextIO | None = None,
        *,
        max_iterations: int | None | Literal['auto'] = 'auto',
    ):
        if max_iterations == 'auto':
            max_iterations = self.DefaultMaxIterations
            if max_iterations is None:
                max_iterations = config.get_max_iterations()
        self.store: VariableStore = VariableStore()
        self.evaluator: Evaluator = Evaluator(self.store, out, max_iterations)

    @property
    def max_iterations(self) -> int | None:
        return self.evaluator.max_iterations

    def run(self, tree: Node) -> None:
        """Execute the root array from index 0; nothing is expected back."""
        if not tree.is_array:
            logger.warning("Program root is a %s, not an array; nothing to run", tree.type.value)
        try:
            self.evaluator.run(tree.children)
        except RecursionError:
            raise NestingTooDeep() from None
        logger.debug("Run finished, store: %s", self.store)

    def eval(self, code: str) -> None:
        self.run(parse(code))

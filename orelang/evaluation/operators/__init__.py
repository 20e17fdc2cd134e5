"""Registry of operators for the orelang executor.

Maps each member of the closed Operator enumeration to its arity and handler.
The executor resolves a form's leading token through Operator.from_token and
dispatches through this table; every member must have an entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from orelang import OperatorFn
from orelang.errors import UnknownOperator
from orelang.evaluation.operators.step_form import step_form
from orelang.evaluation.operators.set_form import set_form
from orelang.evaluation.operators.get_form import get_form
from orelang.evaluation.operators.while_form import while_form
from orelang.evaluation.operators.arithmetic_forms import less_equal_form, add_form
from orelang.evaluation.operators.print_form import print_form


class Operator(Enum):
    STEP = "step"
    SET = "set"
    GET = "get"
    WHILE = "while"
    LESS_EQUAL = "<="
    ADD = "+"
    PRINT = "print"

    @classmethod
    def from_token(cls, token: str) -> Operator:
        try:
            return cls(token)
        except ValueError:
            raise UnknownOperator(token) from None


@dataclass(frozen=True)
class OperatorSpec:
    # Total element count of the enclosing array, operator included; None for variadic
    arity: Optional[int]
    # True when the operator produces a value and so needs a result-expecting caller
    yields: bool
    handler: OperatorFn


OPERATORS: dict[Operator, OperatorSpec] = {
    Operator.STEP: OperatorSpec(None, False, step_form),
    Operator.SET: OperatorSpec(3, False, set_form),
    Operator.GET: OperatorSpec(2, True, get_form),
    Operator.WHILE: OperatorSpec(3, False, while_form),
    Operator.LESS_EQUAL: OperatorSpec(3, True, less_equal_form),
    Operator.ADD: OperatorSpec(3, True, add_form),
    Operator.PRINT: OperatorSpec(2, False, print_form),
}

__all__ = ["Operator", "OperatorSpec", "OPERATORS"]

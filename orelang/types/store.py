"""Variable store for orelang.

One flat namespace mapping variable names to Values. A store lives exactly as
long as the Interpreter that owns it; entries are created or overwritten by
`set` and never removed.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator

from orelang.errors import VariableNotFound
from orelang.types.value import Value

logger = logging.getLogger(__name__)


class VariableStore:
    """Global mapping from variable names to Values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[str, Value] = {}

    def set(self, name: str, value: Value) -> None:
        """Bind `name` to `value`, overwriting any previous binding."""
        logger.debug("set %s = %s", name, value.to_string())
        self.vars[name] = value

    def lookup(self, name: str) -> Value:
        """Return the value bound to `name`.

        Raises VariableNotFound if nothing has been set under that name.
        """
        try:
            return self.vars[name]
        except KeyError:
            raise VariableNotFound(name) from None

    def snapshot(self) -> dict[str, float]:
        """Plain copy of the bindings as floats."""
        return {k: v.to_number() for k, v in self.vars.items()}

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for k, v in self.vars.items():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{k}: {v.to_string()}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<VariableStore {self}>"

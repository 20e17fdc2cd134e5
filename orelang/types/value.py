from __future__ import annotations
import re


# Longest numeric prefix accepted by C's strtod: hex floats, decimals,
# inf/infinity and nan, after optional whitespace and sign.
_NUMBER_PREFIX_RE = re.compile(
    r"\s*(?P<number>[+-]?(?:"
    r"0x(?:[0-9a-f]+(?:\.[0-9a-f]*)?|\.[0-9a-f]+)(?:p[+-]?\d+)?"
    r"|(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?"
    r"|inf(?:inity)?"
    r"|nan(?:\(\w*\))?"
    r"))",
    re.IGNORECASE | re.ASCII,
)


def parse_number(text: str) -> float:
    """Convert the numeric prefix of `text` to a float, 0.0 when there is none."""
    m = _NUMBER_PREFIX_RE.match(text)
    if not m:
        return 0.0
    literal = m.group("number")
    unsigned = literal.lstrip("+-").lower()
    if unsigned.startswith("0x"):
        return float.fromhex(literal)
    if unsigned.startswith("nan"):
        return float(literal[: literal.lower().index("nan") + 3])
    return float(literal)


class Value:
    """The only runtime datum: a 64-bit float with bool and string coercions."""

    __slots__ = ("_d",)

    def __init__(self, d: float = 0.0):
        self._d = float(d)

    @classmethod
    def from_text(cls, text: str) -> Value:
        return cls(parse_number(text))

    def to_number(self) -> float:
        return self._d

    def to_bool(self) -> bool:
        return self._d != 0

    def to_string(self) -> str:
        return f"{self._d:f}"

    def __le__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._d <= other._d

    def __add__(self, other: Value) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        return Value(self._d + other._d)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._d == other._d

    def __hash__(self) -> int:
        return hash(self._d)

    def __bool__(self) -> bool:
        return self.to_bool()

    def __float__(self) -> float:
        return self._d

    def __repr__(self):
        return f"Value({self._d!r})"

    def __str__(self):
        return self.to_string()

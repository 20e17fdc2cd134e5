"""Parsed program tree for orelang.

A Node is a tagged union: ARRAY nodes own their children, every other kind owns
the source text of its payload. Numbers keep their text verbatim so that the
evaluator, not the reader, decides how to convert them.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class NodeType(Enum):
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class Node:
    __slots__ = ("type", "value", "children")

    def __init__(self, type: NodeType, value: str = "", children: Iterable[Node] | None = None):
        self.type = type
        self.value = value
        self.children: list[Node] = list(children) if children is not None else []

    @classmethod
    def array(cls, children: Iterable[Node] = ()) -> Node:
        return cls(NodeType.ARRAY, "", children)

    @classmethod
    def string(cls, text: str) -> Node:
        return cls(NodeType.STRING, text)

    @classmethod
    def number(cls, text: str) -> Node:
        return cls(NodeType.NUMBER, text)

    @classmethod
    def boolean(cls, text: str) -> Node:
        return cls(NodeType.BOOLEAN, text)

    @property
    def is_array(self) -> bool:
        return self.type is NodeType.ARRAY

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        if self.type is not other.type:
            return False
        if self.type is NodeType.ARRAY:
            return self.children == other.children
        return self.value == other.value

    __hash__ = None  # mutable children

    def __repr__(self):
        if self.type is NodeType.ARRAY:
            return f"Node.array({self.children!r})"
        return f"Node.{self.type.value}({self.value!r})"

    def __str__(self):
        if self.type is NodeType.ARRAY:
            return "[" + ", ".join(str(c) for c in self.children) + "]"
        if self.type is NodeType.STRING:
            return f'"{self.value}"'
        return self.value

from orelang.types.node import Node, NodeType
from orelang.types.value import Value, parse_number
from orelang.types.store import VariableStore

__all__ = ["Node", "NodeType", "Value", "parse_number", "VariableStore"]

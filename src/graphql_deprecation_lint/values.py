"""Conversion of literal value nodes into native Python values."""

from typing import Any

from .errors import UnknownValueNodeError
from .nodes import (
    BooleanValue,
    EnumValue,
    FloatValue,
    IntValue,
    ListValue,
    NullValue,
    ObjectValue,
    StringValue,
    ValueNode,
)


def value_from_node(node: ValueNode) -> Any:
    """Convert a literal value node into a native value, recursively.

    Args:
        node: The value node to convert

    Returns:
        ``str`` for string and enum literals, ``int``, ``float``, ``bool``,
        ``None``, ``list`` for lists and ``dict`` for input objects

    Raises:
        UnknownValueNodeError: If the node is not a literal value node
    """
    if isinstance(node, (StringValue, EnumValue)):
        return node.value
    if isinstance(node, IntValue):
        return int(node.value)
    if isinstance(node, FloatValue):
        return float(node.value)
    if isinstance(node, BooleanValue):
        return bool(node.value)
    if isinstance(node, NullValue):
        return None
    if isinstance(node, ListValue):
        return [value_from_node(item) for item in node.values]
    if isinstance(node, ObjectValue):
        return {item.name.value: value_from_node(item.value) for item in node.fields}

    raise UnknownValueNodeError(
        f"Cannot extract a value from node of kind {getattr(node, 'kind', type(node).__name__)!r}",
        node=node,
    )

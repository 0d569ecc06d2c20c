from __future__ import annotations

from dataclasses import dataclass, field

from .spans import Span


@dataclass(slots=True)
class Node:
    """Base class for all AST nodes.

    Nodes are mutable so visitors can rewrite values in place; a node never
    changes its variant.
    """

    span: Span


@dataclass(slots=True)
class StringNode(Node):
    value: str  # escapes resolved


@dataclass(slots=True)
class NumberNode(Node):
    value: float


@dataclass(slots=True)
class BoolNode(Node):
    value: bool


@dataclass(slots=True)
class NullNode(Node):
    pass


@dataclass(slots=True)
class IdentifierNode(Node):
    """A property key.

    Wraps a StringNode so visitors can tell keys apart from string values.
    """

    value: StringNode


@dataclass(slots=True)
class PropertyNode(Node):
    """A ``"key": value`` member of an object.

    Examples:
      - "name": "jsonloc"
      - "tags": []

    """

    key: IdentifierNode
    value: Value


@dataclass(slots=True)
class ObjectNode(Node):
    properties: list[PropertyNode] = field(default_factory=list)  # source order, duplicates kept


@dataclass(slots=True)
class ArrayNode(Node):
    items: list[Value] = field(default_factory=list)


Value = StringNode | NumberNode | BoolNode | NullNode | ObjectNode | ArrayNode

from __future__ import annotations

from . import ast as A


class Visitor:
    """Walks a JSON AST, one overridable method per node variant.

    Leaf methods do nothing by default; composite methods recurse into their
    children in source order. Overriding a composite method replaces that
    recursion, so call the base method (or visit the children yourself) to
    keep descending.

    Methods receive the node itself and may change its fields in place, e.g.
    rewrite ``StringNode.value``. They must not swap a node for a node of a
    different kind.

    Example:

        class Keys(Visitor):
            def __init__(self) -> None:
                self.names: list[str] = []

            def visit_identifier(self, node: A.IdentifierNode) -> None:
                self.names.append(node.value.value)

        v = Keys()
        v.visit_json(parse_source('{"a": {"b": 1}}'))
        assert v.names == ["a", "b"]
    """

    def visit_json(self, node: A.Node) -> None:
        if isinstance(node, A.StringNode):
            self.visit_string(node)
        elif isinstance(node, A.NumberNode):
            self.visit_number(node)
        elif isinstance(node, A.BoolNode):
            self.visit_boolean(node)
        elif isinstance(node, A.NullNode):
            self.visit_null(node)
        elif isinstance(node, A.ObjectNode):
            self.visit_object(node)
        elif isinstance(node, A.PropertyNode):
            self.visit_property(node)
        elif isinstance(node, A.IdentifierNode):
            self.visit_identifier(node)
        elif isinstance(node, A.ArrayNode):
            self.visit_array(node)
        else:
            raise TypeError(f"not a JSON AST node: {type(node)!r}")

    def visit_string(self, node: A.StringNode) -> None:
        pass

    def visit_number(self, node: A.NumberNode) -> None:
        pass

    def visit_boolean(self, node: A.BoolNode) -> None:
        pass

    def visit_null(self, node: A.NullNode) -> None:
        pass

    def visit_object(self, node: A.ObjectNode) -> None:
        for prop in node.properties:
            self.visit_property(prop)

    def visit_property(self, node: A.PropertyNode) -> None:
        self.visit_identifier(node.key)
        self.visit_property_value(node.value)

    def visit_identifier(self, node: A.IdentifierNode) -> None:
        self.visit_string(node.value)

    def visit_property_value(self, node: A.Value) -> None:
        """Hook for a property's value, separate from array items."""
        self.visit_json(node)

    def visit_array(self, node: A.ArrayNode) -> None:
        for item in node.items:
            self.visit_array_item(item)

    def visit_array_item(self, node: A.Value) -> None:
        self.visit_json(node)

from __future__ import annotations

from .. import ast as A
from ..spans import Span
from ..visit import Visitor


def to_python(node: A.Node) -> object:
    """Plain Python value of a parsed tree, matching ``json.loads`` output.

    Numbers stay floats and duplicate keys resolve last-wins, so compare
    against ``json.loads(src, parse_int=float)``.
    """
    if isinstance(node, A.ObjectNode):
        return {p.key.value.value: to_python(p.value) for p in node.properties}
    if isinstance(node, A.ArrayNode):
        return [to_python(item) for item in node.items]
    if isinstance(node, A.NullNode):
        return None
    if isinstance(node, (A.StringNode, A.NumberNode, A.BoolNode)):
        return node.value
    raise TypeError(f"not a JSON value node: {type(node)!r}")


class SpanLawChecker(Visitor):
    """Asserts the position invariants of a tree parsed from ``src``."""

    def __init__(self, src: str) -> None:
        self.src = src
        self.parents: list[Span] = []
        self.visited = 0

    def _check(self, node: A.Node) -> None:
        self.visited += 1
        sp = node.span
        assert 0 <= sp.start.offset <= sp.end.offset <= len(self.src), sp
        assert sp.start.line >= 1 and sp.start.column >= 1, sp
        if self.parents:
            assert self.parents[-1].contains(sp), (self.parents[-1], sp)

    def _descend(self, node: A.Node, walk) -> None:
        self._check(node)
        self.parents.append(node.span)
        try:
            walk(node)
        finally:
            self.parents.pop()

    def visit_string(self, node: A.StringNode) -> None:
        self._check(node)
        text = node.span.slice(self.src)
        assert text.startswith('"') and text.endswith('"') and len(text) >= 2, text

    def visit_number(self, node: A.NumberNode) -> None:
        self._check(node)
        assert float(node.span.slice(self.src)) == node.value

    def visit_boolean(self, node: A.BoolNode) -> None:
        self._check(node)
        assert node.span.slice(self.src) == ("true" if node.value else "false")

    def visit_null(self, node: A.NullNode) -> None:
        self._check(node)
        assert node.span.slice(self.src) == "null"

    def visit_object(self, node: A.ObjectNode) -> None:
        text = node.span.slice(self.src)
        assert text[0] == "{" and text[-1] == "}", text
        self._descend(node, super().visit_object)

    def visit_array(self, node: A.ArrayNode) -> None:
        text = node.span.slice(self.src)
        assert text[0] == "[" and text[-1] == "]", text
        self._descend(node, super().visit_array)

    def visit_property(self, node: A.PropertyNode) -> None:
        assert node.span.start == node.key.span.start
        assert node.span.end == node.value.span.end
        self._descend(node, super().visit_property)

    def visit_identifier(self, node: A.IdentifierNode) -> None:
        assert node.span == node.value.span
        self._descend(node, super().visit_identifier)


def check_span_laws(root: A.Node, src: str) -> int:
    """Check every node of ``root`` against ``src``; returns the number of nodes checked."""
    checker = SpanLawChecker(src)
    checker.visit_json(root)
    assert root.span.slice(src) == src.strip(" \t\r\n")
    return checker.visited

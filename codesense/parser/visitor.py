from typing import Iterator

from .classes import ASTNode


def iter_child_nodes(node: ASTNode) -> Iterator[ASTNode]:
    """Yields the direct children of `node` in field declaration order."""
    for field_name in type(node).model_fields:
        value = getattr(node, field_name)
        if isinstance(value, ASTNode):
            yield value
        elif isinstance(value, list):
            for item in value:
                if isinstance(item, ASTNode):
                    yield item


def walk(node: ASTNode) -> Iterator[ASTNode]:
    """Yields `node` and every descendant, depth first, in source order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(iter_child_nodes(current))))


class NodeVisitor:
    """
    Dispatches on the node's `type` tag to a `visit_<type>` method, falling back
    to `generic_visit`, which simply visits every child.
    """

    def visit(self, node: ASTNode):
        visitor = getattr(self, f"visit_{node.type}", self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: ASTNode):
        for child in iter_child_nodes(node):
            self.visit(child)

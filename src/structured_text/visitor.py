"""Node tree visitor and transformer.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees.

Example — collect all link targets:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.uris: list[str] = []

        def visit_hyperlink(self, node: Hyperlink) -> None:
            self.uris.append(node.uri)

    collector = LinkCollector()
    collector.visit(doc)

Example — drop unsupported nodes before rendering:

    def drop_unsupported(node: Node) -> Node | None:
        return None if isinstance(node, Unsupported) else node

    new_doc = transform(doc, drop_unsupported)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. The transform function
    is pure — safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from structured_text.nodes import (
    CONTAINER_TYPES,
    Document,
    Heading,
    Hyperlink,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Quote,
    Text,
    UnorderedList,
    Unsupported,
)


class BaseVisitor[T]:
    """Base visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node kinds you care about.
    Unhandled kinds fall through to ``visit_default``. Children are walked
    automatically after the ``visit_*`` call.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        if isinstance(node, CONTAINER_TYPES):
            for child in node.children:
                self.visit(child)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node kinds without a specific ``visit_*`` method.

        Default returns None (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Heading) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_ordered_list(self, node: OrderedList) -> T:
        return self.visit_default(node)

    def visit_unordered_list(self, node: UnorderedList) -> T:
        return self.visit_default(node)

    def visit_list_item(self, node: ListItem) -> T:
        return self.visit_default(node)

    def visit_quote(self, node: Quote) -> T:
        return self.visit_default(node)

    def visit_hyperlink(self, node: Hyperlink) -> T:
        return self.visit_default(node)

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_unsupported(self, node: Unsupported) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        match node:
            case Document():
                return self.visit_document(node)
            case Heading():
                return self.visit_heading(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case OrderedList():
                return self.visit_ordered_list(node)
            case UnorderedList():
                return self.visit_unordered_list(node)
            case ListItem():
                return self.visit_list_item(node)
            case Quote():
                return self.visit_quote(node)
            case Hyperlink():
                return self.visit_hyperlink(node)
            case Text():
                return self.visit_text(node)
            case Unsupported():
                return self.visit_unsupported(node)
            case _:
                return self.visit_default(node)


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the tree, returning a new tree.

    ``fn`` is called bottom-up: children are transformed first, then the
    parent is transformed with its new children.

    Return ``None`` from ``fn`` to remove a node from the tree. The root
    Document cannot be removed; returning None for it raises TypeError.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new Document with the transformation applied. The original tree
        is untouched.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    if isinstance(node, CONTAINER_TYPES):
        children = node.children
        new_children = tuple(
            result for c in children
            if (result := _transform_node(c, fn)) is not None
        )
        if new_children != children:
            node = dataclasses.replace(node, children=new_children)
    return fn(node)

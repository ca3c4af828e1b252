"""Tests for the node visitor and transform utilities."""

import dataclasses

import pytest

from structured_text.nodes import (
    Document,
    Heading,
    Hyperlink,
    ListItem,
    Mark,
    Node,
    OrderedList,
    Paragraph,
    Quote,
    Text,
    UnorderedList,
    Unsupported,
)
from structured_text.visitor import BaseVisitor, transform


def _doc(*blocks) -> Document:  # type: ignore[no-untyped-def]
    return Document(children=tuple(blocks))


class NodeCollector(BaseVisitor[None]):
    """Collects all visited node type names."""

    def __init__(self) -> None:
        self.visited: list[str] = []

    def visit_default(self, node) -> None:  # type: ignore[override]
        self.visited.append(type(node).__name__)


class LinkCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.uris: list[str] = []

    def visit_hyperlink(self, node: Hyperlink) -> None:
        self.uris.append(node.uri)


class TestVisitorDispatch:
    def test_visits_every_kind_in_order(self) -> None:
        """Test the visitor reaches every kind in document order."""
        doc = _doc(
            Heading(level=1, children=(Text("t"),)),
            OrderedList(children=(ListItem(children=(Paragraph(children=(Text("a"),)),)),)),
            UnorderedList(),
            Quote(children=(Hyperlink("u", children=(Text("l"),)),)),
            Unsupported("hr"),
        )
        collector = NodeCollector()
        collector.visit(doc)
        assert collector.visited == [
            "Document",
            "Heading",
            "Text",
            "OrderedList",
            "ListItem",
            "Paragraph",
            "Text",
            "UnorderedList",
            "Quote",
            "Hyperlink",
            "Text",
            "Unsupported",
        ]

    def test_specific_visit_method(self) -> None:
        """Test a specific visit method receives its kind."""
        doc = _doc(
            Paragraph(children=(Hyperlink("a"), Text("x"))),
            Quote(children=(Hyperlink("b"),)),
        )
        collector = LinkCollector()
        collector.visit(doc)
        assert collector.uris == ["a", "b"]


class TestTransform:
    def test_identity_returns_same_tree(self) -> None:
        """Test an identity transform returns the same tree."""
        doc = _doc(Paragraph(children=(Text("a"),)))
        assert transform(doc, lambda n: n) is doc

    def test_remove_unsupported(self) -> None:
        """Test returning None removes a node."""
        doc = _doc(Unsupported(), Paragraph(children=(Text("a"), Unsupported())))

        def drop(node: Node) -> Node | None:
            return None if isinstance(node, Unsupported) else node

        assert transform(doc, drop) == _doc(Paragraph(children=(Text("a"),)))

    def test_rewrite_is_bottom_up_and_immutable(self) -> None:
        """Test transform rewrites leaves without touching the original."""
        doc = _doc(Heading(level=1, children=(Text("a"),)))

        def embolden(node: Node) -> Node:
            if isinstance(node, Text):
                return dataclasses.replace(node, marks=node.marks | {Mark.BOLD})
            return node

        new_doc = transform(doc, embolden)
        assert new_doc.children[0].children[0].marks == {Mark.BOLD}  # type: ignore[union-attr]
        assert doc.children[0].children[0].marks == frozenset()  # type: ignore[union-attr]

    def test_cannot_remove_root(self) -> None:
        """Test removing the root raises TypeError."""
        with pytest.raises(TypeError, match="cannot remove root"):
            transform(_doc(), lambda n: None)

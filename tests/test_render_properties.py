"""Property-based tests for the renderer using Hypothesis.

These tests verify invariants that should hold for any well-formed tree:
1. Rendering never crashes and is deterministic
2. Indents are never negative and match the list nesting
3. Text content survives rendering in document order
4. Each block kind contributes exactly its documented fragments

Property-based testing finds edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from structured_text import (
    Document,
    DocumentRenderer,
    EmbeddedView,
    Heading,
    Hyperlink,
    ListItem,
    Mark,
    OrderedList,
    Paragraph,
    Quote,
    StyledTextRun,
    Text,
    UnorderedList,
    Unsupported,
)
from structured_text.fonts import Font
from structured_text.theme import Styling
from structured_text.visitor import BaseVisitor

THEME = Styling(base_font=Font("Body", 10.0), indentation_multiplier=4.0)

marks = st.frozensets(st.sampled_from(list(Mark)))
texts = st.builds(Text, value=st.text(max_size=8), marks=marks)
leaves = st.one_of(texts, st.builds(Unsupported, node_type=st.sampled_from(["hr", "embedded-entry-block"])))


def _children(inner: st.SearchStrategy) -> st.SearchStrategy:
    return st.lists(inner, max_size=3).map(tuple)


nodes = st.recursive(
    leaves,
    lambda inner: st.one_of(
        st.builds(Paragraph, children=_children(inner)),
        st.builds(Heading, level=st.integers(1, 6), children=_children(inner)),
        st.builds(Quote, children=_children(inner)),
        st.builds(Hyperlink, uri=st.just("https://example.com"), children=_children(inner)),
        st.builds(ListItem, children=_children(inner)),
        st.builds(OrderedList, children=_children(st.builds(ListItem, children=_children(inner)))),
        st.builds(UnorderedList, children=_children(st.builds(ListItem, children=_children(inner)))),
    ),
    max_leaves=20,
)
documents = st.builds(Document, children=_children(nodes))


class TextCollector(BaseVisitor[None]):
    """Collects text values in document order."""

    def __init__(self) -> None:
        self.values: list[str] = []

    def visit_text(self, node: Text) -> None:
        self.values.append(node.value)


def _max_list_depth(node: object, depth: int = 0) -> int:
    if isinstance(node, (OrderedList, UnorderedList)):
        depth += 1
    children = getattr(node, "children", ())
    return max([depth, *(_max_list_depth(c, depth) for c in children)])


class TestRenderProperties:
    @given(doc=documents)
    @settings(max_examples=100)
    def test_render_is_deterministic(self, doc: Document) -> None:
        """Test rendering is deterministic for any tree."""
        renderer = DocumentRenderer(THEME)
        assert renderer.render(doc) == renderer.render(doc)

    @given(doc=documents)
    @settings(max_examples=100)
    def test_indents_are_bounded_by_list_nesting(self, doc: Document) -> None:
        """Test indents stay within the list nesting depth."""
        limit = _max_list_depth(doc) * THEME.indentation_multiplier
        for fragment in DocumentRenderer(THEME).render(doc):
            if isinstance(fragment, StyledTextRun):
                assert 0.0 <= fragment.paragraph_indent <= limit

    @given(doc=documents)
    @settings(max_examples=100)
    def test_text_survives_in_order(self, doc: Document) -> None:
        """Test every text value appears in document order."""
        collector = TextCollector()
        collector.visit(doc)
        rendered = "".join(
            f.text for f in DocumentRenderer(THEME).render(doc) if isinstance(f, StyledTextRun)
        )
        # Every text value appears, in order, between prefixes and breaks.
        position = 0
        for value in collector.values:
            found = rendered.find(value, position)
            assert found >= 0
            position = found + len(value)

    @given(children=_children(texts))
    def test_paragraph_adds_exactly_one_break(self, children: tuple[Text, ...]) -> None:
        """Test a paragraph of text adds exactly one break."""
        fragments = DocumentRenderer(THEME).render(Document(children=(Paragraph(children=children),)))
        assert len(fragments) == len(children) + 1
        assert fragments[-1].text == "\n"  # type: ignore[union-attr]

    @given(children=_children(nodes))
    def test_hyperlink_is_one_run(self, children: tuple) -> None:  # type: ignore[type-arg]
        """Test any hyperlink renders to exactly one run."""
        link = Hyperlink("https://example.com", children=children)
        fragments = DocumentRenderer(THEME).render(Document(children=(link,)))
        assert len(fragments) == 1
        assert isinstance(fragments[0], StyledTextRun)
        assert fragments[0].link == "https://example.com"

    @given(count=st.integers(0, 5))
    def test_unsupported_siblings(self, count: int) -> None:
        """Test unsupported siblings each become one empty view."""
        doc = Document(children=(Unsupported(),) * count + (Text("end"),))
        fragments = DocumentRenderer(THEME).render(doc)
        assert fragments[:count] == [EmbeddedView()] * count
        assert fragments[-1].text == "end"  # type: ignore[union-attr]

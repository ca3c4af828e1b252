"""Thread safety tests for rendering.

Themes, registries and renderers are documented as shareable across threads.
These tests render the same tree from many threads at once and compare every
result with a single-threaded baseline.
"""

from concurrent.futures import ThreadPoolExecutor

from structured_text import (
    Document,
    DocumentRenderer,
    Heading,
    Hyperlink,
    ListItem,
    OrderedList,
    Paragraph,
    Quote,
    Text,
    UnorderedList,
)
from structured_text.theme import Styling


def _sample_document(n: int) -> Document:
    items = tuple(
        ListItem(children=(Paragraph(children=(Text(f"item {i}"),)),)) for i in range(n)
    )
    return Document(
        children=(
            Heading(level=1, children=(Text("Title"),)),
            OrderedList(children=items),
            UnorderedList(children=(ListItem(children=(OrderedList(children=items),)),)),
            Quote(children=(Paragraph(children=(Hyperlink("https://x", children=(Text("x"),)),)),)),
        )
    )


class TestConcurrentRendering:
    def test_shared_renderer(self) -> None:
        """Test one renderer shared by many threads."""
        renderer = DocumentRenderer(Styling())
        doc = _sample_document(20)
        baseline = renderer.render(doc)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: renderer.render(doc), range(50)))

        assert all(result == baseline for result in results)

    def test_different_documents_do_not_interfere(self) -> None:
        """Test concurrent renders of different trees stay separate."""
        renderer = DocumentRenderer(Styling())
        docs = [_sample_document(n) for n in range(1, 9)]
        baselines = [renderer.render(doc) for doc in docs]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(renderer.render, docs * 5))

        assert results == baselines * 5

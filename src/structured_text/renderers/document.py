"""Document renderer — entry point of the rendering engine.

Validates the tree, builds the base context, and renders the document's
top-level children through the registry.

Thread Safety:
All per-render state lives in RenderContext values created during the
render() call. Multiple threads can safely share a single DocumentRenderer
(and its theme and registry) and call render() concurrently.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from structured_text.context import RenderContext
from structured_text.errors import RenderDepthError
from structured_text.fragments import Fragment
from structured_text.nodes import Document
from structured_text.renderers.registry import RendererRegistry, create_default_registry
from structured_text.theme import Styling
from structured_text.utils.logger import get_logger
from structured_text.validation import stack_depth_limit, validate

if TYPE_CHECKING:
    from structured_text.theme import StyleTheme

logger = get_logger(__name__)


class DocumentRenderer:
    """Render a Document into an ordered list of fragments.

    Usage:
        renderer = DocumentRenderer(theme=Styling())
        doc = Document(children=(Paragraph(children=(Text("Hi"),)),))
        fragments = renderer.render(doc)
        # [StyledTextRun("Hi", ...), StyledTextRun("\\n", ...)]
    """

    __slots__ = ("_theme", "_registry")

    def __init__(
        self,
        theme: StyleTheme | None = None,
        *,
        registry: RendererRegistry | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            theme: Style theme; defaults to Styling()
            registry: Renderer registry; defaults to the built-in renderers
        """
        self._theme = theme if theme is not None else Styling()
        self._registry = registry if registry is not None else create_default_registry()

    @property
    def theme(self) -> StyleTheme:
        return self._theme

    @property
    def registry(self) -> RendererRegistry:
        return self._registry

    def render(self, document: Document) -> list[Fragment]:
        """Render a document.

        The tree is validated in full before any renderer runs, so a call
        either returns every fragment or raises without output. No line
        break is added after the last top-level child.

        Args:
            document: Root of the tree

        Returns:
            Fragments in document order

        Raises:
            MalformedTreeError: Root is not a Document or a Document is nested
            RenderDepthError: Tree nests deeper than RenderConfig.max_depth or
                than the interpreter stack can hold
        """
        depth = validate(document)
        ctx = RenderContext(theme=self._theme)
        try:
            fragments = self._registry.render_children(document.children, ctx)
        except RecursionError as exc:
            # The caller's own stack left less room than stack_depth_limit() assumes.
            msg = (
                f"nesting depth {depth} exhausted the interpreter stack "
                f"(recursion limit {sys.getrecursionlimit()})"
            )
            raise RenderDepthError(depth, stack_depth_limit(), message=msg) from exc
        logger.debug(
            "Rendered %d top-level nodes (depth %d) into %d fragments",
            len(document.children),
            depth,
            len(fragments),
        )
        return fragments


def render(
    document: Document,
    theme: StyleTheme | None = None,
    *,
    registry: RendererRegistry | None = None,
) -> list[Fragment]:
    """Render a document into fragments.

    Args:
        document: Root of the tree
        theme: Style theme; defaults to Styling()
        registry: Renderer registry; defaults to the built-in renderers

    Returns:
        Fragments in document order
    """
    return DocumentRenderer(theme, registry=registry).render(document)

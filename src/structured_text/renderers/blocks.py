"""Block renderers: Heading, Paragraph, Quote, and the fallback.

Block elements render their children in order and end with a single
line-break run. No attempt is made to collapse breaks between siblings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from structured_text.fragments import EmbeddedView, Fragment
from structured_text.nodes import Heading, Paragraph, Quote, node_type_name
from structured_text.renderers.text import line_break
from structured_text.utils.logger import get_logger

if TYPE_CHECKING:
    from structured_text.context import RenderContext
    from structured_text.renderers.registry import RendererRegistry

logger = get_logger(__name__)


class ParagraphRenderer:
    __slots__ = ()

    def render(
        self, node: Paragraph, registry: RendererRegistry, ctx: RenderContext
    ) -> list[Fragment]:
        fragments = registry.render_children(node.children, ctx)
        fragments.append(line_break(ctx))
        return fragments


class HeadingRenderer:
    """Render a heading; text inside uses the theme's font for its level."""

    __slots__ = ()

    def render(
        self, node: Heading, registry: RendererRegistry, ctx: RenderContext
    ) -> list[Fragment]:
        fragments = registry.render_children(node.children, ctx.in_heading(node.level))
        fragments.append(line_break(ctx))
        return fragments


class QuoteRenderer:
    """Render a block quote like a paragraph, in the theme's quote color.

    Quotes nest: children of a nested quote are still quote-colored.
    """

    __slots__ = ()

    def render(
        self, node: Quote, registry: RendererRegistry, ctx: RenderContext
    ) -> list[Fragment]:
        quoted = ctx.quoted()
        fragments = registry.render_children(node.children, quoted)
        fragments.append(line_break(quoted))
        return fragments


class FallbackRenderer:
    """Render any unsupported kind as an empty embedded view. Never fails."""

    __slots__ = ()

    def render(
        self, node: object, registry: RendererRegistry, ctx: RenderContext
    ) -> list[Fragment]:
        logger.debug("No renderer for %r node, emitting empty view", node_type_name(node))
        return [EmbeddedView()]

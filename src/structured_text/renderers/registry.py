"""Renderer registry for per-kind dispatch.

The registry maps node types to their renderers. It is the single point where
node kinds are told apart; renderers never inspect a node's type themselves.
Lookup is total: kinds without a registered renderer get the fallback.

Thread Safety:
RendererRegistry is immutable after creation. Safe to share.
Use RendererRegistryBuilder for mutable construction.

Example:
    builder = RendererRegistryBuilder()
    builder.register(Text, TextRenderer())
    registry = builder.build()
    registry.renderer_for(Text("hi"))  # TextRenderer
    registry.renderer_for(Quote())  # FallbackRenderer
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType
from typing import TYPE_CHECKING

from structured_text.errors import RenderError
from structured_text.nodes import (
    Heading,
    Hyperlink,
    ListItem,
    OrderedList,
    Paragraph,
    Quote,
    Text,
    UnorderedList,
)

if TYPE_CHECKING:
    from structured_text.context import RenderContext
    from structured_text.fragments import Fragment
    from structured_text.nodes import Node
    from structured_text.renderers.protocol import NodeRenderer


class RendererRegistry:
    """Immutable registry of node renderers.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_by_type", "_fallback")

    def __init__(
        self,
        by_type: dict[type, NodeRenderer],
        fallback: NodeRenderer,
    ) -> None:
        """Initialize registry with a pre-built mapping.

        Use RendererRegistryBuilder to create instances.
        """
        self._by_type = MappingProxyType(dict(by_type))
        self._fallback = fallback

    def renderer_for(self, node: Node) -> NodeRenderer:
        """Get the renderer for a node.

        Args:
            node: Any node

        Returns:
            Registered renderer for the node's type, or the fallback renderer
        """
        return self._by_type.get(type(node), self._fallback)

    def render(self, node: Node, ctx: RenderContext) -> list[Fragment]:
        """Render one node with its registered renderer."""
        renderer = self.renderer_for(node)
        fragments = renderer.render(node, self, ctx)
        if not isinstance(fragments, list):
            msg = f"{type(renderer).__name__} returned {type(fragments).__name__}, expected a list of fragments"
            raise RenderError(msg)
        return fragments

    def render_children(
        self, children: Iterable[Node], ctx: RenderContext
    ) -> list[Fragment]:
        """Render children in order with the same context and concatenate."""
        out: list[Fragment] = []
        for child in children:
            out.extend(self.render(child, ctx))
        return out

    @property
    def fallback(self) -> NodeRenderer:
        return self._fallback

    @property
    def kinds(self) -> frozenset[type]:
        """Node types with a registered renderer."""
        return frozenset(self._by_type)

    def __contains__(self, node_type: type) -> bool:
        return node_type in self._by_type

    def __len__(self) -> int:
        return len(self._by_type)


class RendererRegistryBuilder:
    """Mutable builder for RendererRegistry.

    Register renderers, then call build() to create an immutable registry.
    """

    __slots__ = ("_by_type", "_fallback")

    def __init__(self) -> None:
        from structured_text.renderers.blocks import FallbackRenderer

        self._by_type: dict[type, NodeRenderer] = {}
        self._fallback: NodeRenderer = FallbackRenderer()

    def register(
        self, node_type: type, renderer: NodeRenderer, *, replace: bool = False
    ) -> RendererRegistryBuilder:
        """Register a renderer for a node type.

        Args:
            node_type: Node class the renderer handles
            renderer: Object implementing NodeRenderer
            replace: Allow overriding an existing registration

        Returns:
            Self for chaining

        Raises:
            TypeError: If renderer has no ``render`` method
            ValueError: If node_type is already registered and replace is False
        """
        if not callable(getattr(renderer, "render", None)):
            msg = f"Renderer {type(renderer).__name__} missing 'render' method"
            raise TypeError(msg)

        if node_type in self._by_type and not replace:
            existing = self._by_type[node_type]
            msg = f"{node_type.__name__} already registered to {type(existing).__name__}"
            raise ValueError(msg)

        self._by_type[node_type] = renderer
        return self

    def fallback(self, renderer: NodeRenderer) -> RendererRegistryBuilder:
        """Set the renderer used for unregistered kinds."""
        self._fallback = renderer
        return self

    def build(self) -> RendererRegistry:
        return RendererRegistry(self._by_type, self._fallback)


def create_registry_with_defaults() -> RendererRegistryBuilder:
    """Create a builder pre-populated with all built-in renderers.

    Use this to override or extend the defaults:

        builder = create_registry_with_defaults()
        builder.register(Quote, MyQuoteRenderer(), replace=True)
        registry = builder.build()
    """
    from structured_text.renderers.blocks import (
        HeadingRenderer,
        ParagraphRenderer,
        QuoteRenderer,
    )
    from structured_text.renderers.links import HyperlinkRenderer
    from structured_text.renderers.lists import (
        ListItemRenderer,
        OrderedListRenderer,
        UnorderedListRenderer,
    )
    from structured_text.renderers.text import TextRenderer

    builder = RendererRegistryBuilder()
    builder.register(Text, TextRenderer())
    builder.register(Heading, HeadingRenderer())
    builder.register(Paragraph, ParagraphRenderer())
    builder.register(OrderedList, OrderedListRenderer())
    builder.register(UnorderedList, UnorderedListRenderer())
    builder.register(ListItem, ListItemRenderer())
    builder.register(Hyperlink, HyperlinkRenderer())
    builder.register(Quote, QuoteRenderer())
    return builder


_default_registry: RendererRegistry | None = None


def create_default_registry() -> RendererRegistry:
    """Get the registry with all built-in renderers.

    The registry is immutable, so a single instance is shared.
    """
    global _default_registry
    if _default_registry is None:
        _default_registry = create_registry_with_defaults().build()
    return _default_registry

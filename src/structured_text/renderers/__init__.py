"""structured-text renderers.

Renderers turn typed nodes into fragments. One renderer exists per node kind;
the registry picks the renderer for each node and composite renderers recurse
through it.

Available Renderers:
- TextRenderer: one styled run per text node
- HeadingRenderer, ParagraphRenderer, QuoteRenderer: block elements
- OrderedListRenderer, UnorderedListRenderer, ListItemRenderer: lists
- HyperlinkRenderer: merged, link-attributed run
- FallbackRenderer: empty embedded view for unsupported kinds
- DocumentRenderer: entry point

Thread Safety:
Renderers hold no state. Safe for concurrent use from multiple threads.

"""

from structured_text.renderers.blocks import (
    FallbackRenderer,
    HeadingRenderer,
    ParagraphRenderer,
    QuoteRenderer,
)
from structured_text.renderers.document import DocumentRenderer, render
from structured_text.renderers.links import HyperlinkRenderer
from structured_text.renderers.lists import (
    ListItemRenderer,
    OrderedListRenderer,
    UnorderedListRenderer,
)
from structured_text.renderers.protocol import NodeRenderer
from structured_text.renderers.registry import (
    RendererRegistry,
    RendererRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)
from structured_text.renderers.text import TextRenderer, resolve_font

__all__ = [
    "DocumentRenderer",
    "FallbackRenderer",
    "HeadingRenderer",
    "HyperlinkRenderer",
    "ListItemRenderer",
    "NodeRenderer",
    "OrderedListRenderer",
    "ParagraphRenderer",
    "QuoteRenderer",
    "RendererRegistry",
    "RendererRegistryBuilder",
    "TextRenderer",
    "UnorderedListRenderer",
    "create_default_registry",
    "create_registry_with_defaults",
    "render",
    "resolve_font",
]

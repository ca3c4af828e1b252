"""
structured-text — Rich-text node trees to styled fragments.

Renders a structured document (headings, paragraphs, lists, hyperlinks,
quotes, and marked text runs) into a flat, ordered list of styled fragments
that a presentation layer turns into native rich text. Zero runtime
dependencies; the node tree, theme, and output are plain frozen dataclasses.

Quick Start:
    >>> from structured_text import Document, Mark, Paragraph, Text, render
    >>> doc = Document(children=(
    ...     Paragraph(children=(Text("Hello, "), Text("World", marks=frozenset({Mark.BOLD})))),
    ... ))
    >>> [run.text for run in render(doc)]
    ['Hello, ', 'World', '\\n']

Custom Themes:
    Any object with ``base_font``, ``text_color``, ``quote_color``,
    ``indentation_multiplier`` and ``font_for(marks, *, heading_level=None)``
    can be passed as the theme. ``Styling`` is the built-in one.

Custom Renderers:
    Replace the renderer for one kind and keep the rest:

        from structured_text import Quote, create_registry_with_defaults

        builder = create_registry_with_defaults()
        builder.register(Quote, MyQuoteRenderer(), replace=True)
        fragments = render(doc, registry=builder.build())
"""

from structured_text.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from structured_text.context import ListKind, RenderContext
from structured_text.errors import (
    MalformedTreeError,
    RenderDepthError,
    RenderError,
    StructuredTextError,
)
from structured_text.fonts import Font
from structured_text.fragments import EmbeddedView, Fragment, StyledTextRun, plain_text
from structured_text.nodes import (
    Block,
    Document,
    Heading,
    Hyperlink,
    Inline,
    ListItem,
    Mark,
    Node,
    OrderedList,
    Paragraph,
    Quote,
    Text,
    UnorderedList,
    Unsupported,
    node_type_name,
)
from structured_text.renderers.document import DocumentRenderer, render
from structured_text.renderers.protocol import NodeRenderer
from structured_text.renderers.registry import (
    RendererRegistry,
    RendererRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)
from structured_text.theme import StyleTheme, Styling
from structured_text.validation import validate
from structured_text.visitor import BaseVisitor, transform

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "render",
    "DocumentRenderer",
    "validate",
    # Nodes
    "Block",
    "Document",
    "Heading",
    "Hyperlink",
    "Inline",
    "ListItem",
    "Mark",
    "Node",
    "OrderedList",
    "Paragraph",
    "Quote",
    "Text",
    "UnorderedList",
    "Unsupported",
    "node_type_name",
    # Output
    "EmbeddedView",
    "Fragment",
    "StyledTextRun",
    "plain_text",
    # Styling
    "Font",
    "StyleTheme",
    "Styling",
    # Context and configuration
    "ListKind",
    "RenderContext",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Registry
    "NodeRenderer",
    "RendererRegistry",
    "RendererRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    # Tree utilities
    "BaseVisitor",
    "transform",
    # Errors
    "StructuredTextError",
    "MalformedTreeError",
    "RenderDepthError",
    "RenderError",
    "__version__",
]

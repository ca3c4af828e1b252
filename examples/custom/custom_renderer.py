"""Override one node kind and the fallback, keep the rest of the defaults."""

from structured_text import (
    Document,
    EmbeddedView,
    Paragraph,
    Quote,
    Text,
    Unsupported,
    create_registry_with_defaults,
    node_type_name,
    render,
)
from structured_text.renderers.text import line_break, styled_run


class PrefixedQuote:
    """Quote rendered with a leading bar instead of a color."""

    def render(self, node, registry, ctx):
        fragments = [styled_run("│ ", ctx)]
        fragments.extend(registry.render_children(node.children, ctx))
        fragments.append(line_break(ctx))
        return fragments


class NamedPlaceholder:
    """Keep the unsupported kind so the view layer can pick a widget."""

    def render(self, node, registry, ctx):
        return [EmbeddedView(handle=node_type_name(node))]


builder = create_registry_with_defaults()
builder.register(Quote, PrefixedQuote(), replace=True)
builder.fallback(NamedPlaceholder())

doc = Document(
    children=(
        Quote(children=(Text("Simple is better than complex."),)),
        Unsupported("embedded-entry-block", {"id": "hero-image"}),
        Paragraph(children=(Text("Done."),)),
    )
)

for fragment in render(doc, registry=builder.build()):
    print(fragment)

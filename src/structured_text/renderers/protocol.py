"""NodeRenderer protocol — stable interface for per-kind renderers.

Any object with ``render(node, registry, ctx) -> list[Fragment]`` conforms.
Composite renderers recurse by handing their children back to the registry,
so one registry fully determines how a tree renders.

Example:
    class ShoutingText:
        def render(self, node, registry, ctx):
            return [StyledTextRun(node.value.upper(), ctx.theme.base_font)]

    builder = create_registry_with_defaults()
    builder.register(Text, ShoutingText(), replace=True)

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from structured_text.context import RenderContext
    from structured_text.fragments import Fragment
    from structured_text.renderers.registry import RendererRegistry


class NodeRenderer(Protocol):
    """Protocol for node renderers.

    Implementations must be stateless with respect to a render: everything
    that varies during traversal arrives in ``ctx``.

    """

    def render(
        self, node: Any, registry: RendererRegistry, ctx: RenderContext
    ) -> list[Fragment]:
        """Render one node.

        Args:
            node: Node of the kind this renderer is registered for.
            registry: Registry to resolve child renderers with.
            ctx: Context for this node.

        Returns:
            Fragments for the node, in order.

        """
        ...

"""Hyperlink renderer.

A link attribute cannot span a non-text region, so the children's text runs
are merged into one run carrying the link target and any embedded views among
them are dropped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from structured_text.fragments import Fragment, StyledTextRun
from structured_text.nodes import Hyperlink
from structured_text.renderers.text import styled_run

if TYPE_CHECKING:
    from structured_text.context import RenderContext
    from structured_text.renderers.registry import RendererRegistry


class HyperlinkRenderer:
    """Render a hyperlink as exactly one link-attributed run.

    The merged run takes its font and color from the first child run, or
    from the context when the link has no text at all.
    """

    __slots__ = ()

    def render(
        self, node: Hyperlink, registry: RendererRegistry, ctx: RenderContext
    ) -> list[Fragment]:
        runs = [
            f for f in registry.render_children(node.children, ctx)
            if isinstance(f, StyledTextRun)
        ]
        template = runs[0] if runs else styled_run("", ctx)
        merged = StyledTextRun(
            text="".join(run.text for run in runs),
            font=template.font,
            paragraph_indent=ctx.paragraph_indent,
            color=template.color,
            link=node.uri,
        )
        return [merged]

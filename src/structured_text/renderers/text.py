"""Text renderer and shared run builders.

Text is the only leaf the renderer produces output for directly; every
composite renderer bottoms out here.

Font resolution follows a fixed mark priority (see ``apply_marks``):
bold+italic, bold, italic, code, then the base font. The theme does the
actual lookup and must return a font for every combination.
"""

from __future__ import annotations

from collections.abc import Set
from typing import TYPE_CHECKING

from structured_text.config import get_render_config
from structured_text.fonts import Font
from structured_text.fragments import Fragment, StyledTextRun
from structured_text.nodes import Mark, Text

if TYPE_CHECKING:
    from structured_text.context import RenderContext
    from structured_text.renderers.registry import RendererRegistry
    from structured_text.theme import StyleTheme


def resolve_font(
    theme: StyleTheme, marks: Set[Mark], heading_level: int | None = None
) -> Font:
    """Font for a run with ``marks`` under ``theme``."""
    return theme.font_for(marks, heading_level=heading_level)


def styled_run(text: str, ctx: RenderContext, font: Font | None = None) -> StyledTextRun:
    """Build a run positioned and colored for ``ctx``.

    Uses the theme's base font unless ``font`` is given.
    """
    return StyledTextRun(
        text=text,
        font=font if font is not None else ctx.theme.base_font,
        paragraph_indent=ctx.paragraph_indent,
        color=ctx.text_color,
    )


def line_break(ctx: RenderContext) -> StyledTextRun:
    """Run that ends a block element."""
    return styled_run(get_render_config().line_break, ctx)


class TextRenderer:
    """Render a Text node as exactly one styled run."""

    __slots__ = ()

    def render(
        self, node: Text, registry: RendererRegistry, ctx: RenderContext
    ) -> list[Fragment]:
        font = resolve_font(ctx.theme, node.marks, ctx.heading_level)
        return [styled_run(node.value, ctx, font)]

"""Render context threaded through the traversal.

A RenderContext carries the active theme and everything a renderer needs to
know about where it sits in the tree: list nesting, enclosing list kind,
enclosing heading, quote depth. It is immutable. A renderer that needs a
different context for its children builds a new one with the helpers below
and hands it only to those children, so siblings and callers never see it.

Example:
    ctx = RenderContext(theme=Styling())
    child_ctx = ctx.indented().in_list(ListKind.ORDERED)
    # ctx.indent_level is still 0

Thread Safety:
    Frozen dataclass. Safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

from structured_text.theme import StyleTheme


class ListKind(StrEnum):
    """Kind of list enclosing a list item."""

    ORDERED = "ordered"
    UNORDERED = "unordered"


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Immutable per-node render state.

    Attributes:
        theme: Active style theme
        indent_level: List nesting level, never negative
        list_kind: Kind of the nearest enclosing list, if any
        heading_level: Level of the enclosing heading, if any
        quote_depth: Number of enclosing block quotes

    """

    theme: StyleTheme
    indent_level: int = 0
    list_kind: ListKind | None = None
    heading_level: int | None = None
    quote_depth: int = 0

    def __post_init__(self) -> None:
        if self.indent_level < 0:
            msg = f"indent_level must be non-negative, got {self.indent_level}"
            raise ValueError(msg)
        if self.quote_depth < 0:
            msg = f"quote_depth must be non-negative, got {self.quote_depth}"
            raise ValueError(msg)

    @property
    def paragraph_indent(self) -> float:
        """Indent for paragraphs rendered at this level."""
        return self.indent_level * self.theme.indentation_multiplier

    @property
    def text_color(self) -> str:
        """Color for text rendered at this position."""
        if self.quote_depth:
            return self.theme.quote_color
        return self.theme.text_color

    def indented(self) -> RenderContext:
        return replace(self, indent_level=self.indent_level + 1)

    def dedented(self) -> RenderContext:
        """One level shallower, clamped at zero."""
        return replace(self, indent_level=max(0, self.indent_level - 1))

    def in_list(self, kind: ListKind) -> RenderContext:
        return replace(self, list_kind=kind)

    def in_heading(self, level: int) -> RenderContext:
        return replace(self, heading_level=level)

    def quoted(self) -> RenderContext:
        return replace(self, quote_depth=self.quote_depth + 1)

"""List renderers: OrderedList, UnorderedList, ListItem.

Lists indent their items one level deeper than the list itself and tell them
which kind of list they are in. The deeper context only reaches the list's own
children, so the list's siblings keep the original level.

List items prefix every direct child with a marker: ``"1. "``, ``"2. "``, ...
by child position inside ordered lists (and for items outside any list), or
the configured bullet inside unordered lists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from structured_text.config import get_render_config
from structured_text.context import ListKind
from structured_text.fragments import Fragment
from structured_text.nodes import ListItem, OrderedList, UnorderedList
from structured_text.renderers.text import line_break, styled_run

if TYPE_CHECKING:
    from structured_text.context import RenderContext
    from structured_text.renderers.registry import RendererRegistry


class OrderedListRenderer:
    __slots__ = ()

    def render(
        self, node: OrderedList, registry: RendererRegistry, ctx: RenderContext
    ) -> list[Fragment]:
        return registry.render_children(
            node.children, ctx.indented().in_list(ListKind.ORDERED)
        )


class UnorderedListRenderer:
    __slots__ = ()

    def render(
        self, node: UnorderedList, registry: RendererRegistry, ctx: RenderContext
    ) -> list[Fragment]:
        return registry.render_children(
            node.children, ctx.indented().in_list(ListKind.UNORDERED)
        )


def item_prefix(index: int, kind: ListKind | None) -> str:
    """Marker placed before the child at ``index`` (0-based) of a list item."""
    if kind is ListKind.UNORDERED:
        return f"{get_render_config().bullet} "
    return f"{index + 1}. "


class ListItemRenderer:
    __slots__ = ()

    def render(
        self, node: ListItem, registry: RendererRegistry, ctx: RenderContext
    ) -> list[Fragment]:
        fragments: list[Fragment] = []
        for index, child in enumerate(node.children):
            fragments.append(styled_run(item_prefix(index, ctx.list_kind), ctx))
            fragments.extend(registry.render(child, ctx))
        fragments.append(line_break(ctx))
        return fragments

"""Tests for the immutable render context."""

import dataclasses

import pytest

from structured_text.context import ListKind, RenderContext
from structured_text.theme import Styling


class TestRenderContext:
    def test_defaults(self, theme: Styling) -> None:
        """Test a fresh context sits at the top level."""
        ctx = RenderContext(theme=theme)
        assert ctx.indent_level == 0
        assert ctx.list_kind is None
        assert ctx.heading_level is None
        assert ctx.quote_depth == 0

    def test_immutability(self, theme: Styling) -> None:
        """Test the context is frozen."""
        ctx = RenderContext(theme=theme)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ctx.indent_level = 3  # type: ignore[misc]

    def test_indented_returns_new_context(self, theme: Styling) -> None:
        """Test indented leaves the original untouched."""
        ctx = RenderContext(theme=theme)
        deeper = ctx.indented()
        assert deeper.indent_level == 1
        assert ctx.indent_level == 0

    def test_dedented_clamps_at_zero(self, theme: Styling) -> None:
        """Test dedenting never goes below zero."""
        ctx = RenderContext(theme=theme)
        assert ctx.dedented().indent_level == 0
        assert ctx.indented().indented().dedented().indent_level == 1

    def test_negative_indent_rejected(self, theme: Styling) -> None:
        """Test a negative indent level is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            RenderContext(theme=theme, indent_level=-1)

    def test_negative_quote_depth_rejected(self, theme: Styling) -> None:
        """Test a negative quote depth is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            RenderContext(theme=theme, quote_depth=-1)

    def test_paragraph_indent(self, theme: Styling) -> None:
        """Test indent is the level times the theme multiplier."""
        ctx = RenderContext(theme=theme, indent_level=3)
        assert ctx.paragraph_indent == 24.0

    def test_text_color_in_quote(self, theme: Styling) -> None:
        """Test quoted contexts switch to the quote color."""
        ctx = RenderContext(theme=theme)
        assert ctx.text_color == "#111111"
        assert ctx.quoted().text_color == "#777777"
        assert ctx.quoted().quoted().quote_depth == 2

    def test_in_list_and_heading(self, theme: Styling) -> None:
        """Test list kind and heading level are carried."""
        ctx = RenderContext(theme=theme).in_list(ListKind.UNORDERED).in_heading(2)
        assert ctx.list_kind is ListKind.UNORDERED
        assert ctx.heading_level == 2

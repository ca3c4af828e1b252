"""Style themes.

A theme is the renderer's only source of visual attributes. The renderer asks
it for a font given a text run's marks, and reads its base font, colors and
indentation multiplier. It never computes font geometry itself.

``StyleTheme`` is the protocol the renderer depends on; ``Styling`` is the
built-in implementation with sensible defaults.

Thread Safety:
Styling is frozen (immutable). Any theme passed to the renderer is only read,
so one theme can serve concurrent renders.

"""

from __future__ import annotations

from collections.abc import Set
from dataclasses import dataclass
from typing import Protocol

from structured_text.fonts import Font
from structured_text.nodes import Mark

DEFAULT_BASE_FONT = Font("system", 17.0)

# Sizes for heading levels 1-6.
DEFAULT_HEADING_FONTS: tuple[Font, ...] = (
    Font("system", 24.0),
    Font("system", 18.0),
    Font("system", 16.0, bold=True),
    Font("system", 15.0),
    Font("system", 14.0),
    Font("system", 13.0),
)


class StyleTheme(Protocol):
    """Protocol for themes consumed by the renderer.

    ``font_for`` must be total: every mark combination, with or without a
    heading level, resolves to some font.

    """

    @property
    def base_font(self) -> Font: ...

    @property
    def text_color(self) -> str: ...

    @property
    def quote_color(self) -> str: ...

    @property
    def indentation_multiplier(self) -> float: ...

    def font_for(self, marks: Set[Mark], *, heading_level: int | None = None) -> Font:
        """Return the font for a text run with ``marks``.

        Args:
            marks: Marks active on the run
            heading_level: Level of the enclosing heading, if any

        Returns:
            Font to set the run in. Never None.

        """
        ...


def apply_marks(font: Font, marks: Set[Mark]) -> Font:
    """Derive the variant of ``font`` for ``marks``.

    Fixed priority, only bold and italic combine:
    bold+italic, then bold, then italic, then code (monospace), else ``font``.
    Underline does not change the font.

    """
    bold = Mark.BOLD in marks
    italic = Mark.ITALIC in marks
    if bold and italic:
        return font.bolded_and_italicized()
    if bold:
        return font.bolded()
    if italic:
        return font.italicized()
    if Mark.CODE in marks:
        return font.monospaced()
    return font


@dataclass(frozen=True, slots=True)
class Styling:
    """Default theme.

    Attributes:
        base_font: Font for unmarked body text
        text_color: Color for body text
        quote_color: Color for text inside block quotes
        indentation_multiplier: Paragraph indent per nesting level
        heading_fonts: Fonts for heading levels 1-6, in order

    Example:
        >>> theme = Styling()
        >>> theme.font_for({Mark.BOLD}) == theme.base_font.bolded()
        True

    """

    base_font: Font = DEFAULT_BASE_FONT
    text_color: str = "#000000"
    quote_color: str = "#6a737d"
    indentation_multiplier: float = 20.0
    heading_fonts: tuple[Font, ...] = DEFAULT_HEADING_FONTS

    def __post_init__(self) -> None:
        if self.indentation_multiplier < 0:
            msg = f"indentation_multiplier must be non-negative, got {self.indentation_multiplier}"
            raise ValueError(msg)
        if not self.heading_fonts:
            raise ValueError("heading_fonts must not be empty")

    def heading_font(self, level: int) -> Font:
        """Font for heading ``level``; levels past the table reuse its last entry."""
        index = min(max(level, 1), len(self.heading_fonts)) - 1
        return self.heading_fonts[index]

    def font_for(self, marks: Set[Mark], *, heading_level: int | None = None) -> Font:
        base = self.base_font if heading_level is None else self.heading_font(heading_level)
        return apply_marks(base, marks)

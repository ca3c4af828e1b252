"""Font value type.

The renderer treats fonts as opaque handles. Themes build them and derive
variants (bold, italic, monospace) from a base font; a presentation layer maps
them onto platform font objects.

Thread Safety:
Font is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Font:
    """Platform-neutral font description.

    Attributes:
        family: Font family name ("system" for the platform default)
        size: Point size
        bold: Bold weight trait
        italic: Italic trait
        monospace: Fixed-pitch trait

    Examples:
        >>> base = Font("system", 17.0)
        >>> base.bolded()
        Font(family='system', size=17.0, bold=True, italic=False, monospace=False)
        >>> base.bolded_and_italicized() == base.italicized().bolded()
        True

    """

    family: str
    size: float
    bold: bool = False
    italic: bool = False
    monospace: bool = False

    def __post_init__(self) -> None:
        if self.size <= 0:
            msg = f"Font size must be positive, got {self.size}"
            raise ValueError(msg)

    def bolded(self) -> Font:
        return replace(self, bold=True)

    def italicized(self) -> Font:
        return replace(self, italic=True)

    def bolded_and_italicized(self) -> Font:
        return replace(self, bold=True, italic=True)

    def monospaced(self, family: str = "monospace") -> Font:
        """Fixed-pitch variant in ``family``, same size, no weight traits."""
        return Font(family=family, size=self.size, monospace=True)

    def resized(self, size: float) -> Font:
        return replace(self, size=size)

"""Render output fragments.

A render produces an ordered list of fragments. Each fragment is either a
styled text run or a placeholder for an embedded view that the presentation
layer substitutes with a real widget.

Thread Safety:
Fragments are frozen (immutable) and safe to share across threads.

"""

from collections.abc import Iterable
from dataclasses import dataclass

from structured_text.fonts import Font


@dataclass(frozen=True, slots=True)
class StyledTextRun:
    """A run of text with uniform styling.

    Attributes:
        text: Literal text of the run
        font: Font the run is set in
        paragraph_indent: Leading indent of the paragraph containing the run
        color: Text color, or None for the presentation default
        link: Link target applied over the whole run, if any

    """

    text: str
    font: Font
    paragraph_indent: float = 0.0
    color: str | None = None
    link: str | None = None


@dataclass(frozen=True, slots=True)
class EmbeddedView:
    """Placeholder for a view embedded at this position.

    ``handle`` is an opaque reference the presentation layer resolves; it is
    None for nodes that render to nothing.

    """

    handle: object | None = None


type Fragment = StyledTextRun | EmbeddedView


def plain_text(fragments: Iterable[Fragment]) -> str:
    """Concatenate the text of all runs, skipping embedded views.

    Example:
        >>> font = Font("system", 12.0)
        >>> plain_text([StyledTextRun("a", font), EmbeddedView(), StyledTextRun("b", font)])
        'ab'

    """
    return "".join(f.text for f in fragments if isinstance(f, StyledTextRun))

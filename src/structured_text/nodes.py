"""Typed document nodes for structured-text.

All nodes are frozen dataclasses with slots for:
- Immutability: a tree can be shared across threads and render calls
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: Python 3.10+ match statements work naturally

Node Kinds:
Node
├── Block (block-level elements)
│   ├── Document
│   ├── Heading
│   ├── Paragraph
│   ├── OrderedList
│   ├── UnorderedList
│   ├── ListItem
│   └── Quote
├── Inline (inline elements)
│   ├── Text
│   └── Hyperlink
└── Unsupported (any kind the decoder could not map)

Trees are built by an upstream decoder (or by hand in tests). Only Text and
Unsupported are leaves; every other kind owns a possibly-empty tuple of
children. A Document is always the root and never appears as a child.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType


class Mark(StrEnum):
    """Inline style annotation on a text run."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    CODE = "code"


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """A run of literal text with zero or more marks. Leaf node."""

    value: str
    marks: frozenset[Mark] = frozenset()


@dataclass(frozen=True, slots=True)
class Hyperlink:
    """Hyperlink wrapping inline content.

    Rendered as a single run carrying ``uri`` as its link target.

    """

    uri: str
    children: tuple[Node, ...] = ()


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading:
    """Heading, levels 1 (largest) through 6."""

    level: int
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            msg = f"Heading level must be between 1 and 6, got {self.level}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Paragraph:
    children: tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True)
class ListItem:
    """List item. Children are usually paragraphs or nested lists."""

    children: tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True)
class OrderedList:
    children: tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True)
class UnorderedList:
    children: tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True)
class Quote:
    """Block quote."""

    children: tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True)
class Document:
    """Root document node.

    Contains all top-level blocks in the document.

    """

    children: tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True)
class Unsupported:
    """Catch-all for node kinds the renderer does not support.

    ``node_type`` keeps the upstream kind name (e.g. ``"embedded-entry-block"``
    or ``"hr"``) for diagnostics; ``data`` keeps whatever payload the decoder
    attached. Rendered as an empty embedded view.

    """

    node_type: str = "unsupported"
    data: Mapping[str, object] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        # Store a read-only copy so the node stays immutable.
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))


# PEP 695 type aliases
type Inline = Text | Hyperlink

type Block = (
    Document
    | Heading
    | Paragraph
    | OrderedList
    | UnorderedList
    | ListItem
    | Quote
)

type Node = Block | Inline | Unsupported

# Parent kinds, i.e. everything that owns a ``children`` tuple.
CONTAINER_TYPES: tuple[type, ...] = (
    Document,
    Heading,
    Paragraph,
    OrderedList,
    UnorderedList,
    ListItem,
    Quote,
    Hyperlink,
)

# Wire-format kind names, used in log and error messages.
NODE_TYPE_NAMES: dict[type, str] = {
    Document: "document",
    Heading: "heading",
    Paragraph: "paragraph",
    Text: "text",
    OrderedList: "ordered-list",
    UnorderedList: "unordered-list",
    ListItem: "list-item",
    Hyperlink: "hyperlink",
    Quote: "blockquote",
}


def node_type_name(node: object) -> str:
    """Return the wire-format kind name of a node.

    Headings report their level (``"heading-2"``); Unsupported nodes report the
    kind they were decoded from.

    Example:
        >>> node_type_name(Heading(level=2))
        'heading-2'
        >>> node_type_name(Unsupported("hr"))
        'hr'

    """
    match node:
        case Heading(level=level):
            return f"heading-{level}"
        case Unsupported(node_type=node_type):
            return node_type
        case _:
            return NODE_TYPE_NAMES.get(type(node), type(node).__name__)


def children_of(node: object) -> tuple[Node, ...]:
    """Return the children of ``node``, or an empty tuple for leaves."""
    if isinstance(node, CONTAINER_TYPES):
        return node.children  # type: ignore[attr-defined]
    return ()

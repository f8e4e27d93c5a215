"""Node variants describing a parsed wikitext page.

Every node records the ``start``/``end`` character span it covers in the
original page text. Variants with bespoke rendering carry the extra fields
they need; everything else (plain text, links, templates, comments) is
rendered by copying its span verbatim, so new span-only variants need no
renderer changes.

The tree is immutable once built: children are stored as tuples and each
node is owned by exactly one parent.
"""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True, frozen=True)
class Node:
    """Base class for all node variants.

    Attributes
    ----------
    start : int
        Offset of the first character covered by the node.
    end : int
        Offset one past the last character covered by the node.
    """

    start: int
    end: int


@dc.dataclass(slots=True, frozen=True)
class Text(Node):
    """Run of plain text."""


@dc.dataclass(slots=True, frozen=True)
class Link(Node):
    """Internal wikilink such as ``[[Target|label]]``."""

    target: str = ""


@dc.dataclass(slots=True, frozen=True)
class Template(Node):
    """Unexpanded template transclusion such as ``{{name}}``."""

    name: str = ""


@dc.dataclass(slots=True, frozen=True)
class Comment(Node):
    """HTML comment embedded in the wikitext."""


@dc.dataclass(slots=True, frozen=True)
class Other(Node):
    """Any construct without a dedicated variant."""


@dc.dataclass(slots=True, frozen=True)
class Preformatted(Node):
    """Block of space-indented lines."""

    children: tuple[Node, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class Heading(Node):
    """Section heading; ``level`` counts the ``=`` signs (1-6)."""

    level: int = 1
    children: tuple[Node, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class HorizontalDivider(Node):
    """Horizontal rule written as ``----``."""


@dc.dataclass(slots=True, frozen=True)
class Bold(Node):
    """Delimiter toggling bold text."""


@dc.dataclass(slots=True, frozen=True)
class BoldItalic(Node):
    """Delimiter toggling bold italic text."""


@dc.dataclass(slots=True, frozen=True)
class Italic(Node):
    """Delimiter toggling italic text."""


@dc.dataclass(slots=True, frozen=True)
class Tag(Node):
    """HTML-style or extension tag such as ``<syntaxhighlight>``."""

    name: str = ""
    children: tuple[Node, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class ListItem(Node):
    """Single list entry and its inline content."""

    children: tuple[Node, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class OrderedList(Node):
    """Run of ``#`` list items."""

    items: tuple[ListItem, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class UnorderedList(Node):
    """Run of ``*`` list items."""

    items: tuple[ListItem, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class Category(Node):
    """Category membership link such as ``[[Category:Name]]``."""

    name: str = ""


__all__ = [
    "Bold",
    "BoldItalic",
    "Category",
    "Comment",
    "Heading",
    "HorizontalDivider",
    "Italic",
    "Link",
    "ListItem",
    "Node",
    "OrderedList",
    "Other",
    "Preformatted",
    "Tag",
    "Template",
    "Text",
    "UnorderedList",
]

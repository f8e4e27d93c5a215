"""Classify MediaWiki namespace codes into content and non-content groups.

Only pages in the ``Content`` class are rendered. The lookup is a deny-list:
codes listed in :data:`NAMESPACE_CLASSES` map to ``Meta`` or ``File``, and
every other integer (including the main article namespace ``0``) falls back
to ``Content``.

Examples
--------
>>> from wikidump_html.namespaces import NamespaceClass, classify
>>> classify(0) is NamespaceClass.CONTENT
True
>>> classify(1) is NamespaceClass.META
True
>>> classify(6) is NamespaceClass.FILE
True
"""

from __future__ import annotations

import enum
import typing as typ

MAIN = 0
TALK = 1
USER = 2
USER_TALK = 3
FILE = 6
MEDIA_WIKI = 8
TEMPLATE = 10
CATEGORY = 14
CATEGORY_TALK = 15
USER_BLOG = 500
USER_BLOG_COMMENT = 501
BLOG = 502
MESSAGE_WALL = 1200
THREAD = 1201
MESSAGE_WALL_GREETING = 1202
BOARD = 2000


class NamespaceClass(enum.Enum):
    """Coarse category of a namespace, driving page inclusion."""

    CONTENT = "content"
    META = "meta"
    FILE = "file"


NAMESPACE_CLASSES: typ.Final[typ.Mapping[int, NamespaceClass]] = {
    TALK: NamespaceClass.META,
    USER: NamespaceClass.META,
    USER_TALK: NamespaceClass.META,
    MEDIA_WIKI: NamespaceClass.META,
    TEMPLATE: NamespaceClass.META,
    CATEGORY: NamespaceClass.META,
    CATEGORY_TALK: NamespaceClass.META,
    USER_BLOG_COMMENT: NamespaceClass.META,
    BLOG: NamespaceClass.META,
    MESSAGE_WALL: NamespaceClass.META,
    THREAD: NamespaceClass.META,
    MESSAGE_WALL_GREETING: NamespaceClass.META,
    BOARD: NamespaceClass.META,
    FILE: NamespaceClass.FILE,
}

_EXCLUSION_REASONS = {
    NamespaceClass.META: "is meta-content, not true content",
    NamespaceClass.FILE: "is a file description page, which is skipped",
}


def classify(namespace: int) -> NamespaceClass:
    """Return the class of ``namespace``; unknown codes are content."""
    return NAMESPACE_CLASSES.get(namespace, NamespaceClass.CONTENT)


def is_renderable(namespace: int) -> bool:
    """Return ``True`` when pages in ``namespace`` should be rendered."""
    return classify(namespace) is NamespaceClass.CONTENT


def describe_exclusion(page_class: NamespaceClass) -> str | None:
    """Return the operator-facing reason a class is excluded, if it is."""
    return _EXCLUSION_REASONS.get(page_class)


__all__ = [
    "NAMESPACE_CLASSES",
    "NamespaceClass",
    "classify",
    "describe_exclusion",
    "is_renderable",
]

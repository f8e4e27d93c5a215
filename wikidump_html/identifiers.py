"""Derive output file identifiers from page titles.

Each admitted page is written to ``<identifier>.html``. Identifiers keep
ASCII letters, digits and underscores and replace every other character with
``_``; results that would clash with generated files get a ``munged`` suffix.
"""

from __future__ import annotations

import re
import typing as typ

from ._constants import INDEX_STEM

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .dump_reader import Page

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]")
MUNGED_SUFFIX = "munged"


class IdentifierCollisionError(ValueError):
    """Raised when two page titles sanitize to the same identifier."""


def sanitize_identifier(
    title: str, reserved: cabc.Collection[str] = (INDEX_STEM,)
) -> str:
    """Return a filesystem-safe identifier for ``title``.

    Examples
    --------
    >>> sanitize_identifier("Max Headroom (character)")
    'Max_Headroom__character_'
    >>> sanitize_identifier("?")
    '_munged'
    """
    identifier = _INVALID_CHARS.sub("_", title)
    if identifier == "_" or identifier in reserved:
        identifier += MUNGED_SUFFIX
    return identifier


def assign_identifiers(
    pages: cabc.Iterable[Page], reserved: cabc.Collection[str] = (INDEX_STEM,)
) -> list[tuple[Page, str]]:
    """Pair each page with its identifier, preserving page order.

    Raises
    ------
    IdentifierCollisionError
        If two pages produce the same identifier.
    """
    owners: dict[str, str] = {}
    pairs: list[tuple[Page, str]] = []
    for page in pages:
        identifier = sanitize_identifier(page.title, reserved)
        if identifier in owners:
            msg = (
                f"pages {page.title!r} and {owners[identifier]!r} both "
                f"sanitize to {identifier!r}"
            )
            raise IdentifierCollisionError(msg)
        owners[identifier] = page.title
        pairs.append((page, identifier))
    return pairs


__all__ = ["IdentifierCollisionError", "assign_identifiers", "sanitize_identifier"]

"""Stream page records out of MediaWiki XML export files.

Dumps are read incrementally with :func:`xml.etree.ElementTree.iterparse` so
large exports never need to fit in memory. Any export schema version is
accepted because element names are matched without their XML namespace.
Files ending in ``.bz2`` or ``.gz`` are decompressed on the fly.
"""

from __future__ import annotations

import bz2
import dataclasses as dc
import gzip
import logging
import typing as typ
import xml.etree.ElementTree as ET

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = logging.getLogger(__name__)


class DumpFormatError(ValueError):
    """Raised when a ``<page>`` element lacks required fields."""


@dc.dataclass(slots=True, frozen=True)
class Page:
    """One page of a dump, holding the text of its newest revision.

    Attributes
    ----------
    title : str
        Page title including any namespace prefix.
    namespace : int
        Numeric namespace code from ``<ns>``.
    text : str
        Raw wikitext of the last revision in the export.
    format : str | None
        Revision text format, e.g. ``"text/x-wiki"``.
    model : str | None
        Content model, e.g. ``"wikitext"`` or ``"css"``.
    """

    title: str
    namespace: int
    text: str
    format: str | None = None
    model: str | None = None


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element, name: str) -> ET.Element | None:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _child_text(element: ET.Element, name: str) -> str | None:
    child = _child(element, name)
    return None if child is None else (child.text or "")


def _open_dump(path: Path) -> typ.BinaryIO:
    match path.suffix.lower():
        case ".bz2":
            return typ.cast("typ.BinaryIO", bz2.open(path, "rb"))
        case ".gz":
            return typ.cast("typ.BinaryIO", gzip.open(path, "rb"))
        case _:
            return path.open("rb")


def _page_from_element(element: ET.Element) -> Page:
    title = _child_text(element, "title")
    if title is None:
        msg = "Encountered a <page> element without a <title>."
        raise DumpFormatError(msg)
    raw_namespace = _child_text(element, "ns")
    try:
        namespace = int(raw_namespace or "")
    except ValueError as exc:
        msg = f"Page {title!r} has a missing or non-integer namespace {raw_namespace!r}."
        raise DumpFormatError(msg) from exc

    revisions = [child for child in element if _local_name(child.tag) == "revision"]
    if not revisions:
        return Page(title=title, namespace=namespace, text="")
    latest = revisions[-1]
    return Page(
        title=title,
        namespace=namespace,
        text=_child_text(latest, "text") or "",
        format=_child_text(latest, "format"),
        model=_child_text(latest, "model"),
    )


def iter_pages(path: Path) -> cabc.Iterator[Page]:
    """Yield every page in the dump at ``path`` in document order.

    Raises
    ------
    DumpFormatError
        If a page has no title or no integer namespace.
    xml.etree.ElementTree.ParseError
        If the file is not well-formed XML.
    """
    with _open_dump(path) as handle:
        for _event, element in ET.iterparse(handle, events=("end",)):
            if _local_name(element.tag) != "page":
                continue
            yield _page_from_element(element)
            element.clear()


def read_pages(paths: cabc.Iterable[Path]) -> list[Page]:
    """Return the pages of every dump in ``paths``, file by file."""
    pages: list[Page] = []
    for path in paths:
        before = len(pages)
        pages.extend(iter_pages(path))
        logger.debug("read %d pages from %s", len(pages) - before, path)
    return pages


__all__ = ["DumpFormatError", "Page", "iter_pages", "read_pages"]

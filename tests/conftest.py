"""Shared fixtures for wikidump_html tests."""

from __future__ import annotations

import typing as typ
from xml.sax.saxutils import escape

import pytest

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

EXPORT_NS = "http://www.mediawiki.org/xml/export-0.10/"

PageSpec = tuple[str, int, str]
DumpBuilder = typ.Callable[..., str]


def _build_dump(pages: cabc.Iterable[PageSpec], *, model: str = "wikitext") -> str:
    """Return a MediaWiki export document containing ``pages``."""
    body = "".join(
        f"""
  <page>
    <title>{escape(title)}</title>
    <ns>{namespace}</ns>
    <id>{index}</id>
    <revision>
      <id>{index * 10}</id>
      <model>{model}</model>
      <format>text/x-wiki</format>
      <text xml:space="preserve">{escape(text)}</text>
    </revision>
  </page>"""
        for index, (title, namespace, text) in enumerate(pages, start=1)
    )
    return (
        f'<mediawiki xmlns="{EXPORT_NS}" version="0.10" xml:lang="en">\n'
        "  <siteinfo><sitename>Test Wiki</sitename></siteinfo>"
        f"{body}\n</mediawiki>\n"
    )


@pytest.fixture
def build_dump() -> DumpBuilder:
    """Return a helper rendering ``(title, namespace, text)`` tuples as a dump."""
    return _build_dump


@pytest.fixture
def sample_pages() -> list[PageSpec]:
    """Return a mix of content, talk, file and template pages."""
    return [
        ("Max Headroom", 0, "== Intro ==\n'''Max''' is a [[character]].\n"),
        ("Talk:Max Headroom", 1, "Discussion only."),
        ("File:Max.png", 6, "A picture."),
        ("Template:Stub", 10, "{{{1}}}"),
        ("Edison Carter", 0, "* reporter\n* hero\n[[Category:People]]"),
    ]


@pytest.fixture
def dump_file(tmp_path: Path, sample_pages: list[PageSpec]) -> Path:
    """Write ``sample_pages`` to an uncompressed dump file."""
    path = tmp_path / "dump.xml"
    path.write_text(_build_dump(sample_pages), encoding="utf-8")
    return path

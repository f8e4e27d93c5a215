"""Tests for streaming page records out of MediaWiki XML exports."""

from __future__ import annotations

import bz2
import gzip
import typing as typ

import pytest

from wikidump_html.dump_reader import DumpFormatError, Page, iter_pages, read_pages

if typ.TYPE_CHECKING:
    from pathlib import Path

    from tests.conftest import DumpBuilder


def test_iter_pages_reads_every_record(
    dump_file: Path, sample_pages: list[tuple[str, int, str]]
) -> None:
    pages = list(iter_pages(dump_file))
    assert [(page.title, page.namespace, page.text) for page in pages] == sample_pages
    assert all(page.model == "wikitext" for page in pages)
    assert all(page.format == "text/x-wiki" for page in pages)


def test_compressed_dumps_are_decompressed(
    tmp_path: Path, build_dump: DumpBuilder
) -> None:
    document = build_dump([("A", 0, "alpha")]).encode("utf-8")
    bz2_path = tmp_path / "dump.xml.bz2"
    bz2_path.write_bytes(bz2.compress(document))
    gz_path = tmp_path / "dump.xml.gz"
    gz_path.write_bytes(gzip.compress(document))
    expected = Page(
        title="A", namespace=0, text="alpha", format="text/x-wiki", model="wikitext"
    )
    for path in (bz2_path, gz_path):
        assert list(iter_pages(path)) == [expected], (
            f"unexpected pages read from {path.name}"
        )


def test_last_revision_wins(tmp_path: Path) -> None:
    path = tmp_path / "history.xml"
    path.write_text(
        """<mediawiki xmlns="http://www.mediawiki.org/xml/export-0.11/">
  <page>
    <title>A</title>
    <ns>0</ns>
    <revision><text>old</text></revision>
    <revision><text>new</text></revision>
  </page>
</mediawiki>
""",
        encoding="utf-8",
    )
    (page,) = iter_pages(path)
    assert page.text == "new"
    assert page.model is None


def test_page_without_revision_has_empty_text(tmp_path: Path) -> None:
    path = tmp_path / "bare.xml"
    path.write_text(
        "<mediawiki><page><title>A</title><ns>0</ns></page></mediawiki>",
        encoding="utf-8",
    )
    assert list(iter_pages(path)) == [Page(title="A", namespace=0, text="")]


def test_empty_text_element(tmp_path: Path) -> None:
    path = tmp_path / "empty.xml"
    path.write_text(
        "<mediawiki><page><title>A</title><ns>0</ns>"
        "<revision><text /></revision></page></mediawiki>",
        encoding="utf-8",
    )
    (page,) = iter_pages(path)
    assert page.text == ""


@pytest.mark.parametrize("namespace", ["", "<ns>main</ns>"])
def test_bad_namespace_raises(tmp_path: Path, namespace: str) -> None:
    path = tmp_path / "bad.xml"
    path.write_text(
        f"<mediawiki><page><title>A</title>{namespace}</page></mediawiki>",
        encoding="utf-8",
    )
    with pytest.raises(DumpFormatError, match="namespace"):
        list(iter_pages(path))


def test_missing_title_raises(tmp_path: Path) -> None:
    path = tmp_path / "untitled.xml"
    path.write_text("<mediawiki><page><ns>0</ns></page></mediawiki>", encoding="utf-8")
    with pytest.raises(DumpFormatError, match="title"):
        list(iter_pages(path))


def test_read_pages_concatenates_files_in_order(
    tmp_path: Path, build_dump: DumpBuilder
) -> None:
    first = tmp_path / "a.xml"
    first.write_text(build_dump([("One", 0, "1")]), encoding="utf-8")
    second = tmp_path / "b.xml"
    second.write_text(
        build_dump([("Two", 0, "2"), ("Three", 0, "3")]), encoding="utf-8"
    )
    titles = [page.title for page in read_pages([first, second])]
    assert titles == ["One", "Two", "Three"]

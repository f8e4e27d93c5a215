"""Unit tests for namespace classification.

The classifier is a deny-list: every listed meta or file namespace must be
excluded, and every other integer (including the main namespace and codes
adjacent to listed ones) must be treated as content.

Usage
-----
Run ``pytest tests/test_namespaces.py -v``.
"""

from __future__ import annotations

import pytest

from wikidump_html.namespaces import (
    NAMESPACE_CLASSES,
    NamespaceClass,
    classify,
    describe_exclusion,
    is_renderable,
)

META_CODES = [1, 2, 3, 8, 10, 14, 15, 501, 502, 1200, 1201, 1202, 2000]


@pytest.mark.parametrize("code", META_CODES)
def test_meta_namespaces(code: int) -> None:
    """Talk, user, template and similar namespaces are meta content."""
    assert classify(code) is NamespaceClass.META, f"expected {code} to be META"
    assert not is_renderable(code), f"expected {code} to be excluded"


def test_file_namespace() -> None:
    """The file namespace has its own class and is excluded."""
    assert classify(6) is NamespaceClass.FILE
    assert not is_renderable(6)


@pytest.mark.parametrize("code", [0, 4, 5, 7, 9, 500, 503, 1199, 1203, 1999, 2001])
def test_unlisted_namespaces_are_content(code: int) -> None:
    """Anything outside the table, including neighbours of listed codes, is content."""
    assert classify(code) is NamespaceClass.CONTENT, f"expected {code} to be CONTENT"
    assert is_renderable(code)


@pytest.mark.parametrize("code", [-1, -2, 10**9])
def test_out_of_range_codes_are_content(code: int) -> None:
    """Classification is total: odd integers still resolve to content."""
    assert classify(code) is NamespaceClass.CONTENT


def test_table_contains_only_excluded_classes() -> None:
    """Content is the default and never listed explicitly."""
    assert NamespaceClass.CONTENT not in set(NAMESPACE_CLASSES.values())
    assert len(NAMESPACE_CLASSES) == len(META_CODES) + 1


def test_describe_exclusion() -> None:
    """Only excluded classes carry an operator-facing reason."""
    assert describe_exclusion(NamespaceClass.CONTENT) is None
    assert "meta-content" in (describe_exclusion(NamespaceClass.META) or "")
    assert "file" in (describe_exclusion(NamespaceClass.FILE) or "")

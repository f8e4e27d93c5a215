"""Tests for the mwparserfromhell adapter and its rendered output.

Each test parses a short wikitext snippet, checks the node variants the
adapter produces, and renders the result so block regrouping (lists,
preformatted lines) and inline delimiters are covered end to end.

Usage
-----
Run ``pytest tests/test_wikitext_parser.py -v``.
"""

from __future__ import annotations

from wikidump_html.wikitext import parse_wikitext, render_nodes
from wikidump_html.wikitext.nodes import (
    Bold,
    Category,
    Heading,
    HorizontalDivider,
    Link,
    OrderedList,
    Preformatted,
    Tag,
    Template,
    UnorderedList,
)


def _render(text: str) -> str:
    return render_nodes(text, parse_wikitext(text).nodes)


def test_heading_and_bold_paragraph() -> None:
    text = "== Intro ==\nHello '''world'''\n"
    result = parse_wikitext(text)
    heading = result.nodes[0]
    assert isinstance(heading, Heading), f"expected Heading, got {heading!r}"
    assert heading.level == 2
    assert any(isinstance(node, Bold) for node in result.nodes)
    assert _render(text) == "<h4> Intro </h4>\nHello <b>world</b>\n"


def test_unordered_list_groups_consecutive_items() -> None:
    text = "* a\n* b\n"
    result = parse_wikitext(text)
    assert isinstance(result.nodes[0], UnorderedList)
    assert len(result.nodes[0].items) == 2
    assert _render(text) == "<ul><li>a</li><li>b</li></ul>\n"


def test_ordered_list() -> None:
    text = "# one\n# two"
    assert isinstance(parse_wikitext(text).nodes[0], OrderedList)
    assert _render(text) == "<ol><li>one</li><li>two</li></ol>"


def test_list_kinds_split_into_separate_lists() -> None:
    assert _render("* a\n# b") == "<ul><li>a</li></ul>\n<ol><li>b</li></ol>"


def test_list_followed_by_paragraph() -> None:
    assert _render("* a\nafter") == "<ul><li>a</li></ul>\nafter"


def test_nested_list_is_flattened_with_warning() -> None:
    result = parse_wikitext("** deep")
    assert _render("** deep") == "<ul><li>deep</li></ul>"
    assert any("nested" in warning.message for warning in result.warnings)


def test_definition_list_is_kept_verbatim_with_warning() -> None:
    result = parse_wikitext("; term")
    assert _render("; term") == "; term"
    assert len(result.warnings) == 1


def test_category_links_are_dropped() -> None:
    text = "Text[[Category:Foo]]"
    nodes = parse_wikitext(text).nodes
    categories = [node for node in nodes if isinstance(node, Category)]
    assert [category.name for category in categories] == ["Foo"]
    assert _render(text) == "Text"


def test_links_and_templates_are_copied_verbatim() -> None:
    text = "See [[Page|label]] {{stub}}"
    nodes = parse_wikitext(text).nodes
    assert any(isinstance(node, Link) and node.target == "Page" for node in nodes)
    assert any(isinstance(node, Template) and node.name == "stub" for node in nodes)
    assert _render(text) == text


def test_syntaxhighlight_contents_are_verbatim() -> None:
    text = '<syntaxhighlight lang="rust">let x = 1;</syntaxhighlight>'
    tag = parse_wikitext(text).nodes[0]
    assert isinstance(tag, Tag)
    assert tag.name == "syntaxhighlight"
    assert _render(text) == "<pre>let x = 1;</pre>"


def test_syntaxhighlight_keeps_wiki_markup_literal() -> None:
    text = "<syntaxhighlight>'''a''' [[b]]</syntaxhighlight>"
    assert _render(text) == "<pre>'''a''' [[b]]</pre>"


def test_horizontal_divider() -> None:
    text = "----\nafter"
    assert isinstance(parse_wikitext(text).nodes[0], HorizontalDivider)
    assert _render(text) == "<hr/>\nafter"


def test_space_indented_lines_become_preformatted() -> None:
    text = " a\n b\nnormal"
    assert isinstance(parse_wikitext(text).nodes[0], Preformatted)
    assert _render(text) == "<pre>a\nb</pre>\nnormal"


def test_blank_indented_line_is_not_preformatted() -> None:
    assert _render("a\n   \nb") == "a\n   \nb"


def test_italic() -> None:
    assert _render("''it''") == "<i>it</i>"


def test_bold_italic() -> None:
    assert _render("'''''both'''''") == "<b><i>both</i></b>"


def test_plain_text_has_no_warnings() -> None:
    result = parse_wikitext("just text")
    assert result.warnings == ()
    assert _render("just text") == "just text"


def test_empty_page() -> None:
    assert parse_wikitext("").nodes == ()
    assert _render("") == ""


def test_node_spans_stay_within_text() -> None:
    text = "== H ==\n* '''a''' [[b]]\n text\n{{t}}\n"
    for node in parse_wikitext(text).nodes:
        assert 0 <= node.start <= node.end <= len(text), f"bad span on {node!r}"

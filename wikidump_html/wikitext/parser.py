r"""Adapt ``mwparserfromhell`` parse trees into renderer nodes.

``mwparserfromhell`` reproduces its input exactly when a node is converted
back to text, so the character span of every node is the running sum of
``len(str(node))`` over its preceding siblings. This module walks the parse
tree with those offsets and maps each construct onto the variants in
:mod:`wikidump_html.wikitext.nodes`.

``mwparserfromhell`` leaves line-oriented structure implicit: list markers
are bare ``<li>`` tags and indented preformatted lines are plain text. The
top level of a page is therefore regrouped line by line into list and
preformatted blocks before inline conversion.

Example
-------
>>> from wikidump_html.wikitext.parser import parse_wikitext
>>> result = parse_wikitext("* a\n* b\n")
>>> type(result.nodes[0]).__name__
'UnorderedList'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import mwparserfromhell
from mwparserfromhell import nodes as mwnodes

from .nodes import (
    Bold,
    BoldItalic,
    Category,
    Comment,
    Heading,
    HorizontalDivider,
    Italic,
    Link,
    ListItem,
    Node,
    OrderedList,
    Other,
    Preformatted,
    Tag,
    Template,
    Text,
    UnorderedList,
)

if typ.TYPE_CHECKING:
    from mwparserfromhell.wikicode import Wikicode

CATEGORY_PREFIX = "category:"
LIST_MARKUP_TAGS = frozenset({"li", "dt", "dd"})
STYLE_DELIMITERS: dict[str, type[Node]] = {"b": Bold, "i": Italic}


@dc.dataclass(slots=True, frozen=True)
class ParseWarning:
    """Diagnostic about markup the node model cannot represent faithfully."""

    start: int
    end: int
    message: str


@dc.dataclass(slots=True, frozen=True)
class ParseResult:
    """Top-level nodes of a page together with any parse warnings."""

    nodes: tuple[Node, ...]
    warnings: tuple[ParseWarning, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class _Item:
    """A top-level parse node, or a slice of a text node when ``node`` is None."""

    node: mwnodes.Node | None
    start: int
    end: int


@dc.dataclass(slots=True)
class _Line:
    items: list[_Item] = dc.field(default_factory=list)
    newline: tuple[int, int] | None = None


def parse_wikitext(text: str) -> ParseResult:
    """Parse ``text`` into renderer nodes whose spans index into ``text``.

    Parameters
    ----------
    text : str
        Raw wikitext of one page.

    Returns
    -------
    ParseResult
        Top-level nodes in document order plus warnings for markup that was
        flattened or left verbatim.

    Raises
    ------
    mwparserfromhell.parser.ParserError
        If ``mwparserfromhell`` fails on the input.
    """
    builder = _TreeBuilder(text)
    nodes = builder.build(mwparserfromhell.parse(text, skip_style_tags=False))
    return ParseResult(nodes=tuple(nodes), warnings=tuple(builder.warnings))


class _TreeBuilder:
    def __init__(self, source: str) -> None:
        self.source = source
        self.warnings: list[ParseWarning] = []

    def build(self, wikicode: Wikicode) -> list[Node]:
        lines = self._split_lines(wikicode)
        kinds = [self._line_kind(line) for line in lines]
        result: list[Node] = []
        index = 0
        while index < len(lines):
            kind = kinds[index]
            if kind == "inline":
                result.extend(self._inline_line(lines[index]))
                index += 1
                continue
            run_end = index + 1
            while run_end < len(lines) and kinds[run_end] == kind:
                run_end += 1
            group = lines[index:run_end]
            if kind == "pre":
                result.append(self._preformatted(group))
            else:
                result.append(self._list(kind, group))
            if group[-1].newline is not None:
                result.append(Text(*group[-1].newline))
            index = run_end
        return result

    def _split_lines(self, wikicode: Wikicode) -> list[_Line]:
        """Split top-level nodes into lines, cutting text nodes at newlines."""
        lines = [_Line()]
        offset = 0
        for node in wikicode.nodes:
            length = len(str(node))
            if isinstance(node, mwnodes.Text):
                cursor = offset
                for position, chunk in enumerate(node.value.split("\n")):
                    if position:
                        lines[-1].newline = (cursor, cursor + 1)
                        lines.append(_Line())
                        cursor += 1
                    if chunk:
                        lines[-1].items.append(_Item(None, cursor, cursor + len(chunk)))
                    cursor += len(chunk)
            else:
                lines[-1].items.append(_Item(node, offset, offset + length))
            offset += length
        if not lines[-1].items and lines[-1].newline is None:
            lines.pop()
        return lines

    def _line_kind(self, line: _Line) -> str:
        if not line.items:
            return "inline"
        first = line.items[0]
        if first.node is not None and _is_list_markup(first.node):
            markup = first.node.wiki_markup
            if markup == "*":
                return "ul"
            if markup == "#":
                return "ol"
            self._warn(first.start, first.end, "definition list markup kept as text")
            return "inline"
        if first.node is None and self.source[first.start] == " ":
            body = self.source[first.start : line.items[-1].end]
            if body.strip():
                return "pre"
        return "inline"

    def _inline_line(self, line: _Line) -> list[Node]:
        converted = self._convert_items(line.items)
        if line.newline is not None:
            converted.append(Text(*line.newline))
        return converted

    def _preformatted(self, lines: list[_Line]) -> Preformatted:
        children: list[Node] = []
        for position, line in enumerate(lines):
            if position:
                previous = lines[position - 1].newline
                if previous is not None:
                    children.append(Text(*previous))
            first, *rest = line.items
            children.extend(
                self._convert_items([_Item(None, first.start + 1, first.end), *rest])
            )
        return Preformatted(
            lines[0].items[0].start, lines[-1].items[-1].end, children=tuple(children)
        )

    def _list(self, kind: str, lines: list[_Line]) -> OrderedList | UnorderedList:
        items: list[ListItem] = []
        for line in lines:
            depth = 0
            while depth < len(line.items) and _is_list_markup(line.items[depth].node):
                depth += 1
            if depth > 1:
                self._warn(
                    line.items[0].start,
                    line.items[depth - 1].end,
                    "nested list flattened to a single level",
                )
            body = self._strip_leading_space(line.items[depth:])
            items.append(
                ListItem(
                    line.items[0].start,
                    line.items[-1].end,
                    children=tuple(self._convert_items(body)),
                )
            )
        list_type = OrderedList if kind == "ol" else UnorderedList
        return list_type(items[0].start, items[-1].end, items=tuple(items))

    def _strip_leading_space(self, items: list[_Item]) -> list[_Item]:
        if not items or items[0].node is not None:
            return items
        first = items[0]
        text = self.source[first.start : first.end]
        skipped = len(text) - len(text.lstrip())
        return [_Item(None, first.start + skipped, first.end), *items[1:]]

    def _convert_items(self, items: list[_Item]) -> list[Node]:
        converted: list[Node] = []
        for item in items:
            if item.node is None:
                if item.end > item.start:
                    converted.append(Text(item.start, item.end))
            else:
                converted.extend(self._convert_node(item.node, item.start, item.end))
        return converted

    def _convert_code(self, wikicode: Wikicode, offset: int) -> list[Node]:
        converted: list[Node] = []
        for node in wikicode.nodes:
            end = offset + len(str(node))
            converted.extend(self._convert_node(node, offset, end))
            offset = end
        return converted

    def _convert_node(self, node: mwnodes.Node, start: int, end: int) -> list[Node]:
        match node:
            case mwnodes.Text():
                return [Text(start, end)] if end > start else []
            case mwnodes.Heading():
                children = self._convert_code(node.title, start + node.level)
                return [Heading(start, end, level=node.level, children=tuple(children))]
            case mwnodes.Tag():
                return self._convert_tag(node, start, end)
            case mwnodes.Wikilink():
                target = str(node.title).strip()
                if target.lower().startswith(CATEGORY_PREFIX):
                    name = target.split(":", 1)[1].strip()
                    return [Category(start, end, name=name)]
                return [Link(start, end, target=target)]
            case mwnodes.Template():
                return [Template(start, end, name=str(node.name).strip())]
            case mwnodes.Comment():
                return [Comment(start, end)]
            case _:
                return [Other(start, end)]

    def _convert_tag(self, node: mwnodes.Tag, start: int, end: int) -> list[Node]:
        name = str(node.tag).strip().lower()
        if node.wiki_markup:
            if name in STYLE_DELIMITERS and not node.self_closing:
                return self._convert_style(node, name, start, end)
            if name == "hr":
                return [HorizontalDivider(start, end)]
            return [Tag(start, end, name=name)]

        span = _contents_span(node, end)
        if name == "syntaxhighlight":
            if span is None:
                self._warn(start, end, "syntaxhighlight tag without contents")
                return [Tag(start, end, name=name)]
            return [Tag(start, end, name=name, children=(Text(*span),))]
        children = () if span is None else tuple(self._convert_code(node.contents, span[0]))
        return [Tag(start, end, name=name, children=children)]

    def _convert_style(
        self, node: mwnodes.Tag, name: str, start: int, end: int
    ) -> list[Node]:
        """Turn a style span into opening and closing delimiter nodes."""
        inner_start = start + len(node.wiki_markup)
        inner_end = inner_start + len(str(node.contents))
        contents = node.contents.nodes
        if len(contents) == 1 and _is_style(contents[0], exclude=name):
            nested = contents[0]
            nested_start = inner_start + len(nested.wiki_markup)
            nested_end = nested_start + len(str(nested.contents))
            return [
                BoldItalic(start, nested_start),
                *self._convert_code(nested.contents, nested_start),
                BoldItalic(nested_end, end),
            ]
        delimiter = STYLE_DELIMITERS[name]
        return [
            delimiter(start, inner_start),
            *self._convert_code(node.contents, inner_start),
            delimiter(inner_end, end),
        ]

    def _warn(self, start: int, end: int, message: str) -> None:
        self.warnings.append(ParseWarning(start, end, message))


def _is_list_markup(node: mwnodes.Node | None) -> bool:
    return (
        isinstance(node, mwnodes.Tag)
        and bool(node.wiki_markup)
        and str(node.tag).strip().lower() in LIST_MARKUP_TAGS
    )


def _is_style(node: mwnodes.Node, *, exclude: str) -> bool:
    """Return whether ``node`` is a bold/italic span other than ``exclude``."""
    if not isinstance(node, mwnodes.Tag) or not node.wiki_markup:
        return False
    name = str(node.tag).strip().lower()
    return name in STYLE_DELIMITERS and name != exclude and not node.self_closing


def _contents_span(node: mwnodes.Tag, end: int) -> tuple[int, int] | None:
    """Return the span of an HTML-style tag's contents, if it has any."""
    if node.self_closing or node.invalid or node.contents is None:
        return None
    contents_end = end - len(f"</{node.closing_tag}>")
    return contents_end - len(str(node.contents)), contents_end


__all__ = ["ParseResult", "ParseWarning", "parse_wikitext"]

"""Render a wikitext node tree into an HTML fragment.

The renderer walks the tree depth first and appends fragments to a single
output buffer. Inline styles are tracked with three independent toggles held
in one :class:`RenderState`, shared by every recursive call for the page:
each ``Bold``/``Italic``/``BoldItalic`` delimiter flips its flag and emits an
opening or closing tag accordingly. Nodes without bespoke handling are
reproduced by slicing their span out of the original page text.

Example
-------
>>> from wikidump_html.wikitext.nodes import Bold, Text
>>> from wikidump_html.wikitext.renderer import render_nodes
>>> source = "'''hi'''"
>>> render_nodes(source, [Bold(0, 3), Text(3, 5), Bold(5, 8)])
'<b>hi</b>'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .nodes import (
    Bold,
    BoldItalic,
    Category,
    Heading,
    HorizontalDivider,
    Italic,
    ListItem,
    Node,
    OrderedList,
    Preformatted,
    Tag,
    UnorderedList,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

HEADING_LEVEL_OFFSET = 2
SYNTAX_HIGHLIGHT_TAG = "syntaxhighlight"


class SourceSpanError(IndexError):
    """Raised when a node span does not address the page text."""


@dc.dataclass(slots=True)
class RenderState:
    """Open/closed flags for the three inline styles of one page render."""

    bold_open: bool = False
    bold_italic_open: bool = False
    italic_open: bool = False


class NodeTreeRenderer:
    """Render nodes parsed from ``source`` into HTML."""

    def __init__(self, source: str, state: RenderState | None = None) -> None:
        """Bind the renderer to a page's text and toggle state.

        Parameters
        ----------
        source : str
            Original, untruncated page text. Every node span is resolved
            against it.
        state : RenderState, optional
            Toggle state to mutate while rendering; a fresh state with every
            flag closed is used when omitted.
        """
        self.source = source
        self.state = state if state is not None else RenderState()

    def render(self, nodes: cabc.Iterable[Node]) -> str:
        """Return the HTML fragment for ``nodes``.

        Raises
        ------
        SourceSpanError
            If a node copied verbatim has a span outside the page text.
        """
        out: list[str] = []
        self._render_nodes(nodes, out)
        return "".join(out)

    def _render_nodes(self, nodes: cabc.Iterable[Node], out: list[str]) -> None:
        for node in nodes:
            self._render_node(node, out)

    def _render_node(self, node: Node, out: list[str]) -> None:  # noqa: C901
        state = self.state
        match node:
            case Preformatted(children=children):
                out.append("<pre>")
                self._render_nodes(children, out)
                out.append("</pre>")
            case Heading(level=level, children=children):
                tag = f"h{level + HEADING_LEVEL_OFFSET}"
                out.append(f"<{tag}>")
                self._render_nodes(children, out)
                out.append(f"</{tag}>")
            case HorizontalDivider():
                out.append("<hr/>")
            case Bold():
                state.bold_open = not state.bold_open
                out.append("<b>" if state.bold_open else "</b>")
            case BoldItalic():
                state.bold_italic_open = not state.bold_italic_open
                out.append("<b><i>" if state.bold_italic_open else "</i></b>")
            case Italic():
                state.italic_open = not state.italic_open
                out.append("<i>" if state.italic_open else "</i>")
            case Tag(name=name, children=children) if name == SYNTAX_HIGHLIGHT_TAG:
                for child in children:
                    out.append("<pre>")
                    out.append(self._slice(child))
                    out.append("</pre>")
            case OrderedList(items=items):
                self._render_list("ol", items, out)
            case UnorderedList(items=items):
                self._render_list("ul", items, out)
            case Category():
                pass
            case _:
                out.append(self._slice(node))

    def _render_list(
        self, tag: str, items: cabc.Iterable[ListItem], out: list[str]
    ) -> None:
        out.append(f"<{tag}>")
        for item in items:
            out.append("<li>")
            self._render_nodes(item.children, out)
            out.append("</li>")
        out.append(f"</{tag}>")

    def _slice(self, node: Node) -> str:
        """Return the page text covered by ``node``."""
        start, end = node.start, node.end
        if not 0 <= start <= end <= len(self.source):
            msg = (
                f"{type(node).__name__} span ({start}, {end}) is outside "
                f"the page text of length {len(self.source)}"
            )
            raise SourceSpanError(msg)
        return self.source[start:end]


def render_nodes(
    source: str,
    nodes: cabc.Iterable[Node],
    state: RenderState | None = None,
) -> str:
    """Render ``nodes`` against ``source`` with an optional shared state."""
    return NodeTreeRenderer(source, state).render(nodes)


__all__ = [
    "HEADING_LEVEL_OFFSET",
    "NodeTreeRenderer",
    "RenderState",
    "SourceSpanError",
    "render_nodes",
]

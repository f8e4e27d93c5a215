"""Parse wikitext into a node tree and render that tree as HTML."""

from .parser import ParseResult, ParseWarning, parse_wikitext
from .renderer import NodeTreeRenderer, RenderState, SourceSpanError, render_nodes

__all__ = [
    "NodeTreeRenderer",
    "ParseResult",
    "ParseWarning",
    "RenderState",
    "SourceSpanError",
    "parse_wikitext",
    "render_nodes",
]

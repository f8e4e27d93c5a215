"""Convert MediaWiki XML dumps into static HTML pages.

The package filters dump pages by namespace, parses their wikitext with
``mwparserfromhell`` and renders the resulting node tree into HTML.

Exports
-------
- ``app``: Cyclopts application behind ``wiki-dump-to-html``.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from wikidump_html import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]

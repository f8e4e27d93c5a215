"""Cyclopts CLI entrypoint for converting MediaWiki dumps into HTML.

The ``wiki-dump-to-html`` console script reads one or more XML export files,
keeps the pages that hold real content, and writes one HTML file per page
plus an index into the output directory.

Examples
--------
Convert a dump into the default ``wiki-dump-to-html-output`` directory:

>>> from wikidump_html.cli import app
>>> app(["dump.xml"])  # doctest: +SKIP

Write elsewhere and log every classification decision:

>>> app(["--verbose", "--output-dir", "site", "dump.xml.bz2"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import EXE_NAME
from .config import load_export_config
from .exporter import DumpExporter

LOG_FORMAT = "%(levelname)s: %(message)s"

app = App(
    name=EXE_NAME,
    help="Convert MediaWiki XML dumps into static HTML pages.",
    config=cyclopts.config.Env("WIKIDUMP_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(format=LOG_FORMAT)
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger(__package__ or "wikidump_html").setLevel(level)


@app.default
def convert(
    files: typ.Annotated[
        list[Path], Parameter(help="MediaWiki XML dump files (.xml, .bz2, .gz)")
    ],
    *,
    verbose: typ.Annotated[
        bool,
        Parameter(help="Log every page classification and parser warning"),
    ] = False,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="WIKIDUMP_OUTPUT_DIR"),
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to an export config YAML", env_var="WIKIDUMP_CONFIG"),
    ] = None,
    title: typ.Annotated[
        str | None, Parameter(help="Title used for the index and page headers")
    ] = None,
) -> None:
    """Convert dump files into HTML pages.

    Parameters
    ----------
    files : list[Path]
        Dump files to read, in order.
    verbose : bool, optional
        Enable debug logging of classification decisions and parser warnings.
    output_dir : Path or None, optional
        Output directory; overrides the config file value.
    config : Path or None, optional
        Export configuration YAML; defaults apply when omitted.
    title : str or None, optional
        Site title; overrides the config file value.

    Returns
    -------
    None
        Writes HTML files and prints the generated paths and any pages that
        failed to render.
    """
    export_config = load_export_config(config).with_overrides(
        output_dir=output_dir,
        site_title=title,
        verbose=True if verbose else None,
    )
    _configure_logging(verbose=export_config.verbose)

    report = DumpExporter(export_config).run(files)
    for path in report.written:
        print(f"wrote {_format_path(path)}")
    if report.index_path is not None:
        print(f"wrote {_format_path(report.index_path)}")
    for page_title, message in report.failures.items():
        print(f"failed {page_title}: {message}")


def main() -> None:
    """Invoke the Cyclopts application that powers the console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

"""High-level orchestration for converting wiki dumps into HTML files.

:class:`DumpExporter` reads every page of one or more MediaWiki XML dumps,
drops pages whose namespace or content model is not renderable, and writes
each remaining page to ``<identifier>.html`` through the ``page.jinja``
template, followed by an index linking them in dump order.

Pages are rendered independently with a fresh :class:`RenderState`. A page
whose parse tree cannot be rendered is logged and listed in the report
without stopping the rest of the export.

Example
-------
>>> from pathlib import Path
>>> from wikidump_html.config import ExportConfig
>>> from wikidump_html.exporter import DumpExporter
>>> exporter = DumpExporter(ExportConfig(output_dir=Path("out")))  # doctest: +SKIP
>>> report = exporter.run([Path("dump.xml")])  # doctest: +SKIP
>>> report.index_path  # doctest: +SKIP
PosixPath('out/index.html')
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup
from mwparserfromhell.parser import ParserError

from ._constants import PAGE_FILENAME_TEMPLATE
from .dump_reader import Page, read_pages
from .identifiers import assign_identifiers
from .namespaces import NamespaceClass, classify, describe_exclusion
from .wikitext import NodeTreeRenderer, RenderState, SourceSpanError, parse_wikitext

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import ExportConfig

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class ExportReport:
    """Outcome of one export run.

    Attributes
    ----------
    written : list[Path]
        Page files written, in dump order.
    index_path : Path | None
        Location of the generated index, once written.
    excluded : list[str]
        Titles skipped because of their namespace or content model.
    failures : dict[str, str]
        Titles whose rendering failed, mapped to the error message.
    """

    written: list[Path] = dc.field(default_factory=list)
    index_path: Path | None = None
    excluded: list[str] = dc.field(default_factory=list)
    failures: dict[str, str] = dc.field(default_factory=dict)


def confirm_output_dir(path: Path) -> Path:
    """Create ``path`` if needed and return it fully resolved.

    Raises
    ------
    NotADirectoryError
        If ``path`` exists but is not a directory.
    """
    logger.info("probing output dir: %s", path)
    if path.exists():
        if not path.is_dir():
            msg = f"{path} exists but is not a directory!"
            raise NotADirectoryError(msg)
    else:
        path.mkdir(parents=True)
    resolved = path.resolve()
    logger.info("    (%s)", resolved)
    return resolved


def resolve_inputs(paths: cabc.Iterable[Path]) -> list[Path]:
    """Return the canonical form of every input path.

    Raises
    ------
    FileNotFoundError
        If an input does not exist.
    """
    resolved: list[Path] = []
    for path in paths:
        logger.info("found input file: %s", path)
        canonical = path.resolve(strict=True)
        logger.info("    (%s)", canonical)
        resolved.append(canonical)
    return resolved


def render_page(page: Page) -> str:
    """Parse and render one page's text into an HTML fragment.

    Raises
    ------
    SourceSpanError
        If the parse tree addresses text outside the page.
    ParserError
        If ``mwparserfromhell`` rejects the page text.
    """
    result = parse_wikitext(page.text)
    for warning in result.warnings:
        logger.debug(
            "page %r: %s at (%d, %d)",
            page.title,
            warning.message,
            warning.start,
            warning.end,
        )
    return NodeTreeRenderer(page.text, RenderState()).render(result.nodes)


class DumpExporter:
    """Turn dump files into one HTML file per content page plus an index."""

    def __init__(
        self, config: ExportConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the exporter and its Jinja environment.

        Parameters
        ----------
        config : ExportConfig
            Output location, titles and content-model filter for the run.
        templates_dir : Path, optional
            Directory containing ``page.jinja`` and ``index.jinja``; defaults
            to the package templates.
        """
        self.config = config
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.page_template = self.env.get_template("page.jinja")
        self.index_template = self.env.get_template("index.jinja")

    def run(self, paths: cabc.Iterable[Path]) -> ExportReport:
        """Convert every dump in ``paths`` and write the HTML output.

        Returns
        -------
        ExportReport
            Written paths, skipped titles and per-page failures.

        Raises
        ------
        FileNotFoundError
            If an input file does not exist.
        IdentifierCollisionError
            If two admitted pages would be written to the same file.
        NotADirectoryError
            If the output path exists and is not a directory.
        """
        inputs = resolve_inputs(paths)
        report = ExportReport()
        pages = self.select_pages(read_pages(inputs), report)
        pairs = assign_identifiers(pages, reserved=(self.config.index_stem,))
        out_dir = confirm_output_dir(self.config.output_dir)
        logger.info("will output to %s", out_dir)

        generated_at = dt.datetime.now(dt.UTC)
        entries: list[dict[str, str]] = []
        for page, identifier in pairs:
            try:
                body = render_page(page)
            except (SourceSpanError, ParserError) as exc:
                logger.error("failed to render page %r: %s", page.title, exc)  # noqa: TRY400
                report.failures[page.title] = str(exc)
                continue
            filename = PAGE_FILENAME_TEMPLATE.format(identifier=identifier)
            html = self.page_template.render(
                site_title=self.config.site_title,
                title=page.title,
                body=Markup(body),  # noqa: S704
                index_filename=self.config.index_filename,
                generated_at=generated_at,
            )
            output_path = out_dir / filename
            output_path.write_text(_with_newline(html), encoding="utf-8")
            report.written.append(output_path)
            entries.append({"title": page.title, "href": filename})

        index_html = self.index_template.render(
            site_title=self.config.site_title,
            entries=entries,
            failures=sorted(report.failures),
            generated_at=generated_at,
        )
        index_path = out_dir / self.config.index_filename
        index_path.write_text(_with_newline(index_html), encoding="utf-8")
        report.index_path = index_path
        logger.info(
            "rendered %d pages, excluded %d, failed %d",
            len(report.written),
            len(report.excluded),
            len(report.failures),
        )
        return report

    def select_pages(
        self, pages: cabc.Iterable[Page], report: ExportReport
    ) -> list[Page]:
        """Return the pages worth rendering, recording the rest in ``report``."""
        selected: list[Page] = []
        for page in pages:
            page_class = classify(page.namespace)
            if page_class is not NamespaceClass.CONTENT:
                logger.debug(
                    "the page %r %s.", page.title, describe_exclusion(page_class)
                )
                logger.debug("%r", page)
                report.excluded.append(page.title)
                continue
            if not self.config.accepts_model(page.model):
                logger.debug(
                    "the page %r has content model %r, which is skipped.",
                    page.title,
                    page.model,
                )
                report.excluded.append(page.title)
                continue
            logger.debug(
                "the page %r seems to be a content article with length %d "
                "and namespace %d.",
                page.title,
                len(page.text),
                page.namespace,
            )
            selected.append(page)
        return selected


def _with_newline(html: str) -> str:
    return html if html.endswith("\n") else f"{html}\n"


__all__ = [
    "DumpExporter",
    "ExportReport",
    "confirm_output_dir",
    "render_page",
    "resolve_inputs",
]

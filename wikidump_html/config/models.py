"""Typed dataclasses describing export configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import DEFAULT_OUTPUT_DIRNAME, INDEX_FILENAME


class ExportConfigError(ValueError):
    """Raised when the export configuration is invalid or incomplete."""


@dc.dataclass(slots=True, frozen=True)
class ExportConfig:
    """Settings controlling how a dump is turned into HTML files.

    Attributes
    ----------
    output_dir : Path
        Directory receiving one HTML file per page plus the index.
    site_title : str
        Title shown on the index and in every page's ``<title>``.
    index_filename : str
        File name of the generated index page.
    content_models : tuple[str, ...]
        Revision content models that are parsed as wikitext. Pages declaring
        any other model are skipped.
    verbose : bool
        Emit per-page classification decisions and parser warnings.
    """

    output_dir: Path = dc.field(
        default_factory=lambda: Path.cwd() / DEFAULT_OUTPUT_DIRNAME
    )
    site_title: str = "Wiki dump"
    index_filename: str = INDEX_FILENAME
    content_models: tuple[str, ...] = ("wikitext",)
    verbose: bool = False

    @property
    def index_stem(self) -> str:
        """Return the index file name without its extension."""
        return Path(self.index_filename).stem

    def accepts_model(self, model: str | None) -> bool:
        """Return whether a page with content ``model`` should be rendered."""
        return model is None or model in self.content_models

    def with_overrides(
        self,
        *,
        output_dir: Path | None = None,
        site_title: str | None = None,
        verbose: bool | None = None,
    ) -> ExportConfig:
        """Return a copy with every non-``None`` override applied."""
        changes: dict[str, object] = {}
        if output_dir is not None:
            changes["output_dir"] = output_dir
        if site_title is not None:
            changes["site_title"] = site_title
        if verbose is not None:
            changes["verbose"] = verbose
        return dc.replace(self, **changes)


__all__ = ["ExportConfig", "ExportConfigError"]

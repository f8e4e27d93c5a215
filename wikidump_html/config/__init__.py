"""Load and validate export configuration for wiki dump conversions.

The configuration is an optional YAML file whose keys mirror the fields of
:class:`ExportConfig`. Command-line flags are layered on top with
:meth:`ExportConfig.with_overrides`.

Examples
--------
>>> from pathlib import Path
>>> from wikidump_html.config import load_export_config
>>> config = load_export_config(Path("wikidump.yaml"))  # doctest: +SKIP
>>> config.content_models  # doctest: +SKIP
('wikitext',)
"""

from .loader import load_export_config
from .models import ExportConfig, ExportConfigError

__all__ = ["ExportConfig", "ExportConfigError", "load_export_config"]

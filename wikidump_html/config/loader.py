"""Load export configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import ExportConfig, ExportConfigError


def load_export_config(path: Path | None) -> ExportConfig:
    """Load the YAML file describing export settings.

    Parameters
    ----------
    path : Path or None
        Filesystem path to the YAML configuration. ``None`` returns the
        defaults.

    Returns
    -------
    ExportConfig
        Parsed configuration with defaults filled in for missing keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ExportConfigError
        If a field has the wrong type or an unusable value.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from wikidump_html.config import load_export_config
    >>> load_export_config(None).site_title
    'Wiki dump'
    """
    if path is None:
        return ExportConfig()
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    defaults = ExportConfig()
    output_dir = defaults.output_dir
    if raw.get("output_dir"):
        output_dir = _resolve_output_dir(raw["output_dir"], path)
    index_filename = raw.get("index_filename", defaults.index_filename)
    content_models = raw.get("content_models", list(defaults.content_models))
    return ExportConfig(
        output_dir=output_dir,
        site_title=_string(raw, "site_title", defaults.site_title),
        index_filename=_index_filename(index_filename),
        content_models=_content_models(content_models),
        verbose=_flag(raw, "verbose", defaults.verbose),
    )


def _resolve_output_dir(value: object, config_path: Path) -> Path:
    """Resolve relative output paths against the config file's directory."""
    output_dir = Path(str(value))
    if output_dir.is_absolute():
        return output_dir
    return config_path.parent / output_dir


def _string(raw: typ.Mapping[str, typ.Any], key: str, default: str) -> str:
    value = raw.get(key, default)
    if not isinstance(value, str) or not value.strip():
        msg = f"'{key}' must be a non-empty string."
        raise ExportConfigError(msg)
    return value.strip()


def _flag(raw: typ.Mapping[str, typ.Any], key: str, default: bool) -> bool:  # noqa: FBT001
    value = raw.get(key, default)
    if not isinstance(value, bool):
        msg = f"'{key}' must be true or false."
        raise ExportConfigError(msg)
    return value


def _index_filename(value: object) -> str:
    text = str(value).strip() if value is not None else ""
    if not text.endswith(".html") or "/" in text or text == ".html":
        msg = f"'index_filename' must be a plain '.html' file name, got {value!r}."
        raise ExportConfigError(msg)
    return text


def _content_models(value: object) -> tuple[str, ...]:
    match value:
        case str() as single:
            models = [single]
        case list() | tuple():
            models = [str(item).strip() for item in value]
        case _:
            msg = "'content_models' must be a string or a list of strings."
            raise ExportConfigError(msg)
    models = [model for model in models if model]
    if not models:
        msg = "'content_models' must name at least one content model."
        raise ExportConfigError(msg)
    return tuple(models)


__all__ = ["load_export_config"]

"""Load the site configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import Config, PageEntry, SiteConfig, SiteConfigError

_CONFIG_FIELDS = {field.name: field for field in dc.fields(Config)}


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML file describing directories, globals, and pages.

    Parameters
    ----------
    path : Path
        Filesystem path to the site configuration (for example,
        ``unreact.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for omitted keys.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    TypeError
        If the top-level YAML value is not a mapping.
    SiteConfigError
        If a section is malformed.
    YAMLError
        If the YAML content cannot be parsed.

    Examples
    --------
    >>> site = load_site_config(Path("unreact.yaml"))  # doctest: +SKIP
    >>> site.config.build  # doctest: +SKIP
    'build'
    """
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

    url = raw.get("url")
    if not isinstance(url, str) or not url.strip():
        msg = "Site config must define a non-empty 'url'."
        raise SiteConfigError(msg)

    return SiteConfig(
        url=url.strip().rstrip("/"),
        config=_build_config(raw.get("config") or {}),
        globals=raw.get("globals"),
        pages=[
            _build_page_entry(index, payload)
            for index, payload in enumerate(raw.get("pages") or [])
        ],
    )


def _build_config(payload: typ.Any) -> Config:
    """Build a Config from the ``config`` mapping, rejecting unknown keys."""
    if not isinstance(payload, dict):
        msg = "'config' must be a mapping."
        raise SiteConfigError(msg)
    unknown = sorted(set(payload) - set(_CONFIG_FIELDS))
    if unknown:
        msg = f"Unknown config option(s): {', '.join(unknown)}."
        raise SiteConfigError(msg)
    values: dict[str, typ.Any] = {}
    for key, value in payload.items():
        expected = bool if _CONFIG_FIELDS[key].type == "bool" else str
        if not isinstance(value, expected):
            msg = f"Config option '{key}' must be a {expected.__name__}."
            raise SiteConfigError(msg)
        values[key] = value
    return Config(**values)


def _build_page_entry(index: int, payload: typ.Any) -> PageEntry:
    """Build a PageEntry, requiring a path and one of template/content."""
    match payload:
        case {"path": str(path), "template": str(template), **rest} if (
            "content" not in rest
        ):
            return PageEntry(path=path, template=template, data=rest.get("data"))
        case {"path": str(path), "content": str(content), **rest} if (
            "template" not in rest
        ):
            return PageEntry(path=path, content=content)
        case _:
            msg = (
                f"Page #{index + 1} must define 'path' and exactly one of "
                "'template' or 'content'."
            )
            raise SiteConfigError(msg)


__all__ = ["load_site_config"]

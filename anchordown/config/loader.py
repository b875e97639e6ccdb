"""Load renderer configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import _normalize_headings, _optional_str, _require_bool, _string_mapping
from .models import RendererConfig

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_renderer_config(path: Path) -> RendererConfig:
    """Load the YAML file describing how documents are rendered.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file.

    Returns
    -------
    RendererConfig
        Validated configuration. Keys missing from the file keep their
        defaults; media types listed in the file extend the defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    RendererConfigError
        If a value has the wrong shape or fails validation.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from anchordown.config import load_renderer_config
    >>> config = load_renderer_config(Path("anchordown.yaml"))  # doctest: +SKIP
    >>> config.heading_tags  # doctest: +SKIP
    ('h2', 'h3')
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
    return build_renderer_config(loaded)


def build_renderer_config(payload: typ.Mapping[str, typ.Any]) -> RendererConfig:
    """Build and validate a :class:`RendererConfig` from a parsed mapping."""
    base = RendererConfig()
    headings = _normalize_headings(payload.get("headings"))
    media_types = dict(base.media_types)
    media_types.update(
        {kind.lower(): mime for kind, mime in _string_mapping(
            payload.get("media_types"), "media_types"
        ).items()}
    )

    config = RendererConfig(
        host_link=_optional_str(payload, "host_link", base.host_link).rstrip("/"),
        table_of_contents=_require_bool(
            payload, "table_of_contents", base.table_of_contents
        ),
        heading_tags=base.heading_tags if headings is None else headings,
        id_prefix=_optional_str(payload, "id_prefix", base.id_prefix),
        heading_anchor=_require_bool(payload, "heading_anchor", base.heading_anchor),
        responsive_table=_require_bool(
            payload, "responsive_table", base.responsive_table
        ),
        media_types=media_types,
        link_attributes=_string_mapping(
            payload.get("link_attributes"), "link_attributes"
        ),
        safe_mode=_require_bool(payload, "safe_mode", base.safe_mode),
        markup_escaped=_require_bool(payload, "markup_escaped", base.markup_escaped),
    )
    config.validate()
    return config


__all__ = ["build_renderer_config", "load_renderer_config"]

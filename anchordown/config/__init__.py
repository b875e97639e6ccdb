"""Load and validate renderer configuration for anchordown.

This subpackage holds the :class:`RendererConfig` dataclass with its chaining
setters, and :func:`load_renderer_config`, which reads a YAML file, applies
defaults for missing keys, and validates the result before any document is
rendered.

Examples
--------
>>> from anchordown.config import RendererConfig
>>> config = RendererConfig().set_link("https://example.com").set_id_prefix("doc-")
>>> config.id_prefix
'doc-'
"""

from .loader import build_renderer_config, load_renderer_config
from .models import RendererConfig, RendererConfigError

__all__ = [
    "RendererConfig",
    "RendererConfigError",
    "build_renderer_config",
    "load_renderer_config",
]

"""Markdown rendering with heading anchors, media players, and link rules.

anchordown renders Python-Markdown documents through an extension renderer
that injects heading ids and a table of contents, embeds audio/video players
written as ``{description}(kind)(path)``, resolves relative links against a
host, hardens external links, and optionally wraps tables for responsive
layouts.

Exports
-------
- ``render_markdown``: one-shot Markdown to ``RenderResult`` conversion.
- ``HtmlContentRenderer``: reusable document renderer.
- ``ExtensionRenderer``: element-level renderer for hand-built trees.
- ``RendererConfig``: renderer settings.
- ``app`` / ``main``: the Cyclopts CLI.

Examples
--------
>>> from anchordown import RendererConfig, render_markdown
>>> result = render_markdown("## Intro", RendererConfig(table_of_contents=True))
>>> [entry.slug for entry in result.toc]
['intro']
"""

from __future__ import annotations

from .cli import app, main
from .config import RendererConfig, RendererConfigError, load_renderer_config
from .elements import (
    ContainerElement,
    ElementError,
    HandlerElement,
    RawHtmlElement,
    TextElement,
    VoidElement,
    mark_heading,
)
from .renderer import (
    AnchordownExtension,
    DefaultRenderer,
    ExtensionRenderer,
    HtmlContentRenderer,
    RenderResult,
    render_markdown,
)
from .slugs import slugify
from .toc import TableOfContents, TocEntry

__all__ = [
    "AnchordownExtension",
    "ContainerElement",
    "DefaultRenderer",
    "ElementError",
    "ExtensionRenderer",
    "HandlerElement",
    "HtmlContentRenderer",
    "RawHtmlElement",
    "RenderResult",
    "RendererConfig",
    "RendererConfigError",
    "TableOfContents",
    "TextElement",
    "TocEntry",
    "VoidElement",
    "app",
    "load_renderer_config",
    "main",
    "mark_heading",
    "render_markdown",
    "slugify",
]

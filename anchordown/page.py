"""Standalone HTML page rendering for converted documents.

This module wraps a rendered document body in a complete HTML page: a title,
the Pygments stylesheet for highlighted code, and a navigation list built
from the document's table of contents. The main entry point is
:class:`DocumentPageBuilder`, which loads ``document.jinja`` from the package
templates and renders it with autoescaping enabled; the body HTML is inserted
as-is.

>>> from anchordown.renderer import RenderResult
>>> builder = DocumentPageBuilder()  # doctest: +SKIP
>>> builder.render(RenderResult(html="<p>Hi</p>"), title="Hello")  # doctest: +SKIP
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

if typ.TYPE_CHECKING:
    from anchordown.renderer import RenderResult


class DocumentPageBuilder:
    """Render a converted document into a complete HTML page."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``anchordown/templates``.
        """
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("document.jinja")

    def render(self, result: RenderResult, *, title: str, stylesheet: str = "") -> str:
        """Return the page HTML for ``result``, ending with a newline."""
        context = {
            "title": title,
            "body": result.html,
            "toc": result.toc,
            "stylesheet": stylesheet,
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def write(
        self, result: RenderResult, output_path: Path, *, title: str, stylesheet: str = ""
    ) -> Path:
        """Render ``result`` and write it to ``output_path`` as UTF-8."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            self.render(result, title=title, stylesheet=stylesheet), encoding="utf-8"
        )
        return output_path


__all__ = ["DocumentPageBuilder"]

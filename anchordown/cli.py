"""Cyclopts CLI entrypoint for rendering Markdown documents with anchordown.

The ``anchordown`` console script renders a Markdown file to HTML with heading
anchors, media players, and link rewriting applied, and can print the
document's table of contents as JSON. Settings come from an optional YAML
file (see :func:`anchordown.config.load_renderer_config`).

Examples
--------
Render a document into a standalone page:

>>> from anchordown.cli import app
>>> app(
...     ["render", "guide.md", "--config", "anchordown.yaml",
...      "--output", "public/guide.html", "--standalone"]
... )  # doctest: +SKIP

Print the table of contents:

>>> app(["toc", "guide.md", "--config", "anchordown.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from cyclopts import App, Parameter

from .config import RendererConfig, load_renderer_config
from .page import DocumentPageBuilder
from .renderer import HtmlContentRenderer

app = App(name="anchordown", help="Render Markdown with anchors, media, and link rules.")


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(config: Path | None) -> RendererConfig:
    """Return the configuration stored at ``config`` or the defaults."""
    if config is None:
        return RendererConfig()
    return load_renderer_config(config)


@app.command(help="Render a Markdown file to HTML.")
def render(
    source: typ.Annotated[Path, Parameter(help="Markdown file to render")],
    *,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to renderer config", env_var="ANCHORDOWN_CONFIG"),
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Write HTML here instead of stdout")
    ] = None,
    standalone: typ.Annotated[
        bool, Parameter(help="Wrap the body in a complete HTML page")
    ] = False,
    title: typ.Annotated[
        str | None, Parameter(help="Page title for standalone output")
    ] = None,
    pygments_style: typ.Annotated[
        str, Parameter(help="Pygments style for highlighted code")
    ] = "monokai",
) -> None:
    """Render ``source`` and write or print the resulting HTML.

    Parameters
    ----------
    source : Path
        Markdown document to render.
    config : Path or None, optional
        YAML renderer configuration (overridable via ``ANCHORDOWN_CONFIG``);
        defaults apply when omitted.
    output : Path or None, optional
        Destination file; the HTML is printed to stdout when omitted.
    standalone : bool, optional
        Produce a full HTML page with a table-of-contents navigation.
    title : str or None, optional
        Title of the standalone page; defaults to the source file stem.
    pygments_style : str, optional
        Pygments style used for code blocks and the page stylesheet.

    Raises
    ------
    FileNotFoundError
        If ``source`` or ``config`` does not exist.
    RendererConfigError
        If the configuration is invalid.
    """
    renderer = HtmlContentRenderer(_load_config(config), pygments_style=pygments_style)
    result = renderer.convert(source.read_text(encoding="utf-8"))

    page_title = title or source.stem
    if standalone and output is not None:
        DocumentPageBuilder().write(
            result, output, title=page_title, stylesheet=renderer.stylesheet
        )
        print(f"wrote {_format_path(output)}")
        return

    if standalone:
        html = DocumentPageBuilder().render(
            result, title=page_title, stylesheet=renderer.stylesheet
        )
    else:
        html = result.html + "\n"

    if output is None:
        print(html, end="")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(help="Print the table of contents of a Markdown file as JSON.")
def toc(
    source: typ.Annotated[Path, Parameter(help="Markdown file to inspect")],
    *,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to renderer config", env_var="ANCHORDOWN_CONFIG"),
    ] = None,
) -> None:
    """Print ``[{"slug": ..., "text": ...}]`` for the eligible headings of ``source``.

    The table of contents is always enabled for this command, regardless of
    the configuration file.
    """
    settings = _load_config(config).set_table_of_contents(True)
    result = HtmlContentRenderer(settings).convert(source.read_text(encoding="utf-8"))
    print(json.dumps(result.toc_items(), indent=2, ensure_ascii=False))


def main() -> None:
    """Invoke the Cyclopts application that powers the ``anchordown`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

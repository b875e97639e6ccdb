"""Render Markdown documents into HTML with the anchordown extension enabled."""

from __future__ import annotations

import typing as typ

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from anchordown.config import RendererConfig

from .markdown_extension import AnchordownExtension
from .models import RenderResult

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension

    from anchordown.toc import TableOfContents


class HtmlContentRenderer:
    """Render Markdown with highlighted code, tables, and anchordown rules."""

    def __init__(
        self,
        config: RendererConfig | None = None,
        *,
        pygments_style: str = "monokai",
        extra_extensions: typ.Sequence[Extension | str] = (),
    ) -> None:
        """Initialize a renderer with its configuration and Markdown instance.

        Parameters
        ----------
        config : RendererConfig, optional
            Extension settings; defaults to ``RendererConfig()``.
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        extra_extensions : Sequence[Extension | str], optional
            Additional Markdown extensions loaded after the built-in ones.

        Raises
        ------
        RendererConfigError
            If ``config`` fails validation.
        """
        self.config = config or RendererConfig()
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self.extension = AnchordownExtension(self.config)
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "tables",
            "sane_lists",
            self.extension,
            *extra_extensions,
        ]
        self._md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": pygments_style,
                }
            },
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    @property
    def table_of_contents(self) -> TableOfContents:
        """Return the accumulator filled by the most recent conversion."""
        renderer = self.extension.renderer
        if renderer is None:  # pragma: no cover - set during Markdown init
            msg = "Markdown instance was not initialised with anchordown."
            raise RuntimeError(msg)
        return renderer.toc

    def reset(self) -> None:
        """Clear parser state and the table of contents."""
        self._md.reset()

    def convert(self, text: str) -> RenderResult:
        """Render ``text`` as a fresh document.

        Parameters
        ----------
        text : str
            Markdown source.

        Returns
        -------
        RenderResult
            HTML body and the table of contents gathered while rendering it.
        """
        self.reset()
        if not text.strip():
            return RenderResult(html="")
        html = self._md.convert(text)
        return RenderResult(html=html, toc=self.table_of_contents.entries())


def render_markdown(text: str, config: RendererConfig | None = None) -> RenderResult:
    """Render ``text`` with a one-off :class:`HtmlContentRenderer`."""
    return HtmlContentRenderer(config).convert(text)


__all__ = ["HtmlContentRenderer", "render_markdown"]

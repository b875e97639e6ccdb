"""Python-Markdown extension wiring the anchordown renderer into ``markdown``.

Insert :class:`AnchordownExtension` into a ``markdown.Markdown`` instance to
enable the media block syntax, mark headings as anchor candidates, and
serialize the final tree through :class:`ExtensionRenderer` instead of the
stock serializer. The table of contents of the last converted document is
available from ``extension.renderer.toc``; ``md.reset()`` clears it.

Example
-------
>>> import markdown
>>> from anchordown.config import RendererConfig
>>> extension = AnchordownExtension(RendererConfig(table_of_contents=True))
>>> md = markdown.Markdown(extensions=[extension])
>>> md.convert("## Setup")
'<h2 id="setup">Setup<a class="anchor-link" href="#setup" title="Permalink to this headline"></a></h2>'
>>> [entry.slug for entry in extension.renderer.toc]
['setup']
"""

from __future__ import annotations

import html
import typing as typ

from markdown.extensions import Extension
from markdown.extensions.toc import run_postprocessors, strip_tags
from markdown.treeprocessors import Treeprocessor

from anchordown.config import RendererConfig

from .extension import ExtensionRenderer
from .headings import install_heading_processors
from .media import MediaBlockProcessor
from .tree import from_etree

if typ.TYPE_CHECKING:
    import xml.etree.ElementTree as etree  # noqa: N813

    from markdown import Markdown

MEDIA_PROCESSOR_PRIORITY = 75


class AnchordownExtension(Extension):
    """Register anchordown's block processors and serializer on a Markdown instance."""

    def __init__(self, config: RendererConfig | None = None) -> None:
        super().__init__()
        self.renderer_config = config or RendererConfig()
        self.renderer_config.validate()
        self.renderer: ExtensionRenderer | None = None

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Install the media processor, heading wrappers, and serializer hook."""
        md.registerExtension(self)
        self.md = md
        self.renderer = ExtensionRenderer(
            self.renderer_config, text_resolver=self._plain_text
        )
        md.parser.blockprocessors.register(
            MediaBlockProcessor(md.parser, self.renderer_config),
            "anchordown_media",
            MEDIA_PROCESSOR_PRIORITY,
        )
        install_heading_processors(md)
        if self.renderer_config.markup_escaped:
            md.preprocessors.deregister("html_block", strict=False)
            md.inlinePatterns.deregister("html", strict=False)
        # Runs last; the serializer is read after every treeprocessor.
        md.treeprocessors.register(SerializerTreeprocessor(md, self), "anchordown_serializer", -10)

    def reset(self) -> None:
        """Clear the table of contents when the Markdown instance is reset."""
        if self.renderer is not None:
            self.renderer.reset()

    def serialize(self, root: etree.Element) -> str:
        """Render the finished tree with the extension renderer."""
        if self.renderer is None:
            msg = "AnchordownExtension.serialize called before extendMarkdown."
            raise RuntimeError(msg)
        return self.renderer.render(from_etree(root))

    def _plain_text(self, text: str) -> str:
        """Reduce heading text, including stashed HTML, to plain text."""
        return html.unescape(strip_tags(run_postprocessors(text, self.md)))


class SerializerTreeprocessor(Treeprocessor):
    """Point the Markdown instance at the anchordown serializer."""

    def __init__(self, md: Markdown, extension: AnchordownExtension) -> None:
        super().__init__(md)
        self.extension = extension

    def run(self, root: etree.Element) -> None:  # pragma: no cover - Markdown API
        """Install the serializer; ``Markdown.set_output_format`` resets it at init."""
        self.md.serializer = self.extension.serialize


def makeExtension(**kwargs: typ.Any) -> AnchordownExtension:  # noqa: N802
    """Create the extension from keyword settings, as ``markdown`` expects."""
    return AnchordownExtension(RendererConfig(**kwargs))


__all__ = ["AnchordownExtension", "SerializerTreeprocessor", "makeExtension"]

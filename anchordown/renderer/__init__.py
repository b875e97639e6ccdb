"""Element serializers, Markdown integration, and the document renderer."""

from .content import HtmlContentRenderer, render_markdown
from .default import DefaultRenderer, ElementRenderer
from .extension import ExtensionRenderer
from .headings import HeadingBlockProcessor
from .markdown_extension import AnchordownExtension
from .media import BlockContext, MediaBlockProcessor, recognize_media
from .models import RenderResult
from .tree import from_etree

__all__ = [
    "AnchordownExtension",
    "BlockContext",
    "DefaultRenderer",
    "ElementRenderer",
    "ExtensionRenderer",
    "HeadingBlockProcessor",
    "HtmlContentRenderer",
    "MediaBlockProcessor",
    "RenderResult",
    "from_etree",
    "recognize_media",
    "render_markdown",
]

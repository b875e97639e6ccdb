"""Mark heading blocks so the extension renderer can give them anchor ids.

Python-Markdown knows which blocks are headings; only anchordown knows that
headings should carry generated ids. :class:`HeadingBlockProcessor` wraps the
parser's own heading processors, delegates the parsing to them unchanged, and
tags every heading element they produce with the id marker attribute. The
tree adapter later lifts the marker into ``Element.id_attribute``.
"""

from __future__ import annotations

import typing as typ

from markdown.blockprocessors import BlockProcessor

from anchordown._constants import DEFAULT_ID_ATTRIBUTE, HEADING_ID_MARKER, HEADING_TAGS

if typ.TYPE_CHECKING:
    import xml.etree.ElementTree as etree  # noqa: N813

    from markdown import Markdown
    from markdown.blockparser import BlockParser

HEADING_PROCESSORS: tuple[tuple[str, int], ...] = (
    ("hashheader", 70),
    ("setextheader", 60),
)


class HeadingBlockProcessor(BlockProcessor):
    """Delegate to a heading processor and mark the headings it creates."""

    def __init__(
        self,
        parser: BlockParser,
        delegate: BlockProcessor,
        *,
        id_attribute: str = DEFAULT_ID_ATTRIBUTE,
    ) -> None:
        super().__init__(parser)
        self.delegate = delegate
        self.id_attribute = id_attribute

    def test(self, parent: etree.Element, block: str) -> bool:
        return self.delegate.test(parent, block)

    def run(self, parent: etree.Element, blocks: list[str]) -> bool | None:
        """Run the wrapped processor, then mark the headings it appended."""
        existing = len(parent)
        result = self.delegate.run(parent, blocks)
        for child in parent[existing:]:
            if child.tag in HEADING_TAGS:
                child.set(HEADING_ID_MARKER, self.id_attribute)
        return result


def install_heading_processors(md: Markdown) -> None:
    """Replace the registered heading processors with marking wrappers."""
    registry = md.parser.blockprocessors
    for name, priority in HEADING_PROCESSORS:
        if name not in registry:
            continue
        delegate = registry[name]
        if isinstance(delegate, HeadingBlockProcessor):
            continue
        registry.register(HeadingBlockProcessor(md.parser, delegate), name, priority)


__all__ = ["HEADING_PROCESSORS", "HeadingBlockProcessor", "install_heading_processors"]

"""Shared dataclasses returned by the rendering pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from anchordown.toc import TocEntry


@dc.dataclass(slots=True)
class RenderResult:
    """HTML and table of contents produced for one document.

    Attributes
    ----------
    html : str
        Rendered document body.
    toc : list[TocEntry]
        Table-of-contents entries in document order; empty when the table of
        contents is disabled.
    """

    html: str
    toc: list[TocEntry] = dc.field(default_factory=list)

    def toc_items(self) -> list[dict[str, str]]:
        """Return the table of contents as JSON-ready dictionaries."""
        return [entry.to_dict() for entry in self.toc]


__all__ = ["RenderResult"]

"""Table-of-contents accumulator filled while headings are rendered.

The accumulator is a mapping from slug to display text. Entries keep the
document order of the first heading that produced each slug; a later heading
with the same slug replaces the text but keeps the position, while the markup
already emitted for the earlier heading keeps its (identical) id.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from anchordown._constants import DEFAULT_TOC_HEADINGS
from anchordown.slugs import slugify

if typ.TYPE_CHECKING:
    from anchordown.config import RendererConfig


@dc.dataclass(frozen=True, slots=True)
class TocEntry:
    """A single table-of-contents link.

    Attributes
    ----------
    slug : str
        Anchor id emitted on the heading, including the configured prefix.
    text : str
        Heading text shown in the table of contents.
    """

    slug: str
    text: str

    def to_dict(self) -> dict[str, str]:
        """Serialize for JSON output."""
        return {"slug": self.slug, "text": self.text}


class TableOfContents:
    """Record eligible headings and hand out their anchor slugs."""

    def __init__(
        self,
        *,
        enabled: bool = False,
        heading_tags: cabc.Iterable[str] = DEFAULT_TOC_HEADINGS,
        id_prefix: str = "",
    ) -> None:
        self.enabled = enabled
        self.heading_tags = frozenset(heading_tags)
        self.id_prefix = id_prefix
        self._entries: dict[str, str] = {}

    @classmethod
    def from_config(cls, config: RendererConfig) -> TableOfContents:
        """Build an empty accumulator using the ToC settings in ``config``."""
        return cls(
            enabled=config.table_of_contents,
            heading_tags=config.heading_tags,
            id_prefix=config.id_prefix,
        )

    def record(self, tag: str, text: str, *, marked: bool = True) -> str | None:
        """Store ``text`` for an eligible heading and return its slug.

        Parameters
        ----------
        tag : str
            Tag name of the rendered element.
        text : str
            Plain heading text used for both the slug and the display text.
        marked : bool, optional
            Whether the element carries the heading id marker.

        Returns
        -------
        str or None
            ``id_prefix + slugify(text)``, or ``None`` when the table of
            contents is disabled, ``tag`` is not an eligible heading, or the
            element is not marked.
        """
        if not (self.enabled and marked and tag in self.heading_tags):
            return None
        slug = f"{self.id_prefix}{slugify(text)}"
        self._entries[slug] = text
        return slug

    def entries(self) -> list[TocEntry]:
        """Return the recorded entries in document order."""
        return [TocEntry(slug, text) for slug, text in self._entries.items()]

    def as_dict(self) -> dict[str, str]:
        """Return a ``slug -> text`` copy of the recorded entries."""
        return dict(self._entries)

    def reset(self) -> None:
        """Forget every recorded entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> cabc.Iterator[TocEntry]:
        return iter(self.entries())


__all__ = ["TableOfContents", "TocEntry"]

r"""Recognize ``{description}(kind)(path)`` lines and emit media players.

A media line on its own produces a ``<figure class="media-player">`` holding
an ``<audio>`` or ``<video>`` element (``video`` is chosen when the kind is
``video``, case-insensitively), a ``<source>`` pointing at the path resolved
against the host link, a fallback sentence with a download link, and a
caption made of the description and the kind.

:class:`MediaBlockProcessor` hooks the recognizer into Python-Markdown's block
parser: it claims blocks whose first line is a media line, stashes the
fragment so it reaches the output unchanged, and returns the remaining lines
to the parser.

Example
-------
>>> html = recognize_media(
...     "{My Song}(audio)(tracks/song.mp3)",
...     None,
...     host_link="https://cdn.example.com",
...     media_types={"audio": "audio/ogg; codecs=opus"},
... )
>>> '<audio controls id="song-mp3">' in html
True
"""

from __future__ import annotations

import dataclasses as dc
import posixpath
import re
import typing as typ
import xml.etree.ElementTree as etree  # noqa: N813

from markdown.blockprocessors import BlockProcessor

from anchordown.escaping import escape, is_absolute_url
from anchordown.slugs import slugify

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from markdown.blockparser import BlockParser

    from anchordown.config import RendererConfig

MEDIA_PATTERN = re.compile(r"^(\s*)\{(.+?)\}\((.+?)\)\((\S+?)\)$")


@dc.dataclass(frozen=True, slots=True)
class BlockContext:
    """State of the block that is open when a line is examined.

    Attributes
    ----------
    type : str or None
        Block type name; ``None`` for a plain paragraph.
    interrupted : bool
        Whether a blank line separated the open block from this line.
    """

    type: str | None = None
    interrupted: bool = False


def resolve_media_link(host_link: str, path: str) -> str:
    """Return the media URL for ``path`` relative to ``host_link``."""
    if not host_link or is_absolute_url(path):
        return path
    return f"{host_link.rstrip('/')}/{path.lstrip('/')}"


def recognize_media(
    line: str,
    context: BlockContext | None,
    *,
    host_link: str,
    media_types: cabc.Mapping[str, str],
) -> str | None:
    """Return the player markup for a media line, or ``None`` when it does not match.

    Parameters
    ----------
    line : str
        A single source line.
    context : BlockContext or None
        The block open before ``line``. A paragraph that was not interrupted
        continues onto ``line``, so no media block can start there.
    host_link : str
        Prefix joined with the media path.
    media_types : Mapping[str, str]
        MIME type per lowercase media kind; unknown kinds get an empty type.

    Returns
    -------
    str or None
        The ``<figure>`` fragment, with every interpolated value escaped.
    """
    if context is not None and context.type is None and not context.interrupted:
        return None
    match = MEDIA_PATTERN.match(line)
    if match is None:
        return None

    _indent, description, kind, path = match.groups()
    kind_lower = kind.lower()
    tag = "video" if kind_lower == "video" else "audio"
    link = escape(resolve_media_link(host_link, path))
    media_id = escape(slugify(posixpath.basename(path)))
    mime_type = escape(media_types.get(kind_lower, ""))
    label = escape(kind_lower)

    return (
        '<figure class="media-player">'
        f'<{tag} controls id="{media_id}">'
        f'<source src="{link}" type="{mime_type}">'
        f"Your browser does not support the {label} element."
        f' <a href="{link}">Download {label}</a>'
        f"</{tag}>"
        f"<figcaption>{escape(description, quote=False)} "
        f"({escape(kind, quote=False)})</figcaption>"
        "</figure>"
    )


class MediaBlockProcessor(BlockProcessor):
    """Turn media lines at the start of a block into stashed player markup."""

    def __init__(self, parser: BlockParser, config: RendererConfig) -> None:
        super().__init__(parser)
        self.config = config

    def test(self, parent: etree.Element, block: str) -> bool:
        first_line = block.split("\n", 1)[0]
        return first_line.lstrip().startswith("{") and bool(
            MEDIA_PATTERN.match(first_line)
        )

    def run(self, parent: etree.Element, blocks: list[str]) -> bool | None:
        """Replace the first line of the block with a stashed media fragment."""
        block = blocks.pop(0)
        first_line, _, rest = block.partition("\n")
        # Blocks are separated by blank lines, so the first line never
        # continues an earlier paragraph.
        context = BlockContext(interrupted=True) if len(parent) else None
        fragment = recognize_media(
            first_line,
            context,
            host_link=self.config.host_link,
            media_types=self.config.media_types,
        )
        if fragment is None:
            blocks.insert(0, block)
            return False
        placeholder = self.parser.md.htmlStash.store(fragment)
        etree.SubElement(parent, "p").text = placeholder
        if rest.strip():
            blocks.insert(0, rest)
        return None


__all__ = [
    "MEDIA_PATTERN",
    "BlockContext",
    "MediaBlockProcessor",
    "recognize_media",
    "resolve_media_link",
]

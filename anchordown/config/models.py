"""Typed dataclasses describing anchordown renderer configuration."""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from anchordown._constants import DEFAULT_MEDIA_TYPES, DEFAULT_TOC_HEADINGS, HEADING_TAGS

if typ.TYPE_CHECKING:
    import collections.abc as cabc

ATTRIBUTE_NAME_PATTERN = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_.:-]*$")


class RendererConfigError(ValueError):
    """Raised when the renderer configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class RendererConfig:
    """Settings applied by the extension renderer to one document.

    Attributes
    ----------
    host_link : str
        Prefix used to resolve relative links and media paths, and to decide
        whether an absolute link is internal.
    table_of_contents : bool
        Record eligible headings and inject their anchor ids.
    heading_tags : tuple[str, ...]
        Heading tags eligible for the table of contents.
    id_prefix : str
        Prepended to every generated heading slug.
    heading_anchor : bool
        Append a permalink anchor inside eligible headings.
    responsive_table : bool
        Wrap tables in ``<div class="table-responsive">``.
    media_types : dict[str, str]
        MIME type per media kind keyword (``audio``, ``video`` ...).
    link_attributes : dict[str, str]
        Extra attributes emitted verbatim on every rendered anchor.
    safe_mode : bool
        Sanitize attributes and escape raw HTML payloads.
    markup_escaped : bool
        Escape HTML written directly in the Markdown source.
    """

    host_link: str = ""
    table_of_contents: bool = False
    heading_tags: tuple[str, ...] = DEFAULT_TOC_HEADINGS
    id_prefix: str = ""
    heading_anchor: bool = True
    responsive_table: bool = False
    media_types: dict[str, str] = dc.field(
        default_factory=lambda: dict(DEFAULT_MEDIA_TYPES)
    )
    link_attributes: dict[str, str] = dc.field(default_factory=dict)
    safe_mode: bool = False
    markup_escaped: bool = True

    def set_link(self, link: str) -> RendererConfig:
        """Set the host link used for relative URLs and media sources.

        Trailing slashes are dropped, as in configuration files.
        """
        self.host_link = link.rstrip("/")
        return self

    def set_link_attributes(self, attributes: cabc.Mapping[str, str]) -> RendererConfig:
        """Replace the attributes added to every rendered anchor."""
        self.link_attributes = dict(attributes)
        return self

    def set_id_prefix(self, prefix: str) -> RendererConfig:
        """Set the prefix prepended to generated heading ids."""
        self.id_prefix = prefix
        return self

    def set_headings(self, headings: cabc.Iterable[str]) -> RendererConfig:
        """Set the heading tags eligible for the table of contents."""
        self.heading_tags = tuple(headings)
        return self

    def set_heading_anchor(self, enabled: bool = True) -> RendererConfig:  # noqa: FBT001, FBT002
        """Enable or disable permalink anchors after eligible headings."""
        self.heading_anchor = enabled
        return self

    def set_responsive_table(self, enabled: bool = True) -> RendererConfig:  # noqa: FBT001, FBT002
        """Enable or disable the responsive table wrapper."""
        self.responsive_table = enabled
        return self

    def set_table_of_contents(self, enabled: bool = True) -> RendererConfig:  # noqa: FBT001, FBT002
        """Enable or disable table-of-contents generation."""
        self.table_of_contents = enabled
        return self

    def set_media_type(self, kind: str, mime_type: str) -> RendererConfig:
        """Register the MIME type emitted for a media kind keyword."""
        self.media_types[kind.lower()] = mime_type
        return self

    def validate(self) -> None:
        """Validate configuration values.

        Raises
        ------
        RendererConfigError
            If a value has the wrong type, a heading tag is not ``h1``-``h6``,
            or a link attribute cannot be emitted verbatim.
        """
        for name in ("host_link", "id_prefix"):
            if not isinstance(getattr(self, name), str):
                msg = f"'{name}' must be a string."
                raise RendererConfigError(msg)
        unknown = [tag for tag in self.heading_tags if tag not in HEADING_TAGS]
        if unknown:
            msg = f"Unsupported heading tags: {', '.join(map(str, unknown))}"
            raise RendererConfigError(msg)
        for kind, mime_type in self.media_types.items():
            if not isinstance(kind, str) or not isinstance(mime_type, str):
                msg = f"Media type for '{kind}' must map a string to a string."
                raise RendererConfigError(msg)
        for name, value in self.link_attributes.items():
            if not ATTRIBUTE_NAME_PATTERN.match(str(name)):
                msg = f"Invalid link attribute name '{name}'."
                raise RendererConfigError(msg)
            if not isinstance(value, str) or '"' in value:
                msg = f"Link attribute '{name}' must be a string without double quotes."
                raise RendererConfigError(msg)


__all__ = ["RendererConfig", "RendererConfigError"]

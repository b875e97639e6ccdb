"""Extension renderer: link rewriting, heading anchors and responsive tables.

:class:`ExtensionRenderer` decorates a :class:`DefaultRenderer`. Tags it does
not customize are handed to the default renderer verbatim, with the extension
renderer passed along as the ``nested`` renderer so links and headings deeper
in the tree are still intercepted. For ``a``, ``h1``-``h6`` and (in responsive
mode) ``table`` elements it writes the markup itself:

* tables are wrapped in ``<div class="table-responsive">`` and gain the
  ``table`` class;
* anchors receive the configured link attributes, relative ``href`` values
  are resolved against the host link, and absolute links that leave the host
  open in a new tab with ``rel="noopener noreferrer"``;
* marked headings eligible for the table of contents get a slug id and,
  optionally, a trailing permalink.

The table of contents is owned by the renderer instance; use one instance per
document, or call :meth:`ExtensionRenderer.reset` between documents. Settings
changed through the configuration setters take effect at the next reset.

Example
-------
>>> from anchordown.config import RendererConfig
>>> from anchordown.elements import TextElement
>>> renderer = ExtensionRenderer(RendererConfig(host_link="https://site.test"))
>>> renderer.render(TextElement("a", {"href": "/about"}, text="About"))
'<a href="https://site.test/about">About</a>'
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from anchordown._constants import (
    EXTENDED_TAGS,
    EXTERNAL_LINK_ATTRIBUTES,
    PERMALINK_TEMPLATE,
    RESPONSIVE_TABLE_CLOSE,
    RESPONSIVE_TABLE_OPEN,
    TABLE_CLASS,
)
from anchordown.config import RendererConfig
from anchordown.elements import Element, VoidElement, text_content
from anchordown.escaping import escape, is_absolute_url
from anchordown.sanitize import sanitize_element
from anchordown.toc import TableOfContents

from .default import DefaultRenderer, render_body

if typ.TYPE_CHECKING:
    from .default import ElementRenderer

URL_ATTRIBUTES = frozenset({"href"})


def _with_table_class(value: str | None) -> str:
    """Prepend the ``table`` class unless it is already present."""
    classes = (value or "").split()
    if TABLE_CLASS in classes:
        return " ".join(classes)
    return " ".join([TABLE_CLASS, *classes])


class ExtensionRenderer:
    """Render elements with the anchordown extension rules applied."""

    def __init__(
        self,
        config: RendererConfig | None = None,
        *,
        fallback: ElementRenderer | None = None,
        toc: TableOfContents | None = None,
        text_resolver: cabc.Callable[[str], str] | None = None,
    ) -> None:
        """Initialize the renderer for a single document.

        Parameters
        ----------
        config : RendererConfig, optional
            Renderer settings; validated here so configuration errors surface
            before anything is rendered. Defaults to ``RendererConfig()``.
        fallback : ElementRenderer, optional
            Renderer for tags without extension rules. Defaults to a
            :class:`DefaultRenderer` sharing the configured safe mode.
        toc : TableOfContents, optional
            Accumulator receiving heading entries; a fresh one built from
            ``config`` is used when omitted.
        text_resolver : Callable[[str], str], optional
            Maps raw heading text to the text used for slugs and the table of
            contents (for example to expand parser placeholders).

        Raises
        ------
        RendererConfigError
            If ``config`` fails validation.
        """
        self.config = config or RendererConfig()
        self.config.validate()
        self.fallback = fallback or DefaultRenderer(safe_mode=self.config.safe_mode)
        self._owns_toc = toc is None
        self.toc = toc if toc is not None else TableOfContents.from_config(self.config)
        self._resolve_text = text_resolver

    def reset(self) -> None:
        """Prepare for another document.

        The configuration is validated again and an owned table of contents is
        rebuilt from it, so setters called after construction apply to the
        next document. A table of contents passed in by the caller is only
        cleared.

        Raises
        ------
        RendererConfigError
            If the configuration was changed to an invalid value.
        """
        self.config.validate()
        if self._owns_toc:
            self.toc = TableOfContents.from_config(self.config)
        else:
            self.toc.reset()

    def is_extended(self, element: Element) -> bool:
        """Return ``True`` when ``element`` is rendered with extension rules."""
        if element.tag not in EXTENDED_TAGS:
            return False
        return element.tag != "table" or self.config.responsive_table

    def render(self, element: Element, nested: ElementRenderer | None = None) -> str:
        """Return the HTML for ``element`` and record eligible headings.

        Parameters
        ----------
        element : Element
            Element description to serialize. It is never modified.
        nested : ElementRenderer, optional
            Renderer for child elements; defaults to this renderer.

        Returns
        -------
        str
            Serialized markup for ``element`` and its descendants.

        Raises
        ------
        ElementError
            If the element, or one of its descendants, is not a known variant.
        """
        nested = nested or self
        if not self.is_extended(element):
            return self.fallback.render(element, nested)
        if self.config.safe_mode:
            element = sanitize_element(element)

        tag = element.tag
        attributes = dict(element.attributes)
        is_table = tag == "table"
        if is_table:
            attributes["class"] = _with_table_class(attributes.get("class"))

        slug = None
        if not isinstance(element, VoidElement):
            slug = self._record_heading(element)
        if slug is not None and element.id_attribute:
            attributes.pop(element.id_attribute, None)

        parts = [RESPONSIVE_TABLE_OPEN if is_table else "", f"<{tag}"]
        if tag == "a":
            parts.extend(
                f' {name}="{value}"' for name, value in self.config.link_attributes.items()
            )
        for name, value in attributes.items():
            if value is None:
                continue
            if tag == "a" and name in URL_ATTRIBUTES:
                parts.append(self._link_attribute(name, value))
            else:
                parts.append(f' {name}="{escape(value)}"')
        if slug is not None:
            parts.append(f' {element.id_attribute}="{escape(slug)}"')

        if isinstance(element, VoidElement):
            parts.append(" />")
        else:
            parts.append(">")
            parts.append(render_body(element, nested, safe_mode=self.config.safe_mode))
            if slug is not None and self.config.heading_anchor:
                parts.append(PERMALINK_TEMPLATE.format(slug=escape(slug)))
            parts.append(f"</{tag}>")
        if is_table:
            parts.append(RESPONSIVE_TABLE_CLOSE)
        return "".join(parts)

    def _record_heading(self, element: Element) -> str | None:
        """Record a marked heading in the table of contents and return its slug."""
        if not element.id_attribute:
            return None
        text = text_content(element)
        if self._resolve_text is not None:
            text = self._resolve_text(text)
        return self.toc.record(element.tag, text.strip())

    def _link_attribute(self, name: str, value: str) -> str:
        """Return the markup for a link URL, resolving and hardening it."""
        host = escape(self.config.host_link)
        url = escape(value)
        if not is_absolute_url(url):
            return f' {name}="{host}/{url.lstrip("/")}"'
        if url.startswith(host):
            return f' {name}="{url}"'
        return f' {name}="{url}"{EXTERNAL_LINK_ATTRIBUTES}'


__all__ = ["URL_ATTRIBUTES", "ExtensionRenderer"]

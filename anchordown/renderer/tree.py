"""Convert Python-Markdown's ElementTree output into element descriptions."""

from __future__ import annotations

import html
import typing as typ

from markdown.util import AMP_SUBSTITUTE

from anchordown._constants import HEADING_ID_MARKER, VOID_TAGS
from anchordown.elements import ContainerElement, Element, TextElement, VoidElement

if typ.TYPE_CHECKING:
    import xml.etree.ElementTree as etree  # noqa: N813


def _decode_attribute(value: str) -> str:
    """Return ``value`` with obfuscated character references decoded.

    Email autolinks store their ``mailto:`` href as character references
    behind ``AMP_SUBSTITUTE``; the link rules need the plain URL.
    """
    if AMP_SUBSTITUTE not in value:
        return value
    return html.unescape(value.replace(AMP_SUBSTITUTE, "&"))


def _children(node: etree.Element) -> list[Element | str]:
    """Return the text and element children of ``node`` in document order."""
    parts: list[Element | str] = []
    if node.text:
        parts.append(node.text)
    for child in node:
        if isinstance(child.tag, str):
            parts.append(from_etree(child))
        elif child.tag is None:
            # Tagless wrappers only group their content.
            parts.extend(_children(child))
        if child.tail:
            parts.append(child.tail)
    return parts


def from_etree(node: etree.Element) -> Element:
    """Return the element description for ``node`` and its subtree.

    The heading marker attribute set by the heading block processor becomes
    ``id_attribute`` and is not carried over as an attribute. Nodes without
    content become ``VoidElement`` for void tags and empty ``TextElement``
    otherwise; text-only nodes become ``TextElement``; everything else is a
    ``ContainerElement``.
    """
    tag = typ.cast("str", node.tag)
    attributes = {
        name: _decode_attribute(value)
        for name, value in node.attrib.items()
        if name != HEADING_ID_MARKER
    }
    id_attribute = node.get(HEADING_ID_MARKER)
    children = _children(node)
    if not children:
        if tag in VOID_TAGS:
            return VoidElement(tag, attributes, id_attribute=id_attribute)
        return TextElement(tag, attributes, id_attribute=id_attribute)
    if len(children) == 1 and isinstance(children[0], str):
        return TextElement(tag, attributes, id_attribute=id_attribute, text=children[0])
    return ContainerElement(
        tag, attributes, id_attribute=id_attribute, children=tuple(children)
    )


__all__ = ["from_etree"]

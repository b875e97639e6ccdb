r"""Element descriptions consumed by the HTML renderers.

Each variant describes one HTML element: its tag, ordered attributes (a
``None`` value omits the attribute), the tags it may not nest, an optional
heading marker naming the attribute that receives a generated anchor id, and
exactly one kind of body. Variants are frozen; :func:`mark_heading` returns a
marked copy rather than mutating the original.

Example
-------
>>> from anchordown.elements import ContainerElement, TextElement
>>> link = TextElement("a", {"href": "/about"}, text="About")
>>> paragraph = ContainerElement("p", children=("See ", link, "."))
>>> text_content(paragraph)
'See About.'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from anchordown._constants import DEFAULT_ID_ATTRIBUTE, HEADING_TAGS

Handler = cabc.Callable[[typ.Any, frozenset[str]], str]


class ElementError(TypeError):
    """Raised when an element description cannot be rendered."""


@dc.dataclass(frozen=True, slots=True)
class Element:
    """Fields shared by every element variant.

    Attributes
    ----------
    tag : str
        HTML tag name.
    attributes : Mapping[str, str | None]
        Attribute values in output order; ``None`` omits the attribute.
    non_nestables : frozenset[str]
        Tags that nested content must not open (e.g. ``a`` inside ``a``).
    id_attribute : str or None
        Heading marker: name of the attribute that receives the generated
        anchor id. ``None`` for elements that are not anchor candidates.
    """

    tag: str
    attributes: cabc.Mapping[str, str | None] = dc.field(default_factory=dict)
    non_nestables: frozenset[str] = frozenset()
    id_attribute: str | None = dc.field(default=None, kw_only=True)


@dc.dataclass(frozen=True, slots=True)
class TextElement(Element):
    """Element whose body is plain text, escaped on output."""

    text: str = dc.field(default="", kw_only=True)


@dc.dataclass(frozen=True, slots=True)
class RawHtmlElement(Element):
    """Element whose body is an HTML payload emitted unescaped when permitted."""

    html: str = dc.field(default="", kw_only=True)
    allow_in_safe_mode: bool = dc.field(default=False, kw_only=True)


@dc.dataclass(frozen=True, slots=True)
class ContainerElement(Element):
    """Element with ordered children; strings are text nodes."""

    children: tuple[Element | str, ...] = dc.field(default=(), kw_only=True)


@dc.dataclass(frozen=True, slots=True)
class HandlerElement(Element):
    """Element whose body is produced by calling ``handler(payload, non_nestables)``."""

    payload: typ.Any = dc.field(default=None, kw_only=True)
    handler: Handler | None = dc.field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        if not callable(self.handler):
            msg = f"Element <{self.tag}> handler {self.handler!r} is not callable."
            raise ElementError(msg)


@dc.dataclass(frozen=True, slots=True)
class VoidElement(Element):
    """Element without a body, rendered in self-closing form."""


def mark_heading(element: Element, id_attribute: str = DEFAULT_ID_ATTRIBUTE) -> Element:
    """Return ``element`` marked as an anchor candidate when it is a heading."""
    if element.tag not in HEADING_TAGS:
        return element
    return dc.replace(element, id_attribute=id_attribute)


def text_content(element: Element | str) -> str:
    """Return the concatenated text carried by ``element`` and its children."""
    match element:
        case str():
            return element
        case TextElement():
            return element.text
        case ContainerElement():
            return "".join(text_content(child) for child in element.children)
        case HandlerElement(payload=str() as payload):
            return payload
        case _:
            return ""


__all__ = [
    "ContainerElement",
    "Element",
    "ElementError",
    "Handler",
    "HandlerElement",
    "RawHtmlElement",
    "TextElement",
    "VoidElement",
    "mark_heading",
    "text_content",
]

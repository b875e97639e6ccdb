"""Generic element serializer used for every tag the extension leaves alone.

:class:`DefaultRenderer` turns an :class:`~anchordown.elements.Element` into
markup without any extension policy: attributes are escaped, ``None`` values
are skipped, bodies are escaped text, permitted raw HTML, handler output, or
rendered children, and void elements close with ``/>``. Children are rendered
through the ``nested`` renderer so a wrapping renderer still sees every
descendant of an element it passed through.
"""

from __future__ import annotations

import typing as typ

from anchordown.elements import (
    ContainerElement,
    Element,
    ElementError,
    HandlerElement,
    RawHtmlElement,
    TextElement,
    VoidElement,
)
from anchordown.escaping import escape
from anchordown.sanitize import sanitize_element

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from anchordown.elements import Handler


class ElementRenderer(typ.Protocol):
    """Anything that can serialize an element description into HTML."""

    def render(self, element: Element, nested: ElementRenderer | None = None) -> str:
        """Return the HTML for ``element``, rendering children via ``nested``."""
        ...


def attribute_markup(attributes: cabc.Mapping[str, str | None]) -> str:
    """Return escaped ``name="value"`` pairs, skipping ``None`` values."""
    return "".join(
        f' {name}="{escape(value)}"'
        for name, value in attributes.items()
        if value is not None
    )


def render_body(element: Element, nested: ElementRenderer, *, safe_mode: bool) -> str:
    """Return the inner HTML of ``element``.

    Parameters
    ----------
    element : Element
        Element whose body is rendered. ``VoidElement`` has no body.
    nested : ElementRenderer
        Renderer used for child elements of a ``ContainerElement``.
    safe_mode : bool
        When set, raw HTML payloads are escaped unless the element allows
        raw HTML in safe mode.

    Raises
    ------
    ElementError
        If ``element`` is not one of the known element variants.
    """
    match element:
        case HandlerElement():
            handler = typ.cast("Handler", element.handler)
            return handler(element.payload, element.non_nestables)
        case RawHtmlElement():
            if not safe_mode or element.allow_in_safe_mode:
                return element.html
            return escape(element.html, quote=False)
        case TextElement():
            return escape(element.text, quote=False)
        case ContainerElement():
            return "".join(
                escape(child, quote=False)
                if isinstance(child, str)
                else nested.render(child)
                for child in element.children
            )
        case VoidElement():
            return ""
        case _:
            msg = f"Cannot render element variant {type(element).__name__!r}."
            raise ElementError(msg)


class DefaultRenderer:
    """Serialize elements without extension rules."""

    def __init__(self, *, safe_mode: bool = False) -> None:
        self.safe_mode = safe_mode

    def render(self, element: Element, nested: ElementRenderer | None = None) -> str:
        """Return the HTML for ``element``.

        Parameters
        ----------
        element : Element
            Element description to serialize.
        nested : ElementRenderer, optional
            Renderer for child elements; defaults to this renderer.

        Returns
        -------
        str
            Opening tag with escaped attributes, body, and closing tag, or a
            self-closing tag for void elements.
        """
        if self.safe_mode:
            element = sanitize_element(element)
        opening = f"<{element.tag}{attribute_markup(element.attributes)}"
        if isinstance(element, VoidElement):
            return f"{opening} />"
        body = render_body(element, nested or self, safe_mode=self.safe_mode)
        return f"{opening}>{body}</{element.tag}>"


__all__ = ["DefaultRenderer", "ElementRenderer", "attribute_markup", "render_body"]

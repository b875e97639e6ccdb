"""Safe-mode sanitation applied to element descriptions before serialization.

Attribute names that could not have come from well-formed markup are dropped,
as are inline event handlers (``on*``). URL attributes of links and images
keep their value only when it starts with a whitelisted scheme; otherwise
every ``:`` is percent-encoded so the browser treats the value as a relative
path instead of a ``javascript:`` or similar URL.

Example
-------
>>> from anchordown.elements import TextElement
>>> link = TextElement("a", {"href": "javascript:alert(1)", "onclick": "x()"}, text="x")
>>> dict(sanitize_element(link).attributes)
{'href': 'javascript%3Aalert(1)'}
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

if typ.TYPE_CHECKING:
    from anchordown.elements import Element

ATTRIBUTE_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9_-]*$")
URL_ATTRIBUTE_BY_TAG: dict[str, str] = {"a": "href", "img": "src"}
SAFE_URL_PREFIXES = (
    "http://",
    "https://",
    "ftp://",
    "ftps://",
    "mailto:",
    "tel:",
    "data:image/png;base64,",
    "data:image/gif;base64,",
    "data:image/jpeg;base64,",
    "irc:",
    "ircs:",
    "git:",
    "ssh:",
    "news:",
    "steam:",
)


def _filter_unsafe_url(value: str) -> str:
    """Percent-encode colons unless ``value`` starts with a safe scheme."""
    if value.lower().startswith(SAFE_URL_PREFIXES):
        return value
    return value.replace(":", "%3A")


def _keep_attribute(name: str) -> bool:
    return bool(ATTRIBUTE_NAME_PATTERN.match(name)) and not name.lower().startswith("on")


def sanitize_element(element: Element) -> Element:
    """Return a copy of ``element`` with unsafe attributes removed or defused.

    Parameters
    ----------
    element : Element
        Element description to sanitize. It is not modified.

    Returns
    -------
    Element
        The same variant with a filtered attribute mapping. Attribute order
        is preserved.
    """
    url_attribute = URL_ATTRIBUTE_BY_TAG.get(element.tag)
    attributes: dict[str, str | None] = {}
    for name, value in element.attributes.items():
        if not _keep_attribute(name):
            continue
        if name == url_attribute and value is not None:
            value = _filter_unsafe_url(value)
        attributes[name] = value
    return dc.replace(element, attributes=attributes)


__all__ = ["SAFE_URL_PREFIXES", "sanitize_element"]

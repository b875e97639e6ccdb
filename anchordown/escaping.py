"""HTML escaping and URL classification primitives shared by the renderers.

Escaping follows Python-Markdown's serializer: ampersands that already start
a character reference are left alone, so text that the inline parser has
pre-escaped (code spans, stashed entities) is never escaped twice.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

AMP_PATTERN = re.compile(r"&(?!(?:#[0-9]+|#x[0-9a-f]+|[0-9a-z]+);)", re.IGNORECASE)
SCHEME_PATTERN = re.compile(r"^[a-z][a-z0-9+.-]*$", re.IGNORECASE)
HOST_SCHEMES = frozenset({"http", "https", "ftp", "ftps", "ws", "wss"})


def escape(value: str, *, quote: bool = True) -> str:
    """Escape ``value`` for HTML text or, with ``quote``, attribute content."""
    if "&" in value:
        value = AMP_PATTERN.sub("&amp;", value)
    value = value.replace("<", "&lt;").replace(">", "&gt;")
    if quote:
        value = value.replace('"', "&quot;").replace("'", "&#039;")
    return value


def is_absolute_url(value: str) -> bool:
    """Return ``True`` when ``value`` is a complete URL with a scheme.

    Network schemes (``http``, ``https``, ``ftp`` ...) also need a host;
    other schemes such as ``mailto:`` or ``tel:`` only need content after the
    colon. Relative paths, fragments and protocol-relative URLs are not
    absolute.
    """
    if not value or any(char.isspace() for char in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    scheme = parts.scheme.lower()
    if not scheme or not SCHEME_PATTERN.match(scheme):
        return False
    if scheme in HOST_SCHEMES:
        return bool(parts.netloc)
    return bool(parts.netloc or parts.path)


__all__ = ["AMP_PATTERN", "escape", "is_absolute_url"]

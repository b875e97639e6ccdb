"""Common literal values used across anchordown.

These constants keep tag sets, default media types, and generated markup
fragments centralized so the renderer, the Markdown extension, and tests can
import the same values without drifting. Intended for internal use within the
anchordown package.

Examples
--------
>>> from anchordown import _constants
>>> _constants.PERMALINK_TEMPLATE.format(slug="intro")
'<a class="anchor-link" href="#intro" title="Permalink to this headline"></a>'
>>> "h2" in _constants.HEADING_TAGS
True
"""

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
DEFAULT_TOC_HEADINGS = ("h2", "h3")
EXTENDED_TAGS = frozenset({"table", "a", *HEADING_TAGS})
VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta",
     "param", "source", "track", "wbr"}
)

DEFAULT_MEDIA_TYPES: dict[str, str] = {
    "audio": "audio/ogg; codecs=opus",
    "video": "video/mp4",
}

DEFAULT_ID_ATTRIBUTE = "id"
HEADING_ID_MARKER = "data-anchordown-id-attribute"

EXTERNAL_LINK_ATTRIBUTES = ' target="_blank" rel="noopener noreferrer"'
PERMALINK_TEMPLATE = (
    '<a class="anchor-link" href="#{slug}" title="Permalink to this headline"></a>'
)
RESPONSIVE_TABLE_OPEN = '<div class="table-responsive">'
RESPONSIVE_TABLE_CLOSE = "</div>"
TABLE_CLASS = "table"

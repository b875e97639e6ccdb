r"""Turn heading and file names into URL-safe anchor identifiers.

Runs of characters that are neither Unicode letters nor digits collapse into a
single ``-`` and the result is lowercased, so ``"Getting Started!"`` becomes
``getting-started`` and ``"Überblick & Ziele"`` becomes ``überblick-ziele``.
Case boundaries are not split: ``"APIReference"`` yields ``apireference``.

Example
-------
>>> from anchordown.slugs import slugify
>>> slugify("Getting Started!")
'getting-started'
>>> slugify("song.mp3")
'song-mp3'
"""

from __future__ import annotations

import re

SEPARATOR_PATTERN = re.compile(r"[\W_]+")


def slugify(text: str) -> str:
    """Return a lowercase, hyphen-separated identifier for ``text``.

    Parameters
    ----------
    text : str
        Arbitrary heading or file name text.

    Returns
    -------
    str
        Letters and digits of ``text`` joined by single hyphens, without
        leading or trailing separators. Empty when ``text`` holds no letters
        or digits.
    """
    return SEPARATOR_PATTERN.sub("-", text).strip("-").lower()


__all__ = ["SEPARATOR_PATTERN", "slugify"]

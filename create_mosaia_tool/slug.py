"""Directory-safe identifiers derived from display names."""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Convert a display name to a lowercase, hyphen-separated slug.

    "Weather Tool" -> "weather-tool". Returns an empty string when the
    text has no ASCII letters or digits.
    """
    slug = _NON_ALNUM.sub("-", text.lower().strip())
    return slug.strip("-")

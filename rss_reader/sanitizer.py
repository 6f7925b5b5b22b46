"""Plain-text cleanup for feed descriptions."""

from __future__ import annotations

import re

# Leftmost "<", anything but ">", then ">". Never spans two tags.
TAG_PATTERN = re.compile(r"<[^>]*>")

NBSP_ENTITY = "&nbsp;"


def sanitize(text: str) -> str:
    """Remove HTML tags and replace ``&nbsp;`` entities with plain spaces."""
    return TAG_PATTERN.sub("", text).replace(NBSP_ENTITY, " ")

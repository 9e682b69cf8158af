"""Plain-text excerpts derived from rich content."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

ELLIPSIS = "..."

# Description metadata derived from a body field
DESCRIPTION_LENGTH = 160
# Description column of the rule listing
LIST_EXCERPT_LENGTH = 80

_WHITESPACE = re.compile(r"\s+")


def strip_markup(rich_text: str | None) -> str:
    """Remove all markup and normalize whitespace.

    Args:
        rich_text: HTML or plain text.

    Returns:
        Text content with whitespace runs collapsed to single spaces.
    """
    if not rich_text:
        return ""
    text = BeautifulSoup(rich_text, "html.parser").get_text()
    return _WHITESPACE.sub(" ", text).strip()


def excerpt(text: str | None, max_length: int) -> str:
    """Truncate text to ``max_length`` characters plus an ellipsis.

    Text that fits is returned unchanged.
    """
    if not text:
        return ""
    if len(text) > max_length:
        return text[:max_length] + ELLIPSIS
    return text


def summarize(rich_text: str | None, max_length: int = DESCRIPTION_LENGTH) -> str:
    """Derive a bounded plain-text summary from rich content.

    Example:
        summarize("<p>Hello   world</p>", 160)  # "Hello world"

    Args:
        rich_text: Markup to summarize. None or empty yields "".
        max_length: Maximum characters kept before the ellipsis.

    Returns:
        Cleaned text, truncated by character with "..." appended when
        longer than ``max_length``.
    """
    return excerpt(strip_markup(rich_text), max_length)

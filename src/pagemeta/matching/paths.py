"""Request path matching against override rule patterns.

Patterns are literal paths or globs where ``*`` stands for any run of
characters (including ``/`` and the empty string). The literal token
``<front>`` names the site home page.

Example:
    matches("/blog/post-1", "/blog/*")  # True
    matches("/blog", "/blog/*")         # False
"""

from __future__ import annotations

import re
from functools import lru_cache

FRONT_PAGE = "<front>"


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a wildcard pattern into an anchored regex.

    Every character other than ``*`` is matched literally.

    Args:
        pattern: Rule path pattern.

    Returns:
        Compiled regex to be used with ``fullmatch``.
    """
    literal_parts = (re.escape(part) for part in pattern.split("*"))
    return re.compile(".*".join(literal_parts), re.DOTALL)


def matches(request_path: str, pattern: str) -> bool:
    """Check whether a request path satisfies a rule pattern.

    Matching is case-sensitive and does not normalize trailing slashes.

    Args:
        request_path: Normalized request path.
        pattern: Literal path or ``*`` wildcard pattern.

    Returns:
        True on exact equality or a full wildcard match.
    """
    if request_path == pattern:
        return True
    if "*" not in pattern:
        return False
    return compile_pattern(pattern).fullmatch(request_path) is not None


def candidate_paths(path: str, is_front_page: bool = False) -> tuple[str, ...]:
    """Paths a request is matched as.

    The home page is matched both as ``<front>`` and as its concrete path.
    """
    if is_front_page and path != FRONT_PAGE:
        return (FRONT_PAGE, path)
    return (path,)

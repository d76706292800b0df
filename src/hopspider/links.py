"""
Pattern-based link discovery. No DOM parsing: the first anchor whose href
starts with http(s) and passes the eligibility check wins.
"""
from __future__ import annotations

import re
from typing import Callable, Iterator, Optional

# <a ... href="http..."> with double, single or no quotes around the value
LINK_PATTERN = re.compile(
    r"""<a\s[^>]*?href\s*=\s*["']?(https?://[^"'\s>]+)""",
    re.IGNORECASE | re.DOTALL,
)


def iter_links(html: str) -> Iterator[str]:
    """Yield candidate addresses lazily, in document order."""
    for match in LINK_PATTERN.finditer(html or ""):
        yield match.group(1)


def find_link(html: str, should_visit: Callable[[str], bool]) -> Optional[str]:
    """Return the first candidate accepted by ``should_visit``, or None."""
    for candidate in iter_links(html):
        if should_visit(candidate):
            return candidate
    return None

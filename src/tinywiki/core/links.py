"""Bracket link rewriting.

Turns ``[PageName]`` tokens into anchors pointing at ``/view/PageName``.
Surrounding text is passed through untouched, HTML included.
"""

import re

LINK_PATTERN = re.compile(rb"\[([A-Za-z0-9]+)\]")
LINK_TEMPLATE = b'<a href="/view/%s">%s</a>'


def rewrite_links(body: bytes) -> bytes:
    """Replace every bracketed page name in body with an anchor.

    Args:
        body: Raw page content

    Returns:
        New content with links substituted in a single left-to-right pass
    """
    return LINK_PATTERN.sub(_anchor, body)


def _anchor(match: re.Match[bytes]) -> bytes:
    name = match.group(1)
    return LINK_TEMPLATE % (name, name)

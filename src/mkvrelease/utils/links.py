"""Uptobox link parsing.

Supports:
- https://uptobox.com/abcdef123456
- https://uptostream.com/abcdef123456 (any top-level domain)
"""

from __future__ import annotations

import re

from mkvrelease.errors import InvalidLinkError

LINK_PATTERN = re.compile(r"https://(?:uptobox|uptostream)\.[a-zA-Z]+/(?P<file_code>[a-zA-Z0-9]{12})")


def parse_file_code(url: str) -> str:
    """Extract the 12-character file code from a share link.

    Raises:
        InvalidLinkError: If the link has no file code
    """
    match = LINK_PATTERN.search(url.strip())
    if not match:
        raise InvalidLinkError(f"Unable to parse the file code for '{url}'")
    return match.group("file_code")


def is_supported_link(url: str) -> bool:
    """Check if a link can be backed up."""
    return LINK_PATTERN.search(url.strip()) is not None

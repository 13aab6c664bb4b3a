"""Episode designator parsing for show filenames.

Supports:
- Season and episode: S02E05, s1e3, S001E012
- Episode only: E12, e7
"""

from __future__ import annotations

import re

from mkvrelease.errors import EpisodeNotFoundError

# Season+episode is tried before the bare episode at each position
EPISODE_PATTERN = re.compile(r"[Ss][0-9]{1,3}[Ee][0-9]{1,3}|[Ee][0-9]{1,3}")


def find_episode(filename: str) -> str | None:
    """Return the first episode designator in a filename, or None.

    Examples:
        >>> find_episode("Show.Name.S02E05.1080p.mkv")
        'S02E05'
        >>> find_episode("Show.Name.E12.mkv")
        'E12'
    """
    match = EPISODE_PATTERN.search(filename)
    return match.group(0) if match else None


def extract_episode(filename: str) -> str:
    """Return the episode designator exactly as written in the filename.

    Raises:
        EpisodeNotFoundError: If the filename has no designator
    """
    episode = find_episode(filename)
    if episode is None:
        raise EpisodeNotFoundError(filename)
    return episode

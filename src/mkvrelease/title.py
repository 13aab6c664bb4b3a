"""Release name composition.

A release name is a dotted list of segments::

    film: Title.LANGS.RESOLUTION.SOURCES.AUDIO.VIDEO.mkv
    show: Title.EPISODE.LANGS.RESOLUTION.SOURCES.AUDIO.VIDEO.mkv

Empty segments are left out, so a file without a language hint or a known
resolution still gets a clean name. The same inputs always give the same
name, which is used both as the container title and as the remote file
name.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum

from mkvrelease.models import ContainerProfile
from mkvrelease.vocabulary import format_languages, format_sources

EXTENSION = "mkv"

_DOTS = re.compile(r"\.{2,}")


class ContentKind(str, Enum):
    """Kind of release being named."""

    FILM = "film"
    SHOW = "show"


def normalize_title(title: str) -> str:
    """Trim a user title and replace whitespace with dots."""
    return ".".join(title.split())


def _clean_segment(segment: str) -> str:
    return _DOTS.sub(".", segment).strip(".")


def join_segments(segments: Iterable[str]) -> str:
    """Join non-empty segments with dots."""
    cleaned = (_clean_segment(segment) for segment in segments)
    return ".".join(segment for segment in cleaned if segment)


def compose_film_name(title: str, profile: ContainerProfile, langs: str, sources: str) -> str:
    """Compose the release name of a film.

    Args:
        title: User supplied title
        profile: Classified container profile
        langs: Space separated language hints
        sources: Space separated source hints

    Returns:
        Release name ending with ".mkv"
    """
    return join_segments(
        [
            normalize_title(title),
            format_languages(langs),
            profile.resolution.value,
            format_sources(sources),
            profile.audio_label,
            profile.video_label,
            EXTENSION,
        ]
    )


def compose_show_name(
    title: str, episode: str, profile: ContainerProfile, langs: str, sources: str
) -> str:
    """Compose the release name of a show episode.

    Args:
        title: User supplied title
        episode: Episode designator, e.g. "S02E05"
        profile: Classified container profile
        langs: Space separated language hints
        sources: Space separated source hints

    Returns:
        Release name ending with ".mkv"
    """
    return join_segments(
        [
            normalize_title(title),
            episode,
            format_languages(langs),
            profile.resolution.value,
            format_sources(sources),
            profile.audio_label,
            profile.video_label,
            EXTENSION,
        ]
    )


def compose_name(
    kind: ContentKind,
    title: str,
    profile: ContainerProfile,
    langs: str = "",
    sources: str = "",
    episode: str | None = None,
) -> str:
    """Compose a release name for either kind of content."""
    if kind == ContentKind.SHOW:
        if episode is None:
            raise ValueError("A show release name needs an episode")
        return compose_show_name(title, episode, profile, langs, sources)
    return compose_film_name(title, profile, langs, sources)

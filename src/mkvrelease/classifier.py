"""Container metadata classifier.

Turns the JSON printed by ``mkvmerge -J`` into a ContainerProfile: the
normalized audio codecs, the recognized video codec families and the
resolution of the first video track.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ValidationError

from mkvrelease.errors import (
    MetadataParseError,
    NoAudioCodecError,
    NoVideoCodecError,
    NoVideoTrackError,
)
from mkvrelease.models import ContainerProfile, Track, TrackKind

logger = logging.getLogger(__name__)

# Vendor spellings rewritten in audio codec names
AUDIO_CODEC_ALIASES: dict[str, str] = {
    "E-AC-3": "EAC3",
    "AC-3": "AC3",
}

# (prefix, label) pairs, first matching prefix wins
VIDEO_CODEC_RULES: list[tuple[str, str]] = [
    ("h.264", "h264"),
    ("avc", "h264"),
    ("h.265", "h265"),
    ("hevc", "h265"),
    ("x264", "x264"),
    ("x.264", "x264"),
    ("x265", "x265"),
    ("x.265", "x265"),
    ("vp9", "VP9"),
    ("av1", "AV1"),
]


class _Identification(BaseModel):
    tracks: list[Track]


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    """Deduplicate while keeping first-seen order."""
    return tuple(dict.fromkeys(values))


def parse_tracks(raw: str) -> list[Track]:
    """Parse mkvmerge identification JSON into tracks.

    Raises:
        MetadataParseError: If the text is not valid identification JSON
    """
    try:
        return _Identification.model_validate_json(raw).tracks
    except ValidationError as e:
        raise MetadataParseError(f"Cannot parse container metadata: {e}") from e


def normalize_audio_codec(codec: str) -> str:
    """Rewrite known vendor spellings, leave anything else unchanged."""
    return AUDIO_CODEC_ALIASES.get(codec, codec)


def normalize_video_codec(piece: str) -> str | None:
    """Map one codec name to its family label, or None if unrecognized."""
    lowered = piece.lower()
    for prefix, label in VIDEO_CODEC_RULES:
        if lowered.startswith(prefix):
            return label
    return None


def normalize_audio_codecs(tracks: Iterable[Track]) -> tuple[str, ...]:
    """Return the unique normalized codecs of the given audio tracks.

    Raises:
        NoAudioCodecError: If no codec remains
    """
    codecs = _unique(normalize_audio_codec(track.codec) for track in tracks)
    if not codecs:
        raise NoAudioCodecError("Cannot detect audio codecs")
    return codecs


def normalize_video_codecs(tracks: Iterable[Track]) -> tuple[str, ...]:
    """Return the unique codec families of the given video tracks.

    A codec field such as "AVC/H.264/MPEG-4p10" names several codecs; each
    piece is matched on its own and unrecognized pieces are dropped.

    Raises:
        NoVideoCodecError: If no recognized codec remains
    """
    labels = []
    for track in tracks:
        for piece in track.codec.split("/"):
            label = normalize_video_codec(piece)
            if label is None:
                logger.debug("Ignoring unrecognized video codec %r", piece)
                continue
            labels.append(label)

    codecs = _unique(labels)
    if not codecs:
        raise NoVideoCodecError("Cannot detect video codecs")
    return codecs


def classify_tracks(tracks: Iterable[Track]) -> ContainerProfile:
    """Build a ContainerProfile from parsed tracks.

    Subtitle tracks are ignored. The resolution comes from the first video
    track only.
    """
    audios = []
    videos = []
    for track in tracks:
        if track.kind == TrackKind.AUDIO:
            audios.append(track)
        elif track.kind == TrackKind.VIDEO:
            videos.append(track)

    if not videos:
        raise NoVideoTrackError("Cannot fetch the resolution, no video track found")

    return ContainerProfile(
        audio_codecs=normalize_audio_codecs(audios),
        video_codecs=normalize_video_codecs(videos),
        resolution=videos[0].resolution,
    )


def classify(raw: str) -> ContainerProfile:
    """Classify raw mkvmerge identification output.

    Args:
        raw: JSON text printed by ``mkvmerge -J``

    Returns:
        ContainerProfile for the container

    Raises:
        MetadataParseError: If the text is malformed
        NoVideoTrackError: If there is no video track
        NoAudioCodecError: If there is no audio codec
        NoVideoCodecError: If no video codec is recognized
    """
    return classify_tracks(parse_tracks(raw))

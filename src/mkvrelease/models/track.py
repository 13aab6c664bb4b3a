"""Track and container profile models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TrackKind(str, Enum):
    """Kind of stream described by mkvmerge."""

    AUDIO = "audio"
    VIDEO = "video"
    SUBTITLES = "subtitles"


class Dimension(str, Enum):
    """Standard vertical resolutions used in release names."""

    P480 = "480p"
    P576 = "576p"
    P720 = "720p"
    P1080 = "1080p"
    P1440 = "1440p"
    P2160 = "2160p"
    P4320 = "4320p"
    UNKNOWN = ""

    @classmethod
    def from_pixels(cls, pixels: str | None) -> Dimension:
        """Map a "WIDTHxHEIGHT" string to a Dimension.

        A rule matches when the string starts with its width or ends with
        its height. Rules are tried from the smallest resolution up, so
        "720x576" is 576p and "1280x720" is 720p.
        """
        if not pixels:
            return cls.UNKNOWN
        for width, height, dimension in _PIXEL_ANCHORS:
            if pixels.startswith(width) or pixels.endswith(height):
                return dimension
        return cls.UNKNOWN

    def __str__(self) -> str:
        return self.value


_PIXEL_ANCHORS: list[tuple[str, str, Dimension]] = [
    ("640", "480", Dimension.P480),
    ("720", "576", Dimension.P576),
    ("1280", "720", Dimension.P720),
    ("1920", "1080", Dimension.P1080),
    ("2560", "1440", Dimension.P1440),
    ("3840", "2160", Dimension.P2160),
    ("7680", "4320", Dimension.P4320),
]


class TrackProperties(BaseModel):
    """Subset of mkvmerge track properties."""

    pixel_dimensions: str | None = None


class Track(BaseModel):
    """One audio, video or subtitle track from mkvmerge -J output."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    codec: str
    kind: TrackKind = Field(alias="type")
    resolution: Dimension = Field(default=Dimension.UNKNOWN, alias="properties")

    @field_validator("resolution", mode="before")
    @classmethod
    def _resolution_from_properties(cls, value: object) -> Dimension:
        if isinstance(value, Dimension):
            return value
        if isinstance(value, dict):
            return Dimension.from_pixels(TrackProperties.model_validate(value).pixel_dimensions)
        if value is None:
            return Dimension.UNKNOWN
        try:
            return Dimension(value)
        except ValueError:
            return Dimension.from_pixels(str(value))


class ContainerProfile(BaseModel):
    """Normalized codecs and resolution of a container.

    Built once per file by the classifier and never modified afterwards.
    """

    model_config = ConfigDict(frozen=True)

    audio_codecs: tuple[str, ...]
    video_codecs: tuple[str, ...]
    resolution: Dimension = Dimension.UNKNOWN

    @property
    def audio_label(self) -> str:
        """Audio codecs joined for a release name."""
        return ".".join(self.audio_codecs)

    @property
    def video_label(self) -> str:
        """Video codecs joined for a release name."""
        return ".".join(self.video_codecs)

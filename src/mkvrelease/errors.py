"""Exceptions raised by mkvrelease.

Every failure that should abort processing of a single file derives from
ReleaseError so batch callers can report it and move on to the next file.
"""

from __future__ import annotations


class ReleaseError(Exception):
    """Base class for all mkvrelease errors."""


class ConfigError(ReleaseError):
    """Configuration file could not be read or is invalid."""


class MetadataParseError(ReleaseError):
    """Container metadata is not well-formed."""


class NoAudioCodecError(ReleaseError):
    """No audio codec left after classification."""


class NoVideoCodecError(ReleaseError):
    """No recognizable video codec left after classification."""


class NoVideoTrackError(ReleaseError):
    """Container has no video track."""


class EpisodeNotFoundError(ReleaseError):
    """Filename has no season/episode designator."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Unable to parse the episode from '{filename}'")


class UploadedFileNotFoundError(ReleaseError):
    """No remote file matches the uploaded name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unable to find the uploaded file '{name}' on the remote")


class RemoteServiceError(ReleaseError):
    """A remote listing, move or transfer call failed."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"Unable to {operation} ({detail})")


class ToolError(ReleaseError):
    """An external mkvtoolnix program failed."""


class NotMatroskaError(ReleaseError):
    """File is not a Matroska (.mkv) file."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"'{name}' is not a matroska (.mkv) file")


class InvalidLinkError(ReleaseError):
    """Link does not contain a file code."""

"""mkvrelease - Matroska release naming and Uptobox synchronization.

Name matroska files after their content and keep them on Uptobox.

Usage:
    from mkvrelease import classify, compose_film_name

    # Classify mkvmerge -J output
    profile = classify(raw_json)

    # Build a release name
    name = compose_film_name("The Movie", profile, "multi", "bluray")
    print(name)  # The.Movie.MULTi.1080p.BluRay.AC3.h264.mkv
"""

from mkvrelease._version import __version__
from mkvrelease.classifier import classify, parse_tracks
from mkvrelease.errors import (
    ConfigError,
    EpisodeNotFoundError,
    InvalidLinkError,
    MetadataParseError,
    NoAudioCodecError,
    NotMatroskaError,
    NoVideoCodecError,
    NoVideoTrackError,
    ReleaseError,
    RemoteServiceError,
    ToolError,
    UploadedFileNotFoundError,
)
from mkvrelease.models import (
    ContainerProfile,
    Dimension,
    LangToken,
    RemoteFile,
    SourceToken,
    Track,
    TrackKind,
)
from mkvrelease.pipeline import ReleaseRequest, ReleaseResult, backup_link, run_batch, upload_file
from mkvrelease.remote import (
    RemoteStore,
    UptoboxClient,
    move_to_destination,
    resolve_destination,
    select_uploaded,
)
from mkvrelease.title import ContentKind, compose_film_name, compose_show_name
from mkvrelease.utils import extract_episode
from mkvrelease.vocabulary import map_language, map_source

__all__ = [
    # Version
    "__version__",
    # Naming
    "classify",
    "parse_tracks",
    "map_language",
    "map_source",
    "extract_episode",
    "compose_film_name",
    "compose_show_name",
    "ContentKind",
    # Remote
    "RemoteStore",
    "UptoboxClient",
    "select_uploaded",
    "resolve_destination",
    "move_to_destination",
    # Pipeline
    "ReleaseRequest",
    "ReleaseResult",
    "upload_file",
    "backup_link",
    "run_batch",
    # Models
    "Track",
    "TrackKind",
    "Dimension",
    "ContainerProfile",
    "LangToken",
    "SourceToken",
    "RemoteFile",
    # Errors
    "ReleaseError",
    "ConfigError",
    "MetadataParseError",
    "NoAudioCodecError",
    "NoVideoCodecError",
    "NoVideoTrackError",
    "EpisodeNotFoundError",
    "UploadedFileNotFoundError",
    "RemoteServiceError",
    "ToolError",
    "NotMatroskaError",
    "InvalidLinkError",
]

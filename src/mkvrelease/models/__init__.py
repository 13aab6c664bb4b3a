"""Pydantic models for mkvrelease."""

from .remote import CREATED_FORMAT, RemoteFile, RemoteFolder, RemoteLink, RemoteListing
from .track import ContainerProfile, Dimension, Track, TrackKind, TrackProperties
from .vocabulary import LangToken, SourceToken

__all__ = [
    # Tracks
    "Track",
    "TrackKind",
    "TrackProperties",
    "Dimension",
    "ContainerProfile",
    # Vocabularies
    "LangToken",
    "SourceToken",
    # Remote
    "RemoteFile",
    "RemoteFolder",
    "RemoteListing",
    "RemoteLink",
    "CREATED_FORMAT",
]

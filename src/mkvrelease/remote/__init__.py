"""Remote storage for mkvrelease.

Supported services:
- Uptobox (via httpx)
"""

from mkvrelease.errors import RemoteServiceError, UploadedFileNotFoundError

from .base import RemoteStore
from .reconcile import (
    UPLOAD_ROOT,
    fetch_uploaded,
    move_to_destination,
    newer_upload,
    resolve_destination,
    select_uploaded,
)
from .uptobox import UptoboxClient

__all__ = [
    "RemoteStore",
    "UptoboxClient",
    "RemoteServiceError",
    "UploadedFileNotFoundError",
    "UPLOAD_ROOT",
    "newer_upload",
    "select_uploaded",
    "fetch_uploaded",
    "resolve_destination",
    "move_to_destination",
]

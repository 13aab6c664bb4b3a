"""Reconciliation of uploaded files with the remote listing.

After an upload the remote side only knows the file by name, and the same
name may have been uploaded before. The uploaded file is taken to be the
most recent entry with that name; entries whose creation time cannot be
parsed never win over one that can.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import reduce

from mkvrelease.errors import UploadedFileNotFoundError
from mkvrelease.models import RemoteFile

from .base import RemoteStore

logger = logging.getLogger(__name__)

# Listing root used to find fresh uploads
UPLOAD_ROOT = "//"


def newer_upload(current: RemoteFile, candidate: RemoteFile) -> RemoteFile:
    """Return whichever of two same-name entries is the more recent upload.

    A parseable timestamp beats an unparseable one. When both timestamps
    are equal, or neither parses, the candidate (the later listing entry)
    wins.
    """
    current_time = current.created_at
    candidate_time = candidate.created_at

    if candidate_time is None:
        return current if current_time is not None else candidate
    if current_time is None:
        return candidate
    return candidate if candidate_time >= current_time else current


def select_uploaded(records: Iterable[RemoteFile], name: str) -> RemoteFile:
    """Pick the entry for a just-uploaded file.

    Args:
        records: Remote listing entries
        name: Exact name the file was uploaded under

    Returns:
        The most recent entry named ``name``

    Raises:
        UploadedFileNotFoundError: If no entry has that name
    """
    matches = [record for record in records if record.name == name]
    if not matches:
        raise UploadedFileNotFoundError(name)
    if len(matches) > 1:
        logger.debug("%d remote files are named '%s'", len(matches), name)
    return reduce(newer_upload, matches)


def fetch_uploaded(store: RemoteStore, name: str, root: str = UPLOAD_ROOT) -> RemoteFile:
    """List the upload root afresh and select the uploaded file."""
    listing = store.list_files(root)
    return select_uploaded(listing.files, name)


def resolve_destination(store: RemoteStore, path: str) -> int:
    """Return the folder id of a remote path.

    Raises:
        RemoteServiceError: If the path cannot be listed
    """
    listing = store.list_files(path)
    return listing.current_folder.folder_id


def move_to_destination(store: RemoteStore, code: str, folder_id: int) -> int:
    """Move one remote file into a folder.

    Failures are not retried.
    """
    moved = store.move_files([code], folder_id)
    logger.info("Moved '%s' to folder %s", code, folder_id)
    return moved

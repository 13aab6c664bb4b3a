"""Release pipeline.

One file goes through: classify -> compose name -> retitle -> upload ->
reconcile -> move. Files of a batch are processed one after the other; a
failure stops the current file only.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from mkvrelease import mkvtoolnix
from mkvrelease.classifier import classify
from mkvrelease.errors import NotMatroskaError, ReleaseError
from mkvrelease.models import ContainerProfile
from mkvrelease.remote import (
    RemoteStore,
    fetch_uploaded,
    move_to_destination,
    resolve_destination,
)
from mkvrelease.title import ContentKind, compose_name
from mkvrelease.utils.episode import extract_episode
from mkvrelease.utils.links import parse_file_code

logger = logging.getLogger(__name__)

MATROSKA_EXTENSION = ".mkv"


@dataclass
class ReleaseRequest:
    """User input shared by every file of a batch."""

    kind: ContentKind
    title: str
    languages: str = ""
    sources: str = ""


@dataclass
class ReleaseResult:
    """Outcome of a released file."""

    name: str
    code: str
    folder_id: int


@dataclass
class BatchReport:
    """Outcome of a batch."""

    results: list[ReleaseResult]
    failures: dict[str, ReleaseError]

    @property
    def ok(self) -> bool:
        return not self.failures


def ensure_matroska(name: str) -> None:
    """Raise NotMatroskaError unless the name ends with .mkv."""
    if not name.endswith(MATROSKA_EXTENSION):
        raise NotMatroskaError(name)


def local_file_name(name: str) -> str:
    """Return a remote name usable as a file name inside the download directory.

    Raises:
        ReleaseError: If the name has a path component
    """
    if os.path.basename(name) != name or name in (os.curdir, os.pardir) or "\\" in name:
        raise ReleaseError(f"Refusing to download '{name}': the remote name contains a path")
    return name


def prepare_local_dir(path: str) -> None:
    """Create the download directory if needed.

    Raises:
        ReleaseError: If the path exists and is not a directory
    """
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise ReleaseError(f"The local path '{path}' is not a usable directory: {e}") from e


def probe(path: str) -> ContainerProfile:
    """Read and classify the metadata of a local container."""
    return classify(mkvtoolnix.identify(path))


def name_release(
    path: str, file_name: str, request: ReleaseRequest
) -> tuple[str, ContainerProfile]:
    """Compose the release name of a local file.

    Args:
        path: Path to the container
        file_name: Name the episode designator is read from
        request: Title and hints

    Returns:
        Tuple of (release name, ContainerProfile)
    """
    episode = extract_episode(file_name) if request.kind == ContentKind.SHOW else None
    profile = probe(path)
    name = compose_name(
        request.kind,
        request.title,
        profile,
        langs=request.languages,
        sources=request.sources,
        episode=episode,
    )
    return name, profile


def generate_name(path: str, file_name: str, request: ReleaseRequest) -> str:
    """Compose the release name of a local file."""
    return name_release(path, file_name, request)[0]


def publish(store: RemoteStore, path: str, name: str, destination: str) -> ReleaseResult:
    """Upload a retitled file and move it into the destination folder."""
    logger.info("Uploading '%s'", name)
    store.upload_file(path, name)

    uploaded = fetch_uploaded(store, name)
    folder_id = resolve_destination(store, destination)
    move_to_destination(store, uploaded.code, folder_id)
    return ReleaseResult(name=name, code=uploaded.code, folder_id=folder_id)


def upload_file(
    store: RemoteStore, path: str, request: ReleaseRequest, destination: str
) -> ReleaseResult:
    """Name, retitle, upload and file away a local container.

    Raises:
        ReleaseError: If any step fails
    """
    file_name = os.path.basename(path)
    ensure_matroska(file_name)

    name = generate_name(path, file_name, request)
    mkvtoolnix.set_title(path, name)
    return publish(store, path, name, destination)


def backup_link(
    store: RemoteStore,
    link: str,
    request: ReleaseRequest,
    local_dir: str,
    destination: str,
) -> ReleaseResult:
    """Download a shared file, then release it like a local one.

    The episode designator of a show is checked against the remote name
    before anything is downloaded.

    Raises:
        ReleaseError: If any step fails
    """
    code = parse_file_code(link)
    remote = store.link_info(code)
    ensure_matroska(remote.name)

    if request.kind == ContentKind.SHOW:
        extract_episode(remote.name)

    file_name = local_file_name(remote.name)
    url = store.download_url(code)
    prepare_local_dir(local_dir)
    path = os.path.join(local_dir, file_name)
    store.download_file(url, path)

    name = generate_name(path, remote.name, request)
    mkvtoolnix.set_title(path, name)
    return publish(store, path, name, destination)


def run_batch(items: Iterable[str], action: Callable[[str], ReleaseResult]) -> BatchReport:
    """Apply an action to each item, continuing past failures.

    Args:
        items: Paths or links
        action: Releases one item

    Returns:
        BatchReport with results and per-item failures
    """
    results: list[ReleaseResult] = []
    failures: dict[str, ReleaseError] = {}

    for item in items:
        item = item.strip()
        try:
            results.append(action(item))
        except ReleaseError as e:
            logger.error("Failed to release %s: %s", item, e)
            failures[item] = e

    return BatchReport(results=results, failures=failures)

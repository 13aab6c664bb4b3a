"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
import shutil
from collections.abc import Callable
from typing import Any

import pytest

from mkvrelease.errors import RemoteServiceError
from mkvrelease.models import RemoteFile, RemoteFolder, RemoteLink, RemoteListing
from mkvrelease.remote import RemoteStore


def command_exists(cmd: str) -> bool:
    """Check if a command exists in PATH."""
    return shutil.which(cmd) is not None


@pytest.fixture
def has_mkvtoolnix() -> bool:
    """Check if mkvmerge and mkvpropedit are available."""
    return command_exists("mkvmerge") and command_exists("mkvpropedit")


def track(kind: str, codec: str, pixels: str | None = None) -> dict[str, Any]:
    """Build one track object as printed by mkvmerge -J."""
    properties: dict[str, Any] = {"language": "und"}
    if pixels is not None:
        properties["pixel_dimensions"] = pixels
    return {"codec": codec, "id": 0, "type": kind, "properties": properties}


@pytest.fixture
def mkv_json() -> Callable[..., str]:
    """Factory for mkvmerge -J output from track dicts."""

    def build(*tracks: dict[str, Any]) -> str:
        return json.dumps(
            {
                "container": {"recognized": True, "supported": True, "type": "Matroska"},
                "file_name": "movie.mkv",
                "tracks": list(tracks),
            }
        )

    return build


@pytest.fixture
def hd_json(mkv_json: Callable[..., str]) -> str:
    """A typical 1080p release with two audio tracks and subtitles."""
    return mkv_json(
        track("video", "AVC/H.264/MPEG-4p10", "1920x1080"),
        track("audio", "E-AC-3"),
        track("audio", "AC-3"),
        track("subtitles", "SubRip/SRT"),
    )


class MemoryStore(RemoteStore):
    """In-memory remote store used by pipeline tests."""

    name = "memory"

    def __init__(self, folders: dict[str, int] | None = None):
        self.folders = folders or {"//": 1}
        self.files: list[RemoteFile] = []
        self.links: dict[str, RemoteLink] = {}
        self.blobs: dict[str, bytes] = {}
        self.uploads: list[tuple[str, str]] = []
        self.moves: list[tuple[list[str], int]] = []
        self.downloads: list[tuple[str, str]] = []
        self._counter = 0

    def add_file(self, name: str, created: str | None) -> RemoteFile:
        self._counter += 1
        record = RemoteFile(name=name, created=created, code=f"code{self._counter:08d}")
        self.files.append(record)
        return record

    def list_files(self, path: str) -> RemoteListing:
        if path not in self.folders:
            raise RemoteServiceError(f"list files in '{path}'", "Folder not found")
        return RemoteListing(
            current_folder=RemoteFolder(folder_id=self.folders[path], name=path),
            files=list(self.files) if path == "//" else [],
        )

    def move_files(self, codes: list[str], folder_id: int) -> int:
        self.moves.append((codes, folder_id))
        return len(codes)

    def upload_file(self, path: str, name: str) -> None:
        self.uploads.append((path, name))
        self.add_file(name, "2024-06-01 12:00:00")

    def link_info(self, code: str) -> RemoteLink:
        if code not in self.links:
            raise RemoteServiceError(f"retrieve information for '{code}'", "file not found")
        return self.links[code]

    def download_url(self, code: str) -> str:
        return f"https://www1.example.test/dl/{code}"

    def download_file(self, url: str, dest: str) -> None:
        self.downloads.append((url, dest))
        code = url.rsplit("/", 1)[-1]
        with open(dest, "wb") as f:
            f.write(self.blobs.get(code, b"\x1a\x45\xdf\xa3"))


@pytest.fixture
def memory_store() -> MemoryStore:
    """Empty in-memory store with the root and a //Films folder."""
    return MemoryStore(folders={"//": 1, "//Films": 42})

"""Base class for remote storage services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from mkvrelease.models import RemoteLink, RemoteListing


class RemoteStore(ABC):
    """Abstract base class for remote storage services.

    A store is passed explicitly to the pipeline functions; nothing in
    mkvrelease keeps a global client.

    Subclasses should implement:
    - list_files(): List one remote folder
    - move_files(): Move files into a folder
    - upload_file(): Upload a local file under a given name
    - link_info(): Resolve a file code to its name
    - download_url(): Get a direct download link
    - download_file(): Download a direct link to a local path
    """

    name: ClassVar[str] = "base"

    @abstractmethod
    def list_files(self, path: str) -> RemoteListing:
        """List files and folders under a remote path.

        Raises:
            RemoteServiceError: If the path cannot be listed
        """

    @abstractmethod
    def move_files(self, codes: list[str], folder_id: int) -> int:
        """Move files to a folder.

        Returns:
            Number of files moved
        """

    @abstractmethod
    def upload_file(self, path: str, name: str) -> None:
        """Upload a local file, naming it ``name`` on the remote."""

    @abstractmethod
    def link_info(self, code: str) -> RemoteLink:
        """Return the remote file behind a file code."""

    @abstractmethod
    def download_url(self, code: str) -> str:
        """Return a direct download link for a file code."""

    @abstractmethod
    def download_file(self, url: str, dest: str) -> None:
        """Download a direct link to ``dest``."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"

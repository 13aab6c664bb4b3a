"""Uptobox REST API client.

Requirements:
- Uptobox API token (set via MKVRELEASE_API_KEY env var or config)
- httpx library (pip install httpx)

Every API answer is wrapped as ``{"statusCode": 0, "message": ..., "data": ...}``;
a non-zero statusCode is an error.

Reference:
https://docs.uptobox.com/
"""

from __future__ import annotations

import logging
import os
from typing import Any, ClassVar

import httpx
from pydantic import ValidationError

from mkvrelease.errors import RemoteServiceError
from mkvrelease.models import RemoteLink, RemoteListing

from .base import RemoteStore

logger = logging.getLogger(__name__)

# InvalidURL and StreamError do not derive from httpx.HTTPError
TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError)


class UptoboxClient(RemoteStore):
    """Remote store backed by the Uptobox API.

    The underlying httpx.Client can be injected, which is how tests plug in
    an httpx.MockTransport.
    """

    name: ClassVar[str] = "uptobox"

    API_URL = "https://uptobox.com/api"
    PAGE_SIZE = 100
    CHUNK_SIZE = 1024 * 1024
    MIME_TYPE = "video/x-matroska"

    def __init__(self, token: str, timeout: float = 300, client: httpx.Client | None = None):
        self.token = token
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> UptoboxClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(self, operation: str, method: str, endpoint: str, **kwargs: Any) -> Any:
        """Call an API endpoint and return its ``data`` member.

        Raises:
            RemoteServiceError: On transport errors, HTTP errors or a
                non-zero statusCode
        """
        try:
            response = self._client.request(method, f"{self.API_URL}/{endpoint}", **kwargs)
            response.raise_for_status()
            payload = response.json()
        except TRANSPORT_ERRORS as e:
            raise RemoteServiceError(operation, str(e)) from e
        except ValueError as e:
            raise RemoteServiceError(operation, f"invalid JSON response: {e}") from e

        if not isinstance(payload, dict):
            raise RemoteServiceError(operation, "unexpected response")
        if payload.get("statusCode") != 0:
            message = payload.get("message") or "unknown error"
            detail = payload.get("data")
            raise RemoteServiceError(operation, f"{message}: {detail}" if detail else message)
        return payload.get("data")

    def list_files(self, path: str) -> RemoteListing:
        """List a remote folder, following every page."""
        operation = f"list files in '{path}'"
        offset = 0
        listing: RemoteListing | None = None

        while True:
            data = self._request(
                operation,
                "GET",
                "user/files",
                params={
                    "token": self.token,
                    "path": path,
                    "limit": self.PAGE_SIZE,
                    "offset": offset,
                },
            )
            try:
                page = RemoteListing.model_validate(data)
            except ValidationError as e:
                raise RemoteServiceError(operation, f"unexpected listing: {e}") from e

            if listing is None:
                listing = page
            else:
                listing.files.extend(page.files)

            offset += self.PAGE_SIZE
            if offset >= page.page_count * self.PAGE_SIZE or not page.files:
                return listing

    def move_files(self, codes: list[str], folder_id: int) -> int:
        """Move files to a folder and return how many moved."""
        data = self._request(
            f"move {', '.join(codes)} to folder {folder_id}",
            "PATCH",
            "user/files",
            json={
                "token": self.token,
                "file_codes": ",".join(codes),
                "destination_fld_id": folder_id,
                "action": "move",
            },
        )
        return int((data or {}).get("updated", 0))

    def get_upload_url(self) -> str:
        """Return the upload server URL for this account."""
        data = self._request("fetch an upload link", "GET", "upload", params={"token": self.token})
        link = (data or {}).get("uploadLink")
        if not link:
            raise RemoteServiceError("fetch an upload link", "no upload link in response")
        # The API hands out protocol-relative links ("//www1.uptobox.com/...")
        if link.startswith("//"):
            link = f"https:{link}"
        return link

    def upload_file(self, path: str, name: str) -> None:
        """Upload a local file as a multipart form."""
        url = self.get_upload_url()
        logger.info("Uploading '%s' as '%s'", path, name)

        try:
            with open(path, "rb") as f:
                response = self._client.post(url, files={"file": (name, f, self.MIME_TYPE)})
            response.raise_for_status()
        except OSError as e:
            raise RemoteServiceError(f"upload '{path}'", f"cannot read file: {e}") from e
        except TRANSPORT_ERRORS as e:
            raise RemoteServiceError(f"upload '{name}'", str(e)) from e

    def link_info(self, code: str) -> RemoteLink:
        """Return name and size of the file behind a code."""
        operation = f"retrieve information for '{code}'"
        data = self._request(operation, "GET", "link/info", params={"fileCodes": code})
        entries = (data or {}).get("list") or []
        if not entries:
            raise RemoteServiceError(operation, "file not found")

        entry = entries[0]
        if entry.get("error"):
            error = entry["error"]
            message = error.get("message") if isinstance(error, dict) else error
            raise RemoteServiceError(operation, str(message))
        try:
            return RemoteLink.model_validate(entry)
        except ValidationError as e:
            raise RemoteServiceError(operation, f"unexpected link information: {e}") from e

    def download_url(self, code: str) -> str:
        """Return a direct download link.

        Free accounts get a waiting token instead of a link, which is
        reported as an error.
        """
        operation = f"fetch the download link for '{code}'"
        data = self._request(operation, "GET", "link", params={"token": self.token, "file_code": code})
        link = (data or {}).get("dlLink")
        if not link:
            raise RemoteServiceError(operation, "a premium account is needed to download files")
        return link

    def download_file(self, url: str, dest: str) -> None:
        """Stream a direct link to a local file."""
        logger.info("Downloading '%s' to '%s'", url, dest)
        downloaded = 0
        try:
            with self._client.stream("GET", url) as response:
                response.raise_for_status()
                with open(dest, "wb") as f:
                    for chunk in response.iter_bytes(self.CHUNK_SIZE):
                        f.write(chunk)
                        downloaded += len(chunk)
        except TRANSPORT_ERRORS as e:
            raise RemoteServiceError(f"download '{url}'", str(e)) from e
        except OSError as e:
            raise RemoteServiceError(f"download '{url}'", f"cannot write '{dest}': {e}") from e

        logger.info("Downloaded %d bytes to '%s'", downloaded, os.path.abspath(dest))

"""Models for remote storage listings."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# Format of file_created in Uptobox listings
CREATED_FORMAT = "%Y-%m-%d %H:%M:%S"


class RemoteFile(BaseModel):
    """A file entry from a remote listing.

    Several entries may share the same name when a file was uploaded more
    than once.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = Field(alias="file_name")
    created: str | None = Field(default=None, alias="file_created")
    code: str = Field(alias="file_code")

    @property
    def created_at(self) -> datetime | None:
        """Parsed creation timestamp, or None when it does not parse."""
        try:
            return datetime.strptime(self.created, CREATED_FORMAT)
        except (ValueError, TypeError):
            return None


class RemoteFolder(BaseModel):
    """A folder entry from a remote listing."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    folder_id: int = Field(alias="fld_id")
    name: str | None = Field(default=None, alias="fld_name")
    path: str | None = Field(default=None, alias="fullPath")


class RemoteListing(BaseModel):
    """Content of one remote folder."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    current_folder: RemoteFolder = Field(alias="currentFolder")
    files: list[RemoteFile] = Field(default_factory=list)
    folders: list[RemoteFolder] = Field(default_factory=list)
    page_count: int = Field(default=1, alias="pageCount")


class RemoteLink(BaseModel):
    """File information returned for a public link."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    code: str = Field(alias="file_code")
    name: str = Field(alias="file_name")
    size: int | None = Field(default=None, alias="file_size")

"""Data model for items in a shared OneDrive folder tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, Optional, Union


@dataclass(slots=True, frozen=True)
class ParentReference:
    """
    Parent information reported for a folder.

    Only built when the API response carries `parentReference.id`; the share
    root usually lacks it, in which case the folder has no ParentReference.
    """

    id: str
    drive_id: Optional[str] = None
    drive_type: Optional[str] = None
    name: Optional[str] = None
    path: Optional[str] = None
    share_id: Optional[str] = None


@dataclass(slots=True)
class OneDriveFile:
    """
    A file (leaf item) in a shared folder.

    Notes:
        - Image fields are None unless the API reported an `image` facet.
        - Records are plain values; fetching the same file twice yields two
          independent instances.
    """

    id: str
    created_by_user: str
    created_by_user_id: str
    created_date_time: datetime
    last_modified_by_user: str
    last_modified_by_user_id: str
    last_modified_date_time: datetime
    name: str
    parent_id: str
    size: int
    web_url: str
    download_url: str
    sha1_hash: str
    mime_type: str

    file_ext: Optional[str] = None
    image_height: Optional[int] = None
    image_width: Optional[int] = None

    @property
    def is_image(self) -> bool:
        return self.file_ext == "image"


@dataclass(slots=True)
class OneDriveFolder:
    """
    A folder, possibly with one or more levels of children materialized.

    `child_count` is what the server reported and is independent of how
    many children were actually fetched into `child_folders`/`child_files`.
    """

    id: str
    created_by_user: str
    created_by_user_id: str
    created_date_time: datetime
    last_modified_by_user: str
    last_modified_by_user_id: str
    last_modified_date_time: datetime
    name: str
    size: int
    web_url: str
    child_count: int

    child_folders: list[OneDriveFolder] = field(default_factory=list)
    child_files: list[OneDriveFile] = field(default_factory=list)
    parent_reference: Optional[ParentReference] = None
    shared_effective_roles: Optional[str] = None

    def iter_folders(self) -> Iterator[OneDriveFolder]:
        return iter(self.child_folders)

    def iter_files(self) -> Iterator[OneDriveFile]:
        return iter(self.child_files)


Item = Union[OneDriveFile, OneDriveFolder]


def walk(folder: OneDriveFolder) -> Iterator[tuple[str, Item]]:
    """
    Yield `(path, item)` for every materialized descendant of folder.

    Depth-first; at each level files come before subfolders, both in source
    order. `path` is the slash-joined chain of names below `folder` (the
    starting folder's own name is not included).
    """
    yield from _walk(folder, "")


def _walk(folder: OneDriveFolder, prefix: str) -> Iterator[tuple[str, Item]]:
    for f in folder.child_files:
        yield _join(prefix, f.name), f
    for sub in folder.child_folders:
        path = _join(prefix, sub.name)
        yield path, sub
        yield from _walk(sub, path)


def _join(prefix: str, name: str) -> str:
    return f"{prefix}/{name}" if prefix else name

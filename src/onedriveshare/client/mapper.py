"""JSON item -> OneDriveFile / OneDriveFolder mapping (internal use only)."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from onedriveshare.errors import MalformedResponseError
from onedriveshare.models import OneDriveFile, OneDriveFolder, ParentReference
from onedriveshare.util.time import parse_rfc3339

LISTING_KEY: str = "value"
INLINE_CHILDREN_KEY: str = "children"
FOLDER_FACET: str = "folder"
IMAGE_FACET: str = "image"
SHARED_FACET: str = "shared"


def map_file(data: Any) -> OneDriveFile:
    """
    Map one JSON item to a OneDriveFile.

    Raises:
        MalformedResponseError: if any mandatory key path is missing, or a
            value has the wrong type.
    """
    _ensure_object(data, "<item>")

    file_ext: Optional[str] = None
    image_height: Optional[int] = None
    image_width: Optional[int] = None
    if IMAGE_FACET in data:
        image = data[IMAGE_FACET]
        _ensure_object(image, IMAGE_FACET)
        file_ext = "image"
        image_height = _optional_int(image, "image.height", "height")
        image_width = _optional_int(image, "image.width", "width")

    return OneDriveFile(
        id=_str(data, "id"),
        created_by_user=_str(data, "createdBy", "user", "displayName"),
        created_by_user_id=_str(data, "createdBy", "user", "id"),
        created_date_time=_timestamp(data, "createdDateTime"),
        last_modified_by_user=_str(data, "lastModifiedBy", "user", "displayName"),
        last_modified_by_user_id=_str(data, "lastModifiedBy", "user", "id"),
        last_modified_date_time=_timestamp(data, "lastModifiedDateTime"),
        name=_str(data, "name"),
        parent_id=_str(data, "parentReference", "id"),
        size=_int(data, "size"),
        web_url=_str(data, "webUrl"),
        download_url=_str(data, "@content.downloadUrl"),
        sha1_hash=_str(data, "file", "hashes", "sha1Hash"),
        mime_type=_str(data, "file", "mimeType"),
        file_ext=file_ext,
        image_height=image_height,
        image_width=image_width,
    )


def map_folder(data: Any) -> OneDriveFolder:
    """
    Map one JSON item to a OneDriveFolder without children.

    parentReference is optional as a whole: it is only mapped when it carries
    an `id`. `shared.effectiveRoles` is only read when `shared` is present.
    """
    _ensure_object(data, "<item>")

    return OneDriveFolder(
        id=_str(data, "id"),
        created_by_user=_str(data, "createdBy", "user", "displayName"),
        created_by_user_id=_str(data, "createdBy", "user", "id"),
        created_date_time=_timestamp(data, "createdDateTime"),
        last_modified_by_user=_str(data, "lastModifiedBy", "user", "displayName"),
        last_modified_by_user_id=_str(data, "lastModifiedBy", "user", "id"),
        last_modified_date_time=_timestamp(data, "lastModifiedDateTime"),
        name=_str(data, "name"),
        size=_int(data, "size"),
        web_url=_str(data, "webUrl"),
        child_count=_int(data, FOLDER_FACET, "childCount"),
        parent_reference=_parent_reference(data),
        shared_effective_roles=_shared_roles(data),
    )


def map_full_folder(data: Any) -> OneDriveFolder:
    """Map an `?expand=children` document: the folder plus its inline children."""
    folder = map_folder(data)
    folder.child_folders = extract_folders(data, key=INLINE_CHILDREN_KEY)
    folder.child_files = extract_files(data, key=INLINE_CHILDREN_KEY)
    return folder


def extract_folders(data: Any, *, key: str = LISTING_KEY) -> list[OneDriveFolder]:
    """Map the entries of data[key] that carry a `folder` facet, in order."""
    return [map_folder(item) for item in _entries(data, key) if FOLDER_FACET in item]


def extract_files(data: Any, *, key: str = LISTING_KEY) -> list[OneDriveFile]:
    """Map the entries of data[key] that lack a `folder` facet, in order."""
    return [map_file(item) for item in _entries(data, key) if FOLDER_FACET not in item]


# ----------------------------
# Internals
# ----------------------------
def _entries(data: Any, key: str) -> list[dict[str, Any]]:
    _ensure_object(data, "<listing>")
    if key not in data:
        return []
    items = data[key]
    if not isinstance(items, list):
        raise MalformedResponseError(
            "Listing is not an array",
            details={"path": key, "type": type(items).__name__},
        )
    for index, item in enumerate(items):
        _ensure_object(item, f"{key}[{index}]")
    return items


def _lookup(data: dict[str, Any], *keys: str) -> Any:
    current: Any = data
    for depth, key in enumerate(keys):
        if not isinstance(current, dict) or key not in current:
            raise MalformedResponseError(
                "Missing mandatory field",
                details={"path": ".".join(keys[: depth + 1])},
            )
        current = current[key]
    return current


def _str(data: dict[str, Any], *keys: str) -> str:
    value = _lookup(data, *keys)
    if not isinstance(value, str):
        raise MalformedResponseError(
            "Expected a string",
            details={"path": ".".join(keys), "type": type(value).__name__},
        )
    return value


def _int(data: dict[str, Any], *keys: str) -> int:
    value = _lookup(data, *keys)
    return _as_int(value, ".".join(keys))


def _optional_int(data: dict[str, Any], path: str, key: str) -> Optional[int]:
    if key not in data:
        return None
    return _as_int(data[key], path)


def _as_int(value: Any, path: str) -> int:
    # bool is an int subclass; JSON true/false is not a size.
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedResponseError(
            "Expected an integer",
            details={"path": path, "type": type(value).__name__},
        )
    return value


def _timestamp(data: dict[str, Any], key: str) -> datetime:
    value = _str(data, key)
    try:
        return parse_rfc3339(value)
    except ValueError as exc:
        raise MalformedResponseError(
            "Invalid timestamp",
            details={"path": key, "value": value},
            cause=exc,
        ) from exc


def _parent_reference(data: dict[str, Any]) -> Optional[ParentReference]:
    ref = data.get("parentReference")
    if not isinstance(ref, dict) or "id" not in ref:
        return None

    return ParentReference(
        id=_str(data, "parentReference", "id"),
        drive_id=_optional_str(ref, "driveId"),
        drive_type=_optional_str(ref, "driveType"),
        name=_optional_str(ref, "name"),
        path=_optional_str(ref, "path"),
        share_id=_optional_str(ref, "shareId"),
    )


def _optional_str(data: dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return value if isinstance(value, str) else None


def _shared_roles(data: dict[str, Any]) -> Optional[str]:
    shared = data.get(SHARED_FACET)
    if not isinstance(shared, dict):
        return None

    roles = shared.get("effectiveRoles")
    if isinstance(roles, list):
        return ",".join(r for r in roles if isinstance(r, str))
    if isinstance(roles, str):
        return roles
    return None


def _ensure_object(value: Any, path: str) -> None:
    if not isinstance(value, dict):
        raise MalformedResponseError(
            "Expected a JSON object",
            details={"path": path, "type": type(value).__name__},
        )

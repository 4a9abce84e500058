"""JSON payload builders shaped like OneDrive shares API responses."""

from __future__ import annotations

from typing import Any, Optional

ACCESS_URL = "https://api.onedrive.com/v1.0/shares/u!aHR0cHM6Ly9wdWJsaWN1cmwuY29t/root"

_USER = {"user": {"displayName": "Jane Doe", "id": "U1"}}


def file_json(
    name: str,
    *,
    item_id: Optional[str] = None,
    image: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": item_id or f"F-{name}",
        "createdBy": _USER,
        "createdDateTime": "2019-12-24T10:00:00.123Z",
        "lastModifiedBy": _USER,
        "lastModifiedDateTime": "2019-12-25T11:30:00Z",
        "name": name,
        "parentReference": {"driveId": "D1", "driveType": "personal", "id": "P1"},
        "size": 1024,
        "webUrl": f"https://1drv.ms/{name}",
        "@content.downloadUrl": f"https://dl.example/{name}",
        "file": {"hashes": {"sha1Hash": "DA39A3EE"}, "mimeType": "application/pdf"},
    }
    if image is not None:
        data["image"] = image
    return data


def folder_json(
    name: str,
    *,
    item_id: Optional[str] = None,
    child_count: int = 0,
    parent_id: Optional[str] = "P1",
    shared: Optional[dict[str, Any]] = None,
    children: Optional[list[dict[str, Any]]] = None,
) -> dict[str, Any]:
    parent: dict[str, Any] = {"driveId": "D1", "driveType": "personal"}
    if parent_id is not None:
        parent.update(
            {"id": parent_id, "name": "Parent", "path": "/drive/root:", "shareId": "S1"}
        )
    data: dict[str, Any] = {
        "id": item_id or f"D-{name}",
        "createdBy": _USER,
        "createdDateTime": "2019-12-24T10:00:00Z",
        "lastModifiedBy": _USER,
        "lastModifiedDateTime": "2019-12-25T11:30:00Z",
        "name": name,
        "parentReference": parent,
        "size": 0,
        "webUrl": f"https://1drv.ms/{name}",
        "folder": {"childCount": child_count},
    }
    if shared is not None:
        data["shared"] = shared
    if children is not None:
        data["children"] = children
    return data


def listing(*items: dict[str, Any]) -> dict[str, Any]:
    return {"value": list(items)}


class StubTransport:
    """Serves canned JSON documents keyed by URL and records requested URLs."""

    def __init__(self, responses: dict[str, Any]) -> None:
        self.responses = responses
        self.requested: list[str] = []

    def get_json(self, url: str) -> Any:
        self.requested.append(url)
        if url not in self.responses:
            raise AssertionError(f"unexpected URL requested: {url}")
        value = self.responses[url]
        if isinstance(value, BaseException):
            raise value
        return value

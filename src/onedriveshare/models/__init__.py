"""Public model exports for onedriveshare."""

from __future__ import annotations

from .items import Item, OneDriveFile, OneDriveFolder, ParentReference, walk

__all__ = [
    "OneDriveFile",
    "OneDriveFolder",
    "ParentReference",
    "Item",
    "walk",
]

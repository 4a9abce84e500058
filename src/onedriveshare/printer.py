"""Plain-text rendering of a materialized folder tree."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from onedriveshare.models import OneDriveFolder

BRANCH = "├─ "
LAST = "└─ "
PIPE = "│  "
BLANK = "   "


def render_tree(folder: OneDriveFolder) -> list[str]:
    """
    Render folder and everything materialized below it, one line per node.

    Files are listed before subfolders at every level; order within each
    group follows the source order.

    Example:
        Test
        ├─ flag_DK.png
        ├─ SubFolder1
        │  ├─ newyear.jpeg
        │  └─ SubSubFolder
        │     └─ Guide_background.jpg
        └─ SubFolderEmpty
    """
    lines = [folder.name]
    _render_children(folder, "", lines)
    return lines


def print_tree(folder: OneDriveFolder, file: Optional[TextIO] = None) -> None:
    out = file if file is not None else sys.stdout
    for line in render_tree(folder):
        print(line, file=out)


def _render_children(folder: OneDriveFolder, prefix: str, lines: list[str]) -> None:
    entries: list[tuple[str, Optional[OneDriveFolder]]] = [
        (f.name, None) for f in folder.child_files
    ]
    entries.extend((sub.name, sub) for sub in folder.child_folders)

    for index, (name, sub) in enumerate(entries):
        last = index == len(entries) - 1
        lines.append(prefix + (LAST if last else BRANCH) + name)
        if sub is not None:
            _render_children(sub, prefix + (BLANK if last else PIPE), lines)

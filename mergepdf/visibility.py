"""Platform specific filtering of hidden and system directory entries."""

from __future__ import annotations

import os
import stat

_HIDDEN_OR_SYSTEM = stat.FILE_ATTRIBUTE_HIDDEN | stat.FILE_ATTRIBUTE_SYSTEM


def _is_visible_posix(entry: os.DirEntry) -> bool:
    """Dot-files are hidden on POSIX systems."""
    return not entry.name.startswith(".")


def _is_visible_windows(entry: os.DirEntry) -> bool:
    """Skip entries carrying the DOS hidden or system attribute."""
    try:
        attributes = entry.stat().st_file_attributes
    except OSError:
        return False
    return not attributes & _HIDDEN_OR_SYSTEM


if os.name == "nt":  # pragma: no cover - exercised on Windows only
    is_visible_and_ordinary = _is_visible_windows
else:
    is_visible_and_ordinary = _is_visible_posix


__all__ = ["is_visible_and_ordinary"]

"""Byte-wise lexicographic ordering for entry names."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .types import DirectoryEntry


def name_sort_key(name: str) -> bytes:
    """Return the filesystem-encoded bytes of ``name``.

    Comparing encoded bytes gives plain byte order with no locale collation,
    including for names that only decode through ``surrogateescape``.
    """
    return os.fsencode(name)


def sort_names(names: Iterable[str]) -> list[str]:
    """Return ``names`` sorted in byte-wise lexicographic order."""
    return sorted(names, key=name_sort_key)


def sort_entries(entries: list[DirectoryEntry], directories_last: bool = False) -> None:
    """Sort ``entries`` in place by byte-wise name order.

    With ``directories_last`` all non-directories come first, then all
    directories, each block in name order.
    """
    if directories_last:
        entries.sort(key=lambda entry: (entry.is_dir, name_sort_key(entry.name)))
        return
    entries.sort(key=lambda entry: name_sort_key(entry.name))


__all__ = [
    "name_sort_key",
    "sort_names",
    "sort_entries",
]

"""Domain model for one synchronous directory listing pass.

This package contains the non-output primitives:
- entry/metadata datatypes and the per-directory files/subdirectories group
- non-following metadata reads and directory scanning
- byte-wise lexicographic name ordering
"""

from __future__ import annotations

from .types import DirectoryEntry, EntryGroup, EntryMetadata
from .sort import name_sort_key, sort_entries, sort_names
from .fs import (
    PATH_SEPARATOR,
    base_name,
    is_hidden_path,
    join_entry_path,
    metadata_from_stat,
    read_metadata,
    report_metadata_error,
    scan_directory,
)

__all__ = [
    "DirectoryEntry",
    "EntryGroup",
    "EntryMetadata",
    "name_sort_key",
    "sort_entries",
    "sort_names",
    "PATH_SEPARATOR",
    "base_name",
    "is_hidden_path",
    "join_entry_path",
    "metadata_from_stat",
    "read_metadata",
    "report_metadata_error",
    "scan_directory",
]

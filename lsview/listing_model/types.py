"""Domain datatypes for one directory listing pass."""

from __future__ import annotations

import stat
from dataclasses import dataclass, field


@dataclass(frozen=True)
class EntryMetadata:
    """Snapshot of a non-following stat call plus the raw symlink target."""

    mode: int
    inode: int
    nlink: int
    uid: int
    gid: int
    size: int
    mtime: float
    link_target: str | None = None

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.mode)


@dataclass(frozen=True)
class DirectoryEntry:
    """One directory child observed during enumeration."""

    name: str
    path: str
    metadata: EntryMetadata

    @property
    def is_dir(self) -> bool:
        return self.metadata.is_dir


@dataclass
class EntryGroup:
    """Per-directory ``files`` and ``subdirectories`` collections.

    Directories are recorded in both lists: ``files`` drives name printing and
    ``subdirectories`` drives recursive descent.
    """

    files: list[DirectoryEntry] = field(default_factory=list)
    subdirectories: list[DirectoryEntry] = field(default_factory=list)

    def add(self, entry: DirectoryEntry) -> None:
        self.files.append(entry)
        if entry.is_dir:
            self.subdirectories.append(entry)

    def is_empty(self) -> bool:
        return not self.files


__all__ = [
    "EntryMetadata",
    "DirectoryEntry",
    "EntryGroup",
]

"""Filesystem metadata reads and directory scanning for listing passes."""

from __future__ import annotations

import logging
import os
import stat

from .sort import sort_entries
from .types import DirectoryEntry, EntryGroup, EntryMetadata

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"


def metadata_from_stat(path: str, st: os.stat_result) -> EntryMetadata:
    """Build ``EntryMetadata`` from a non-following stat of ``path``.

    Symlink targets are read raw; an unreadable target leaves ``link_target``
    unset rather than failing the whole entry.
    """
    link_target: str | None = None
    if stat.S_ISLNK(st.st_mode):
        try:
            link_target = os.readlink(path)
        except OSError:
            link_target = None
    return EntryMetadata(
        mode=st.st_mode,
        inode=st.st_ino,
        nlink=st.st_nlink,
        uid=st.st_uid,
        gid=st.st_gid,
        size=st.st_size,
        mtime=st.st_mtime,
        link_target=link_target,
    )


def read_metadata(path: str) -> EntryMetadata:
    """Return non-following metadata for ``path``; raises ``OSError`` on failure."""
    return metadata_from_stat(path, os.lstat(path))


def report_metadata_error(path: str, exc: OSError) -> None:
    """Log a per-entry metadata failure in ``perror`` style."""
    logger.error("%s: %s", path, exc.strerror or exc)


def base_name(path: str) -> str:
    """Return the final ``/``-separated segment of ``path``."""
    return path.rpartition(PATH_SEPARATOR)[2]


def is_hidden_path(path: str) -> bool:
    """Return whether ``path`` names a hidden entry.

    Only paths with a separator are considered; a bare top-level argument is
    never hidden.
    """
    _head, sep, tail = path.rpartition(PATH_SEPARATOR)
    return bool(sep) and tail.startswith(".")


def join_entry_path(directory: str, name: str) -> str:
    return os.path.join(directory, name)


def scan_directory(directory: str) -> tuple[EntryGroup | None, OSError | None]:
    """Enumerate ``directory`` into a sorted ``EntryGroup``.

    ``files`` lists non-directories before directories so the two never
    interleave when printed.

    Returns ``(group, open_error)``. ``open_error`` is set, and ``group`` is
    ``None``, when the directory itself cannot be opened. Entries whose
    metadata cannot be read are reported and skipped.
    """
    group = EntryGroup()
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                if child.name in (".", ".."):
                    continue
                child_path = join_entry_path(directory, child.name)
                try:
                    metadata = metadata_from_stat(child_path, child.stat(follow_symlinks=False))
                except OSError as exc:
                    report_metadata_error(child_path, exc)
                    continue
                group.add(DirectoryEntry(name=child.name, path=child_path, metadata=metadata))
    except OSError as exc:
        return None, exc

    sort_entries(group.files, directories_last=True)
    sort_entries(group.subdirectories)
    logger.debug(
        "scanned %s: %d entries, %d subdirectories",
        directory,
        len(group.files),
        len(group.subdirectories),
    )
    return group, None


__all__ = [
    "PATH_SEPARATOR",
    "metadata_from_stat",
    "read_metadata",
    "report_metadata_error",
    "base_name",
    "is_hidden_path",
    "join_entry_path",
    "scan_directory",
]

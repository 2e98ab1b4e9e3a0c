"""Format and print one listing line per entry.

Short format is the base name only. Long format (``-l``) is a fixed-width
left-justified record: mode, link count, owner, group, size, mtime, name and,
for symlinks, ``-> target``. Inode numbers (``-i``) prefix either format.
"""

from __future__ import annotations

import grp
import pwd
import stat
import sys
import time
from functools import lru_cache
from typing import TextIO

from .listing_model import EntryMetadata, base_name, is_hidden_path, read_metadata, report_metadata_error
from .options import ListingOptions

INODE_WIDTH = 10
MODE_WIDTH = 11
NLINK_WIDTH = 6
OWNER_WIDTH = 15
GROUP_WIDTH = 15
SIZE_WIDTH = 10
MTIME_FORMAT = "%b %d %Y %H:%M"

_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def type_glyph(mode: int) -> str:
    if stat.S_ISREG(mode):
        return "-"
    if stat.S_ISDIR(mode):
        return "d"
    if stat.S_ISLNK(mode):
        return "l"
    return "?"


def format_mode(mode: int) -> str:
    """Return the 10-character ``drwxr-xr-x`` style mode string."""
    permissions = "".join(glyph if mode & bit else "-" for bit, glyph in _PERMISSION_BITS)
    return type_glyph(mode) + permissions


@lru_cache(maxsize=None)
def user_name(uid: int) -> str:
    """Resolve ``uid`` to a login name, falling back to the numeric id."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


@lru_cache(maxsize=None)
def group_name(gid: int) -> str:
    """Resolve ``gid`` to a group name, falling back to the numeric id."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def format_mtime(mtime: float) -> str:
    """Format a modification time as ``Mon DD YYYY HH:MM`` in local time."""
    return time.strftime(MTIME_FORMAT, time.localtime(mtime))


def format_long_fields(path: str, metadata: EntryMetadata) -> str:
    """Build the long-format record for ``path`` without inode prefix."""
    line = (
        f"{format_mode(metadata.mode):<{MODE_WIDTH}} "
        f"{metadata.nlink:<{NLINK_WIDTH}} "
        f"{user_name(metadata.uid):<{OWNER_WIDTH}} "
        f"{group_name(metadata.gid):<{GROUP_WIDTH}} "
        f"{metadata.size:<{SIZE_WIDTH}} "
        f"{format_mtime(metadata.mtime)} "
        # no trailing space after the name on non-symlink lines
        f"{base_name(path)}"
    )
    if metadata.is_symlink and metadata.link_target is not None:
        line += f" -> {metadata.link_target}"
    return line


def format_entry_line(path: str, metadata: EntryMetadata, options: ListingOptions) -> str:
    """Return the full output line for one entry, without trailing newline."""
    prefix = f"{metadata.inode:<{INODE_WIDTH}} " if options.show_index else ""
    if options.show_details:
        return prefix + format_long_fields(path, metadata)
    return prefix + base_name(path)


def print_entry(full_path: str, options: ListingOptions, out: TextIO | None = None) -> None:
    """Print one entry line, re-reading its metadata first.

    Hidden entries and entries whose metadata cannot be read print nothing;
    the latter are reported through logging.
    """
    stream = out if out is not None else sys.stdout
    try:
        metadata = read_metadata(full_path)
    except OSError as exc:
        report_metadata_error(full_path, exc)
        return
    if is_hidden_path(full_path):
        return
    stream.write(format_entry_line(full_path, metadata, options) + "\n")


__all__ = [
    "MTIME_FORMAT",
    "type_glyph",
    "format_mode",
    "user_name",
    "group_name",
    "format_mtime",
    "format_long_fields",
    "format_entry_line",
    "print_entry",
]

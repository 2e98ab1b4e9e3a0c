"""Depth-first directory listing with per-directory headers.

Each directory prints ``<path>:`` before its first entry, then every entry
(subdirectory names included) in byte-wise name order, files first and
subdirectories after. In recursive mode each subdirectory follows after a
blank line, walked depth-first in sorted sibling order from an explicit work
stack rather than Python call recursion.
"""

from __future__ import annotations

import enum
import logging
import os
import sys
from typing import TextIO

from .entry_printer import print_entry
from .listing_model import scan_directory
from .options import ListingOptions

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Error: Nonexistent files or directories"


class ListingStatus(enum.Enum):
    """Outcome of listing one command-line path."""

    OK = "ok"
    NOT_FOUND = "not_found"


def _write_directory(directory: str, options: ListingOptions, stream: TextIO) -> list[str] | None:
    """Print one directory's header and entries.

    Returns sorted subdirectory paths, or ``None`` when ``directory`` could
    not be opened (in which case nothing has been printed).
    """
    group, open_error = scan_directory(directory)
    if group is None:
        logger.debug("cannot open %s as directory: %s", directory, open_error)
        return None

    if not group.is_empty():
        stream.write(f"{directory}:\n")
    for entry in group.files:
        print_entry(entry.path, options, stream)
    return [entry.path for entry in group.subdirectories]


def list_directory(path: str, options: ListingOptions, out: TextIO | None = None) -> ListingStatus:
    """List ``path`` and, with ``options.recursive``, every directory below it.

    A path that cannot be opened as a directory but exists is printed as a
    single entry. A path that does not exist prints the not-found error and
    returns ``ListingStatus.NOT_FOUND`` immediately, including when a nested
    directory vanishes mid-walk.
    """
    stream = out if out is not None else sys.stdout
    pending = [path]
    is_root = True
    while pending:
        directory = pending.pop()
        if not is_root:
            stream.write("\n")
        is_root = False

        subdirectories = _write_directory(directory, options, stream)
        if subdirectories is None:
            if not os.path.exists(directory):
                stream.write(NOT_FOUND_MESSAGE + "\n")
                return ListingStatus.NOT_FOUND
            print_entry(directory, options, stream)
            continue

        if options.recursive:
            # reversed so the smallest name is popped first
            pending.extend(reversed(subdirectories))
    return ListingStatus.OK


__all__ = [
    "NOT_FOUND_MESSAGE",
    "ListingStatus",
    "list_directory",
]

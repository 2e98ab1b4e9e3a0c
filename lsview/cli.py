"""Command-line front door for lsview.

Parses ``-i``/``-l``/``-R`` flags, merges them with configured defaults, and
lists each path argument in order. A missing path or an unsupported flag ends
the run with exit status 1.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from . import config
from .lister import ListingStatus, list_directory
from .log import configure_logging
from .options import UnsupportedOptionError, parse_options

DEFAULT_PATH = "."


def _allow_undecodable_names(stream: object) -> None:
    """Let ``stream`` write names that ``os.fsdecode`` surrogate-escaped."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def main(argv: Sequence[str] | None = None) -> None:
    """Run one listing over ``argv`` (defaults to ``sys.argv[1:]``).

    Returns normally on success and raises ``SystemExit(1)`` on an unsupported
    option or a nonexistent path. Paths after a nonexistent one are skipped.
    """
    if argv is None:
        argv = sys.argv[1:]

    _allow_undecodable_names(sys.stdout)
    _allow_undecodable_names(sys.stderr)
    configure_logging(config.load_log_level())
    try:
        flags, paths = parse_options(argv)
    except UnsupportedOptionError as exc:
        sys.stdout.write(f"{exc}\n")
        raise SystemExit(1) from exc
    options = config.load_default_options().merged(flags)

    if not paths:
        if list_directory(DEFAULT_PATH, options, sys.stdout) is ListingStatus.NOT_FOUND:
            raise SystemExit(1)
        return

    for path in paths:
        status = list_directory(path, options, sys.stdout)
        if status is ListingStatus.NOT_FOUND:
            raise SystemExit(1)
        sys.stdout.write("\n")


if __name__ == "__main__":
    main()

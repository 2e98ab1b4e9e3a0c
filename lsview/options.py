"""Listing options and the single-letter flag grammar.

Flags are ``-`` tokens made of the letters ``i``, ``l`` and ``R``, possibly
combined (``-ilR``). Flag parsing stops at the first token that does not start
with ``-``; every later token is a path, even when it looks like a flag.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

UNSUPPORTED_OPTION_MESSAGE = "Error: Unsupported Option"

FLAG_FIELDS = {
    "i": "show_index",
    "l": "show_details",
    "R": "recursive",
}


class UnsupportedOptionError(ValueError):
    """Raised for a flag character outside ``FLAG_FIELDS``."""

    def __init__(self, flag: str) -> None:
        super().__init__(UNSUPPORTED_OPTION_MESSAGE)
        self.flag = flag


@dataclass(frozen=True)
class ListingOptions:
    """Immutable per-run configuration threaded through every listing call."""

    show_index: bool = False
    show_details: bool = False
    recursive: bool = False

    def merged(self, other: ListingOptions) -> ListingOptions:
        """Return options with every flag enabled in either ``self`` or ``other``."""
        return ListingOptions(
            show_index=self.show_index or other.show_index,
            show_details=self.show_details or other.show_details,
            recursive=self.recursive or other.recursive,
        )


def _is_flag_token(token: str) -> bool:
    return token.startswith("-")


def parse_options(argv: Sequence[str]) -> tuple[ListingOptions, list[str]]:
    """Split ``argv`` (without program name) into options and path arguments.

    Raises ``UnsupportedOptionError`` on the first unknown flag character.
    """
    options = ListingOptions()
    index = 0
    while index < len(argv) and _is_flag_token(argv[index]):
        for flag in argv[index][1:]:
            field_name = FLAG_FIELDS.get(flag)
            if field_name is None:
                raise UnsupportedOptionError(flag)
            options = replace(options, **{field_name: True})
        index += 1
    return options, list(argv[index:])


__all__ = [
    "UNSUPPORTED_OPTION_MESSAGE",
    "FLAG_FIELDS",
    "UnsupportedOptionError",
    "ListingOptions",
    "parse_options",
]

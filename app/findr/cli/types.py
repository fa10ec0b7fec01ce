"""Shared types for the findr command line."""

from enum import Enum

from findr.search.models import EntryType


class TypeChoice(str, Enum):
    """Entry type values accepted by --type."""

    FILE = "f"
    DIRECTORY = "d"
    SYMLINK = "l"

    @property
    def entry_type(self) -> EntryType:
        return _ENTRY_TYPES[self]


_ENTRY_TYPES: dict[TypeChoice, EntryType] = {
    TypeChoice.FILE: EntryType.FILE,
    TypeChoice.DIRECTORY: EntryType.DIRECTORY,
    TypeChoice.SYMLINK: EntryType.SYMLINK,
}


def to_entry_types(choices: list[TypeChoice] | None) -> set[EntryType]:
    """Map --type values to entry types.

    Args:
        choices: Values given on the command line, or None.

    Returns:
        Set of requested entry types (empty when none were given).
    """
    return {choice.entry_type for choice in choices or ()}

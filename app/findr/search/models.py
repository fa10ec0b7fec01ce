"""Domain models for filesystem traversal.

This module defines the entry classification and the observation
values produced while walking a directory tree.
"""

import stat
from dataclasses import dataclass
from enum import Enum


class EntryType(str, Enum):
    """Type of a filesystem entry, classified without following symlinks.

    Attributes:
        DIRECTORY: Directory.
        FILE: Regular file.
        SYMLINK: Symbolic link (never resolved to its target).
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"


def classify_mode(mode: int) -> EntryType | None:
    """Classify an ``lstat`` mode.

    Returns None for special files (FIFOs, sockets, device nodes).
    """
    if stat.S_ISLNK(mode):
        return EntryType.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryType.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryType.FILE
    return None


@dataclass(frozen=True, slots=True)
class WalkEntry:
    """A filesystem entry observed during a walk.

    Attributes:
        path: Path as reached from the root (root path joined with names).
        entry_type: Entry classification, None for special files.
        depth: Distance from the root (the root itself is 0).
    """

    path: str
    entry_type: EntryType | None
    depth: int = 0

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.depth < 0:
            msg = f"Depth must be non-negative, got {self.depth}"
            raise ValueError(msg)

    @property
    def is_dir(self) -> bool:
        return self.entry_type == EntryType.DIRECTORY


@dataclass(frozen=True, slots=True)
class WalkError:
    """A traversal failure that did not stop the walk.

    Attributes:
        path: Path that could not be read or classified.
        message: Human-readable description, e.g. ``"x: Permission denied"``.
    """

    path: str
    message: str

    def __str__(self) -> str:
        return self.message


WalkObservation = WalkEntry | WalkError

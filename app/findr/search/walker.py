"""Traversal engine.

Walks a directory tree depth-first, yielding one observation per entry.
Failures to read a root or a subdirectory are yielded as WalkError
values so that a single unreadable entry never ends the walk.
"""

import logging
import os
from collections.abc import Iterator

from findr.search.models import EntryType, WalkEntry, WalkError, WalkObservation, classify_mode

logger = logging.getLogger(__name__)


def describe_error(path: str, error: OSError) -> str:
    """Format an OSError as ``"<path>: <reason>"``."""
    reason = error.strerror or str(error)
    return f"{path}: {reason}"


def walk(root: str, *, max_depth: int | None = None) -> Iterator[WalkObservation]:
    """Walk the tree under root in pre-order.

    The root is yielded first, then every descendant. Children of a
    directory are visited in name order and the whole subtree of a
    directory is yielded before its next sibling. Symbolic links are
    reported but never followed.

    Args:
        root: Root path; existence is not checked beforehand.
        max_depth: Do not descend into directories at this depth.
            None means unlimited.

    Yields:
        WalkEntry for each observed entry, WalkError for each failure.
    """
    try:
        mode = os.lstat(root).st_mode
    except OSError as e:
        logger.debug("Cannot stat root %s: %s", root, e)
        yield WalkError(path=root, message=describe_error(root, e))
        return

    # Pending observations, next one on top
    stack: list[WalkObservation] = [WalkEntry(path=root, entry_type=classify_mode(mode))]

    while stack:
        observation = stack.pop()
        yield observation

        if not isinstance(observation, WalkEntry) or not observation.is_dir:
            continue
        if max_depth is not None and observation.depth >= max_depth:
            logger.debug("Not descending below max depth: %s", observation.path)
            continue

        try:
            children = _list_children(observation)
        except OSError as e:
            logger.debug("Cannot read directory %s: %s", observation.path, e)
            yield WalkError(path=observation.path, message=describe_error(observation.path, e))
            continue

        stack.extend(reversed(children))


def _list_children(parent: WalkEntry) -> list[WalkObservation]:
    """Read and classify the children of a directory, sorted by name.

    Args:
        parent: Directory entry to list.

    Returns:
        One observation per child. A child whose type cannot be read
        becomes a WalkError.

    Raises:
        OSError: If the directory itself cannot be read.
    """
    with os.scandir(parent.path) as it:
        dir_entries = sorted(it, key=lambda e: e.name)

    depth = parent.depth + 1
    children: list[WalkObservation] = []
    for dir_entry in dir_entries:
        path = os.path.join(parent.path, dir_entry.name)
        try:
            entry_type = _classify_dir_entry(dir_entry)
        except OSError as e:
            children.append(WalkError(path=path, message=describe_error(path, e)))
            continue
        children.append(WalkEntry(path=path, entry_type=entry_type, depth=depth))
    return children


def _classify_dir_entry(dir_entry: os.DirEntry[str]) -> EntryType | None:
    """Classify a scandir entry without following symlinks.

    Checks for symlinks first, since is_dir/is_file would otherwise
    follow them.
    """
    if dir_entry.is_symlink():
        return EntryType.SYMLINK
    if dir_entry.is_dir(follow_symlinks=False):
        return EntryType.DIRECTORY
    if dir_entry.is_file(follow_symlinks=False):
        return EntryType.FILE
    return classify_mode(dir_entry.stat(follow_symlinks=False).st_mode)

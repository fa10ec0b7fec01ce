"""Filter pipeline.

Pure predicates deciding whether an observed entry is reported. The
type and name predicates are independent and combined with AND.
"""

import os
import re
from collections.abc import Collection, Iterable

from findr.search.config import SearchConfig
from findr.search.models import EntryType, WalkEntry


def base_name(path: str) -> str:
    """Get the final component of a path.

    Trailing separators are ignored, so ``"dir/"`` gives ``"dir"``.
    When no component is left (``"/"``), the full path is returned.

    Args:
        path: Path as produced by the walk.

    Returns:
        Base name used for name matching.
    """
    name = os.path.basename(path.rstrip(os.sep))
    return name or path


def type_matches(entry: WalkEntry, entry_types: Collection[EntryType]) -> bool:
    """Check the entry type against the requested types (OR across types).

    An empty collection means no constraint.
    """
    if not entry_types:
        return True
    return entry.entry_type in entry_types


def name_matches(entry: WalkEntry, names: Iterable[re.Pattern[str]]) -> bool:
    """Check the entry base name against the name patterns (OR across patterns).

    Patterns match anywhere in the base name (``re.search``), not the
    whole string. No patterns means no constraint.
    """
    patterns = tuple(names)
    if not patterns:
        return True
    name = base_name(entry.path)
    return any(pattern.search(name) for pattern in patterns)


def entry_matches(entry: WalkEntry, config: SearchConfig) -> bool:
    """Check whether an entry passes both the type and the name filter."""
    return type_matches(entry, config.entry_types) and name_matches(entry, config.names)

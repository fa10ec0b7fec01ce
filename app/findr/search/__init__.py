"""Filesystem search.

This module provides the traversal engine, the entry filters and
the search configuration.
"""

from findr.search.config import (
    InvalidNameError,
    SearchConfig,
    SearchConfigError,
    build_config,
)
from findr.search.filters import base_name, entry_matches, name_matches, type_matches
from findr.search.finder import find
from findr.search.models import EntryType, WalkEntry, WalkError, WalkObservation
from findr.search.walker import walk

__all__ = [
    "EntryType",
    "InvalidNameError",
    "SearchConfig",
    "SearchConfigError",
    "WalkEntry",
    "WalkError",
    "WalkObservation",
    "base_name",
    "build_config",
    "entry_matches",
    "find",
    "name_matches",
    "type_matches",
    "walk",
]

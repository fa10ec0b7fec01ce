"""Search configuration.

Builds the immutable configuration for a search run from raw
command-line values. Name patterns are compiled eagerly so that an
invalid expression fails before any traversal starts.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from findr.search.models import EntryType

DEFAULT_PATH = "."


class SearchConfigError(Exception):
    """Base exception for search configuration errors."""


class InvalidNameError(SearchConfigError):
    """Raised when a --name value is not a valid regular expression."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(f'Invalid --name "{pattern}"')


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Validated bundle of roots and filters for one search run.

    Attributes:
        paths: Root paths, searched in order.
        names: Compiled name patterns; empty means no name constraint.
        entry_types: Requested entry types; empty means no type constraint.
        min_depth: Entries shallower than this are not reported.
        max_depth: Directories at this depth are not descended into (None = unlimited).
    """

    paths: tuple[str, ...]
    names: tuple[re.Pattern[str], ...] = ()
    entry_types: frozenset[EntryType] = frozenset()
    min_depth: int = 0
    max_depth: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration data after initialization."""
        if not self.paths:
            msg = "At least one search path is required"
            raise SearchConfigError(msg)
        if self.min_depth < 0:
            msg = f"--min-depth must be non-negative, got {self.min_depth}"
            raise SearchConfigError(msg)
        if self.max_depth is not None:
            if self.max_depth < 0:
                msg = f"--max-depth must be non-negative, got {self.max_depth}"
                raise SearchConfigError(msg)
            if self.min_depth > self.max_depth:
                msg = (
                    f"--min-depth ({self.min_depth}) cannot be greater than "
                    f"--max-depth ({self.max_depth})"
                )
                raise SearchConfigError(msg)


def compile_names(patterns: Iterable[str]) -> tuple[re.Pattern[str], ...]:
    """Compile name patterns, failing on the first invalid one.

    Args:
        patterns: Regular expression sources as given on the command line.

    Returns:
        Compiled patterns in the given order.

    Raises:
        InvalidNameError: If a pattern does not compile.
    """
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise InvalidNameError(pattern) from e
    return tuple(compiled)


def build_config(
    paths: Iterable[str] | None = None,
    names: Iterable[str] | None = None,
    entry_types: Iterable[EntryType] | None = None,
    *,
    min_depth: int = 0,
    max_depth: int | None = None,
) -> SearchConfig:
    """Build a SearchConfig from raw command-line values.

    Args:
        paths: Root paths. Defaults to the current directory when empty.
        names: Regular expressions matched against entry base names.
        entry_types: Entry types to report.
        min_depth: Minimum depth of reported entries.
        max_depth: Maximum descent depth (None = unlimited).

    Returns:
        Validated SearchConfig.

    Raises:
        InvalidNameError: If a name pattern is not a valid regular expression.
        SearchConfigError: If the depth bounds are inconsistent.
    """
    roots = tuple(paths or ()) or (DEFAULT_PATH,)
    return SearchConfig(
        paths=roots,
        names=compile_names(names or ()),
        entry_types=frozenset(entry_types or ()),
        min_depth=min_depth,
        max_depth=max_depth,
    )

"""Domain models for lls.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and a couple of derived properties.  They
carry zero I/O and zero dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Derived selections
# ---------------------------------------------------------------------------

class SortMode(Enum):
    """Ordering applied to the entry list before rendering."""

    NONE = "none"
    TIME = "time"
    SIZE = "size"


class Layout(Enum):
    """Output layout chosen by the renderer."""

    ACROSS = "across"
    ONE_PER_LINE = "one-per-line"
    COLUMNS = "columns"
    LONG = "long"


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Options:
    """Display options and target directory for a single invocation."""

    long_listing: bool = False
    """``-l``: type, size and modification time for every entry."""

    directories_only: bool = False
    """``-d``: keep only entries that are directories."""

    sort_by_time: bool = False
    """``-t``: most recently modified first."""

    sort_by_size: bool = False
    """``-s``: largest first."""

    one_column: bool = False
    """``-1``: one name per line."""

    multi_column: bool = False
    """``-C``: grid sized to the terminal width."""

    directory: str = "."
    """Directory to list."""

    @property
    def sort_mode(self) -> SortMode:
        """Effective sort mode.  Time sorting wins over size sorting."""
        if self.sort_by_time:
            return SortMode.TIME
        if self.sort_by_size:
            return SortMode.SIZE
        return SortMode.NONE

    @property
    def layout(self) -> Layout:
        """Effective layout: columns, then long, then one-per-line."""
        if self.multi_column:
            return Layout.COLUMNS
        if self.long_listing:
            return Layout.LONG
        if self.one_column:
            return Layout.ONE_PER_LINE
        return Layout.ACROSS


# ---------------------------------------------------------------------------
# Directory entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Entry:
    """A single member of the listed directory, read once from disk."""

    name: str
    """Base name of the entry."""

    is_dir: bool
    """Whether the entry is a directory."""

    size: int
    """Size in bytes as reported by the filesystem (also for directories)."""

    modified: float
    """Last modification time as a POSIX timestamp."""

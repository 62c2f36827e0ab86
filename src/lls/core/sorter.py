"""Pure ordering of directory entries.

Every function in this module is a **pure** transformation — no I/O,
no side effects.  ``sorted`` is stable, so entries with equal keys keep
their enumeration order.
"""

from __future__ import annotations

from collections.abc import Sequence

from lls.core.models import Entry, Options, SortMode


def sort_by_time(entries: Sequence[Entry]) -> list[Entry]:
    """Most recently modified first."""
    return sorted(entries, key=lambda entry: entry.modified, reverse=True)


def sort_by_size(entries: Sequence[Entry]) -> list[Entry]:
    """Largest first, using the reported size even for directories."""
    return sorted(entries, key=lambda entry: entry.size, reverse=True)


def sort_entries(entries: Sequence[Entry], options: Options) -> list[Entry]:
    """Return *entries* ordered according to ``options.sort_mode``.

    The input sequence is never modified; a new list is always returned.
    """
    mode = options.sort_mode
    if mode is SortMode.TIME:
        return sort_by_time(entries)
    if mode is SortMode.SIZE:
        return sort_by_size(entries)
    return list(entries)

"""Core listing service — enumeration, filtering and ordering.

This is the service class consumed by the CLI layer.  It depends on an
:class:`~lls.core.protocols.EntryProvider` injected at construction time,
keeping the core free of filesystem access.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``.
* Only :class:`~lls.exceptions.LlsError` subclasses escape.
* The provider is called exactly once per :meth:`ListingService.collect`.
"""

from __future__ import annotations

from collections.abc import Sequence

from lls.core.models import Entry, Options
from lls.core.protocols import EntryProvider
from lls.core.sorter import sort_entries
from lls.exceptions import DirectoryAccessError, LlsError


def filter_directories(entries: Sequence[Entry]) -> list[Entry]:
    """Keep only entries that are directories, preserving order."""
    return [entry for entry in entries if entry.is_dir]


class ListingService:
    """Stateless service producing the entry list for one invocation.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`EntryProvider` protocol.
    """

    def __init__(self, provider: EntryProvider) -> None:
        self._provider: EntryProvider = provider

    def collect(self, options: Options) -> list[Entry]:
        """Enumerate ``options.directory``, filter, and sort.

        Raises
        ------
        DirectoryAccessError
            If the directory cannot be enumerated.
        """
        entries = self._fetch(options.directory)
        if options.directories_only:
            entries = filter_directories(entries)
        return sort_entries(entries, options)

    def _fetch(self, directory: str) -> list[Entry]:
        """Call the provider and ensure only our exceptions escape."""
        try:
            return list(self._provider.list_entries(directory))
        except LlsError:
            raise
        except Exception as exc:
            raise DirectoryAccessError(
                f"cannot list directory '{directory}': {exc}",
            ) from exc

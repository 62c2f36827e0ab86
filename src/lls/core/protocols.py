"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from typing import Protocol

from lls.core.models import Entry
from lls.exceptions import LlsError


class EntryProvider(Protocol):
    """Contract for directory enumeration backends."""

    def list_entries(self, directory: str) -> list[Entry]:
        """Return the immediate children of *directory*.

        The order is whatever the backend yields natively.  Nothing is
        filtered, hidden files included.

        Raises
        ------
        DirectoryAccessError
            When the directory cannot be opened or iterated.
        """
        ...  # pragma: no cover


class WidthProvider(Protocol):
    """Callable returning the display width in columns."""

    def __call__(self) -> int:
        ...  # pragma: no cover


class ErrorReporter(Protocol):
    """Callable receiving a non-fatal error raised while rendering."""

    def __call__(self, error: LlsError) -> None:
        ...  # pragma: no cover

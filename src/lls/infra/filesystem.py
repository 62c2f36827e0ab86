"""Infrastructure: directory enumeration on the host filesystem.

Rules
-----
* One :func:`os.scandir` pass per listing — no recursion.
* Entries are statted once, at enumeration time.
* Every ``OSError`` that aborts enumeration is re-raised as
  :class:`~lls.exceptions.DirectoryAccessError`.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import os

from lls.core.models import Entry
from lls.exceptions import DirectoryAccessError


def is_valid_directory(path: str) -> bool:
    """Return ``True`` when *path* exists and is a directory."""
    return os.path.isdir(path)


def _entry_stat(dir_entry: os.DirEntry[str]) -> os.stat_result:
    """Stat the entry's target, or the link itself when the target is unusable."""
    try:
        return dir_entry.stat()
    except OSError:
        # Dangling or looping symlink.
        if not dir_entry.is_symlink():
            raise
        return dir_entry.stat(follow_symlinks=False)


def _entry_is_dir(dir_entry: os.DirEntry[str]) -> bool:
    try:
        return dir_entry.is_dir()
    except OSError:
        if not dir_entry.is_symlink():
            raise
        return False


def read_entry(dir_entry: os.DirEntry[str]) -> Entry:
    """Convert one :class:`os.DirEntry` into an :class:`Entry`."""
    stat_result = _entry_stat(dir_entry)
    return Entry(
        name=dir_entry.name,
        is_dir=_entry_is_dir(dir_entry),
        size=stat_result.st_size,
        modified=stat_result.st_mtime,
    )


class ScandirEntryProvider:
    """:class:`~lls.core.protocols.EntryProvider` backed by :func:`os.scandir`."""

    def list_entries(self, directory: str) -> list[Entry]:
        """Return the immediate children of *directory* in native order.

        Raises
        ------
        DirectoryAccessError
            If the directory cannot be opened, iterated, or one of its
            entries cannot be statted.
        """
        try:
            with os.scandir(directory) as iterator:
                return [read_entry(dir_entry) for dir_entry in iterator]
        except OSError as exc:
            reason = exc.strerror or str(exc)
            raise DirectoryAccessError(
                f"cannot open directory '{directory}': {reason}",
                hint="Check that the path still exists and that you may read it.",
            ) from exc

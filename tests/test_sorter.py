"""Tests for entry ordering (core/sorter.py).

Pure functions — no filesystem access.
"""

from __future__ import annotations

from lls.core.models import Entry, Options
from lls.core.sorter import sort_by_size, sort_by_time, sort_entries


def _entry(name: str, *, size: int = 0, modified: float = 0.0, is_dir: bool = False) -> Entry:
    return Entry(name=name, is_dir=is_dir, size=size, modified=modified)


def _names(entries: list[Entry]) -> list[str]:
    return [entry.name for entry in entries]


# ---------------------------------------------------------------------------
# Individual sorts
# ---------------------------------------------------------------------------

class TestSortByTime:
    def test_most_recent_first(self) -> None:
        entries = [
            _entry("old", modified=100.0),
            _entry("new", modified=300.0),
            _entry("mid", modified=200.0),
        ]
        assert _names(sort_by_time(entries)) == ["new", "mid", "old"]

    def test_idempotent(self) -> None:
        entries = [
            _entry("a", modified=5.0),
            _entry("b", modified=9.0),
            _entry("c", modified=1.0),
        ]
        once = sort_by_time(entries)
        assert sort_by_time(once) == once

    def test_ties_keep_enumeration_order(self) -> None:
        entries = [_entry("first", modified=1.0), _entry("second", modified=1.0)]
        assert _names(sort_by_time(entries)) == ["first", "second"]


class TestSortBySize:
    def test_largest_first(self) -> None:
        entries = [_entry("b", size=5), _entry("a", size=10), _entry("c", size=7)]
        assert _names(sort_by_size(entries)) == ["a", "c", "b"]

    def test_directory_uses_literal_size(self) -> None:
        entries = [
            _entry("small.txt", size=5),
            _entry("sub", size=4096, is_dir=True),
            _entry("big.txt", size=10),
        ]
        assert _names(sort_by_size(entries)) == ["sub", "big.txt", "small.txt"]


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

class TestSortEntries:
    def _sample(self) -> list[Entry]:
        return [
            _entry("x", size=1, modified=30.0),
            _entry("y", size=3, modified=10.0),
            _entry("z", size=2, modified=20.0),
        ]

    def test_no_sort_keeps_order(self) -> None:
        assert _names(sort_entries(self._sample(), Options())) == ["x", "y", "z"]

    def test_time(self) -> None:
        result = sort_entries(self._sample(), Options(sort_by_time=True))
        assert _names(result) == ["x", "z", "y"]

    def test_size(self) -> None:
        result = sort_entries(self._sample(), Options(sort_by_size=True))
        assert _names(result) == ["y", "z", "x"]

    def test_time_takes_precedence_over_size(self) -> None:
        result = sort_entries(
            self._sample(), Options(sort_by_time=True, sort_by_size=True),
        )
        assert _names(result) == ["x", "z", "y"]

    def test_input_not_mutated(self) -> None:
        entries = self._sample()
        sort_entries(entries, Options(sort_by_size=True))
        assert _names(entries) == ["x", "y", "z"]

    def test_returns_new_list(self) -> None:
        entries = self._sample()
        assert sort_entries(entries, Options()) is not entries

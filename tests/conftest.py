"""Shared pytest fixtures and configuration for the lls test suite.

Guidelines
----------
* Every filesystem test works inside ``tmp_path`` — never the real cwd.
* Tests must not depend on the host terminal; widths are injected.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

OLD_MTIME: float = 1_600_000_000.0
MID_MTIME: float = 1_650_000_000.0
NEW_MTIME: float = 1_700_000_000.0


@pytest.fixture
def listing_dir(tmp_path: Path) -> Path:
    """Directory holding ``a.txt`` (10 bytes), ``b.txt`` (5 bytes) and ``sub/``.

    ``sub`` contains ``nested.txt`` so that recursion would be visible.
    Modification times: ``b.txt`` newest, then ``sub``, then ``a.txt``.
    """
    root = tmp_path / "listing"
    root.mkdir()
    (root / "a.txt").write_bytes(b"0123456789")
    (root / "b.txt").write_bytes(b"01234")
    sub = root / "sub"
    sub.mkdir()
    (sub / "nested.txt").write_bytes(b"x")

    os.utime(root / "a.txt", (OLD_MTIME, OLD_MTIME))
    os.utime(sub, (MID_MTIME, MID_MTIME))
    os.utime(root / "b.txt", (NEW_MTIME, NEW_MTIME))
    return root

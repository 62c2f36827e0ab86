"""Infrastructure: terminal width query.

The width is read from the terminal attached to the output stream with
:func:`os.get_terminal_size`.  ``COLUMNS`` and other environment
variables are not consulted.
"""

from __future__ import annotations

import os
import sys
from typing import TextIO

DEFAULT_TERMINAL_WIDTH: int = 80
"""Width used when no terminal width can be determined."""


def get_terminal_width(stream: TextIO | None = None) -> int:
    """Return the column count of the terminal behind *stream*.

    Defaults to ``sys.stdout``.  Falls back to
    :data:`DEFAULT_TERMINAL_WIDTH` when the stream is
    not attached to a terminal or reports a non-positive width.
    """
    target = sys.stdout if stream is None else stream
    try:
        columns = os.get_terminal_size(target.fileno()).columns
    except (AttributeError, ValueError, OSError):
        return DEFAULT_TERMINAL_WIDTH
    if columns <= 0:
        return DEFAULT_TERMINAL_WIDTH
    return columns

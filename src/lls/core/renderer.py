"""Text rendering of an entry list.

The renderer never writes anywhere itself: :func:`render` yields output
chunks and the CLI layer decides where they go.  Layout selection
follows :attr:`~lls.core.models.Options.layout`:

1. **Columns** (``-C``) — grid sized to the terminal width.
2. **Long** (``-l``) — type, size, local modification time, name.
3. **One per line** (``-1``).
4. **Across** — names separated by two spaces on a single line.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from datetime import datetime

from lls.core.models import Entry, Layout, Options
from lls.core.protocols import ErrorReporter, WidthProvider
from lls.exceptions import TimestampConversionError

GUTTER: str = "  "
"""Separator written after every name in the columns and across layouts."""

SIZE_FIELD_WIDTH: int = 10
TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Columns
# ---------------------------------------------------------------------------

def column_count(width: int, max_len: int) -> int:
    """Number of names that fit on one line, never less than one."""
    return max(1, width // (max_len + len(GUTTER)))


def render_columns(names: Sequence[str], width: int) -> Iterator[str]:
    """Yield *names* as a left-justified grid filling *width* columns."""
    max_len = max((len(name) for name in names), default=0)
    columns = column_count(width, max_len)

    count = 0
    for name in names:
        yield name.ljust(max_len) + GUTTER
        count += 1
        if count % columns == 0:
            yield "\n"
    if count % columns != 0:
        yield "\n"


# ---------------------------------------------------------------------------
# Long listing
# ---------------------------------------------------------------------------

def format_timestamp(entry: Entry) -> str:
    """Format the entry's modification time in local time.

    Raises
    ------
    TimestampConversionError
        If the timestamp is out of range for the platform's local time.
    """
    try:
        moment = datetime.fromtimestamp(entry.modified)
    except (OverflowError, OSError, ValueError) as exc:
        raise TimestampConversionError(entry.name) from exc
    return moment.strftime(TIMESTAMP_FORMAT)


def format_long_line(entry: Entry) -> str:
    """Return one long-listing line, newline included."""
    kind = "d" if entry.is_dir else "-"
    timestamp = format_timestamp(entry)
    return f"{kind}{entry.size:>{SIZE_FIELD_WIDTH}} {timestamp} {entry.name}\n"


def render_long(
    entries: Sequence[Entry],
    on_error: ErrorReporter | None = None,
) -> Iterator[str]:
    """Yield one long-listing line per entry.

    An entry whose timestamp cannot be converted is skipped after the
    error is handed to *on_error*.  Without a reporter the error is
    raised.
    """
    for entry in entries:
        try:
            line = format_long_line(entry)
        except TimestampConversionError as exc:
            if on_error is None:
                raise
            on_error(exc)
            continue
        yield line


# ---------------------------------------------------------------------------
# Simple layouts
# ---------------------------------------------------------------------------

def render_simple(names: Sequence[str], *, one_column: bool) -> Iterator[str]:
    """Yield names one per line, or all on one line separated by the gutter."""
    separator = "\n" if one_column else GUTTER
    for name in names:
        yield name + separator
    if not one_column:
        yield "\n"


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def render(
    entries: Sequence[Entry],
    options: Options,
    *,
    width_provider: WidthProvider | None = None,
    on_error: ErrorReporter | None = None,
) -> Iterator[str]:
    """Yield the textual listing of *entries* for the selected layout.

    *width_provider* is only consulted by, and required for, the columns
    layout.
    """
    layout = options.layout
    if layout is Layout.COLUMNS:
        if width_provider is None:
            raise ValueError("the columns layout needs a width provider")
        yield from render_columns([entry.name for entry in entries], width_provider())
    elif layout is Layout.LONG:
        yield from render_long(entries, on_error)
    else:
        yield from render_simple(
            [entry.name for entry in entries],
            one_column=layout is Layout.ONE_PER_LINE,
        )

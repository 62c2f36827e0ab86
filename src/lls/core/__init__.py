"""Core / service layer — pure listing logic and text rendering.

Rules
-----
* No ``print()`` calls.
* No filesystem or terminal access.
* No imports from ``cli`` or ``infra``.
"""

from lls.core.listing_service import ListingService
from lls.core.models import Entry, Layout, Options, SortMode
from lls.core.protocols import EntryProvider, ErrorReporter, WidthProvider
from lls.core.renderer import render
from lls.core.sorter import sort_entries

__all__: list[str] = [
    "Entry",
    "EntryProvider",
    "ErrorReporter",
    "Layout",
    "ListingService",
    "Options",
    "SortMode",
    "WidthProvider",
    "render",
    "sort_entries",
]

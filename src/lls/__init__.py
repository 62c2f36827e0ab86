"""lls — a small directory-listing command-line utility.

Lists the immediate entries of a directory in one of several textual
layouts: across, one per line, multi-column grid, or long listing.
"""

from lls.version import __version__

__all__: list[str] = ["__version__"]

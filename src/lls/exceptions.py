"""Custom exception hierarchy for lls.

All exceptions that cross layer boundaries must inherit from
:class:`LlsError`.  Raw ``OSError``s from the filesystem must NEVER
propagate beyond the infrastructure layer — they are caught and
re-raised as a typed subclass defined here.

Hierarchy
---------
LlsError
├── UsageError
│   ├── UnknownOptionError
│   └── InvalidDirectoryError
├── DirectoryAccessError
├── TimestampConversionError
└── EnvironmentError
"""

from __future__ import annotations


class LlsError(Exception):
    """Base exception for all lls errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI can render a clean message without
    leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ------------------------------------------------------------

class UsageError(LlsError):
    """Raised for a bad command-line token.  Never fatal."""


class UnknownOptionError(UsageError):
    """Raised when a dash-prefixed token is not a recognised flag."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown option: {token}")
        self.token: str = token


class InvalidDirectoryError(UsageError):
    """Raised when a directory argument does not name an existing directory."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid directory: {token}")
        self.token: str = token


# --- Filesystem --------------------------------------------------------------

class DirectoryAccessError(LlsError):
    """Raised when the target directory cannot be opened or iterated."""


# --- Rendering ---------------------------------------------------------------

class TimestampConversionError(LlsError):
    """Raised when an entry's modification time cannot be shown as local time."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Error converting time for file: {name}")
        self.name: str = name


# --- Environment / tooling ---------------------------------------------------

class EnvironmentError(LlsError):
    """Raised when an optional runtime dependency is not available."""

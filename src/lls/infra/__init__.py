"""Infrastructure layer — host filesystem and terminal integration.

Every raw ``OSError`` that ends an operation is caught here and
re-raised as a :class:`~lls.exceptions.LlsError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from lls.infra.filesystem import ScandirEntryProvider, is_valid_directory
from lls.infra.terminal import get_terminal_width

__all__: list[str] = [
    "ScandirEntryProvider",
    "get_terminal_width",
    "is_valid_directory",
]

"""CLI application entry point for lls.

This module is the **sole error boundary** for the entire application.
It catches :class:`~lls.exceptions.LlsError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No listing logic lives here — enumeration, sorting and rendering are
  delegated to the core and infrastructure layers.
* The listing goes to stdout as plain text; diagnostics go to stderr
  through the console proxy.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from lls.cli import exit_codes
from lls.cli.arguments import parse_arguments
from lls.cli.console import console, escape, report_error, report_warning
from lls.core.listing_service import ListingService
from lls.core.models import Options
from lls.core.renderer import render
from lls.exceptions import DirectoryAccessError, LlsError
from lls.infra.filesystem import ScandirEntryProvider
from lls.infra.terminal import get_terminal_width


def run_listing(options: Options, out: TextIO | None = None) -> int:
    """List ``options.directory`` to *out* (default ``sys.stdout``).

    An unreadable directory is reported on stderr and nothing is
    written to *out*; the exit code is still :data:`exit_codes.SUCCESS`.
    """
    stream = sys.stdout if out is None else out
    service = ListingService(ScandirEntryProvider())

    try:
        entries = service.collect(options)
    except DirectoryAccessError as exc:
        report_error(exc)
        return exit_codes.SUCCESS

    for chunk in render(
        entries,
        options,
        width_provider=lambda: get_terminal_width(stream),
        on_error=report_warning,
    ):
        stream.write(chunk)
    stream.flush()
    return exit_codes.SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lls CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    options = parse_arguments(argv)
    return run_listing(options)


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except LlsError as exc:
        report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

"""Command-line parsing for lls.

Tokens are matched exactly and processed left to right.  A bad token is
never fatal: the problem is reported on stderr, usage is printed, and
parsing continues with the state established so far.  ``--help`` and
``--version`` end the process immediately with exit code 0.

The usage text comes from an :class:`argparse.ArgumentParser` built from
the same flag table that drives matching.  Combined flags such as
``-lt`` are unknown options.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import replace
from typing import NoReturn

from lls.cli import exit_codes
from lls.cli.console import report_warning
from lls.core.models import Options
from lls.exceptions import InvalidDirectoryError, UnknownOptionError, UsageError
from lls.infra.filesystem import is_valid_directory
from lls.version import __version__

PROG: str = "lls"

_FLAGS: tuple[tuple[str, str, str], ...] = (
    ("-l", "long_listing", "Long listing format"),
    ("-d", "directories_only", "List directories only"),
    ("-t", "sort_by_time", "Sort by modification time"),
    ("-s", "sort_by_size", "Sort by file size"),
    ("-1", "one_column", "One column output"),
    ("-C", "multi_column", "Multi-column output"),
)
"""``(token, Options field, help)`` for every boolean switch."""

_FLAG_FIELDS: dict[str, str] = {token: field for token, field, _ in _FLAGS}

HELP_TOKENS: tuple[str, ...] = ("-h", "-?", "--help")
VERSION_TOKEN: str = "--version"


# ---------------------------------------------------------------------------
# Usage text
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Construct the parser used to format usage text."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="List the entries of a directory.",
        add_help=False,
    )
    for token, field, help_text in _FLAGS:
        parser.add_argument(token, dest=field, action="store_true", help=help_text)
    parser.add_argument(
        *HELP_TOKENS,
        dest="help",
        action="store_true",
        help="Show this help message and exit",
    )
    parser.add_argument(
        VERSION_TOKEN,
        action="store_true",
        help="Show the version and exit",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to list (default: current directory)",
    )
    return parser


def print_usage(parser: argparse.ArgumentParser | None = None) -> None:
    """Write the usage text to stdout."""
    (parser or build_parser()).print_help(sys.stdout)


def version_text() -> str:
    return f"{PROG} version {__version__}"


# ---------------------------------------------------------------------------
# Token handling
# ---------------------------------------------------------------------------

def _exit_with_help(parser: argparse.ArgumentParser) -> NoReturn:
    print_usage(parser)
    sys.exit(exit_codes.SUCCESS)


def _exit_with_version() -> NoReturn:
    print(version_text())
    sys.exit(exit_codes.SUCCESS)


def apply_token(
    options: Options,
    token: str,
    parser: argparse.ArgumentParser,
) -> Options:
    """Return *options* updated with the effect of one token.

    Raises
    ------
    UnknownOptionError
        If *token* starts with ``-`` and is not a recognised flag.
    InvalidDirectoryError
        If *token* is not an existing directory.
    SystemExit
        For help and version requests.
    """
    field = _FLAG_FIELDS.get(token)
    if field is not None:
        return replace(options, **{field: True})
    if token in HELP_TOKENS:
        _exit_with_help(parser)
    if token == VERSION_TOKEN:
        _exit_with_version()
    if token.startswith("-"):
        raise UnknownOptionError(token)
    if not is_valid_directory(token):
        raise InvalidDirectoryError(token)
    return replace(options, directory=token)


def parse_arguments(argv: Sequence[str] | None = None) -> Options:
    """Convert command-line tokens into an :class:`Options` value.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    """
    tokens = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()
    options = Options()
    for token in tokens:
        try:
            options = apply_token(options, token, parser)
        except UsageError as exc:
            report_warning(exc)
            print_usage(parser)
    return options

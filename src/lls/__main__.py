"""Allow ``python -m lls`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m lls`` behaves identically to the ``lls`` console
script.
"""

from __future__ import annotations

from lls.cli.app import cli

if __name__ == "__main__":
    cli()

"""Regression tests for the optional Rich dependency.

Listing, help and version must keep working when Rich is missing;
diagnostics then fall back to plain stderr text without markup.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from lls.cli import exit_codes
from lls.cli.app import main
from lls.cli.console import escape, get_rich_console, strip_markup
from lls.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_listing_works_without_rich(
    listing_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["-1", str(listing_dir)])
    assert code == exit_codes.SUCCESS
    assert sorted(capsys.readouterr().out.splitlines()) == ["a.txt", "b.txt", "sub"]


def test_warning_is_plain_without_rich(
    listing_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    main(["-x", str(listing_dir)])
    err = capsys.readouterr().err
    assert err == "Unknown option: -x\n"


def test_get_rich_console_raises_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_escape_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert escape("[bold]name[/bold]") == "[bold]name[/bold]"


def test_escape_protects_markup_with_rich() -> None:
    assert escape("[bold]x") != "[bold]x"


def test_strip_markup_removes_own_tags_only() -> None:
    text = "[bold red]Error:[/bold red] file[1].txt [yellow]hm[/yellow]"
    assert strip_markup(text) == "Error: file[1].txt hm"

"""Shared fixtures for picreate tests."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from picreate.core import CommandError

GITIGNORE_TEXT = "node_modules/\ncoverage/\nlib/\n"


class RecordingRunner:
    """Stand-in for ``run_command`` that records calls and mimics tool output."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.fail_on = fail_on

    def __call__(self, cmd: Sequence[str], cwd: Path) -> None:
        args = list(cmd)
        self.calls.append((args, cwd))
        if self.fail_on and args[0] == self.fail_on:
            raise CommandError(1, args, "", f"{args[0]} failed")
        if args[:2] == ["git", "init"]:
            (cwd / ".git").mkdir()
        elif args[-1:] == ["install"]:
            (cwd / "yarn.lock").write_text("# yarn lockfile v1\n", encoding="utf-8")


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def fetcher() -> object:
    def _fetch() -> str:
        return GITIGNORE_TEXT

    return _fetch

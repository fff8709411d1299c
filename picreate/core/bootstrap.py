"""Create project directories and run their first-time setup."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence

from ..observability import trace_step
from . import defaults
from .commands import run_command
from .gitignore import fetch_gitignore
from .manifest import render_manifest

EXISTS_MESSAGE = "File already exists with that name"

logger = logging.getLogger("picreate.bootstrap")

Runner = Callable[[Sequence[str], Path], Any]
Fetcher = Callable[[], str]


class ProjectExistsError(FileExistsError):
    """Raised when the target path is already taken."""

    def __init__(self, path: Path) -> None:
        super().__init__(EXISTS_MESSAGE)
        self.path = path


class ProjectBootstrapper:
    """Lay out a new project directory one step at a time.

    Steps run strictly in order and any failure stops the sequence. Nothing
    is rolled back; a partially created directory is left for the caller.
    """

    def __init__(
        self,
        root: Path | None = None,
        runner: Runner | None = None,
        fetcher: Fetcher | None = None,
        package_manager: str | None = None,
    ) -> None:
        self.root = root
        self.runner = runner or run_command
        self.fetcher = fetcher or fetch_gitignore
        self.package_manager = package_manager or os.environ.get(
            "PICREATE_PACKAGE_MANAGER", defaults.DEFAULT_PACKAGE_MANAGER
        )

    def target_for(self, name: str) -> Path:
        return (self.root or Path.cwd()) / name

    def ensure_available(self, name: str) -> Path:
        target = self.target_for(name)
        # lexists so a dangling symlink still counts as taken
        if os.path.lexists(target):
            raise ProjectExistsError(target)
        return target

    def create(
        self, name: str, manifest: Mapping[str, Any], install: bool = False
    ) -> list[Path]:
        """Create ``name`` and return the paths generated inside it."""
        # Repeats the handler's check for direct callers.
        target = self.ensure_available(name)
        generated: list[Path] = []

        with trace_step("mkdir", path=str(target)):
            target.mkdir()
        logger.info("Created directory %s", target)

        with trace_step("manifest", path=str(target)):
            generated.append(self._write_manifest(target, manifest))

        with trace_step("git_init", path=str(target)):
            generated.append(self._init_git(target))

        with trace_step("gitignore", path=str(target)):
            generated.append(self._write_gitignore(target))

        if install:
            with trace_step(
                "install", path=str(target), package_manager=self.package_manager
            ):
                generated.extend(self._install(target))

        return generated

    def _write_manifest(self, target: Path, manifest: Mapping[str, Any]) -> Path:
        path = target / defaults.MANIFEST_FILENAME
        path.write_text(render_manifest(manifest), encoding="utf-8")
        logger.info("Wrote %s", path)
        return path

    def _init_git(self, target: Path) -> Path:
        self.runner(["git", "init"], target)
        logger.info("Initialized git repository in %s", target)
        return target / ".git"

    def _write_gitignore(self, target: Path) -> Path:
        content = self.fetcher()
        path = target / defaults.GITIGNORE_FILENAME
        path.write_text(content, encoding="utf-8")
        logger.info("Wrote %s", path)
        return path

    def _install(self, target: Path) -> list[Path]:
        self.runner([self.package_manager, "install"], target)
        logger.info("Installed dependencies with %s", self.package_manager)
        lockfiles = ("yarn.lock", "package-lock.json", "pnpm-lock.yaml")
        return [target / lock for lock in lockfiles if (target / lock).exists()]

"""Subprocess helpers for the git and package-manager steps."""

from __future__ import annotations

import logging
import shutil
import subprocess  # nosec B404 - fixed tool invocations only
from pathlib import Path
from typing import Sequence

logger = logging.getLogger("picreate.commands")


class CommandError(subprocess.CalledProcessError):
    """A scaffolding command exited non-zero or could not be started."""

    def __str__(self) -> str:
        command = " ".join(str(part) for part in self.cmd)
        detail = (self.stderr or self.stdout or "").strip()
        message = f"Command '{command}' exited with status {self.returncode}"
        return f"{message}: {detail}" if detail else message


def run_command(
    cmd: Sequence[str], cwd: Path | None = None
) -> subprocess.CompletedProcess:
    """Run ``cmd`` in ``cwd`` and raise :class:`CommandError` on failure."""
    args = [str(part) for part in cmd]
    binary = shutil.which(args[0])
    if binary is None:
        raise CommandError(127, args, "", f"{args[0]} executable not found in PATH")
    args[0] = binary
    logger.debug("run_command: %s (cwd=%s)", args, cwd)
    result = subprocess.run(
        args,
        cwd=(str(cwd) if cwd else None),
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        raise CommandError(
            result.returncode, list(cmd), result.stdout, result.stderr
        )
    return result

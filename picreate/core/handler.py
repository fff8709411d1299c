"""Command handler tying options, manifest and bootstrap together."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from .bootstrap import ProjectBootstrapper
from .governance import ManifestValidator
from .manifest import build_manifest
from .options import CreateOptions

logger = logging.getLogger("picreate.handler")


class ProjectCreateExecutor:
    """Scaffold a new project from create options."""

    def __init__(
        self,
        root: Path | None = None,
        bootstrapper: ProjectBootstrapper | None = None,
        validator: ManifestValidator | None = None,
    ) -> None:
        self.bootstrapper = bootstrapper or ProjectBootstrapper(root=root)
        self.validator = validator or ManifestValidator()

    async def execute(
        self, options: CreateOptions | Mapping[str, Any]
    ) -> dict[str, Any]:
        if not isinstance(options, CreateOptions):
            options = CreateOptions.from_mapping(options)

        # A taken path is reported before manifest errors; create() checks again.
        target = self.bootstrapper.ensure_available(options.directory)
        manifest = build_manifest(options)
        self.validator.validate(manifest)

        logger.debug("Creating %s (install=%s)", target, options.install)
        generated = self.bootstrapper.create(
            options.directory, manifest, install=options.install
        )

        return {
            "status": "success",
            "name": options.name,
            "path": str(target),
            "generated_files": [str(path) for path in generated],
        }


async def handle(
    options: CreateOptions | Mapping[str, Any], **executor_kwargs: Any
) -> dict[str, Any]:
    """Run the create command for ``options``; errors propagate unchanged."""
    executor = ProjectCreateExecutor(**executor_kwargs)
    return await executor.execute(options)

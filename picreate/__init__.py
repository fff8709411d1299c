"""picreate package root exposing core scaffolding utilities."""

from .core import (  # isort: skip
    CreateOptions,
    ProjectBootstrapper,
    ProjectCreateExecutor,
    build_manifest,
    handle,
)

__all__ = [
    "CreateOptions",
    "ProjectBootstrapper",
    "ProjectCreateExecutor",
    "build_manifest",
    "handle",
]

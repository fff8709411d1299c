"""picreate core package - manifest and bootstrap utilities."""

from .bootstrap import EXISTS_MESSAGE, ProjectBootstrapper, ProjectExistsError
from .commands import CommandError, run_command
from .gitignore import FetchError, fetch_gitignore
from .governance import ManifestValidationError, ManifestValidator
from .handler import ProjectCreateExecutor, handle
from .manifest import build_manifest, merge_mapping, render_manifest
from .options import CreateOptions, merge_option_layers

__all__ = [
    "CommandError",
    "CreateOptions",
    "EXISTS_MESSAGE",
    "FetchError",
    "ManifestValidationError",
    "ManifestValidator",
    "ProjectBootstrapper",
    "ProjectCreateExecutor",
    "ProjectExistsError",
    "build_manifest",
    "fetch_gitignore",
    "handle",
    "merge_mapping",
    "merge_option_layers",
    "render_manifest",
    "run_command",
]

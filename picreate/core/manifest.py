"""Build ``package.json`` manifests from create options."""

from __future__ import annotations

import json
from typing import Any, Mapping

from . import defaults
from .options import CreateOptions


def merge_mapping(
    base: Mapping[str, str], overrides: Mapping[str, str] | None
) -> dict[str, str]:
    """Return a copy of ``base`` with ``overrides`` applied on top."""
    merged = dict(base)
    if overrides:
        merged.update(overrides)
    return merged


def build_manifest(options: CreateOptions | Mapping[str, Any]) -> dict[str, Any]:
    """Create the manifest payload for a new project.

    Mapping fields overlay the defaults table, scalar fields fall back to the
    fixed defaults and structured fields are normalised into the object form
    npm expects. Unknown option keys are copied through unchanged.
    """

    if not isinstance(options, CreateOptions):
        options = CreateOptions.from_mapping(options)

    homepage = options.homepage or defaults.default_homepage(options.directory)
    manifest: dict[str, Any] = {
        "name": options.name,
        "version": options.version or defaults.DEFAULT_VERSION,
    }
    if options.description is not None:
        manifest["description"] = options.description
    manifest["license"] = options.license or defaults.DEFAULT_LICENSE
    manifest["author"] = _normalise_author(options.author)
    manifest["homepage"] = homepage
    manifest["bugs"] = _normalise_bugs(options.bugs, homepage)
    if options.repository is not None:
        manifest["repository"] = _normalise_repository(options.repository)
    manifest["engines"] = merge_mapping(defaults.ENGINES, options.engines)
    manifest["scripts"] = merge_mapping(defaults.SCRIPTS, options.scripts)
    manifest["dependencies"] = merge_mapping(defaults.DEPS, options.dependencies)
    manifest["devDependencies"] = merge_mapping(
        defaults.DEV_DEPS, options.devDependencies
    )

    for key, value in options.custom_fields.items():
        manifest[key] = value
    return manifest


def render_manifest(manifest: Mapping[str, Any]) -> str:
    return json.dumps(manifest, indent=2) + "\n"


def _normalise_author(author: str | Mapping[str, Any] | None) -> dict[str, Any]:
    if author is None:
        return defaults.default_author()
    if isinstance(author, str):
        return {"name": author}
    return dict(author)


def _normalise_bugs(
    bugs: str | Mapping[str, Any] | None, homepage: str
) -> dict[str, Any]:
    if bugs is None:
        return defaults.default_bugs(homepage)
    if isinstance(bugs, str):
        return {"url": bugs}
    return dict(bugs)


def _normalise_repository(repository: str | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(repository, str):
        return {"type": "git", "url": repository}
    return dict(repository)

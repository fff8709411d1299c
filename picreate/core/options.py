"""Invocation options accepted by the ``create`` command."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger("picreate.options")

SCOPED_NAME = re.compile(r"^@[^/\\]+/[^/\\]+$")


def _is_plain_directory(value: str) -> bool:
    return "/" not in value and "\\" not in value and value not in {".", ".."}


MAPPING_FIELDS: tuple[str, ...] = (
    "dependencies",
    "devDependencies",
    "scripts",
    "engines",
)

# Keys produced by argument parsers rather than by the user. They are never
# copied into a manifest as custom fields.
PARSER_KEYS: frozenset[str] = frozenset(
    {
        "_",
        "$0",
        "h",
        "help",
        "command",
        "handler",
        "func",
        "config",
        "field",
        "verbose",
        "dry_run",
    }
)


class CreateOptions(BaseModel):
    """User supplied overrides for a new project.

    Declared fields are the ones the manifest builder normalises; anything
    else lands in ``model_extra`` and is passed through to the manifest.
    """

    name: str = Field(..., min_length=1)
    install: bool = False
    dependencies: Dict[str, str] = Field(default_factory=dict)
    devDependencies: Dict[str, str] = Field(default_factory=dict)
    scripts: Dict[str, str] = Field(default_factory=dict)
    engines: Dict[str, str] = Field(default_factory=dict)
    version: str | None = None
    license: str | None = None
    description: str | None = None
    homepage: str | None = None
    author: str | Dict[str, Any] | None = None
    bugs: str | Dict[str, Any] | None = None
    repository: str | Dict[str, Any] | None = None

    model_config = ConfigDict(extra="allow", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_parser_keys(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        leaked = sorted(key for key in data if key in PARSER_KEYS)
        if leaked:
            logger.debug("Ignoring parser keys in options: %s", ", ".join(leaked))
        return {key: value for key, value in data.items() if key not in PARSER_KEYS}

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        leaf = value.split("/", 1)[1] if SCOPED_NAME.match(value) else value
        if not _is_plain_directory(leaf):
            raise ValueError(
                "name must be a directory name or a scoped '@scope/name' package"
            )
        return value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CreateOptions":
        return cls.model_validate(dict(data))

    @property
    def custom_fields(self) -> dict[str, Any]:
        """Pass-through fields in the order they were supplied."""
        return dict(self.model_extra or {})

    @property
    def directory(self) -> str:
        """Directory to create; scoped packages use their unscoped part."""
        if SCOPED_NAME.match(self.name):
            return self.name.split("/", 1)[1]
        return self.name


def merge_option_layers(*layers: Mapping[str, Any]) -> dict[str, Any]:
    """Merge raw option mappings; later layers win.

    Mapping fields (dependencies, scripts, ...) are overlaid key by key so a
    config file and command line flags can both contribute entries.
    """
    merged: dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            if key in MAPPING_FIELDS and isinstance(value, Mapping):
                current = merged.get(key)
                base = dict(current) if isinstance(current, Mapping) else {}
                base.update(value)
                merged[key] = base
            else:
                merged[key] = value
    return merged

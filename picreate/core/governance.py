"""Schema validation for generated package manifests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping

from jsonschema import Draft202012Validator  # type: ignore[import-not-found]
from jsonschema.exceptions import ValidationError  # type: ignore[import-not-found]

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_SCHEMA = PACKAGE_ROOT / "schemas" / "package.schema.json"


class ManifestValidationError(RuntimeError):
    """Raised when a generated manifest would not be a valid package.json."""


class ManifestValidator:
    """Validate manifests against the bundled package.json schema."""

    def __init__(self, schema_path: Path | None = None) -> None:
        self.schema_path = schema_path or DEFAULT_SCHEMA
        self.validator = self._build_validator()

    def _build_validator(self) -> Draft202012Validator:
        if not self.schema_path.exists():
            raise ManifestValidationError(
                f"Manifest schema missing at {self.schema_path}."
            )
        schema = json.loads(self.schema_path.read_text(encoding="utf-8"))
        Draft202012Validator.check_schema(schema)
        return Draft202012Validator(schema)

    def validate(self, manifest: Mapping[str, Any]) -> None:
        errors = self.collect_errors(manifest)
        if errors:
            raise ManifestValidationError("\n".join(errors))

    def collect_errors(self, manifest: Mapping[str, Any]) -> list[str]:
        return sorted(self._iter_error_messages(dict(manifest)))

    def _iter_error_messages(self, payload: dict[str, Any]) -> Iterable[str]:
        for error in self.validator.iter_errors(payload):
            path = ".".join(str(idx) for idx in error.path) or "manifest"
            if isinstance(error, ValidationError):
                yield f"{path}: {error.message}"
            else:
                yield f"{path}: {error}"

"""Tests for the manifest schema validator."""

from __future__ import annotations

from pathlib import Path

import pytest

from picreate.core import ManifestValidationError, ManifestValidator, build_manifest


def _manifest(**overrides: object) -> dict[str, object]:
    return build_manifest({"name": "test-directory", **overrides})


def test_validator_accepts_default_manifest() -> None:
    validator = ManifestValidator()

    validator.validate(_manifest())


def test_validator_accepts_scoped_names_and_custom_fields() -> None:
    validator = ManifestValidator()

    validator.validate(build_manifest({"name": "@pi-cubed/typed-ui", "private": True}))


@pytest.mark.parametrize("name", ["Test Directory", "UPPER", ".hidden", "a" * 215])
def test_validator_rejects_invalid_names(name: str) -> None:
    validator = ManifestValidator()

    with pytest.raises(ManifestValidationError) as excinfo:
        validator.validate(build_manifest({"name": name}))

    assert "name:" in str(excinfo.value)


def test_validator_rejects_non_semver_version() -> None:
    validator = ManifestValidator()

    errors = validator.collect_errors(_manifest(version="one"))

    assert len(errors) == 1
    assert errors[0].startswith("version:")


def test_collect_errors_reports_nested_paths() -> None:
    validator = ManifestValidator()
    manifest = _manifest()
    manifest["dependencies"] = {"ramda": 25}
    manifest["bugs"] = {}

    errors = validator.collect_errors(manifest)

    joined = "\n".join(errors)
    assert "dependencies.ramda:" in joined
    assert "bugs:" in joined


def test_missing_schema_raises(tmp_path: Path) -> None:
    with pytest.raises(ManifestValidationError):
        ManifestValidator(schema_path=tmp_path / "missing.json")

"""Configuration loader and schema path resolution tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from prisma_safety.configuration.loader import (
    DEFAULT_SCHEMA_PATH,
    ConfigurationError,
    find_project_configuration,
    load_project_configuration,
    read_package_manifest_schema,
    resolve_schema_location,
)
from prisma_safety.configuration.runtime_settings import SchemaPathOrigin


def _write_file(path: Path, contents: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_relative_to_config_file(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config" / ".prisma-safety.yaml",
        "schema: db/schema.prisma\n",
    )

    configuration = load_project_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.schema_path == tmp_path / "config" / "db" / "schema.prisma"


def test_keeps_absolute_schema_path(tmp_path: Path) -> None:
    absolute = tmp_path / "elsewhere" / "schema.prisma"
    config_path = _write_file(tmp_path / ".prisma-safety.yaml", f"schema: {absolute}\n")

    assert load_project_configuration(config_path).schema_path == absolute


def test_empty_configuration_has_no_schema(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / ".prisma-safety.yaml", "")

    assert load_project_configuration(config_path).schema_path is None


@pytest.mark.parametrize(
    "contents",
    [
        "- just\n- a list\n",
        "schema: [1, 2]\n",
        "schema: {nested: true}\n",
        "schema: [unclosed\n",
    ],
)
def test_errors_when_configuration_invalid(tmp_path: Path, contents: str) -> None:
    config_path = _write_file(tmp_path / ".prisma-safety.yaml", contents)

    with pytest.raises(ConfigurationError):
        load_project_configuration(config_path)


def test_errors_when_configuration_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_project_configuration(tmp_path / "missing.yaml")


def test_finds_configuration_in_parent_directory(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / ".prisma-safety.yml", "schema: schema.prisma\n")
    nested = tmp_path / "packages" / "api"
    nested.mkdir(parents=True)

    assert find_project_configuration(nested) == config_path.resolve()


def test_reads_schema_from_package_manifest(tmp_path: Path) -> None:
    _write_file(
        tmp_path / "package.json",
        json.dumps({"name": "app", "prisma": {"schema": "db/schema.prisma"}}),
    )

    assert read_package_manifest_schema(tmp_path) == tmp_path / "db" / "schema.prisma"


@pytest.mark.parametrize(
    "manifest",
    [
        {"name": "app"},
        {"prisma": "db/schema.prisma"},
        {"prisma": {"seed": "node seed.js"}},
        ["not", "a", "mapping"],
    ],
)
def test_package_manifest_without_schema_returns_none(tmp_path: Path, manifest: object) -> None:
    _write_file(tmp_path / "package.json", json.dumps(manifest))

    assert read_package_manifest_schema(tmp_path) is None


def test_errors_when_package_manifest_invalid(tmp_path: Path) -> None:
    _write_file(tmp_path / "package.json", "{not-json")

    with pytest.raises(ConfigurationError):
        read_package_manifest_schema(tmp_path)


def test_explicit_schema_option_wins(tmp_path: Path) -> None:
    _write_file(tmp_path / ".prisma-safety.yaml", "schema: from-config.prisma\n")
    _write_file(tmp_path / "package.json", json.dumps({"prisma": {"schema": "manifest.prisma"}}))

    location = resolve_schema_location("explicit.prisma", start_dir=tmp_path)

    assert location.path == Path("explicit.prisma")
    assert location.origin == SchemaPathOrigin.OPTION


def test_project_configuration_wins_over_package_manifest(tmp_path: Path) -> None:
    _write_file(tmp_path / ".prisma-safety.yaml", "schema: from-config.prisma\n")
    _write_file(tmp_path / "package.json", json.dumps({"prisma": {"schema": "manifest.prisma"}}))

    location = resolve_schema_location(start_dir=tmp_path)

    assert location.path == tmp_path.resolve() / "from-config.prisma"
    assert location.origin == SchemaPathOrigin.PROJECT_CONFIG


def test_explicit_config_path_is_used_instead_of_search(tmp_path: Path) -> None:
    _write_file(tmp_path / ".prisma-safety.yaml", "schema: searched.prisma\n")
    explicit_config = _write_file(tmp_path / "ci" / "safety.yaml", "schema: ../explicit.prisma\n")

    location = resolve_schema_location(config_path=explicit_config, start_dir=tmp_path)

    assert location.path == tmp_path / "ci" / ".." / "explicit.prisma"
    assert location.origin == SchemaPathOrigin.PROJECT_CONFIG


def test_package_manifest_used_when_configuration_has_no_schema(tmp_path: Path) -> None:
    _write_file(tmp_path / ".prisma-safety.yaml", "{}\n")
    _write_file(tmp_path / "package.json", json.dumps({"prisma": {"schema": "manifest.prisma"}}))

    location = resolve_schema_location(start_dir=tmp_path)

    assert location.path == tmp_path / "manifest.prisma"
    assert location.origin == SchemaPathOrigin.PACKAGE_MANIFEST


def test_falls_back_to_default_schema_path(tmp_path: Path) -> None:
    location = resolve_schema_location(start_dir=tmp_path)

    assert location.path == tmp_path / DEFAULT_SCHEMA_PATH
    assert location.origin == SchemaPathOrigin.DEFAULT


def test_errors_when_configuration_is_not_utf8(tmp_path: Path) -> None:
    config_path = tmp_path / ".prisma-safety.yaml"
    config_path.write_bytes(b'schema: "\xff"\n')

    with pytest.raises(ConfigurationError, match="is not valid UTF-8"):
        load_project_configuration(config_path)


def test_errors_when_package_manifest_is_not_utf8(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_bytes(b'{"prisma": {"schema": "\xff"}}')

    with pytest.raises(ConfigurationError, match="is not valid UTF-8"):
        read_package_manifest_schema(tmp_path)

"""Configuration loader and schema path resolution service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import ProjectConfiguration, SchemaLocation, SchemaPathOrigin

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path("prisma") / "schema.prisma"
PROJECT_CONFIG_FILENAMES = (".prisma-safety.yaml", ".prisma-safety.yml", "prisma-safety.yaml")
PACKAGE_MANIFEST_FILENAME = "package.json"


class ConfigurationError(Exception):
    """Raised when a configuration file or package manifest is invalid."""


def load_project_configuration(config_path: Path | str) -> ProjectConfiguration:
    """Load and validate a YAML project configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(
            f"Configuration file {path} is not valid UTF-8: {exc.reason}"
        ) from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema_value = _optional_string(parsed.get("schema"), "schema")
    schema_path = _resolve_path(path.parent, schema_value) if schema_value else None
    return ProjectConfiguration(path=path, schema_path=schema_path)


def find_project_configuration(start_dir: Path | str) -> Path | None:
    """Search `start_dir` and its parents for a project configuration file."""
    current = Path(start_dir).resolve()
    for directory in (current, *current.parents):
        for filename in PROJECT_CONFIG_FILENAMES:
            candidate = directory / filename
            if candidate.is_file():
                return candidate
    return None


def read_package_manifest_schema(start_dir: Path | str) -> Path | None:
    """Return the `prisma.schema` path declared in `package.json`, if any."""
    manifest_path = Path(start_dir) / PACKAGE_MANIFEST_FILENAME
    if not manifest_path.is_file():
        return None
    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigurationError(
            f"{PACKAGE_MANIFEST_FILENAME} is not valid UTF-8: {exc.reason}"
        ) from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid {PACKAGE_MANIFEST_FILENAME}: {exc}") from exc
    if not isinstance(manifest, Mapping):
        return None
    prisma_section = manifest.get("prisma")
    if not isinstance(prisma_section, Mapping):
        return None
    schema_value = _optional_string(prisma_section.get("schema"), "package.json prisma.schema")
    return _resolve_path(manifest_path.parent, schema_value) if schema_value else None


def resolve_schema_location(
    explicit_schema: Path | str | None = None,
    *,
    config_path: Path | str | None = None,
    start_dir: Path | str | None = None,
) -> SchemaLocation:
    """Resolve the schema path: option, project config, package manifest, then default.

    Args:
      explicit_schema: Path passed on the command line, if any.
      config_path: Explicit project configuration file; when omitted the file is
        searched for from `start_dir` upward.
      start_dir: Directory to resolve from; defaults to the working directory.

    Raises:
      ConfigurationError: If an explicit or discovered configuration is invalid.
    """
    base_dir = Path(start_dir) if start_dir is not None else Path.cwd()
    location = _resolve_schema_location(explicit_schema, config_path, base_dir)
    logger.debug("Using schema %s (from %s)", location.path, location.origin.value)
    return location


def _resolve_schema_location(
    explicit_schema: Path | str | None, config_path: Path | str | None, base_dir: Path
) -> SchemaLocation:
    if explicit_schema:
        return SchemaLocation(path=Path(explicit_schema), origin=SchemaPathOrigin.OPTION)

    project_config_path = (
        Path(config_path) if config_path is not None else find_project_configuration(base_dir)
    )
    if project_config_path is not None:
        configuration = load_project_configuration(project_config_path)
        if configuration.schema_path is not None:
            return SchemaLocation(
                path=configuration.schema_path, origin=SchemaPathOrigin.PROJECT_CONFIG
            )

    manifest_schema = read_package_manifest_schema(base_dir)
    if manifest_schema is not None:
        return SchemaLocation(path=manifest_schema, origin=SchemaPathOrigin.PACKAGE_MANIFEST)

    return SchemaLocation(path=base_dir / DEFAULT_SCHEMA_PATH, origin=SchemaPathOrigin.DEFAULT)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return base_path / candidate
    return candidate


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None

"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class SchemaPathOrigin(str, Enum):
    """Where the schema path was taken from, in descending priority."""

    OPTION = "option"
    PROJECT_CONFIG = "project_config"
    PACKAGE_MANIFEST = "package_manifest"
    DEFAULT = "default"


@dataclass(frozen=True)
class ProjectConfiguration:
    """Settings read from a `.prisma-safety.yaml` project configuration file."""

    path: Path
    schema_path: Path | None


@dataclass(frozen=True)
class SchemaLocation:
    """Resolved schema file path and the source that provided it."""

    path: Path
    origin: SchemaPathOrigin

"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import (
    DEFAULT_SCHEMA_PATH,
    ConfigurationError,
    find_project_configuration,
    load_project_configuration,
    read_package_manifest_schema,
    resolve_schema_location,
)
from .runtime_settings import ProjectConfiguration, SchemaLocation, SchemaPathOrigin

__all__ = [
    "ProjectConfiguration",
    "SchemaLocation",
    "SchemaPathOrigin",
    "ConfigurationError",
    "find_project_configuration",
    "load_project_configuration",
    "read_package_manifest_schema",
    "resolve_schema_location",
    "DEFAULT_SCHEMA_PATH",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]

"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = ".prisma-safety.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Project configuration for prisma-safety.
# Commit this file at the repository root; it is found from any subdirectory.

# Path to the Prisma schema, relative to this file.
# The --schema option takes precedence over this value, and this value takes
# precedence over the "prisma.schema" field of package.json.
schema: "prisma/schema.prisma"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML project configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder project configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()

"""Previous schema retrieval exports."""

from .previous_schema_source import (
    CommandResult,
    CommandRunner,
    RevisionLookupError,
    read_schema_at_revision,
    read_schema_file,
    sanitize_revision,
)

__all__ = [
    "CommandResult",
    "CommandRunner",
    "RevisionLookupError",
    "read_schema_at_revision",
    "read_schema_file",
    "sanitize_revision",
]

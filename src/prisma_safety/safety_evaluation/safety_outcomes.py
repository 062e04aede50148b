"""Safety evaluation domain entities."""

from __future__ import annotations

from dataclasses import dataclass

DELETED_TABLE_MESSAGE = "Expected a deleted table to be marked with @@ignore prior to deletion."
DELETED_FIELD_MESSAGE = "Expected deleted field to have been marked with @ignore prior to delete."


@dataclass(frozen=True)
class SafetyIssue:
    """One unannounced removal found between two schema snapshots."""

    model: str
    message: str
    field: str | None = None

    @property
    def location(self) -> str:
        """Return `Model` or `Model.field`."""
        return self.model if self.field is None else f"{self.model}.{self.field}"

"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from prisma_safety.configuration.runtime_settings import SchemaLocation
from prisma_safety.safety_evaluation.safety_outcomes import SafetyIssue


@dataclass(frozen=True)
class SafetyCheckRequest:
    """Input contract for one schema safety check."""

    base_revision: str | None = None
    previous_schema_path: str | None = None
    schema_path: str | None = None
    config_path: str | None = None
    working_dir: Path | None = None


@dataclass(frozen=True)
class SafetyCheckOutcome:
    """Output contract for one completed schema safety check."""

    schema_location: SchemaLocation
    issues: tuple[SafetyIssue, ...]

    @property
    def is_safe(self) -> bool:
        """Return True when no unsafe removals were found."""
        return not self.issues

"""Schema safety check use-case service."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from prisma_safety.configuration import ConfigurationError, resolve_schema_location
from prisma_safety.revision_retrieval import (
    CommandRunner,
    RevisionLookupError,
    read_schema_at_revision,
    read_schema_file,
)
from prisma_safety.safety_evaluation import list_safety_issues
from prisma_safety.schema_parsing import SchemaDocument, SchemaParseError, parse_schema

from .run_contracts import SafetyCheckOutcome, SafetyCheckRequest

logger = logging.getLogger(__name__)


class SafetyCheckError(Exception):
    """Raised when the safety check cannot be run."""


def execute_schema_safety_check(
    request: SafetyCheckRequest,
    *,
    run_command: CommandRunner | None = None,
) -> SafetyCheckOutcome:
    """Compare the current schema against its previous version and return the issues found."""
    _validate_previous_source(request)
    working_dir = (request.working_dir or Path.cwd()).resolve()
    try:
        location = resolve_schema_location(
            request.schema_path,
            config_path=request.config_path,
            start_dir=working_dir,
        )
    except ConfigurationError as exc:
        raise SafetyCheckError(str(exc)) from exc

    schema_path = location.path if location.path.is_absolute() else working_dir / location.path
    with ThreadPoolExecutor(max_workers=2) as executor:
        current_future = executor.submit(read_schema_file, schema_path)
        previous_future = executor.submit(
            _read_previous_schema, request, schema_path, working_dir, run_command
        )
        try:
            current_text = current_future.result()
            previous_text = previous_future.result()
        except (RevisionLookupError, OSError) as exc:
            raise SafetyCheckError(str(exc)) from exc

    current = _parse_snapshot(current_text, f"current schema {schema_path}")
    previous = _parse_snapshot(previous_text, _previous_label(request))
    issues = tuple(list_safety_issues(previous, current))
    logger.debug("Found %d unsafe change(s) in %s", len(issues), schema_path)
    return SafetyCheckOutcome(schema_location=location, issues=issues)


def _validate_previous_source(request: SafetyCheckRequest) -> None:
    if request.base_revision and request.previous_schema_path:
        raise SafetyCheckError(
            "Provide either a base revision or a previous schema path, not both."
        )
    if not request.base_revision and not request.previous_schema_path:
        raise SafetyCheckError("Either a base revision or a previous schema path is required.")


def _read_previous_schema(
    request: SafetyCheckRequest,
    schema_path: Path,
    working_dir: Path,
    run_command: CommandRunner | None,
) -> str:
    if request.previous_schema_path:
        previous_path = Path(request.previous_schema_path)
        if not previous_path.is_absolute():
            previous_path = working_dir / previous_path
        return read_schema_file(previous_path)
    return read_schema_at_revision(
        schema_path,
        request.base_revision or "",
        cwd=working_dir,
        run_command=run_command,
    )


def _parse_snapshot(text: str, label: str) -> SchemaDocument:
    try:
        return parse_schema(text)
    except SchemaParseError as exc:
        raise SafetyCheckError(f"Failed to parse {label}: {exc}") from exc


def _previous_label(request: SafetyCheckRequest) -> str:
    if request.previous_schema_path:
        return f"previous schema {request.previous_schema_path}"
    return f"schema at revision {request.base_revision}"

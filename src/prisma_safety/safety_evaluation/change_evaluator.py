"""Safety policy over the model and field diffs of two schema snapshots."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from prisma_safety.schema_diff import (
    diff_fields,
    diff_models,
    extract_decorations,
    extract_models,
    has_ignore_attribute,
)
from prisma_safety.schema_diff.diff_models import RetainedPair
from prisma_safety.schema_parsing.schema_nodes import FieldDeclaration, ModelBlock, SchemaDocument

from .issue_rendering import render_safety_issues
from .safety_outcomes import DELETED_FIELD_MESSAGE, DELETED_TABLE_MESSAGE, SafetyIssue


class UnsafeSchemaChangeError(Exception):
    """Raised by `assert_safe_schema_change` when unsafe removals are present."""

    def __init__(self, issues: Sequence[SafetyIssue]) -> None:
        super().__init__(f"Unsafe schema change:\n{render_safety_issues(issues)}")
        self.issues = tuple(issues)


@dataclass(frozen=True)
class _EvaluationContext:
    """Read-only lookups shared by both evaluation passes."""

    current_models_by_name: Mapping[str, ModelBlock]


def list_safety_issues(previous: SchemaDocument, current: SchemaDocument) -> list[SafetyIssue]:
    """Return every unannounced table or column removal between two snapshots.

    Deleted models are reported before deleted fields of retained models.
    """
    context = _EvaluationContext(current_models_by_name=extract_models(current))
    model_changes = diff_models(previous, current)

    issues = [
        issue
        for model in model_changes.deleted
        if (issue := _deleted_model_issue(model)) is not None
    ]
    for pair in model_changes.remaining:
        issues.extend(_deleted_field_issues(pair, context))
    return issues


def assert_safe_schema_change(previous: SchemaDocument, current: SchemaDocument) -> None:
    """Raise `UnsafeSchemaChangeError` when the change between snapshots is unsafe."""
    issues = list_safety_issues(previous, current)
    if issues:
        raise UnsafeSchemaChangeError(issues)


def is_relation_field(
    field: FieldDeclaration, current_models_by_name: Mapping[str, ModelBlock]
) -> bool:
    """Return True when the field's type names a model still declared in the current snapshot.

    Type references use declared model names, never `@@map` storage names.
    """
    return field.field_type in current_models_by_name


def _deleted_model_issue(model: ModelBlock) -> SafetyIssue | None:
    if has_ignore_attribute(extract_decorations(model)):
        return None
    return SafetyIssue(model=model.name, message=DELETED_TABLE_MESSAGE)


def _deleted_field_issues(
    pair: RetainedPair[ModelBlock], context: _EvaluationContext
) -> list[SafetyIssue]:
    issues: list[SafetyIssue] = []
    for field in diff_fields(pair.previous, pair.current).deleted:
        # Dropping a relation removes a virtual reference; its scalar FK is checked on its own.
        if is_relation_field(field, context.current_models_by_name):
            continue
        if has_ignore_attribute(field.attributes):
            continue
        issues.append(
            SafetyIssue(model=pair.current.name, field=field.name, message=DELETED_FIELD_MESSAGE)
        )
    return issues

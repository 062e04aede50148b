"""Safety evaluation domain exports."""

from .change_evaluator import (
    UnsafeSchemaChangeError,
    assert_safe_schema_change,
    is_relation_field,
    list_safety_issues,
)
from .issue_rendering import render_safety_issues
from .safety_outcomes import DELETED_FIELD_MESSAGE, DELETED_TABLE_MESSAGE, SafetyIssue

__all__ = [
    "DELETED_FIELD_MESSAGE",
    "DELETED_TABLE_MESSAGE",
    "SafetyIssue",
    "UnsafeSchemaChangeError",
    "assert_safe_schema_change",
    "is_relation_field",
    "list_safety_issues",
    "render_safety_issues",
]

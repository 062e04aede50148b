"""Safe migration checker for Prisma schema files."""

import logging

from .safety_evaluation import (
    SafetyIssue,
    UnsafeSchemaChangeError,
    assert_safe_schema_change,
    list_safety_issues,
    render_safety_issues,
)
from .schema_parsing import SchemaParseError, parse_schema

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SafetyIssue",
    "SchemaParseError",
    "UnsafeSchemaChangeError",
    "assert_safe_schema_change",
    "list_safety_issues",
    "parse_schema",
    "render_safety_issues",
]

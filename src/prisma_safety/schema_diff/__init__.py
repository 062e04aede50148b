"""Schema diff exports."""

from .diff_models import RetainedPair, SchemaDiff
from .entity_index import (
    extract_decorations,
    extract_fields,
    extract_models,
    field_identity,
    has_ignore_attribute,
    index_models_by_identity,
    model_identity,
)
from .keyed_diff import diff_by_identity, diff_fields, diff_models

__all__ = [
    "RetainedPair",
    "SchemaDiff",
    "diff_by_identity",
    "diff_fields",
    "diff_models",
    "extract_decorations",
    "extract_fields",
    "extract_models",
    "field_identity",
    "has_ignore_attribute",
    "index_models_by_identity",
    "model_identity",
]

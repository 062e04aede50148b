"""Keyed set-difference of two schema snapshots."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from prisma_safety.schema_parsing.schema_nodes import (
    FieldDeclaration,
    ModelBlock,
    SchemaDocument,
)

from .diff_models import RetainedPair, SchemaDiff
from .entity_index import extract_fields, index_models_by_identity

T = TypeVar("T")


def diff_by_identity(previous: Mapping[str, T], current: Mapping[str, T]) -> SchemaDiff[T]:
    """Partition entities by identity into added, deleted and remaining.

    `remaining` keeps the previous snapshot's order; `added` keeps the current
    snapshot's order.
    """
    deleted: list[T] = []
    remaining: list[RetainedPair[T]] = []
    unmatched_keys = dict.fromkeys(current)

    for key, previous_entity in previous.items():
        if key in current:
            remaining.append(RetainedPair(previous=previous_entity, current=current[key]))
            unmatched_keys.pop(key, None)
        else:
            deleted.append(previous_entity)

    added = [current[key] for key in unmatched_keys]
    return SchemaDiff(added=tuple(added), deleted=tuple(deleted), remaining=tuple(remaining))


def diff_models(previous: SchemaDocument, current: SchemaDocument) -> SchemaDiff[ModelBlock]:
    """Diff the model layer of two snapshots by persisted model identity."""
    return diff_by_identity(index_models_by_identity(previous), index_models_by_identity(current))


def diff_fields(previous: ModelBlock, current: ModelBlock) -> SchemaDiff[FieldDeclaration]:
    """Diff the fields of one retained model pair by field identity."""
    return diff_by_identity(extract_fields(previous), extract_fields(current))

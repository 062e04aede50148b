"""Model and field extraction keyed by declared name or persisted identity."""

from __future__ import annotations

from collections.abc import Iterable

from prisma_safety.schema_parsing.schema_nodes import (
    Attribute,
    FieldDeclaration,
    ModelBlock,
    SchemaDocument,
    StringLiteral,
)

REMAP_ATTRIBUTE = "map"
IGNORE_ATTRIBUTE = "ignore"


def extract_models(document: SchemaDocument) -> dict[str, ModelBlock]:
    """Return `model` declarations keyed by declared name."""
    return {
        declaration.name: declaration
        for declaration in document.declarations
        if isinstance(declaration, ModelBlock) and declaration.kind == "model"
    }


def extract_fields(model: ModelBlock) -> dict[str, FieldDeclaration]:
    """Return the model's fields keyed by field identity."""
    return {
        field_identity(member): member
        for member in model.members
        if isinstance(member, FieldDeclaration)
    }


def extract_decorations(model: ModelBlock) -> list[Attribute]:
    """Return the block-level attributes attached to a model."""
    return [member for member in model.members if isinstance(member, Attribute)]


def model_identity(model: ModelBlock) -> str:
    """Return the persisted table name from `@@map`, falling back to the declared name.

    The table name is what matters for data safety; the declared name only drives
    generated client code, so a model renamed under a constant `@@map` is the same
    table.
    """
    storage_name = _mapped_storage_name(extract_decorations(model))
    return storage_name if storage_name is not None else model.name


def field_identity(field: FieldDeclaration) -> str:
    """Return the declared field name; a field-level `@map` does not change identity."""
    return field.name


def index_models_by_identity(document: SchemaDocument) -> dict[str, ModelBlock]:
    """Return `model` declarations keyed by persisted identity."""
    return {model_identity(model): model for model in extract_models(document).values()}


def has_ignore_attribute(attributes: Iterable[Attribute]) -> bool:
    """Return True when `@ignore` / `@@ignore` is present."""
    return any(attribute.name == IGNORE_ATTRIBUTE for attribute in attributes)


def _mapped_storage_name(decorations: Iterable[Attribute]) -> str | None:
    for decoration in decorations:
        if decoration.name != REMAP_ATTRIBUTE:
            continue
        for argument in decoration.arguments:
            if argument.key not in (None, "name"):
                continue
            if isinstance(argument.value, StringLiteral) and argument.value.value:
                return argument.value.value
            return None
        return None
    return None

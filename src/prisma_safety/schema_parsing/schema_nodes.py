"""Prisma schema syntax tree entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class StringLiteral:
    """Quoted string argument value."""

    value: str


@dataclass(frozen=True)
class RawValue:
    """Unquoted argument value such as an identifier, number or dotted name."""

    text: str


@dataclass(frozen=True)
class FunctionCall:
    """Function-style argument value, e.g. `now()` or `dbgenerated("...")`."""

    name: str
    arguments: tuple[AttributeArgument, ...]


@dataclass(frozen=True)
class ValueList:
    """Bracketed argument value, e.g. `[userId, tenantId]`."""

    items: tuple[ArgumentValue, ...]


ArgumentValue = StringLiteral | RawValue | FunctionCall | ValueList


@dataclass(frozen=True)
class AttributeArgument:
    """One positional or named attribute argument."""

    value: ArgumentValue
    key: str | None = None


@dataclass(frozen=True)
class Attribute:
    """Field-level (`@name`) or block-level (`@@name`) attribute."""

    name: str
    scope: Literal["field", "block"]
    arguments: tuple[AttributeArgument, ...] = ()


@dataclass(frozen=True)
class FieldDeclaration:
    """Field declared inside a model, view or composite type block."""

    name: str
    field_type: str
    is_list: bool = False
    is_optional: bool = False
    attributes: tuple[Attribute, ...] = ()


ModelMember = FieldDeclaration | Attribute


@dataclass(frozen=True)
class ModelBlock:
    """`model`, `view` or `type` declaration."""

    kind: Literal["model", "view", "type"]
    name: str
    members: tuple[ModelMember, ...] = ()


@dataclass(frozen=True)
class EnumValue:
    """Single enum member."""

    name: str
    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True)
class EnumBlock:
    """`enum` declaration."""

    name: str
    values: tuple[EnumValue, ...] = ()
    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True)
class ConfigBlock:
    """`datasource` or `generator` declaration with key/value assignments."""

    kind: Literal["datasource", "generator"]
    name: str
    assignments: tuple[tuple[str, ArgumentValue], ...] = ()


Declaration = ModelBlock | EnumBlock | ConfigBlock


@dataclass(frozen=True)
class SchemaDocument:
    """Ordered top-level declarations of one parsed schema snapshot."""

    declarations: tuple[Declaration, ...] = ()

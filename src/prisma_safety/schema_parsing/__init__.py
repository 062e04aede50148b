"""Schema parsing exports."""

from .schema_lexer import SchemaParseError
from .schema_nodes import (
    ArgumentValue,
    Attribute,
    AttributeArgument,
    ConfigBlock,
    Declaration,
    EnumBlock,
    EnumValue,
    FieldDeclaration,
    FunctionCall,
    ModelBlock,
    ModelMember,
    RawValue,
    SchemaDocument,
    StringLiteral,
    ValueList,
)
from .schema_parser import parse_schema

__all__ = [
    "ArgumentValue",
    "Attribute",
    "AttributeArgument",
    "ConfigBlock",
    "Declaration",
    "EnumBlock",
    "EnumValue",
    "FieldDeclaration",
    "FunctionCall",
    "ModelBlock",
    "ModelMember",
    "RawValue",
    "SchemaDocument",
    "SchemaParseError",
    "StringLiteral",
    "ValueList",
    "parse_schema",
]

"""Recursive-descent parser producing a Prisma schema document."""

from __future__ import annotations

from typing import Literal

from .schema_lexer import SchemaParseError, Token, tokenize
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

_MODEL_KINDS = ("model", "view", "type")
_CONFIG_KINDS = ("datasource", "generator")


def parse_schema(text: str) -> SchemaDocument:
    """Parse Prisma schema text into an immutable document."""
    return _SchemaParser(tokenize(text)).parse_document()


class _SchemaParser:
    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.position = 0

    def parse_document(self) -> SchemaDocument:
        declarations: list[Declaration] = []
        while self._current().type != "EOF":
            declarations.append(self._parse_declaration())
        return SchemaDocument(declarations=tuple(declarations))

    def _current(self) -> Token:
        return self.tokens[self.position]

    def _peek(self, offset: int = 1) -> Token:
        index = min(self.position + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def _advance(self) -> Token:
        token = self.tokens[self.position]
        self.position += 1
        return token

    def _match(self, token_type: str) -> bool:
        if self._current().type == token_type:
            self._advance()
            return True
        return False

    def _expect(self, token_type: str, message: str) -> Token:
        token = self._current()
        if token.type != token_type:
            raise SchemaParseError(
                f"{message}, got {token.type} {token.value!r}",
                line=token.line,
                column=token.column,
            )
        return self._advance()

    def _parse_declaration(self) -> Declaration:
        keyword = self._expect("IDENT", "Expected a block keyword")
        if keyword.value in _MODEL_KINDS:
            return self._parse_model_block(keyword.value)
        if keyword.value == "enum":
            return self._parse_enum_block()
        if keyword.value in _CONFIG_KINDS:
            return self._parse_config_block(keyword.value)
        raise SchemaParseError(
            f"Unknown block type '{keyword.value}'", line=keyword.line, column=keyword.column
        )

    def _parse_model_block(self, kind: str) -> ModelBlock:
        name = self._expect("IDENT", f"Expected {kind} name").value
        self._expect("LBRACE", f"Expected '{{' after {kind} name")
        members: list[ModelMember] = []
        while not self._match("RBRACE"):
            token = self._current()
            if token.type == "ATAT":
                members.append(self._parse_attribute("block"))
            elif token.type == "IDENT":
                members.append(self._parse_field())
            else:
                raise SchemaParseError(
                    f"Unexpected {token.type} {token.value!r} in {kind} '{name}'",
                    line=token.line,
                    column=token.column,
                )
        return ModelBlock(kind=_model_kind(kind), name=name, members=tuple(members))

    def _parse_field(self) -> FieldDeclaration:
        name = self._advance().value
        field_type = self._expect("IDENT", f"Expected a type for field '{name}'").value
        if self._current().type == "LPAREN":
            self._parse_arguments()
        is_list = False
        if self._match("LBRACKET"):
            self._expect("RBRACKET", "Expected ']' after '['")
            is_list = True
        is_optional = self._match("QUESTION")
        attributes: list[Attribute] = []
        while self._current().type == "AT":
            attributes.append(self._parse_attribute("field"))
        return FieldDeclaration(
            name=name,
            field_type=field_type,
            is_list=is_list,
            is_optional=is_optional,
            attributes=tuple(attributes),
        )

    def _parse_enum_block(self) -> EnumBlock:
        name = self._expect("IDENT", "Expected enum name").value
        self._expect("LBRACE", "Expected '{' after enum name")
        values: list[EnumValue] = []
        attributes: list[Attribute] = []
        while not self._match("RBRACE"):
            if self._current().type == "ATAT":
                attributes.append(self._parse_attribute("block"))
                continue
            value_name = self._expect("IDENT", f"Expected a value in enum '{name}'").value
            value_attributes: list[Attribute] = []
            while self._current().type == "AT":
                value_attributes.append(self._parse_attribute("field"))
            values.append(EnumValue(name=value_name, attributes=tuple(value_attributes)))
        return EnumBlock(name=name, values=tuple(values), attributes=tuple(attributes))

    def _parse_config_block(self, kind: str) -> ConfigBlock:
        name = self._expect("IDENT", f"Expected {kind} name").value
        self._expect("LBRACE", f"Expected '{{' after {kind} name")
        assignments: list[tuple[str, ArgumentValue]] = []
        while not self._match("RBRACE"):
            key = self._expect("IDENT", f"Expected a setting in {kind} '{name}'").value
            self._expect("EQUALS", f"Expected '=' after '{key}'")
            assignments.append((key, self._parse_value()))
        return ConfigBlock(kind=_config_kind(kind), name=name, assignments=tuple(assignments))

    def _parse_attribute(self, scope: Literal["field", "block"]) -> Attribute:
        self._advance()
        name_parts = [self._expect("IDENT", "Expected attribute name").value]
        while self._match("DOT"):
            name_parts.append(self._expect("IDENT", "Expected name after '.'").value)
        arguments: tuple[AttributeArgument, ...] = ()
        if self._current().type == "LPAREN":
            arguments = self._parse_arguments()
        return Attribute(name=".".join(name_parts), scope=scope, arguments=arguments)

    def _parse_arguments(self) -> tuple[AttributeArgument, ...]:
        self._expect("LPAREN", "Expected '('")
        arguments: list[AttributeArgument] = []
        while not self._match("RPAREN"):
            key = None
            if self._current().type == "IDENT" and self._peek().type == "COLON":
                key = self._advance().value
                self._advance()
            arguments.append(AttributeArgument(value=self._parse_value(), key=key))
            if not self._match("COMMA") and self._current().type != "RPAREN":
                token = self._current()
                raise SchemaParseError(
                    f"Expected ',' or ')' in argument list, got {token.type} {token.value!r}",
                    line=token.line,
                    column=token.column,
                )
        return tuple(arguments)

    def _parse_value(self) -> ArgumentValue:
        token = self._current()
        if token.type == "STRING":
            self._advance()
            return StringLiteral(token.value)
        if token.type == "NUMBER":
            self._advance()
            return RawValue(token.value)
        if token.type == "LBRACKET":
            return self._parse_value_list()
        if token.type == "IDENT":
            self._advance()
            name_parts = [token.value]
            while self._match("DOT"):
                name_parts.append(self._expect("IDENT", "Expected name after '.'").value)
            name = ".".join(name_parts)
            if self._current().type == "LPAREN":
                return FunctionCall(name=name, arguments=self._parse_arguments())
            return RawValue(name)
        raise SchemaParseError(
            f"Expected a value, got {token.type} {token.value!r}",
            line=token.line,
            column=token.column,
        )

    def _parse_value_list(self) -> ValueList:
        self._expect("LBRACKET", "Expected '['")
        items: list[ArgumentValue] = []
        while not self._match("RBRACKET"):
            items.append(self._parse_value())
            if not self._match("COMMA") and self._current().type != "RBRACKET":
                token = self._current()
                raise SchemaParseError(
                    f"Expected ',' or ']' in list, got {token.type} {token.value!r}",
                    line=token.line,
                    column=token.column,
                )
        return ValueList(items=tuple(items))


def _model_kind(kind: str) -> Literal["model", "view", "type"]:
    if kind == "view":
        return "view"
    if kind == "type":
        return "type"
    return "model"


def _config_kind(kind: str) -> Literal["datasource", "generator"]:
    return "generator" if kind == "generator" else "datasource"

"""Tokenizer for Prisma schema text."""

from __future__ import annotations

from dataclasses import dataclass

_PUNCTUATION_TOKENS = {
    "{": "LBRACE",
    "}": "RBRACE",
    "(": "LPAREN",
    ")": "RPAREN",
    "[": "LBRACKET",
    "]": "RBRACKET",
    ",": "COMMA",
    ":": "COLON",
    "=": "EQUALS",
    "?": "QUESTION",
    ".": "DOT",
}

_ESCAPE_TABLE = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}


class SchemaParseError(Exception):
    """Raised when schema text cannot be tokenized or parsed."""

    def __init__(self, message: str, *, line: int, column: int) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.line = line
        self.column = column


@dataclass(frozen=True)
class Token:
    type: str
    value: str
    line: int
    column: int


def tokenize(source: str) -> list[Token]:
    """Split schema text into tokens, dropping whitespace and `//` comments."""
    source = source.removeprefix("\ufeff")
    tokens: list[Token] = []
    for line_idx, line in enumerate(source.splitlines()):
        tokens.extend(_scan_line(line, line_idx + 1))
    tokens.append(Token("EOF", "", len(source.splitlines()) + 1, 1))
    return tokens


def _scan_line(line: str, line_no: int) -> list[Token]:
    tokens: list[Token] = []
    i = 0
    while i < len(line):
        ch = line[i]
        column = i + 1
        if ch.isspace():
            i += 1
            continue
        if line.startswith("//", i):
            break
        if ch == "@":
            if line.startswith("@@", i):
                tokens.append(Token("ATAT", "@@", line_no, column))
                i += 2
            else:
                tokens.append(Token("AT", "@", line_no, column))
                i += 1
            continue
        token_type = _PUNCTUATION_TOKENS.get(ch)
        if token_type is not None:
            tokens.append(Token(token_type, ch, line_no, column))
            i += 1
            continue
        if ch == '"':
            value, i = _read_string(line, i, line_no)
            tokens.append(Token("STRING", value, line_no, column))
            continue
        if ch.isdigit() or (ch == "-" and i + 1 < len(line) and line[i + 1].isdigit()):
            value, i = _read_number(line, i)
            tokens.append(Token("NUMBER", value, line_no, column))
            continue
        if ch.isalpha() or ch == "_":
            value, i = _read_identifier(line, i)
            tokens.append(Token("IDENT", value, line_no, column))
            continue
        raise SchemaParseError(f"Unsupported character {ch!r}", line=line_no, column=column)
    return tokens


def _read_string(line: str, start: int, line_no: int) -> tuple[str, int]:
    value_chars: list[str] = []
    i = start + 1
    while i < len(line):
        ch = line[i]
        if ch == '"':
            return "".join(value_chars), i + 1
        if ch == "\\" and i + 1 < len(line):
            marker = line[i + 1]
            value_chars.append(_ESCAPE_TABLE.get(marker, "\\" + marker))
            i += 2
            continue
        value_chars.append(ch)
        i += 1
    raise SchemaParseError("Unterminated string literal", line=line_no, column=start + 1)


def _read_number(line: str, start: int) -> tuple[str, int]:
    i = start + 1
    while i < len(line) and (line[i].isdigit() or line[i] == "."):
        i += 1
    return line[start:i], i


def _read_identifier(line: str, start: int) -> tuple[str, int]:
    i = start
    while i < len(line) and (line[i].isalnum() or line[i] == "_"):
        i += 1
    return line[start:i], i

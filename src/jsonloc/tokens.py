from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import Span


class TokenKind(str, Enum):
    # Punctuation
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    COLON = ":"
    COMMA = ","

    # Literals
    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    NULL = "null"


LITERAL_KINDS = frozenset({TokenKind.STRING, TokenKind.NUMBER, TokenKind.BOOLEAN, TokenKind.NULL})


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    lexeme: str  # raw source text; strings keep their quotes and escapes
    span: Span
    value: float | bool | None = None  # decoded NUMBER / BOOLEAN value

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.lexeme!r}, {self.span.format()})"

from __future__ import annotations

from .api import parse_source
from .ast import (
    ArrayNode,
    BoolNode,
    IdentifierNode,
    Node,
    NullNode,
    NumberNode,
    ObjectNode,
    PropertyNode,
    StringNode,
    Value,
)
from .errors import (
    InvalidEscapeError,
    JsonError,
    LexError,
    MalformedEscapeError,
    MalformedNumberError,
    NestingTooDeepError,
    ParseError,
    UnexpectedCharError,
    UnexpectedEofError,
    UnexpectedTokenError,
    UnterminatedStringError,
)
from .lexer import tokenize
from .parser import decode_string, parse
from .spans import Loc, Span
from .tokens import Token, TokenKind
from .visit import Visitor

__all__ = [
    "ArrayNode",
    "BoolNode",
    "IdentifierNode",
    "InvalidEscapeError",
    "JsonError",
    "LexError",
    "Loc",
    "MalformedEscapeError",
    "MalformedNumberError",
    "NestingTooDeepError",
    "Node",
    "NullNode",
    "NumberNode",
    "ObjectNode",
    "ParseError",
    "PropertyNode",
    "Span",
    "StringNode",
    "Token",
    "TokenKind",
    "UnexpectedCharError",
    "UnexpectedEofError",
    "UnexpectedTokenError",
    "UnterminatedStringError",
    "Value",
    "Visitor",
    "decode_string",
    "parse",
    "parse_source",
    "tokenize",
]

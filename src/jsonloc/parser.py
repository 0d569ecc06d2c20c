from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .ast import (
    ArrayNode,
    BoolNode,
    IdentifierNode,
    NullNode,
    NumberNode,
    ObjectNode,
    PropertyNode,
    StringNode,
    Value,
)
from .errors import (
    InvalidEscapeError,
    NestingTooDeepError,
    UnexpectedEofError,
    UnexpectedTokenError,
)
from .spans import Loc, Span
from .tokens import LITERAL_KINDS, Token, TokenKind


DEFAULT_MAX_DEPTH = 200

# Read-only escape table; \u is handled separately.
_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_VALUE_START = "a string, number, true, false, null, { or ["


class ObjectState(Enum):
    START = auto()
    OPENED = auto()
    AFTER_PROPERTY = auto()
    AFTER_COMMA = auto()


class PropertyState(Enum):
    START = auto()
    AFTER_KEY = auto()
    AFTER_COLON = auto()


class ArrayState(Enum):
    START = auto()
    OPENED = auto()
    AFTER_ITEM = auto()
    AFTER_COMMA = auto()


def _escape_span(span: Span, start: int, length: int) -> Span:
    # String lexemes never contain raw line breaks, so columns advance with offsets.
    s = Loc(offset=span.start.offset + start, line=span.start.line, column=span.start.column + start)
    e = Loc(offset=s.offset + length, line=s.line, column=s.column + length)
    return Span(start=s, end=e)


def _hex4(raw: str, i: int) -> int | None:
    digits = raw[i : i + 4]
    if len(digits) != 4 or not all(c in "0123456789abcdefABCDEF" for c in digits):
        return None
    return int(digits, 16)


def decode_string(raw: str, span: Span) -> str:
    """Resolve the escapes of a raw string lexeme (quotes included).

    A ``\\uD8xx\\uDCxx`` surrogate pair is combined into one character; a lone
    surrogate escape decodes to its own code point.
    """
    out: list[str] = []
    i = 1
    end = len(raw) - 1
    while i < end:
        ch = raw[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue

        esc = raw[i + 1] if i + 1 < end else ""
        if esc in _ESCAPES:
            out.append(_ESCAPES[esc])
            i += 2
            continue
        if esc != "u":
            raise InvalidEscapeError(
                span=_escape_span(span, i, 2 if esc else 1),
                message=f"invalid escape character {esc!r}",
                char=esc,
            )

        code = _hex4(raw, i + 2)
        if code is None or i + 6 > end:
            raise InvalidEscapeError(
                span=_escape_span(span, i, min(6, end - i)),
                message="\\u escape requires exactly four hex digits",
                char=esc,
            )
        i += 6
        if 0xD800 <= code <= 0xDBFF and raw.startswith("\\u", i) and i + 6 <= end:
            low = _hex4(raw, i + 2)
            if low is not None and 0xDC00 <= low <= 0xDFFF:
                code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
                i += 6
        out.append(chr(code))
    return "".join(out)


def _expected(*kinds: TokenKind) -> str:
    return "expected one of: " + ", ".join(k.value for k in kinds)


@dataclass(slots=True)
class Parser:
    tokens: list[Token]
    max_depth: int = DEFAULT_MAX_DEPTH
    index: int = 0
    depth: int = 0

    def parse(self) -> Value:
        value = self.parse_value()
        if self.index < len(self.tokens):
            tok = self.tokens[self.index]
            raise self._unexpected(tok, hint="only one top-level value is allowed")
        return value

    # -- cursor helpers -------------------------------------------------

    def _peek(self) -> Token:
        if self.index >= len(self.tokens):
            if self.tokens:
                loc = self.tokens[-1].span.end
            else:
                loc = Loc()
            raise UnexpectedEofError(span=Span.at(loc), message="unexpected end of input")
        return self.tokens[self.index]

    def _bump(self) -> Token:
        tok = self._peek()
        self.index += 1
        return tok

    def _unexpected(self, tok: Token, hint: str | None = None) -> UnexpectedTokenError:
        return UnexpectedTokenError(
            span=tok.span,
            message=f"unexpected token {tok.lexeme!r}",
            hint=hint,
            token=tok,
        )

    def _enter(self, tok: Token) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingTooDeepError(
                span=tok.span,
                message=f"nesting deeper than {self.max_depth} levels",
                hint="raise max_depth to accept deeper documents",
            )

    # -- productions ----------------------------------------------------

    def parse_value(self) -> Value:
        tok = self._peek()
        if tok.kind in LITERAL_KINDS:
            return self.parse_literal()
        if tok.kind is TokenKind.LBRACE:
            return self.parse_object()
        if tok.kind is TokenKind.LBRACKET:
            return self.parse_array()
        raise self._unexpected(tok, hint=f"expected {_VALUE_START}")

    def parse_literal(self) -> StringNode | NumberNode | BoolNode | NullNode:
        tok = self._peek()
        if tok.kind not in LITERAL_KINDS:
            raise self._unexpected(tok, hint=f"expected {_VALUE_START}")
        self._bump()
        if tok.kind is TokenKind.STRING:
            return StringNode(span=tok.span, value=decode_string(tok.lexeme, tok.span))
        if tok.kind is TokenKind.NUMBER:
            return NumberNode(span=tok.span, value=float(tok.value))
        if tok.kind is TokenKind.BOOLEAN:
            return BoolNode(span=tok.span, value=bool(tok.value))
        if tok.kind is TokenKind.NULL:
            return NullNode(span=tok.span)
        raise AssertionError(f"unhandled literal kind: {tok.kind}")

    def parse_object(self) -> ObjectNode:
        state = ObjectState.START
        properties: list[PropertyNode] = []
        opening = self._peek()

        while True:
            tok = self._peek()
            if state is ObjectState.START:
                if tok.kind is not TokenKind.LBRACE:
                    raise self._unexpected(tok, hint=_expected(TokenKind.LBRACE))
                self._bump()
                self._enter(opening)
                state = ObjectState.OPENED
            elif state is ObjectState.OPENED:
                if tok.kind is TokenKind.RBRACE:
                    return self._close_object(opening, properties)
                if tok.kind is not TokenKind.STRING:
                    raise self._unexpected(tok, hint=_expected(TokenKind.STRING, TokenKind.RBRACE))
                properties.append(self.parse_property())
                state = ObjectState.AFTER_PROPERTY
            elif state is ObjectState.AFTER_PROPERTY:
                if tok.kind is TokenKind.COMMA:
                    self._bump()
                    state = ObjectState.AFTER_COMMA
                elif tok.kind is TokenKind.RBRACE:
                    return self._close_object(opening, properties)
                else:
                    raise self._unexpected(tok, hint=_expected(TokenKind.COMMA, TokenKind.RBRACE))
            elif state is ObjectState.AFTER_COMMA:
                if tok.kind is not TokenKind.STRING:
                    raise self._unexpected(
                        tok, hint="expected a property name; trailing commas are not allowed"
                    )
                properties.append(self.parse_property())
                state = ObjectState.AFTER_PROPERTY
            else:
                raise AssertionError(f"unhandled object state: {state}")

    def _close_object(self, opening: Token, properties: list[PropertyNode]) -> ObjectNode:
        closing = self._bump()
        self.depth -= 1
        return ObjectNode(span=opening.span.merge(closing.span), properties=properties)

    def parse_property(self) -> PropertyNode:
        state = PropertyState.START
        key_tok = self._peek()
        name = ""

        while True:
            tok = self._peek()
            if state is PropertyState.START:
                if tok.kind is not TokenKind.STRING:
                    raise self._unexpected(tok, hint=_expected(TokenKind.STRING))
                self._bump()
                name = decode_string(tok.lexeme, tok.span)
                state = PropertyState.AFTER_KEY
            elif state is PropertyState.AFTER_KEY:
                if tok.kind is not TokenKind.COLON:
                    raise self._unexpected(tok, hint=_expected(TokenKind.COLON))
                self._bump()
                state = PropertyState.AFTER_COLON
            elif state is PropertyState.AFTER_COLON:
                key = IdentifierNode(span=key_tok.span, value=StringNode(span=key_tok.span, value=name))
                value = self.parse_value()
                return PropertyNode(span=key.span.merge(value.span), key=key, value=value)
            else:
                raise AssertionError(f"unhandled property state: {state}")

    def parse_array(self) -> ArrayNode:
        state = ArrayState.START
        items: list[Value] = []
        opening = self._peek()

        while True:
            tok = self._peek()
            if state is ArrayState.START:
                if tok.kind is not TokenKind.LBRACKET:
                    raise self._unexpected(tok, hint=_expected(TokenKind.LBRACKET))
                self._bump()
                self._enter(opening)
                state = ArrayState.OPENED
            elif state is ArrayState.OPENED:
                if tok.kind is TokenKind.RBRACKET:
                    return self._close_array(opening, items)
                items.append(self.parse_value())
                state = ArrayState.AFTER_ITEM
            elif state is ArrayState.AFTER_ITEM:
                if tok.kind is TokenKind.COMMA:
                    self._bump()
                    state = ArrayState.AFTER_COMMA
                elif tok.kind is TokenKind.RBRACKET:
                    return self._close_array(opening, items)
                else:
                    raise self._unexpected(tok, hint=_expected(TokenKind.COMMA, TokenKind.RBRACKET))
            elif state is ArrayState.AFTER_COMMA:
                if tok.kind is TokenKind.RBRACKET:
                    raise self._unexpected(tok, hint="expected a value; trailing commas are not allowed")
                items.append(self.parse_value())
                state = ArrayState.AFTER_ITEM
            else:
                raise AssertionError(f"unhandled array state: {state}")

    def _close_array(self, opening: Token, items: list[Value]) -> ArrayNode:
        closing = self._bump()
        self.depth -= 1
        return ArrayNode(span=opening.span.merge(closing.span), items=items)


def parse(tokens: list[Token], *, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Build a located AST from ``tokens``; raises a ParseError on the first problem."""
    return Parser(tokens=list(tokens), max_depth=max_depth).parse()

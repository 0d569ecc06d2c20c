from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .errors import (
    LexError,
    MalformedEscapeError,
    MalformedNumberError,
    UnexpectedCharError,
    UnterminatedStringError,
)
from .spans import Loc, Span
from .tokens import Token, TokenKind


_PUNCTUATION = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
}

_LITERALS = (
    ("true", TokenKind.BOOLEAN, True),
    ("false", TokenKind.BOOLEAN, False),
    ("null", TokenKind.NULL, None),
)

_SIMPLE_ESCAPES = frozenset('"\\/bfnrt')
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_DIGITS = frozenset("0123456789")


class StringState(Enum):
    START = auto()
    BODY = auto()
    ESCAPE = auto()


class NumberState(Enum):
    START = auto()
    MINUS = auto()
    ZERO = auto()
    INTEGER = auto()
    POINT = auto()
    FRACTION = auto()
    EXPONENT = auto()
    EXPONENT_SIGN = auto()
    EXPONENT_DIGITS = auto()


_ACCEPTING = frozenset(
    {NumberState.ZERO, NumberState.INTEGER, NumberState.FRACTION, NumberState.EXPONENT_DIGITS}
)


def _number_step(state: NumberState, ch: str) -> NumberState | None:
    """Transition of the number automaton; None when ``ch`` cannot extend the lexeme."""
    if state is NumberState.START:
        if ch == "-":
            return NumberState.MINUS
        if ch == "0":
            return NumberState.ZERO
        if ch in _DIGITS:
            return NumberState.INTEGER
        return None
    if state is NumberState.MINUS:
        if ch == "0":
            return NumberState.ZERO
        if ch in _DIGITS:
            return NumberState.INTEGER
        return None
    if state is NumberState.ZERO:
        if ch == ".":
            return NumberState.POINT
        if ch in "eE":
            return NumberState.EXPONENT
        return None
    if state is NumberState.INTEGER:
        if ch in _DIGITS:
            return NumberState.INTEGER
        if ch == ".":
            return NumberState.POINT
        if ch in "eE":
            return NumberState.EXPONENT
        return None
    if state is NumberState.POINT:
        if ch in _DIGITS:
            return NumberState.FRACTION
        return None
    if state is NumberState.FRACTION:
        if ch in _DIGITS:
            return NumberState.FRACTION
        if ch in "eE":
            return NumberState.EXPONENT
        return None
    if state is NumberState.EXPONENT:
        if ch in "+-":
            return NumberState.EXPONENT_SIGN
        if ch in _DIGITS:
            return NumberState.EXPONENT_DIGITS
        return None
    if state is NumberState.EXPONENT_SIGN or state is NumberState.EXPONENT_DIGITS:
        if ch in _DIGITS:
            return NumberState.EXPONENT_DIGITS
        return None
    raise AssertionError(f"unhandled number state: {state}")


@dataclass(slots=True)
class _Cursor:
    src: str
    i: int = 0
    line: int = 1
    col: int = 1

    def eof(self) -> bool:
        return self.i >= len(self.src)

    def peek(self, n: int = 0) -> str:
        j = self.i + n
        if j >= len(self.src):
            return ""
        return self.src[j]

    def advance(self, n: int = 1) -> None:
        for _ in range(n):
            if self.eof():
                return
            ch = self.src[self.i]
            self.i += 1
            if ch == "\r":
                self.line += 1
                self.col = 1
            elif ch == "\n":
                # CR+LF is a single line break.
                if self.i < 2 or self.src[self.i - 2] != "\r":
                    self.line += 1
                self.col = 1
            else:
                self.col += 1

    def pos(self) -> Loc:
        return Loc(offset=self.i, line=self.line, column=self.col)

    def span_from(self, start: Loc) -> Span:
        return Span(start=start, end=self.pos())

    def char_span(self) -> Span:
        """Span of the character under the cursor (zero-width at end of input)."""
        start = self.pos()
        if self.eof():
            return Span.at(start)
        end = Loc(offset=start.offset + 1, line=start.line, column=start.column + 1)
        return Span(start=start, end=end)


def _error(cls: type[LexError], cur: _Cursor, msg: str, hint: str | None = None) -> LexError:
    return cls(span=cur.char_span(), message=msg, hint=hint, char=cur.peek())


def _scan_punctuation(cur: _Cursor) -> Token | None:
    kind = _PUNCTUATION.get(cur.peek())
    if kind is None:
        return None
    start = cur.pos()
    ch = cur.peek()
    cur.advance()
    return Token(kind, ch, cur.span_from(start))


def _scan_string(cur: _Cursor) -> Token | None:
    start = cur.pos()
    state = StringState.START

    while True:
        ch = cur.peek()
        if state is StringState.START:
            if ch != '"':
                return None
            state = StringState.BODY
            cur.advance()
        elif state is StringState.BODY:
            if ch == "":
                raise UnterminatedStringError(
                    span=cur.span_from(start),
                    message="unterminated string literal",
                    hint='close the string with "',
                )
            if ch == '"':
                cur.advance()
                return Token(TokenKind.STRING, cur.src[start.offset : cur.i], cur.span_from(start))
            if ch == "\\":
                state = StringState.ESCAPE
                cur.advance()
            elif ord(ch) < 0x20:
                raise _error(
                    UnexpectedCharError,
                    cur,
                    f"control character {ch!r} in string literal",
                    hint="escape it, e.g. \\n or \\u001f",
                )
            else:
                cur.advance()
        elif state is StringState.ESCAPE:
            if ch == "":
                raise UnterminatedStringError(
                    span=cur.span_from(start),
                    message="unterminated string escape",
                    hint='close the string with "',
                )
            if ch in _SIMPLE_ESCAPES:
                cur.advance()
            elif ch == "u":
                cur.advance()
                for _ in range(4):
                    if cur.peek() not in _HEX_DIGITS:
                        raise _error(
                            MalformedEscapeError,
                            cur,
                            "\\u escape requires exactly four hex digits",
                        )
                    cur.advance()
            else:
                raise _error(
                    MalformedEscapeError,
                    cur,
                    f"invalid escape character {ch!r}",
                    hint='valid escapes are \\" \\\\ \\/ \\b \\f \\n \\r \\t \\uXXXX',
                )
            state = StringState.BODY
        else:
            raise AssertionError(f"unhandled string state: {state}")


def _scan_number(cur: _Cursor) -> Token | None:
    start = cur.pos()
    state = NumberState.START

    while True:
        nxt = _number_step(state, cur.peek()) if not cur.eof() else None
        if nxt is None:
            break
        state = nxt
        cur.advance()

    if state is NumberState.START:
        return None
    if state not in _ACCEPTING:
        raise _error(
            MalformedNumberError,
            cur,
            f"malformed number {cur.src[start.offset : cur.i]!r}",
            hint="a number needs digits after '-', '.', and the exponent marker",
        )
    lexeme = cur.src[start.offset : cur.i]
    return Token(TokenKind.NUMBER, lexeme, cur.span_from(start), float(lexeme))


def _scan_literal(cur: _Cursor) -> Token | None:
    for text, kind, value in _LITERALS:
        if cur.src.startswith(text, cur.i):
            start = cur.pos()
            cur.advance(len(text))
            return Token(kind, text, cur.span_from(start), value)
    return None


_SCANNERS = (_scan_punctuation, _scan_string, _scan_number, _scan_literal)


def tokenize(src: str) -> list[Token]:
    """Split ``src`` into located tokens, raising a LexError on the first bad input."""
    cur = _Cursor(src=src)
    tokens: list[Token] = []

    while not cur.eof():
        ch = cur.peek()

        # whitespace
        if ch in " \t\r\n":
            cur.advance()
            continue

        for scan in _SCANNERS:
            tok = scan(cur)
            if tok is not None:
                tokens.append(tok)
                break
        else:
            raise _error(
                UnexpectedCharError,
                cur,
                f"unexpected character {ch!r}",
                hint="expected a value, a string, or one of { } [ ] : ,",
            )

    return tokens

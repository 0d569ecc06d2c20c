from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .spans import Span

if TYPE_CHECKING:
    from .tokens import Token


@dataclass(slots=True)
class JsonError(Exception):
    span: Span
    message: str
    hint: str | None = None

    @property
    def line(self) -> int:
        return self.span.start.line

    @property
    def column(self) -> int:
        return self.span.start.column

    def __str__(self) -> str:
        base = f"{self.span.format()}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


@dataclass(slots=True)
class LexError(JsonError):
    """Raised by the tokenizer; ``char`` is the offending character ("" at end of input)."""

    char: str = ""


class UnexpectedCharError(LexError):
    pass


class UnterminatedStringError(LexError):
    pass


class MalformedEscapeError(LexError):
    pass


class MalformedNumberError(LexError):
    pass


@dataclass(slots=True)
class ParseError(JsonError):
    pass


@dataclass(slots=True)
class UnexpectedTokenError(ParseError):
    token: Token | None = None


class UnexpectedEofError(ParseError):
    pass


@dataclass(slots=True)
class InvalidEscapeError(ParseError):
    char: str = ""


class NestingTooDeepError(ParseError):
    pass

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Loc:
    """A concrete source position.

    Offsets are 0-based code point indexes into the text; line/column are
    1-based for user-facing messages.
    """

    offset: int = 0
    line: int = 1
    column: int = 1


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) over the source text."""

    start: Loc = Loc()
    end: Loc = Loc()

    @classmethod
    def at(cls, loc: Loc) -> Span:
        return cls(start=loc, end=loc)

    def merge(self, other: Span) -> Span:
        """Smallest span enclosing both ``self`` and ``other``."""
        start = self.start if self.start.offset <= other.start.offset else other.start
        end = self.end if self.end.offset >= other.end.offset else other.end
        return Span(start=start, end=end)

    def contains(self, other: Span) -> bool:
        return self.start.offset <= other.start.offset and other.end.offset <= self.end.offset

    def slice(self, text: str) -> str:
        return text[self.start.offset : self.end.offset]

    def __len__(self) -> int:
        return self.end.offset - self.start.offset

    def format(self) -> str:
        return f"{self.start.line}:{self.start.column}"

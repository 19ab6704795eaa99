from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(slots=True)
class Position:
    """A source position, mutated in place when used as a lexer cursor.

    Offsets, lines and columns are all 0-based; ``format()`` converts to
    1-based line/column for user-facing messages.
    """

    offset: int
    line: int
    column: int
    source_name: str
    source_text: str = field(repr=False)

    @classmethod
    def start_of(cls, source_name: str, source_text: str) -> "Position":
        return cls(offset=0, line=0, column=0, source_name=source_name, source_text=source_text)

    def advance(self, just_consumed: str | None = None) -> None:
        self.offset += 1
        self.column += 1
        if just_consumed == "\n":
            self.line += 1
            self.column = 0

    def snapshot(self) -> "Position":
        return replace(self)

    @property
    def line_text(self) -> str:
        lines = self.source_text.split("\n")
        if self.line >= len(lines):
            return ""
        return lines[self.line]

    def format(self) -> str:
        return f"{self.source_name}:{self.line + 1}:{self.column + 1}"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) of two position snapshots."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end.offset < self.start.offset:
            raise ValueError(f"span ends before it starts: {self.start.offset} > {self.end.offset}")

    @classmethod
    def at(cls, pos: Position) -> "Span":
        """Empty span sitting at ``pos``."""
        return cls(start=pos.snapshot(), end=pos.snapshot())

    @property
    def source_name(self) -> str:
        return self.start.source_name

    def format(self) -> str:
        return self.start.format()

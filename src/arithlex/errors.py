from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import Position


class ErrorCategory(str, Enum):
    ILLEGAL_CHARACTER = "IllegalCharacter"


@dataclass(slots=True)
class LexError(Exception):
    start: Position
    end: Position
    category: ErrorCategory
    message: str
    hint: str | None = None

    def as_string(self) -> str:
        return (
            f"{self.category.value}: {self.message}\n"
            f"File {self.start.source_name}, line {self.start.line + 1}"
        )

    def excerpt(self) -> str:
        """Source line of the error with a caret run under the offending span."""
        text = self.start.line_text
        width = max(1, self.end.offset - self.start.offset)
        if self.end.line != self.start.line:
            width = max(1, len(text) - self.start.column)
        caret = " " * self.start.column + "^" * width
        return f"{text}\n{caret}"

    def __str__(self) -> str:
        base = self.as_string()
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base

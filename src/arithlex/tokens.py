from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import Span


class TokenKind(str, Enum):
    # Literals
    INT = "INT"
    FLOAT = "FLOAT"

    # Operators / punctuation
    PLUS = "+"
    MINUS = "-"
    MUL = "*"
    DIV = "/"
    LPAREN = "("
    RPAREN = ")"

    EOF = "EOF"

    @property
    def is_literal(self) -> bool:
        return self in (TokenKind.INT, TokenKind.FLOAT)


OPERATORS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MUL,
    "/": TokenKind.DIV,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    literal: str | None
    span: Span

    def __post_init__(self) -> None:
        if self.kind.is_literal != (self.literal is not None):
            raise ValueError(f"{self.kind.name} token with literal {self.literal!r}")
        if self.kind is TokenKind.FLOAT and self.literal.count(".") != 1:
            raise ValueError(f"FLOAT literal must hold exactly one '.': {self.literal!r}")
        if self.kind is TokenKind.INT and "." in self.literal:
            raise ValueError(f"INT literal must not hold '.': {self.literal!r}")

    @property
    def text(self) -> str:
        """Source text of the token (empty for EOF)."""
        if self.literal is not None:
            return self.literal
        if self.kind is TokenKind.EOF:
            return ""
        return self.kind.value

    def __repr__(self) -> str:
        if self.literal is None:
            return f"Token({self.kind.name}, {self.span.format()})"
        return f"Token({self.kind.name}, {self.literal!r}, {self.span.format()})"

from __future__ import annotations

import logging

from .errors import ErrorCategory, LexError
from .spans import Position, Span
from .tokens import OPERATORS, Token, TokenKind


logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")


class Lexer:
    """Single-use scanner turning an arithmetic expression into tokens.

    The cursor starts on the first character of ``text`` (or on ``start``
    when resuming inside the same text). ``tokenize()`` is fail-fast: the
    first illegal character raises ``LexError`` and no tokens are returned.
    """

    def __init__(
        self,
        source_name: str,
        text: str,
        *,
        start: Position | None = None,
        eof: bool = False,
    ) -> None:
        self.source_name = source_name
        self.text = text
        self.eof = eof
        if start is None:
            self.pos = Position.start_of(source_name, text)
        else:
            self.pos = start.snapshot()
        self.current_char = self._char_at(self.pos.offset)
        self._consumed = False

    def _char_at(self, offset: int) -> str | None:
        if offset < len(self.text):
            return self.text[offset]
        return None

    def advance(self) -> None:
        self.pos.advance(self.current_char)
        self.current_char = self._char_at(self.pos.offset)

    def tokenize(self) -> list[Token]:
        if self._consumed:
            raise RuntimeError("Lexer.tokenize() called twice; create a new Lexer per run")
        self._consumed = True

        tokens: list[Token] = []
        while self.current_char is not None:
            ch = self.current_char

            if ch.isspace():
                self.advance()
                continue

            if ch in DIGITS:
                tokens.append(self._make_number())
                continue

            kind = OPERATORS.get(ch)
            if kind is not None:
                start = self.pos.snapshot()
                self.advance()
                tokens.append(Token(kind, None, Span(start, self.pos.snapshot())))
                continue

            start = self.pos.snapshot()
            self.advance()
            logger.debug("illegal character %r at %s", ch, start.format())
            raise LexError(
                start=start,
                end=self.pos.snapshot(),
                category=ErrorCategory.ILLEGAL_CHARACTER,
                message=f"'{ch}'",
                hint=_hint_for(ch),
            )

        if self.eof:
            tokens.append(Token(TokenKind.EOF, None, Span.at(self.pos)))
        logger.debug("scanned %d tokens from %s", len(tokens), self.source_name)
        return tokens

    def _make_number(self) -> Token:
        start = self.pos.snapshot()
        buf: list[str] = []
        seen_dot = False

        while self.current_char is not None:
            ch = self.current_char
            if ch == ".":
                # A second point ends the number and is left for the main loop.
                if seen_dot:
                    break
                seen_dot = True
            elif ch not in DIGITS:
                break
            buf.append(ch)
            self.advance()

        kind = TokenKind.FLOAT if seen_dot else TokenKind.INT
        return Token(kind, "".join(buf), Span(start, self.pos.snapshot()))


def _hint_for(ch: str) -> str | None:
    if ch == ".":
        return "a decimal point must follow a digit and appear once per number"
    if ch in "eE":
        return "scientific notation is not supported"
    return None


def tokenize(src: str, *, file: str = "<memory>", eof: bool = False) -> list[Token]:
    return Lexer(file, src, eof=eof).tokenize()

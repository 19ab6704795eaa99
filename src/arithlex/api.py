from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import LexError
from .lexer import Lexer, tokenize
from .spans import Position
from .tokens import Token


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LexResult:
    """Outcome of one run: either tokens or a single error, never both."""

    tokens: tuple[Token, ...]
    error: LexError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run(source_name: str, text: str, *, eof: bool = False) -> LexResult:
    try:
        toks = Lexer(source_name, text, eof=eof).tokenize()
    except LexError as e:
        return LexResult(tokens=(), error=e)
    return LexResult(tokens=tuple(toks))


def tokenize_source(text: str, *, file: str = "<memory>", eof: bool = False) -> list[Token]:
    return tokenize(text, file=file, eof=eof)


def tokenize_file(path: str | Path, *, eof: bool = False) -> list[Token]:
    p = Path(path).expanduser().resolve()
    src = p.read_text(encoding="utf-8")
    return tokenize(src, file=str(p), eof=eof)


def collect_errors(source_name: str, text: str) -> list[LexError]:
    """Report every illegal character of ``text`` in source order.

    The lexer stops at its first error, so scanning restarts from the end of
    each error span until the input is exhausted without failure.
    """
    errors: list[LexError] = []
    start: Position | None = None
    while True:
        try:
            Lexer(source_name, text, start=start).tokenize()
        except LexError as e:
            errors.append(e)
            start = e.end
            continue
        break
    logger.debug("collected %d lexical errors from %s", len(errors), source_name)
    return errors

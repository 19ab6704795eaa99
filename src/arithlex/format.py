from __future__ import annotations

from collections.abc import Iterable

from .tokens import Token, TokenKind


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens as canonical single-line expression text.

    Binary operators get one space on each side; parentheses hug their
    contents. Adjacent numbers are kept apart by a space so the output
    tokenizes back to the same sequence.
    """
    out: list[str] = []
    prev: Token | None = None
    for tok in tokens:
        if tok.kind is TokenKind.EOF:
            continue
        if prev is not None and _needs_space(prev.kind, tok.kind):
            out.append(" ")
        out.append(tok.text)
        prev = tok
    return "".join(out)


def _needs_space(prev: TokenKind, cur: TokenKind) -> bool:
    if prev is TokenKind.LPAREN or cur is TokenKind.RPAREN:
        return False
    # "1 2" must stay apart; operators get spaced on both sides.
    return True

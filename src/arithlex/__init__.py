from __future__ import annotations

from .api import LexResult, collect_errors, run, tokenize_file, tokenize_source
from .errors import ErrorCategory, LexError
from .format import format_tokens
from .lexer import Lexer
from .spans import Position, Span
from .tokens import Token, TokenKind

__all__ = [
    "ErrorCategory",
    "LexError",
    "LexResult",
    "Lexer",
    "Position",
    "Span",
    "Token",
    "TokenKind",
    "collect_errors",
    "format_tokens",
    "run",
    "tokenize_file",
    "tokenize_source",
]

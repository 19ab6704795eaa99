from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from .api import collect_errors, run
from .errors import LexError
from .format import format_tokens
from .spans import Position
from .tokens import Token


def _pos_to_jsonable(pos: Position) -> dict[str, int]:
    return {"offset": pos.offset, "line": pos.line, "column": pos.column}


def _token_to_jsonable(tok: Token) -> dict[str, object]:
    return {
        "kind": tok.kind.name,
        "literal": tok.literal,
        "start": _pos_to_jsonable(tok.span.start),
        "end": _pos_to_jsonable(tok.span.end),
    }


def _error_to_jsonable(err: LexError) -> dict[str, object]:
    return {
        "category": err.category.value,
        "message": err.message,
        "start": _pos_to_jsonable(err.start),
        "end": _pos_to_jsonable(err.end),
    }


def _read_input(args: argparse.Namespace) -> tuple[str, str]:
    if args.file is not None:
        with open(args.file, encoding="utf-8") as f:
            return args.name or args.file, f.read()
    if args.expression is not None:
        return args.name or "<argv>", args.expression
    return args.name or "<stdin>", sys.stdin.read()


def _report(err: LexError) -> None:
    print(err, file=sys.stderr)
    print(err.excerpt(), file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="arithlex", description="Tokenize arithmetic expressions")
    ap.add_argument("expression", nargs="?", help="Expression to tokenize (default: read stdin)")
    ap.add_argument("-f", "--file", help="Read the expression from a file")
    ap.add_argument("--name", help="Source name used in error messages")
    ap.add_argument("--json", action="store_true", help="Print tokens (or errors) as JSON")
    ap.add_argument("--format", action="store_true", help="Print the canonical expression text")
    ap.add_argument(
        "--all-errors",
        action="store_true",
        help="Report every illegal character instead of stopping at the first",
    )
    ap.add_argument(
        "--log-level",
        default=os.environ.get("ARITHLEX_LOG_LEVEL", "WARNING"),
        help="Logging level (env: ARITHLEX_LOG_LEVEL)",
    )
    args = ap.parse_args(argv)
    if args.file is not None and args.expression is not None:
        ap.error("pass either EXPR or --file, not both")

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    name, text = _read_input(args)

    if args.all_errors:
        errors = collect_errors(name, text)
        if args.json:
            print(json.dumps([_error_to_jsonable(e) for e in errors], indent=2))
        else:
            for e in errors:
                _report(e)
        return 1 if errors else 0

    res = run(name, text)
    if res.error is not None:
        if args.json:
            print(json.dumps({"error": _error_to_jsonable(res.error)}, indent=2))
        else:
            _report(res.error)
        return 1

    if args.json:
        print(json.dumps({"tokens": [_token_to_jsonable(t) for t in res.tokens]}, indent=2))
    elif args.format:
        print(format_tokens(res.tokens))
    else:
        for tok in res.tokens:
            print(tok)
    return 0

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from arithlex.cli import main


def test_cli_prints_tokens(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["3.14 + 2"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Token(FLOAT, '3.14', <argv>:1:1)",
        "Token(PLUS, <argv>:1:6)",
        "Token(INT, '2', <argv>:1:8)",
    ]


def test_cli_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--json", "(1)"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert [t["kind"] for t in payload["tokens"]] == ["LPAREN", "INT", "RPAREN"]
    assert payload["tokens"][1] == {
        "kind": "INT",
        "literal": "1",
        "start": {"offset": 1, "line": 0, "column": 1},
        "end": {"offset": 2, "line": 0, "column": 2},
    }


def test_cli_format(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--format", "2*(3+4)"]) == 0
    assert capsys.readouterr().out == "2 * (3 + 4)\n"


def test_cli_error_exit_status(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--name", "calc", "1 + a"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "IllegalCharacter: 'a'\nFile calc, line 1" in captured.err
    assert "    ^" in captured.err


def test_cli_all_errors_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--all-errors", "--json", "a b"]) == 1
    payload = json.loads(capsys.readouterr().out)
    assert [e["message"] for e in payload] == ["'a'", "'b'"]


def test_cli_all_errors_clean(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--all-errors", "1"]) == 0
    assert capsys.readouterr().err == ""


def test_cli_reads_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "e.txt"
    p.write_text("1 /\n2\n", encoding="utf-8")
    assert main(["-f", str(p), "--format"]) == 0
    assert capsys.readouterr().out == "1 / 2\n"


def test_cli_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("6 - 4.5"))
    assert main(["--format"]) == 0
    assert capsys.readouterr().out == "6 - 4.5\n"


def test_cli_rejects_expression_and_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["1", "-f", str(tmp_path / "e.txt")])

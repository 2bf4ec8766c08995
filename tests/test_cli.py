from __future__ import annotations

import json

from cli import confusables_gen
from confusables_db.loader import load_file

LINE = "0430 ; 0061 ; MA # ( а → a ) CYRILLIC SMALL LETTER A → LATIN SMALL LETTER A\n"


def test_run_offline(tmp_path, capsys) -> None:
    src = tmp_path / "confusables.txt"
    src.write_text(LINE, encoding="utf-8")
    out = tmp_path / "nested" / "confusables.json"

    rc = confusables_gen.run(
        ["--input", str(src), "--output", str(out), "--version", "16.0.0"]
    )
    assert rc == 0
    assert out.exists()

    db = load_file(out)
    assert db.unicode_version == "16.0.0"
    assert db.source_url == f"local file: {src}"
    assert db.lookup("а") == [0x61]
    assert "Total mappings: 1" in capsys.readouterr().out


def test_generated_at_override(tmp_path) -> None:
    src = tmp_path / "confusables.txt"
    src.write_text(LINE, encoding="utf-8")
    out = tmp_path / "confusables.json"

    rc = confusables_gen.run(
        ["--input", str(src), "--output", str(out), "--generated-at", "2024-08-15T12:00:00Z"]
    )
    assert rc == 0
    doc = json.loads(out.read_text(encoding="utf-8"))
    assert doc["generated_at"] == "2024-08-15T12:00:00Z"


def test_bad_generated_at(tmp_path, capsys) -> None:
    src = tmp_path / "confusables.txt"
    src.write_text(LINE, encoding="utf-8")
    rc = confusables_gen.run(
        ["--input", str(src), "--output", str(tmp_path / "x.json"), "--generated-at", "soon"]
    )
    assert rc == 1
    assert "generated-at" in capsys.readouterr().err


def test_parse_failure_writes_nothing(tmp_path, capsys) -> None:
    src = tmp_path / "confusables.txt"
    src.write_text("0430 ; 0061 ; MA\n", encoding="utf-8")
    out = tmp_path / "confusables.json"
    rc = confusables_gen.run(["--input", str(src), "--output", str(out)])
    assert rc == 1
    assert not out.exists()
    assert "missing comment" in capsys.readouterr().err


def test_missing_input(tmp_path) -> None:
    rc = confusables_gen.run(
        ["--input", str(tmp_path / "nope.txt"), "--output", str(tmp_path / "x.json")]
    )
    assert rc == 1


def test_download(tmp_path, monkeypatch) -> None:
    def fake_fetch(version):
        assert version == "16.0.0"
        return LINE, "https://unicode.org/Public/security/16.0.0/confusables.txt"

    monkeypatch.setattr(confusables_gen, "fetch_confusables", fake_fetch)
    out = tmp_path / "confusables.json"
    assert confusables_gen.run(["--version", "16.0", "--output", str(out)]) == 0
    assert load_file(out).source_url.endswith("16.0.0/confusables.txt")

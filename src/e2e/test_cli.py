import json
from pathlib import Path
import pytest

from suggestions.__main__ import main
import suggestions.config as CFG


@pytest.mark.e2e
def test_single_query_from_literal_choices(capsys):
    rc = main(["--choice", "gras", "--choice", "gros", "--choice", "go", "-q", "gros", "-k", "2"])
    assert rc == 0
    assert capsys.readouterr().out.splitlines() == ["gros", "gras"]


@pytest.mark.e2e
def test_json_output_from_roots(tmp_path: Path, capsys):
    f = tmp_path / "words.txt"
    f.write_text("abd\nabc\nabf\nabe\n", encoding="utf-8")
    assert main(["--roots", str(f), "-q", "abc", "-k", "4", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == ["abc", "abd", "abe", "abf"]


@pytest.mark.e2e
def test_scores_table(capsys):
    main(["--choice", "graisse", "-q", "gros", "--scores"])
    out = capsys.readouterr().out
    assert "Diff" in out and "graisse" in out


@pytest.mark.e2e
def test_no_matches_message(capsys):
    main(["--choice", "go", "-q", "gros"])
    assert "(no suggestions)" in capsys.readouterr().out


@pytest.mark.e2e
def test_repl_stops_on_empty_line(monkeypatch, capsys):
    answers = iter(["gros", ""])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))
    assert main(["--choice", "gros", "--repl"]) == 0
    assert "gros" in capsys.readouterr().out


@pytest.mark.e2e
def test_requires_a_choice_source():
    with pytest.raises(SystemExit) as exc:
        main(["-q", "gros"])
    assert exc.value.code == 2


@pytest.mark.e2e
def test_default_k_follows_config(monkeypatch, capsys):
    monkeypatch.setattr(CFG, "TOP_K", 1)
    main(["--choice", "gras", "--choice", "gros", "-q", "gros"])
    assert capsys.readouterr().out.splitlines() == ["gros"]

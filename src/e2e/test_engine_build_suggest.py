from pathlib import Path
import pytest
from suggestions.engine import SuggestionEngine
import suggestions.config as CFG


def _seed(tmp: Path) -> str:
    root = tmp / "Words"; root.mkdir()
    (root / "fr.txt").write_text("gros\ngras\ngraisse\nagressif\ngo\n", encoding="utf-8")
    return str(root)


@pytest.mark.e2e
def test_build_from_roots_and_suggest(tmp_path: Path):
    eng = SuggestionEngine()
    try:
        eng.build(roots=[_seed(tmp_path)])
        assert len(eng.choices) == 5
        assert eng.suggest("gros", top_k=2) == ["gros", "gras"]
        assert eng.suggest("!!!") == []
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_build_merges_roots_and_explicit_choices(tmp_path: Path):
    eng = SuggestionEngine()
    eng.build(roots=[_seed(tmp_path)], choices=["GROS!"])
    assert eng.choices[-1] == "GROS!"
    assert eng.suggest("gros", top_k=2) == ["gros", "GROS!"]
    eng.shutdown()


@pytest.mark.e2e
def test_explain_rows():
    eng = SuggestionEngine()
    eng.build(choices=["graisse", "gras"])
    rows = eng.explain("gros", top_k=5)
    assert [r["suggestion"] for r in rows] == ["gras", "graisse"]
    assert rows[1]["difference_score"] == 2 and rows[1]["length_diff"] == 3
    eng.shutdown()


@pytest.mark.e2e
def test_requires_build_before_queries():
    eng = SuggestionEngine()
    with pytest.raises(RuntimeError):
        eng.suggest("gros")
    eng.build(choices=[])
    assert eng.suggest("gros") == []
    eng.shutdown()
    with pytest.raises(RuntimeError):
        eng.explain("gros")


@pytest.mark.e2e
def test_build_without_sources_is_rejected():
    with pytest.raises(ValueError):
        SuggestionEngine().build()


@pytest.mark.e2e
def test_default_top_k_follows_config_at_call_time(monkeypatch):
    eng = SuggestionEngine()
    eng.build(choices=["gros", "gras", "graisse", "agressif"])
    monkeypatch.setattr(CFG, "TOP_K", 2)
    assert eng.suggest("gros") == ["gros", "gras"]
    assert len(eng.explain("gros")) == 2
    monkeypatch.setattr(CFG, "TOP_K", 3)
    assert eng.suggest("gros") == ["gros", "gras", "agressif"]
    eng.shutdown()

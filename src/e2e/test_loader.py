import logging
from pathlib import Path
import pytest

import suggestions.loader as loader
from suggestions.loader import load_choices


def _seed(tmp: Path) -> Path:
    root = tmp / "choices"; root.mkdir()
    (root / "b.txt").write_text("gras\n\n  graisse  \n", encoding="utf-8")
    (root / "a.txt").write_text("# fruits and fats\ngros\n", encoding="utf-8")
    sub = root / "sub"; sub.mkdir()
    (sub / "c.txt").write_text("agressif\r\n", encoding="utf-8")
    (root / "notes.md").write_text("ignored\n", encoding="utf-8")
    return root


def test_folder_is_walked_in_sorted_order(tmp_path: Path):
    root = _seed(tmp_path)
    assert load_choices([str(root)]) == ["gros", "gras", "graisse", "agressif"]


def test_single_file_root(tmp_path: Path):
    root = _seed(tmp_path)
    assert load_choices([str(root / "notes.md")]) == ["ignored"]


def test_multiple_roots_concatenate(tmp_path: Path):
    root = _seed(tmp_path)
    out = load_choices([str(root / "b.txt"), str(root / "a.txt")])
    assert out == ["gras", "graisse", "gros"]


def test_missing_root_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_choices([str(tmp_path / "nope")])


def test_undecodable_bytes_are_ignored(tmp_path: Path):
    f = tmp_path / "bad.txt"
    f.write_bytes(b"gr\xffos\n")
    assert load_choices([str(f)]) == ["gros"]


def test_unreadable_file_is_logged_and_skipped(tmp_path: Path, monkeypatch, caplog):
    root = _seed(tmp_path)
    locked = str(root / "b.txt")
    real_open = open

    def fake_open(path, *args, **kwargs):
        if str(path) == locked:
            raise PermissionError(13, "Permission denied", path)
        return real_open(path, *args, **kwargs)

    monkeypatch.setattr(loader, "open", fake_open, raising=False)
    with caplog.at_level(logging.WARNING, logger="suggestions.loader"):
        out = load_choices([str(root)])
    assert out == ["gros", "agressif"]
    assert any("b.txt" in r.getMessage() for r in caplog.records)

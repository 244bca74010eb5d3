import logging
from pathlib import Path

import pytest

from fabula.cli import main
from fabula.persistence import SceneStore


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("FABULA_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FABULA_DOCUMENT_FORMAT", raising=False)
    # main() reconfigures the root logger; put pytest's handlers back afterwards
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_inspect_prints_header(tmp_path: Path, catalog, make_scene, capsys):
    path = SceneStore(catalog, root_dir=tmp_path).save(make_scene(columns=3, rows=2, uid="inn", name="Inn"))

    assert main(["inspect", str(path)]) == 0

    out = capsys.readouterr().out
    assert "uid:          inn" in out
    assert "size:         3x2" in out
    assert "tileset:      overworld" in out
    assert "terrain data:" in out


def test_inspect_reports_corrupt_file(tmp_path: Path, capsys):
    bad = tmp_path / "bad.scene.yaml"
    bad.write_text("scene: [", encoding="utf-8")
    assert main(["inspect", str(bad)]) == 1
    assert "error:" in capsys.readouterr().err


def test_inspect_missing_file(tmp_path: Path, capsys):
    assert main(["inspect", str(tmp_path / "none.scene.yaml")]) == 1


def test_list_scenes(tmp_path: Path, catalog, make_scene, capsys):
    store = SceneStore(catalog, root_dir=tmp_path)
    store.save(make_scene(columns=2, rows=2, uid="one", name="First"))
    store.save(make_scene(columns=4, rows=1, uid="two", name="Second"))

    assert main(["list", "--dir", str(tmp_path)]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == [
        "one\tFirst\t2x2\tone.scene.yaml",
        "two\tSecond\t4x1\ttwo.scene.yaml",
    ]


def test_inspect_non_utf8_file(tmp_path: Path, capsys):
    bad = tmp_path / "bad.scene.yaml"
    bad.write_bytes(b"\xff\xfe\x00")
    assert main(["inspect", str(bad)]) == 1
    assert "not valid UTF-8" in capsys.readouterr().err

import zlib
from pathlib import Path

import pytest
from pydantic import ValidationError

from fabula.settings import PersistenceSettings, load_settings


def test_defaults_match_terrain_format():
    s = PersistenceSettings()
    assert s.compression_level == 9
    assert s.zlib_strategy == zlib.Z_FILTERED
    assert s.inflate_chunk_size == 1024
    assert s.document_format == "yaml"


def test_packaged_defaults_load(monkeypatch):
    for name in ("COMPRESSION_LEVEL", "COMPRESSION_STRATEGY", "INFLATE_CHUNK_SIZE", "DOCUMENT_FORMAT", "SCENES_DIR"):
        monkeypatch.delenv(f"FABULA_{name}", raising=False)
    assert load_settings() == PersistenceSettings()


def test_user_file_overrides_defaults(tmp_path: Path):
    user = tmp_path / "settings.yaml"
    user.write_text("persistence:\n  document_format: json\n  compression_level: 6\n", encoding="utf-8")
    s = load_settings(user)
    assert s.document_format == "json"
    assert s.compression_level == 6
    assert s.compression_strategy == "filtered"


def test_missing_user_file_falls_back_to_defaults(tmp_path: Path):
    assert load_settings(tmp_path / "absent.yaml").compression_level == 9


def test_env_overrides_win(tmp_path: Path, monkeypatch):
    user = tmp_path / "settings.yaml"
    user.write_text("persistence:\n  compression_level: 6\n", encoding="utf-8")
    monkeypatch.setenv("FABULA_COMPRESSION_LEVEL", "1")
    monkeypatch.setenv("FABULA_COMPRESSION_STRATEGY", "RLE")
    s = load_settings(user)
    assert s.compression_level == 1
    assert s.zlib_strategy == zlib.Z_RLE


@pytest.mark.parametrize(
    "kwargs",
    [
        {"compression_level": 10},
        {"compression_strategy": "fastest"},
        {"inflate_chunk_size": 0},
        {"document_format": "xml"},
    ],
)
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ValidationError):
        PersistenceSettings(**kwargs)


def test_empty_persistence_section_keeps_defaults(tmp_path: Path):
    user = tmp_path / "settings.yaml"
    user.write_text("persistence: null\n", encoding="utf-8")
    assert load_settings(user).compression_level == 9

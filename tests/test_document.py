import json

import pytest
import yaml

from fabula.persistence.artifact import FoliageData, SceneArtifact, WaterData
from fabula.persistence.document import read_document, write_document
from fabula.persistence.errors import DecodeCorruptionError, DocumentError


def _artifact() -> SceneArtifact:
    return SceneArtifact(
        version=3,
        name="Harbor",
        uid="map-007",
        skybox=None,
        final_shader="default",
        ambient_color=-1,
        sun_light_color=16777215,
        columns=2,
        rows=2,
        tileset_name="overworld",
        foliage_name="forest",
        terrain_data="eJwDAAAAAAE=",
        water_data=WaterData(alpha=0.5, mix=0.25, amplitude=0.1, animation_speed=1.5, speed=2.0, material="sea"),
        foliage_data=FoliageData(amplitude=0.05, speed=1.0),
    )


@pytest.mark.parametrize("fmt", ["yaml", "json"])
def test_document_round_trip(fmt):
    artifact = _artifact()
    assert read_document(write_document(artifact, fmt), fmt) == artifact


def test_yaml_document_uses_scene_root_and_camel_case_keys():
    doc = yaml.safe_load(write_document(_artifact()))
    scene = doc["scene"]
    assert list(scene)[:2] == ["version", "name"]
    assert "skybox" not in scene
    assert scene["finalShader"] == "default"
    assert scene["terrainData"] == "eJwDAAAAAAE="
    assert scene["waterData"]["animationSpeed"] == 1.5
    assert scene["foliageData"] == {"amplitude": 0.05, "speed": 1.0}


def test_optional_fields_may_be_absent():
    data = _artifact().to_dict()
    for key in ("version", "skybox", "waterData", "foliageData", "terrainData"):
        data.pop(key, None)
    artifact = read_document(json.dumps({"scene": data}), "json")
    assert artifact.version == 0
    assert artifact.water_data is None
    assert artifact.foliage_data is None
    assert artifact.terrain_data is None


def test_missing_required_field_is_document_error():
    data = _artifact().to_dict()
    del data["tilesetName"]
    with pytest.raises(DocumentError) as exc:
        read_document(json.dumps({"scene": data}), "json")
    assert "tilesetName" in str(exc.value)


def test_wrong_type_is_document_error():
    data = _artifact().to_dict()
    data["columns"] = "two"
    with pytest.raises(DocumentError):
        read_document(yaml.safe_dump({"scene": data}))


def test_unknown_field_is_document_error():
    data = _artifact().to_dict()
    data["gravity"] = 9.8
    with pytest.raises(DocumentError):
        read_document(yaml.safe_dump({"scene": data}))


def test_unparseable_text_is_decode_corruption():
    with pytest.raises(DecodeCorruptionError):
        read_document("{ not json", "json")
    with pytest.raises(DocumentError):
        read_document("scene: [unclosed")


def test_non_mapping_document_is_document_error():
    with pytest.raises(DocumentError):
        read_document("- just\n- a list\n")


def test_unknown_format_is_rejected():
    with pytest.raises(ValueError):
        write_document(_artifact(), "xml")

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict

import yaml
from jsonschema import Draft202012Validator

from .artifact import SceneArtifact
from .errors import DocumentError

logger = logging.getLogger(__name__)

ROOT_KEY = "scene"
FORMATS = ("yaml", "json")


@lru_cache(maxsize=1)
def _scene_validator() -> Draft202012Validator:
    """Load the scene document schema shipped with the package (cached)."""
    text = resources.files("fabula.persistence").joinpath("schemas").joinpath("scene.schema.json").read_text(encoding="utf-8")
    logger.debug("Loaded scene document schema")
    return Draft202012Validator(json.loads(text))


def _check_format(fmt: str) -> str:
    if fmt not in FORMATS:
        raise ValueError(f"Unsupported document format '{fmt}', expected one of {FORMATS}")
    return fmt


def validate_document(data: Any) -> None:
    """Validate a parsed scene document.

    Raises:
        DocumentError if the document does not match the scene schema.
    """
    errors = sorted(_scene_validator().iter_errors(data), key=lambda e: list(e.path))
    if errors:
        for err in errors:
            logger.error("Scene document error at %s: %s", list(err.path), err.message)
        first = errors[0]
        location = "/".join(str(p) for p in first.path) or "<root>"
        raise DocumentError(f"Invalid scene document at {location}: {first.message}") from first


def write_document(artifact: SceneArtifact, fmt: str = "yaml") -> str:
    """Serialize the artifact's persisted fields as a YAML or JSON document."""
    doc: Dict[str, Any] = {ROOT_KEY: artifact.to_dict()}
    if _check_format(fmt) == "json":
        return json.dumps(doc, ensure_ascii=False, indent=2)
    return yaml.safe_dump(doc, sort_keys=False, allow_unicode=True)


def read_scene_text(path: Path) -> str:
    """Read a scene file as UTF-8 text; undecodable bytes are a DocumentError."""
    raw = path.read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DocumentError(f"Scene file {path} is not valid UTF-8: {e}") from e


def read_document(text: str, fmt: str = "yaml") -> SceneArtifact:
    """Parse and validate a scene document into a new, uncommitted SceneArtifact."""
    try:
        if _check_format(fmt) == "json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentError(f"Scene document is not valid {fmt}: {e}") from e

    validate_document(data)
    return SceneArtifact.from_dict(data[ROOT_KEY])

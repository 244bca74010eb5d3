from __future__ import annotations

import logging
import os
import zlib
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

ENV_PREFIX = "FABULA_"

_STRATEGIES = {
    "default": zlib.Z_DEFAULT_STRATEGY,
    "filtered": zlib.Z_FILTERED,
    "huffman_only": zlib.Z_HUFFMAN_ONLY,
    "rle": zlib.Z_RLE,
    "fixed": zlib.Z_FIXED,
}


class PersistenceSettings(BaseModel):
    """Tunables for scene persistence.

    The defaults reproduce the terrain data format exactly: level 9 deflate
    with the filtered strategy, inflated in 1 KiB chunks.
    """

    compression_level: int = Field(9, ge=0, le=9, description="zlib compression level")
    compression_strategy: str = Field("filtered", description="zlib strategy name")
    inflate_chunk_size: int = Field(1024, gt=0, description="Output buffer size used while inflating")
    document_format: Literal["yaml", "json"] = Field("yaml", description="Scene document format")
    scenes_dir: Optional[Path] = Field(default=None, description="Scene store directory override")

    @field_validator("compression_strategy")
    @classmethod
    def known_strategy(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in _STRATEGIES:
            raise ValueError(f"Unknown compression strategy '{v}', expected one of {sorted(_STRATEGIES)}")
        return v

    @property
    def zlib_strategy(self) -> int:
        return _STRATEGIES[self.compression_strategy]


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field_name in PersistenceSettings.model_fields:
        value = os.getenv(ENV_PREFIX + field_name.upper())
        if value is not None:
            out[field_name] = value
    return out


def load_settings(user_path: Optional[Path] = None) -> PersistenceSettings:
    """Load settings from packaged defaults, an optional user YAML file, then FABULA_* env vars."""
    with resources.files("fabula.config").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
        data: Dict[str, Any] = (yaml.safe_load(f) or {}).get("persistence") or {}

    if user_path is not None:
        if user_path.exists():
            data.update(_load_yaml(user_path).get("persistence") or {})
            logger.info("Loaded user settings from %s", user_path)
        else:
            logger.warning("User settings file not found: %s", user_path)

    data.update(_env_overrides())
    settings = PersistenceSettings(**data)
    logger.debug("Persistence settings: %s", settings)
    return settings

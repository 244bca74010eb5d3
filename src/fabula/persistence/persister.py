from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..settings import PersistenceSettings
from ..world import AssetCatalog, Scene
from .artifact import SceneArtifact
from .document import read_document, write_document
from .lifecycle import SceneLifecycle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveResult:
    text: str
    uid: str
    uncompressed_size: int
    compressed_size: int


@dataclass(frozen=True)
class LoadResult:
    """Outcome of a load. ``scene`` is None when terrain loading was skipped."""

    uid: str
    name: str
    version: int
    columns: int
    rows: int
    skybox: Optional[str]
    tileset_name: str
    foliage_name: str
    scene: Optional[Scene] = None


class ScenePersister:
    """Saves scenes to and loads scenes from scene document text.

    Runs the document read/write step between the lifecycle phases in the
    fixed order, and always releases the artifact afterwards.
    """

    def __init__(self, catalog: AssetCatalog, settings: Optional[PersistenceSettings] = None) -> None:
        self.catalog = catalog
        self.settings = settings or PersistenceSettings()
        self.lifecycle = SceneLifecycle(self.settings)

    def save(self, scene: Scene, fmt: Optional[str] = None) -> SaveResult:
        artifact = SceneArtifact.from_scene(scene)
        try:
            self.lifecycle.prepare(artifact)
            text = write_document(artifact, fmt or self.settings.document_format)
            self.lifecycle.complete(artifact)
            return SaveResult(
                text=text,
                uid=artifact.uid,
                uncompressed_size=artifact.uncompressed_size,
                compressed_size=artifact.compressed_size,
            )
        finally:
            self.lifecycle.release(artifact)

    def load(self, text: str, fmt: Optional[str] = None, skip_terrain: bool = False) -> LoadResult:
        artifact = read_document(text, fmt or self.settings.document_format)
        artifact.skip_terrain = skip_terrain
        try:
            scene = self.lifecycle.commit(artifact, self.catalog)
            return LoadResult(
                uid=artifact.uid,
                name=artifact.name,
                version=artifact.version,
                columns=artifact.columns,
                rows=artifact.rows,
                skybox=artifact.skybox,
                tileset_name=artifact.tileset_name,
                foliage_name=artifact.foliage_name,
                scene=scene,
            )
        finally:
            self.lifecycle.release(artifact)

    def read_header(self, text: str, fmt: Optional[str] = None) -> LoadResult:
        """Read scene metadata only; no scene or terrain is built."""
        return self.load(text, fmt=fmt, skip_terrain=True)

from __future__ import annotations

import logging
from typing import Optional

from ..settings import PersistenceSettings
from ..world import AssetCatalog, Scene
from .artifact import FORMAT_VERSION, ArtifactPhase, FoliageData, SceneArtifact, WaterData
from .errors import LifecycleError, UnresolvedReferenceError, VersionMismatchError
from .grid_codec import decode_grid, encode_grid
from .transport import pack, unpack_terrain

logger = logging.getLogger(__name__)


class SceneLifecycle:
    """Drives a SceneArtifact through its save and load phases.

    Save: ``prepare`` -> (document written) -> ``complete`` -> ``release``.
    Load: (document read) -> ``commit`` -> ``release``.

    Each artifact is used for exactly one operation; calling a phase out of
    order raises LifecycleError.
    """

    def __init__(self, settings: Optional[PersistenceSettings] = None) -> None:
        self.settings = settings or PersistenceSettings()

    def prepare(self, artifact: SceneArtifact) -> None:
        """Snapshot tuning records and encode the terrain into ``terrain_data``."""
        if artifact.phase not in (ArtifactPhase.NEW, ArtifactPhase.COMPLETED):
            raise LifecycleError(f"Cannot prepare an artifact in phase {artifact.phase.name}")
        scene = artifact.scene
        if scene is None:
            raise LifecycleError("Cannot prepare an artifact that was not built from a scene")

        artifact.water_data = WaterData.from_water(scene.water)
        artifact.foliage_data = FoliageData.from_foliage(scene.foliage)

        packed = pack(encode_grid(scene.terrain), self.settings)
        artifact.terrain_data = packed.text
        artifact.uncompressed_size = packed.uncompressed_size
        artifact.compressed_size = packed.compressed_size
        artifact.phase = ArtifactPhase.PREPARED
        logger.info(
            "Prepared scene '%s' (%s): terrain %d bytes, compressed %d bytes",
            artifact.name,
            artifact.uid,
            packed.uncompressed_size,
            packed.compressed_size,
        )

    def commit(self, artifact: SceneArtifact, catalog: AssetCatalog) -> Optional[Scene]:
        """Build a new Scene from a freshly read artifact.

        Returns None without touching terrain data when ``skip_terrain`` is set.
        On failure no scene is attached to the artifact and the error propagates.
        """
        if artifact.phase is not ArtifactPhase.NEW:
            raise LifecycleError(f"Cannot commit an artifact in phase {artifact.phase.name}")

        if artifact.skip_terrain:
            artifact.clear_terrain_data()
            artifact.phase = ArtifactPhase.SKIPPED
            logger.debug("Skipped terrain for scene '%s' (%s)", artifact.name, artifact.uid)
            return None

        try:
            if artifact.version != FORMAT_VERSION:
                raise VersionMismatchError(artifact.version, FORMAT_VERSION)
            scene = self._build_scene(artifact, catalog)
        except Exception:
            logger.error("Failed to load scene '%s' (%s)", artifact.name, artifact.uid)
            raise
        finally:
            artifact.clear_terrain_data()

        artifact.scene = scene
        artifact.phase = ArtifactPhase.LOADED
        logger.info("Loaded scene '%s' (%s) %dx%d", scene.name, scene.uid, scene.columns, scene.rows)
        return scene

    def complete(self, artifact: SceneArtifact) -> None:
        """Drop the terrain blob once the document writer has consumed it."""
        artifact.clear_terrain_data()
        if artifact.phase is ArtifactPhase.PREPARED:
            artifact.phase = ArtifactPhase.COMPLETED

    def release(self, artifact: SceneArtifact) -> None:
        """Drop all transient state. Safe to call in any phase, any number of times."""
        artifact.clear_terrain_data()
        artifact.scene = None
        artifact.uncompressed_size = 0
        artifact.compressed_size = 0
        artifact.phase = ArtifactPhase.RELEASED

    def _build_scene(self, artifact: SceneArtifact, catalog: AssetCatalog) -> Scene:
        scene = Scene(artifact.name, artifact.uid, artifact.columns, artifact.rows)
        scene.final_shader = artifact.final_shader
        scene.skybox_name = artifact.skybox
        scene.lights.ambient_color = artifact.ambient_color
        scene.sun_light.color = artifact.sun_light_color
        if artifact.water_data is not None:
            artifact.water_data.apply_to(scene.water)
        if artifact.foliage_data is not None:
            artifact.foliage_data.apply_to(scene.foliage)

        terrain = scene.terrain
        terrain.tileset = catalog.find_tileset(artifact.tileset_name)
        if terrain.tileset is None:
            raise UnresolvedReferenceError("tileset", artifact.tileset_name)
        terrain.foliage_set = catalog.find_foliage_set(artifact.foliage_name)
        if terrain.foliage_set is None:
            raise UnresolvedReferenceError("foliage set", artifact.foliage_name)

        unpacked = unpack_terrain(artifact.terrain_data or "", self.settings)
        artifact.uncompressed_size = unpacked.uncompressed_size
        artifact.compressed_size = unpacked.compressed_size
        decode_grid(unpacked.data, artifact.columns, artifact.rows, terrain)
        terrain.fill_empty_tiles_with_debug_tile()
        return scene

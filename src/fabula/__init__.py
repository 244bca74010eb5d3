"""
Fabula scene persistence.

Converts a tile-grid scene (terrain, lighting, water and foliage tuning) to a
versioned YAML/JSON document carrying a compressed binary terrain blob, and
back. See ``fabula.persistence`` for the format and ``fabula.world`` for the
scene model it reads and builds.
"""
__version__ = "0.3.0"

from .persistence import (
    FORMAT_VERSION,
    PersistenceError,
    ScenePersister,
    SceneStore,
)
from .settings import PersistenceSettings, load_settings
from .world import AssetCatalog, Scene

__all__ = [
    "__version__",
    "FORMAT_VERSION",
    "PersistenceError",
    "ScenePersister",
    "SceneStore",
    "PersistenceSettings",
    "load_settings",
    "AssetCatalog",
    "Scene",
]

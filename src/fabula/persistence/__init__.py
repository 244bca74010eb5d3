"""Scene persistence for Fabula.

This package provides:
- A fixed-layout binary codec for terrain tiles and the row-major tile stream
- Deflate + base64 transport of the tile stream inside a text document
- The versioned SceneArtifact and the lifecycle that saves/loads it
- YAML/JSON scene documents validated against a JSON schema
- A ScenePersister facade and a file-backed SceneStore

The format is all-or-nothing versioned: documents whose version differs from
FORMAT_VERSION are rejected, never migrated.
"""

from .artifact import FORMAT_VERSION, ArtifactPhase, FoliageData, SceneArtifact, WaterData
from .document import read_document, read_scene_text, write_document
from .errors import (
    DecodeCorruptionError,
    DocumentError,
    LifecycleError,
    PersistenceError,
    PreconditionViolationError,
    SceneNotFoundError,
    UnresolvedReferenceError,
    VersionMismatchError,
)
from .grid_codec import decode_grid, encode_grid
from .lifecycle import SceneLifecycle
from .persister import LoadResult, SaveResult, ScenePersister
from .store import SceneStore, SceneSummary
from .tile_codec import decode_tile, encode_tile
from .transport import PackedTerrain, UnpackedTerrain, pack, unpack, unpack_terrain

__all__ = [
    "FORMAT_VERSION",
    "ArtifactPhase",
    "FoliageData",
    "SceneArtifact",
    "WaterData",
    "read_document",
    "read_scene_text",
    "write_document",
    "DecodeCorruptionError",
    "DocumentError",
    "LifecycleError",
    "PersistenceError",
    "PreconditionViolationError",
    "SceneNotFoundError",
    "UnresolvedReferenceError",
    "VersionMismatchError",
    "decode_grid",
    "encode_grid",
    "SceneLifecycle",
    "LoadResult",
    "SaveResult",
    "ScenePersister",
    "SceneStore",
    "SceneSummary",
    "decode_tile",
    "encode_tile",
    "PackedTerrain",
    "UnpackedTerrain",
    "pack",
    "unpack",
    "unpack_terrain",
]

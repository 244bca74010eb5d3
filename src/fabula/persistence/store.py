from __future__ import annotations

import logging
import os
import tempfile
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..settings import PersistenceSettings
from ..world import AssetCatalog, Scene
from .document import read_scene_text
from .errors import PersistenceError, SceneNotFoundError
from .paths import default_scenes_root, ensure_dir
from .persister import SaveResult, ScenePersister

logger = logging.getLogger(__name__)

SUFFIXES = {"yaml": ".scene.yaml", "json": ".scene.json"}


@dataclass(frozen=True)
class SceneSummary:
    uid: str
    name: str
    columns: int
    rows: int
    path: Path


class SceneStore:
    """Directory of scene files, one file per scene named after its uid.

    Writes are atomic (temp file + replace) so a crash never leaves a half
    written scene behind. Access through one store is serialized with a lock.
    """

    def __init__(
        self,
        catalog: AssetCatalog,
        root_dir: Optional[Path] = None,
        settings: Optional[PersistenceSettings] = None,
    ) -> None:
        self.settings = settings or PersistenceSettings()
        self.root_dir = ensure_dir(root_dir or self.settings.scenes_dir or default_scenes_root())
        self.persister = ScenePersister(catalog, self.settings)
        self.lock = threading.RLock()

    # Public API

    def path_for(self, uid: str) -> Path:
        if not uid or "/" in uid or "\\" in uid or uid in (".", ".."):
            raise PersistenceError(f"Invalid scene uid for a file name: {uid!r}")
        return self.root_dir / f"{uid}{SUFFIXES[self.settings.document_format]}"

    def save(self, scene: Scene) -> Path:
        with self.lock:
            path = self.path_for(scene.uid)
            result: SaveResult = self.persister.save(scene, self.settings.document_format)
            self._atomic_write(path, result.text)
            logger.info(
                "Saved scene '%s' to %s (terrain %d -> %d bytes)",
                scene.uid,
                path,
                result.uncompressed_size,
                result.compressed_size,
            )
            return path

    def load(self, uid: str) -> Scene:
        with self.lock:
            path = self._existing_path(uid)
            result = self.persister.load(read_scene_text(path), self._format_of(path))
            if result.scene is None:
                raise PersistenceError(f"Scene '{uid}' loaded without terrain")
            return result.scene

    def exists(self, uid: str) -> bool:
        return any((self.root_dir / f"{uid}{suffix}").exists() for suffix in SUFFIXES.values())

    def delete(self, uid: str) -> None:
        with self.lock:
            path = self._existing_path(uid)
            path.unlink()
            logger.info("Deleted scene '%s' (%s)", uid, path)

    def list_scenes(self) -> List[SceneSummary]:
        """Summaries of every readable scene file; terrain data is not decoded."""
        summaries: List[SceneSummary] = []
        with self.lock:
            for path in self._scene_files():
                try:
                    header = self.persister.read_header(read_scene_text(path), self._format_of(path))
                except (OSError, PersistenceError) as e:
                    logger.warning("Skipping unreadable scene file %s: %s", path, e)
                    continue
                summaries.append(SceneSummary(header.uid, header.name, header.columns, header.rows, path))
        return summaries

    # Internal utilities

    def _scene_files(self) -> List[Path]:
        files: List[Path] = []
        for suffix in SUFFIXES.values():
            files.extend(self.root_dir.glob(f"*{suffix}"))
        return sorted(files)

    def _existing_path(self, uid: str) -> Path:
        preferred = self.path_for(uid)
        if preferred.exists():
            return preferred
        for suffix in SUFFIXES.values():
            candidate = self.root_dir / f"{uid}{suffix}"
            if candidate.exists():
                return candidate
        raise SceneNotFoundError(f"Scene '{uid}' not found in {self.root_dir}")

    @staticmethod
    def _format_of(path: Path) -> str:
        for fmt, suffix in SUFFIXES.items():
            if path.name.endswith(suffix):
                return fmt
        raise PersistenceError(f"Not a scene file: {path}")

    def _atomic_write(self, path: Path, text: str) -> None:
        """Write text to a temp file in the same directory, fsync, then replace ``path``."""
        fd, tmp_name = tempfile.mkstemp(prefix=path.name, suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        finally:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)

from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import PlatformDirs

logger = logging.getLogger(__name__)

APP_NAME = "Fabula"

# Environment variable override (useful for tests and tooling)
ENV_SCENES_DIR = "FABULA_SCENES_DIR"


def default_scenes_root() -> Path:
    """Return the directory scenes are stored in.

    ``FABULA_SCENES_DIR`` wins when set; otherwise a ``scenes`` folder under the
    platform user data dir (e.g. ~/.local/share/Fabula/scenes on Linux).
    """
    override = os.getenv(ENV_SCENES_DIR)
    if override:
        return Path(override).expanduser().resolve()
    dirs = PlatformDirs(appname=APP_NAME, appauthor=False)
    return Path(dirs.user_data_dir) / "scenes"


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path

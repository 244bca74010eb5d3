from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .autotiles import AutoTile, AutoTiles, AutoTileType

logger = logging.getLogger(__name__)


class Tileset:
    """Named collection of auto-tile families used by a terrain.

    Lookups return ``None`` for unknown names; callers decide whether that is
    fatal.
    """

    def __init__(self, name: str, families: Iterable[AutoTiles] = (), debug_family: Optional[str] = None) -> None:
        self.name = name
        self._families: Dict[str, AutoTiles] = {}
        for family in families:
            self.add(family)
        self._debug_family = debug_family

    def add(self, family: AutoTiles) -> None:
        if family.name in self._families:
            raise ValueError(f"Duplicate auto-tile family '{family.name}' in tileset '{self.name}'")
        self._families[family.name] = family

    def get_auto_tiles(self, name: str) -> Optional[AutoTiles]:
        return self._families.get(name)

    @property
    def family_names(self) -> List[str]:
        return list(self._families)

    def debug_auto_tile(self) -> Optional[AutoTile]:
        """Auto-tile placed on cells that terrain data never filled in.

        Uses the configured debug family, otherwise the first registered one.
        """
        name = self._debug_family or next(iter(self._families), None)
        if name is None:
            return None
        family = self._families.get(name)
        if family is None:
            logger.warning("Debug family '%s' is not part of tileset '%s'", name, self.name)
            return None
        return family.get_auto_tile(AutoTileType.INNER_REPEATING)

    def __repr__(self) -> str:
        return f"Tileset({self.name!r}, families={self.family_names})"

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .foliage import FoliageSet
from .tileset import Tileset


class AssetCatalog:
    """Registry of tilesets and foliage sets, looked up by name.

    Passed explicitly into loading code; it is only read while a scene loads.
    """

    def __init__(self, tilesets: Iterable[Tileset] = (), foliage_sets: Iterable[FoliageSet] = ()) -> None:
        self._tilesets: Dict[str, Tileset] = {}
        self._foliage_sets: Dict[str, FoliageSet] = {}
        for tileset in tilesets:
            self.register_tileset(tileset)
        for foliage_set in foliage_sets:
            self.register_foliage_set(foliage_set)

    def register_tileset(self, tileset: Tileset) -> None:
        self._tilesets[tileset.name] = tileset

    def register_foliage_set(self, foliage_set: FoliageSet) -> None:
        self._foliage_sets[foliage_set.name] = foliage_set

    def find_tileset(self, name: str) -> Optional[Tileset]:
        return self._tilesets.get(name)

    def find_foliage_set(self, name: str) -> Optional[FoliageSet]:
        return self._foliage_sets.get(name)

    @property
    def tileset_names(self) -> List[str]:
        return sorted(self._tilesets)

    @property
    def foliage_set_names(self) -> List[str]:
        return sorted(self._foliage_sets)

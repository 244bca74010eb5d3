from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from .foliage import FoliageSet
from .tile import Tile
from .tileset import Tileset

logger = logging.getLogger(__name__)

DEBUG_TILE_GID = -1


class Terrain:
    """
    The columns x rows tile grid of a scene. Owns every Tile it holds; tiles are
    indexed by (x, z) and stored row-major with z as the outer index. All tile
    access is bounds-checked.
    """

    def __init__(self, columns: int, rows: int) -> None:
        if columns < 0 or rows < 0:
            raise ValueError(f"Terrain dimensions must be non-negative, got {columns}x{rows}")
        self.columns = columns
        self.rows = rows
        self._tiles: List[List[Optional[Tile]]] = [[None for _ in range(columns)] for _ in range(rows)]
        self.tileset: Optional[Tileset] = None
        self.foliage_set: Optional[FoliageSet] = None

    # ---- Safety / Bounds -------------------------------------------------
    def in_bounds(self, x: int, z: int) -> bool:
        return 0 <= x < self.columns and 0 <= z < self.rows

    def _check_bounds(self, x: int, z: int) -> None:
        if not self.in_bounds(x, z):
            raise IndexError(f"Tile out of bounds: ({x},{z}) not in [0,{self.columns})x[0,{self.rows})")

    def get_tile(self, x: int, z: int) -> Optional[Tile]:
        self._check_bounds(x, z)
        return self._tiles[z][x]

    def set_tile(self, x: int, z: int, tile: Tile) -> None:
        self._check_bounds(x, z)
        if (tile.x, tile.z) != (x, z):
            raise ValueError(f"Tile at ({tile.x},{tile.z}) cannot be placed in cell ({x},{z})")
        self._tiles[z][x] = tile

    # ---- Query -----------------------------------------------------------
    def tiles(self) -> Iterator[Tile]:
        """Yield every populated tile in storage order (z outer, x inner)."""
        for row in self._tiles:
            for tile in row:
                if tile is not None:
                    yield tile

    def empty_cells(self) -> int:
        return sum(1 for row in self._tiles for tile in row if tile is None)

    def fill_empty_tiles_with_debug_tile(self) -> int:
        """Put a debug tile into every cell that holds no tile. Returns the count."""
        auto_tile = self.tileset.debug_auto_tile() if self.tileset is not None else None
        filled = 0
        for z in range(self.rows):
            for x in range(self.columns):
                if self._tiles[z][x] is None:
                    self._tiles[z][x] = Tile(x=x, z=z, gid=DEBUG_TILE_GID, auto_tile=auto_tile, passable=False)
                    filled += 1
        if filled:
            logger.warning("Filled %d empty terrain cell(s) with the debug tile", filled)
        return filled

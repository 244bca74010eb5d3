from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Optional, Tuple

from .autotiles import AutoTile, AutoTileType
from .foliage import FoliageDescriptor

_FLOAT32 = struct.Struct(">f")

# Stored as 32-bit floats in the tile stream
FLOAT32_FIELDS = frozenset({"y", "y1", "y2", "y3", "y4", "liquid_height"})


def to_float32(value: float) -> float:
    try:
        return _FLOAT32.unpack(_FLOAT32.pack(value))[0]
    except OverflowError as e:
        raise ValueError(f"{value!r} is outside the 32-bit float range") from e


@dataclass
class Tile:
    """One terrain cell.

    ``y`` is the base height; ``y1``..``y4`` are the corner heights. The tile's
    world y coordinate is derived from them, so only x and z are stored as
    coordinates.

    Heights and ``liquid_height`` are rounded to 32-bit precision on assignment
    so a tile compares equal to its decoded copy.
    """

    x: int
    z: int
    gid: int = 0
    y: float = 0.0
    y1: float = 0.0
    y2: float = 0.0
    y3: float = 0.0
    y4: float = 0.0
    auto_tile: Optional[AutoTile] = None
    passable: bool = True
    liquid: bool = False
    liquid_height: float = 0.0
    foliage: Optional[FoliageDescriptor] = None

    def __setattr__(self, name, value):
        if name in FLOAT32_FIELDS:
            value = to_float32(value)
        super().__setattr__(name, value)

    @property
    def heights(self) -> Tuple[float, float, float, float, float]:
        return (self.y, self.y1, self.y2, self.y3, self.y4)

    def set_heights(self, y: float, y1: float, y2: float, y3: float, y4: float) -> None:
        self.y, self.y1, self.y2, self.y3, self.y4 = y, y1, y2, y3, y4

    @property
    def auto_type(self) -> Optional[AutoTileType]:
        return self.auto_tile.type if self.auto_tile is not None else None

    @property
    def has_foliage(self) -> bool:
        return self.foliage is not None

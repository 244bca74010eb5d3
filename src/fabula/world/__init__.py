"""World model consumed and produced by scene persistence.

Only the parts persistence touches are modelled: the terrain grid and its
tiles, lighting colors, water and foliage tuning, and the asset catalogs that
named references resolve against.
"""
from .autotiles import AutoTile, AutoTiles, AutoTileType
from .catalog import AssetCatalog
from .foliage import Foliage, FoliageDescriptor, FoliageSet
from .scene import Lights, Scene, SunLight
from .terrain import DEBUG_TILE_GID, Terrain
from .tile import Tile
from .tileset import Tileset
from .water import Water

__all__ = [
    "AutoTile",
    "AutoTiles",
    "AutoTileType",
    "AssetCatalog",
    "Foliage",
    "FoliageDescriptor",
    "FoliageSet",
    "Lights",
    "Scene",
    "SunLight",
    "DEBUG_TILE_GID",
    "Terrain",
    "Tile",
    "Tileset",
    "Water",
]

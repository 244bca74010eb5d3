from __future__ import annotations

from ..world import AutoTileType, Terrain, Tile
from .binary import BinaryReader, BinaryWriter
from .errors import PreconditionViolationError, UnresolvedReferenceError

NO_FOLIAGE = ""


def encode_tile(writer: BinaryWriter, tile: Tile) -> None:
    """Append one tile's fixed-layout record to ``writer``.

    Record: gid, five heights, auto-tile family, variant ordinal, passable,
    liquid, liquid height, foliage region (empty string when none).
    """
    if tile.auto_tile is None:
        raise PreconditionViolationError(f"Tile ({tile.x},{tile.z}) has no auto-tile assigned")

    writer.write_int(tile.gid)
    for height in tile.heights:
        writer.write_float(height)
    writer.write_utf(tile.auto_tile.family)
    writer.write_int(tile.auto_tile.type.ordinal)
    writer.write_bool(tile.passable)
    writer.write_bool(tile.liquid)
    writer.write_float(tile.liquid_height)
    writer.write_utf(tile.foliage.region_name if tile.foliage is not None else NO_FOLIAGE)


def decode_tile(reader: BinaryReader, x: int, z: int, terrain: Terrain) -> Tile:
    """Read one tile record and resolve its references against ``terrain``'s tileset and foliage set."""
    tile = Tile(x=x, z=z)
    tile.gid = reader.read_int()
    tile.set_heights(
        reader.read_float(),
        reader.read_float(),
        reader.read_float(),
        reader.read_float(),
        reader.read_float(),
    )
    family_name = reader.read_utf()
    ordinal = reader.read_int()
    tile.passable = reader.read_bool()
    tile.liquid = reader.read_bool()
    tile.liquid_height = reader.read_float()
    region_name = reader.read_utf()

    tileset = terrain.tileset
    if tileset is None:
        raise UnresolvedReferenceError("tileset", "", "terrain has no tileset bound")
    family = tileset.get_auto_tiles(family_name)
    if family is None:
        raise UnresolvedReferenceError("auto-tile family", family_name, f"tile ({x},{z}), tileset '{tileset.name}'")
    auto_type = AutoTileType.from_ordinal(ordinal)
    if auto_type is None:
        raise UnresolvedReferenceError("auto-tile variant", str(ordinal), f"tile ({x},{z})")
    tile.auto_tile = family.get_auto_tile(auto_type)

    if region_name != NO_FOLIAGE:
        foliage_set = terrain.foliage_set
        descriptor = foliage_set.find_descriptor(region_name) if foliage_set is not None else None
        if descriptor is None:
            set_name = foliage_set.name if foliage_set is not None else "<none>"
            raise UnresolvedReferenceError("foliage region", region_name, f"tile ({x},{z}), foliage set '{set_name}'")
        tile.foliage = descriptor
    return tile

from __future__ import annotations

import logging

from ..world import Terrain
from .binary import BinaryReader, BinaryWriter
from .errors import DecodeCorruptionError, PreconditionViolationError
from .tile_codec import decode_tile, encode_tile

logger = logging.getLogger(__name__)


def encode_grid(terrain: Terrain) -> bytes:
    """Serialize every tile, rows (z) outer and columns (x) inner.

    The iteration order is not recorded in the stream; decode_grid must use the
    same order.
    """
    writer = BinaryWriter()
    for z in range(terrain.rows):
        for x in range(terrain.columns):
            tile = terrain.get_tile(x, z)
            if tile is None:
                raise PreconditionViolationError(f"Terrain cell ({x},{z}) holds no tile")
            encode_tile(writer, tile)
    logger.debug("Encoded %dx%d terrain into %d bytes", terrain.columns, terrain.rows, writer.size)
    return writer.getvalue()


def decode_grid(data: bytes, columns: int, rows: int, terrain: Terrain) -> None:
    """Populate ``terrain`` in place from a tile stream of columns x rows records."""
    if (terrain.columns, terrain.rows) != (columns, rows):
        raise DecodeCorruptionError(
            f"Terrain is {terrain.columns}x{terrain.rows} but data describes {columns}x{rows}"
        )
    reader = BinaryReader(data)
    for z in range(rows):
        for x in range(columns):
            terrain.set_tile(x, z, decode_tile(reader, x, z, terrain))
    if reader.remaining:
        raise DecodeCorruptionError(
            f"{reader.remaining} unexpected trailing byte(s) after {columns * rows} tiles"
        )
    logger.debug("Decoded %d tiles from %d bytes", columns * rows, reader.position)
